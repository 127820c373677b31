import logging

import pytest

from satim.exceptions import SatimInvalidResponseException
from satim.utils import (
    code_matches,
    freeze_mapping,
    get_logger,
    mask_order_id,
    normalize_code,
    parse_response_data,
)


@pytest.mark.parametrize("value, expected", [
    ("2", "2"),
    (2, "2"),
    (-2007, "-2007"),
    ("00", "00"),
    (4.0, "4"),
    (None, None),
    (True, None),
    ({"code": 1}, None),
])
def test_normalize_code(value, expected):
    assert normalize_code(value) == expected


@pytest.mark.parametrize("value, expected, result", [
    (0, "00", True),
    ("0", "00", True),
    ("00", "00", True),
    (-2007, "-2007", True),
    ("-2007", "2007", False),
    ("10", "1", False),
    ("abc", "abc", True),
    ("abc", "00", False),
    ("nan", "nan", True),
    ("inf", "00", False),
    (None, "0", False),
    (False, "0", False),
])
def test_code_matches(value, expected, result):
    assert code_matches(value, expected) is result


def test_code_matches_any_expected():
    assert code_matches("0", "2", "0") is True
    assert code_matches("3", "2", "0") is False


def test_freeze_mapping_is_deep():
    source = {"params": {"respCode": "00", "extra": [{"k": "v"}]}}
    frozen = freeze_mapping(source)

    with pytest.raises(TypeError):
        frozen["params"]["respCode"] = "05"
    with pytest.raises(TypeError):
        frozen["params"]["extra"][0]["k"] = "w"

    source["params"]["respCode"] = "05"
    assert frozen["params"]["respCode"] == "00"
    assert frozen["params"]["extra"] == ({"k": "v"},)


def test_parse_response_data():
    assert parse_response_data('{"OrderStatus": 2}') == {"OrderStatus": 2}
    assert parse_response_data(b'{"ErrorCode": "0"}') == {"ErrorCode": "0"}
    assert parse_response_data({"actionCode": 10}) == {"actionCode": 10}
    assert parse_response_data('{"raw": "x"}') == {"raw": "x"}


@pytest.mark.parametrize("payload", ["not json", "[1]", "42", 42])
def test_parse_response_data_rejects_non_objects(payload):
    with pytest.raises(SatimInvalidResponseException) as exc_info:
        parse_response_data(payload)
    assert 'raw' in exc_info.value.gateway_response


def test_mask_order_id():
    assert mask_order_id("Gfq4R8Yt2bJk0aZs") == "Gfq4****0aZs"
    assert mask_order_id("12345678") == "12345678"
    assert mask_order_id(None) == ""


def test_get_logger_outside_flask():
    logger = get_logger("satim.tests")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "satim.tests"


def test_get_logger_leaves_levels_alone():
    logger = logging.getLogger("satim.tests.levels")
    logger.setLevel(logging.ERROR)
    try:
        assert get_logger("satim.tests.levels").level == logging.ERROR
    finally:
        logger.setLevel(logging.NOTSET)


def test_get_logger_inside_flask(flask_app):
    with flask_app.app_context():
        assert get_logger("satim.tests") is flask_app.logger
