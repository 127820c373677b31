"""
SATIM Utilities
Helper functions for handling gateway responses.
"""

import copy
import json
import logging
import math
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from flask import current_app, has_app_context

from .config import SatimConfig
from .exceptions import SatimInvalidResponseException


def configure_logging():
    """Apply SATIM_LOG_LEVEL to the package logger."""
    logging.getLogger('satim').setLevel(getattr(logging, SatimConfig.LOG_LEVEL, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """
    Get the logger to report through.

    Inside a Flask application context this is the app logger, otherwise the
    module logger under the 'satim' package logger.
    """
    if has_app_context():
        return current_app.logger

    return logging.getLogger(name)


def normalize_code(value: Any) -> Optional[str]:
    """
    Normalize a gateway code to its string form.

    SATIM sends codes as JSON numbers on some endpoints and strings on others.

    Args:
        value: Raw code value

    Returns:
        The code as a string, or None when absent
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (str, int)):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return None


def _as_number(code: str) -> Optional[float]:
    try:
        number = float(code)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def code_matches(value: Any, *expected: str) -> bool:
    """
    Check a gateway code against one or more expected codes.

    Numeric codes compare by value, so 0, "0" and "00" are the same code.

    Args:
        value: Raw code value from the response
        expected: Codes to accept

    Returns:
        True if the code equals any of the expected codes
    """
    code = normalize_code(value)
    if code is None:
        return False

    number = _as_number(code)
    for candidate in expected:
        if code == candidate:
            return True
        if number is not None and number == _as_number(candidate):
            return True
    return False


def freeze_mapping(data: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Return a deep, read-only copy of a response mapping.

    Nested mappings become read-only mappings and lists become tuples.
    """
    return _freeze(copy.deepcopy(dict(data)))


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def parse_response_data(response_data: Any) -> Dict[str, Any]:
    """
    Parse a gateway response into a dictionary.

    Args:
        response_data: Raw response (dict, JSON text or bytes)

    Returns:
        Parsed response dictionary

    Raises:
        SatimInvalidResponseException: If the response is not a JSON object
    """
    if isinstance(response_data, bytes):
        response_data = response_data.decode('utf-8', errors='replace')

    if isinstance(response_data, str):
        try:
            response_data = json.loads(response_data)
        except json.JSONDecodeError:
            raise SatimInvalidResponseException(
                "SATIM response is not valid JSON",
                gateway_response={'raw': response_data}
            )

    if isinstance(response_data, dict):
        return response_data

    raise SatimInvalidResponseException(
        f"SATIM response is not a JSON object: {type(response_data).__name__}",
        gateway_response={'raw': str(response_data)}
    )


def mask_order_id(order_id: Any) -> str:
    """
    Mask an order id for logs (show only first and last few characters).

    Args:
        order_id: Gateway order id

    Returns:
        Masked order id string
    """
    if order_id is None:
        return ''
    order_id = str(order_id)
    if len(order_id) <= 8:
        return order_id

    return f"{order_id[:4]}****{order_id[-4:]}"


configure_logging()
