"""Pytest fixtures with SATIM gateway responses."""

import pytest
from flask import Flask


@pytest.fixture
def confirmed_response():
    """confirmOrder response for an authorized payment."""
    return {
        "expiration": "202701",
        "cardholderName": "TEST CARD",
        "depositAmount": 150000,
        "currency": "012",
        "approvalCode": "123456",
        "authCode": 2,
        "params": {
            "respCode": "00",
            "udf1": "2018105301346",
            "respCode_desc": "Votre paiement a été accepté",
        },
        "actionCode": 0,
        "actionCodeDescription": "Votre paiement a été accepté",
        "ErrorCode": "0",
        "ErrorMessage": "Success",
        "OrderStatus": 2,
        "OrderNumber": "1538298192",
        "Pan": "628058**1011",
        "Amount": 150000,
        "Ip": "10.12.12.14",
    }


@pytest.fixture
def rejected_response():
    """confirmOrder response for a transaction the issuer rejected."""
    return {
        "params": {
            "respCode": "00",
            "respCode_desc": "Transaction refusée",
        },
        "actionCode": 0,
        "actionCodeDescription": "Transaction refusée",
        "ErrorCode": "0",
        "OrderStatus": "3",
        "OrderNumber": "1538298193",
    }


@pytest.fixture
def flask_app():
    app = Flask(__name__)
    app.config['TESTING'] = True
    return app
