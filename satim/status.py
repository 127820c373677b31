"""
SATIM Status Checker
Interprets the response of a SATIM confirmOrder / getOrderStatus request.
"""

from typing import Dict, Any, Mapping, Optional

from satim.config import SatimConfig
from satim.constants import (
    SUCCESSFUL_ORDER_STATUSES,
    ORDER_STATUS_AUTHORIZATION_CANCELLED,
    ORDER_STATUS_REFUNDED,
    ORDER_STATUS_LABELS,
    UNKNOWN_ORDER_STATUS_LABEL,
    ERROR_CODE_NONE,
    RESP_CODE_APPROVED,
    ACTION_CODE_CANCELLED,
    ACTION_CODE_EXPIRED,
    REJECTED_MESSAGE,
)
from satim.exceptions import SatimDataUnavailableException
from satim.utils import code_matches, freeze_mapping, get_logger, normalize_code


class SatimStatusChecker:
    """
    Read-only view over a fetched SATIM response.

    Every predicate and message accessor raises SatimDataUnavailableException
    when no response was given. Missing or malformed fields never raise; they
    make predicates False and messages fall back to the configured defaults.
    """

    def __init__(self, response_data: Optional[Mapping[str, Any]] = None,
                 messages: Optional[Mapping[str, str]] = None):
        """
        Args:
            response_data: Decoded gateway response, or None if nothing was fetched yet
            messages: Optional overrides for the 'success', 'failure' and
                'refund' messages
        """
        if response_data is None:
            self._data = None
        else:
            self._data = freeze_mapping(response_data)

        self._messages = SatimConfig.get_messages()
        if messages:
            self._messages.update(messages)

    def require_data(self):
        """
        Check that response data is available before any status check.

        Raises:
            SatimDataUnavailableException: If no response has been fetched
        """
        if self._data is None:
            get_logger(__name__).warning('SATIM status checked before any response was fetched')
            raise SatimDataUnavailableException()

    def get_confirm_payment_data(self) -> Mapping[str, Any]:
        """Get the response data from the last request."""
        self.require_data()
        return self._data

    # Field access

    def _code(self, key: str) -> Optional[str]:
        return normalize_code(self._data.get(key))

    def _code_is(self, key: str, *expected: str) -> bool:
        return code_matches(self._data.get(key), *expected)

    def _param(self, key: str) -> Any:
        params = self._data.get('params')
        if not isinstance(params, Mapping):
            return None
        return params.get(key)

    def _description(self) -> Optional[str]:
        description = self._param('respCode_desc')
        if description is None:
            description = self._data.get('actionCodeDescription')
        return description

    # Predicates

    def is_successful(self) -> bool:
        """Check if the transaction was successful."""
        self.require_data()
        return self._code_is('OrderStatus', *SUCCESSFUL_ORDER_STATUSES)

    def is_failed(self) -> bool:
        """
        Check if the transaction failed.

        This is strictly the negation of is_successful(), so refunded,
        cancelled and expired transactions are failed too.
        """
        self.require_data()
        return not self.is_successful()

    def is_rejected(self) -> bool:
        """Check if the transaction was rejected."""
        self.require_data()
        return (
            code_matches(self._param('respCode'), RESP_CODE_APPROVED)
            and self._code_is('ErrorCode', ERROR_CODE_NONE)
            and self._code_is('OrderStatus', ORDER_STATUS_AUTHORIZATION_CANCELLED)
        )

    def is_refunded(self) -> bool:
        """Check if the transaction was refunded."""
        self.require_data()
        return self._code_is('OrderStatus', ORDER_STATUS_REFUNDED)

    def is_cancelled(self) -> bool:
        """Check if the transaction was cancelled."""
        self.require_data()
        return self._code_is('actionCode', ACTION_CODE_CANCELLED)

    def is_expired(self) -> bool:
        """Check if the transaction expired."""
        self.require_data()
        return self._code_is('actionCode', ACTION_CODE_EXPIRED)

    # Messages

    def get_success_message(self) -> str:
        """Get the order status success message."""
        self.require_data()
        description = self._description()
        if description is None:
            return self._messages['success']
        return str(description)

    def get_error_message(self) -> str:
        """Get the order status error message."""
        if self.is_rejected():
            return REJECTED_MESSAGE

        if self.is_refunded():
            return self._messages['refund']

        description = self._description()
        if description is None:
            return self._messages['failure']
        return str(description)

    def get_order_status_label(self) -> str:
        """Get a display label for the OrderStatus code."""
        self.require_data()
        for code, label in ORDER_STATUS_LABELS.items():
            if self._code_is('OrderStatus', code):
                return label
        return UNKNOWN_ORDER_STATUS_LABEL

    def to_dict(self) -> Dict[str, Any]:
        """
        Summarize the response.

        Returns:
            Dictionary with the status flags and the message to show the customer
        """
        successful = self.is_successful()
        return {
            'success': successful,
            'status': self._code('OrderStatus'),
            'status_label': self.get_order_status_label(),
            'rejected': self.is_rejected(),
            'refunded': self.is_refunded(),
            'cancelled': self.is_cancelled(),
            'expired': self.is_expired(),
            'message': self.get_success_message() if successful else self.get_error_message(),
            'order_number': self._data.get('OrderNumber'),
        }
