"""
SATIM Session
Holds the response of a single confirmOrder / getOrderStatus call.
"""

from typing import Any, Mapping, Optional

from satim.exceptions import (
    SatimInvalidResponseException,
    SatimResponseAlreadyRecordedException,
)
from satim.status import SatimStatusChecker
from satim.utils import get_logger, mask_order_id, parse_response_data


class SatimSession:
    """
    A payment session for one SATIM order.

    The gateway client records the decoded response once; status checks are
    then answered by the composed SatimStatusChecker.
    """

    def __init__(self, order_id: Optional[str] = None,
                 messages: Optional[Mapping[str, str]] = None):
        self.order_id = order_id
        self._messages = messages
        self._checker = SatimStatusChecker(None, messages=messages)
        self._recorded = False

    @property
    def checker(self) -> SatimStatusChecker:
        return self._checker

    def has_response(self) -> bool:
        return self._recorded

    def record_response(self, response_data: Any) -> SatimStatusChecker:
        """
        Record the gateway response for this session.

        Args:
            response_data: Decoded response mapping, or the raw JSON body

        Returns:
            The status checker for the recorded response

        Raises:
            SatimResponseAlreadyRecordedException: If a response was already recorded
            SatimInvalidResponseException: If the payload is not a JSON object
        """
        logger = get_logger(__name__)

        if self._recorded:
            logger.error(f"SATIM response already recorded for order {mask_order_id(self.order_id)}")
            raise SatimResponseAlreadyRecordedException(
                f"A response was already recorded for order {mask_order_id(self.order_id)}"
            )

        if isinstance(response_data, Mapping):
            payload = dict(response_data)
        elif isinstance(response_data, (str, bytes)):
            payload = parse_response_data(response_data)
        else:
            raise SatimInvalidResponseException(
                f"Unsupported SATIM response type: {type(response_data).__name__}",
                gateway_response={'raw': str(response_data)}
            )

        if self.order_id is None:
            self.order_id = payload.get('orderId') or payload.get('OrderId')

        self._checker = SatimStatusChecker(payload, messages=self._messages)
        self._recorded = True

        logger.info({
            "order_id": mask_order_id(self.order_id),
            "order_status": payload.get('OrderStatus'),
            "error_code": payload.get('ErrorCode'),
            "action_code": payload.get('actionCode'),
        })
        return self._checker

    # Shortcuts to the status checker

    def get_confirm_payment_data(self) -> Mapping[str, Any]:
        return self._checker.get_confirm_payment_data()

    def is_successful(self) -> bool:
        return self._checker.is_successful()

    def is_failed(self) -> bool:
        return self._checker.is_failed()

    def is_rejected(self) -> bool:
        return self._checker.is_rejected()

    def is_refunded(self) -> bool:
        return self._checker.is_refunded()

    def is_cancelled(self) -> bool:
        return self._checker.is_cancelled()

    def is_expired(self) -> bool:
        return self._checker.is_expired()

    def get_success_message(self) -> str:
        return self._checker.get_success_message()

    def get_error_message(self) -> str:
        return self._checker.get_error_message()
