"""
SATIM Exceptions
Custom exceptions for SATIM response interpretation.
"""


class SatimException(Exception):
    """Base exception for SATIM-related errors."""
    pass


class SatimDataUnavailableException(SatimException):
    """Exception raised when a status check runs before any response was fetched."""

    default_message = 'No data available: call confirmOrder() or getOrderStatus() first.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class SatimInvalidResponseException(SatimException):
    """Exception raised when the gateway payload is not a JSON object."""
    def __init__(self, message, gateway_response=None):
        super().__init__(message)
        self.gateway_response = gateway_response


class SatimResponseAlreadyRecordedException(SatimException):
    """Exception raised when a session receives a second gateway response."""
    pass
