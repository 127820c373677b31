"""
SATIM Gateway Constants
Response codes returned by confirmOrder / getOrderStatus and the messages shown for them.
"""

# OrderStatus codes
ORDER_STATUS_REGISTERED = '0'
ORDER_STATUS_PREAUTHORIZED = '1'
ORDER_STATUS_AUTHORIZED = '2'
ORDER_STATUS_AUTHORIZATION_CANCELLED = '3'
ORDER_STATUS_REFUNDED = '4'
ORDER_STATUS_ACS_INITIATED = '5'
ORDER_STATUS_DECLINED = '6'

SUCCESSFUL_ORDER_STATUSES = (ORDER_STATUS_AUTHORIZED, ORDER_STATUS_REGISTERED)

ORDER_STATUS_LABELS = {
    ORDER_STATUS_REGISTERED: 'Registered, not paid',
    ORDER_STATUS_PREAUTHORIZED: 'Pre-authorized',
    ORDER_STATUS_AUTHORIZED: 'Authorized',
    ORDER_STATUS_AUTHORIZATION_CANCELLED: 'Authorization cancelled',
    ORDER_STATUS_REFUNDED: 'Refunded',
    ORDER_STATUS_ACS_INITIATED: 'ACS authorization initiated',
    ORDER_STATUS_DECLINED: 'Declined',
}

UNKNOWN_ORDER_STATUS_LABEL = 'Unknown'

# ErrorCode / params.respCode
ERROR_CODE_NONE = '0'
RESP_CODE_APPROVED = '00'

# actionCode
ACTION_CODE_CANCELLED = '10'
ACTION_CODE_EXPIRED = '-2007'

DEFAULT_SUCCESS_MESSAGE = 'Payment was successful'
DEFAULT_FAILURE_MESSAGE = 'Payment failed'
DEFAULT_REFUND_MESSAGE = 'Payment was refunded'
# Shown for every rejected transaction, whatever the gateway description says
REJECTED_MESSAGE = (
    '« Votre transaction a été rejetée/ Your transaction was rejected/ تم رفض معاملتك »'
)
