from enum import Enum


class SubscriberStatus(str, Enum):
    """Subscriber lifecycle: PENDING -> ACTIVE -> REMOVED (terminal)"""

    PENDING = 'pending'
    ACTIVE = 'active'
    REMOVED = 'removed'


class SubscriberRemovalReason(str, Enum):
    COMPLETION = 'completion'
    TIMEOUT = 'timeout'
    ERROR = 'error'
    DELIVERY_FAILED = 'delivery_failed'
