"""Order lifecycle: statuses, watched transitions and edge detection."""

from order_push.lifecycle.status import (
    CART_OUT_FOR_DELIVERY,
    CART_READY_TO_SHIP,
    CART_REJECTED,
    WATCHED_TRANSITIONS,
    OrderStatus,
    WatchedTransition,
    is_lifecycle_transition,
)
from order_push.lifecycle.transitions import (
    decode_snapshot,
    detect,
    detect_watched,
    is_expected_change,
    status_change,
)

__all__ = [
    "CART_OUT_FOR_DELIVERY",
    "CART_READY_TO_SHIP",
    "CART_REJECTED",
    "WATCHED_TRANSITIONS",
    "OrderStatus",
    "WatchedTransition",
    "decode_snapshot",
    "detect",
    "detect_watched",
    "is_expected_change",
    "is_lifecycle_transition",
    "status_change",
]
