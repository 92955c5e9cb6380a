"""Order status vocabulary and the informal lifecycle it follows.

Lifecycle:
    CREATED → PENDING → REJECTED
    CREATED → PENDING → READY_TO_SHIP → EN_ROUTE → DELIVERED

Records are owned by the storefront, which has written some statuses with
their original French spellings. Those are accepted as aliases when
parsing stored values.
"""

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    CREATED = "created"
    PENDING = "pending"
    REJECTED = "rejected"
    READY_TO_SHIP = "ready_to_ship"
    EN_ROUTE = "en_route"
    DELIVERED = "delivered"

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return _LEGACY_SPELLINGS.get(key)

    @classmethod
    def parse(cls, value) -> "OrderStatus | None":
        """Return the status for a stored value, or None if it is not one."""
        try:
            return cls(value)
        except ValueError:
            return None


_LEGACY_SPELLINGS = {
    "pret_a_expedier": OrderStatus.READY_TO_SHIP,
    "en route pour livraison": OrderStatus.EN_ROUTE,
}


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------
_VALID_TRANSITIONS = {
    OrderStatus.CREATED: {OrderStatus.PENDING},
    OrderStatus.PENDING: {OrderStatus.REJECTED, OrderStatus.READY_TO_SHIP},
    OrderStatus.READY_TO_SHIP: {OrderStatus.EN_ROUTE},
    OrderStatus.EN_ROUTE: {OrderStatus.DELIVERED},
    OrderStatus.REJECTED: set(),  # Terminal
    OrderStatus.DELIVERED: set(),  # Terminal
}


def is_lifecycle_transition(from_status: OrderStatus | None, to_status: OrderStatus) -> bool:
    """Whether moving from `from_status` to `to_status` follows the lifecycle.

    A record entering the lifecycle (no prior status) is always accepted.
    """
    if from_status is None:
        return True
    return to_status in _VALID_TRANSITIONS.get(from_status, set())


# ---------------------------------------------------------------------------
# Watched transitions
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class WatchedTransition:
    """A (field, target value) pair whose entry triggers a notification."""

    field: str
    target: OrderStatus


CART_REJECTED = WatchedTransition(field="status", target=OrderStatus.REJECTED)
CART_READY_TO_SHIP = WatchedTransition(field="status", target=OrderStatus.READY_TO_SHIP)
CART_OUT_FOR_DELIVERY = WatchedTransition(field="status", target=OrderStatus.EN_ROUTE)

WATCHED_TRANSITIONS: dict[str, WatchedTransition] = {
    "cart-rejected": CART_REJECTED,
    "cart-ready-to-ship": CART_READY_TO_SHIP,
    "cart-out-for-delivery": CART_OUT_FOR_DELIVERY,
}
