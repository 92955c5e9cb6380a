"""DeviceToken aggregate: push tokens registered by installed app instances.

Tokens are written by the device-registration flow; this context only reads
them. The collection is append-mostly and never pruned here, so a stored
token may be empty or stale.
"""

from enum import Enum

from order_push.domain import order_push
from protean.fields import DateTime, String


class TokenRole(Enum):
    CLIENT = "client"
    SELLER = "seller"
    COURIER = "courier"

    @property
    def stored_values(self) -> tuple[str, ...]:
        """Every spelling under which this role may be stored."""
        return (self.value, *_LEGACY_ROLE_SPELLINGS.get(self, ()))


_LEGACY_ROLE_SPELLINGS = {
    TokenRole.SELLER: ("vendeur",),
    TokenRole.COURIER: ("livreur",),
}


@order_push.aggregate
class DeviceToken:
    """A push token bound to a user and the role they use the app in."""

    token: String(max_length=4096)
    user_id: String(max_length=255)
    role: String(max_length=50)
    registered_at: DateTime()
