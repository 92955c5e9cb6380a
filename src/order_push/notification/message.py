"""Push message model: platform-agnostic content plus per-platform hints."""

from dataclasses import dataclass
from enum import Enum


class Scenario(Enum):
    NEW_ORDER_AVAILABLE = "NewOrderAvailable"
    ORDER_RECEIVED = "OrderReceived"
    ORDER_REJECTED = "OrderRejected"
    READY_TO_SHIP = "ReadyToShip"
    OUT_FOR_DELIVERY = "OutForDelivery"


@dataclass(frozen=True)
class PlatformHints:
    """Delivery hints attached to a message; fixed per scenario."""

    android_sound: str
    android_priority: str = "high"
    android_channel_id: str | None = None
    apns_sound: str = "custom_sound.caf"
    badge: int = 1
    content_available: bool = True
    mutable_content: bool = True


@dataclass(frozen=True)
class NotificationMessage:
    """A composed push notification, independent of its destination."""

    scenario: Scenario
    title: str
    body: str
    hints: PlatformHints

    def to_payload(self, token: str) -> dict:
        """Render the gateway wire payload addressed to a single token."""
        android = {
            "sound": self.hints.android_sound,
            "priority": self.hints.android_priority,
        }
        if self.hints.android_channel_id:
            android["channelId"] = self.hints.android_channel_id

        return {
            "token": token,
            "notification": {"title": self.title, "body": self.body},
            "android": {"notification": android},
            "apns": {
                "payload": {
                    "aps": {
                        "sound": self.hints.apns_sound,
                        "contentAvailable": self.hints.content_available,
                        "mutableContent": self.hints.mutable_content,
                        "badge": self.hints.badge,
                    }
                }
            },
        }
