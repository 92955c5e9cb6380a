"""Ready to ship: broadcast to couriers when a cart can be picked up."""

from order_push.notification.message import PlatformHints, Scenario


class ReadyToShipTemplate:
    scenario = Scenario.READY_TO_SHIP
    hints = PlatformHints(
        android_sound="custom_sound",
        android_channel_id="order_notifications",
    )

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "title": "Commande prête à livrer 🚚",
            "body": "Une commande est prête à être livrée.",
        }
