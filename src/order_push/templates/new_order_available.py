"""New order available: broadcast to every device when an order is placed."""

from order_push.notification.message import PlatformHints, Scenario


class NewOrderAvailableTemplate:
    scenario = Scenario.NEW_ORDER_AVAILABLE
    hints = PlatformHints(
        android_sound="custom_sound",
        android_channel_id="order_notifications",
    )

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "title": "Nouvelle commande !",
            "body": "Une commande est disponible sur Rapidos.",
        }
