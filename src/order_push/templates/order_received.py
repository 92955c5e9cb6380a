"""Order received: sent to the seller of a newly created cart."""

from order_push.notification.message import PlatformHints, Scenario

ITEM_NAME_FALLBACK = "un article"


class OrderReceivedTemplate:
    scenario = Scenario.ORDER_RECEIVED
    hints = PlatformHints(android_sound="notification_sound")

    @staticmethod
    def render(context: dict) -> dict:
        item_name = context.get("item_name") or ITEM_NAME_FALLBACK
        return {
            "title": "Nouvelle commande reçue !",
            "body": f"Un client a commandé : {item_name}",
        }
