"""Order rejected: sent to the client when the seller rejects their cart."""

from order_push.notification.message import PlatformHints, Scenario

REJECTION_REASON_FALLBACK = "Commande rejetée."


class OrderRejectedTemplate:
    scenario = Scenario.ORDER_REJECTED
    hints = PlatformHints(android_sound="rejection_sound")

    @staticmethod
    def render(context: dict) -> dict:
        reason = context.get("rejection_reason") or REJECTION_REASON_FALLBACK
        return {
            "title": "Commande rejetée ❌",
            "body": f"Votre commande a été rejetée : {reason}",
        }
