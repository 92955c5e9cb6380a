"""Out for delivery: sent to the client with the code to give the courier."""

from order_push.notification.message import PlatformHints, Scenario

SHORT_CODE_FALLBACK = "Aucun code fourni"


class OutForDeliveryTemplate:
    scenario = Scenario.OUT_FOR_DELIVERY
    hints = PlatformHints(android_sound="rejection_sound")

    @staticmethod
    def render(context: dict) -> dict:
        short_code = context.get("short_code") or SHORT_CODE_FALLBACK
        return {
            "title": "Votre commande est en route ! 🛵",
            "body": f"Votre code de livraison est : {short_code}",
        }
