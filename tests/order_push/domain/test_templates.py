"""Tests for notification templates and message composition."""

import pytest
from order_push.notification.composer import compose
from order_push.notification.message import NotificationMessage, PlatformHints, Scenario
from order_push.templates import TEMPLATE_REGISTRY, get_template
from order_push.templates.new_order_available import NewOrderAvailableTemplate
from order_push.templates.order_received import ITEM_NAME_FALLBACK, OrderReceivedTemplate
from order_push.templates.order_rejected import REJECTION_REASON_FALLBACK
from order_push.templates.out_for_delivery import SHORT_CODE_FALLBACK
from order_push.templates.ready_to_ship import ReadyToShipTemplate


# ---------------------------------------------------------------
# Template registry
# ---------------------------------------------------------------
class TestTemplateRegistry:
    def test_every_scenario_has_a_template(self):
        for scenario in Scenario:
            assert scenario in TEMPLATE_REGISTRY, f"Missing template for {scenario}"

    def test_template_scenarios_match_keys(self):
        for scenario, template_cls in TEMPLATE_REGISTRY.items():
            assert template_cls.scenario is scenario

    def test_get_template_returns_correct_class(self):
        assert get_template(Scenario.NEW_ORDER_AVAILABLE) is NewOrderAvailableTemplate

    def test_get_template_unknown_scenario_raises(self):
        with pytest.raises(ValueError, match="No template registered"):
            get_template("Nonexistent")


# ---------------------------------------------------------------
# Dynamic fields and fallbacks
# ---------------------------------------------------------------
class TestRejectionMessage:
    def test_reason_is_used_verbatim(self):
        message = compose(Scenario.ORDER_REJECTED, {"rejection_reason": "out of stock"})
        assert message.body.endswith(": out of stock")

    def test_missing_reason_uses_fallback(self):
        message = compose(Scenario.ORDER_REJECTED, {})
        assert REJECTION_REASON_FALLBACK in message.body

    def test_empty_reason_uses_fallback(self):
        message = compose(Scenario.ORDER_REJECTED, {"rejection_reason": ""})
        assert REJECTION_REASON_FALLBACK in message.body


class TestOrderReceivedMessage:
    def test_item_name_in_body(self):
        message = compose(Scenario.ORDER_RECEIVED, {"item_name": "Attiéké poisson"})
        assert "Attiéké poisson" in message.body

    def test_missing_item_name_uses_fallback(self):
        message = compose(Scenario.ORDER_RECEIVED)
        assert ITEM_NAME_FALLBACK in message.body


class TestOutForDeliveryMessage:
    def test_short_code_in_body(self):
        message = compose(Scenario.OUT_FOR_DELIVERY, {"short_code": "X7K2"})
        assert "X7K2" in message.body

    def test_missing_short_code_uses_fallback(self):
        message = compose(Scenario.OUT_FOR_DELIVERY, {"short_code": None})
        assert SHORT_CODE_FALLBACK in message.body


class TestStaticMessages:
    @pytest.mark.parametrize("scenario", [Scenario.NEW_ORDER_AVAILABLE, Scenario.READY_TO_SHIP])
    def test_context_is_ignored(self, scenario):
        assert compose(scenario, {"anything": "x"}) == compose(scenario)

    @pytest.mark.parametrize("scenario", list(Scenario))
    def test_every_message_has_title_and_body(self, scenario):
        message = compose(scenario)
        assert isinstance(message, NotificationMessage)
        assert message.scenario is scenario
        assert message.title
        assert message.body


# ---------------------------------------------------------------
# Platform hints
# ---------------------------------------------------------------
class TestPlatformHints:
    def test_hints_are_fixed_per_scenario(self):
        assert compose(Scenario.ORDER_RECEIVED).hints is OrderReceivedTemplate.hints

    def test_broadcasts_use_the_order_channel(self):
        assert NewOrderAvailableTemplate.hints.android_channel_id == "order_notifications"
        assert ReadyToShipTemplate.hints.android_channel_id == "order_notifications"

    def test_direct_messages_have_no_channel(self):
        assert compose(Scenario.ORDER_REJECTED).hints.android_channel_id is None

    def test_all_messages_are_high_priority(self):
        for scenario in Scenario:
            assert compose(scenario).hints.android_priority == "high"


class TestPayload:
    def test_payload_shape(self):
        message = compose(Scenario.NEW_ORDER_AVAILABLE)
        payload = message.to_payload("tok-1")

        assert payload["token"] == "tok-1"
        assert payload["notification"] == {"title": message.title, "body": message.body}
        assert payload["android"]["notification"] == {
            "sound": "custom_sound",
            "priority": "high",
            "channelId": "order_notifications",
        }
        assert payload["apns"]["payload"]["aps"] == {
            "sound": "custom_sound.caf",
            "contentAvailable": True,
            "mutableContent": True,
            "badge": 1,
        }

    def test_channel_omitted_when_unset(self):
        message = NotificationMessage(
            scenario=Scenario.ORDER_REJECTED,
            title="t",
            body="b",
            hints=PlatformHints(android_sound="rejection_sound"),
        )
        assert "channelId" not in message.to_payload("tok")["android"]["notification"]
