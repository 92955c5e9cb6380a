"""Application tests for the new-order store event handler."""

from datetime import UTC, datetime

import pytest
from order_push.gateway import get_push_gateway
from order_push.notification.order_events import NewOrderHandler
from order_push.registry.device_token import DeviceToken
from protean import current_domain
from shared.events.store import CARTS_COLLECTION, ORDERS_COLLECTION, DocumentCreated

from tests.order_push.factories import created


def _register(token, user_id="user-1", role="client"):
    current_domain.repository_for(DeviceToken).add(DeviceToken(token=token, user_id=user_id, role=role))


class TestNewOrderHandler:
    def test_broadcasts_new_order_to_all_devices(self):
        _register("tok-1", "client-1", "client")
        _register("tok-2", "courier-1", "courier")

        NewOrderHandler().on_order_created(created({"status": "created"}, collection=ORDERS_COLLECTION))

        gateway = get_push_gateway()
        assert {p["token"] for p in gateway.sent_pushes} == {"tok-1", "tok-2"}
        assert all(p["android"]["notification"]["channelId"] == "order_notifications" for p in gateway.sent_pushes)

    def test_ignores_other_collections(self):
        _register("tok-1")

        NewOrderHandler().on_order_created(created({"status": "created"}, collection=CARTS_COLLECTION))

        assert get_push_gateway().attempts == []

    def test_empty_registry_does_not_raise(self):
        NewOrderHandler().on_order_created(created({"status": "created"}, collection=ORDERS_COLLECTION))
        assert get_push_gateway().attempts == []

    def test_blank_tokens_are_skipped(self):
        _register("")
        _register("tok-ok")

        NewOrderHandler().on_order_created(created({}, collection=ORDERS_COLLECTION))

        assert get_push_gateway().attempts == ["tok-ok"]

    @pytest.mark.parametrize("after", ["null", "{not json", '"created"'])
    def test_unusable_snapshot_is_ignored(self, after):
        _register("tok-1")
        event = DocumentCreated(
            collection=ORDERS_COLLECTION,
            document_id="order-1",
            after=after,
            committed_at=datetime.now(UTC),
        )

        NewOrderHandler().on_order_created(event)

        assert get_push_gateway().attempts == []
