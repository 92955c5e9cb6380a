"""Inbound store event handler: push notifications for new orders.

Listens for DocumentCreated on the orders collection and broadcasts the new
order to every registered device.
"""

from order_push.domain import order_push
from order_push.lifecycle import decode_snapshot
from order_push.notification.flows import default_dependencies, notify_new_order
from order_push.registry.device_token import DeviceToken
from order_push.utils.logging import add_context, clear_context
from protean.utils.mixins import handle
from shared.events.store import ORDERS_COLLECTION, DocumentCreated


@order_push.event_handler(part_of=DeviceToken, stream_category="store::commandes")
class NewOrderHandler:
    """Broadcasts newly created orders."""

    @handle(DocumentCreated)
    def on_order_created(self, event: DocumentCreated) -> None:
        if event.collection != ORDERS_COLLECTION:
            return

        add_context(trigger="new-order", record_id=str(event.document_id))
        try:
            notify_new_order(
                decode_snapshot(event.after),
                default_dependencies(),
                record_id=str(event.document_id),
            )
        finally:
            clear_context("trigger", "record_id")
