"""Inbound store event handlers: push notifications for cart changes.

Each trigger is its own handler so that every flow runs independently:
- NewCartItemHandler: cart created → seller of the first item
- CartRejectedHandler: status → rejected → client
- CartReadyToShipHandler: status → ready_to_ship → all couriers
- CartOutForDeliveryHandler: status → en_route → client, with delivery code
"""

from order_push.domain import order_push
from order_push.lifecycle import decode_snapshot
from order_push.notification.flows import (
    default_dependencies,
    notify_client_of_rejection,
    notify_client_out_for_delivery,
    notify_couriers_ready_to_ship,
    notify_seller_of_new_cart,
)
from order_push.registry.device_token import DeviceToken
from order_push.utils.logging import add_context, clear_context
from protean.utils.mixins import handle
from shared.events.store import CARTS_COLLECTION, DocumentCreated, DocumentUpdated


def _run_update_flow(trigger: str, flow, event: DocumentUpdated) -> None:
    if event.collection != CARTS_COLLECTION:
        return

    record_id = str(event.document_id)
    add_context(trigger=trigger, record_id=record_id)
    try:
        flow(
            decode_snapshot(event.before),
            decode_snapshot(event.after),
            default_dependencies(),
            record_id=record_id,
        )
    finally:
        clear_context("trigger", "record_id")


@order_push.event_handler(part_of=DeviceToken, stream_category="store::carts")
class NewCartItemHandler:
    """Notifies the seller when a cart is created."""

    @handle(DocumentCreated)
    def on_cart_created(self, event: DocumentCreated) -> None:
        if event.collection != CARTS_COLLECTION:
            return

        record_id = str(event.document_id)
        add_context(trigger="new-cart-item", record_id=record_id)
        try:
            notify_seller_of_new_cart(decode_snapshot(event.after), default_dependencies(), record_id=record_id)
        finally:
            clear_context("trigger", "record_id")


@order_push.event_handler(part_of=DeviceToken, stream_category="store::carts")
class CartRejectedHandler:
    """Notifies the client when their cart is rejected."""

    @handle(DocumentUpdated)
    def on_cart_updated(self, event: DocumentUpdated) -> None:
        _run_update_flow("cart-rejected", notify_client_of_rejection, event)


@order_push.event_handler(part_of=DeviceToken, stream_category="store::carts")
class CartReadyToShipHandler:
    """Notifies every courier when a cart is ready to ship."""

    @handle(DocumentUpdated)
    def on_cart_updated(self, event: DocumentUpdated) -> None:
        _run_update_flow("cart-ready-to-ship", notify_couriers_ready_to_ship, event)


@order_push.event_handler(part_of=DeviceToken, stream_category="store::carts")
class CartOutForDeliveryHandler:
    """Notifies the client when their order leaves for delivery."""

    @handle(DocumentUpdated)
    def on_cart_updated(self, event: DocumentUpdated) -> None:
        _run_update_flow("cart-out-for-delivery", notify_client_out_for_delivery, event)
