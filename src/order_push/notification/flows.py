"""The five notification flows, one per trigger.

Each flow composes recipient resolution, transition detection, message
composition and dispatch for one event shape, and returns the dispatch
outcomes (empty when nothing was sent). Flows never modify the records or
tokens they read. Absent data ends a flow with a warning; registry outages
propagate to the caller.
"""

from dataclasses import dataclass

import structlog

from order_push.lifecycle import (
    WATCHED_TRANSITIONS,
    detect_watched,
    is_expected_change,
    status_change,
)
from order_push.notification.composer import compose
from order_push.notification.dispatch import (
    DispatchEngine,
    DispatchOutcome,
    get_dispatch_engine,
    success_count,
)
from order_push.notification.message import Scenario
from order_push.recipients import RecipientResolver
from order_push.registry import get_token_registry
from order_push.registry.device_token import TokenRole

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FlowDependencies:
    resolver: RecipientResolver
    engine: DispatchEngine


def default_dependencies() -> FlowDependencies:
    """Dependencies wired to the configured registry and push gateway."""
    return FlowDependencies(
        resolver=RecipientResolver(get_token_registry()),
        engine=get_dispatch_engine(),
    )


# ---------------------------------------------------------------------------
# Creation flows
# ---------------------------------------------------------------------------
def notify_new_order(record: dict | None, deps: FlowDependencies, record_id: str | None = None) -> list[DispatchOutcome]:
    """Broadcast a new order to every registered device."""
    if record is None:
        logger.warning("New order event has no snapshot", record_id=record_id)
        return []

    logger.info("New order received", record_id=record_id, status=record.get("status"))

    tokens = deps.resolver.resolve_all()
    if not tokens:
        logger.warning("No usable tokens registered, skipping new order broadcast", record_id=record_id)
        return []

    outcomes = deps.engine.dispatch_all(compose(Scenario.NEW_ORDER_AVAILABLE), tokens)
    logger.info(
        "New order broadcast sent",
        record_id=record_id,
        sent=success_count(outcomes),
        attempted=len(outcomes),
    )
    return outcomes


def notify_seller_of_new_cart(
    record: dict | None, deps: FlowDependencies, record_id: str | None = None
) -> list[DispatchOutcome]:
    """Tell the seller of the cart's first item that an order came in."""
    if record is None:
        logger.warning("New cart event has no snapshot", record_id=record_id)
        return []

    items = record.get("items") or []
    item = items[0] if isinstance(items, list) and items else None
    seller_id = item.get("idVendeur") if isinstance(item, dict) else None
    if not seller_id:
        logger.warning("No seller found on the cart's first item", record_id=record_id)
        return []

    token = deps.resolver.resolve_by_user_id(seller_id)
    if token is None:
        logger.warning("No token found for seller", record_id=record_id, seller_id=seller_id)
        return []

    message = compose(Scenario.ORDER_RECEIVED, {"item_name": item.get("name")})
    outcome = deps.engine.dispatch_one(message, token)
    if outcome.success:
        logger.info("Seller notified of new cart", record_id=record_id, seller_id=seller_id)
    return [outcome]


# ---------------------------------------------------------------------------
# Update flows
# ---------------------------------------------------------------------------
def _entered(
    before: dict | None,
    after: dict | None,
    trigger: str,
    record_id: str | None,
) -> bool:
    """Whether the update moved the record into the state `trigger` watches."""
    watched = WATCHED_TRANSITIONS[trigger]
    if before is None or after is None:
        logger.warning("Update event is missing a before/after snapshot", trigger=trigger, record_id=record_id)
        return False

    if not detect_watched(before, after, watched):
        return False

    if not is_expected_change(before, after):
        previous, current = status_change(before, after)
        logger.warning(
            "Status change outside the known order lifecycle",
            trigger=trigger,
            record_id=record_id,
            previous=getattr(previous, "value", before.get("status")),
            current=current.value,
        )
    return True


def _notify_client(
    after: dict,
    deps: FlowDependencies,
    scenario: Scenario,
    context: dict,
    record_id: str | None,
) -> list[DispatchOutcome]:
    client_id = after.get("idClient")
    if not client_id:
        logger.warning("Cart has no idClient", record_id=record_id, scenario=scenario.value)
        return []

    token = deps.resolver.resolve_by_user_id(client_id)
    if token is None:
        logger.warning("No token found for client", record_id=record_id, client_id=client_id)
        return []

    outcome = deps.engine.dispatch_one(compose(scenario, context), token)
    if outcome.success:
        logger.info("Client notified", record_id=record_id, client_id=client_id, scenario=scenario.value)
    return [outcome]


def notify_client_of_rejection(
    before: dict | None, after: dict | None, deps: FlowDependencies, record_id: str | None = None
) -> list[DispatchOutcome]:
    """Tell the client their cart was rejected, with the seller's reason."""
    if not _entered(before, after, "cart-rejected", record_id):
        return []

    return _notify_client(
        after,
        deps,
        Scenario.ORDER_REJECTED,
        {"rejection_reason": after.get("rejectionReason")},
        record_id,
    )


def notify_couriers_ready_to_ship(
    before: dict | None, after: dict | None, deps: FlowDependencies, record_id: str | None = None
) -> list[DispatchOutcome]:
    """Broadcast to every courier that a cart is ready to be picked up."""
    if not _entered(before, after, "cart-ready-to-ship", record_id):
        return []

    logger.info("Cart ready to ship", record_id=record_id)

    tokens = deps.resolver.resolve_by_role(TokenRole.COURIER)
    if not tokens:
        logger.warning("No courier tokens found", record_id=record_id)
        return []

    outcomes = deps.engine.dispatch_all(compose(Scenario.READY_TO_SHIP), tokens)
    logger.info(
        "Couriers notified",
        record_id=record_id,
        sent=success_count(outcomes),
        attempted=len(outcomes),
    )
    return outcomes


def notify_client_out_for_delivery(
    before: dict | None, after: dict | None, deps: FlowDependencies, record_id: str | None = None
) -> list[DispatchOutcome]:
    """Tell the client their order is on its way, with the delivery code."""
    if not _entered(before, after, "cart-out-for-delivery", record_id):
        return []

    return _notify_client(
        after,
        deps,
        Scenario.OUT_FOR_DELIVERY,
        {"short_code": after.get("shortCode")},
        record_id,
    )
