"""Template registry: maps Scenario to template classes.

Each template carries its fixed platform hints and renders title and body
from event context data, falling back to fixed text for absent fields.
"""

from order_push.notification.message import Scenario
from order_push.templates.new_order_available import NewOrderAvailableTemplate
from order_push.templates.order_received import OrderReceivedTemplate
from order_push.templates.order_rejected import OrderRejectedTemplate
from order_push.templates.out_for_delivery import OutForDeliveryTemplate
from order_push.templates.ready_to_ship import ReadyToShipTemplate

TEMPLATE_REGISTRY: dict[Scenario, type] = {
    Scenario.NEW_ORDER_AVAILABLE: NewOrderAvailableTemplate,
    Scenario.ORDER_RECEIVED: OrderReceivedTemplate,
    Scenario.ORDER_REJECTED: OrderRejectedTemplate,
    Scenario.READY_TO_SHIP: ReadyToShipTemplate,
    Scenario.OUT_FOR_DELIVERY: OutForDeliveryTemplate,
}


def get_template(scenario: Scenario):
    """Look up a template class by scenario."""
    template_cls = TEMPLATE_REGISTRY.get(scenario)
    if template_cls is None:
        raise ValueError(f"No template registered for scenario: {scenario}")
    return template_cls
