"""Order push bounded context: push notifications for the order lifecycle.

Consumes document store change events for orders and carts, detects the
status transitions customers, sellers and couriers care about, and fans
out push notifications to every affected device through the push gateway.
"""

from protean.domain import Domain
from shared.events.store import DocumentCreated, DocumentUpdated

from order_push.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

order_push = Domain(name="order_push")

order_push.register_external_event(DocumentCreated, "Store.DocumentCreated.v1")
order_push.register_external_event(DocumentUpdated, "Store.DocumentUpdated.v1")
