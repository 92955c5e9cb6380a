"""Cross-domain event contracts for document store change notifications.

The storefront writes orders and carts to a shared document store. Every
committed write is relayed by the store's change-notification runtime as one
of the events below, carrying JSON snapshots of the record. Delivery is
at-least-once, so consumers must tolerate seeing the same change twice.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, String, Text

ORDERS_COLLECTION = "commandes"
CARTS_COLLECTION = "carts"


class DocumentCreated(BaseEvent):
    """A record was created in a watched collection."""

    __version__ = 1

    collection = String(required=True, max_length=100)
    document_id = Identifier(required=True)
    after = Text()  # JSON snapshot of the new record
    committed_at = DateTime()


class DocumentUpdated(BaseEvent):
    """A record in a watched collection was updated."""

    __version__ = 1

    collection = String(required=True, max_length=100)
    document_id = Identifier(required=True)
    before = Text()  # JSON snapshot prior to the write
    after = Text()  # JSON snapshot after the write
    committed_at = DateTime()
