"""Snapshot and event builders shared by the order_push tests."""

import json
from datetime import UTC, datetime

from shared.events.store import CARTS_COLLECTION, DocumentCreated, DocumentUpdated


def cart(status="pending", **fields) -> dict:
    record = {
        "status": status,
        "idClient": "client-1",
        "items": [{"idVendeur": "seller-1", "name": "Pizza Margherita"}],
    }
    record.update(fields)
    return record


def created(after: dict | None, collection: str = CARTS_COLLECTION, document_id: str = "doc-1") -> DocumentCreated:
    return DocumentCreated(
        collection=collection,
        document_id=document_id,
        after=json.dumps(after) if after is not None else None,
        committed_at=datetime.now(UTC),
    )


def updated(
    before: dict | None,
    after: dict | None,
    collection: str = CARTS_COLLECTION,
    document_id: str = "cart-1",
) -> DocumentUpdated:
    return DocumentUpdated(
        collection=collection,
        document_id=document_id,
        before=json.dumps(before) if before is not None else None,
        after=json.dumps(after) if after is not None else None,
        committed_at=datetime.now(UTC),
    )
