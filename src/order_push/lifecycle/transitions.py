"""Edge-triggered transition detection over record snapshots."""

import json
from enum import Enum

import structlog

from order_push.lifecycle.status import OrderStatus, WatchedTransition, is_lifecycle_transition

logger = structlog.get_logger(__name__)


def decode_snapshot(raw: str | None) -> dict | None:
    """Decode a JSON snapshot carried by a store event.

    Returns None when the snapshot is absent, JSON `null`, malformed or not
    a JSON object; the flows treat all of these as missing data.
    """
    if raw is None or raw == "":
        return None
    try:
        snapshot = json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("Snapshot is not valid JSON", error=str(exc))
        return None
    if snapshot is None:
        return None
    if not isinstance(snapshot, dict):
        logger.warning("Snapshot is not a JSON object", type=type(snapshot).__name__)
        return None
    return snapshot


def _read(snapshot: dict, field: str, target):
    value = snapshot.get(field)
    if isinstance(target, Enum):
        try:
            return type(target)(value)
        except ValueError:
            return value
    return value


def detect(before: dict | None, after: dict | None, field: str, target_value) -> bool:
    """Return True iff `field` just moved into `target_value`.

    Fires on the edge only: the new snapshot must hold the target and the
    previous one (when present) must not.
    """
    if after is None:
        return False
    if _read(after, field, target_value) != target_value:
        return False
    if before is None:
        return True
    return _read(before, field, target_value) != target_value


def detect_watched(before: dict | None, after: dict | None, watched: WatchedTransition) -> bool:
    return detect(before, after, watched.field, watched.target)


def status_change(before: dict | None, after: dict | None) -> tuple[OrderStatus | None, OrderStatus | None]:
    """Parsed (previous, current) statuses of a snapshot pair."""
    previous = OrderStatus.parse(before.get("status")) if before else None
    current = OrderStatus.parse(after.get("status")) if after else None
    return previous, current


def is_expected_change(before: dict | None, after: dict | None) -> bool:
    """Whether the status change between two snapshots follows the lifecycle.

    Unchanged or unparseable statuses are treated as expected.
    """
    previous, current = status_change(before, after)
    if current is None or previous == current:
        return True
    return is_lifecycle_transition(previous, current)
