"""Dispatch engine: concurrent, failure-tolerant push fan-out.

Every token gets exactly one best-effort send. Sends run concurrently on a
thread pool and the batch returns only once all of them have settled. A
failed send is recorded in its outcome and never affects the others; the
engine itself never raises on delivery failures and never retries.
"""

import contextvars
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass

import structlog

from order_push.exceptions import PushFailure, PushGatewayError
from order_push.gateway import get_push_gateway
from order_push.gateway.port import PushGateway
from order_push.notification.message import NotificationMessage
from order_push.recipients import usable_tokens

logger = structlog.get_logger(__name__)

DEFAULT_MAX_WORKERS = 10


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of sending one message to one token."""

    token: str
    success: bool
    message_id: str | None = None
    error: str | None = None
    error_code: str | None = None


def success_count(outcomes: Iterable[DispatchOutcome]) -> int:
    return sum(1 for outcome in outcomes if outcome.success)


class DispatchEngine:
    def __init__(self, gateway: PushGateway, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.gateway = gateway
        self.max_workers = max_workers

    def dispatch_one(self, message: NotificationMessage, token: str) -> DispatchOutcome:
        """Send `message` to a single token and capture the outcome."""
        try:
            result = self.gateway.send(token, message)
        except PushGatewayError as exc:
            outcome = DispatchOutcome(token=token, success=False, error=str(exc), error_code=exc.code.value)
        except Exception as exc:
            outcome = DispatchOutcome(
                token=token,
                success=False,
                error=str(exc) or type(exc).__name__,
                error_code=PushFailure.UNKNOWN.value,
            )
        else:
            if result.success:
                return DispatchOutcome(token=token, success=True, message_id=result.message_id)
            failure = result.failure or PushFailure.UNKNOWN
            outcome = DispatchOutcome(
                token=token,
                success=False,
                error=result.error or "Push delivery failed",
                error_code=failure.value,
            )

        logger.error(
            "Push send failed",
            token=token,
            scenario=message.scenario.value,
            error=outcome.error,
            code=outcome.error_code,
        )
        return outcome

    def dispatch_all(self, message: NotificationMessage, tokens: Iterable[str | None]) -> list[DispatchOutcome]:
        """Send `message` to every usable token concurrently.

        Returns one outcome per usable token, in the order the tokens were
        given; a token listed twice is sent twice. Returns an empty list,
        without contacting the gateway, when no usable token remains.

        Each send runs in a copy of the caller's context, so log fields bound
        by the handler also appear on the worker threads.
        """
        batch = usable_tokens(tokens)
        if not batch:
            logger.warning("No usable tokens for dispatch", scenario=message.scenario.value)
            return []

        workers = min(self.max_workers, len(batch))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="push-dispatch") as executor:
            futures = [
                executor.submit(contextvars.copy_context().run, self.dispatch_one, message, token)
                for token in batch
            ]
            wait(futures)

        outcomes = [future.result() for future in futures]

        logger.info(
            "Push batch settled",
            scenario=message.scenario.value,
            attempted=len(outcomes),
            sent=success_count(outcomes),
            failed=len(outcomes) - success_count(outcomes),
        )
        return outcomes


def max_workers_from_env() -> int:
    return int(os.environ.get("PUSH_DISPATCH_MAX_WORKERS", DEFAULT_MAX_WORKERS))


def get_dispatch_engine() -> DispatchEngine:
    """Build a dispatch engine on the configured push gateway."""
    return DispatchEngine(get_push_gateway(), max_workers=max_workers_from_env())
