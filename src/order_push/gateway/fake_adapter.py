"""Fake push gateway: records sent pushes for testing.

Sends succeed by default. Failures can be configured globally or for
individual tokens, either as failed results or as raised gateway errors.
"""

import threading
from uuid import uuid4

from order_push.exceptions import PushFailure, PushGatewayError
from order_push.gateway.port import PushGateway, PushResult
from order_push.notification.message import NotificationMessage


class FakePushGateway(PushGateway):
    """Push gateway that records payloads in memory for test assertions."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.sent_pushes: list[dict] = []
        self.attempts: list[str] = []
        self.should_succeed = True
        self.failure = PushFailure.UNAVAILABLE
        self.failure_reason = "Push delivery failed"
        self.token_failures: dict[str, PushFailure] = {}
        self.token_errors: dict[str, Exception] = {}

    def configure(
        self,
        should_succeed: bool = True,
        failure: PushFailure = PushFailure.UNAVAILABLE,
        failure_reason: str = "Push delivery failed",
    ) -> None:
        """Configure the fake gateway behavior for testing."""
        self.should_succeed = should_succeed
        self.failure = failure
        self.failure_reason = failure_reason

    def fail_token(self, token: str, failure: PushFailure = PushFailure.INVALID_TOKEN) -> None:
        """Make sends to `token` return a failed result."""
        self.token_failures[token] = failure

    def raise_for_token(self, token: str, error: Exception | None = None) -> None:
        """Make sends to `token` raise `error`."""
        self.token_errors[token] = error or PushGatewayError(code=PushFailure.UNAVAILABLE)

    def send(self, token: str, message: NotificationMessage) -> PushResult:
        with self._lock:
            self.attempts.append(token)

        if token in self.token_errors:
            raise self.token_errors[token]

        if token in self.token_failures:
            return PushResult(success=False, failure=self.token_failures[token], error=self.failure_reason)

        if not self.should_succeed:
            return PushResult(success=False, failure=self.failure, error=self.failure_reason)

        message_id = f"push-{uuid4().hex[:12]}"
        record = {"message_id": message_id, **message.to_payload(token)}
        with self._lock:
            self.sent_pushes.append(record)

        return PushResult(success=True, message_id=message_id)

    def sent_to(self, token: str) -> list[dict]:
        return [p for p in self.sent_pushes if p["token"] == token]

    def reset(self) -> None:
        """Clear recorded pushes and failure configuration."""
        with self._lock:
            self.sent_pushes.clear()
            self.attempts.clear()
        self.should_succeed = True
        self.failure = PushFailure.UNAVAILABLE
        self.failure_reason = "Push delivery failed"
        self.token_failures.clear()
        self.token_errors.clear()
