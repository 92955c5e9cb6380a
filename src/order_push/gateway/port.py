"""Push gateway port (abstract interface).

Defines the contract push adapters implement: one message to one
destination token per call, answered with success or a typed failure.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from order_push.exceptions import PushFailure
from order_push.notification.message import NotificationMessage


@dataclass(frozen=True)
class PushResult:
    """Result of a single push send."""

    success: bool
    message_id: str | None = None
    failure: PushFailure | None = None
    error: str | None = None


class PushGateway(ABC):
    """Abstract push gateway interface.

    Adapters may report a failed send either by returning an unsuccessful
    PushResult or by raising PushGatewayError.
    """

    @abstractmethod
    def send(self, token: str, message: NotificationMessage) -> PushResult:
        """Send `message` to the device identified by `token`."""
        ...
