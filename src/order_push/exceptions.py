"""Error taxonomy for the dispatcher.

Only infrastructure faults are modelled as exceptions. Absent data (missing
snapshots, missing linkage fields, empty recipient sets) is not an error
and is handled by logging a warning in the flows.
"""

from enum import Enum


class PushFailure(Enum):
    INVALID_TOKEN = "invalid-token"
    UNAVAILABLE = "unavailable"
    QUOTA_EXCEEDED = "quota-exceeded"
    UNKNOWN = "unknown"


class DispatcherError(Exception):
    """Base class for dispatcher infrastructure errors."""


class RegistryUnavailableError(DispatcherError):
    """The token registry could not be queried."""


class PushGatewayError(DispatcherError):
    """A push gateway rejected or failed a single send."""

    code = PushFailure.UNKNOWN

    def __init__(self, message: str = "Push delivery failed", code: PushFailure | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class InvalidTokenError(PushGatewayError):
    code = PushFailure.INVALID_TOKEN


class GatewayUnavailableError(PushGatewayError):
    code = PushFailure.UNAVAILABLE


class QuotaExceededError(PushGatewayError):
    code = PushFailure.QUOTA_EXCEEDED
