"""Push gateway factory.

Provides get_push_gateway() / set_push_gateway() to swap implementations.
The adapter is chosen by the PUSH_GATEWAY_ADAPTER environment variable;
FakePushGateway is the default for development and testing.
"""

import os

from order_push.gateway.port import PushGateway

_current_gateway: PushGateway | None = None


def get_push_gateway() -> PushGateway:
    """Return the configured push gateway (singleton)."""
    global _current_gateway
    if _current_gateway is None:
        adapter = os.environ.get("PUSH_GATEWAY_ADAPTER", "fake")
        if adapter == "fake":
            from order_push.gateway.fake_adapter import FakePushGateway

            _current_gateway = FakePushGateway()
        else:
            raise ValueError(f"Unknown push gateway adapter: {adapter}")
    return _current_gateway


def set_push_gateway(gateway: PushGateway) -> None:
    """Override the active push gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_push_gateway() -> None:
    """Reset to the default push gateway."""
    global _current_gateway
    _current_gateway = None
