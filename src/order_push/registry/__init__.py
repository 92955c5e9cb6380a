"""Token registry factory.

Provides get_token_registry() / set_token_registry() to swap implementations:
- RepositoryTokenRegistry (default) reads DeviceToken aggregates
- FakeTokenRegistry for development and testing

The default is chosen by the TOKEN_REGISTRY_ADAPTER environment variable.
"""

import os

from order_push.registry.port import TokenRegistry

_current_registry: TokenRegistry | None = None


def get_token_registry() -> TokenRegistry:
    """Return the configured token registry (singleton)."""
    global _current_registry
    if _current_registry is None:
        adapter = os.environ.get("TOKEN_REGISTRY_ADAPTER", "repository")
        if adapter == "repository":
            from order_push.registry.repository_adapter import RepositoryTokenRegistry

            _current_registry = RepositoryTokenRegistry()
        elif adapter == "fake":
            from order_push.registry.fake_adapter import FakeTokenRegistry

            _current_registry = FakeTokenRegistry()
        else:
            raise ValueError(f"Unknown token registry adapter: {adapter}")
    return _current_registry


def set_token_registry(registry: TokenRegistry) -> None:
    """Override the active token registry (useful for tests)."""
    global _current_registry
    _current_registry = registry


def reset_token_registry() -> None:
    """Reset to the default token registry."""
    global _current_registry
    _current_registry = None
