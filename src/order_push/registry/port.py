"""Token registry port: abstract read interface over registered push tokens."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from order_push.registry.device_token import TokenRole


@dataclass(frozen=True)
class TokenEntry:
    """A registered token as read from the registry."""

    token: str | None
    user_id: str | None
    role: str | None


class TokenRegistry(ABC):
    """Exact-match lookups over the token registry.

    Implementations raise RegistryUnavailableError when the backing store
    cannot be queried.
    """

    @abstractmethod
    def find_all(self) -> list[TokenEntry]:
        """Every registered token."""
        ...

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> list[TokenEntry]:
        """Tokens registered for a user, in registration order."""
        ...

    @abstractmethod
    def find_by_role(self, role: TokenRole) -> list[TokenEntry]:
        """Tokens registered under a role (any stored spelling of it)."""
        ...
