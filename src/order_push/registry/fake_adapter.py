"""In-memory token registry for testing and development.

Records every lookup so tests can assert which queries a flow issued, and
can be switched to unavailable to simulate an infrastructure outage.
"""

from order_push.exceptions import RegistryUnavailableError
from order_push.registry.device_token import TokenRole
from order_push.registry.port import TokenEntry, TokenRegistry


class FakeTokenRegistry(TokenRegistry):
    """Configurable in-memory token registry."""

    def __init__(self, entries: list[TokenEntry] | None = None) -> None:
        self.entries: list[TokenEntry] = list(entries or [])
        self.calls: list[dict] = []
        self.available = True

    def configure(self, available: bool = True) -> None:
        """Configure registry availability at runtime."""
        self.available = available

    def add(self, token: str | None, user_id: str | None = None, role: TokenRole | str | None = None) -> TokenEntry:
        if isinstance(role, TokenRole):
            role = role.value
        entry = TokenEntry(token=token, user_id=user_id, role=role)
        self.entries.append(entry)
        return entry

    def _lookup(self, method: str, **criteria) -> None:
        self.calls.append({"method": method, **criteria})
        if not self.available:
            raise RegistryUnavailableError("Token registry unavailable")

    def find_all(self) -> list[TokenEntry]:
        self._lookup("find_all")
        return list(self.entries)

    def find_by_user_id(self, user_id: str) -> list[TokenEntry]:
        self._lookup("find_by_user_id", user_id=user_id)
        return [e for e in self.entries if e.user_id == user_id]

    def find_by_role(self, role: TokenRole) -> list[TokenEntry]:
        self._lookup("find_by_role", role=role.value)
        return [e for e in self.entries if e.role in role.stored_values]

    def reset(self) -> None:
        """Clear entries, recorded calls and availability."""
        self.entries.clear()
        self.calls.clear()
        self.available = True
