"""Token registry backed by the domain's DeviceToken repository."""

from order_push.exceptions import RegistryUnavailableError
from order_push.registry.device_token import DeviceToken, TokenRole
from order_push.registry.port import TokenEntry, TokenRegistry
from protean.utils.globals import current_domain


class RepositoryTokenRegistry(TokenRegistry):
    """Reads DeviceToken aggregates through the active domain's repository."""

    def _query(self, **filters) -> list[TokenEntry]:
        try:
            dao = current_domain.repository_for(DeviceToken)._dao
            if filters:
                records = dao.query.filter(**filters).all().items
            else:
                records = dao.query.all().items
        except Exception as exc:
            raise RegistryUnavailableError(f"Token registry query failed: {exc}") from exc

        return [TokenEntry(token=r.token, user_id=r.user_id, role=r.role) for r in records]

    def find_all(self) -> list[TokenEntry]:
        return self._query()

    def find_by_user_id(self, user_id: str) -> list[TokenEntry]:
        return self._query(user_id=user_id)

    def find_by_role(self, role: TokenRole) -> list[TokenEntry]:
        entries = []
        for stored in role.stored_values:
            entries.extend(self._query(role=stored))
        return entries
