"""Recipient resolution: registry lookups turned into usable push tokens.

Lookup failures are not caught here: an unreachable registry is an
infrastructure fault and must abort the invocation.
"""

from collections.abc import Iterable

import structlog

from order_push.registry.device_token import TokenRole
from order_push.registry.port import TokenEntry, TokenRegistry

logger = structlog.get_logger(__name__)


def usable_tokens(tokens: Iterable[str | None]) -> list[str]:
    """Drop empty, blank and non-string tokens, keeping the rest in order."""
    return [token for token in tokens if isinstance(token, str) and token.strip()]


def distinct_tokens(tokens: Iterable[str | None]) -> list[str]:
    """Usable tokens with duplicates collapsed, in order of first appearance."""
    return list(dict.fromkeys(usable_tokens(tokens)))


class RecipientResolver:
    """Resolves delivery tokens by identity or by role."""

    def __init__(self, registry: TokenRegistry) -> None:
        self.registry = registry

    def _tokens_of(self, entries: list[TokenEntry], **criteria) -> list[str]:
        tokens = distinct_tokens(entry.token for entry in entries)
        if len(tokens) < len(entries):
            logger.debug(
                "Discarded unusable or duplicate tokens",
                found=len(entries),
                usable=len(tokens),
                **criteria,
            )
        return tokens

    def resolve_all(self) -> list[str]:
        """Every usable token in the registry."""
        return self._tokens_of(self.registry.find_all())

    def resolve_by_role(self, role: TokenRole) -> list[str]:
        """Usable tokens registered under `role`."""
        return self._tokens_of(self.registry.find_by_role(role), role=role.value)

    def resolve_by_user_id(self, user_id: str) -> str | None:
        """First usable token registered for `user_id`, if any."""
        tokens = self._tokens_of(self.registry.find_by_user_id(user_id), user_id=user_id)
        return tokens[0] if tokens else None
