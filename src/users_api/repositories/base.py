"""Storage contract shared by the user repository backends."""

from __future__ import annotations

from typing import Protocol

from users_api.models import User


class UserRepository(Protocol):
    """Persistence operations the user endpoints depend on.

    ``raw_id`` is the identifier exactly as it arrived in the request path;
    each backend parses it into its own identifier type and treats anything it
    cannot parse as a missing user.
    """

    name: str

    async def create(self, name: str, email: str) -> User: ...

    async def list(self) -> list[User]: ...

    async def get_by_id(self, raw_id: str) -> User | None: ...

    async def delete_by_id(self, raw_id: str) -> bool: ...

    async def reset(self) -> None:
        """Remove every stored user. Used by test fixtures only."""
        ...

    async def close(self) -> None: ...
