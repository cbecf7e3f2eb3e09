"""Process-local user storage."""

from __future__ import annotations

from users_api.models import User


class InMemoryUserRepository:
    """Keep users in a list with integer ids handed out from a counter.

    Ids start at 1 and are never reused, even after a delete. Every method
    mutates the list and counter without awaiting in between, so requests on
    one event loop cannot interleave inside an operation. There is no lock:
    an instance must not be shared across threads or worker processes.
    """

    name = "memory"

    def __init__(self) -> None:
        self._users: list[User] = []
        self._next_id = 1

    @staticmethod
    def parse_id(raw_id: str) -> int | None:
        """Return the integer id for a path segment of plain ASCII digits."""
        if not isinstance(raw_id, str) or not (raw_id.isascii() and raw_id.isdigit()):
            return None
        return int(raw_id)

    async def create(self, name: str, email: str) -> User:
        user = User(id=self._next_id, name=name, email=email)
        self._next_id += 1
        self._users.append(user)
        return user

    async def list(self) -> list[User]:
        return list(self._users)

    async def get_by_id(self, raw_id: str) -> User | None:
        user_id = self.parse_id(raw_id)
        if user_id is None:
            return None
        return next((user for user in self._users if user.id == user_id), None)

    async def delete_by_id(self, raw_id: str) -> bool:
        user_id = self.parse_id(raw_id)
        if user_id is None:
            return False
        for index, user in enumerate(self._users):
            if user.id == user_id:
                del self._users[index]
                return True
        return False

    async def reset(self) -> None:
        self._users.clear()
        self._next_id = 1

    async def close(self) -> None:
        return None
