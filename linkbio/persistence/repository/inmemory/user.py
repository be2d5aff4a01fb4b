"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from linkbio.domain.error import (
    ConcurrentModificationError,
    EmailTakenError,
    UsernameTakenError,
)
from linkbio.domain.model.user import User
from linkbio.domain.repository.user import UserRepository
from linkbio.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same unique keys and version check as the PostgreSQL
    implementation. Check and write happen without an ``await`` in
    between, so each save is atomic on the event loop.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find users by ID, preserving the requested order."""
        return [self._users[u] for u in user_ids if u in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their canonical username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        for user in self._users.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def list_all(self) -> list[User]:
        """List all users in insertion order."""
        return list(self._users.values())

    async def save(self, user: User) -> User:
        """Save a user with an optimistic version check."""
        stored = self._users.get(user.id)
        if user.version == 0 and stored is not None:
            raise ConcurrentModificationError("User", str(user.id))
        if user.version > 0 and (stored is None or stored.version != user.version):
            raise ConcurrentModificationError("User", str(user.id))

        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.username == user.username:
                raise UsernameTakenError(user.username.root)
            if other.email.lower() == user.email.lower():
                raise EmailTakenError(user.email)

        saved = user.model_copy(update={"version": user.version + 1})
        self._users[user.id] = saved
        return saved

    async def add_connection(self, user_id: UserId, other_id: UserId) -> bool:
        """Atomically connect ``user_id`` to ``other_id``."""
        user = self._users.get(user_id)
        if not user:
            return False
        members = list(user.circle_members)
        if other_id not in members:
            members.append(other_id)
        self._users[user_id] = user.model_copy(
            update={
                "circle_members": members,
                "circle_requests": [r for r in user.circle_requests if r != other_id],
                "version": user.version + 1,
                "updated_at": datetime.now(),
            }
        )
        return True
