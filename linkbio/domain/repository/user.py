"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from linkbio.domain.model.user import User
from linkbio.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find users by ID, preserving the order of ``user_ids``.

        Unknown IDs are skipped.

        Args:
            user_ids: User IDs to look up

        Returns:
            Users found, in the requested order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their canonical username.

        Args:
            username: The ``@``-prefixed username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users ordered by creation time."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update) with an optimistic version check.

        A user with ``version == 0`` is inserted. Otherwise the stored
        record is replaced only if its version still equals ``user.version``.

        Args:
            user: The user to save

        Returns:
            The saved user with its version incremented

        Raises:
            ConcurrentModificationError: If the stored version differs
            UsernameTakenError: If the username collides on insert
            EmailTakenError: If the email collides on insert
        """
        pass

    @abstractmethod
    async def add_connection(self, user_id: UserId, other_id: UserId) -> bool:
        """Atomically connect ``user_id`` to ``other_id`` on one record.

        Appends ``other_id`` to ``circle_members`` if absent and drops any
        pending request from ``other_id``. No version check is made, but the
        stored version is incremented so concurrent savers see the change.

        Args:
            user_id: The user whose record is updated
            other_id: The user being connected

        Returns:
            True if the record exists and was updated, False otherwise
        """
        pass
