"""Base service class for domain services."""

import logfire

from linkbio.domain.error import UserNotFoundError
from linkbio.domain.model import User
from linkbio.domain.repository import UserRepository
from linkbio.domain.value import UserId


class Service:
    """Base class for all domain services.

    Every service works on user aggregates: it loads them through the
    repository, applies a pure transformation and saves the result.
    """

    user_repository: UserRepository

    async def _require_user(self, user_id: UserId) -> User:
        """Load a user or raise ``UserNotFoundError``."""
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            logfire.warn("User not found", user_id=str(user_id))
            raise UserNotFoundError(str(user_id))
        return user
