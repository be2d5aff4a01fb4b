"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import String, case, func, literal, select, type_coerce
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from linkbio.domain.error import (
    ConcurrentModificationError,
    EmailTakenError,
    UsernameTakenError,
)
from linkbio.domain.model import User
from linkbio.domain.repository import UserRepository
from linkbio.domain.value import UserId, Username
from linkbio.persistence.mappers import row_to_user, user_to_dict
from linkbio.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        return await self._find_one(
            select(users_table).where(users_table.c.id == user_id)
        )

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find users by ID, preserving the requested order."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        by_id = {
            user.id: user
            for user in (row_to_user(dict(row)) for row in result.mappings().all())
        }
        return [by_id[user_id] for user_id in user_ids if user_id in by_id]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their canonical username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        return await self._find_one(
            select(users_table).where(users_table.c.username == username.root)
        )

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        return await self._find_one(
            select(users_table).where(
                func.lower(users_table.c.email) == email.lower()
            )
        )

    async def list_all(self) -> list[User]:
        """List all users ordered by creation time."""
        stmt = select(users_table).order_by(
            users_table.c.created_at, users_table.c.id
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user with an optimistic version check.

        Inserts when ``user.version`` is 0, otherwise updates the row only
        if its stored version still matches. The write runs in a savepoint
        so a failed write leaves the request transaction usable.

        Args:
            user: User to save

        Returns:
            Saved user with its new version

        Raises:
            ConcurrentModificationError: If the stored version differs
            UsernameTakenError: If the username collides
            EmailTakenError: If the email collides
        """
        new_version = user.version + 1
        values = user_to_dict(user)
        values["version"] = new_version

        try:
            async with self.session.begin_nested():
                if user.version == 0:
                    await self.session.execute(users_table.insert().values(**values))
                else:
                    values.pop("id")
                    values.pop("created_at")
                    stmt = (
                        users_table.update()
                        .where(users_table.c.id == user.id)
                        .where(users_table.c.version == user.version)
                        .values(**values)
                    )
                    result = await self.session.execute(stmt)
                    if result.rowcount == 0:
                        raise ConcurrentModificationError("User", str(user.id))
        except IntegrityError as e:
            if "username" in str(e.orig):
                raise UsernameTakenError(user.username.root) from e
            raise EmailTakenError(user.email) from e

        return user.model_copy(update={"version": new_version})

    async def add_connection(self, user_id: UserId, other_id: UserId) -> bool:
        """Atomically connect ``user_id`` to ``other_id`` in one UPDATE.

        Args:
            user_id: User whose record is updated
            other_id: User being connected

        Returns:
            True if the user exists, False otherwise
        """
        other = str(other_id)
        members = users_table.c.circle_members
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                circle_members=case(
                    (members.contains([other]), members),
                    else_=members.op("||")(type_coerce([other], JSONB)),
                ),
                circle_requests=users_table.c.circle_requests.op("-")(
                    literal(other, String)
                ),
                version=users_table.c.version + 1,
                updated_at=func.now(),
            )
            .returning(users_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.first() is not None
