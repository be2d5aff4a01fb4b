"""Circle domain service.

Circles are owned by one user and addressed either by their position in the
owner's circle list or by their stable ID. Positions shift down by one
after a delete; IDs never change.
"""

from datetime import datetime

import logfire

from linkbio.domain.error import (
    InvalidCircleOrderError,
    MissingFieldError,
    NotConnectedError,
)
from linkbio.domain.model import Circle, User
from linkbio.domain.repository import UserRepository
from linkbio.domain.value import CircleRef, UserId

from .base import Service


class CircleService(Service):
    """Domain service for circle management."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize circle service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def _save_circle(self, owner: User, index: int, circle: Circle) -> Circle:
        updated = owner.with_circle_at(index, circle).model_copy(
            update={"updated_at": datetime.now()}
        )
        saved = await self.user_repository.save(updated)
        return saved.circles[index]

    async def create_circle(self, owner_id: UserId, name: str) -> list[Circle]:
        """Append a new, empty circle.

        Circle names need not be unique.

        Args:
            owner_id: Owner of the circle
            name: Display name

        Returns:
            The owner's full circle list

        Raises:
            UserNotFoundError: If the owner does not exist
            MissingFieldError: If the name is blank
        """
        if not name or not name.strip():
            raise MissingFieldError("name")

        with logfire.span(
            "circle_service.create_circle", owner_id=str(owner_id), name=name
        ):
            owner = await self._require_user(owner_id)
            circle = Circle(name=name)
            saved = await self.user_repository.save(
                owner.model_copy(
                    update={
                        "circles": [*owner.circles, circle],
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info(
                "Circle created", owner_id=str(owner_id), circle_id=str(circle.id)
            )
            return saved.circles

    async def update_circle(
        self,
        owner_id: UserId,
        ref: CircleRef,
        name: str | None = None,
        order: list[UserId] | None = None,
    ) -> Circle:
        """Rename and/or reorder a circle.

        Args:
            owner_id: Owner of the circle
            ref: Circle position or ID
            name: New name, unchanged if None
            order: New display order, unchanged if None; must list every
                member exactly once

        Returns:
            Updated circle, or the stored one if nothing changes

        Raises:
            UserNotFoundError: If the owner does not exist
            CircleNotFoundError: If the reference does not resolve
            MissingFieldError: If the new name is blank
            InvalidCircleOrderError: If ``order`` is not a permutation of
                the circle's members
        """
        with logfire.span(
            "circle_service.update_circle", owner_id=str(owner_id), ref=str(ref)
        ):
            owner = await self._require_user(owner_id)
            index, circle = owner.find_circle(ref)
            if name is None and order is None:
                return circle

            if name is not None:
                if not name.strip():
                    raise MissingFieldError("name")
                circle = circle.renamed(name)
            if order is not None:
                if not circle.is_valid_order(order):
                    logfire.warn(
                        "Rejected circle order",
                        owner_id=str(owner_id),
                        circle_id=str(circle.id),
                    )
                    raise InvalidCircleOrderError(str(circle.id))
                circle = circle.reordered(order)

            saved = await self._save_circle(owner, index, circle)
            logfire.info(
                "Circle updated",
                owner_id=str(owner_id),
                circle_id=str(saved.id),
                renamed=name is not None,
                reordered=order is not None,
            )
            return saved

    async def rename_circle(
        self, owner_id: UserId, ref: CircleRef, name: str
    ) -> Circle:
        """Replace a circle's name."""
        return await self.update_circle(owner_id, ref, name=name)

    async def reorder_circle(
        self, owner_id: UserId, ref: CircleRef, order: list[UserId]
    ) -> Circle:
        """Replace a circle's display order."""
        return await self.update_circle(owner_id, ref, order=order)

    async def delete_circle(self, owner_id: UserId, ref: CircleRef) -> list[Circle]:
        """Delete a circle.

        Connections and other circles are untouched; circles after the
        deleted one move up by one position.

        Returns:
            The owner's remaining circles

        Raises:
            UserNotFoundError: If the owner does not exist
            CircleNotFoundError: If the reference does not resolve
        """
        with logfire.span(
            "circle_service.delete_circle", owner_id=str(owner_id), ref=str(ref)
        ):
            owner = await self._require_user(owner_id)
            index, circle = owner.find_circle(ref)
            circles = [*owner.circles[:index], *owner.circles[index + 1 :]]
            saved = await self.user_repository.save(
                owner.model_copy(
                    update={"circles": circles, "updated_at": datetime.now()}
                )
            )
            logfire.info(
                "Circle deleted", owner_id=str(owner_id), circle_id=str(circle.id)
            )
            return saved.circles

    async def add_member(
        self, owner_id: UserId, ref: CircleRef, member_id: UserId
    ) -> Circle:
        """Add one of the owner's connections to a circle.

        Adding an existing member returns the circle unchanged.

        Returns:
            The circle

        Raises:
            UserNotFoundError: If the owner does not exist
            CircleNotFoundError: If the reference does not resolve
            NotConnectedError: If ``member_id`` is not a connection of the owner
        """
        with logfire.span(
            "circle_service.add_member",
            owner_id=str(owner_id),
            ref=str(ref),
            member_id=str(member_id),
        ):
            owner = await self._require_user(owner_id)
            index, circle = owner.find_circle(ref)

            if circle.has_member(member_id):
                return circle
            if not owner.is_connected_to(member_id):
                logfire.warn(
                    "Circle member is not a connection",
                    owner_id=str(owner_id),
                    member_id=str(member_id),
                )
                raise NotConnectedError(str(owner_id), str(member_id))

            saved = await self._save_circle(owner, index, circle.with_member(member_id))
            logfire.info(
                "Circle member added",
                owner_id=str(owner_id),
                circle_id=str(saved.id),
                member_id=str(member_id),
            )
            return saved

    async def remove_member(
        self, owner_id: UserId, ref: CircleRef, member_id: UserId
    ) -> Circle:
        """Remove a member from a circle. Removing a non-member is a no-op.

        The connection itself is kept.

        Raises:
            UserNotFoundError: If the owner does not exist
            CircleNotFoundError: If the reference does not resolve
        """
        with logfire.span(
            "circle_service.remove_member",
            owner_id=str(owner_id),
            ref=str(ref),
            member_id=str(member_id),
        ):
            owner = await self._require_user(owner_id)
            index, circle = owner.find_circle(ref)

            if not circle.has_member(member_id):
                return circle

            saved = await self._save_circle(
                owner, index, circle.without_member(member_id)
            )
            logfire.info(
                "Circle member removed",
                owner_id=str(owner_id),
                circle_id=str(saved.id),
                member_id=str(member_id),
            )
            return saved
