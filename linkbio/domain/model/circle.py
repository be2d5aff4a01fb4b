"""Circle entity.

A circle is a named, owner-curated grouping of the owner's connections.
It has no identity outside its owning user.
"""

from uuid import uuid4

from pydantic import Field, model_validator

from linkbio.domain.model.common import DomainModel
from linkbio.domain.value import CircleId, UserId


class Circle(DomainModel):
    """Circle embedded in a user record.

    Invariants:
    - ``members`` and ``order`` hold the same ids, each exactly once
    - ``order`` is the display sequence, ``members`` the membership set
    """

    id: CircleId = Field(default_factory=lambda: CircleId(uuid4()))
    name: str = Field(min_length=1)
    members: list[UserId] = Field(default_factory=list)
    order: list[UserId] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_members_match_order(self) -> "Circle":
        """Validate that members and order list the same ids once each."""
        if len(set(self.members)) != len(self.members):
            raise ValueError("Circle members must not repeat")
        if len(set(self.order)) != len(self.order):
            raise ValueError("Circle order must not repeat")
        if set(self.members) != set(self.order):
            raise ValueError("Circle order must list exactly the circle members")
        return self

    def has_member(self, user_id: UserId) -> bool:
        return user_id in self.members

    def with_member(self, user_id: UserId) -> "Circle":
        """Return a copy with ``user_id`` appended to members and order.

        Adding an existing member returns the circle unchanged.
        """
        if self.has_member(user_id):
            return self
        return self.evolve(
            members=[*self.members, user_id], order=[*self.order, user_id]
        )

    def without_member(self, user_id: UserId) -> "Circle":
        """Return a copy with ``user_id`` removed from members and order."""
        return self.evolve(
            members=[m for m in self.members if m != user_id],
            order=[m for m in self.order if m != user_id],
        )

    def is_valid_order(self, order: list[UserId]) -> bool:
        """Whether ``order`` lists every member exactly once."""
        return len(order) == len(set(order)) and set(order) == set(self.members)

    def reordered(self, order: list[UserId]) -> "Circle":
        """Return a copy with the display order replaced.

        Callers validate ``order`` with ``is_valid_order`` first.
        """
        return self.evolve(order=list(order))

    def renamed(self, name: str) -> "Circle":
        """Return a copy with a new name; blank names fail validation."""
        return self.evolve(name=name)
