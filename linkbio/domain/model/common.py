"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable. ``evolve`` produces a changed copy and,
    unlike ``model_copy``, runs field validation on the result.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy with ``changes`` applied."""
        return self.model_validate({**dict(self), **changes})
