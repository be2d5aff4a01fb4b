"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Base class for multi-field value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects wrapping a single primitive.

    The wrapped value is available as ``.root`` and ``model_dump()`` returns
    the primitive itself, so these serialize transparently inside domain
    models and API responses.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
