"""Domain value objects for linkbio.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation and normalization rules.
"""

from typing import Union

from pydantic import field_validator

from linkbio.domain.value.common import RootValueObject, ValueObject
from linkbio.domain.value.identifiers import CircleId

USERNAME_PREFIX = "@"


class Username(RootValueObject[str]):
    """Public username.

    The canonical form always starts with ``@``. Any username supplied
    without the prefix is given one, so ``Username("alice")`` and
    ``Username("@alice")`` are equal.
    """

    @field_validator("root")
    @classmethod
    def normalize_username(cls, v: str) -> str:
        """Strip whitespace and apply the ``@`` prefix."""
        v = v.strip()
        if not v.startswith(USERNAME_PREFIX):
            v = f"{USERNAME_PREFIX}{v}"
        if len(v) < 2 or len(v) > 255:
            raise ValueError("Username must be 1-254 characters")
        return v


class Socials(ValueObject):
    """Social platform links shown on a profile."""

    facebook: str | None = None
    x: str | None = None
    instagram: str | None = None
    linkedin: str | None = None
    github: str | None = None


# A circle is addressed either by its position in the owner's circle list
# or by its stable identifier.
CircleRef = Union[int, CircleId]
