"""Domain value objects for linkbio."""

from linkbio.domain.value.identifiers import CircleId, LinkId, UserId
from linkbio.domain.value.types import CircleRef, Socials, Username

__all__ = [
    # Identifiers
    "UserId",
    "CircleId",
    "LinkId",
    # Types
    "CircleRef",
    "Socials",
    "Username",
]
