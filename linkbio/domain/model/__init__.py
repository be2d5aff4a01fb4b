"""Domain model entities for linkbio."""

from linkbio.domain.model.circle import Circle
from linkbio.domain.model.link import Link
from linkbio.domain.model.user import DEFAULT_PROFILE_IMAGE, User

__all__ = [
    "Circle",
    "DEFAULT_PROFILE_IMAGE",
    "Link",
    "User",
]
