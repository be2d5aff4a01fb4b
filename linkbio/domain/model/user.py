"""User aggregate root.

A user owns a public profile page, a list of outbound links, their
connections, the connection requests sent to them, and their circles.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from linkbio.domain.error import CircleNotFoundError
from linkbio.domain.model.circle import Circle
from linkbio.domain.model.common import DomainModel
from linkbio.domain.model.link import Link
from linkbio.domain.value import CircleRef, Socials, UserId, Username

DEFAULT_PROFILE_IMAGE = "/uploads/default.png"


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - ``email`` (lower-cased) and ``username`` are unique across users
    - ``circle_members`` is symmetric across users
    - ``circle_requests`` holds pending incoming requests only, and never
      contains a user that is already in ``circle_members``
    - every circle's members are drawn from ``circle_members``

    ``version`` counts successful saves; 0 means the user was never saved.
    """

    id: UserId
    email: str
    username: Username
    name: Optional[str] = None
    bio: Optional[str] = None
    headline: Optional[str] = None
    socials: Socials = Field(default_factory=Socials)
    profile_image: str = DEFAULT_PROFILE_IMAGE
    links: list[Link] = Field(default_factory=list)
    circle_members: list[UserId] = Field(default_factory=list)
    circle_requests: list[UserId] = Field(default_factory=list)
    circles: list[Circle] = Field(default_factory=list)
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_connected_to(self, user_id: UserId) -> bool:
        return user_id in self.circle_members

    def has_request_from(self, user_id: UserId) -> bool:
        return user_id in self.circle_requests

    def find_circle(self, ref: CircleRef) -> tuple[int, Circle]:
        """Resolve a circle reference to its position and circle.

        Args:
            ref: Position in ``circles`` or a circle ID

        Returns:
            Tuple of (index, circle)

        Raises:
            CircleNotFoundError: If the reference does not resolve
        """
        if isinstance(ref, int):
            if 0 <= ref < len(self.circles):
                return ref, self.circles[ref]
        else:
            for index, circle in enumerate(self.circles):
                if circle.id == ref:
                    return index, circle
        raise CircleNotFoundError(str(ref))

    def with_circle_at(self, index: int, circle: Circle) -> "User":
        """Return a copy with the circle at ``index`` replaced."""
        circles = list(self.circles)
        circles[index] = circle
        return self.model_copy(update={"circles": circles})
