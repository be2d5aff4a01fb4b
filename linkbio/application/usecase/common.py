"""Response models and identifier parsing shared by use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from linkbio.domain.error import CircleNotFoundError, UserNotFoundError
from linkbio.domain.model import Circle, Link, User
from linkbio.domain.value import CircleId, CircleRef, LinkId, Socials, UserId


def parse_user_id(raw: str) -> UserId:
    """Convert a raw user ID, treating malformed IDs as unknown users.

    Raises:
        UserNotFoundError: If ``raw`` is not a valid ID
    """
    try:
        return UserId(UUID(raw))
    except (TypeError, ValueError):
        raise UserNotFoundError(raw)


def parse_link_id(raw: str) -> LinkId | None:
    """Convert a raw link ID; None when malformed (and so matching no link)."""
    try:
        return LinkId(UUID(raw))
    except (TypeError, ValueError):
        return None


def parse_circle_ref(raw: str) -> CircleRef:
    """Convert a raw circle reference: a position or a circle ID.

    Raises:
        CircleNotFoundError: If ``raw`` is neither
    """
    if raw.isdecimal():
        return int(raw)
    try:
        return CircleId(UUID(raw))
    except ValueError:
        raise CircleNotFoundError(raw)


class LinkResponse(BaseModel):
    """Outbound link."""

    id: str
    title: str
    url: str
    icon: str | None

    @classmethod
    def from_domain(cls, link: Link) -> "LinkResponse":
        return cls(id=str(link.id), title=link.title, url=link.url, icon=link.icon)


class CircleResponse(BaseModel):
    """Circle with its members in set and display order."""

    id: str
    name: str
    members: list[str]
    order: list[str]

    @classmethod
    def from_domain(cls, circle: Circle) -> "CircleResponse":
        return cls(
            id=str(circle.id),
            name=circle.name,
            members=[str(m) for m in circle.members],
            order=[str(m) for m in circle.order],
        )


class UserSummaryResponse(BaseModel):
    """Public summary of a user, used in lists."""

    id: str
    username: str
    name: str | None
    headline: str | None
    profile_image: str

    @classmethod
    def from_domain(cls, user: User) -> "UserSummaryResponse":
        return cls(
            id=str(user.id),
            username=user.username.root,
            name=user.name,
            headline=user.headline,
            profile_image=user.profile_image,
        )


class UserResponse(BaseModel):
    """Full user record."""

    id: str
    email: str
    username: str
    name: str | None
    bio: str | None
    headline: str | None
    socials: Socials
    profile_image: str
    links: list[LinkResponse]
    circle_members: list[str]
    circle_requests: list[str]
    circles: list[CircleResponse]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        """Convert a domain user to its response model."""
        return cls(
            id=str(user.id),
            email=user.email,
            username=user.username.root,
            name=user.name,
            bio=user.bio,
            headline=user.headline,
            socials=user.socials,
            profile_image=user.profile_image,
            links=[LinkResponse.from_domain(link) for link in user.links],
            circle_members=[str(m) for m in user.circle_members],
            circle_requests=[str(r) for r in user.circle_requests],
            circles=[CircleResponse.from_domain(c) for c in user.circles],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
