"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Embedded documents are
stored as JSON with string identifiers.
"""

from typing import Any, Dict
from uuid import UUID

from linkbio.domain.model import Circle, Link, User
from linkbio.domain.value import CircleId, LinkId, Socials, UserId, Username


def _uuid(value: Any) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


def _user_ids(values: list[Any]) -> list[UserId]:
    return [UserId(_uuid(v)) for v in values]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        username=Username(row["username"]),
        name=row.get("name"),
        bio=row.get("bio"),
        headline=row.get("headline"),
        profile_image=row["profile_image"],
        socials=Socials(**(row.get("socials") or {})),
        links=[
            Link(
                id=LinkId(_uuid(link["id"])),
                title=link["title"],
                url=link["url"],
                icon=link.get("icon"),
            )
            for link in row.get("links") or []
        ],
        circle_members=_user_ids(row.get("circle_members") or []),
        circle_requests=_user_ids(row.get("circle_requests") or []),
        circles=[
            Circle(
                id=CircleId(_uuid(circle["id"])),
                name=circle["name"],
                members=_user_ids(circle.get("members", [])),
                order=_user_ids(circle.get("order", [])),
            )
            for circle in row.get("circles") or []
        ],
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    document = user.model_dump(
        mode="json",
        include={"socials", "links", "circle_members", "circle_requests", "circles"},
    )
    return {
        "id": user.id,
        "email": user.email,
        "username": user.username.root,
        "name": user.name,
        "bio": user.bio,
        "headline": user.headline,
        "profile_image": user.profile_image,
        "version": user.version,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
        **document,
    }
