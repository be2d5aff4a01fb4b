"""Profile domain service.

Owns user records: identity (email and username uniqueness), profile
fields, outbound links and the profile image.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from linkbio.domain.error import (
    EmailTakenError,
    MissingFieldError,
    UsernameTakenError,
    UserNotFoundError,
)
from linkbio.domain.model import DEFAULT_PROFILE_IMAGE, Link, User
from linkbio.domain.repository import UserRepository
from linkbio.domain.value import LinkId, Socials, UserId, Username

from .base import Service
from .image_storage import ImageStorage


def normalize_email(email: str) -> str:
    """Canonical email form used for storage and lookups."""
    return email.strip().lower()


def parse_username(raw: str | None) -> Username:
    """Build a canonical username, rejecting blank input."""
    if raw is None or not raw.strip().lstrip("@"):
        raise MissingFieldError("username")
    return Username(raw)


class ProfileService(Service):
    """Domain service for user profile operations."""

    def __init__(
        self, user_repository: UserRepository, image_storage: ImageStorage
    ) -> None:
        """Initialize profile service.

        Args:
            user_repository: User repository
            image_storage: Storage for uploaded profile images
        """
        self.user_repository = user_repository
        self.image_storage = image_storage

    async def create_user(
        self,
        email: str,
        username: str,
        name: str | None = None,
        profile_image: str | None = None,
    ) -> User:
        """Create a new user.

        Args:
            email: Email supplied by the identity provider
            username: Requested username, with or without ``@``
            name: Display name (defaults to the username)
            profile_image: Image path (defaults to the placeholder image)

        Returns:
            Created user

        Raises:
            MissingFieldError: If email or username is blank
            UsernameTakenError: If the username is in use
            EmailTakenError: If the email is already registered
        """
        if not email or not email.strip():
            raise MissingFieldError("email")
        canonical = parse_username(username)
        email = normalize_email(email)

        with logfire.span(
            "profile_service.create_user", username=canonical.root, email=email
        ):
            if await self.user_repository.find_by_username(canonical):
                logfire.warn("Username already taken", username=canonical.root)
                raise UsernameTakenError(canonical.root)
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", email=email)
                raise EmailTakenError(email)

            user = User(
                id=UserId(uuid4()),
                email=email,
                username=canonical,
                name=name or canonical.root,
                profile_image=profile_image or DEFAULT_PROFILE_IMAGE,
            )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User created", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            UserNotFoundError: If user not found
        """
        with logfire.span("profile_service.get_by_id", user_id=str(user_id)):
            return await self._require_user(user_id)

    async def get_by_username(self, username: str) -> User:
        """Get user by username, with or without the ``@`` prefix.

        Raises:
            UserNotFoundError: If user not found
        """
        with logfire.span("profile_service.get_by_username", username=username):
            if not username.strip().lstrip("@"):
                raise UserNotFoundError(username)
            try:
                canonical = Username(username)
            except ValueError:
                # Too long to ever have been registered
                raise UserNotFoundError(username)
            user = await self.user_repository.find_by_username(canonical)
            if not user:
                logfire.warn("User not found", username=username)
                raise UserNotFoundError(username)
            return user

    async def get_by_email(self, email: str) -> User:
        """Get user by email, ignoring case.

        Raises:
            UserNotFoundError: If user not found
        """
        with logfire.span("profile_service.get_by_email", email=email):
            user = await self.user_repository.find_by_email(normalize_email(email))
            if not user:
                logfire.warn("User not found", email=email)
                raise UserNotFoundError(email)
            return user

    async def list_all(self) -> list[User]:
        """List every user."""
        with logfire.span("profile_service.list_all"):
            users = await self.user_repository.list_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def search(self, query: str) -> list[User]:
        """Find users whose username or name contains ``query``.

        Matching is case-insensitive. A blank query returns every user.

        Args:
            query: Search text

        Returns:
            Matching users
        """
        with logfire.span("profile_service.search", query=query):
            users = await self.user_repository.list_all()
            needle = query.strip().lower()
            if not needle:
                return users
            matches = [
                user
                for user in users
                if needle in user.username.root.lower()
                or (user.name is not None and needle in user.name.lower())
            ]
            logfire.info("Users searched", query=query, count=len(matches))
            return matches

    async def update_profile(
        self,
        user_id: UserId,
        name: str | None = None,
        bio: str | None = None,
        headline: str | None = None,
        socials: Socials | None = None,
        username: str | None = None,
    ) -> User:
        """Update profile fields.

        Fields left as None are not changed. A new username is normalized
        the same way as on creation.

        Raises:
            UserNotFoundError: If user not found
            UsernameTakenError: If the new username belongs to someone else
        """
        with logfire.span("profile_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            update: dict = {"updated_at": datetime.now()}

            if username is not None:
                canonical = parse_username(username)
                if canonical != user.username:
                    existing = await self.user_repository.find_by_username(canonical)
                    if existing and existing.id != user.id:
                        logfire.warn(
                            "Username already taken", username=canonical.root
                        )
                        raise UsernameTakenError(canonical.root)
                update["username"] = canonical
            if name is not None:
                update["name"] = name
            if bio is not None:
                update["bio"] = bio
            if headline is not None:
                update["headline"] = headline
            if socials is not None:
                update["socials"] = socials

            saved = await self.user_repository.save(user.model_copy(update=update))
            logfire.info(
                "Profile updated",
                user_id=str(user_id),
                fields=sorted(k for k in update if k != "updated_at"),
            )
            return saved

    async def set_profile_image(self, user_id: UserId, path: str) -> User:
        """Point the user's profile image at ``path``."""
        with logfire.span(
            "profile_service.set_profile_image", user_id=str(user_id), path=path
        ):
            user = await self.get_by_id(user_id)
            return await self.user_repository.save(
                user.model_copy(
                    update={"profile_image": path, "updated_at": datetime.now()}
                )
            )

    async def upload_profile_image(
        self, user_id: UserId, filename: str, content: bytes
    ) -> User:
        """Store an uploaded image and make it the user's profile image.

        Raises:
            UserNotFoundError: If user not found
            MissingFieldError: If the upload is empty
        """
        with logfire.span(
            "profile_service.upload_profile_image",
            user_id=str(user_id),
            filename=filename,
            size=len(content),
        ):
            # Check the user first so orphaned files are not written
            await self.get_by_id(user_id)
            if not content:
                raise MissingFieldError("image")
            path = await self.image_storage.store(filename, content)
            logfire.info("Profile image stored", user_id=str(user_id), path=path)
            return await self.set_profile_image(user_id, path)

    async def add_link(
        self, user_id: UserId, title: str, url: str, icon: str | None = None
    ) -> User:
        """Append a link to the user's profile.

        Raises:
            UserNotFoundError: If user not found
            MissingFieldError: If title or url is blank
        """
        if not title or not title.strip():
            raise MissingFieldError("title")
        if not url or not url.strip():
            raise MissingFieldError("url")

        with logfire.span("profile_service.add_link", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            link = Link(title=title, url=url, icon=icon)
            saved = await self.user_repository.save(
                user.model_copy(
                    update={"links": [*user.links, link], "updated_at": datetime.now()}
                )
            )
            logfire.info("Link added", user_id=str(user_id), link_id=str(link.id))
            return saved

    async def remove_link(self, user_id: UserId, link_id: LinkId) -> User:
        """Remove a link from the user's profile. Unknown links are ignored."""
        with logfire.span(
            "profile_service.remove_link", user_id=str(user_id), link_id=str(link_id)
        ):
            user = await self.get_by_id(user_id)
            links = [link for link in user.links if link.id != link_id]
            if len(links) == len(user.links):
                return user
            return await self.user_repository.save(
                user.model_copy(update={"links": links, "updated_at": datetime.now()})
            )

    async def replace_links(self, user_id: UserId, links: list[Link]) -> User:
        """Replace the user's whole link list (used to save edits and reorder)."""
        with logfire.span(
            "profile_service.replace_links", user_id=str(user_id), count=len(links)
        ):
            user = await self.get_by_id(user_id)
            return await self.user_repository.save(
                user.model_copy(
                    update={"links": list(links), "updated_at": datetime.now()}
                )
            )
