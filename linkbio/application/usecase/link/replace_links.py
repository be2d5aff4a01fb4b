"""Replace links use case."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import (
    UserResponse,
    parse_link_id,
    parse_user_id,
)
from linkbio.domain.error import MissingFieldError
from linkbio.domain.model import Link
from linkbio.domain.service import ProfileService


class LinkInput(BaseModel):
    """Link as submitted by the editor. New links have no ID yet."""

    id: str | None = None
    title: str
    url: str
    icon: str | None = None


class ReplaceLinksRequest(BaseModel):
    """Replace links request. ``links`` is the complete, ordered list."""

    user_id: str
    links: list[LinkInput]


class ReplaceLinksUseCase(BaseUseCase):
    """Use case for saving the whole link list (edits and reordering)."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize replace links use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: ReplaceLinksRequest) -> UserResponse:
        """Execute replace links flow.

        Links keep their submitted ID when it is valid; otherwise a new ID
        is assigned.

        Raises:
            UserNotFoundError: If user not found
            MissingFieldError: If any link has a blank title or url
        """
        links: list[Link] = []
        for item in request.links:
            if not item.title.strip():
                raise MissingFieldError("title")
            if not item.url.strip():
                raise MissingFieldError("url")
            link_id = parse_link_id(item.id) if item.id else None
            if link_id is None:
                links.append(Link(title=item.title, url=item.url, icon=item.icon))
            else:
                links.append(
                    Link(id=link_id, title=item.title, url=item.url, icon=item.icon)
                )

        user = await self.profile_service.replace_links(
            parse_user_id(request.user_id), links
        )
        return UserResponse.from_domain(user)
