"""Add link use case."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import UserResponse, parse_user_id
from linkbio.domain.service import ProfileService


class AddLinkRequest(BaseModel):
    """Add link request."""

    user_id: str
    title: str
    url: str
    icon: str | None = None


class AddLinkUseCase(BaseUseCase):
    """Use case for appending a link to a profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize add link use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: AddLinkRequest) -> UserResponse:
        """Execute add link flow.

        Args:
            request: Request with owner ID and link fields

        Returns:
            Updated user, new link last

        Raises:
            UserNotFoundError: If user not found
            MissingFieldError: If title or url is blank
        """
        user = await self.profile_service.add_link(
            parse_user_id(request.user_id),
            title=request.title,
            url=request.url,
            icon=request.icon,
        )
        return UserResponse.from_domain(user)
