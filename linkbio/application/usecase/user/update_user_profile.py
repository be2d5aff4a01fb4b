"""Update user profile use case."""

from pydantic import BaseModel, Field

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import UserResponse, parse_user_id
from linkbio.domain.service import ProfileService
from linkbio.domain.value import Socials


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request. Unset fields are left unchanged."""

    user_id: str
    name: str | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=1000)
    headline: str | None = Field(default=None, max_length=255)
    socials: Socials | None = None
    username: str | None = Field(default=None, max_length=254)


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for updating a user's profile fields.

    Email, connections and circles cannot be changed through this use case.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update user profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateUserProfileRequest) -> UserResponse:
        """Execute update user profile flow.

        Args:
            request: Request with user ID and fields to update

        Returns:
            Updated user

        Raises:
            UserNotFoundError: If user not found
            UsernameTakenError: If the new username is in use
        """
        user = await self.profile_service.update_profile(
            parse_user_id(request.user_id),
            name=request.name,
            bio=request.bio,
            headline=request.headline,
            socials=request.socials,
            username=request.username,
        )
        return UserResponse.from_domain(user)
