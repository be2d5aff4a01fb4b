"""Create user use case."""

from pydantic import BaseModel, Field

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import UserResponse
from linkbio.domain.service import ProfileService


class CreateUserRequest(BaseModel):
    """Create user request.

    ``email`` and ``name`` normally come from the identity provider;
    ``username`` is chosen by the user.
    """

    email: str = Field(max_length=320)
    username: str = Field(max_length=254)
    name: str | None = Field(default=None, max_length=255)
    profile_image: str | None = None


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a new user profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize create user use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Execute create user flow.

        Args:
            request: Create user request

        Returns:
            The created user

        Raises:
            MissingFieldError: If email or username is blank
            UsernameTakenError: If the username is in use
            EmailTakenError: If the email is already registered
        """
        user = await self.profile_service.create_user(
            email=request.email,
            username=request.username,
            name=request.name,
            profile_image=request.profile_image,
        )
        return UserResponse.from_domain(user)
