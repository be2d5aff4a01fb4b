"""Get user use case."""

from pydantic import BaseModel, model_validator

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import UserResponse, parse_user_id
from linkbio.domain.service import ProfileService


class GetUserRequest(BaseModel):
    """Get user request - exactly one lookup key is set."""

    user_id: str | None = None
    username: str | None = None
    email: str | None = None

    @model_validator(mode="after")
    def check_single_key(self) -> "GetUserRequest":
        keys = [k for k in (self.user_id, self.username, self.email) if k is not None]
        if len(keys) != 1:
            raise ValueError("Exactly one of user_id, username or email is required")
        return self


class GetUserUseCase(BaseUseCase):
    """Use case for looking up a user by ID, username or email."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get user use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Execute get user flow.

        Args:
            request: Request with one lookup key

        Returns:
            The user

        Raises:
            UserNotFoundError: If no user matches
        """
        if request.user_id is not None:
            user = await self.profile_service.get_by_id(parse_user_id(request.user_id))
        elif request.username is not None:
            user = await self.profile_service.get_by_username(request.username)
        else:
            user = await self.profile_service.get_by_email(request.email or "")
        return UserResponse.from_domain(user)
