"""Upload profile image use case."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import UserResponse, parse_user_id
from linkbio.domain.service import ProfileService


class UploadProfileImageRequest(BaseModel):
    """Upload profile image request."""

    user_id: str
    filename: str
    content: bytes


class UploadProfileImageUseCase(BaseUseCase):
    """Use case for storing a new profile image."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize upload profile image use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UploadProfileImageRequest) -> UserResponse:
        """Store the image and return the updated user.

        Raises:
            UserNotFoundError: If user not found
            MissingFieldError: If the upload is empty
        """
        user = await self.profile_service.upload_profile_image(
            parse_user_id(request.user_id), request.filename, request.content
        )
        return UserResponse.from_domain(user)
