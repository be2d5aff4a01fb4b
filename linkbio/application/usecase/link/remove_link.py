"""Remove link use case."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import (
    UserResponse,
    parse_link_id,
    parse_user_id,
)
from linkbio.domain.service import ProfileService


class RemoveLinkRequest(BaseModel):
    """Remove link request."""

    user_id: str
    link_id: str


class RemoveLinkUseCase(BaseUseCase):
    """Use case for removing a link. Removing an unknown link is a no-op."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: RemoveLinkRequest) -> UserResponse:
        user_id = parse_user_id(request.user_id)
        link_id = parse_link_id(request.link_id)
        if link_id is None:
            # Malformed IDs cannot match a stored link
            user = await self.profile_service.get_by_id(user_id)
        else:
            user = await self.profile_service.remove_link(user_id, link_id)
        return UserResponse.from_domain(user)
