"""List users use case."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import UserResponse
from linkbio.domain.service import ProfileService


class ListUsersRequest(BaseModel):
    """List users request. ``query`` filters by username or name."""

    query: str | None = None


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserResponse]
    total: int


class ListUsersUseCase(BaseUseCase):
    """Use case for listing and searching users."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize list users use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Args:
            request: Request with optional search query

        Returns:
            Matching users (all users without a query)
        """
        if request.query:
            users = await self.profile_service.search(request.query)
        else:
            users = await self.profile_service.list_all()
        return ListUsersResponse(
            users=[UserResponse.from_domain(u) for u in users], total=len(users)
        )
