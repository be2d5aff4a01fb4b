"""List pending requests use case."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import UserSummaryResponse, parse_user_id
from linkbio.domain.service import ConnectionService


class ListRequestsRequest(BaseModel):
    """List pending requests request."""

    user_id: str


class ListRequestsResponse(BaseModel):
    """Users waiting for ``user_id`` to answer, oldest first."""

    requests: list[UserSummaryResponse]


class ListRequestsUseCase(BaseUseCase):
    """Use case backing the notifications view."""

    def __init__(self, connection_service: ConnectionService) -> None:
        """Initialize list requests use case.

        Args:
            connection_service: Connection domain service
        """
        self.connection_service = connection_service

    async def execute(self, request: ListRequestsRequest) -> ListRequestsResponse:
        """Execute list requests flow.

        Raises:
            UserNotFoundError: If user not found
        """
        users = await self.connection_service.list_requests(
            parse_user_id(request.user_id)
        )
        return ListRequestsResponse(
            requests=[UserSummaryResponse.from_domain(u) for u in users]
        )
