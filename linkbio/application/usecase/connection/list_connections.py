"""List connections use case."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import UserSummaryResponse, parse_user_id
from linkbio.domain.service import ConnectionService


class ListConnectionsRequest(BaseModel):
    """List connections request."""

    user_id: str


class ListConnectionsResponse(BaseModel):
    """List connections response."""

    connections: list[UserSummaryResponse]


class ListConnectionsUseCase(BaseUseCase):
    """Use case for listing a user's connections."""

    def __init__(self, connection_service: ConnectionService) -> None:
        self.connection_service = connection_service

    async def execute(self, request: ListConnectionsRequest) -> ListConnectionsResponse:
        users = await self.connection_service.list_connections(
            parse_user_id(request.user_id)
        )
        return ListConnectionsResponse(
            connections=[UserSummaryResponse.from_domain(u) for u in users]
        )
