"""Decline connection request use case."""

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import parse_user_id
from linkbio.domain.service import ConnectionService

from .common import ConnectionActionResponse, ConnectionRequestBody


class DeclineConnectionRequestUseCase(BaseUseCase):
    """Use case for declining a pending request; absent requests are ignored."""

    def __init__(self, connection_service: ConnectionService) -> None:
        self.connection_service = connection_service

    async def execute(self, request: ConnectionRequestBody) -> ConnectionActionResponse:
        await self.connection_service.decline_request(
            parse_user_id(request.from_user_id), parse_user_id(request.to_user_id)
        )
        return ConnectionActionResponse(
            message="Request declined",
            from_user_id=request.from_user_id,
            to_user_id=request.to_user_id,
        )
