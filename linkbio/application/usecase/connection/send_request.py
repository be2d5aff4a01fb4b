"""Send connection request use case."""

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import parse_user_id
from linkbio.domain.service import ConnectionService

from .common import ConnectionActionResponse, ConnectionRequestBody


class SendConnectionRequestUseCase(BaseUseCase):
    """Use case for asking another user to connect."""

    def __init__(self, connection_service: ConnectionService) -> None:
        """Initialize send connection request use case.

        Args:
            connection_service: Connection domain service
        """
        self.connection_service = connection_service

    async def execute(self, request: ConnectionRequestBody) -> ConnectionActionResponse:
        """Execute send request flow.

        Raises:
            UserNotFoundError: If either user does not exist
            SelfRequestError: If both IDs are the same user
            AlreadyConnectedOrRequestedError: If already pending or connected
        """
        await self.connection_service.send_request(
            parse_user_id(request.from_user_id), parse_user_id(request.to_user_id)
        )
        return ConnectionActionResponse(
            message="Request sent",
            from_user_id=request.from_user_id,
            to_user_id=request.to_user_id,
        )
