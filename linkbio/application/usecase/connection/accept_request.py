"""Accept connection request use case."""

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import parse_user_id
from linkbio.domain.service import ConnectionService

from .common import ConnectionActionResponse, ConnectionRequestBody


class AcceptConnectionRequestUseCase(BaseUseCase):
    """Use case for accepting a pending request.

    ``to_user_id`` is the accepting user.
    """

    def __init__(self, connection_service: ConnectionService) -> None:
        """Initialize accept connection request use case.

        Args:
            connection_service: Connection domain service
        """
        self.connection_service = connection_service

    async def execute(self, request: ConnectionRequestBody) -> ConnectionActionResponse:
        """Execute accept flow.

        Raises:
            UserNotFoundError: If either user does not exist
            NoSuchRequestError: If no request is pending
            ConcurrentModificationError: If the recipient changed meanwhile
            ConsistencyFault: If only one side could be updated
        """
        await self.connection_service.accept_request(
            parse_user_id(request.from_user_id), parse_user_id(request.to_user_id)
        )
        return ConnectionActionResponse(
            message="Connection accepted",
            from_user_id=request.from_user_id,
            to_user_id=request.to_user_id,
        )
