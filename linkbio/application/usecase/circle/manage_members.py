"""Circle membership use cases."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import (
    CircleResponse,
    parse_circle_ref,
    parse_user_id,
)
from linkbio.domain.service import CircleService


class CircleMemberRequest(BaseModel):
    """Add or remove one member of a circle."""

    owner_id: str
    ref: str
    member_id: str


class AddCircleMemberUseCase(BaseUseCase):
    """Use case for adding one of the owner's connections to a circle."""

    def __init__(self, circle_service: CircleService) -> None:
        """Initialize add circle member use case.

        Args:
            circle_service: Circle domain service
        """
        self.circle_service = circle_service

    async def execute(self, request: CircleMemberRequest) -> CircleResponse:
        """Execute add member flow.

        Raises:
            UserNotFoundError: If the owner does not exist
            CircleNotFoundError: If the reference does not resolve
            NotConnectedError: If the member is not a connection of the owner
        """
        circle = await self.circle_service.add_member(
            parse_user_id(request.owner_id),
            parse_circle_ref(request.ref),
            parse_user_id(request.member_id),
        )
        return CircleResponse.from_domain(circle)


class RemoveCircleMemberUseCase(BaseUseCase):
    """Use case for removing a member from a circle."""

    def __init__(self, circle_service: CircleService) -> None:
        self.circle_service = circle_service

    async def execute(self, request: CircleMemberRequest) -> CircleResponse:
        circle = await self.circle_service.remove_member(
            parse_user_id(request.owner_id),
            parse_circle_ref(request.ref),
            parse_user_id(request.member_id),
        )
        return CircleResponse.from_domain(circle)
