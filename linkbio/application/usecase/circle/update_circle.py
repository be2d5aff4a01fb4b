"""Update circle use case."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import (
    CircleResponse,
    parse_circle_ref,
    parse_user_id,
)
from linkbio.domain.service import CircleService


class UpdateCircleRequest(BaseModel):
    """Update circle request. Unset fields are left unchanged."""

    owner_id: str
    ref: str
    name: str | None = None
    order: list[str] | None = None


class UpdateCircleUseCase(BaseUseCase):
    """Use case for renaming and/or reordering a circle."""

    def __init__(self, circle_service: CircleService) -> None:
        """Initialize update circle use case.

        Args:
            circle_service: Circle domain service
        """
        self.circle_service = circle_service

    async def execute(self, request: UpdateCircleRequest) -> CircleResponse:
        """Execute update circle flow.

        Raises:
            UserNotFoundError: If the owner (or an ID in ``order``) is malformed
                or missing
            CircleNotFoundError: If the reference does not resolve
            MissingFieldError: If the new name is blank
            InvalidCircleOrderError: If ``order`` is not a permutation of the
                circle's members
        """
        order = None
        if request.order is not None:
            order = [parse_user_id(member_id) for member_id in request.order]

        circle = await self.circle_service.update_circle(
            parse_user_id(request.owner_id),
            parse_circle_ref(request.ref),
            name=request.name,
            order=order,
        )
        return CircleResponse.from_domain(circle)
