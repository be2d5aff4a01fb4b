"""Delete circle use case."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.circle.create_circle import CircleListResponse
from linkbio.application.usecase.common import (
    CircleResponse,
    parse_circle_ref,
    parse_user_id,
)
from linkbio.domain.service import CircleService


class DeleteCircleRequest(BaseModel):
    """Delete circle request."""

    owner_id: str
    ref: str


class DeleteCircleUseCase(BaseUseCase):
    """Use case for deleting a circle. Connections are kept."""

    def __init__(self, circle_service: CircleService) -> None:
        self.circle_service = circle_service

    async def execute(self, request: DeleteCircleRequest) -> CircleListResponse:
        circles = await self.circle_service.delete_circle(
            parse_user_id(request.owner_id), parse_circle_ref(request.ref)
        )
        return CircleListResponse(
            circles=[CircleResponse.from_domain(c) for c in circles]
        )
