"""Create circle use case."""

from pydantic import BaseModel

from linkbio.application.usecase.base import BaseUseCase
from linkbio.application.usecase.common import CircleResponse, parse_user_id
from linkbio.domain.service import CircleService


class CreateCircleRequest(BaseModel):
    """Create circle request."""

    owner_id: str
    name: str


class CircleListResponse(BaseModel):
    """All of an owner's circles in display order."""

    circles: list[CircleResponse]


class CreateCircleUseCase(BaseUseCase):
    """Use case for creating an empty circle."""

    def __init__(self, circle_service: CircleService) -> None:
        """Initialize create circle use case.

        Args:
            circle_service: Circle domain service
        """
        self.circle_service = circle_service

    async def execute(self, request: CreateCircleRequest) -> CircleListResponse:
        """Execute create circle flow.

        Returns:
            The owner's circles, the new one last

        Raises:
            UserNotFoundError: If the owner does not exist
            MissingFieldError: If the name is blank
        """
        circles = await self.circle_service.create_circle(
            parse_user_id(request.owner_id), request.name
        )
        return CircleListResponse(
            circles=[CircleResponse.from_domain(c) for c in circles]
        )
