"""Circle routes.

``{ref}`` is either the circle's position in the owner's list (``0``,
``1``, ...) or its ID.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from linkbio.application.usecase.circle import (
    AddCircleMemberUseCase,
    CircleListResponse,
    CircleMemberRequest,
    CreateCircleRequest,
    CreateCircleUseCase,
    DeleteCircleRequest,
    DeleteCircleUseCase,
    RemoveCircleMemberUseCase,
    UpdateCircleRequest,
    UpdateCircleUseCase,
)
from linkbio.application.usecase.common import CircleResponse

router = APIRouter(prefix="/users", tags=["circles"], route_class=DishkaRoute)


class CreateCircleAPIRequest(BaseModel):
    """API request for creating a circle."""

    name: str


class UpdateCircleAPIRequest(BaseModel):
    """API request for renaming and/or reordering a circle."""

    name: str | None = None
    order: list[str] | None = None


class AddCircleMemberAPIRequest(BaseModel):
    """API request for adding a member to a circle."""

    member_id: str


@router.post(
    "/{user_id}/circles",
    response_model=CircleListResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_circle(
    user_id: str,
    request: CreateCircleAPIRequest,
    create_circle_use_case: FromDishka[CreateCircleUseCase],
) -> CircleListResponse:
    """Create an empty circle.

    Example:
        POST /users/{user_id}/circles

        Request:
        {"name": "Inner Circle"}

        Response:
        {"circles": [{"id": "...", "name": "Inner Circle", "members": [], "order": []}]}
    """
    return await create_circle_use_case.execute(
        CreateCircleRequest(owner_id=user_id, name=request.name)
    )


@router.patch("/{user_id}/circles/{ref}", response_model=CircleResponse)
async def update_circle(
    user_id: str,
    ref: str,
    request: UpdateCircleAPIRequest,
    update_circle_use_case: FromDishka[UpdateCircleUseCase],
) -> CircleResponse:
    """Rename and/or reorder a circle.

    ``order`` must list every current member exactly once.
    """
    return await update_circle_use_case.execute(
        UpdateCircleRequest(
            owner_id=user_id, ref=ref, name=request.name, order=request.order
        )
    )


@router.delete("/{user_id}/circles/{ref}", response_model=CircleListResponse)
async def delete_circle(
    user_id: str,
    ref: str,
    delete_circle_use_case: FromDishka[DeleteCircleUseCase],
) -> CircleListResponse:
    """Delete a circle; later circles move up one position."""
    return await delete_circle_use_case.execute(
        DeleteCircleRequest(owner_id=user_id, ref=ref)
    )


@router.post("/{user_id}/circles/{ref}/members", response_model=CircleResponse)
async def add_circle_member(
    user_id: str,
    ref: str,
    request: AddCircleMemberAPIRequest,
    add_circle_member_use_case: FromDishka[AddCircleMemberUseCase],
) -> CircleResponse:
    """Add one of the owner's connections to a circle."""
    return await add_circle_member_use_case.execute(
        CircleMemberRequest(owner_id=user_id, ref=ref, member_id=request.member_id)
    )


@router.delete(
    "/{user_id}/circles/{ref}/members/{member_id}", response_model=CircleResponse
)
async def remove_circle_member(
    user_id: str,
    ref: str,
    member_id: str,
    remove_circle_member_use_case: FromDishka[RemoveCircleMemberUseCase],
) -> CircleResponse:
    """Remove a member from a circle; the connection is kept."""
    return await remove_circle_member_use_case.execute(
        CircleMemberRequest(owner_id=user_id, ref=ref, member_id=member_id)
    )
