"""Connection request protocol routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from linkbio.application.usecase.connection import (
    AcceptConnectionRequestUseCase,
    ConnectionActionResponse,
    ConnectionRequestBody,
    DeclineConnectionRequestUseCase,
    ListConnectionsRequest,
    ListConnectionsResponse,
    ListConnectionsUseCase,
    ListRequestsRequest,
    ListRequestsResponse,
    ListRequestsUseCase,
    SendConnectionRequestUseCase,
)

router = APIRouter(prefix="/users", tags=["connections"], route_class=DishkaRoute)


@router.post("/circle/request", response_model=ConnectionActionResponse)
async def send_request(
    request: ConnectionRequestBody,
    send_request_use_case: FromDishka[SendConnectionRequestUseCase],
) -> ConnectionActionResponse:
    """Ask ``to_user_id`` to connect with ``from_user_id``.

    Example:
        POST /users/circle/request

        Request:
        {"from_user_id": "...", "to_user_id": "..."}

        Response:
        {"message": "Request sent", "from_user_id": "...", "to_user_id": "..."}
    """
    return await send_request_use_case.execute(request)


@router.post("/circle/accept", response_model=ConnectionActionResponse)
async def accept_request(
    request: ConnectionRequestBody,
    accept_request_use_case: FromDishka[AcceptConnectionRequestUseCase],
) -> ConnectionActionResponse:
    """Accept the request ``from_user_id`` sent to ``to_user_id``."""
    return await accept_request_use_case.execute(request)


@router.post("/circle/decline", response_model=ConnectionActionResponse)
async def decline_request(
    request: ConnectionRequestBody,
    decline_request_use_case: FromDishka[DeclineConnectionRequestUseCase],
) -> ConnectionActionResponse:
    """Decline the request ``from_user_id`` sent to ``to_user_id``."""
    return await decline_request_use_case.execute(request)


@router.get("/{user_id}/requests", response_model=ListRequestsResponse)
async def list_requests(
    user_id: str,
    list_requests_use_case: FromDishka[ListRequestsUseCase],
) -> ListRequestsResponse:
    """Users waiting for ``user_id`` to answer their request."""
    return await list_requests_use_case.execute(ListRequestsRequest(user_id=user_id))


@router.get("/{user_id}/connections", response_model=ListConnectionsResponse)
async def list_connections(
    user_id: str,
    list_connections_use_case: FromDishka[ListConnectionsUseCase],
) -> ListConnectionsResponse:
    """The user's connections."""
    return await list_connections_use_case.execute(
        ListConnectionsRequest(user_id=user_id)
    )
