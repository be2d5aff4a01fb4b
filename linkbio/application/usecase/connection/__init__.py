"""Connection request protocol use cases."""

from .accept_request import AcceptConnectionRequestUseCase
from .common import ConnectionActionResponse, ConnectionRequestBody
from .decline_request import DeclineConnectionRequestUseCase
from .list_connections import (
    ListConnectionsRequest,
    ListConnectionsResponse,
    ListConnectionsUseCase,
)
from .list_requests import ListRequestsRequest, ListRequestsResponse, ListRequestsUseCase
from .send_request import SendConnectionRequestUseCase

__all__ = [
    "AcceptConnectionRequestUseCase",
    "ConnectionActionResponse",
    "ConnectionRequestBody",
    "DeclineConnectionRequestUseCase",
    "ListConnectionsRequest",
    "ListConnectionsResponse",
    "ListConnectionsUseCase",
    "ListRequestsRequest",
    "ListRequestsResponse",
    "ListRequestsUseCase",
    "SendConnectionRequestUseCase",
]
