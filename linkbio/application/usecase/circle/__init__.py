"""Circle use cases."""

from .create_circle import CircleListResponse, CreateCircleRequest, CreateCircleUseCase
from .delete_circle import DeleteCircleRequest, DeleteCircleUseCase
from .manage_members import (
    AddCircleMemberUseCase,
    CircleMemberRequest,
    RemoveCircleMemberUseCase,
)
from .update_circle import UpdateCircleRequest, UpdateCircleUseCase

__all__ = [
    "AddCircleMemberUseCase",
    "CircleListResponse",
    "CircleMemberRequest",
    "CreateCircleRequest",
    "CreateCircleUseCase",
    "DeleteCircleRequest",
    "DeleteCircleUseCase",
    "RemoveCircleMemberUseCase",
    "UpdateCircleRequest",
    "UpdateCircleUseCase",
]
