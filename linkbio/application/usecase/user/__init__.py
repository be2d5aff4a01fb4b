"""User use cases."""

from .create_user import CreateUserRequest, CreateUserUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase
from .upload_profile_image import UploadProfileImageRequest, UploadProfileImageUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
    "UploadProfileImageRequest",
    "UploadProfileImageUseCase",
]
