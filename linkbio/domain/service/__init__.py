"""Domain services."""

from .base import Service
from .circle_service import CircleService
from .connection_service import ConnectionService
from .image_storage import ImageStorage
from .profile_service import ProfileService, normalize_email, parse_username

__all__ = [
    "CircleService",
    "ConnectionService",
    "ImageStorage",
    "ProfileService",
    "Service",
    "normalize_email",
    "parse_username",
]
