"""Domain layer DI providers."""

from dishka import Scope, provide

from linkbio.domain.repository import UserRepository
from linkbio.domain.service import (
    CircleService,
    ConnectionService,
    ImageStorage,
    ProfileService,
)
from linkbio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_profile_service(
        self, user_repository: UserRepository, image_storage: ImageStorage
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            user_repository=user_repository, image_storage=image_storage
        )

    @provide
    def get_connection_service(
        self, user_repository: UserRepository
    ) -> ConnectionService:
        """Provide connection domain service."""
        return ConnectionService(user_repository=user_repository)

    @provide
    def get_circle_service(self, user_repository: UserRepository) -> CircleService:
        """Provide circle domain service."""
        return CircleService(user_repository=user_repository)
