"""Application layer DI providers."""

from dishka import Scope, provide

from linkbio.application.usecase.circle import (
    AddCircleMemberUseCase,
    CreateCircleUseCase,
    DeleteCircleUseCase,
    RemoveCircleMemberUseCase,
    UpdateCircleUseCase,
)
from linkbio.application.usecase.connection import (
    AcceptConnectionRequestUseCase,
    DeclineConnectionRequestUseCase,
    ListConnectionsUseCase,
    ListRequestsUseCase,
    SendConnectionRequestUseCase,
)
from linkbio.application.usecase.link import (
    AddLinkUseCase,
    RemoveLinkUseCase,
    ReplaceLinksUseCase,
)
from linkbio.application.usecase.user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserProfileUseCase,
    UploadProfileImageUseCase,
)
from linkbio.domain.service import CircleService, ConnectionService, ProfileService
from linkbio.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(
        self, profile_service: ProfileService
    ) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, profile_service: ProfileService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, profile_service: ProfileService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_upload_profile_image_use_case(
        self, profile_service: ProfileService
    ) -> UploadProfileImageUseCase:
        """Provide upload profile image use case."""
        return UploadProfileImageUseCase(profile_service=profile_service)

    # Link use cases
    @provide(scope=Scope.REQUEST)
    def get_add_link_use_case(self, profile_service: ProfileService) -> AddLinkUseCase:
        """Provide add link use case."""
        return AddLinkUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_link_use_case(
        self, profile_service: ProfileService
    ) -> RemoveLinkUseCase:
        """Provide remove link use case."""
        return RemoveLinkUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_replace_links_use_case(
        self, profile_service: ProfileService
    ) -> ReplaceLinksUseCase:
        """Provide replace links use case."""
        return ReplaceLinksUseCase(profile_service=profile_service)

    # Connection use cases
    @provide(scope=Scope.REQUEST)
    def get_send_connection_request_use_case(
        self, connection_service: ConnectionService
    ) -> SendConnectionRequestUseCase:
        """Provide send connection request use case."""
        return SendConnectionRequestUseCase(connection_service=connection_service)

    @provide(scope=Scope.REQUEST)
    def get_accept_connection_request_use_case(
        self, connection_service: ConnectionService
    ) -> AcceptConnectionRequestUseCase:
        """Provide accept connection request use case."""
        return AcceptConnectionRequestUseCase(connection_service=connection_service)

    @provide(scope=Scope.REQUEST)
    def get_decline_connection_request_use_case(
        self, connection_service: ConnectionService
    ) -> DeclineConnectionRequestUseCase:
        """Provide decline connection request use case."""
        return DeclineConnectionRequestUseCase(connection_service=connection_service)

    @provide(scope=Scope.REQUEST)
    def get_list_requests_use_case(
        self, connection_service: ConnectionService
    ) -> ListRequestsUseCase:
        """Provide list requests use case."""
        return ListRequestsUseCase(connection_service=connection_service)

    @provide(scope=Scope.REQUEST)
    def get_list_connections_use_case(
        self, connection_service: ConnectionService
    ) -> ListConnectionsUseCase:
        """Provide list connections use case."""
        return ListConnectionsUseCase(connection_service=connection_service)

    # Circle use cases
    @provide(scope=Scope.REQUEST)
    def get_create_circle_use_case(
        self, circle_service: CircleService
    ) -> CreateCircleUseCase:
        """Provide create circle use case."""
        return CreateCircleUseCase(circle_service=circle_service)

    @provide(scope=Scope.REQUEST)
    def get_update_circle_use_case(
        self, circle_service: CircleService
    ) -> UpdateCircleUseCase:
        """Provide update circle use case."""
        return UpdateCircleUseCase(circle_service=circle_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_circle_use_case(
        self, circle_service: CircleService
    ) -> DeleteCircleUseCase:
        """Provide delete circle use case."""
        return DeleteCircleUseCase(circle_service=circle_service)

    @provide(scope=Scope.REQUEST)
    def get_add_circle_member_use_case(
        self, circle_service: CircleService
    ) -> AddCircleMemberUseCase:
        """Provide add circle member use case."""
        return AddCircleMemberUseCase(circle_service=circle_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_circle_member_use_case(
        self, circle_service: CircleService
    ) -> RemoveCircleMemberUseCase:
        """Provide remove circle member use case."""
        return RemoveCircleMemberUseCase(circle_service=circle_service)
