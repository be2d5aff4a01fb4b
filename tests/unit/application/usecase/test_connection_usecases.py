"""Unit tests for the connection protocol use cases."""

from uuid import uuid4

import pytest

from linkbio.application.usecase.connection import (
    AcceptConnectionRequestUseCase,
    ConnectionRequestBody,
    ListConnectionsRequest,
    ListConnectionsUseCase,
    ListRequestsRequest,
    ListRequestsUseCase,
    SendConnectionRequestUseCase,
)
from linkbio.domain.error import UserNotFoundError
from linkbio.domain.repository import UserRepository
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestConnectionUseCases:
    """Tests for send, accept and listing use cases."""

    @pytest.mark.asyncio
    async def test_send_accept_and_list(self, unit_env):
        """Should connect two users through the request protocol."""
        # Arrange
        repo = await unit_env.get(UserRepository)
        alice = await repo.save(make_user("alice"))
        bob = await repo.save(make_user("bob"))
        body = ConnectionRequestBody(
            from_user_id=str(alice.id), to_user_id=str(bob.id)
        )

        # Act
        sent = await (await unit_env.get(SendConnectionRequestUseCase)).execute(body)
        pending = await (await unit_env.get(ListRequestsUseCase)).execute(
            ListRequestsRequest(user_id=str(bob.id))
        )
        accepted = await (await unit_env.get(AcceptConnectionRequestUseCase)).execute(
            body
        )
        connections = await (await unit_env.get(ListConnectionsUseCase)).execute(
            ListConnectionsRequest(user_id=str(alice.id))
        )

        # Assert
        assert sent.message == "Request sent"
        assert [u.username for u in pending.requests] == ["@alice"]
        assert accepted.message == "Connection accepted"
        assert [u.id for u in connections.connections] == [str(bob.id)]

    @pytest.mark.asyncio
    async def test_malformed_ids_are_not_found(self, unit_env):
        """Should treat malformed IDs as unknown users."""
        use_case = await unit_env.get(SendConnectionRequestUseCase)

        with pytest.raises(UserNotFoundError):
            await use_case.execute(
                ConnectionRequestBody(from_user_id="x", to_user_id=str(uuid4()))
            )
