"""Unit tests for the circle use cases."""

from uuid import uuid4

import pytest

from linkbio.application.usecase.circle import (
    AddCircleMemberUseCase,
    CircleMemberRequest,
    CreateCircleRequest,
    CreateCircleUseCase,
    DeleteCircleRequest,
    DeleteCircleUseCase,
    RemoveCircleMemberUseCase,
    UpdateCircleRequest,
    UpdateCircleUseCase,
)
from linkbio.domain.error import CircleNotFoundError, InvalidCircleOrderError
from linkbio.domain.repository import UserRepository
from linkbio.domain.service import ConnectionService
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _connected_pair(env):
    repo = await env.get(UserRepository)
    connections = await env.get(ConnectionService)
    alice = await repo.save(make_user("alice"))
    bob = await repo.save(make_user("bob"))
    await connections.send_request(bob.id, alice.id)
    await connections.accept_request(bob.id, alice.id)
    return alice, bob


class TestCircleUseCases:
    """Tests for the circle lifecycle through use cases."""

    @pytest.mark.asyncio
    async def test_circle_lifecycle_by_index_and_id(self, unit_env):
        """Should address circles by position or by ID interchangeably."""
        # Arrange
        alice, bob = await _connected_pair(unit_env)
        owner_id = str(alice.id)

        # Act
        created = await (await unit_env.get(CreateCircleUseCase)).execute(
            CreateCircleRequest(owner_id=owner_id, name="Inner Circle")
        )
        circle_id = created.circles[0].id
        with_bob = await (await unit_env.get(AddCircleMemberUseCase)).execute(
            CircleMemberRequest(owner_id=owner_id, ref="0", member_id=str(bob.id))
        )
        renamed = await (await unit_env.get(UpdateCircleUseCase)).execute(
            UpdateCircleRequest(
                owner_id=owner_id, ref=circle_id, name="Family", order=[str(bob.id)]
            )
        )
        emptied = await (await unit_env.get(RemoveCircleMemberUseCase)).execute(
            CircleMemberRequest(owner_id=owner_id, ref=circle_id, member_id=str(bob.id))
        )
        remaining = await (await unit_env.get(DeleteCircleUseCase)).execute(
            DeleteCircleRequest(owner_id=owner_id, ref="0")
        )

        # Assert
        assert with_bob.members == [str(bob.id)]
        assert renamed.name == "Family"
        assert renamed.order == [str(bob.id)]
        assert emptied.members == [] and emptied.order == []
        assert remaining.circles == []

    @pytest.mark.asyncio
    async def test_bad_ref(self, unit_env):
        alice, _ = await _connected_pair(unit_env)

        with pytest.raises(CircleNotFoundError):
            await (await unit_env.get(DeleteCircleUseCase)).execute(
                DeleteCircleRequest(owner_id=str(alice.id), ref="zero")
            )

    @pytest.mark.asyncio
    async def test_order_with_unknown_member(self, unit_env):
        """Should reject an order naming someone outside the circle."""
        alice, _ = await _connected_pair(unit_env)
        await (await unit_env.get(CreateCircleUseCase)).execute(
            CreateCircleRequest(owner_id=str(alice.id), name="Lab")
        )

        with pytest.raises(InvalidCircleOrderError):
            await (await unit_env.get(UpdateCircleUseCase)).execute(
                UpdateCircleRequest(
                    owner_id=str(alice.id), ref="0", order=[str(uuid4())]
                )
            )
