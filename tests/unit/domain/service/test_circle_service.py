"""Unit tests for CircleService."""

from uuid import uuid4

import pytest

from linkbio.domain.error import (
    CircleNotFoundError,
    InvalidCircleOrderError,
    MissingFieldError,
    NotConnectedError,
    UserNotFoundError,
)
from linkbio.domain.repository import UserRepository
from linkbio.domain.service import CircleService, ConnectionService
from linkbio.domain.value import CircleId, UserId
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _owner_with_connections(env, count: int):
    """Save an owner connected to ``count`` other users."""
    repo = await env.get(UserRepository)
    connections = await env.get(ConnectionService)
    owner = await repo.save(make_user("owner"))
    friends = []
    for i in range(count):
        friend = await repo.save(make_user(f"friend{i}"))
        await connections.send_request(friend.id, owner.id)
        await connections.accept_request(friend.id, owner.id)
        friends.append(friend)
    return owner, friends


async def _stored_circle(env, owner_id, ref):
    """Read a circle straight from the repository."""
    repo = await env.get(UserRepository)
    owner = await repo.find_by_id(owner_id)
    _, circle = owner.find_circle(ref)
    return circle


def _assert_permutation(circle):
    assert len(circle.members) == len(set(circle.members))
    assert sorted(circle.members) == sorted(circle.order)


class TestCreateCircle:
    """Tests for CircleService.create_circle()."""

    @pytest.mark.asyncio
    async def test_create_appends_empty_circle(self, unit_env):
        """Should append circles in creation order, allowing duplicate names."""
        # Arrange
        owner, _ = await _owner_with_connections(unit_env, 0)
        service = await unit_env.get(CircleService)

        # Act
        await service.create_circle(owner.id, "Inner Circle")
        circles = await service.create_circle(owner.id, "Inner Circle")

        # Assert
        assert [c.name for c in circles] == ["Inner Circle", "Inner Circle"]
        assert circles[0].id != circles[1].id
        assert circles[0].members == [] and circles[0].order == []

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, unit_env):
        """Should reject a blank circle name."""
        owner, _ = await _owner_with_connections(unit_env, 0)
        service = await unit_env.get(CircleService)

        with pytest.raises(MissingFieldError):
            await service.create_circle(owner.id, "  ")

    @pytest.mark.asyncio
    async def test_unknown_owner(self, unit_env):
        """Should raise UserNotFoundError for an unknown owner."""
        service = await unit_env.get(CircleService)

        with pytest.raises(UserNotFoundError):
            await service.create_circle(UserId(uuid4()), "Friends")


class TestMembers:
    """Tests for adding and removing circle members."""

    @pytest.mark.asyncio
    async def test_add_member_updates_members_and_order(self, unit_env):
        """Should append the member to both lists exactly once."""
        # Arrange
        owner, (bob,) = await _owner_with_connections(unit_env, 1)
        service = await unit_env.get(CircleService)
        await service.create_circle(owner.id, "Inner Circle")

        # Act
        await service.add_member(owner.id, 0, bob.id)
        circle = await service.add_member(owner.id, 0, bob.id)

        # Assert
        assert circle.members == [bob.id]
        assert circle.order == [bob.id]

    @pytest.mark.asyncio
    async def test_add_non_connection_rejected(self, unit_env):
        """Should only allow the owner's connections in a circle."""
        owner, _ = await _owner_with_connections(unit_env, 0)
        repo = await unit_env.get(UserRepository)
        stranger = await repo.save(make_user("stranger"))
        service = await unit_env.get(CircleService)
        await service.create_circle(owner.id, "Inner Circle")

        with pytest.raises(NotConnectedError):
            await service.add_member(owner.id, 0, stranger.id)

    @pytest.mark.asyncio
    async def test_remove_member_keeps_connection(self, unit_env):
        """Should remove from the circle only; removing twice is a no-op."""
        # Arrange
        owner, (bob,) = await _owner_with_connections(unit_env, 1)
        service = await unit_env.get(CircleService)
        repo = await unit_env.get(UserRepository)
        await service.create_circle(owner.id, "Inner Circle")
        await service.add_member(owner.id, 0, bob.id)

        # Act
        await service.remove_member(owner.id, 0, bob.id)
        circle = await service.remove_member(owner.id, 0, bob.id)

        # Assert
        assert circle.members == [] and circle.order == []
        assert bob.id in (await repo.find_by_id(owner.id)).circle_members


class TestUpdateCircle:
    """Tests for renaming and reordering circles."""

    @pytest.mark.asyncio
    async def test_reorder_with_permutation(self, unit_env):
        """Should accept a permutation and keep membership unchanged."""
        # Arrange
        owner, (a, b, c) = await _owner_with_connections(unit_env, 3)
        service = await unit_env.get(CircleService)
        await service.create_circle(owner.id, "Lab")
        for friend in (a, b, c):
            await service.add_member(owner.id, 0, friend.id)

        # Act
        circle = await service.reorder_circle(owner.id, 0, [c.id, a.id, b.id])

        # Assert
        assert circle.order == [c.id, a.id, b.id]
        assert circle.members == [a.id, b.id, c.id]
        _assert_permutation(circle)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("shape", ["missing", "duplicate", "stranger"])
    async def test_reorder_rejects_non_permutations(self, unit_env, shape):
        """Should reject orders that drop, repeat or add members."""
        # Arrange
        owner, (a, b) = await _owner_with_connections(unit_env, 2)
        service = await unit_env.get(CircleService)
        await service.create_circle(owner.id, "Lab")
        await service.add_member(owner.id, 0, a.id)
        await service.add_member(owner.id, 0, b.id)
        order = {
            "missing": [a.id],
            "duplicate": [a.id, a.id, b.id],
            "stranger": [a.id, b.id, UserId(uuid4())],
        }[shape]

        # Act & Assert
        with pytest.raises(InvalidCircleOrderError):
            await service.reorder_circle(owner.id, 0, order)

        circle = await _stored_circle(unit_env, owner.id, 0)
        assert circle.order == [a.id, b.id]

    @pytest.mark.asyncio
    async def test_rename_by_id(self, unit_env):
        """Should resolve a circle by its ID as well as its position."""
        owner, _ = await _owner_with_connections(unit_env, 0)
        service = await unit_env.get(CircleService)
        circles = await service.create_circle(owner.id, "Lab")

        renamed = await service.rename_circle(owner.id, circles[0].id, "Colleagues")

        assert renamed.name == "Colleagues"
        assert renamed.id == circles[0].id

    @pytest.mark.asyncio
    async def test_update_without_changes_does_not_save(self, unit_env):
        """Should return the circle without bumping the owner version."""
        # Arrange
        owner, _ = await _owner_with_connections(unit_env, 0)
        service = await unit_env.get(CircleService)
        repo = await unit_env.get(UserRepository)
        circles = await service.create_circle(owner.id, "Lab")
        version = (await repo.find_by_id(owner.id)).version

        # Act
        circle = await service.update_circle(owner.id, 0)

        # Assert
        assert circle == circles[0]
        assert (await repo.find_by_id(owner.id)).version == version


class TestDeleteCircle:
    """Tests for CircleService.delete_circle()."""

    @pytest.mark.asyncio
    async def test_delete_shifts_later_indices(self, unit_env):
        """Should move later circles up by one position."""
        # Arrange
        owner, _ = await _owner_with_connections(unit_env, 0)
        service = await unit_env.get(CircleService)
        for name in ("A", "B", "C"):
            await service.create_circle(owner.id, name)

        # Act
        remaining = await service.delete_circle(owner.id, 0)

        # Assert
        assert [c.name for c in remaining] == ["B", "C"]
        assert (await _stored_circle(unit_env, owner.id, 0)).name == "B"
        with pytest.raises(CircleNotFoundError):
            await _stored_circle(unit_env, owner.id, 2)

    @pytest.mark.asyncio
    async def test_unresolvable_refs(self, unit_env):
        """Should raise CircleNotFoundError for bad positions and IDs."""
        owner, _ = await _owner_with_connections(unit_env, 0)
        service = await unit_env.get(CircleService)
        await service.create_circle(owner.id, "A")

        for ref in (1, -1, CircleId(uuid4())):
            with pytest.raises(CircleNotFoundError):
                await service.delete_circle(owner.id, ref)
