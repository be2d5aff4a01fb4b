"""Unit tests for the user use cases."""

import pytest
from pydantic import ValidationError

from linkbio.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
    UploadProfileImageRequest,
    UploadProfileImageUseCase,
)
from linkbio.domain.error import UserNotFoundError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create(env, username, email):
    use_case = await env.get(CreateUserUseCase)
    return await use_case.execute(CreateUserRequest(email=email, username=username))


class TestGetUserRequest:
    """Tests for GetUserRequest validation."""

    def test_requires_exactly_one_key(self):
        with pytest.raises(ValidationError):
            GetUserRequest()
        with pytest.raises(ValidationError):
            GetUserRequest(username="alice", email="a@example.com")


class TestUserUseCases:
    """Tests for creating, reading and updating users."""

    @pytest.mark.asyncio
    async def test_create_then_lookup(self, unit_env):
        """Should find a created user by ID, username and email."""
        # Arrange
        created = await _create(unit_env, "alice", "alice@example.com")
        get_user = await unit_env.get(GetUserUseCase)

        # Act
        by_id = await get_user.execute(GetUserRequest(user_id=created.id))
        by_name = await get_user.execute(GetUserRequest(username="alice"))
        by_email = await get_user.execute(GetUserRequest(email="ALICE@example.com"))

        # Assert
        assert created.username == "@alice"
        assert created.profile_image == "/uploads/default.png"
        assert by_id.id == by_name.id == by_email.id == created.id

    @pytest.mark.asyncio
    async def test_list_with_query(self, unit_env):
        await _create(unit_env, "alice", "alice@example.com")
        await _create(unit_env, "bob", "bob@example.com")
        list_users = await unit_env.get(ListUsersUseCase)

        everyone = await list_users.execute(ListUsersRequest())
        matches = await list_users.execute(ListUsersRequest(query="bo"))

        assert everyone.total == 2
        assert [u.username for u in matches.users] == ["@bob"]

    @pytest.mark.asyncio
    async def test_update_profile(self, unit_env):
        created = await _create(unit_env, "alice", "alice@example.com")
        update = await unit_env.get(UpdateUserProfileUseCase)

        updated = await update.execute(
            UpdateUserProfileRequest(
                user_id=created.id, headline="Biologist", username="alice_b"
            )
        )

        assert updated.headline == "Biologist"
        assert updated.username == "@alice_b"

    @pytest.mark.asyncio
    async def test_upload_profile_image(self, unit_env):
        created = await _create(unit_env, "alice", "alice@example.com")
        upload = await unit_env.get(UploadProfileImageUseCase)

        updated = await upload.execute(
            UploadProfileImageRequest(
                user_id=created.id, filename="me.png", content=b"\x89PNG"
            )
        )

        assert updated.profile_image.endswith("-me.png")

    @pytest.mark.asyncio
    async def test_unknown_user_id(self, unit_env):
        get_user = await unit_env.get(GetUserUseCase)

        with pytest.raises(UserNotFoundError):
            await get_user.execute(GetUserRequest(user_id="not-a-uuid"))
