"""Unit tests for ConnectionService."""

from uuid import uuid4

import pytest

from linkbio.domain.error import (
    AlreadyConnectedOrRequestedError,
    ConcurrentModificationError,
    ConsistencyFault,
    NoSuchRequestError,
    SelfRequestError,
    UserNotFoundError,
)
from linkbio.domain.service import ConnectionService
from linkbio.domain.value import UserId
from linkbio.persistence.repository.inmemory import InMemoryUserRepository
from tests.factories import make_user


class RacingUserRepository(InMemoryUserRepository):
    """Runs ``interleave`` once, just before the next save is applied."""

    def __init__(self) -> None:
        super().__init__()
        self.interleave = None

    async def save(self, user):
        if self.interleave is not None:
            action, self.interleave = self.interleave, None
            await action()
        return await super().save(user)


class BrokenSenderRepository(InMemoryUserRepository):
    """Fails the atomic sender update used by accept."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        super().__init__()
        self.fail_with = fail_with

    async def add_connection(self, user_id, other_id):
        if self.fail_with:
            raise self.fail_with
        return False


async def _pair(repo):
    alice = await repo.save(make_user("alice"))
    bob = await repo.save(make_user("bob"))
    return alice, bob


class TestSendRequest:
    """Tests for ConnectionService.send_request()."""

    @pytest.mark.asyncio
    async def test_request_recorded_on_recipient_only(self):
        """Should append the sender to the recipient's pending requests."""
        # Arrange
        repo = InMemoryUserRepository()
        alice, bob = await _pair(repo)
        service = ConnectionService(repo)

        # Act
        await service.send_request(alice.id, bob.id)

        # Assert
        assert (await repo.find_by_id(bob.id)).circle_requests == [alice.id]
        assert (await repo.find_by_id(alice.id)).circle_requests == []
        assert (await repo.find_by_id(alice.id)).version == alice.version

    @pytest.mark.asyncio
    async def test_duplicate_request_rejected(self):
        """Should reject a second request while one is pending."""
        repo = InMemoryUserRepository()
        alice, bob = await _pair(repo)
        service = ConnectionService(repo)
        await service.send_request(alice.id, bob.id)

        with pytest.raises(AlreadyConnectedOrRequestedError):
            await service.send_request(alice.id, bob.id)

        assert (await repo.find_by_id(bob.id)).circle_requests == [alice.id]

    @pytest.mark.asyncio
    async def test_request_to_connection_rejected(self):
        """Should reject a request between connected users."""
        repo = InMemoryUserRepository()
        alice, bob = await _pair(repo)
        service = ConnectionService(repo)
        await service.send_request(alice.id, bob.id)
        await service.accept_request(alice.id, bob.id)

        with pytest.raises(AlreadyConnectedOrRequestedError):
            await service.send_request(alice.id, bob.id)

    @pytest.mark.asyncio
    async def test_self_request_rejected(self):
        """Should reject a request to oneself."""
        repo = InMemoryUserRepository()
        alice, _ = await _pair(repo)

        with pytest.raises(SelfRequestError):
            await ConnectionService(repo).send_request(alice.id, alice.id)

    @pytest.mark.asyncio
    async def test_unknown_recipient(self):
        """Should raise UserNotFoundError when either user is missing."""
        repo = InMemoryUserRepository()
        alice, _ = await _pair(repo)
        service = ConnectionService(repo)

        with pytest.raises(UserNotFoundError):
            await service.send_request(alice.id, UserId(uuid4()))
        with pytest.raises(UserNotFoundError):
            await service.send_request(UserId(uuid4()), alice.id)


class TestAcceptRequest:
    """Tests for ConnectionService.accept_request()."""

    @pytest.mark.asyncio
    async def test_accept_connects_both_users(self):
        """Should connect both sides and clear the request."""
        # Arrange
        repo = InMemoryUserRepository()
        alice, bob = await _pair(repo)
        service = ConnectionService(repo)
        await service.send_request(alice.id, bob.id)

        # Act
        await service.accept_request(alice.id, bob.id)

        # Assert
        alice_after = await repo.find_by_id(alice.id)
        bob_after = await repo.find_by_id(bob.id)
        assert bob_after.circle_members == [alice.id]
        assert bob_after.circle_requests == []
        assert alice_after.circle_members == [bob.id]
        assert alice_after.circle_requests == []

    @pytest.mark.asyncio
    async def test_accept_without_request(self):
        """Should raise NoSuchRequestError and change nothing."""
        repo = InMemoryUserRepository()
        alice, bob = await _pair(repo)

        with pytest.raises(NoSuchRequestError):
            await ConnectionService(repo).accept_request(alice.id, bob.id)

        assert (await repo.find_by_id(bob.id)).circle_members == []
        assert (await repo.find_by_id(alice.id)).circle_members == []

    @pytest.mark.asyncio
    async def test_accept_drops_reverse_request(self):
        """Should drop the opposite pending request once connected."""
        # Arrange - both users asked each other
        repo = InMemoryUserRepository()
        alice, bob = await _pair(repo)
        service = ConnectionService(repo)
        await service.send_request(alice.id, bob.id)
        await service.send_request(bob.id, alice.id)

        # Act
        await service.accept_request(alice.id, bob.id)

        # Assert
        alice_after = await repo.find_by_id(alice.id)
        assert alice_after.circle_requests == []
        assert alice_after.circle_members == [bob.id]

    @pytest.mark.asyncio
    async def test_concurrent_decline_wins_over_stale_accept(self):
        """Should fail the accept when a decline lands after it was read."""
        # Arrange
        repo = RacingUserRepository()
        alice, bob = await _pair(repo)
        service = ConnectionService(repo)
        await service.send_request(alice.id, bob.id)
        repo.interleave = lambda: ConnectionService(repo).decline_request(
            alice.id, bob.id
        )

        # Act & Assert
        with pytest.raises(ConcurrentModificationError):
            await service.accept_request(alice.id, bob.id)

        bob_after = await repo.find_by_id(bob.id)
        assert bob_after.circle_requests == []
        assert bob_after.circle_members == []
        assert (await repo.find_by_id(alice.id)).circle_members == []

    @pytest.mark.asyncio
    async def test_sender_write_failure_is_consistency_fault(self):
        """Should surface a failed sender update as ConsistencyFault."""
        repo = BrokenSenderRepository(fail_with=RuntimeError("connection lost"))
        alice, bob = await _pair(repo)
        service = ConnectionService(repo)
        await service.send_request(alice.id, bob.id)

        with pytest.raises(ConsistencyFault):
            await service.accept_request(alice.id, bob.id)

    @pytest.mark.asyncio
    async def test_missing_sender_row_is_consistency_fault(self):
        """Should treat an unmatched sender update as ConsistencyFault."""
        repo = BrokenSenderRepository()
        alice, bob = await _pair(repo)
        service = ConnectionService(repo)
        await service.send_request(alice.id, bob.id)

        with pytest.raises(ConsistencyFault):
            await service.accept_request(alice.id, bob.id)


class TestDeclineRequest:
    """Tests for ConnectionService.decline_request()."""

    @pytest.mark.asyncio
    async def test_decline_removes_request(self):
        """Should remove the request without connecting anyone."""
        repo = InMemoryUserRepository()
        alice, bob = await _pair(repo)
        service = ConnectionService(repo)
        await service.send_request(alice.id, bob.id)

        bob_after = await service.decline_request(alice.id, bob.id)

        assert bob_after.circle_requests == []
        assert bob_after.circle_members == []
        assert (await repo.find_by_id(alice.id)).circle_members == []

    @pytest.mark.asyncio
    async def test_decline_absent_request_is_noop(self):
        """Should succeed without writing when nothing is pending."""
        repo = InMemoryUserRepository()
        alice, bob = await _pair(repo)

        bob_after = await ConnectionService(repo).decline_request(alice.id, bob.id)

        assert bob_after.version == bob.version

    @pytest.mark.asyncio
    async def test_request_can_be_resent_after_decline(self):
        """Should return the pair to NONE after a decline."""
        repo = InMemoryUserRepository()
        alice, bob = await _pair(repo)
        service = ConnectionService(repo)
        await service.send_request(alice.id, bob.id)
        await service.decline_request(alice.id, bob.id)

        await service.send_request(alice.id, bob.id)

        assert (await repo.find_by_id(bob.id)).circle_requests == [alice.id]


class TestListing:
    """Tests for request and connection listings."""

    @pytest.mark.asyncio
    async def test_list_requests_and_connections(self):
        """Should list pending requesters and connections in order."""
        # Arrange
        repo = InMemoryUserRepository()
        alice, bob = await _pair(repo)
        carol = await repo.save(make_user("carol"))
        service = ConnectionService(repo)
        await service.send_request(alice.id, bob.id)
        await service.send_request(carol.id, bob.id)
        await service.accept_request(carol.id, bob.id)

        # Act
        requests = await service.list_requests(bob.id)
        connections = await service.list_connections(bob.id)

        # Assert
        assert [u.id for u in requests] == [alice.id]
        assert [u.id for u in connections] == [carol.id]
