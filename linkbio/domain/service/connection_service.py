"""Connection domain service.

Implements the connection request protocol. Per ordered pair of users the
states are ``NONE -> REQUESTED -> {CONNECTED, NONE}``; pending requests are
stored on the recipient only and connections are symmetric.
"""

from datetime import datetime

import logfire

from linkbio.domain.error import (
    AlreadyConnectedOrRequestedError,
    ConsistencyFault,
    NoSuchRequestError,
    SelfRequestError,
)
from linkbio.domain.model import User
from linkbio.domain.repository import UserRepository
from linkbio.domain.value import UserId

from .base import Service


class ConnectionService(Service):
    """Domain service for connection requests and connections."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize connection service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def send_request(self, from_id: UserId, to_id: UserId) -> User:
        """Send a connection request from one user to another.

        The request is recorded on the recipient only.

        Args:
            from_id: Sender
            to_id: Recipient

        Returns:
            Updated recipient

        Raises:
            UserNotFoundError: If either user does not exist
            SelfRequestError: If sender and recipient are the same user
            AlreadyConnectedOrRequestedError: If a request is already pending
                or the users are already connected
        """
        with logfire.span(
            "connection_service.send_request", from_id=str(from_id), to_id=str(to_id)
        ):
            await self._require_user(from_id)
            recipient = await self._require_user(to_id)

            if from_id == to_id:
                raise SelfRequestError(str(from_id))
            if recipient.has_request_from(from_id) or recipient.is_connected_to(
                from_id
            ):
                logfire.warn(
                    "Duplicate connection request",
                    from_id=str(from_id),
                    to_id=str(to_id),
                )
                raise AlreadyConnectedOrRequestedError(str(from_id), str(to_id))

            saved = await self.user_repository.save(
                recipient.model_copy(
                    update={
                        "circle_requests": [*recipient.circle_requests, from_id],
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info(
                "Connection request sent", from_id=str(from_id), to_id=str(to_id)
            )
            return saved

    async def accept_request(self, from_id: UserId, to_id: UserId) -> User:
        """Accept a pending request, connecting both users.

        The recipient is saved first with an optimistic version check, so
        the request is re-verified at commit time: if a concurrent decline
        removed it, the save fails with ``ConcurrentModificationError`` and
        nothing is connected. The sender is then updated with an atomic
        append-if-absent that cannot go stale.

        Args:
            from_id: User who sent the request
            to_id: User accepting it

        Returns:
            Updated recipient

        Raises:
            UserNotFoundError: If either user does not exist
            NoSuchRequestError: If no request from ``from_id`` is pending
            ConcurrentModificationError: If the recipient changed meanwhile
            ConsistencyFault: If the sender could not be updated after the
                recipient was
        """
        with logfire.span(
            "connection_service.accept_request",
            from_id=str(from_id),
            to_id=str(to_id),
        ):
            sender = await self._require_user(from_id)
            recipient = await self._require_user(to_id)

            if not recipient.has_request_from(from_id):
                logfire.warn(
                    "No pending request to accept",
                    from_id=str(from_id),
                    to_id=str(to_id),
                )
                raise NoSuchRequestError(str(from_id), str(to_id))

            members = list(recipient.circle_members)
            if from_id not in members:
                members.append(from_id)
            saved = await self.user_repository.save(
                recipient.model_copy(
                    update={
                        "circle_members": members,
                        "circle_requests": [
                            r for r in recipient.circle_requests if r != from_id
                        ],
                        "updated_at": datetime.now(),
                    }
                )
            )

            try:
                updated = await self.user_repository.add_connection(sender.id, to_id)
            except Exception as e:
                logfire.error(
                    "Connection half-committed",
                    from_id=str(from_id),
                    to_id=str(to_id),
                    error=str(e),
                )
                raise ConsistencyFault(
                    f"User {to_id} accepted {from_id} but {from_id} was not updated"
                ) from e
            if not updated:
                logfire.error(
                    "Connection half-committed",
                    from_id=str(from_id),
                    to_id=str(to_id),
                    error="sender record missing",
                )
                raise ConsistencyFault(
                    f"User {to_id} accepted {from_id} but {from_id} no longer exists"
                )

            logfire.info(
                "Connection request accepted", from_id=str(from_id), to_id=str(to_id)
            )
            return saved

    async def decline_request(self, from_id: UserId, to_id: UserId) -> User:
        """Decline a pending request.

        Declining a request that is not pending is a no-op.

        Args:
            from_id: User who sent the request
            to_id: User declining it

        Returns:
            Recipient (updated if a request was removed)

        Raises:
            UserNotFoundError: If the recipient does not exist
        """
        with logfire.span(
            "connection_service.decline_request",
            from_id=str(from_id),
            to_id=str(to_id),
        ):
            recipient = await self._require_user(to_id)
            if not recipient.has_request_from(from_id):
                logfire.info(
                    "No pending request to decline",
                    from_id=str(from_id),
                    to_id=str(to_id),
                )
                return recipient

            saved = await self.user_repository.save(
                recipient.model_copy(
                    update={
                        "circle_requests": [
                            r for r in recipient.circle_requests if r != from_id
                        ],
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info(
                "Connection request declined", from_id=str(from_id), to_id=str(to_id)
            )
            return saved

    async def list_requests(self, user_id: UserId) -> list[User]:
        """Users with a request pending to ``user_id``, oldest first."""
        with logfire.span("connection_service.list_requests", user_id=str(user_id)):
            user = await self._require_user(user_id)
            return await self.user_repository.find_by_ids(user.circle_requests)

    async def list_connections(self, user_id: UserId) -> list[User]:
        """Users connected to ``user_id``, in connection order."""
        with logfire.span(
            "connection_service.list_connections", user_id=str(user_id)
        ):
            user = await self._require_user(user_id)
            return await self.user_repository.find_by_ids(user.circle_members)
