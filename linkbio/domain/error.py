"""Domain layer errors.

Client errors fall into three families (``NotFoundError``, ``ConflictError``
and ``ValidationError``) that the interface layer maps to HTTP statuses.
``ConsistencyFault`` is not a client error: it signals that a multi-record
mutation was only partly persisted.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class ConflictError(DomainError):
    """Operation conflicts with the current state of a record."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UserNotFoundError(NotFoundError):
    """Raised when a user reference does not resolve."""

    def __init__(self, identifier: str):
        super().__init__("User", identifier)


class CircleNotFoundError(NotFoundError):
    """Raised when a circle reference does not resolve for its owner."""

    def __init__(self, identifier: str):
        super().__init__("Circle", identifier)


class MissingFieldError(ValidationError):
    """Raised when a required field is absent or blank."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class SelfRequestError(ValidationError):
    """Raised when a user sends a connection request to themselves."""

    def __init__(self, user_id: str):
        super().__init__(f"User {user_id} cannot send a request to themselves")


class InvalidCircleOrderError(ValidationError):
    """Raised when a circle order is not a permutation of its members."""

    def __init__(self, circle_id: str):
        super().__init__(
            f"Order for circle {circle_id} must list every member exactly once"
        )


class UsernameTakenError(ConflictError):
    """Raised when a username is already in use."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already taken: {username}")


class EmailTakenError(ConflictError):
    """Raised when an email address is already registered."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class AlreadyConnectedOrRequestedError(ConflictError):
    """Raised when a request duplicates a pending request or a connection."""

    def __init__(self, from_id: str, to_id: str):
        super().__init__(f"User {from_id} already requested or connected to {to_id}")


class NoSuchRequestError(ConflictError):
    """Raised when accepting a request that is not pending."""

    def __init__(self, from_id: str, to_id: str):
        super().__init__(f"No pending request from {from_id} to {to_id}")


class NotConnectedError(ConflictError):
    """Raised when adding a non-connection to a circle."""

    def __init__(self, owner_id: str, member_id: str):
        super().__init__(f"User {member_id} is not connected to {owner_id}")


class ConcurrentModificationError(ConflictError):
    """Raised when a record changed between being read and being saved."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} {identifier} was modified concurrently")


class ConsistencyFault(DomainError):
    """A multi-record mutation was only partially committed.

    Indicates a persisted invariant violation (for example a one-sided
    connection) that needs repair. Never retried or swallowed.
    """

    pass
