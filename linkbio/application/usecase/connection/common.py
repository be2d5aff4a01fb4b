"""Request and response models shared by the connection protocol."""

from pydantic import BaseModel


class ConnectionRequestBody(BaseModel):
    """A directed pair of users: ``from_user_id`` asks ``to_user_id``."""

    from_user_id: str
    to_user_id: str


class ConnectionActionResponse(BaseModel):
    """Outcome of a protocol step."""

    message: str
    from_user_id: str
    to_user_id: str
