"""Adapter layer errors.

These are infrastructure failures rather than domain errors; the API
reports them as 500s.
"""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class StorageError(AdapterError):
    """Raised when an uploaded image cannot be written."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Could not store image {filename}")
