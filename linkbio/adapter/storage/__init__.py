"""Profile image storage adapters."""

from .image import LocalImageStorage, MockImageStorage

__all__ = ["LocalImageStorage", "MockImageStorage"]
