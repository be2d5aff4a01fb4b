"""Profile image storage implementations.

Images are written under a local uploads directory and served back by the
API under a public URL prefix.
"""

import asyncio
import re
import time
from pathlib import Path

import logfire

from linkbio.adapter.error import StorageError
from linkbio.domain.service.image_storage import ImageStorage

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_filename(filename: str) -> str:
    """Reduce an uploaded filename to a safe basename.

    Directory parts are dropped and unusual characters replaced, so the
    result can be written inside the uploads directory.
    """
    name = Path(filename).name
    name = _UNSAFE_CHARS.sub("-", name).strip("-.")
    return name or "image"


class LocalImageStorage(ImageStorage):
    """Stores images on the local filesystem.

    Files are named ``{milliseconds}-{original name}`` to keep uploads with
    the same name apart.
    """

    def __init__(self, directory: Path, url_prefix: str) -> None:
        """Initialize local storage.

        Args:
            directory: Directory files are written to
            url_prefix: Public path the directory is served under
        """
        self.directory = directory
        self.url_prefix = url_prefix.rstrip("/")

    def _write(self, stored_name: str, content: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        (self.directory / stored_name).write_bytes(content)

    async def store(self, filename: str, content: bytes) -> str:
        """Write the image to disk and return its public path.

        Raises:
            StorageError: If the file cannot be written
        """
        stored_name = f"{int(time.time() * 1000)}-{safe_filename(filename)}"
        try:
            await asyncio.to_thread(self._write, stored_name, content)
        except OSError as e:
            logfire.error(
                "Failed to store image", filename=stored_name, error=str(e)
            )
            raise StorageError(stored_name) from e

        logfire.info("Image stored", filename=stored_name, size=len(content))
        return f"{self.url_prefix}/{stored_name}"


class MockImageStorage(ImageStorage):
    """In-memory image storage for testing.

    Keeps every stored file in ``files``, keyed by the returned path.
    """

    def __init__(self, url_prefix: str = "/uploads") -> None:
        self.url_prefix = url_prefix
        self.files: dict[str, bytes] = {}

    async def store(self, filename: str, content: bytes) -> str:
        """Remember the image and return a deterministic path."""
        path = f"{self.url_prefix}/{len(self.files) + 1}-{safe_filename(filename)}"
        self.files[path] = content
        return path
