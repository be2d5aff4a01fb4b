"""Image storage interface.

Profile images are stored by an external collaborator that hands back a
retrievable path for every stored file.
"""


class ImageStorage:
    """Generic image storage interface."""

    async def store(self, filename: str, content: bytes) -> str:
        """Store an uploaded image.

        Args:
            filename: Original name of the uploaded file
            content: Raw file bytes

        Returns:
            Path or URL under which the image can be retrieved
        """
        raise NotImplementedError
