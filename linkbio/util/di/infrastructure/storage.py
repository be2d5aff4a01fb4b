"""Image storage infrastructure providers."""

from dishka import Scope, provide

from linkbio.adapter.storage import LocalImageStorage
from linkbio.config import StorageSettings
from linkbio.domain.service import ImageStorage
from linkbio.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Image storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production image storage on the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_storage(self, storage_settings: StorageSettings) -> ImageStorage:
        """Provide local image storage.

        Returns:
            Storage writing to the configured uploads directory
        """
        return LocalImageStorage(
            directory=storage_settings.uploads_dir,
            url_prefix=storage_settings.uploads_url,
        )
