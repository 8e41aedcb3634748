"""Blob storage infrastructure providers."""

from dishka import Scope, provide

from whizlist.adapter.storage import HttpBlobStorage
from whizlist.config import StorageSettings
from whizlist.domain.service import BlobStorage
from whizlist.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Blob storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider for the product image bucket."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_blob_storage(self, settings: StorageSettings) -> BlobStorage:
        """Provide HTTP blob storage client.

        Raises:
            ValueError: If the storage service is not configured
        """
        if not settings.base_url:
            raise ValueError("Storage base URL must be configured")

        return HttpBlobStorage(
            base_url=settings.base_url,
            bucket=settings.bucket,
            service_key=settings.service_key,
            timeout=settings.timeout_seconds,
        )
