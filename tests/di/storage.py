"""Mock blob storage providers for testing."""

from dishka import Scope, provide

from whizlist.adapter.storage import InMemoryBlobStorage
from whizlist.domain.service import BlobStorage
from whizlist.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock storage provider keeping objects in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_blob_storage(self) -> BlobStorage:
        """Provide in-memory blob storage."""
        return InMemoryBlobStorage()
