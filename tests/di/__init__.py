"""Mock providers for testing."""

from .extraction import MockExtractionProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockExtractionProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
