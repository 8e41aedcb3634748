"""Infrastructure providers."""

# Import bases
from .extraction import ExtractionProvider
from .persistence import PersistenceProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .extraction import ProdExtractionProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "ExtractionProvider",
    "PersistenceProvider",
    "ProdExtractionProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "StorageProvider",
]
