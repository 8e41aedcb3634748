"""Blob storage integration for product images."""

from .client import HttpBlobStorage, InMemoryBlobStorage, StorageClient

__all__ = ["HttpBlobStorage", "InMemoryBlobStorage", "StorageClient"]
