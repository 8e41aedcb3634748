"""Blob storage clients for product images.

HttpBlobStorage talks to the storage REST API of the hosted backend
(/storage/v1/object/...). Public objects are served from
/storage/v1/object/public/{bucket}/{path}.
"""

from typing import Optional

import httpx
import logfire

from whizlist.adapter.error import StorageError
from whizlist.domain.service.image_service import BlobStorage


class StorageClient(BlobStorage):
    """Base class for blob storage clients.

    Provides type distinction for dependency injection.
    """

    public_prefix: str = ""

    def public_url(self, path: str) -> str:
        return f"{self.public_prefix}{path}"

    def object_path(self, url: str) -> Optional[str]:
        if not url or not url.startswith(self.public_prefix):
            return None
        path = url[len(self.public_prefix) :].split("?", 1)[0]
        return path or None


class HttpBlobStorage(StorageClient):
    """Blob storage over the storage REST API."""

    def __init__(
        self,
        base_url: str,
        bucket: str,
        service_key: str,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize storage client.

        Args:
            base_url: Base URL of the backend
            bucket: Bucket holding product images
            service_key: Service role key used for writes
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.bucket = bucket
        self.service_key = service_key
        self.timeout = timeout
        self.transport = transport
        self.public_prefix = f"{self.base_url}/storage/v1/object/public/{bucket}/"

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self.transport, timeout=self.timeout, follow_redirects=True
        )

    async def _send(self, action: str, request: httpx.Request) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.send(request)
        except httpx.HTTPError as e:
            logfire.error("Storage HTTP error", action=action, error=str(e))
            raise StorageError(f"HTTP error during {action}: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Storage request failed",
                action=action,
                status_code=response.status_code,
                error=response.text,
            )
            raise StorageError(f"{action} failed: {response.status_code}")
        return response

    async def download(self, url: str) -> tuple[bytes, Optional[str]]:
        response = await self._send("download", httpx.Request("GET", url))
        return response.content, response.headers.get("content-type")

    async def upload(
        self, path: str, data: bytes, content_type: str, upsert: bool = True
    ) -> None:
        headers = {
            **self._headers,
            "Content-Type": content_type,
            "x-upsert": "true" if upsert else "false",
        }
        await self._send(
            "upload",
            httpx.Request(
                "POST",
                f"{self.base_url}/storage/v1/object/{self.bucket}/{path}",
                content=data,
                headers=headers,
            ),
        )

    async def copy(self, source_path: str, destination_path: str) -> None:
        await self._send(
            "copy",
            httpx.Request(
                "POST",
                f"{self.base_url}/storage/v1/object/copy",
                json={
                    "bucketId": self.bucket,
                    "sourceKey": source_path,
                    "destinationKey": destination_path,
                },
                headers=self._headers,
            ),
        )

    async def remove(self, path: str) -> None:
        await self._send(
            "remove",
            httpx.Request(
                "DELETE",
                f"{self.base_url}/storage/v1/object/{self.bucket}",
                json={"prefixes": [path]},
                headers=self._headers,
            ),
        )


class InMemoryBlobStorage(StorageClient):
    """In-memory blob storage for development and testing.

    remote_files stands in for the web: download() serves from it.
    """

    def __init__(
        self,
        public_prefix: str = "https://storage.test/product-images/",
        remote_files: dict[str, tuple[bytes, Optional[str]]] | None = None,
    ) -> None:
        self.public_prefix = public_prefix
        self.remote_files = remote_files or {}
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.fail_copy = False

    async def download(self, url: str) -> tuple[bytes, Optional[str]]:
        if url not in self.remote_files:
            raise StorageError(f"download failed: {url}")
        return self.remote_files[url]

    async def upload(
        self, path: str, data: bytes, content_type: str, upsert: bool = True
    ) -> None:
        if path in self.objects and not upsert:
            raise StorageError(f"object exists: {path}")
        self.objects[path] = (data, content_type)

    async def copy(self, source_path: str, destination_path: str) -> None:
        if self.fail_copy or source_path not in self.objects:
            raise StorageError(f"copy failed: {source_path}")
        self.objects[destination_path] = self.objects[source_path]

    async def remove(self, path: str) -> None:
        self.objects.pop(path, None)
