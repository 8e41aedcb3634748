"""Unit tests for blob storage clients and image naming."""

import json

import httpx
import pytest

from whizlist.adapter.error import StorageError
from whizlist.adapter.storage import HttpBlobStorage, InMemoryBlobStorage
from whizlist.domain.service.image_service import image_extension, image_path


class TestImageExtension:
    @pytest.mark.parametrize(
        "url,content_type,expected",
        [
            ("https://cdn.example.com/a.PNG", None, "png"),
            ("https://cdn.example.com/a.webp?w=200", "image/jpeg", "webp"),
            ("https://cdn.example.com/image", "image/gif; charset=binary", "gif"),
            ("https://cdn.example.com/a.svg", "image/png", "png"),
            ("https://cdn.example.com/a.svg", None, "jpg"),
            ("https://cdn.example.com/photo", None, "jpg"),
        ],
    )
    def test_extension_choice(self, url, content_type, expected):
        assert image_extension(url, content_type) == expected

    def test_image_path_layout(self):
        assert image_path("owner", "product", "png") == "owner/product.png"


class TestInMemoryBlobStorage:
    def test_public_url_round_trip(self):
        storage = InMemoryBlobStorage(public_prefix="https://storage.test/b/")

        url = storage.public_url("u/p.jpg")

        assert url == "https://storage.test/b/u/p.jpg"
        assert storage.object_path(url + "?v=2") == "u/p.jpg"
        assert storage.object_path("https://elsewhere.test/u/p.jpg") is None

    @pytest.mark.asyncio
    async def test_upload_without_upsert_refuses_overwrite(self):
        storage = InMemoryBlobStorage()
        await storage.upload("a.jpg", b"1", "image/jpeg")

        with pytest.raises(StorageError):
            await storage.upload("a.jpg", b"2", "image/jpeg", upsert=False)


class TestHttpBlobStorage:
    """Tests for the storage REST client."""

    @pytest.mark.asyncio
    async def test_upload_posts_object_with_upsert(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"Key": "product-images/u/p.png"})

        storage = HttpBlobStorage(
            "https://backend.test/",
            "product-images",
            "service-key",
            transport=httpx.MockTransport(handler),
        )

        await storage.upload("u/p.png", b"png", "image/png")

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == (
            "https://backend.test/storage/v1/object/product-images/u/p.png"
        )
        assert request.headers["x-upsert"] == "true"
        assert request.headers["Content-Type"] == "image/png"
        assert request.content == b"png"
        assert storage.public_url("u/p.png") == (
            "https://backend.test/storage/v1/object/public/product-images/u/p.png"
        )

    @pytest.mark.asyncio
    async def test_copy_sends_keys(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        storage = HttpBlobStorage(
            "https://backend.test",
            "product-images",
            "service-key",
            transport=httpx.MockTransport(handler),
        )

        await storage.copy("u/a.jpg", "u/b.jpg")

        assert seen[0].url.path == "/storage/v1/object/copy"
        assert json.loads(seen[0].content) == {
            "bucketId": "product-images",
            "sourceKey": "u/a.jpg",
            "destinationKey": "u/b.jpg",
        }

    @pytest.mark.asyncio
    async def test_download_returns_content_type(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, content=b"gif", headers={"content-type": "image/gif"}
            )

        storage = HttpBlobStorage(
            "https://backend.test",
            "product-images",
            "service-key",
            transport=httpx.MockTransport(handler),
        )

        data, content_type = await storage.download("https://cdn.example.com/x")

        assert data == b"gif"
        assert content_type == "image/gif"

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"error": "forbidden"})

        storage = HttpBlobStorage(
            "https://backend.test",
            "product-images",
            "service-key",
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(StorageError, match="403"):
            await storage.remove("u/p.png")
