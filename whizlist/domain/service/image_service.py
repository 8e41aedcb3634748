"""Product image storage.

Product images are copied into our own blob storage so that they survive
the source page changing. Objects are keyed {owner_id}/{product_id}.{ext}
and uploads overwrite, so re-enhancing a product replaces its image.
"""

from typing import Optional
from urllib.parse import urlparse

import logfire

from whizlist.domain.value import ProductId, UserId

from .base import Service

ALLOWED_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "webp")
DEFAULT_EXTENSION = "jpg"

_CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}


class BlobStorage:
    """Generic blob storage client interface."""

    async def download(self, url: str) -> tuple[bytes, Optional[str]]:
        """Fetch a remote file.

        Args:
            url: Absolute URL of the file

        Returns:
            Tuple of (content, content type if known)
        """
        raise NotImplementedError

    async def upload(
        self, path: str, data: bytes, content_type: str, upsert: bool = True
    ) -> None:
        """Store an object at a path in the bucket."""
        raise NotImplementedError

    async def copy(self, source_path: str, destination_path: str) -> None:
        """Copy an object inside the bucket."""
        raise NotImplementedError

    async def remove(self, path: str) -> None:
        """Delete an object from the bucket."""
        raise NotImplementedError

    def public_url(self, path: str) -> str:
        """Public URL for an object path."""
        raise NotImplementedError

    def object_path(self, url: str) -> Optional[str]:
        """Object path for a public URL of this bucket.

        Returns:
            The path, or None when the URL does not point into this bucket
        """
        raise NotImplementedError


def image_extension(url: str, content_type: Optional[str] = None) -> str:
    """Pick the file extension for a product image.

    The URL path wins when it ends in a known image extension, then the
    content type, then jpg.
    """
    path = urlparse(url).path if url else ""
    if "." in path.rsplit("/", 1)[-1]:
        extension = path.rsplit(".", 1)[-1].lower()
        if extension in ALLOWED_EXTENSIONS:
            return extension

    if content_type:
        media_type = content_type.split(";", 1)[0].strip().lower()
        if media_type in _CONTENT_TYPE_EXTENSIONS:
            return _CONTENT_TYPE_EXTENSIONS[media_type]

    return DEFAULT_EXTENSION


def image_path(owner_id: UserId, product_id: ProductId, extension: str) -> str:
    """Object path of a product image."""
    return f"{owner_id}/{product_id}.{extension}"


class ImageService(Service):
    """Domain service for product image storage."""

    def __init__(self, storage: BlobStorage) -> None:
        """Initialize image service.

        Args:
            storage: Blob storage client
        """
        self.storage = storage

    def is_stored(self, image_url: str | None) -> bool:
        """True when the URL points at an image in our bucket."""
        return bool(image_url) and self.storage.object_path(image_url) is not None

    async def upload_from_url(
        self, owner_id: UserId, product_id: ProductId, image_url: str
    ) -> str:
        """Download an external image and store it for a product.

        Args:
            owner_id: Owner of the product
            product_id: Product the image belongs to
            image_url: External image URL

        Returns:
            Public URL of the stored image
        """
        with logfire.span(
            "image_service.upload_from_url",
            product_id=str(product_id),
            image_url=image_url,
        ):
            data, content_type = await self.storage.download(image_url)
            extension = image_extension(image_url, content_type)
            path = image_path(owner_id, product_id, extension)

            await self.storage.upload(
                path,
                data,
                content_type=content_type or f"image/{extension}",
                upsert=True,
            )
            public_url = self.storage.public_url(path)
            logfire.info(
                "Product image uploaded",
                product_id=str(product_id),
                path=path,
                size=len(data),
            )
            return public_url

    async def copy_image(
        self, owner_id: UserId, source_image_url: str, new_product_id: ProductId
    ) -> Optional[str]:
        """Copy a stored product image for a duplicated product.

        Returns:
            Public URL of the copy, or None when the source image is not in
            our bucket (the copy can share the external URL)
        """
        source_path = self.storage.object_path(source_image_url)
        if source_path is None:
            return None

        with logfire.span(
            "image_service.copy_image",
            source_path=source_path,
            product_id=str(new_product_id),
        ):
            extension = image_extension(source_image_url)
            destination = image_path(owner_id, new_product_id, extension)
            await self.storage.copy(source_path, destination)
            logfire.info(
                "Product image copied", source_path=source_path, path=destination
            )
            return self.storage.public_url(destination)

    async def delete_image(self, image_url: str | None) -> bool:
        """Remove a stored product image.

        Returns:
            True if an object was removed, False for external or missing URLs
        """
        path = self.storage.object_path(image_url) if image_url else None
        if path is None:
            return False

        with logfire.span("image_service.delete_image", path=path):
            await self.storage.remove(path)
            logfire.info("Product image removed", path=path)
            return True
