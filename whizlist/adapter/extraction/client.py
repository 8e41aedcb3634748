"""Content extraction service client.

The extraction tiers run as serverless functions behind
{base_url}/functions/v1/{function}. Each takes the page URL plus the list
of fields to extract and answers {"success": bool, "data": {...},
"error": str}.
"""

import asyncio
from typing import Any

import httpx
import logfire

from whizlist.adapter.error import ExtractionError
from whizlist.domain.service.extraction import ContentExtractor
from whizlist.domain.value import ExtractedProduct

# Field definitions sent with every request
PRODUCT_FIELDS: list[dict[str, str]] = [
    {"name": "title", "description": "Product name/title", "dataType": "string"},
    {
        "name": "description",
        "description": "Full product description",
        "dataType": "string",
    },
    {
        "name": "price",
        "description": "Current price of the product",
        "dataType": "string",
    },
    {
        "name": "imageUrl",
        "description": "URL of the main/primary product image",
        "dataType": "string",
    },
    {
        "name": "features",
        "description": "List of product features or highlights",
        "dataType": "array",
        "arrayItemType": "string",
    },
]


def parse_extraction_data(data: dict[str, Any]) -> ExtractedProduct:
    """Map the service's data object onto ExtractedProduct."""
    price = data.get("price")
    features = data.get("features")
    return ExtractedProduct(
        title=data.get("title"),
        description=data.get("description"),
        price=str(price) if price is not None else None,
        image_url=data.get("imageUrl") or data.get("image_url"),
        features=features if isinstance(features, list) else [],
    )


class ExtractionClient(ContentExtractor):
    """Base class for content extraction clients.

    Provides type distinction for dependency injection.
    """

    pass


class HttpContentExtractor(ExtractionClient):
    """Content extraction over HTTP with retries.

    Network errors and 5xx answers are retried with a linear backoff
    (retry_delay * attempt). 4xx answers and success=false bodies fail
    immediately.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        fast_function: str,
        deep_function: str,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize extraction client.

        Args:
            base_url: Base URL of the functions host
            api_key: Key sent as bearer token
            fast_function: Function name of the fast tier
            deep_function: Function name of the deep tier
            timeout: Per-request timeout in seconds
            max_retries: Total attempts per extraction
            retry_delay: Base delay between attempts in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.fast_function = fast_function
        self.deep_function = deep_function
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay
        self.transport = transport

    async def extract_fast(self, url: str) -> ExtractedProduct:
        return await self._invoke(self.fast_function, url)

    async def extract_deep(self, url: str) -> ExtractedProduct:
        return await self._invoke(self.deep_function, url)

    async def _invoke(self, function: str, url: str) -> ExtractedProduct:
        """Call an extraction function, retrying transient failures.

        Raises:
            ExtractionError: If every attempt fails or the service reports
                a failure
        """
        endpoint = f"{self.base_url}/functions/v1/{function}"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "apikey": self.api_key,
        }
        payload = {"url": url, "fields": PRODUCT_FIELDS}

        with logfire.span("extraction.invoke", function=function, url=url):
            last_error = "no attempt made"
            for attempt in range(1, self.max_retries + 1):
                try:
                    async with httpx.AsyncClient(
                        transport=self.transport, timeout=self.timeout
                    ) as client:
                        response = await client.post(
                            endpoint, json=payload, headers=headers
                        )
                except httpx.HTTPError as e:
                    last_error = f"HTTP error: {e}"
                    logfire.warn(
                        "Extraction request failed",
                        function=function,
                        attempt=attempt,
                        error=str(e),
                    )
                else:
                    if response.status_code >= 500:
                        last_error = f"server error {response.status_code}"
                        logfire.warn(
                            "Extraction service error",
                            function=function,
                            attempt=attempt,
                            status_code=response.status_code,
                        )
                    else:
                        return self._parse(function, response)

                if attempt < self.max_retries:
                    await asyncio.sleep(self.retry_delay * attempt)

            logfire.error(
                "Extraction failed after retries",
                function=function,
                attempts=self.max_retries,
                error=last_error,
            )
            raise ExtractionError(
                f"{function} failed after {self.max_retries} attempts: {last_error}"
            )

    def _parse(self, function: str, response: httpx.Response) -> ExtractedProduct:
        try:
            body = response.json()
        except ValueError:
            logfire.error(
                "Extraction returned invalid JSON",
                function=function,
                status_code=response.status_code,
            )
            raise ExtractionError(f"{function} returned invalid JSON")

        if not isinstance(body, dict):
            raise ExtractionError(f"{function} returned an unexpected body")

        if response.status_code != 200 or not body.get("success"):
            error = body.get("error") or f"status {response.status_code}"
            logfire.warn("Extraction unsuccessful", function=function, error=error)
            raise ExtractionError(f"{function} failed: {error}")

        data = body.get("data") or {}
        if not isinstance(data, dict):
            raise ExtractionError(f"{function} returned an unexpected data object")

        extracted = parse_extraction_data(data)
        logfire.info(
            "Extraction succeeded",
            function=function,
            has_title=extracted.title is not None,
            has_image=extracted.image_url is not None,
            features=len(extracted.features),
        )
        return extracted


class MockContentExtractor(ExtractionClient):
    """Mock extraction client for development and testing.

    Returns canned results per URL, falling back to an empty result.
    URLs listed in failing_urls raise ExtractionError.
    """

    def __init__(
        self,
        fast_results: dict[str, ExtractedProduct] | None = None,
        deep_results: dict[str, ExtractedProduct] | None = None,
        failing_urls: set[str] | None = None,
    ) -> None:
        self.fast_results = fast_results or {}
        self.deep_results = deep_results or {}
        self.failing_urls = failing_urls or set()
        self.calls: list[tuple[str, str]] = []

    async def extract_fast(self, url: str) -> ExtractedProduct:
        self.calls.append(("fast", url))
        if url in self.failing_urls:
            raise ExtractionError(f"mock extraction failure for {url}")
        return self.fast_results.get(url, ExtractedProduct())

    async def extract_deep(self, url: str) -> ExtractedProduct:
        self.calls.append(("deep", url))
        if url in self.failing_urls:
            raise ExtractionError(f"mock extraction failure for {url}")
        return self.deep_results.get(url, ExtractedProduct())
