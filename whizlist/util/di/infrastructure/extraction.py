"""Content extraction infrastructure providers."""

from dishka import Scope, provide

from whizlist.adapter.extraction import HttpContentExtractor
from whizlist.config import ExtractionSettings
from whizlist.domain.service import ContentExtractor
from whizlist.util.di.base import ProviderBase
from whizlist.util.observability import instrument_httpx


class ExtractionProvider(ProviderBase):
    """Content extraction component base."""

    __mock_component__ = "extraction"


class ProdExtractionProvider(ExtractionProvider):
    """Production extraction provider calling the serverless functions."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_content_extractor(self, settings: ExtractionSettings) -> ContentExtractor:
        """Provide HTTP content extractor.

        Raises:
            ValueError: If the extraction service is not configured
        """
        if not settings.base_url:
            raise ValueError("Extraction base URL must be configured")

        instrument_httpx()
        return HttpContentExtractor(
            base_url=settings.base_url,
            api_key=settings.api_key,
            fast_function=settings.fast_function,
            deep_function=settings.deep_function,
            timeout=settings.timeout_seconds,
            max_retries=settings.max_retries,
            retry_delay=settings.retry_delay_seconds,
        )
