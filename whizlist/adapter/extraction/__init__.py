"""Content extraction service integration."""

from .client import (
    ExtractionClient,
    HttpContentExtractor,
    MockContentExtractor,
    parse_extraction_data,
)

__all__ = [
    "ExtractionClient",
    "HttpContentExtractor",
    "MockContentExtractor",
    "parse_extraction_data",
]
