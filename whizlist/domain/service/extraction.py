"""Content extraction port.

Product pages are scraped by an external service exposing two tiers: a
fast heuristic pass (page metadata) and a slower LLM-backed pass that
reads the rendered page. Implementations live in the adapter layer.
"""

from whizlist.domain.value import ExtractedProduct


class ContentExtractor:
    """Generic content extraction client interface."""

    async def extract_fast(self, url: str) -> ExtractedProduct:
        """Extract product fields with the fast heuristic tier.

        Args:
            url: Product page URL

        Returns:
            Extracted fields (any may be missing)
        """
        raise NotImplementedError

    async def extract_deep(self, url: str) -> ExtractedProduct:
        """Extract product fields with the slow, thorough tier.

        Args:
            url: Product page URL

        Returns:
            Extracted fields (any may be missing)
        """
        raise NotImplementedError
