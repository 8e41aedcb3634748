"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class ExtractionError(ProviderError):
    """Content extraction service failed or returned no data."""

    pass


class StorageError(ProviderError):
    """Blob storage request failed."""

    pass
