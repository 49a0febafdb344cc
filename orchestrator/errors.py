"""Error types raised along the query resolution path."""


class QueryServiceError(Exception):
    """Base class for all query service failures."""


class QueryValidationError(QueryServiceError, ValueError):
    """Query text is missing or blank; rejected before reaching the resolver."""


class UnknownProviderError(QueryServiceError):
    def __init__(self, provider: str, available: list[str] | None = None):
        self.provider = provider
        self.available = list(available or [])
        message = f"AI provider '{provider}' is not supported"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ProviderProcessingError(QueryServiceError):
    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"AI processing failed: {message}")


class FetchFailedError(QueryServiceError):
    """A store or provider failure while reading data."""
