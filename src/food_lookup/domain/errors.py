"""Errors raised by food data providers."""


class ProviderError(Exception):
    """Base error for a failed provider lookup."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider


class NetworkFailureError(ProviderError):
    """The request never produced a response."""


class InvalidResponseError(ProviderError):
    """The response payload does not have the expected shape."""


class StatusCodeError(ProviderError):
    """The provider answered with a non-2xx status."""

    def __init__(
        self, status_code: int, message: str | None = None, provider: str | None = None
    ) -> None:
        super().__init__(message or f"Unexpected status code {status_code}", provider)
        self.status_code = status_code


class DecodingError(ProviderError):
    """The response body could not be decoded."""
