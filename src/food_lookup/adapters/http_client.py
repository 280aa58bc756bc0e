"""JSON-over-HTTP transport shared by provider clients."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

import httpx

from food_lookup.domain.errors import (
    DecodingError,
    NetworkFailureError,
    StatusCodeError,
)


class HttpMethod(StrEnum):
    """Supported HTTP verbs."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass(frozen=True)
class HttpRequest:
    """A single outbound request."""

    url: str
    method: HttpMethod = HttpMethod.GET
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str | int] = field(default_factory=dict)
    json: dict[str, object] | None = None


class HttpClient(Protocol):
    """Interface for sending a request and decoding the JSON reply."""

    async def send(self, request: HttpRequest) -> object:
        """Send a request and return the decoded JSON payload."""


@dataclass
class HttpxHttpClient(HttpClient):
    """HTTPX-backed transport."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, timeout_seconds: float = 15, user_agent: str | None = None
    ) -> "HttpxHttpClient":
        """Create a transport with a managed httpx session."""
        headers = {"User-Agent": user_agent} if user_agent else None
        return cls(
            http_client=httpx.AsyncClient(headers=headers),
            timeout_seconds=timeout_seconds,
        )

    async def send(self, request: HttpRequest) -> object:
        """Send a request, mapping failures to provider errors."""
        try:
            response = await self.http_client.request(
                request.method.value,
                request.url,
                headers=request.headers or None,
                params=request.params or None,
                json=request.json,
                timeout=self.timeout_seconds,
            )
        except httpx.TransportError as exc:
            raise NetworkFailureError(f"{type(exc).__name__}: {exc}") from exc

        if not response.is_success:
            raise StatusCodeError(response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise DecodingError(f"Invalid JSON body: {exc}") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
