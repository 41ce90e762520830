"""HTTP client helper."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import aiohttp
from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL


@dataclass(frozen=True)
class HTTPResponse:
    """Status, headers and raw body of a completed exchange."""

    status: int
    body: bytes = b""
    headers: CIMultiDictProxy[str] | CIMultiDict[str] = field(default_factory=CIMultiDict)


class HTTPClient:
    """Async HTTP client wrapper owning the shared connection pool."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        # None keeps aiohttp's default timeouts
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            if self.timeout is not None:
                self._session = aiohttp.ClientSession(timeout=self.timeout)
            else:
                self._session = aiohttp.ClientSession()
        return self._session

    def build_url(self, path: str, params: Iterable[tuple[str, str]] = ()) -> URL:
        """Compose an absolute URL from the base URL, a path and query pairs.

        Raises:
            ValueError: If the path carries its own query string or the
                result is not an absolute URL
        """
        if "?" in path:
            raise ValueError(f"path {path!r} must not contain a query string")
        # If base_url is set and path is relative, combine them
        if self.base_url and not path.startswith(("http://", "https://")):
            path = f"{self.base_url}/{path.lstrip('/')}"
        url = URL(path)
        if not url.is_absolute():
            raise ValueError(f"unable to build absolute url from {path!r}")
        return url.with_query(list(params))

    async def request(
        self,
        method: str,
        url: URL | str,
        *,
        headers: CIMultiDict[str] | None = None,
        data: bytes | None = None,
    ) -> HTTPResponse:
        """Send one request and read the whole body.

        Status codes are returned as-is; classifying them is the caller's job.
        """
        async with self.session.request(method, url, headers=headers, data=data) as response:
            body = await response.read()
            return HTTPResponse(status=response.status, body=body, headers=response.headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
