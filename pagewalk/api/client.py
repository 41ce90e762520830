"""Ergonomic APIClient facade for executing request descriptors.

The APIClient ties together the settings, the shared HTTP connection pool,
the single-request executor and the paginator behind a small async API.

Architecture:
    This module implements the Facade pattern to keep callers unaware of
    which pagination convention an endpoint uses. APIClient handles:
    - Settings resolution (explicit instance, else the process default)
    - Descriptor construction with the configured credential injected
    - Delegation to RestRunner for single or paginated execution
    - Resource lifecycle management of the aiohttp session

Design Decisions:
    - Settings injection instead of module-level globals; the threshold is
      read when each call starts, so changing it affects later calls only
    - HTTPClient injection allows testing with a mocked transport
    - Context manager pattern ensures the session is closed

See Also:
    - RequestDescriptor: Immutable request model
    - RestRunner: Dispatches to RequestExecutor or Paginator
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..core.enums import HttpMethod
from ..core.request import Pagination, RequestDescriptor, build_base_request
from ..core.settings import ClientSettings, get_settings
from ..runtime.rest import HTTPClient, RequestExecutor, RestRunner
from ..utils.paths import convert_to_documents, flatten_path

logger = logging.getLogger(__name__)


class APIClient:
    """High-level client for a paginated JSON HTTP API.

    Example:
        >>> settings = ClientSettings(api_key="demo", error_threshold=3)
        >>> async with APIClient(settings) as client:
        ...     pages = await client.execute_all(
        ...         client.request(
        ...             "GET",
        ...             "/contacts/v1/lists/all/contacts/all",
        ...             query_params={"count": "100"},
        ...             pagination=OffsetField("vidOffset", "vid-offset"),
        ...         )
        ...     )
        ...     contacts = flatten_path(pages, ["contacts"])
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        http: HTTPClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Client settings (defaults to the cached process settings)
            http: Optional HTTPClient (creates one from settings if not provided)
        """
        self.settings = settings or get_settings()
        self._owns_http = http is None
        self._http = http or HTTPClient(
            base_url=self.settings.base_url, timeout=self.settings.request_timeout
        )
        self._runner = RestRunner(RequestExecutor(self._http, self.settings))
        self._closed = False

    def request(
        self,
        method: HttpMethod | str,
        path: str,
        *,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        query_params: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        body: bytes | str | None = None,
        success_status: int = 200,
        pagination: Pagination | None = None,
    ) -> RequestDescriptor:
        """Build a descriptor carrying the configured credential.

        Raises:
            ConfigurationError: If no API key is configured or a field is invalid
        """
        return build_base_request(
            method,
            path,
            headers=headers,
            query_params=query_params,
            body=body,
            credential=self.settings.get_credential(),
            credential_param=self.settings.credential_param,
            success_status=success_status,
            pagination=pagination,
        )

    async def execute(self, descriptor: RequestDescriptor) -> dict[str, Any] | None:
        """Execute one request and return its JSON object (None if empty)."""
        return await self._runner.execute(descriptor)

    async def execute_all(self, descriptor: RequestDescriptor) -> list[dict[str, Any]]:
        """Fetch every page of a paginated descriptor."""
        return await self._runner.execute_all(descriptor)

    async def do(self, descriptor: RequestDescriptor) -> dict[str, Any] | list[dict[str, Any]] | None:
        """Execute a descriptor, walking pages when it is paginated."""
        return await self._runner.run(descriptor)

    async def close(self) -> None:
        """Close the underlying HTTP session if this client created it."""
        if self._closed:
            return
        if self._owns_http:
            await self._http.close()
        self._closed = True
        logger.debug("APIClient closed")

    async def __aenter__(self) -> APIClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


__all__ = ["APIClient", "flatten_path", "convert_to_documents"]
