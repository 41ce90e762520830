"""Single-request execution with classification and bounded retries."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

import aiohttp
from multidict import CIMultiDict
from yarl import URL

from ...core.enums import StatusAction
from ...core.exceptions import (
    DecodeError,
    PaginationError,
    RateLimitError,
    TransportError,
    UpstreamFatalError,
    UpstreamTransientError,
)
from ...core.request import RequestDescriptor
from ...core.settings import ClientSettings
from .budget import ErrorBudget
from .classifier import classify
from .http_client import HTTPClient, HTTPResponse
from .telemetry import log_request_attempt, log_request_failed

JSONDocument = dict[str, Any]


def compose_headers(pairs: Iterable[tuple[str, str]]) -> CIMultiDict[str]:
    """Apply header pairs in order; a repeated name keeps its last value."""
    headers: CIMultiDict[str] = CIMultiDict()
    for name, value in pairs:
        headers[name] = value
    return headers


def redact_query(url: URL, secret_param: str) -> URL:
    """Return ``url`` with the value of ``secret_param`` masked."""
    if secret_param not in url.query:
        return url
    return url.with_query(
        [(k, "***" if k == secret_param else v) for k, v in url.query.items()]
    )


def _retry_after(response: HTTPResponse) -> float | None:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class RequestExecutor:
    """Sends one descriptor, retrying transient failures.

    Each failure (request build, network send, retryable status, JSON decode)
    is recorded against an ErrorBudget. Rate limiting and fatal statuses end
    the call at once without touching the budget.
    """

    def __init__(
        self,
        http: HTTPClient,
        settings: ClientSettings,
        *,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """Initialize the executor.

        Args:
            http: Transport used for every round trip
            settings: Source of the error threshold
            sleep: Coroutine used for classifier delays
        """
        self._http = http
        self._settings = settings
        self._sleep = sleep

    def new_budget(self) -> ErrorBudget:
        """Create a budget sized by the currently configured threshold."""
        return ErrorBudget(self._settings.error_threshold)

    async def execute(
        self,
        descriptor: RequestDescriptor,
        query_override: Mapping[str, str] | None = None,
        *,
        budget: ErrorBudget | None = None,
        require_body: bool = False,
    ) -> JSONDocument | None:
        """Execute a descriptor until it is accepted or fails.

        Args:
            descriptor: Request to send
            query_override: Query entries replacing same-named descriptor params
            budget: Shared budget; a fresh one is created when omitted
            require_body: Treat an empty accepted body as an error

        Returns:
            The decoded JSON object, or None for an empty accepted body

        Raises:
            RateLimitError: On HTTP 429
            UpstreamFatalError: On 401, 403, 404 or 415
            PaginationError: On an empty body when ``require_body`` is set
            TransportError, UpstreamTransientError, DecodeError: When the
                budget is exhausted
        """
        if budget is None:
            budget = self.new_budget()
        attempt = 0

        while True:
            attempt += 1
            try:
                url = self._http.build_url(
                    descriptor.path, descriptor.merged_query(query_override)
                )
                headers = compose_headers(descriptor.headers)
            except (TypeError, ValueError) as e:
                budget.record(TransportError(str(e), stage="build"), e)
                continue

            log_request_attempt(
                method=descriptor.method.value,
                url=str(redact_query(url, self._settings.credential_param)),
                attempt=attempt,
            )
            try:
                response = await self._http.request(
                    descriptor.method.value, url, headers=headers, data=descriptor.body
                )
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                budget.record(TransportError(str(e) or type(e).__name__, stage="send"), e)
                continue

            verdict = classify(response.status, descriptor.success_status, response.body)
            if verdict.action is StatusAction.RATE_LIMITED:
                error = RateLimitError(
                    verdict.message, retry_after=_retry_after(response), stage="classify"
                )
                log_request_failed(
                    stage=error.stage, error_type=type(error).__name__, error_message=str(error)
                )
                raise error
            if verdict.action is StatusAction.FATAL:
                error = UpstreamFatalError(
                    verdict.message, status_code=response.status, stage="classify"
                )
                log_request_failed(
                    stage=error.stage, error_type=type(error).__name__, error_message=str(error)
                )
                raise error
            if verdict.action is StatusAction.RETRY:
                if verdict.delay:
                    await self._sleep(verdict.delay)
                budget.record(
                    UpstreamTransientError(
                        verdict.message, status_code=response.status, stage="classify"
                    )
                )
                continue

            if not response.body:
                if require_body:
                    raise PaginationError(
                        "request body not found", status_code=response.status, stage="decode"
                    )
                return None

            try:
                document = json.loads(response.body)
            except ValueError as e:
                budget.record(DecodeError(str(e), stage="decode"), e)
                continue
            if not isinstance(document, dict):
                budget.record(DecodeError("response body is not a JSON object", stage="decode"))
                continue
            return document
