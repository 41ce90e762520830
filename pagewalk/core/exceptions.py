"""Custom exception hierarchy."""

from __future__ import annotations


class PagewalkError(Exception):
    """Base exception for all library errors.

    Errors raised inside the request loop carry a short ``stage`` tag naming
    the step that produced them (``build``, ``send``, ``classify``,
    ``decode``). The tag is prefixed to the rendered message.
    """

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage

    def __str__(self) -> str:
        if self.stage:
            return f"{self.stage}: {self.message}"
        return self.message


class ConfigurationError(PagewalkError):
    """Missing credential or invalid request descriptor.

    Raised before any I/O and never retried.
    """

    pass


class TransportError(PagewalkError):
    """Request construction or network send failure."""

    pass


class UpstreamError(PagewalkError):
    """Error reported by the remote API through its status code."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        stage: str | None = None,
    ) -> None:
        super().__init__(message, stage=stage)
        self.status_code = status_code


class RateLimitError(UpstreamError):
    """Remote rate limit exceeded (HTTP 429).

    Never retried internally so callers can apply their own backoff.
    """

    def __init__(
        self,
        message: str = "429 rate limit requests exceeded",
        retry_after: float | None = None,
        *,
        stage: str | None = None,
    ) -> None:
        super().__init__(message, status_code=429, stage=stage)
        self.retry_after = retry_after


class UpstreamFatalError(UpstreamError):
    """Non-retryable upstream failure (401, 403, 404, 415)."""

    pass


class PaginationError(UpstreamFatalError):
    """Pagination metadata missing or unusable in a page response."""

    pass


class UpstreamTransientError(UpstreamError):
    """Retryable upstream failure (500, 502, 504 or an unhandled code)."""

    pass


class DecodeError(PagewalkError):
    """Response body could not be decoded as a JSON object."""

    pass


class PathError(PagewalkError):
    """Field missing or of the wrong type while walking a document path."""

    pass
