"""Unit tests for the exception hierarchy."""

from __future__ import annotations

from pagewalk.core import (
    PagewalkError,
    PaginationError,
    RateLimitError,
    TransportError,
    UpstreamError,
    UpstreamFatalError,
    UpstreamTransientError,
)


class TestExceptions:
    """Test stage tagging and class relationships."""

    def test_stage_prefixes_message(self):
        error = TransportError("connection refused", stage="send")
        assert str(error) == "send: connection refused"
        assert error.message == "connection refused"
        assert error.stage == "send"

    def test_no_stage(self):
        assert str(PagewalkError("boom")) == "boom"

    def test_rate_limit_defaults(self):
        error = RateLimitError()
        assert error.status_code == 429
        assert error.retry_after is None
        assert "429" in str(error)
        assert isinstance(error, UpstreamError)

    def test_pagination_error_is_fatal(self):
        assert issubclass(PaginationError, UpstreamFatalError)

    def test_transient_and_fatal_are_distinct(self):
        assert not issubclass(UpstreamTransientError, UpstreamFatalError)
        assert not issubclass(RateLimitError, UpstreamFatalError)
