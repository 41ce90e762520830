"""Error budget shared by every round trip of one call."""

from __future__ import annotations

from ...core.exceptions import PagewalkError
from .telemetry import log_request_failed, log_request_retry


class ErrorBudget:
    """Counts failures within one call and aborts once the threshold is hit.

    A paginated call shares one budget across all of its pages. The count is
    not reset by successful round trips.
    """

    def __init__(self, threshold: int) -> None:
        if threshold < 1:
            raise ValueError("threshold must be at least 1")
        self.threshold = threshold
        self.count = 0

    @property
    def exhausted(self) -> bool:
        return self.count >= self.threshold

    def record(self, error: PagewalkError, cause: BaseException | None = None) -> None:
        """Record a failure.

        Raises:
            PagewalkError: ``error`` itself, chained to ``cause``, once the
                threshold is reached
        """
        self.count += 1
        if self.exhausted:
            log_request_failed(
                stage=error.stage, error_type=type(error).__name__, error_message=str(error)
            )
            if cause is not None:
                raise error from cause
            raise error
        log_request_retry(
            stage=error.stage or "unknown",
            error_count=self.count,
            threshold=self.threshold,
            error_type=type(error).__name__,
            error_message=str(error),
        )
