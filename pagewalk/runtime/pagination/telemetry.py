"""Structured logging for pagination.

This module provides telemetry hooks for paginated calls, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    path: str,
    page_index: int,
    offset: int,
    next_offset: int,
    total: int,
) -> None:
    """Log a page appended to the result set.

    Args:
        path: Endpoint path
        page_index: Zero-based index of the page
        offset: Offset the page was requested with
        next_offset: Offset for the following request
        total: Known record total, -1 if not applicable
    """
    logger.info(
        "page_fetched",
        extra={
            "path": path,
            "page_index": page_index,
            "offset": offset,
            "next_offset": next_offset,
            "total": total,
        },
    )


def log_total_missing(*, path: str, total_field: str) -> None:
    """Log a first page without a readable total."""
    logger.warning(
        "pagination_total_missing",
        extra={"path": path, "total_field": total_field},
    )


def log_pagination_complete(
    *,
    path: str,
    pages: int,
    errors_recorded: int,
    latency_ms: float,
) -> None:
    """Log the end of a paginated call.

    Args:
        path: Endpoint path
        pages: Pages fetched
        errors_recorded: Failures absorbed by the error budget
        latency_ms: Wall time of the whole call in milliseconds
    """
    logger.info(
        "pagination_complete",
        extra={
            "path": path,
            "pages": pages,
            "errors_recorded": errors_recorded,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_error(
    *,
    path: str,
    pages: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a paginated call that failed and discarded its partial results."""
    logger.error(
        "pagination_error",
        extra={
            "path": path,
            "pages_discarded": pages,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
