"""Structured logging for single-request execution.

Every event is logged under a stable event name with its fields in
``extra`` so JSON formatters can pick them up.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Unhandled-status bodies are truncated to this many bytes in logs
MAX_LOGGED_BODY = 2048


def log_request_attempt(*, method: str, url: str, attempt: int) -> None:
    """Log an outgoing request.

    Args:
        method: HTTP verb
        url: Absolute URL with the credential value masked
        attempt: One-based attempt number within the call
    """
    logger.debug(
        "request_attempt",
        extra={"method": method, "url": url, "attempt": attempt},
    )


def log_unhandled_status(*, status: int, body: bytes) -> None:
    """Log the body of a response with a status the classifier does not know."""
    logger.warning(
        "unhandled_status",
        extra={
            "status": status,
            "body": body[:MAX_LOGGED_BODY].decode("utf-8", errors="replace"),
        },
    )


def log_request_retry(
    *,
    stage: str,
    error_count: int,
    threshold: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failure that still fits inside the error budget.

    Args:
        stage: Step that failed (build, send, classify, decode)
        error_count: Failures recorded so far in this call
        threshold: Failures tolerated before the call aborts
        error_type: Exception class name
        error_message: Exception message
    """
    logger.warning(
        "request_retry",
        extra={
            "stage": stage,
            "error_count": error_count,
            "threshold": threshold,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_request_failed(*, stage: str | None, error_type: str, error_message: str) -> None:
    """Log the error that ends a call."""
    logger.error(
        "request_failed",
        extra={
            "stage": stage,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
