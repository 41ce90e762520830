"""HTTP status classification for the request loop."""

from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import StatusAction
from .telemetry import log_unhandled_status

# Fixed delays, not backoff
SERVER_ERROR_DELAY = 1.0
GATEWAY_ERROR_DELAY = 2.0

_FATAL_MESSAGES = {
    401: "401 authentication invalid",
    403: "403 authentication permissions insufficient",
    404: "404 unknown endpoint",
    415: "415 unsupported media type",
}


@dataclass(frozen=True)
class Classification:
    """Action to take for a response status.

    Attributes:
        action: What the executor should do
        delay: Seconds to wait before retrying (RETRY only)
        message: Description used for the raised or recorded error
    """

    action: StatusAction
    delay: float = 0.0
    message: str = ""


ACCEPT = Classification(StatusAction.ACCEPT)


def classify(status: int, expected: int, body: bytes = b"") -> Classification:
    """Map a response status to an action.

    Any status equal to ``expected`` is accepted, whatever its value.

    Args:
        status: Response status code
        expected: The descriptor's success status
        body: Response body, logged for unhandled codes

    Returns:
        Classification for the executor
    """
    if status == expected:
        return ACCEPT

    if status in _FATAL_MESSAGES:
        return Classification(StatusAction.FATAL, message=_FATAL_MESSAGES[status])
    if status == 429:
        return Classification(StatusAction.RATE_LIMITED, message="429 rate limit requests exceeded")
    if status == 500:
        return Classification(
            StatusAction.RETRY, delay=SERVER_ERROR_DELAY, message="internal server error"
        )
    if status in (502, 504):
        return Classification(
            StatusAction.RETRY, delay=GATEWAY_ERROR_DELAY, message=f"{status} timeout"
        )

    log_unhandled_status(status=status, body=body)
    return Classification(StatusAction.RETRY, message=f"unhandled code: {status}")
