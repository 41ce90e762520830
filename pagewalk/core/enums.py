"""Core enumerations shared by the request, classifier and pagination layers.

Design Decisions:
    - String enums: values are sent on the wire as-is (HTTP verbs) or logged
      as structured fields (status actions)
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs accepted by a request descriptor."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, value: "HttpMethod | str") -> "HttpMethod":
        """Normalize a verb given as enum member or case-insensitive string."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


class StatusAction(str, Enum):
    """Outcome of classifying an HTTP response status."""

    ACCEPT = "accept"
    RETRY = "retry"
    RATE_LIMITED = "rate_limited"
    FATAL = "fatal"
