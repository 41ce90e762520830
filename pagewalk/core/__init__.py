"""Core components."""

from .enums import HttpMethod, StatusAction
from .exceptions import (
    ConfigurationError,
    DecodeError,
    PagewalkError,
    PaginationError,
    PathError,
    RateLimitError,
    TransportError,
    UpstreamError,
    UpstreamFatalError,
    UpstreamTransientError,
)
from .request import (
    LimitAsOffset,
    OffsetField,
    Pagination,
    RequestBuilder,
    RequestDescriptor,
    build_base_request,
)
from .settings import ClientSettings, get_settings

__all__ = [
    "HttpMethod",
    "StatusAction",
    "PagewalkError",
    "ConfigurationError",
    "TransportError",
    "UpstreamError",
    "RateLimitError",
    "UpstreamFatalError",
    "PaginationError",
    "UpstreamTransientError",
    "DecodeError",
    "PathError",
    "OffsetField",
    "LimitAsOffset",
    "Pagination",
    "RequestDescriptor",
    "RequestBuilder",
    "build_base_request",
    "ClientSettings",
    "get_settings",
]
