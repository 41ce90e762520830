"""Pagewalk - Resilient request executor for paginated JSON HTTP APIs."""

from .api import APIClient
from .core import (
    ClientSettings,
    ConfigurationError,
    DecodeError,
    HttpMethod,
    LimitAsOffset,
    OffsetField,
    PagewalkError,
    PaginationError,
    PathError,
    RateLimitError,
    RequestBuilder,
    RequestDescriptor,
    TransportError,
    UpstreamError,
    UpstreamFatalError,
    UpstreamTransientError,
    build_base_request,
    get_settings,
)
from .runtime import HTTPClient, Paginator, RequestExecutor, RestRunner
from .utils import convert_to_documents, flatten_path, locate_field

__version__ = "0.1.0"

__all__ = [
    "APIClient",
    "ClientSettings",
    "get_settings",
    "HttpMethod",
    "OffsetField",
    "LimitAsOffset",
    "RequestDescriptor",
    "RequestBuilder",
    "build_base_request",
    "HTTPClient",
    "RequestExecutor",
    "Paginator",
    "RestRunner",
    "flatten_path",
    "convert_to_documents",
    "locate_field",
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
]
