"""REST runtime abstractions."""

from .budget import ErrorBudget
from .classifier import Classification, classify
from .executor import RequestExecutor, compose_headers
from .http_client import HTTPClient, HTTPResponse
from .runner import RestRunner

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "Classification",
    "classify",
    "ErrorBudget",
    "RequestExecutor",
    "compose_headers",
    "RestRunner",
]
