"""Runtime orchestration components."""

# rest must load before pagination: the runner imports the paginator,
# which imports the executor
from .rest import (
    ErrorBudget,
    HTTPClient,
    HTTPResponse,
    RequestExecutor,
    RestRunner,
    classify,
)
from .pagination import PaginationState, Paginator  # noqa: I001

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "ErrorBudget",
    "RequestExecutor",
    "RestRunner",
    "Paginator",
    "PaginationState",
    "classify",
]
