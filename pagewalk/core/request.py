"""Immutable request descriptors and their builders.

Architecture:
    A RequestDescriptor captures one logical API call: verb, path, headers,
    query parameters, body, the status code that means success, and an
    optional pagination mode. Descriptors are validated at construction and
    consumed read-only by the executor and paginator.

Design Decisions:
    - Frozen dataclasses: a descriptor is shared across every page of a call
    - Ordered pairs for headers and query parameters: application order is
      preserved and duplicates resolve to the last value
    - Pagination modes are separate types so the paginator can dispatch on
      the mode without flag combinations

See Also:
    - RequestExecutor: Sends a single descriptor
    - Paginator: Walks every page of a paginated descriptor
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .enums import HttpMethod
from .exceptions import ConfigurationError
from .settings import DEFAULT_CREDENTIAL_PARAM

Pairs = tuple[tuple[str, str], ...]


def _require(value: str, name: str) -> None:
    if not value:
        raise ConfigurationError(f"{name} must not be empty")


@dataclass(frozen=True)
class OffsetField:
    """Server-driven pagination.

    The response carries the next offset under ``result_offset_field``; the
    client sends it back under ``offset_param``.

    Attributes:
        offset_param: Query parameter carrying the offset
        result_offset_field: Response field holding the next offset
    """

    offset_param: str
    result_offset_field: str

    def __post_init__(self) -> None:
        _require(self.offset_param, "offset_param")
        _require(self.result_offset_field, "result_offset_field")


@dataclass(frozen=True)
class LimitAsOffset:
    """Client-driven pagination with a known total.

    The offset advances by ``limit_value`` each page until it reaches the
    total read from ``total_field`` on the first page.

    Attributes:
        offset_param: Query parameter carrying the offset
        limit_param: Query parameter carrying the page size
        limit_value: Page size, a non-negative integer in string form
        total_field: Response field holding the total number of records
        strict_total: Fail when the total cannot be read from the first page
    """

    offset_param: str
    limit_param: str
    limit_value: str
    total_field: str
    strict_total: bool = False

    def __post_init__(self) -> None:
        _require(self.offset_param, "offset_param")
        _require(self.limit_param, "limit_param")
        _require(self.total_field, "total_field")
        # Plain ASCII digits only, no sign, whitespace or underscores
        value = self.limit_value
        if not (isinstance(value, str) and value.isascii() and value.isdigit()):
            raise ConfigurationError(
                f"limit_value {value!r} is not a non-negative integer"
            )

    @property
    def limit(self) -> int:
        return int(self.limit_value)


Pagination = OffsetField | LimitAsOffset


@dataclass(frozen=True)
class RequestDescriptor:
    """Immutable description of one API call."""

    method: HttpMethod
    path: str
    headers: Pairs = ()
    query_params: Pairs = ()
    body: bytes | None = None
    success_status: int = 200
    pagination: Pagination | None = None

    def __post_init__(self) -> None:
        if not self.method:
            raise ConfigurationError("no http method set")
        try:
            object.__setattr__(self, "method", HttpMethod.parse(self.method))
        except ValueError as e:
            raise ConfigurationError(f"unsupported http method {self.method!r}") from e
        if not self.path:
            raise ConfigurationError("no url path set")
        status = self.success_status
        if isinstance(status, bool) or not isinstance(status, int) or not 1 <= status <= 599:
            raise ConfigurationError("http success code invalid")
        object.__setattr__(self, "headers", _to_pairs(self.headers))
        object.__setattr__(self, "query_params", _to_pairs(self.query_params))

    @property
    def is_paginated(self) -> bool:
        return self.pagination is not None

    def merged_query(self, override: Mapping[str, str] | None = None) -> list[tuple[str, str]]:
        """Return query pairs with ``override`` replacing same-named entries."""
        if not override:
            return list(self.query_params)
        merged = [(k, v) for k, v in self.query_params if k not in override]
        merged.extend((k, str(v)) for k, v in override.items())
        return merged


def _to_pairs(items: Mapping[str, str] | Iterable[tuple[str, str]] | None) -> Pairs:
    if items is None:
        return ()
    if isinstance(items, Mapping):
        items = items.items()
    return tuple((str(name), str(value)) for name, value in items)


def _zip_lists(names: Sequence[str], values: Sequence[str], kind: str) -> Pairs:
    if len(names) != len(values):
        raise ConfigurationError(f"{kind} name/value array lengths do not match")
    return tuple(zip(names, values))


def build_base_request(
    method: HttpMethod | str,
    path: str,
    headers: Mapping[str, str] | Iterable[tuple[str, str]] = (),
    query_params: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    body: bytes | str | None = None,
    *,
    credential: str,
    credential_param: str = DEFAULT_CREDENTIAL_PARAM,
    success_status: int = 200,
    pagination: Pagination | None = None,
) -> RequestDescriptor:
    """Build a descriptor with the credential injected into the query.

    Pure construction, no I/O.

    Raises:
        ConfigurationError: If the credential is missing or a field is invalid
    """
    if not credential:
        raise ConfigurationError("no API key present")
    if isinstance(body, str):
        body = body.encode("utf-8")
    params = ((credential_param, credential),) + _to_pairs(query_params)
    return RequestDescriptor(
        method=method,
        path=path,
        headers=_to_pairs(headers),
        query_params=params,
        body=body or None,
        success_status=success_status,
        pagination=pagination,
    )


class RequestBuilder:
    """Fluent builder for RequestDescriptor instances.

    Example:
        >>> descriptor = (RequestBuilder("GET", "/contacts/v1/lists/all/contacts/all")
        ...     .param("count", "100")
        ...     .offset_field("vidOffset", "vid-offset")
        ...     .build(credential="demo"))
    """

    def __init__(self, method: HttpMethod | str, path: str) -> None:
        self._method = method
        self._path = path
        self._headers: list[tuple[str, str]] = []
        self._params: list[tuple[str, str]] = []
        self._body: bytes | None = None
        self._success_status = 200
        self._pagination: Pagination | None = None

    def header(self, name: str, value: str) -> RequestBuilder:
        self._headers.append((name, value))
        return self

    def headers_from_lists(self, names: Sequence[str], values: Sequence[str]) -> RequestBuilder:
        """Add headers given as parallel name and value lists."""
        self._headers.extend(_zip_lists(names, values, "header"))
        return self

    def param(self, name: str, value: str) -> RequestBuilder:
        self._params.append((name, str(value)))
        return self

    def params_from_lists(self, names: Sequence[str], values: Sequence[str]) -> RequestBuilder:
        """Add query parameters given as parallel name and value lists."""
        self._params.extend(_zip_lists(names, values, "parameter"))
        return self

    def body(self, body: bytes | str | None) -> RequestBuilder:
        self._body = body.encode("utf-8") if isinstance(body, str) else body
        return self

    def success_status(self, status: int) -> RequestBuilder:
        self._success_status = status
        return self

    def offset_field(self, offset_param: str, result_offset_field: str) -> RequestBuilder:
        self._pagination = OffsetField(offset_param, result_offset_field)
        return self

    def limit_as_offset(
        self,
        offset_param: str,
        limit_param: str,
        limit_value: str | int,
        total_field: str,
        *,
        strict_total: bool = False,
    ) -> RequestBuilder:
        self._pagination = LimitAsOffset(
            offset_param, limit_param, str(limit_value), total_field, strict_total
        )
        return self

    def build(
        self, *, credential: str, credential_param: str = DEFAULT_CREDENTIAL_PARAM
    ) -> RequestDescriptor:
        """Build the immutable descriptor."""
        return build_base_request(
            self._method,
            self._path,
            headers=self._headers,
            query_params=self._params,
            body=self._body,
            credential=credential,
            credential_param=credential_param,
            success_status=self._success_status,
            pagination=self._pagination,
        )


__all__ = [
    "LimitAsOffset",
    "OffsetField",
    "Pagination",
    "RequestBuilder",
    "RequestDescriptor",
    "build_base_request",
]
