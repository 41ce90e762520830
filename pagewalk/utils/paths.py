"""Helpers for flattening paginated result sets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ..core.exceptions import PathError


def _walk(doc: dict[str, Any], path: Sequence[str]) -> list[Any]:
    current: Any = doc
    last = len(path) - 1
    for index, segment in enumerate(path):
        if not isinstance(current, dict):
            raise PathError(f"unable to convert {path[index - 1]} to map")
        if segment not in current:
            raise PathError(f"{segment} does not exist")
        current = current[segment]
        if index == last and not isinstance(current, list):
            raise PathError(f"unable to convert {segment} to array")
    return current


def flatten_path(documents: Iterable[dict[str, Any]], path: Sequence[str]) -> list[Any]:
    """Concatenate the arrays found at ``path`` in every document.

    Args:
        documents: Decoded JSON objects, typically one per page
        path: Field names leading to an array

    Returns:
        Array elements in document order, then within-document order

    Raises:
        PathError: If a segment is missing, a non-terminal value is not an
            object, or the terminal value is not an array

    Example:
        >>> flatten_path([{"results": {"items": [1, 2]}}, {"results": {"items": [3]}}],
        ...              ["results", "items"])
        [1, 2, 3]
    """
    if not path:
        raise PathError("path must contain at least one field")

    flattened: list[Any] = []
    for doc in documents:
        if not isinstance(doc, dict):
            raise PathError("unable to convert document to map")
        flattened.extend(_walk(doc, path))
    return flattened


def convert_to_documents(values: Iterable[Any]) -> list[dict[str, Any]]:
    """Assert every element is a JSON object and return them as a list."""
    documents: list[dict[str, Any]] = []
    for index, value in enumerate(values):
        if not isinstance(value, dict):
            raise PathError(f"element {index} is not a document")
        documents.append(value)
    return documents
