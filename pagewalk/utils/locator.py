"""Recursive field lookup in decoded JSON documents."""

from __future__ import annotations

import math
from typing import Any


def _format_number(value: Any) -> str | None:
    """Render a numeric JSON value with no fractional digits.

    Booleans, strings and non-finite floats are not numbers here.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value):
        return format(value, ".0f")
    return None


def locate_field(doc: dict[str, Any], field_name: str) -> str | None:
    """Find ``field_name`` anywhere in ``doc`` and return it as an integer string.

    The document's own keys are checked first. A non-numeric value under the
    name does not end the search. Nested objects are then searched
    depth-first in key order and the first numeric match wins. Lists are not
    searched.

    Args:
        doc: Decoded JSON object
        field_name: Key to look for

    Returns:
        The value formatted like ``"%.0f"`` (``123.0`` gives ``"123"``), or
        None if no numeric value was found
    """
    if field_name in doc:
        found = _format_number(doc[field_name])
        if found is not None:
            return found

    for value in doc.values():
        if isinstance(value, dict):
            found = locate_field(value, field_name)
            if found is not None:
                return found

    return None
