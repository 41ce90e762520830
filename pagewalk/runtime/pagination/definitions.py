"""Pagination state structures.

This module defines the mutable state a Paginator keeps while walking the
pages of one call. State is created per call and discarded at the end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PaginationState:
    """Progress of one paginated call.

    Attributes:
        current_offset: Offset sent with the next request
        previous_offset: Offset sent with the last request (None before the first page)
        total: Record count reported by the API, -1 until discovered
        accumulated: Page documents in fetch order
    """

    current_offset: int = 0
    previous_offset: int | None = None
    total: int = -1
    accumulated: list[dict[str, Any]] = field(default_factory=list)

    @property
    def pages_fetched(self) -> int:
        return len(self.accumulated)
