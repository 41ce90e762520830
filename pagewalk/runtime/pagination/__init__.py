"""Pagination layer for walking every page of a call.

Architecture:
    The pagination layer consists of:
    - definitions.py: Per-call pagination state
    - paginator.py: Offset tracking and termination for both conventions
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import PaginationState
from .paginator import Paginator

__all__ = ["PaginationState", "Paginator"]
