"""Page walking for paginated descriptors.

This module provides the Paginator class that drives the RequestExecutor
across every page of a call, tracks the offset, and decides when to stop.
"""

from __future__ import annotations

from time import perf_counter
from typing import Any

from ...core.exceptions import ConfigurationError, PagewalkError, PaginationError
from ...core.request import LimitAsOffset, OffsetField, RequestDescriptor
from ...utils.locator import locate_field
from ..rest.executor import RequestExecutor
from .definitions import PaginationState
from .telemetry import (
    log_page_fetched,
    log_pagination_complete,
    log_pagination_error,
    log_total_missing,
)


class Paginator:
    """Walks every page of a paginated descriptor.

    Two conventions are supported. With OffsetField the server returns the
    next offset in each page. With LimitAsOffset the client advances the
    offset by a fixed page size until it reaches a total reported on the
    first page. Pages are fetched one at a time, in order, sharing one error
    budget.
    """

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    async def run(self, descriptor: RequestDescriptor) -> list[dict[str, Any]]:
        """Fetch all pages and return their documents in fetch order.

        Raises:
            ConfigurationError: If the descriptor is not paginated
            PaginationError: If pagination metadata is missing from a page
            PagewalkError: Any executor error; partial results are discarded
        """
        pagination = descriptor.pagination
        if pagination is None:
            raise ConfigurationError("descriptor has no pagination configured")

        state = PaginationState()
        budget = self._executor.new_budget()
        start = perf_counter()

        try:
            done = False
            while not done:
                document = await self._executor.execute(
                    descriptor,
                    self._page_query(pagination, state),
                    budget=budget,
                    require_body=True,
                )
                if isinstance(pagination, OffsetField):
                    done = self._advance_offset_field(pagination, state, document)
                else:
                    done = self._advance_limit(descriptor, pagination, state, document)

                log_page_fetched(
                    path=descriptor.path,
                    page_index=state.pages_fetched - 1,
                    offset=state.previous_offset,
                    next_offset=state.current_offset,
                    total=state.total,
                )
        except PagewalkError as e:
            log_pagination_error(
                path=descriptor.path,
                pages=state.pages_fetched,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_pagination_complete(
            path=descriptor.path,
            pages=state.pages_fetched,
            errors_recorded=budget.count,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return state.accumulated

    def _page_query(
        self, pagination: OffsetField | LimitAsOffset, state: PaginationState
    ) -> dict[str, str]:
        query = {pagination.offset_param: str(state.current_offset)}
        if isinstance(pagination, LimitAsOffset):
            query[pagination.limit_param] = str(pagination.limit)
        return query

    def _advance_offset_field(
        self, pagination: OffsetField, state: PaginationState, document: dict[str, Any]
    ) -> bool:
        """Read the server-provided offset. Returns True when the walk is done."""
        state.previous_offset = state.current_offset
        located = locate_field(document, pagination.result_offset_field)
        if located is None:
            raise PaginationError("offset not found", stage="paginate")
        state.current_offset = int(located)
        state.accumulated.append(document)

        # Offset wrapped back to 0, or the server made no progress
        wrapped = state.previous_offset != 0 and state.current_offset == 0
        return wrapped or state.previous_offset == state.current_offset

    def _advance_limit(
        self,
        descriptor: RequestDescriptor,
        pagination: LimitAsOffset,
        state: PaginationState,
        document: dict[str, Any],
    ) -> bool:
        """Advance by the page size. Returns True when the walk is done."""
        state.previous_offset = state.current_offset
        if state.total < 0:
            located = locate_field(document, pagination.total_field)
            if located is not None:
                state.total = int(located)
            elif pagination.strict_total:
                raise PaginationError(
                    f"total not found in field {pagination.total_field}", stage="paginate"
                )
            else:
                log_total_missing(path=descriptor.path, total_field=pagination.total_field)

        state.current_offset += pagination.limit
        state.accumulated.append(document)

        if state.current_offset >= state.total:
            return True
        if pagination.limit == 0:
            raise PaginationError(
                f"limit of 0 cannot advance offset {state.current_offset} to total {state.total}",
                stage="paginate",
            )
        return False
