"""REST request runner dispatching descriptors to the executor or paginator."""

from __future__ import annotations

from typing import Any

from ...core.exceptions import ConfigurationError
from ...core.request import RequestDescriptor
from ..pagination.paginator import Paginator
from .executor import RequestExecutor


class RestRunner:
    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor
        self._paginator = Paginator(executor)

    async def execute(self, descriptor: RequestDescriptor) -> dict[str, Any] | None:
        """Send a single request; pagination settings are ignored."""
        return await self._executor.execute(descriptor)

    async def execute_all(self, descriptor: RequestDescriptor) -> list[dict[str, Any]]:
        """Fetch every page of a paginated descriptor."""
        if not descriptor.is_paginated:
            raise ConfigurationError("execute_all requires a paginated descriptor")
        return await self._paginator.run(descriptor)

    async def run(
        self, descriptor: RequestDescriptor
    ) -> dict[str, Any] | list[dict[str, Any]] | None:
        """Dispatch on the descriptor's pagination mode."""
        if descriptor.is_paginated:
            return await self.execute_all(descriptor)
        return await self.execute(descriptor)
