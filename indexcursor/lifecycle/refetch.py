from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from indexcursor.core.calculator import (
    TraversalOrder,
    next_page_params,
    page_query,
    previous_page_params,
)
from indexcursor.core.connection import Connection, as_connection
from indexcursor.utils.pagination import QueryParams
from indexcursor.utils.settings import SettingsResolver
from indexcursor.utils.types import Variables, merge_variables

logger = logging.getLogger(__name__)


def build_variables(params: QueryParams, base: Variables | None = None, **extra: Any) -> Variables:
    """Merge entity variables with pagination params for a refetch.

    All four of ``first``, ``last``, ``after`` and ``before`` are present in
    the result; the direction not in use is None. Pagination keys win over
    anything in ``base`` or ``extra``.
    """
    return merge_variables(base, extra, **params.as_variables())


class PageChangeHandler:
    """Turns pager events into refetches of a table's connection.

    ``refetch`` receives the full variable set and may be sync or async.
    Extra keyword arguments are sent with every refetch (e.g. ``address``).
    A ``Settings`` inner class may declare ``page_size`` for subclasses.

    Usage:
        handler = PageChangeHandler(client.refetch_blocks, name="allBlocks")
        await handler(connection, 3)
    """

    def __init__(
        self,
        refetch: Callable[[Variables], Any],
        *,
        name: str,
        page_size: int | None = None,
        order: TraversalOrder = TraversalOrder.DESCENDING,
        **variables: Any,
    ) -> None:
        self._refetch = refetch
        self.name = name
        self.page_size = page_size if page_size is not None else SettingsResolver.get_page_size(type(self))
        self.order = order
        self.variables: Variables = variables

    async def __call__(self, connection: Connection[Any] | Any, page_number: int) -> Any:
        return await self.goto(connection, page_number)

    async def goto(self, connection: Connection[Any] | Any, page_number: int) -> Any:
        """Refetch the given page."""
        connection = as_connection(connection)
        params = page_query(page_number, connection.total_count, self.page_size, self.order)
        logger.debug(f"Page change on {self.name}: page {page_number} of {connection.total_count} items")
        return await self._run(params)

    async def next(self, connection: Connection[Any] | Any) -> Any:
        """Refetch the page after the current one."""
        return await self._run(next_page_params(connection, self.page_size))

    async def previous(self, connection: Connection[Any] | Any) -> Any:
        """Refetch the page before the current one."""
        return await self._run(previous_page_params(connection, self.page_size))

    async def _run(self, params: QueryParams) -> Any:
        variables = build_variables(params, self.variables)
        logger.debug(f"Refetching {self.name} with {variables}")
        try:
            result = self._refetch(variables)
            if asyncio.iscoroutine(result):
                result = await result
        except Exception as e:
            logger.error(f"There was an error refetching {self.name}: {e}")
            raise
        return result
