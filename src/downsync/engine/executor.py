"""Concurrent fan-out with a join barrier."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

from downsync.contracts.batch import BatchResult, TaskOutcome
from downsync.status import StatusLogger

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ParallelExecutor:
    """Runs one action per identifier concurrently and waits for all of them.

    A failing invocation is logged and recorded in the returned
    :class:`BatchResult`; it never cancels its siblings.
    """

    def __init__(self, status: StatusLogger, *, max_concurrent: int | None = None) -> None:
        self._status = status
        self._semaphore = asyncio.Semaphore(max_concurrent) if max_concurrent else None

    async def run_all(self, identifiers: Iterable[T], action: Callable[[T], Awaitable[Any]]) -> BatchResult[T]:
        unique = list(dict.fromkeys(identifiers))
        result: BatchResult[T] = BatchResult()
        if not unique:
            return result

        logger.debug("Running %d task(s): %s", len(unique), ", ".join(map(str, unique)))
        outcomes = await asyncio.gather(*(self._invoke(identifier, action) for identifier in unique))
        for outcome in outcomes:
            result.outcomes[outcome.identifier] = outcome
        return result

    async def _invoke(self, identifier: T, action: Callable[[T], Awaitable[Any]]) -> TaskOutcome[T]:
        try:
            value = await self._guarded(action(identifier))
        except Exception as exc:
            self._status.error(f"{identifier}: {exc}")
            return TaskOutcome(identifier=identifier, error=exc)
        return TaskOutcome(identifier=identifier, value=value)

    async def _guarded(self, op: Awaitable[Any]) -> Any:
        if self._semaphore is None:
            return await op
        async with self._semaphore:
            return await op
