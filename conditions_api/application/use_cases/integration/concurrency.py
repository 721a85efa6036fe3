"""Fan-out and deadline helpers shared by the integration use cases."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import anyio

from conditions_api.config import get_settings
from conditions_api.domain.exceptions import (
    CommercialConditionsError,
    ResolutionTimeoutError,
)

K = TypeVar("K")
T = TypeVar("T")


def new_limiter() -> anyio.CapacityLimiter:
    """Return a limiter bounding the parallel lookups of one request."""

    return anyio.CapacityLimiter(get_settings().max_concurrent_lookups)


async def gather_bounded(
    lookup: Callable[[K], Awaitable[T]],
    keys: Iterable[K],
    *,
    limiter: anyio.CapacityLimiter | None,
) -> list[T]:
    """Run ``lookup`` for every key concurrently and return results in key order.

    The first failing lookup cancels its siblings and its error is re-raised,
    so callers never observe a partial result.
    """

    keys = list(keys)
    results: list[T | None] = [None] * len(keys)

    async def _run(index: int, key: K) -> None:
        if limiter is None:
            results[index] = await lookup(key)
            return
        async with limiter:
            results[index] = await lookup(key)

    try:
        async with anyio.create_task_group() as task_group:
            for index, key in enumerate(keys):
                task_group.start_soon(_run, index, key)
    except BaseExceptionGroup as group:
        raise _first_failure(group) from None
    return results  # type: ignore[return-value]


async def run_concurrently(*calls: Callable[[], Awaitable[Any]]) -> list[Any]:
    """Await independent zero-argument ``calls`` together, results in call order.

    No limiter is applied: the calls themselves may fan out through one, and
    holding its tokens here could starve them.
    """

    return await gather_bounded(lambda call: call(), calls, limiter=None)


def _first_failure(group: BaseExceptionGroup) -> BaseException:
    leaves: list[BaseException] = []
    pending: list[BaseException] = [group]
    while pending:
        current = pending.pop(0)
        if isinstance(current, BaseExceptionGroup):
            pending.extend(current.exceptions)
        else:
            leaves.append(current)
    for leaf in leaves:
        if isinstance(leaf, CommercialConditionsError):
            return leaf
    return leaves[0] if len(leaves) == 1 else group


@asynccontextmanager
async def deadline(timeout: float | None) -> AsyncIterator[None]:
    """Abort the enclosed work with ``ResolutionTimeoutError`` after ``timeout`` seconds."""

    if timeout is None:
        yield
        return
    try:
        with anyio.fail_after(timeout):
            yield
    except TimeoutError as exc:
        if isinstance(exc, ResolutionTimeoutError):
            raise
        raise ResolutionTimeoutError(
            f"Resolution did not complete within {timeout:g} seconds"
        ) from exc


__all__ = ["deadline", "gather_bounded", "new_limiter", "run_concurrently"]
