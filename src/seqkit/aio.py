"""
Asynchronous iteration over a sequence with an optional concurrency cap.

Without a cap every callback is started at once. With a cap, a fixed pool
of worker coroutines shares one index cursor: each worker awaits its
current callback and then claims the lowest index nobody has taken yet.
Dispatch order is therefore monotonic by index while completion order is
not.

The first callback failure is re-raised to the caller. Callbacks already
running are left to finish; their results are discarded and no new
indices are claimed.

Example:
    async def fetch(url: str, index: int, urls: list[str]) -> bytes:
        ...

    pages = await map_async(urls, fetch, AsyncOptions(max_concurrency=4))
"""

from __future__ import annotations
from typing import Any, Awaitable, Callable, Sequence, TypeVar
from dataclasses import dataclass
import asyncio
import inspect
import logging

T = TypeVar("T")
R = TypeVar("R")

Callback = Callable[[T, int, Sequence[T]], Awaitable[R]]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AsyncOptions:
    """Maximum number of callbacks in flight; values below 1 mean unbounded."""
    max_concurrency: int = 0


async def for_each_async(
    seq: Sequence[T],
    callback: Callback[T, Any],
    options: AsyncOptions | None = None,
) -> None:
    """
    Await ``callback(value, index, seq)`` for every element.

    Args:
        seq: Elements to visit. Never mutated.
        callback: Async function called once per element.
        options: Concurrency cap; unbounded when omitted.
    """
    if not seq:
        return
    limit = options.max_concurrency if options else 0
    if limit < 1 or len(seq) <= limit:
        await asyncio.gather(*(callback(item, i, seq) for i, item in enumerate(seq)))
        return

    logger.debug("Dispatching %d callbacks over %d workers", len(seq), limit)
    cursor = iter(range(len(seq)))
    failed = False

    async def worker() -> None:
        nonlocal failed
        for index in cursor:
            if failed:
                return
            try:
                await callback(seq[index], index, seq)
            except Exception:
                failed = True
                logger.debug("Callback failed at index %d", index, exc_info=True)
                raise

    await asyncio.gather(*(worker() for _ in range(limit)))


async def map_async(
    seq: Sequence[T],
    callback: Callback[T, R],
    options: AsyncOptions | None = None,
) -> list[R]:
    """Like ``for_each_async``, collecting results in input order."""
    results: list[Any] = [None] * len(seq)

    async def store(item: T, index: int, items: Sequence[T]) -> None:
        results[index] = await callback(item, index, items)

    await for_each_async(seq, store, options)
    return results


async def sum_async(
    seq: Sequence[T],
    selector: Callable[[T], Awaitable[float]],
    options: AsyncOptions | None = None,
) -> float:
    values = await map_async(seq, lambda item, _i, _s: selector(item), options)
    result = 0
    for value in values:
        result += value
    return result


async def product_async(
    seq: Sequence[T],
    selector: Callable[[T], Awaitable[float]],
    options: AsyncOptions | None = None,
) -> float:
    values = await map_async(seq, lambda item, _i, _s: selector(item), options)
    result = 1
    for value in values:
        result *= value
    return result


async def wait_until(
    predicate: Callable[..., bool | Awaitable[bool]],
    interval: float,
    timeout: float = 0,
    *args: Any,
) -> bool:
    """
    Poll ``predicate(*args)`` every ``interval`` seconds until it is truthy.

    ``predicate`` may be sync or async. With ``timeout > 0`` gives up after
    that many seconds; an async check still pending at the deadline counts
    as a failure.

    Returns:
        True if the predicate was satisfied, False on timeout.
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout if timeout > 0 else None
    while True:
        result = predicate(*args)
        if inspect.isawaitable(result):
            if deadline is None:
                result = await result
            else:
                try:
                    result = await asyncio.wait_for(result, max(deadline - loop.time(), 0))
                except asyncio.TimeoutError:
                    return False
        if result:
            return True
        if deadline is not None and loop.time() + interval > deadline:
            return False
        await asyncio.sleep(interval)
