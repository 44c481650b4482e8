"""Fan-out helper for the similarity discovery stage.

Discovery issues one gene lookup per candidate artist and needs all of them
before scoring can begin.  :func:`gather_all` wraps ``asyncio.gather`` for
that pattern:

- every awaitable is scheduled immediately (unordered fan-out);
- results come back in input order;
- the first exception propagates to the caller (first-error-wins).  The
  remaining in-flight requests are not cancelled; their results are simply
  discarded when they finish.

An optional semaphore bounds how many awaitables run at once.  Discovery
leaves it unset, so fan-out width is bounded only by the candidate cap.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

_T = TypeVar("_T")


async def gather_all(
    coros: list[Awaitable[_T]],
    semaphore: asyncio.Semaphore | None = None,
) -> list[_T]:
    """Run awaitables concurrently and return their results in input order.

    Parameters
    ----------
    coros:
        Awaitable objects to execute concurrently.
    semaphore:
        Optional semaphore for concurrency control.  ``None`` means every
        awaitable runs at once.

    Returns
    -------
    list[_T]
        Results in the same order as the input awaitables.

    Raises
    ------
    Exception
        Whatever the first failing awaitable raised.
    """
    if semaphore is None:
        return list(await asyncio.gather(*coros))

    async def _wrapped(coro: Awaitable[_T]) -> _T:
        async with semaphore:
            return await coro

    return list(await asyncio.gather(*(_wrapped(c) for c in coros)))
