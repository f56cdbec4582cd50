"""asyncio glue for reactivex observables.

- `from_coroutine`: a cold one-element observable over a coroutine; the
  coroutine is created and scheduled only when the observable is subscribed.
- `join_all`: `fork_join` that also completes for an empty list of sources.

Observables built here must be subscribed (or awaited) from a running
event loop.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Sequence, TypeVar

import reactivex as rx
from reactivex import Observable

T = TypeVar("T")


def from_coroutine(factory: Callable[[], Awaitable[T]]) -> Observable[T]:
    return rx.defer(lambda _scheduler: rx.from_future(asyncio.ensure_future(factory())))


def join_all(sources: Sequence[Observable[T]]) -> Observable[tuple[T, ...]]:
    """Emit one tuple with the last value of every source, in input order.

    The first failing source fails the joined observable and disposes the
    others. No sources emits `()`.
    """

    if not sources:
        return rx.of(())
    return rx.fork_join(*sources)
