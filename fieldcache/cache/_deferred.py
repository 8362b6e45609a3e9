"""
Deferred values — the closed set of "not yet resolved" kinds.

A resolve operation may hand back a value that isn't available yet. The
marshal can't deconstruct or persist it until it completes, so it chains a
continuation instead and returns the chained handle.

    DeferredKind.LAZY       kungfu.LazyCoroResult    continuation runs on Ok only
    DeferredKind.FUTURE     asyncio.Future / Task    continuation runs on result
    DeferredKind.COROUTINE  coroutine object         continuation runs on return
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Coroutine
from enum import Enum, auto
from typing import Any

from kungfu import LazyCoroResult, Result, Ok

type Continuation = Callable[[Any], None]


class DeferredKind(Enum):
    """Supported deferred-value kinds."""

    LAZY = auto()
    FUTURE = auto()
    COROUTINE = auto()


def deferred_kind(value: object) -> DeferredKind | None:
    """Classify value. None means it is already available."""
    if isinstance(value, LazyCoroResult):
        return DeferredKind.LAZY
    if isinstance(value, asyncio.Future):
        return DeferredKind.FUTURE
    if inspect.iscoroutine(value):
        return DeferredKind.COROUTINE
    return None


def is_deferred(value: object) -> bool:
    return deferred_kind(value) is not None


# ═══════════════════════════════════════════════════════════════════════════════
# chain() — register continuation, get a new handle of the same kind
# ═══════════════════════════════════════════════════════════════════════════════


def _chain_lazy(value: LazyCoroResult[Any, Any], then: Continuation) -> LazyCoroResult[Any, Any]:
    async def chained() -> Result[Any, Any]:
        result = await value
        match result:
            case Ok(inner):
                then(inner)
        return result

    return LazyCoroResult(chained)


async def _chain_awaitable(
    value: Coroutine[Any, Any, Any] | asyncio.Future[Any], then: Continuation
) -> Any:
    inner = await value
    then(inner)
    return inner


def chain(value: object, then: Continuation) -> object:
    """
    Run `then` with the inner value once `value` completes.

    Returns a new handle of the same kind that resolves to the same inner
    value. Failures of the inner computation skip `then` and surface
    unchanged; failures raised by `then` surface through the new handle.

    Raises:
        TypeError: value is not deferred
    """
    match deferred_kind(value):
        case DeferredKind.LAZY:
            return _chain_lazy(value, then)  # type: ignore[arg-type]
        case DeferredKind.FUTURE:
            future: asyncio.Future[Any] = value  # type: ignore[assignment]
            return asyncio.ensure_future(
                _chain_awaitable(future, then), loop=future.get_loop()
            )
        case DeferredKind.COROUTINE:
            return _chain_awaitable(value, then)  # type: ignore[arg-type]
        case None:
            raise TypeError(f"{type(value).__name__} is not a deferred value")


__all__ = (
    "DeferredKind",
    "Continuation",
    "deferred_kind",
    "is_deferred",
    "chain",
)
