"""
Lift — helpers for building deferred resolve operations.

Re-exports from combinators.lift with fieldcache-specific additions.
"""

from __future__ import annotations

from collections.abc import Callable, Awaitable

from kungfu import LazyCoroResult, Result

# Re-export from combinators.lift
from combinators.lift import (
    pure,
    fail,
    catching_async,
)


# ═══════════════════════════════════════════════════════════════════════════════
# fieldcache-specific helpers
# ═══════════════════════════════════════════════════════════════════════════════

def from_result[T, E](result: Result[T, E]) -> LazyCoroResult[T, E]:
    """Lift a Result into LazyCoroResult."""
    async def _run() -> Result[T, E]:
        return result
    return LazyCoroResult(_run)


def lazy[T](fn: Callable[[], Awaitable[T]]) -> Callable[[], LazyCoroResult[T, Exception]]:
    """
    Turn an async function into a resolve operation returning LazyCoroResult.

    Exceptions become Error(exc), so a failing fetch is never persisted.

    Example:
        C.Marshal["user:42"].read(None, lazy(lambda: db.get_user(42)))
    """
    def resolve() -> LazyCoroResult[T, Exception]:
        return catching_async(fn, on_error=lambda e: e)
    return resolve


__all__ = (
    # From combinators.lift
    "pure",
    "fail",
    "catching_async",
    # fieldcache additions
    "from_result",
    "lazy",
)
