"""
cached() — wrap a field resolver in a marshal.

    @C.cached(lambda uid: f"user:{uid}", expiry=60)
    async def resolve_user(uid: int) -> User:
        return await db.get_user(uid)

    user = await resolve_user(42)                    # hit or miss
    user = await resolve_user(42, force_cache=True)  # always re-resolve

On a hit the wrapper returns the stored document directly, so async
resolvers hand back a plain value there and an awaitable on a miss.
Use C.settle() when the caller needs to await uniformly.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from fieldcache._types import Expiry
from fieldcache.cache._context import CacheContext, current
from fieldcache.cache._deferred import is_deferred
from fieldcache.cache._keys import KeyFn, make_key
from fieldcache.cache._marshal import Marshal
from fieldcache.cache._types import CacheOptions


def cached[R](
    key: str | KeyFn,
    *,
    expiry: Expiry | None = None,
    context: CacheContext | None = None,
) -> Callable[[Callable[..., R]], Callable[..., R | Any]]:
    """
    Decorate a resolver with read-through caching.

    key: fixed key, or a function of the resolver arguments
    expiry: per-field expiry, context default when None
    context: explicit context, process-wide one when None (looked up per call)

    The wrapped resolver takes one extra keyword, force_cache.
    """
    options = CacheOptions(expiry=expiry)

    def decorate(fn: Callable[..., R]) -> Callable[..., R | Any]:
        @functools.wraps(fn)
        def wrapper(*args: Any, force_cache: bool = False, **kwargs: Any) -> R | Any:
            ctx = context if context is not None else current()
            raw = key(*args, **kwargs) if callable(key) else key
            m = Marshal(make_key(raw, namespace=ctx.namespace), ctx)
            return m.read(options, lambda: fn(*args, **kwargs), force=force_cache)

        return wrapper

    return decorate


async def settle(value: object) -> Any:
    """Await value if it is deferred, return it unchanged otherwise."""
    if is_deferred(value):
        return await value  # type: ignore[misc]
    return value


__all__ = ("cached", "settle")
