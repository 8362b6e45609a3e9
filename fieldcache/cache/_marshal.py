"""
Marshal — turns a cache fetch into either a read or a write.

    from fieldcache import cache as C

    user = C.Marshal["user:42"].read({"expiry": 60}, lambda: load_user(42))

Lifecycle of one read():

    START → force?  ── yes ─────────────────────────┐
              │ no                                  ▼
              ▼                                   WRITE → resolve()
           LOOKUP ── Some(doc) → HIT (returns doc)    │
              │                                       ├── deferred → chain(persist)
              └─ Nothing() → MISS → WRITE             └── ready    → persist
                                                      ▼
                                                    DONE (returns resolved value)
"""

from __future__ import annotations

from typing import Any

from kungfu import Some

from fieldcache._types import Expiry, Resolve
from fieldcache.cache._context import CacheContext, current
from fieldcache.cache._deferred import chain, is_deferred
from fieldcache.cache._types import options_from


class Marshal:
    """
    Read-through cache access for a single key.

    The key is stringified and bound for the instance lifetime. The context
    defaults to the process-wide one, looked up once here.
    """

    __slots__ = ("key", "context")

    def __init__(self, key: object, context: CacheContext | None = None) -> None:
        self.key = str(key)
        self.context = context if context is not None else current()

    def __class_getitem__(cls, key: object) -> Marshal:
        """Marshal[key] — shorthand for Marshal(key)."""
        return cls(key)

    def __repr__(self) -> str:
        return f"Marshal({self.key!r})"

    def read[T](self, config: object, resolve: Resolve[T], *, force: bool = False) -> T | Any:
        """
        Return the cached document, or resolve, persist and return the value.

        Args:
            config: cache options for this call (CacheOptions, mapping, or anything)
            resolve: zero-argument resolve operation, called at most once
            force: skip the lookup, always resolve and overwrite

        Returns:
            The stored document on a hit, the resolved value otherwise.
        """
        if force:
            return self.write(config, resolve)

        match self.context.store.read(self.key):
            case Some(document):
                self.context.logger.debug(f"Cache hit: ({self.key})")
                return document
            case _:
                self.context.logger.debug(f"Cache miss: ({self.key})")
                return self.write(config, resolve)

    def write[T](self, config: object, resolve: Resolve[T]) -> T:
        """
        Resolve, persist the deconstructed result, return the resolved value.

        Deferred results are returned as a chained handle of the same kind;
        persistence happens when the inner value becomes available.
        """
        resolved = resolve()
        expires_in = self.expiry(config)

        def persist(value: object) -> None:
            document = self.context.deconstruct(value)
            self.context.store.write(self.key, document, expires_in)
            self.context.logger.debug(f"Cache write: ({self.key})")

        if is_deferred(resolved):
            return chain(resolved, persist)  # type: ignore[return-value]

        persist(resolved)
        return resolved

    def expiry(self, config: object) -> Expiry:
        """Expiry from the call options, else the context default."""
        expiry = options_from(config).expiry
        return expiry if expiry is not None else self.context.expiry


def marshal(key: object, context: CacheContext | None = None) -> Marshal:
    """
    Create a marshal for key.

    Example:
        profile = marshal(f"profile:{uid}").read(None, lambda: fetch_profile(uid))
    """
    return Marshal(key, context)


__all__ = ("Marshal", "marshal")
