"""
Cache — read-through field caching.

    from fieldcache import cache as C

    C.configure(store=C.MemoryStore(), expiry=600)

    user = C.Marshal["user:42"].read({"expiry": 60}, lambda: load_user(42))
    user = C.Marshal["user:42"].read(None, lambda: load_user(42), force=True)
"""

from __future__ import annotations

from fieldcache.cache._types import (
    Store,
    Logger,
    CacheOptions,
    options_from,
)
from fieldcache.cache._store import MemoryStore, FunctionalStore, store_from
from fieldcache.cache._deconstruct import Deconstructor, deconstruct
from fieldcache.cache._deferred import (
    DeferredKind,
    deferred_kind,
    is_deferred,
    chain,
)
from fieldcache.cache._context import (
    CacheContext,
    configure,
    current,
    DEFAULT_EXPIRY,
    DEFAULT_NAMESPACE,
)
from fieldcache.cache._marshal import Marshal, marshal
from fieldcache.cache._keys import KeyFn, make_key
from fieldcache.cache._field import cached, settle

__all__ = (
    # Collaborators
    "Store",
    "Logger",
    "MemoryStore",
    "FunctionalStore",
    "store_from",
    "Deconstructor",
    "deconstruct",
    # Options & context
    "CacheOptions",
    "options_from",
    "CacheContext",
    "configure",
    "current",
    "DEFAULT_EXPIRY",
    "DEFAULT_NAMESPACE",
    # Deferred values
    "DeferredKind",
    "deferred_kind",
    "is_deferred",
    "chain",
    # Marshal
    "Marshal",
    "marshal",
    # Fields
    "KeyFn",
    "make_key",
    "cached",
    "settle",
)
