"""
Cache context — store, logger and defaults bound together.

Configure once at startup, inject everywhere:

    from fieldcache import cache as C

    C.configure(store=RedisStore(redis), expiry=timedelta(hours=1))

    C.Marshal("user:42").read(None, load_user)             # process context
    C.Marshal("user:42", context=ctx).read(None, load_user)  # explicit
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field

from fieldcache._types import Expiry
from fieldcache.cache._types import Store, Logger
from fieldcache.cache._store import MemoryStore
from fieldcache.cache._deconstruct import Deconstructor, deconstruct

DEFAULT_EXPIRY: Expiry = 5400
DEFAULT_NAMESPACE = "fieldcache"


@dataclass(frozen=True, slots=True)
class CacheContext:
    """
    Everything a marshal needs besides its key.

    expiry: default time-to-live when a call sets none
    deconstruct: resolved value → document
    namespace: prefix for keys built by make_key()
    """

    store: Store = field(default_factory=MemoryStore)
    logger: Logger = field(default_factory=lambda: logging.getLogger("fieldcache"))
    expiry: Expiry = DEFAULT_EXPIRY
    deconstruct: Deconstructor = deconstruct
    namespace: str = DEFAULT_NAMESPACE

    def replace(self, **changes: object) -> CacheContext:
        """Derive a context with some fields swapped."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]


# ═══════════════════════════════════════════════════════════════════════════════
# Process-wide context
# ═══════════════════════════════════════════════════════════════════════════════

_current: CacheContext | None = None


def configure(
    store: Store | None = None,
    logger: Logger | None = None,
    expiry: Expiry | None = None,
    deconstruct: Deconstructor | None = None,
    namespace: str | None = None,
) -> CacheContext:
    """
    Install the process-wide context. Unset arguments keep their defaults.

    Marshals bind the context at construction, so configure before building
    them.
    """
    global _current
    changes: dict[str, object] = {
        "store": store,
        "logger": logger,
        "expiry": expiry,
        "deconstruct": deconstruct,
        "namespace": namespace,
    }
    _current = CacheContext(**{k: v for k, v in changes.items() if v is not None})  # type: ignore[arg-type]
    return _current


def current() -> CacheContext:
    """Process-wide context, created with defaults on first use."""
    global _current
    if _current is None:
        _current = CacheContext()
    return _current


__all__ = (
    "CacheContext",
    "configure",
    "current",
    "DEFAULT_EXPIRY",
    "DEFAULT_NAMESPACE",
)
