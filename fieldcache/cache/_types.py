"""
Cache types — collaborator protocols and per-call options.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from kungfu import Option

from fieldcache._types import Document, Expiry

# ═══════════════════════════════════════════════════════════════════════════════
# Store Protocol — Users Implement This
# ═══════════════════════════════════════════════════════════════════════════════


class Store(Protocol):
    """
    Cache store protocol.

    Implement this for custom backends (Redis, Memcached, etc.)

    read() must tell "absent" apart from any stored document, including
    falsy ones like 0, "" or [] — return Nothing() on a miss.

    Example:
        class RedisStore:
            def __init__(self, client: Redis) -> None:
                self.client = client

            def read(self, key: str) -> Option[Document]:
                data = self.client.get(key)
                return Nothing() if data is None else Some(pickle.loads(data))

            def write(self, key: str, document: Document, expires_in: Expiry) -> None:
                self.client.set(key, pickle.dumps(document), ex=expires_in)
    """

    def read(self, key: str) -> Option[Document]:
        """Read a document. Returns Nothing() on miss."""
        ...

    def write(self, key: str, document: Document, expires_in: Expiry) -> None:
        """Write a document with a time-to-live."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Logger Protocol — stdlib logging.Logger satisfies it
# ═══════════════════════════════════════════════════════════════════════════════


class Logger(Protocol):
    """Debug sink. Fire-and-forget."""

    def debug(self, msg: str, /, *args: object) -> None: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Options — per-call configuration
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CacheOptions:
    """
    Per-call cache options.

    expiry: overrides the context default when set. Passed to the store
    verbatim, never validated.
    """

    expiry: Expiry | None = None


def options_from(config: object) -> CacheOptions:
    """
    Normalize whatever the caller passed as cache config.

        options_from(None)                  → CacheOptions()
        options_from(True)                  → CacheOptions()
        options_from({"expiry": 60})        → CacheOptions(expiry=60)
        options_from(CacheOptions(60))      → CacheOptions(expiry=60)
    """
    match config:
        case CacheOptions():
            return config
        case Mapping():
            return CacheOptions(expiry=config.get("expiry"))
        case _:
            return CacheOptions()


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Store",
    "Logger",
    "CacheOptions",
    "options_from",
)
