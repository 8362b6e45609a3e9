"""
Cache stores — in-memory store and function-based store builder.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

from kungfu import Option, Some, Nothing

from fieldcache._types import Document, Expiry


def _seconds(expires_in: Expiry | None) -> float | None:
    if expires_in is None:
        return None
    if isinstance(expires_in, timedelta):
        return expires_in.total_seconds()
    return float(expires_in)


# ═══════════════════════════════════════════════════════════════════════════════
# Memory Store — For Testing / Single Process
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class _Entry:
    document: Document
    expires_at: float | None


class MemoryStore:
    """
    In-memory cache store with per-entry expiry.

    Note: single process only, no eviction beyond expiry.

    Example:
        store = MemoryStore()
        store.write("user:42", {"name": "Ada"}, 60)
        store.read("user:42")  # Some({"name": "Ada"})
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    def read(self, key: str) -> Option[Document]:
        entry = self._entries.get(key)
        if entry is None:
            return Nothing()
        if entry.expires_at is not None and self._clock() >= entry.expires_at:
            del self._entries[key]
            return Nothing()
        return Some(entry.document)

    def write(self, key: str, document: Document, expires_in: Expiry | None) -> None:
        ttl = _seconds(expires_in)
        expires_at = self._clock() + ttl if ttl is not None else None
        self._entries[key] = _Entry(document, expires_at)

    def delete(self, key: str) -> bool:
        """Delete key. Returns True if existed."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._entries


# ═══════════════════════════════════════════════════════════════════════════════
# Function-based Store Builder
# ═══════════════════════════════════════════════════════════════════════════════

type ReadFn = Callable[[str], Option[Document]]
type WriteFn = Callable[[str, Document, Expiry], None]


@dataclass(frozen=True, slots=True)
class FunctionalStore:
    """
    Store built from functions.

    Example:
        store = store_from(
            read=my_backend.read,
            write=my_backend.write,
        )
    """

    _read: ReadFn
    _write: WriteFn

    def read(self, key: str) -> Option[Document]:
        return self._read(key)

    def write(self, key: str, document: Document, expires_in: Expiry) -> None:
        self._write(key, document, expires_in)


def store_from(read: ReadFn, write: WriteFn) -> FunctionalStore:
    """
    Create Store from functions.

    Example:
        store = store_from(
            read=lambda key: Some(d) if (d := redis.get(key)) is not None else Nothing(),
            write=lambda key, doc, ttl: redis.set(key, doc, ex=ttl),
        )
    """
    return FunctionalStore(_read=read, _write=write)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "MemoryStore",
    "FunctionalStore",
    "store_from",
)
