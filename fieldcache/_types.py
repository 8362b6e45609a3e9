"""
Core types for fieldcache.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from typing import Any

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Resolution Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Resolve[T] = Callable[[], T]
"""Zero-argument resolve operation. Called at most once per read/write."""

type Document = Any
"""Cache-safe representation of a resolved value. Opaque to the marshal."""

type Expiry = timedelta | int | float
"""Time-to-live for a stored document (timedelta or seconds)."""

type Lazy[T, E] = LazyCoroResult[T, E]
"""Lazy async computation that may fail."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
    # Type aliases
    "Resolve",
    "Document",
    "Expiry",
    "Lazy",
)
