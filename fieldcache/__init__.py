"""
fieldcache — read-through caching for field resolvers.

    from fieldcache import cache as C   # Marshal, stores, context
    from fieldcache import lift as L    # Deferred resolve helpers
"""

from fieldcache import cache
from fieldcache import lift
from fieldcache._types import (
    Resolve,
    Document,
    Expiry,
    Lazy,
)

__version__ = "0.1.0"

__all__ = (
    "cache",
    "lift",
    "Resolve",
    "Document",
    "Expiry",
    "Lazy",
)
