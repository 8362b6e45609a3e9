"""
Cache keys.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

type KeyFn = Callable[..., object]


def make_key(
    *parts: object,
    args: Mapping[str, object] | None = None,
    namespace: str | None = None,
) -> str:
    """
    Build a colon-separated key.

    Example:
        make_key("User", 42, "posts", args={"limit": 10, "after": "x"}, namespace="api")
        # "api:User:42:posts:after=x:limit=10"
    """
    segments = [namespace] if namespace else []
    segments.extend(str(p) for p in parts)
    if args:
        segments.extend(f"{name}={args[name]}" for name in sorted(args))
    return ":".join(segments)


__all__ = ("KeyFn", "make_key")
