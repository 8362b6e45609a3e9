"""
Default deconstructor — resolved value → cache-safe document.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping

from fieldcache._types import Document

type Deconstructor = Callable[[object], Document]


def deconstruct(value: object) -> Document:
    """
    Turn a resolved value into plain data.

    Dataclass instances become dicts, mappings become dicts, lists, tuples
    and sets become lists. Anything else is returned as-is.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: deconstruct(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        return {k: deconstruct(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [deconstruct(v) for v in value]
    return value


__all__ = ("Deconstructor", "deconstruct")
