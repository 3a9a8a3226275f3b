"""Primitive Predicates

Module-level functions rather than per-shape lambdas, so every primitive
shape refers to the same function object instead of allocating its own.

Inputs are what ``json.loads`` produces, plus ``UNDEFINED`` for a key that
is not present at all.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Final, final


@final
class Undefined:
    """Type of the ``UNDEFINED`` sentinel ("key not present").

    Distinct from ``None``, which is JSON's explicit ``null``.
    """

    __slots__ = ()
    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = Undefined()


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Finite int or float. ``bool`` is not a number here, nor are NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def is_boolean(value: Any) -> bool:
    return value is True or value is False


def is_null(value: Any) -> bool:
    return value is None


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def kind_of(value: Any) -> str:
    """Name the runtime kind of a value, for diagnostics only."""
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__
