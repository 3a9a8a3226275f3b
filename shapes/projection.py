"""Type Projection

Statically, a shape's projected type is its type parameter: ``string()`` is a
``Shape[str]``, ``array(number())`` a ``Shape[list[float]]``, and a passing
``check`` narrows its argument to that type. Object shapes stay
``dict[str, Any]`` statically, since Python has no way to compute a record
type from a dict literal of shapes.

``project`` closes that gap at runtime by building the equivalent type hint,
including a ``TypedDict`` for each object shape. For a checked-in static
declaration, generate one with ``shapes.generators.TypedDictGenerator``.
"""
from __future__ import annotations

import keyword
from typing import Any, NotRequired, TypedDict

from shapes.descriptors import ShapeKind, Shape
from shapes.errors import unknown_kind
from shapes.predicates import Undefined

PRIMITIVE_TYPES: dict[str, type] = {
    "string": str,
    "number": float,
    "boolean": bool,
}


def project(shape: Shape[Any]) -> Any:
    """Return the Python type hint ``shape`` stands for.

    Example:
        >>> project(nullable(array(string())))
        list[str] | None
    """
    match shape.kind:
        case ShapeKind.PRIMITIVE:
            return PRIMITIVE_TYPES[shape.display_name]
        case ShapeKind.OPTIONAL:
            return project(shape.inner) | Undefined
        case ShapeKind.NULLABLE:
            return project(shape.inner) | None
        case ShapeKind.ARRAY:
            return list[project(shape.members)]
        case ShapeKind.OBJECT:
            return _project_object(shape)
    raise unknown_kind(shape.kind)


def _project_object(shape: Any) -> type:
    fields: dict[str, Any] = {}
    for name, prop in shape.properties.items():
        # Absence is expressed by NotRequired, not by Undefined in the value type
        if prop.is_optional:
            fields[name] = NotRequired[project(prop.inner)]
        else:
            fields[name] = project(prop)
    return TypedDict(typeddict_name(shape.display_name), fields)


def typeddict_name(display_name: str) -> str:
    """Turn a display name into a usable class name ("Object" stays "Object")."""
    name = "".join(ch if ch.isalnum() or ch == "_" else "_" for ch in display_name)
    if not name or name[0].isdigit() or keyword.iskeyword(name):
        name = f"_{name}"
    return name
