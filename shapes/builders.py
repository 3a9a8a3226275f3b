"""Shape Builders

Compose these to describe the expected shape of some data and get a
composite check for free:

    User = shapes.object("User", {
        "name": shapes.string(),
        "age": shapes.number(),
        "hasSignedIn": shapes.boolean(),
        "permissions": shapes.optional(shapes.array(shapes.string())),
    })

    if User.check(json.loads(payload)):
        ...

Primitive builders return shared instances; shapes are immutable, so there
is nothing to gain from a fresh one per call.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar, overload

from shapes.descriptors import (
    ArrayShape,
    NullableShape,
    ObjectShape,
    OptionalShape,
    PrimitiveShape,
    Shape,
)
from shapes.errors import ErrorCode, bad_arguments, not_a_shape
from shapes.predicates import is_boolean, is_number, is_string

T = TypeVar("T")

_STRING: PrimitiveShape[str] = PrimitiveShape("string", is_string)
_NUMBER: PrimitiveShape[float] = PrimitiveShape("number", is_number)
_BOOLEAN: PrimitiveShape[bool] = PrimitiveShape("boolean", is_boolean)


def string() -> PrimitiveShape[str]:
    return _STRING


def number() -> PrimitiveShape[float]:
    return _NUMBER


def boolean() -> PrimitiveShape[bool]:
    return _BOOLEAN


def _require_shape(builder: str, candidate: Any, **metadata: Any) -> None:
    if not isinstance(candidate, Shape):
        raise not_a_shape(builder, candidate, **metadata)


def optional(shape: Shape[T]) -> OptionalShape[T]:
    """Allow the value to be missing. Does not allow ``None``; see ``nullable``."""
    _require_shape("optional", shape)
    return OptionalShape(f"{shape.display_name} | undefined", shape)


def nullable(shape: Shape[T]) -> NullableShape[T]:
    """Allow an explicit ``None``. Does not make an object property optional."""
    _require_shape("nullable", shape)
    return NullableShape(f"{shape.display_name} | null", shape)


def array(shape: Shape[T]) -> ArrayShape[T]:
    _require_shape("array", shape)
    return ArrayShape(f"Array<{shape.display_name}>", shape)


@overload
def object(properties: Mapping[str, Shape[Any]], /) -> ObjectShape: ...
@overload
def object(name: str, properties: Mapping[str, Shape[Any]], /) -> ObjectShape: ...
def object(name_or_properties: str | Mapping[str, Shape[Any]],
           maybe_properties: Mapping[str, Shape[Any]] | None = None, /) -> ObjectShape:
    """Build a closed object shape, optionally named for diagnostics.

    Raises:
        ShapeConstructionError: the arguments cannot describe an object.
    """
    if isinstance(name_or_properties, str):
        if maybe_properties is None:
            raise bad_arguments(
                f"object() got the name {name_or_properties!r} but no property map",
                ErrorCode.E2001_MISSING_PROPERTIES,
                name=name_or_properties,
            )
        name, properties = name_or_properties, maybe_properties
    else:
        if maybe_properties is not None:
            raise bad_arguments(
                "object() takes a name followed by a property map, got two property maps",
                ErrorCode.E2002_INVALID_PROPERTIES,
            )
        name, properties = None, name_or_properties

    if not isinstance(properties, Mapping):
        raise bad_arguments(
            f"object() expects a mapping of property names to shapes, got {type(properties).__name__}",
            ErrorCode.E2002_INVALID_PROPERTIES,
            name=name,
        )

    for key, shape in properties.items():
        if not isinstance(key, str):
            raise bad_arguments(
                f"object() property names must be strings, got {key!r}",
                ErrorCode.E2003_INVALID_PROPERTY_NAME,
                name=name,
            )
        _require_shape("object", shape, property=key)

    display_name = "Object" if name is None else name
    return ObjectShape(display_name, MappingProxyType(dict(properties)))
