"""Shape Descriptors

A shape describes an expected structural type and checks candidate values
against it. The set of kinds is closed: primitive, optional, nullable,
array and object. Each kind is a frozen, slotted dataclass with exactly one
``check`` implementation, so a shape tree can be built once at import time
and shared by any number of threads.

Checks are recursive descent with no shared state. Diagnostics go to the
``shapes.check`` logger as ``shape_check_failed`` events and never change
the verdict.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeGuard, TypeVar

from shapes.config import settings
from shapes.logging import diagnostics_logger
from shapes.predicates import UNDEFINED, Undefined, is_array, is_null, is_object, is_undefined, kind_of

T = TypeVar("T")

log = diagnostics_logger()


class ShapeKind(str, Enum):
    PRIMITIVE = "primitive"
    OPTIONAL = "optional"
    NULLABLE = "nullable"
    ARRAY = "array"
    OBJECT = "object"


def _preview(value: Any) -> str:
    text = repr(value)
    limit = settings.PREVIEW_LENGTH
    return text[:limit] + ("..." if len(text) > limit else "")


def _report(shape: str, reason: str, **context: Any) -> None:
    if settings.DIAGNOSTICS:
        log.warning("shape_check_failed", shape=shape, reason=reason, **context)


class Shape(ABC, Generic[T]):
    """Base class for shapes.

    ``T`` is the static type the shape stands for; ``check`` narrows its
    argument to ``T`` on success.
    """

    __slots__ = ()

    kind: ClassVar[ShapeKind]
    is_optional: ClassVar[bool] = False
    display_name: str

    @abstractmethod
    def check(self, value: Any) -> TypeGuard[T]:
        """Return True iff ``value`` conforms to this shape."""

    def __call__(self, value: Any) -> TypeGuard[T]: return self.check(value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.display_name}>"


@dataclass(frozen=True, slots=True, repr=False)
class PrimitiveShape(Shape[T]):
    """Leaf shape backed by one of the module-level predicates."""
    display_name: str
    predicate: Callable[[Any], bool]

    kind: ClassVar[ShapeKind] = ShapeKind.PRIMITIVE

    def check(self, value: Any) -> TypeGuard[T]:
        return self.predicate(value)


@dataclass(frozen=True, slots=True, repr=False)
class OptionalShape(Shape[T | Undefined]):
    """Accepts a missing key (``UNDEFINED``) or whatever ``inner`` accepts.

    Explicit ``None`` is only accepted if ``inner`` accepts it.
    """
    display_name: str
    inner: Shape[T]

    kind: ClassVar[ShapeKind] = ShapeKind.OPTIONAL
    is_optional: ClassVar[bool] = True

    def check(self, value: Any) -> TypeGuard[T | Undefined]:
        return is_undefined(value) or self.inner.check(value)


@dataclass(frozen=True, slots=True, repr=False)
class NullableShape(Shape[T | None]):
    """Accepts ``None`` or whatever ``inner`` accepts. Says nothing about presence."""
    display_name: str
    inner: Shape[T]

    kind: ClassVar[ShapeKind] = ShapeKind.NULLABLE

    def check(self, value: Any) -> TypeGuard[T | None]:
        return is_null(value) or self.inner.check(value)


@dataclass(frozen=True, slots=True, repr=False)
class ArrayShape(Shape[list[T]]):
    """A list or tuple whose every element satisfies ``members``."""
    display_name: str
    members: Shape[T]

    kind: ClassVar[ShapeKind] = ShapeKind.ARRAY

    def check(self, value: Any) -> TypeGuard[list[T]]:
        if not is_array(value):
            _report(self.display_name, "not_an_array", actual_kind=kind_of(value))
            return False

        for index, entry in enumerate(value):
            if not self.members.check(entry):
                _report(
                    self.display_name,
                    "invalid_element",
                    index=index,
                    value=_preview(entry),
                    actual_kind=kind_of(entry),
                    expected=self.members.display_name,
                )
                return False

        return True


@dataclass(frozen=True, slots=True, repr=False)
class ObjectShape(Shape[dict[str, Any]]):
    """A mapping with exactly the declared properties.

    Unknown keys are always rejected. A declared key may only be missing
    when its shape is optional. Properties are checked in declaration order
    and the first failure ends the check.
    """
    display_name: str
    properties: Mapping[str, Shape[Any]]

    kind: ClassVar[ShapeKind] = ShapeKind.OBJECT

    def check(self, value: Any) -> TypeGuard[dict[str, Any]]:
        if not is_object(value):
            _report(self.display_name, "not_an_object", actual_kind=kind_of(value))
            return False

        for key in value:
            if key not in self.properties:
                _report(self.display_name, "unknown_property", property=key)
                return False

        for name, shape in self.properties.items():
            present = name in value
            if not present and not shape.is_optional:
                _report(self.display_name, "missing_property", property=name, expected=shape.display_name)
                return False

            field = value[name] if present else UNDEFINED
            if not shape.check(field):
                _report(
                    self.display_name,
                    "invalid_property",
                    property=name,
                    value=_preview(field),
                    actual_kind=kind_of(field),
                    expected=shape.display_name,
                )
                return False

        return True
