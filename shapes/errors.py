"""Shape Errors

Only malformed builder calls raise. A value that does not conform is never an
error: checks answer False and, at most, log a diagnostic.
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Numbered error codes.

    E2xxx: Construction (builder argument) errors
    E9xxx: Internal errors
    """
    E2000_CONSTRUCTION_GENERIC = 2000
    E2001_MISSING_PROPERTIES = 2001
    E2002_INVALID_PROPERTIES = 2002
    E2003_INVALID_PROPERTY_NAME = 2003
    E2004_NOT_A_SHAPE = 2004

    E9001_UNKNOWN_SHAPE_KIND = 9001

    @property
    def category(self) -> str:
        """Human-readable error category."""
        if 2000 <= self.value < 3000:
            return "construction"
        return "internal"


class ShapeError(Exception):
    """Base error for the shapes library.

    Carries a typed code, a human-readable message and structured metadata
    for debugging.
    """

    def __init__(self, code: ErrorCode, message: str, **metadata: Any):
        self.code = code
        self.message = message
        self.metadata = metadata
        super().__init__(str(self))

    def to_dict(self) -> dict:
        """Serialize error for logging."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


class ShapeConstructionError(ShapeError, TypeError):
    """A builder was called with arguments it cannot turn into a shape.

    This is a programming error in the schema declaration, not a data
    validation outcome, so it is raised rather than returned.
    """


def bad_arguments(message: str, code: ErrorCode = ErrorCode.E2000_CONSTRUCTION_GENERIC,
                  **metadata: Any) -> ShapeConstructionError:
    return ShapeConstructionError(code, message, **metadata)


def not_a_shape(builder: str, argument: Any, **metadata: Any) -> ShapeConstructionError:
    return ShapeConstructionError(
        ErrorCode.E2004_NOT_A_SHAPE,
        f"{builder}() expects a shape, got {type(argument).__name__}",
        builder=builder,
        **metadata,
    )


def unknown_kind(kind: Any) -> ShapeError:
    return ShapeError(ErrorCode.E9001_UNKNOWN_SHAPE_KIND, f"Unknown shape kind: {kind!r}", kind=str(kind))
