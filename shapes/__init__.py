"""Runtime Structural Validation

Shapes describe the structure of decoded JSON and check values against it.
Each shape is also a static type declaration (``Shape[T]``), so the check and
the type come from one definition.

Key Features:
- Primitive, optional, nullable, array and object shapes
- Closed object shapes: unknown properties are always rejected
- Optional (key may be missing) and nullable (value may be null) kept apart
- Advisory structlog diagnostics on failure; the boolean is the only verdict
- Runtime type projection and TypeScript / TypedDict / JSON Schema generators

Usage:
    import json
    import shapes

    User = shapes.object("User", {
        "name": shapes.string(),
        "age": shapes.number(),
        "hasSignedIn": shapes.boolean(),
        "permissions": shapes.optional(shapes.array(shapes.string())),
    })

    parsed = json.loads(payload)
    if User.check(parsed):
        print(parsed)
"""

__version__ = "0.1.0"

from shapes.predicates import (
    UNDEFINED,
    Undefined,
    is_string,
    is_number,
    is_boolean,
    is_null,
    is_undefined,
    is_object,
    is_array,
    kind_of,
)
from shapes.descriptors import (
    Shape,
    ShapeKind,
    PrimitiveShape,
    OptionalShape,
    NullableShape,
    ArrayShape,
    ObjectShape,
)
from shapes.builders import (
    string,
    number,
    boolean,
    optional,
    nullable,
    array,
    object,
)
from shapes.errors import ErrorCode, ShapeError, ShapeConstructionError
from shapes.projection import project
from shapes.generators import (
    SchemaGenerator,
    TypeScriptGenerator,
    TypedDictGenerator,
    JSONSchemaGenerator,
)

__all__ = [
    "__version__",
    # Sentinel and predicates
    "UNDEFINED",
    "Undefined",
    "is_string",
    "is_number",
    "is_boolean",
    "is_null",
    "is_undefined",
    "is_object",
    "is_array",
    "kind_of",
    # Shapes
    "Shape",
    "ShapeKind",
    "PrimitiveShape",
    "OptionalShape",
    "NullableShape",
    "ArrayShape",
    "ObjectShape",
    # Builders
    "string",
    "number",
    "boolean",
    "optional",
    "nullable",
    "array",
    "object",
    # Errors
    "ErrorCode",
    "ShapeError",
    "ShapeConstructionError",
    # Projection and generation
    "project",
    "SchemaGenerator",
    "TypeScriptGenerator",
    "TypedDictGenerator",
    "JSONSchemaGenerator",
]
