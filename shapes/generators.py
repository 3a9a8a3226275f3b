"""Shape Generators

Generate TypeScript declarations, Python TypedDict stubs and JSON Schema from
shape definitions. The shape is the single source of truth; these are the
code-generation step that keeps hand-written static types from drifting.

Features:
- TypeScript interfaces with proper optionality
- TypedDict classes with NotRequired for optional properties
- JSON Schema draft 2020-12 with closed objects
- Named object shapes emitted once each, dependencies first
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
import json
import keyword
import re

from shapes.descriptors import ShapeKind, Shape
from shapes.errors import unknown_kind
from shapes.logging import generator_logger
from shapes.projection import typeddict_name

log = generator_logger()

_TS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _is_named(shape: Shape[Any]) -> bool:
    return shape.kind is ShapeKind.OBJECT and shape.display_name != "Object"


class SchemaGenerator(ABC):
    """Base class for shape generators."""

    @abstractmethod
    def generate(self, shape: Shape[Any]) -> str:
        """Generate the representation of one shape tree."""

    def generate_all(self, *shapes: Shape[Any], separator: str = "\n\n") -> str:
        return separator.join(self.generate(s) for s in shapes)


class _DeclarationGenerator(SchemaGenerator):
    """Shared walk for generators that emit one declaration per object shape."""

    name_anonymous = False

    def generate(self, shape: Shape[Any]) -> str:
        names: dict[int, str] = {}
        ordered: list[Shape[Any]] = []
        self._collect(shape, "Object", names, ordered)

        blocks = [self._declare(obj, names) for obj in ordered]
        if id(shape) not in names:
            blocks.append(self._alias("Shape", shape, names))
        return "\n\n".join(blocks)

    def _collect(self, shape: Shape[Any], hint: str, names: dict[int, str], ordered: list[Shape[Any]]) -> None:
        """Post-order walk assigning a name to every declared object shape."""
        match shape.kind:
            case ShapeKind.PRIMITIVE:
                return
            case ShapeKind.OPTIONAL | ShapeKind.NULLABLE:
                self._collect(shape.inner, hint, names, ordered)
                return
            case ShapeKind.ARRAY:
                self._collect(shape.members, hint, names, ordered)
                return
            case ShapeKind.OBJECT:
                pass
            case _:
                raise unknown_kind(shape.kind)

        if id(shape) in names:
            return
        if not _is_named(shape) and not self.name_anonymous:
            for prop_name, prop in shape.properties.items():
                self._collect(prop, hint + _title(prop_name), names, ordered)
            return

        name = typeddict_name(shape.display_name if _is_named(shape) else hint)
        if name in names.values():
            log.warning("duplicate_shape_name", name=name, generator=type(self).__name__)
            name = self._unique(name, names)
        names[id(shape)] = name

        for prop_name, prop in shape.properties.items():
            self._collect(prop, name + _title(prop_name), names, ordered)
        ordered.append(shape)

    @staticmethod
    def _unique(name: str, names: dict[int, str]) -> str:
        taken = set(names.values())
        suffix = 2
        while f"{name}{suffix}" in taken:
            suffix += 1
        return f"{name}{suffix}"

    @abstractmethod
    def _declare(self, shape: Shape[Any], names: dict[int, str]) -> str: ...

    @abstractmethod
    def _alias(self, name: str, shape: Shape[Any], names: dict[int, str]) -> str: ...


def _title(prop_name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"[^A-Za-z0-9]+", prop_name))


class TypeScriptGenerator(_DeclarationGenerator):
    """Generate TypeScript type definitions.

    Named object shapes become interfaces, anonymous ones are inlined.
    Optional properties use ``?:``; a top-level optional renders as
    ``T | undefined``.
    """

    def __init__(self, export_style: str = "export"):
        self.export_style = export_style

    def _declare(self, shape: Shape[Any], names: dict[int, str]) -> str:
        lines = [f"{self.export_style} interface {names[id(shape)]} {{"]
        lines.extend(f"  {line}" for line in self._members(shape, names))
        lines.append("}")
        return "\n".join(lines)

    def _alias(self, name: str, shape: Shape[Any], names: dict[int, str]) -> str:
        return f"{self.export_style} type {name} = {self._type(shape, names)};"

    def _members(self, shape: Shape[Any], names: dict[int, str]) -> list[str]:
        members = []
        for prop_name, prop in shape.properties.items():
            key = prop_name if _TS_IDENTIFIER.match(prop_name) else json.dumps(prop_name)
            if prop.is_optional:
                members.append(f"{key}?: {self._type(prop.inner, names)};")
            else:
                members.append(f"{key}: {self._type(prop, names)};")
        return members

    def _type(self, shape: Shape[Any], names: dict[int, str]) -> str:
        match shape.kind:
            case ShapeKind.PRIMITIVE:
                return shape.display_name
            case ShapeKind.OPTIONAL:
                return f"{self._type(shape.inner, names)} | undefined"
            case ShapeKind.NULLABLE:
                return f"{self._type(shape.inner, names)} | null"
            case ShapeKind.ARRAY:
                return f"Array<{self._type(shape.members, names)}>"
            case ShapeKind.OBJECT:
                if id(shape) in names:
                    return names[id(shape)]
                return "{ " + " ".join(self._members(shape, names)) + " }"
        raise unknown_kind(shape.kind)


class TypedDictGenerator(_DeclarationGenerator):
    """Generate Python ``TypedDict`` declarations.

    Every object shape gets a class; anonymous ones are named after the
    path that reaches them (``Object`` at the root, ``UserAddress`` for an
    anonymous ``address`` property of ``User``). Property names that are
    not identifiers switch the declaration to the functional form.
    """

    name_anonymous = True

    PRIMITIVES = {"string": "str", "number": "float", "boolean": "bool"}

    def generate(self, shape: Shape[Any]) -> str:
        body = super().generate(shape)
        imports = ["NotRequired", "TypedDict"] if "NotRequired[" in body else ["TypedDict"]
        header = [f"from typing import {', '.join(imports)}"]
        if "Undefined" in body:
            header.append("from shapes import Undefined")
        return "\n".join(header) + "\n\n\n" + body.replace("\n\n", "\n\n\n") + "\n"

    def _declare(self, shape: Shape[Any], names: dict[int, str]) -> str:
        name = names[id(shape)]
        fields = [(prop_name, self._field(prop, names)) for prop_name, prop in shape.properties.items()]

        if all(prop_name.isidentifier() and not keyword.iskeyword(prop_name) for prop_name, _ in fields):
            lines = [f"class {name}(TypedDict):"]
            lines.extend(f"    {prop_name}: {hint}" for prop_name, hint in fields)
            if not fields:
                lines.append("    pass")
            return "\n".join(lines)

        lines = [f"{name} = TypedDict("]
        lines.append(f"    {name!r},")
        lines.append("    {")
        lines.extend(f"        {json.dumps(prop_name)}: {hint}," for prop_name, hint in fields)
        lines.append("    },")
        lines.append(")")
        return "\n".join(lines)

    def _alias(self, name: str, shape: Shape[Any], names: dict[int, str]) -> str:
        return f"{name} = {self._type(shape, names)}"

    def _field(self, prop: Shape[Any], names: dict[int, str]) -> str:
        if prop.is_optional:
            return f"NotRequired[{self._type(prop.inner, names)}]"
        return self._type(prop, names)

    def _type(self, shape: Shape[Any], names: dict[int, str]) -> str:
        match shape.kind:
            case ShapeKind.PRIMITIVE:
                return self.PRIMITIVES[shape.display_name]
            case ShapeKind.OPTIONAL:
                return f"{self._type(shape.inner, names)} | Undefined"
            case ShapeKind.NULLABLE:
                return f"{self._type(shape.inner, names)} | None"
            case ShapeKind.ARRAY:
                return f"list[{self._type(shape.members, names)}]"
            case ShapeKind.OBJECT:
                return names[id(shape)]
        raise unknown_kind(shape.kind)


class JSONSchemaGenerator(SchemaGenerator):
    """Generate JSON Schema (draft 2020-12).

    Objects are closed (``additionalProperties: false``) to match the check.
    JSON has no "undefined", so a bare optional outside an object projects
    to its inner schema.
    """

    def __init__(self, indent: int | None = 2): self.indent = indent

    def generate(self, shape: Shape[Any]) -> str:
        json_schema = {"$schema": "https://json-schema.org/draft/2020-12/schema", **self.to_dict(shape)}
        return json.dumps(json_schema, indent=self.indent)

    def to_dict(self, shape: Shape[Any]) -> dict[str, Any]:
        match shape.kind:
            case ShapeKind.PRIMITIVE:
                return {"type": shape.display_name}
            case ShapeKind.OPTIONAL:
                return self.to_dict(shape.inner)
            case ShapeKind.NULLABLE:
                return {"anyOf": [self.to_dict(shape.inner), {"type": "null"}]}
            case ShapeKind.ARRAY:
                return {"type": "array", "items": self.to_dict(shape.members)}
            case ShapeKind.OBJECT:
                schema: dict[str, Any] = {}
                if _is_named(shape):
                    schema["title"] = shape.display_name
                schema["type"] = "object"
                schema["properties"] = {name: self.to_dict(prop) for name, prop in shape.properties.items()}
                schema["required"] = [name for name, prop in shape.properties.items() if not prop.is_optional]
                schema["additionalProperties"] = False
                return schema
        raise unknown_kind(shape.kind)
