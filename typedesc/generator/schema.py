"""JSON struct descriptions fed to the code generator."""

import json
from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin

from typedesc.fields import FieldDescriptor, FieldType, parse_field_type, parse_type_string


class SchemaError(RuntimeError):
    """Raised when a struct description is invalid."""


def resolve_field_type(value: str | int) -> FieldType:
    """Resolve a field type tag from its name (``FIELD_BOOLEAN``) or number."""
    text = str(value).strip()
    if text.isdigit():
        try:
            return FieldType(int(text))
        except ValueError as exc:
            raise SchemaError(f"Unknown field type number {text}") from exc

    try:
        return FieldType[text.upper()]
    except KeyError as exc:
        raise SchemaError(f"Unknown field type {text}") from exc


@dataclass
class FieldSchema(DataClassJsonMixin):
    """One field of a struct description.

    Exactly one of ``type`` (schema type string) or ``field_type``
    (datamap tag) must be given. ``array_sizes`` applies to type strings,
    ``array_size`` to field type tags.
    """

    name: str
    type: str | None = None
    field_type: str | None = None
    array_sizes: list[int] = field(default_factory=list)
    array_size: int = 1

    def descriptor(self) -> FieldDescriptor:
        if (self.type is None) == (self.field_type is None):
            raise SchemaError(f"Field {self.name} needs exactly one of 'type' or 'field_type'")

        if self.type is not None:
            return parse_type_string(self.type, self.name, self.array_sizes)
        return parse_field_type(resolve_field_type(self.field_type), self.name, self.array_size)


@dataclass
class StructSchema(DataClassJsonMixin):
    """A named struct made of schema fields."""

    name: str
    fields: list[FieldSchema]
    comment: str | None = None

    def descriptors(self) -> list[FieldDescriptor]:
        return [f.descriptor() for f in self.fields]


def _validate_field(index: int, item: object) -> None:
    # dataclasses-json does not check value types on decode
    if not isinstance(item, dict):
        raise SchemaError(f"Field {index} must be a JSON object")
    if not isinstance(item.get("name"), str):
        raise SchemaError(f"Field {index} needs a string 'name'")

    for key in ("type", "field_type"):
        if item.get(key) is not None and not isinstance(item[key], str):
            raise SchemaError(f"Field {item['name']}: '{key}' must be a string")

    sizes = item.get("array_sizes", [])
    if not isinstance(sizes, list) or not all(type(size) is int for size in sizes):
        raise SchemaError(f"Field {item['name']}: 'array_sizes' must be a list of integers")
    if type(item.get("array_size", 1)) is not int:
        raise SchemaError(f"Field {item['name']}: 'array_size' must be an integer")


def load_struct(text: str) -> StructSchema:
    """Load a struct description from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise SchemaError("Struct description must be a JSON object")
    if "name" not in data or "fields" not in data:
        raise SchemaError("Struct description needs 'name' and 'fields'")
    if not isinstance(data["name"], str):
        raise SchemaError("Struct name must be a string")
    if not isinstance(data["fields"], list):
        raise SchemaError("'fields' must be a list of field objects")

    for index, item in enumerate(data["fields"]):
        _validate_field(index, item)

    try:
        return StructSchema.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise SchemaError(f"Invalid struct description: {exc}") from exc
