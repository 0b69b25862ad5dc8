"""Tests for JSON struct descriptions."""

import os

import pytest

from typedesc.fields import ArrayDimensionError, BitfieldWidthError, FieldType
from typedesc.generator.schema import SchemaError, load_struct, resolve_field_type

FILE_DIR = os.path.dirname(os.path.realpath(__file__))


def _load_fixture():
    with open(f"{FILE_DIR}/struct.json", encoding="utf-8") as f:
        return load_struct(f.read())


def describe_load_struct():
    def loads_struct_description(expect):
        struct = _load_fixture()
        expect(struct.name) == "CBodyComponent"
        expect(struct.comment) == "Scene node body component"
        expect(len(struct.fields)) == 6
        expect(struct.fields[3].array_sizes) == [3, 4]

    def builds_descriptors_from_both_paths(expect):
        fields = _load_fixture().descriptors()
        expect([f.canonical_type for f in fields]) == [
            "int32_t",
            "uint8_t",
            "CUtlVector<CHandle<C_BaseEntity>>",
            "float",
            "Vector",
            "GameTime_t",
        ]
        expect(fields[1].bitfield_width) == 3
        expect(fields[3].array_dimensions) == [3, 4]
        expect(fields[4].field_type_tag) == FieldType.FIELD_VECTOR
        expect(fields[5].array_dimensions) == [8]

    def rejects_invalid_json(expect):
        with pytest.raises(SchemaError):
            load_struct("{not json")

    def rejects_non_object(expect):
        with pytest.raises(SchemaError):
            load_struct("[1, 2, 3]")

    def rejects_missing_keys(expect):
        with pytest.raises(SchemaError):
            load_struct('{"name": "Empty"}')

    def rejects_field_with_both_kinds(expect):
        struct = load_struct(
            '{"name": "S", "fields": [{"name": "a", "type": "int8", "field_type": "FIELD_INT32"}]}'
        )
        with pytest.raises(SchemaError):
            struct.descriptors()

    def rejects_field_without_type(expect):
        struct = load_struct('{"name": "S", "fields": [{"name": "a"}]}')
        with pytest.raises(SchemaError):
            struct.descriptors()

    def propagates_parse_errors(expect):
        struct = load_struct('{"name": "S", "fields": [{"name": "a", "type": "bitfield:x"}]}')
        with pytest.raises(BitfieldWidthError):
            struct.descriptors()

    def rejects_null_fields(expect):
        with pytest.raises(SchemaError):
            load_struct('{"name": "S", "fields": null}')

    def rejects_non_object_fields(expect):
        with pytest.raises(SchemaError):
            load_struct('{"name": "S", "fields": ["int32"]}')

    def rejects_non_string_type(expect):
        with pytest.raises(SchemaError) as exc:
            load_struct('{"name": "S", "fields": [{"name": "a", "type": 5}]}')
        expect("'type' must be a string" in str(exc.value)) == True

    def rejects_non_string_field_type(expect):
        with pytest.raises(SchemaError):
            load_struct('{"name": "S", "fields": [{"name": "a", "field_type": 6}]}')

    def rejects_non_integer_array_sizes(expect):
        with pytest.raises(SchemaError):
            load_struct('{"name": "S", "fields": [{"name": "a", "type": "int8", "array_sizes": 4}]}')
        with pytest.raises(SchemaError):
            load_struct(
                '{"name": "S", "fields": [{"name": "a", "type": "int8", "array_sizes": ["4"]}]}'
            )

    def rejects_non_positive_dimensions(expect):
        struct = load_struct(
            '{"name": "S", "fields": [{"name": "a", "type": "int8", "array_sizes": [0]}]}'
        )
        with pytest.raises(ArrayDimensionError):
            struct.descriptors()


def describe_resolve_field_type():
    def resolves_names(expect):
        expect(resolve_field_type("FIELD_BOOLEAN")) == FieldType.FIELD_BOOLEAN
        expect(resolve_field_type("field_boolean")) == FieldType.FIELD_BOOLEAN

    def resolves_numbers(expect):
        expect(resolve_field_type("6")) == FieldType.FIELD_BOOLEAN
        expect(resolve_field_type(13)) == FieldType.FIELD_EHANDLE

    def rejects_unknown_names(expect):
        with pytest.raises(SchemaError):
            resolve_field_type("FIELD_NOPE")

    def rejects_unknown_numbers(expect):
        with pytest.raises(SchemaError):
            resolve_field_type("999")
