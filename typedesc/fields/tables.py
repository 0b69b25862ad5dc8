"""Static lookup tables mapping schema type names to C++ types."""

from .types import FieldType

# Ordered (alias, canonical) pairs, matched against the whole type name only
PRIMITIVE_ALIASES: tuple[tuple[str, str], ...] = (
    ("float32", "float"),
    ("float64", "double"),
    ("int8", "int8_t"),
    ("int16", "int16_t"),
    ("int32", "int32_t"),
    ("int64", "int64_t"),
    ("uint8", "uint8_t"),
    ("uint16", "uint16_t"),
    ("uint32", "uint32_t"),
    ("uint64", "uint64_t"),
)

PRIMITIVE_ALIAS_MAP: dict[str, str] = dict(PRIMITIVE_ALIASES)

# Canonical types are final; generic-looking entries are not re-parsed
DATAMAP_TYPES: dict[FieldType, str] = {
    FieldType.FIELD_FLOAT32: "float",
    FieldType.FIELD_TIME: "GameTime_t",
    FieldType.FIELD_ENGINE_TIME: "float",
    FieldType.FIELD_FLOAT64: "double",
    FieldType.FIELD_INT16: "int16_t",
    FieldType.FIELD_INT32: "int32_t",
    FieldType.FIELD_INT64: "int64_t",
    FieldType.FIELD_UINT8: "uint8_t",
    FieldType.FIELD_UINT16: "uint16_t",
    FieldType.FIELD_UINT32: "uint32_t",
    FieldType.FIELD_UINT64: "uint64_t",
    FieldType.FIELD_BOOLEAN: "bool",
    FieldType.FIELD_CHARACTER: "char",
    FieldType.FIELD_VOID: "void",
    FieldType.FIELD_STRING: "CUtlSymbolLarge",
    FieldType.FIELD_VECTOR: "Vector",
    FieldType.FIELD_POSITION_VECTOR: "Vector",
    FieldType.FIELD_NETWORK_ORIGIN_CELL_QUANTIZED_VECTOR: "Vector",
    FieldType.FIELD_DIRECTION_VECTOR_WORLDSPACE: "Vector",
    FieldType.FIELD_NETWORK_QUANTIZED_VECTOR: "Vector",
    FieldType.FIELD_VECTOR2D: "Vector2D",
    FieldType.FIELD_VECTOR4D: "Vector4D",
    FieldType.FIELD_QANGLE: "QAngle",
    FieldType.FIELD_QANGLE_WORLDSPACE: "QAngle",
    FieldType.FIELD_QUATERNION: "Quaternion",
    FieldType.FIELD_CSTRING: "const char*",
    FieldType.FIELD_UTLSTRING: "CUtlString",
    FieldType.FIELD_UTLSTRINGTOKEN: "CUtlStringToken",
    FieldType.FIELD_COLOR32: "Color",
    FieldType.FIELD_WORLD_GROUP_ID: "WorldGroupId_t",
    FieldType.FIELD_ROTATION_VECTOR: "RotationVector",
    FieldType.FIELD_CTRANSFORM_WORLDSPACE: "CTransform",
    FieldType.FIELD_EHANDLE: "CHandle<CBaseEntity>",
    FieldType.FIELD_CUSTOM: "void",
    FieldType.FIELD_HMODEL: "CStrongHandle<InfoForResourceTypeCModel>",
    FieldType.FIELD_HMATERIAL: "CStrongHandle<InfoForResourceTypeIMaterial2>",
    FieldType.FIELD_SHIM: "SHIM",
    FieldType.FIELD_FUNCTION: "void*",
}

# Unsigned storage types for bitfields, smallest first
BITFIELD_STORAGE_TYPES: tuple[tuple[int, str], ...] = (
    (8, "uint8_t"),
    (16, "uint16_t"),
    (32, "uint32_t"),
    (64, "uint64_t"),
)


def normalize_alias(type_name: str) -> str:
    """Return the C++ name for a primitive alias, or the name unchanged."""
    return PRIMITIVE_ALIAS_MAP.get(type_name, type_name)


def smallest_integer_type_for_bit_width(width: int) -> str:
    """Return the smallest unsigned integer type holding ``width`` bits."""
    if width < 0:
        raise ValueError(f"Bitfield width cannot be negative: {width}")

    for bits, type_name in BITFIELD_STORAGE_TYPES:
        if width <= bits:
            return type_name

    raise ValueError(f"Bitfield width {width} exceeds {BITFIELD_STORAGE_TYPES[-1][0]} bits")
