"""Data model for parsed schema fields."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from functools import reduce
from operator import mul
from typing import TypeAlias

from dataclasses_json import DataClassJsonMixin


class FieldType(IntEnum):
    """Datamap field type tags as reported by the schema source."""

    FIELD_VOID = 0
    FIELD_FLOAT32 = 1
    FIELD_STRING = 2
    FIELD_VECTOR = 3
    FIELD_QUATERNION = 4
    FIELD_INT32 = 5
    FIELD_BOOLEAN = 6
    FIELD_INT16 = 7
    FIELD_CHARACTER = 8
    FIELD_COLOR32 = 9
    FIELD_EMBEDDED = 10
    FIELD_CUSTOM = 11
    FIELD_CLASSPTR = 12
    FIELD_EHANDLE = 13
    FIELD_POSITION_VECTOR = 14
    FIELD_TIME = 15
    FIELD_TICK = 16
    FIELD_SOUNDNAME = 17
    FIELD_INPUT = 18
    FIELD_FUNCTION = 19
    FIELD_VMATRIX = 20
    FIELD_VMATRIX_WORLDSPACE = 21
    FIELD_MATRIX3X4_WORLDSPACE = 22
    FIELD_INTERVAL = 23
    FIELD_UNUSED = 24
    FIELD_VECTOR2D = 25
    FIELD_INT64 = 26
    FIELD_VECTOR4D = 27
    FIELD_RESOURCE = 28
    FIELD_TYPEUNKNOWN = 29
    FIELD_CSTRING = 30
    FIELD_HSCRIPT = 31
    FIELD_VARIANT = 32
    FIELD_UINT64 = 33
    FIELD_FLOAT64 = 34
    FIELD_POSITIVEINTEGER_OR_NULL = 35
    FIELD_HSCRIPT_NEW_INSTANCE = 36
    FIELD_UINT32 = 37
    FIELD_UTLSTRINGTOKEN = 38
    FIELD_QANGLE = 39
    FIELD_NETWORK_ORIGIN_CELL_QUANTIZED_VECTOR = 40
    FIELD_HMATERIAL = 41
    FIELD_HMODEL = 42
    FIELD_NETWORK_QUANTIZED_VECTOR = 43
    FIELD_NETWORK_QUANTIZED_FLOAT = 44
    FIELD_DIRECTION_VECTOR_WORLDSPACE = 45
    FIELD_QANGLE_WORLDSPACE = 46
    FIELD_QUATERNION_WORLDSPACE = 47
    FIELD_HSCRIPT_LIGHTBINDING = 48
    FIELD_V8_VALUE = 49
    FIELD_V8_OBJECT = 50
    FIELD_V8_ARRAY = 51
    FIELD_V8_CALLBACK_INFO = 52
    FIELD_UTLSTRING = 53
    FIELD_NETWORK_ORIGIN_CELL_QUANTIZED_POSITION_VECTOR = 54
    FIELD_HRENDERTEXTURE = 55
    FIELD_HPARTICLESYSTEMDEFINITION = 56
    FIELD_UINT8 = 57
    FIELD_UINT16 = 58
    FIELD_CTRANSFORM = 59
    FIELD_CTRANSFORM_WORLDSPACE = 60
    FIELD_HPOSTPROCESSING = 61
    FIELD_MATRIX3X4 = 62
    FIELD_SHIM = 63
    FIELD_CMOTIONTRANSFORM = 64
    FIELD_CMOTIONTRANSFORM_WORLDSPACE = 65
    FIELD_ATTACHMENT_HANDLE = 66
    FIELD_AMMO_INDEX = 67
    FIELD_CONDITION_ID = 68
    FIELD_AI_SCHEDULE_BITS = 69
    FIELD_MODIFIER_HANDLE = 70
    FIELD_ROTATION_VECTOR = 71
    FIELD_ROTATION_VECTOR_WORLDSPACE = 72
    FIELD_HVDATA = 73
    FIELD_SCALE32 = 74
    FIELD_STRING_AND_TOKEN = 75
    FIELD_ENGINE_TIME = 76
    FIELD_ENGINE_TICK = 77
    FIELD_WORLD_GROUP_ID = 78
    FIELD_GLOBALSYMBOL = 79
    FIELD_TYPECOUNT = 80


@dataclass
class TemplateNode(DataClassJsonMixin):
    """A generic instantiation such as ``CUtlVector<CHandle<CBaseEntity>>``.

    Each argument is either a leaf type name (``str``) or a nested
    ``TemplateNode``, kept in left-to-right source order.
    """

    type_name: str
    arguments: list[str | TemplateNode] = field(default_factory=list)
    is_pointer: bool = False

    def to_string(self) -> str:
        """Serialize the tree back into a canonical type string."""
        args = ",".join(str(arg) for arg in self.arguments)
        pointer = "*" if self.is_pointer else ""
        return f"{self.type_name}<{args}>{pointer}"

    def walk(self) -> Iterator[TemplateNode]:
        """Yield this node and every nested node, depth first."""
        yield self
        for arg in self.arguments:
            if isinstance(arg, TemplateNode):
                yield from arg.walk()

    def __str__(self) -> str:
        return self.to_string()


TemplateArgument: TypeAlias = str | TemplateNode


@dataclass
class FieldDescriptor(DataClassJsonMixin):
    """Represents a single parsed schema field.

    - array_dimensions=[]: not an array
    - bitfield_width=None: not a bitfield
    - template_info=None: type is not a parsed generic instantiation
    """

    raw_name: str
    canonical_type: str = ""
    field_type_tag: FieldType = FieldType.FIELD_UNUSED
    array_dimensions: list[int] = field(default_factory=list)
    bitfield_width: int | None = None
    template_info: TemplateNode | None = None

    def is_bitfield(self) -> bool:
        return bool(self.bitfield_width)

    def is_array(self) -> bool:
        return len(self.array_dimensions) > 0

    def is_templated(self) -> bool:
        # Textual check, also true for enum-path literals like CHandle<CBaseEntity>
        return "<" in self.canonical_type and ">" in self.canonical_type

    def total_array_size(self) -> int:
        """Number of elements across all dimensions, 0 if not an array."""
        if not self.array_dimensions:
            return 0
        return reduce(mul, self.array_dimensions)

    def formatted_array_sizes(self) -> str:
        return "".join(f"[{size}]" for size in self.array_dimensions)

    def declarator_suffix(self) -> str:
        """Suffix placed after the field name in a C++ declaration."""
        if self.is_bitfield():
            return f": {self.bitfield_width}"
        if self.is_array():
            return self.formatted_array_sizes()
        return ""

    def formatted_name(self) -> str:
        return f"{self.raw_name}{self.declarator_suffix()}"
