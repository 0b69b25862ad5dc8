"""Field descriptor parsing for schema type strings and datamap field types."""

import logging
from collections.abc import Sequence

from .bitfield import bitfield_storage_type, parse_bitfield_width
from .errors import ArrayDimensionError
from .generic import is_generic, parse_generic
from .tables import DATAMAP_TYPES, normalize_alias
from .types import FieldDescriptor, FieldType, TemplateNode

logger = logging.getLogger(__name__)


def _new_descriptor(name: str, array_dimensions: Sequence[int]) -> FieldDescriptor:
    return FieldDescriptor(raw_name=name, array_dimensions=[int(size) for size in array_dimensions])


def normalize_type(type_name: str) -> tuple[str, TemplateNode | None]:
    """Normalize a raw type string.

    Whitespace is removed, primitive aliases are replaced and generic
    instantiations are parsed and re-serialized so nested aliases are
    normalized too.

    Returns:
        The canonical type and the template tree, if the type is generic.
    """
    canonical = normalize_alias("".join(type_name.split()))
    if not is_generic(canonical):
        return canonical, None

    template_info = parse_generic(canonical)
    return template_info.to_string(), template_info


def parse_type_string(
    type_name: str, name: str, array_sizes: Sequence[int] = ()
) -> FieldDescriptor:
    """Parse a schema type string into a field descriptor.

    Args:
        type_name: Raw type, e.g. ``int32``, ``bitfield:3`` or
                   ``CUtlVector< CHandle< C_BaseEntity > >``
        name: Field name
        array_sizes: Array dimensions, outermost first

    Raises:
        ArrayDimensionError: An array dimension is zero or negative.
        BitfieldWidthError: The bitfield marker is followed by an invalid width.
        MalformedTypeError: A generic instantiation has invalid syntax.
    """
    for size in array_sizes:
        if int(size) < 1:
            raise ArrayDimensionError(
                f"Array dimension {size} of field {name} is not positive", type_name
            )

    result = _new_descriptor(name, array_sizes)

    width = parse_bitfield_width(type_name)
    if width is not None:
        result.bitfield_width = width
        result.canonical_type = bitfield_storage_type(width, type_name)
    else:
        result.canonical_type, result.template_info = normalize_type(type_name)

    logger.debug("Parsed field %s: '%s' -> '%s'", name, type_name, result.canonical_type)
    return result


def parse_field_type(tag: FieldType | int, name: str, array_size: int = 1) -> FieldDescriptor:
    """Parse a datamap field type tag into a field descriptor.

    Never raises: tags without a C++ mapping leave ``canonical_type`` empty.
    An ``array_size`` of 0 or 1 means the field is a scalar.
    """
    result = _new_descriptor(name, [array_size] if array_size > 1 else [])

    try:
        result.field_type_tag = FieldType(tag)
    except ValueError:
        logger.warning("Field %s has unknown field type %s", name, tag)
        return result

    canonical = DATAMAP_TYPES.get(result.field_type_tag)
    if canonical is None:
        logger.warning("Field %s has unmapped field type %s", name, result.field_type_tag.name)
        return result

    result.canonical_type = canonical
    logger.debug("Parsed field %s: %s -> '%s'", name, result.field_type_tag.name, canonical)
    return result


def parse(
    type_name: str | FieldType | int, name: str, array_sizes: Sequence[int] | int = ()
) -> FieldDescriptor:
    """Parse either a type string or a field type tag.

    Strings go through :func:`parse_type_string` with ``array_sizes`` as the
    dimension list; tags go through :func:`parse_field_type` with a scalar
    array size (default 1).
    """
    if isinstance(type_name, str):
        if isinstance(array_sizes, int):
            raise TypeError("Type strings take a sequence of array sizes")
        return parse_type_string(type_name, name, array_sizes)

    if isinstance(array_sizes, int):
        return parse_field_type(type_name, name, array_sizes)
    if len(array_sizes) > 1:
        raise ValueError("Field type tags take a single array size")
    return parse_field_type(type_name, name, array_sizes[0] if array_sizes else 1)
