"""Detection of bitfield markers in schema type strings."""

import re

from .errors import BitfieldWidthError
from .tables import smallest_integer_type_for_bit_width

BITFIELD_PREFIX = "bitfield:"

_WIDTH_RE = re.compile(r"[0-9]+")


def parse_bitfield_width(type_name: str) -> int | None:
    """Return the bit width of a ``bitfield:N`` type, or None for other types."""
    if not type_name.startswith(BITFIELD_PREFIX):
        return None

    width_str = type_name[len(BITFIELD_PREFIX) :]
    if not _WIDTH_RE.fullmatch(width_str):
        raise BitfieldWidthError("Unable to parse bitfield width", type_name)

    return int(width_str)


def bitfield_storage_type(width: int, type_name: str) -> str:
    """Pick the storage type for a bitfield, reporting failures against ``type_name``."""
    try:
        return smallest_integer_type_for_bit_width(width)
    except ValueError as exc:
        raise BitfieldWidthError(str(exc), type_name) from exc
