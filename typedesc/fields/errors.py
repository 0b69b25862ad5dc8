"""Errors raised while parsing field type strings."""


class TypeParseError(RuntimeError):
    """Raised when a raw type string cannot be turned into a field descriptor."""

    def __init__(self, message: str, type_name: str):
        super().__init__(f"{message}: '{type_name}'")
        self.type_name = type_name


class BitfieldWidthError(TypeParseError):
    """Raised when the width after a bitfield marker is malformed."""


class MalformedTypeError(TypeParseError):
    """Raised when a generic instantiation has unbalanced or invalid syntax."""


class ArrayDimensionError(TypeParseError):
    """Raised when an array dimension is not a positive integer."""
