"""Schema field type parsing."""

from .errors import ArrayDimensionError as ArrayDimensionError
from .errors import BitfieldWidthError as BitfieldWidthError
from .errors import MalformedTypeError as MalformedTypeError
from .errors import TypeParseError as TypeParseError
from .generic import parse_generic as parse_generic
from .parser import normalize_type as normalize_type
from .parser import parse as parse
from .parser import parse_field_type as parse_field_type
from .parser import parse_type_string as parse_type_string
from .tables import smallest_integer_type_for_bit_width as smallest_integer_type_for_bit_width
from .types import FieldDescriptor as FieldDescriptor
from .types import FieldType as FieldType
from .types import TemplateArgument as TemplateArgument
from .types import TemplateNode as TemplateNode
