"""C++ declaration generator for parsed schema fields."""

from .cpp import render as render
from .schema import FieldSchema as FieldSchema
from .schema import SchemaError as SchemaError
from .schema import StructSchema as StructSchema
from .schema import load_struct as load_struct
