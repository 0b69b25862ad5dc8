"""typedesc - Schema field type descriptor parser."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("typedesc")
except PackageNotFoundError:
    __version__ = "(local)"
