"""Generic instantiation parser using Lark."""

import os
from typing import Any

from lark import Lark, Token
from lark.exceptions import LarkError
from lark.visitors import Transformer

from .errors import MalformedTypeError
from .tables import normalize_alias
from .types import TemplateArgument, TemplateNode

with open(f"{os.path.dirname(__file__)}/typename.lark", encoding="utf-8") as f:
    _GRAMMAR = f.read()

# Contextual lexer lets a trailing '*' lex as POINTER rather than NAME
_PARSER = Lark(_GRAMMAR, parser="lalr", lexer="contextual")


def is_generic(type_name: str) -> bool:
    """Textual check for an angle-bracket instantiation."""
    return "<" in type_name and ">" in type_name


class TreeTransformer(Transformer):
    """Transform parse tree into template nodes."""

    def start(self, args: list[Any]) -> TemplateNode:
        return args[0]

    def generic(self, args: list[Any]) -> TemplateNode:
        name, arguments, pointer = args
        return TemplateNode(
            type_name=str(name),
            arguments=arguments if arguments is not None else [],
            is_pointer=isinstance(pointer, Token),
        )

    def arguments(self, args: list[Any]) -> list[TemplateArgument]:
        return list(args)

    def leaf(self, args: list[Any]) -> str:
        return normalize_alias(str(args[0]))


def parse_generic(type_name: str) -> TemplateNode:
    """Parse a whitespace-free generic instantiation into a template tree.

    Leaf arguments are passed through the primitive alias table, so
    ``CUtlVector<float32>`` yields a ``float`` leaf.
    """
    try:
        tree = _PARSER.parse(type_name)
    except LarkError as exc:
        raise MalformedTypeError("Malformed generic type", type_name) from exc

    return TreeTransformer().transform(tree)
