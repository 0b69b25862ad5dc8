"""C++ struct declaration generator for parsed schema fields."""

from jinja2 import Environment, PackageLoader

from typedesc.fields import FieldDescriptor

env = Environment(
    loader=PackageLoader("typedesc.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("struct.h.j2")


def generic_types(fields: list[FieldDescriptor]) -> list[str]:
    """Names of all generic types referenced by the fields, sorted."""
    names = {
        node.type_name
        for f in fields
        if f.template_info is not None
        for node in f.template_info.walk()
    }
    return sorted(names)


def render(name: str, fields: list[FieldDescriptor], comment: str | None = None) -> str:
    """Render a C++ struct declaration.

    Fields whose type could not be resolved are emitted as comments so the
    struct still compiles.
    """
    return template.render(
        name=name,
        fields=fields,
        comment=comment,
        generics=generic_types(fields),
    )
