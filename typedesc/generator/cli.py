"""Command-line interface for typedesc."""

from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.tree import Tree

from typedesc.fields import (
    FieldDescriptor,
    FieldType,
    TemplateNode,
    TypeParseError,
    parse_field_type,
    parse_type_string,
)
from typedesc.generator import cpp
from typedesc.generator.schema import SchemaError, load_struct, resolve_field_type


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Schema field type descriptor parser."""
    _setup_logging(verbose)


@cli.command("parse")
@click.argument("type_name")
@click.option("--name", "-n", default="value", help="Field name")
@click.option("--array", "-a", "array_sizes", type=int, multiple=True, help="Array dimension (repeatable)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def parse_cmd(type_name: str, name: str, array_sizes: tuple[int, ...], output_json: bool) -> None:
    """Parse a schema type string."""
    try:
        descriptor = parse_type_string(type_name, name, array_sizes)
    except TypeParseError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    _output(descriptor, output_json)


@cli.command("field")
@click.argument("tag")
@click.option("--name", "-n", default="value", help="Field name")
@click.option("--array-size", "-s", type=int, default=1, help="Array length (1 = scalar)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def field_cmd(tag: str, name: str, array_size: int, output_json: bool) -> None:
    """Parse a datamap field type tag, by name or number."""
    try:
        field_type = resolve_field_type(tag)
    except SchemaError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    _output(parse_field_type(field_type, name, array_size), output_json)


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input struct description (JSON)")
@click.option("--output", "-o", "output_file", required=True, help="Output header file")
def header(input_file: str, output_file: str) -> None:
    """Generate a C++ struct declaration from a struct description."""
    with open(input_file, encoding="utf-8") as f:
        text = f.read()

    try:
        struct = load_struct(text)
        fields = struct.descriptors()
    except (SchemaError, TypeParseError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    generated_file = cpp.render(struct.name, fields, comment=struct.comment)

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(generated_file)


def _output(descriptor: FieldDescriptor, output_json: bool) -> None:
    if output_json:
        _output_json(descriptor)
    else:
        _output_plain(descriptor)


def _output_json(descriptor: FieldDescriptor) -> None:
    """Output a field descriptor as JSON, including derived values."""
    data = json.loads(descriptor.to_json())
    data["field_type_tag"] = descriptor.field_type_tag.name
    data["declaration"] = f"{descriptor.canonical_type} {descriptor.formatted_name()}"
    data["is_array"] = descriptor.is_array()
    data["is_bitfield"] = descriptor.is_bitfield()
    data["is_templated"] = descriptor.is_templated()
    data["total_array_size"] = descriptor.total_array_size()

    print(json.dumps(data, indent=2))


def _node_label(node: TemplateNode) -> str:
    return f"[bold]{node.type_name}[/bold]" + (" [dim]*[/dim]" if node.is_pointer else "")


def _template_tree(node: TemplateNode, tree: Tree) -> Tree:
    for arg in node.arguments:
        if isinstance(arg, TemplateNode):
            _template_tree(arg, tree.add(_node_label(arg)))
        else:
            tree.add(arg)
    return tree


def _output_plain(descriptor: FieldDescriptor) -> None:
    """Output a field descriptor using rich text formatting."""
    console = Console()

    console.print("[bold cyan]Field[/bold cyan]")
    table = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    table.add_column("Label", style="dim")
    table.add_column("Value", style="white")

    table.add_row("Name", descriptor.raw_name)
    table.add_row("Type", descriptor.canonical_type or "[red]unresolved[/red]")
    if descriptor.field_type_tag != FieldType.FIELD_UNUSED:
        table.add_row("Field type", descriptor.field_type_tag.name)
    if descriptor.is_bitfield():
        table.add_row("Bitfield", f"{descriptor.bitfield_width} bits")
    if descriptor.is_array():
        table.add_row(
            "Array", f"{descriptor.formatted_array_sizes()} ({descriptor.total_array_size()} elements)"
        )
    table.add_row("Declaration", f"{descriptor.canonical_type} {descriptor.formatted_name()};")

    console.print(table)

    if descriptor.template_info is not None:
        node = descriptor.template_info
        console.print()
        console.print("[bold cyan]Template[/bold cyan]")
        console.print(_template_tree(node, Tree(_node_label(node))))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
