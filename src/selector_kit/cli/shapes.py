"""CLI commands for the rectangle object helpers."""

from __future__ import annotations

import sys

import click

from selector_kit.config import SelectorKitConfig
from selector_kit.objects import Rectangle, SchemaMismatch, from_json, to_json


def _format_number(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(_format_number(Rectangle(width, height).get_area()))


@click.command("to-json")
@click.argument("width", type=int)
@click.argument("height", type=int)
@click.pass_obj
def to_json_cmd(config: SelectorKitConfig | None, width: int, height: int) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON."""
    indent = config.json_indent if config else None
    click.echo(to_json(Rectangle(width, height), indent=indent))


@click.command("from-json")
@click.argument("json_text")
@click.pass_obj
def from_json_cmd(config: SelectorKitConfig | None, json_text: str) -> None:
    """Decode JSON_TEXT into a rectangle and print its area."""
    strict = config.strict_json if config else False
    try:
        rect = from_json(Rectangle, json_text, strict=strict)
        result = rect.get_area()
    except SchemaMismatch as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except (AttributeError, TypeError) as exc:
        click.echo(f"Error: not a rectangle: {exc}", err=True)
        sys.exit(1)
    click.echo(_format_number(result))
