"""CLI command: selector-kit build -- evaluate a builder expression."""

from __future__ import annotations

import sys

import click

from selector_kit.expression import ExpressionError, evaluate
from selector_kit.selector import SelectorError


@click.command()
@click.argument("expression")
def build(expression: str) -> None:
    """Evaluate a builder EXPRESSION and print the selector.

    \b
    Examples:
      selector-kit build 'element("a").attr("href").pseudoClass("focus")'
      selector-kit build 'combine(element("ul"), ">", element("li"))'
    """
    try:
        selector = evaluate(expression).stringify()
    except ExpressionError as exc:
        location = ""
        if exc.line and exc.line > 0:
            location = f" (line {exc.line}, column {exc.column})"
        click.echo(f"Error: invalid expression{location}: {exc}", err=True)
        excerpt = exc.excerpt()
        if excerpt:
            click.echo(excerpt, err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector)
