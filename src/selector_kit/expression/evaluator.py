"""Lark Transformer that evaluates a builder expression into a SelectorBuilder."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from selector_kit.expression.errors import ExpressionError
from selector_kit.selector.builder import SelectorBuilder, combine

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

logger = logging.getLogger(__name__)

# Expression method name -> SelectorBuilder attribute.
_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "class_": "class_",
    "attr": "attr",
    "pseudo_class": "pseudo_class",
    "pseudoClass": "pseudo_class",
    "pseudo_element": "pseudo_element",
    "pseudoElement": "pseudo_element",
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _unquote(token: Token) -> str:
    return _ESCAPE_RE.sub(r"\1", str(token)[1:-1])


class BuilderTransformer(Transformer):  # type: ignore[type-arg]
    """Evaluate calls bottom-up; each ``chain`` gets a fresh builder."""

    def __init__(self, source: str = "") -> None:
        super().__init__()
        self.source = source

    def call(self, items: list[Token]) -> tuple[Token, str]:
        return (items[0], _unquote(items[1]))

    def chain(self, items: list[tuple[Token, str]]) -> SelectorBuilder:
        builder = SelectorBuilder()
        for name, value in items:
            method = _METHODS.get(str(name))
            if method is None:
                raise ExpressionError(
                    f"Unknown selector method: {name}",
                    source=self.source,
                    line=name.line,
                    column=name.column,
                )
            getattr(builder, method)(value)
        return builder

    def combine(self, items: list[object]) -> SelectorBuilder:
        first, combinator, second = items
        return combine(first, _unquote(combinator), second)  # type: ignore[arg-type]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def evaluate(source: str) -> SelectorBuilder:
    """Parse and evaluate a builder expression.

    Syntax problems raise ExpressionError; selector errors such as
    OrderViolation propagate unchanged.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ExpressionError(
            str(e), source=source, line=line, column=column
        ) from e
    try:
        builder = BuilderTransformer(source).transform(tree)
    except VisitError as e:
        raise e.orig_exc from None
    logger.debug("Evaluated expression %r", source)
    return builder


def build_selector(source: str) -> str:
    """Evaluate *source* and return the rendered selector string."""
    return evaluate(source).stringify()
