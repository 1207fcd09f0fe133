"""Tests for the builder expression evaluator."""

import pytest

from selector_kit.expression import ExpressionError, build_selector, evaluate
from selector_kit.selector import DuplicateFragment, OrderViolation, SelectorBuilder


class TestChains:
    def test_single_call(self):
        assert build_selector('element("div")') == "div"

    def test_chain(self):
        source = """element("a").attr('href$=".png"').pseudoClass("focus")"""
        assert build_selector(source) == 'a[href$=".png"]:focus'

    def test_class_names(self):
        assert build_selector('id("main").class("container").class_("editable")') == (
            "#main.container.editable"
        )

    def test_snake_case_names(self):
        assert build_selector('pseudo_class("hover").pseudo_element("after")') == (
            ":hover::after"
        )

    def test_escaped_quotes(self):
        assert build_selector(r'attr("title=\"x\"")') == '[title="x"]'

    def test_whitespace_ignored(self):
        assert build_selector('  element( "p" ) . class( "lead" )  ') == "p.lead"

    def test_evaluate_returns_builder(self):
        builder = evaluate('element("p")')
        assert isinstance(builder, SelectorBuilder)
        assert builder.stringify() == "p"


class TestCombine:
    def test_simple(self):
        assert build_selector('combine(element("ul"), ">", element("li"))') == "ul > li"

    def test_nested(self):
        source = """
        combine(
            element("div").id("main").class("container").class("draggable"),
            "+",
            combine(
                element("table").id("data"),
                "~",
                combine(
                    element("tr").pseudoClass("nth-of-type(even)"),
                    " ",
                    element("td").pseudoClass("nth-of-type(even)")
                )
            )
        )
        """
        assert build_selector(source) == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )


class TestErrors:
    def test_unknown_method(self):
        with pytest.raises(ExpressionError) as exc_info:
            evaluate('element("a").colour("red")')
        assert "colour" in str(exc_info.value)
        assert exc_info.value.line == 1

    def test_syntax_error(self):
        with pytest.raises(ExpressionError) as exc_info:
            evaluate('element("a"')
        assert exc_info.value.__cause__ is not None

    def test_unterminated_string(self):
        with pytest.raises(ExpressionError):
            evaluate('element("a)')

    def test_empty_source(self):
        with pytest.raises(ExpressionError):
            evaluate("")

    def test_order_violation_propagates(self):
        with pytest.raises(OrderViolation):
            evaluate('class("y").id("x")')

    def test_duplicate_propagates(self):
        with pytest.raises(DuplicateFragment):
            evaluate('element("a").element("b")')


class TestErrorExcerpt:
    def test_unknown_method_carries_source(self):
        source = 'element("a").colour("red")'
        with pytest.raises(ExpressionError) as exc_info:
            evaluate(source)
        assert exc_info.value.source == source
        assert exc_info.value.column == 14
        assert exc_info.value.excerpt() == source + "\n" + " " * 13 + "^"

    def test_syntax_error_carries_source(self):
        with pytest.raises(ExpressionError) as exc_info:
            evaluate("element(a)")
        assert exc_info.value.source == "element(a)"
        assert exc_info.value.excerpt().endswith("^")

    def test_excerpt_on_later_line(self):
        error = ExpressionError("bad", source='element("a")\n  .bogus("b")', line=2, column=4)
        assert error.excerpt() == '  .bogus("b")\n   ^'

    def test_excerpt_without_position(self):
        assert ExpressionError("bad", source="x").excerpt() == ""

    def test_excerpt_position_outside_source(self):
        assert ExpressionError("bad", source="x", line=3, column=1).excerpt() == ""
