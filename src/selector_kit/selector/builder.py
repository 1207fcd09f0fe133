"""Fluent CSS selector builder and its factory surface.

Example::

    element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # => 'a[href$=".png"]:focus'

    combine(element("ul").class_("menu"), ">", element("li")).stringify()
    # => 'ul.menu > li'
"""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Protocol

from selector_kit.selector.errors import DuplicateFragment
from selector_kit.selector.kinds import FragmentKind
from selector_kit.selector.state import SelectorState

__all__ = [
    "Stringifiable",
    "SelectorBuilder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "css_selector_builder",
]

logger = logging.getLogger(__name__)


class Stringifiable(Protocol):
    """Anything that can be rendered into a selector string."""

    def stringify(self) -> str: ...


class SelectorBuilder:
    """Chainable facade over an owned :class:`SelectorState`.

    Every fragment method mutates the builder's state and returns the builder
    itself. Singleton kinds (element, id, pseudo-element) are checked before
    the state is touched; the flag is only set once the append succeeded.
    """

    def __init__(self, state: SelectorState | None = None) -> None:
        self._state = state if state is not None else SelectorState()

    @property
    def state(self) -> SelectorState:
        return self._state

    def _add(self, fragment: str, kind: FragmentKind) -> SelectorBuilder:
        if kind.is_singleton:
            if self._state.has_seen(kind):
                logger.debug("Duplicate %s fragment %r", kind.label, fragment)
                raise DuplicateFragment(kind)
            self._state.append(fragment, kind)
            self._state.mark_seen(kind)
        else:
            self._state.append(fragment, kind)
        return self

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._add(value, FragmentKind.ELEMENT)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(f"#{value}", FragmentKind.ID)

    def class_(self, value: str) -> SelectorBuilder:
        return self._add(f".{value}", FragmentKind.CLASS)

    def attr(self, value: str) -> SelectorBuilder:
        return self._add(f"[{value}]", FragmentKind.ATTRIBUTE)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(f":{value}", FragmentKind.PSEUDO_CLASS)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(f"::{value}", FragmentKind.PSEUDO_ELEMENT)

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector. The builder is empty afterwards."""
        return self._state.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder(fragments={self._state.fragments!r})"


# ``class`` is a keyword, so it can only be reached through getattr.
setattr(SelectorBuilder, "class", SelectorBuilder.class_)


# ---------------------------------------------------------------------------
# Factory surface
# ---------------------------------------------------------------------------


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    first: Stringifiable, combinator: str, second: Stringifiable
) -> SelectorBuilder:
    """Join two selectors with *combinator*, rendering (and resetting) both.

    The combinator is used verbatim with one space on each side, so the
    descendant combinator ``" "`` yields three consecutive spaces.
    """
    left = first.stringify()
    right = second.stringify()
    logger.debug("Combining %r %r %r", left, combinator, right)
    builder = SelectorBuilder()
    builder.state.append(f"{left} {combinator} {right}", FragmentKind.COMBINED)
    return builder


css_selector_builder = SimpleNamespace(
    element=element,
    id=id,
    class_=class_,
    attr=attr,
    pseudo_class=pseudo_class,
    pseudo_element=pseudo_element,
    pseudoClass=pseudo_class,
    pseudoElement=pseudo_element,
    combine=combine,
    **{"class": class_},
)
