from selector_kit.selector.builder import (
    SelectorBuilder,
    Stringifiable,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from selector_kit.selector.errors import DuplicateFragment, OrderViolation, SelectorError
from selector_kit.selector.kinds import CANONICAL_ORDER, SINGLETON_KINDS, FragmentKind
from selector_kit.selector.state import SelectorState

__all__ = [
    "SelectorBuilder",
    "SelectorState",
    "Stringifiable",
    "FragmentKind",
    "CANONICAL_ORDER",
    "SINGLETON_KINDS",
    "SelectorError",
    "OrderViolation",
    "DuplicateFragment",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "css_selector_builder",
]
