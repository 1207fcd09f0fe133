"""selector_kit: fluent CSS selector builder and small object helpers."""

from selector_kit.config import ConfigError, SelectorKitConfig
from selector_kit.expression import ExpressionError, build_selector, evaluate
from selector_kit.objects import Rectangle, SchemaMismatch, from_json, to_json
from selector_kit.selector import (
    DuplicateFragment,
    FragmentKind,
    OrderViolation,
    SelectorBuilder,
    SelectorError,
    SelectorState,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # selector
    "SelectorBuilder",
    "SelectorState",
    "FragmentKind",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "css_selector_builder",
    # errors
    "SelectorError",
    "OrderViolation",
    "DuplicateFragment",
    # objects
    "Rectangle",
    "SchemaMismatch",
    "to_json",
    "from_json",
    # expression
    "ExpressionError",
    "evaluate",
    "build_selector",
    # config
    "SelectorKitConfig",
    "ConfigError",
]
