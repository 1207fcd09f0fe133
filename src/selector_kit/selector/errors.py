"""Selector builder error types."""

from __future__ import annotations

from selector_kit.selector.kinds import CANONICAL_ORDER, FragmentKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    + ", ".join(kind.label for kind in CANONICAL_ORDER)
)

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for invalid selector construction sequences."""

    def __init__(self, message: str, *, kind: FragmentKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class OrderViolation(SelectorError):
    """Raised when a fragment is appended after a higher-ranked one."""

    def __init__(
        self, kind: FragmentKind, previous_rank: int | None = None
    ) -> None:
        super().__init__(ORDER_MESSAGE, kind=kind)
        self.previous_rank = previous_rank


class DuplicateFragment(SelectorError):
    """Raised when element, id or pseudo-element is added a second time."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind=kind)
