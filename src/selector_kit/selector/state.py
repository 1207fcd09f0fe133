"""SelectorState: ordered fragment accumulator for one compound selector."""

from __future__ import annotations

import logging

from selector_kit.selector.errors import OrderViolation
from selector_kit.selector.kinds import SINGLETON_KINDS, FragmentKind

logger = logging.getLogger(__name__)


class SelectorState:
    """Accumulates rendered fragments while enforcing the rank ordering.

    The rank sequence is kept non-decreasing: a fragment whose kind ranks
    strictly below the last appended one is rejected. Singleton flags are
    stored here but checked by the caller, so :meth:`append` only ever
    enforces ordering.

    :meth:`render` resets the state after producing the string, so the same
    instance can be reused for a new selector.
    """

    def __init__(self) -> None:
        self.fragments: list[str] = []
        self.ranks: list[int] = []
        self._seen: dict[FragmentKind, bool] = dict.fromkeys(SINGLETON_KINDS, False)

    # --- ordering -------------------------------------------------------------

    @property
    def last_rank(self) -> int | None:
        return self.ranks[-1] if self.ranks else None

    def append(self, fragment: str, kind: FragmentKind) -> SelectorState:
        """Append *fragment* of *kind*, raising OrderViolation if out of order."""
        previous = self.last_rank
        if previous is not None and kind.rank < previous:
            logger.debug(
                "Rejected %s fragment %r after rank %d", kind.label, fragment, previous
            )
            raise OrderViolation(kind, previous)
        self.fragments.append(fragment)
        self.ranks.append(kind.rank)
        logger.debug("Appended %s fragment %r", kind.label, fragment)
        return self

    def render(self) -> str:
        """Join fragments in insertion order, then reset the state."""
        result = "".join(self.fragments)
        self.reset()
        logger.debug("Rendered selector %r", result)
        return result

    def reset(self) -> None:
        self.fragments = []
        self.ranks = []
        for kind in self._seen:
            self._seen[kind] = False

    # --- singleton flags ------------------------------------------------------

    def has_seen(self, kind: FragmentKind) -> bool:
        return self._seen.get(kind, False)

    def mark_seen(self, kind: FragmentKind) -> None:
        if kind not in self._seen:
            raise ValueError(f"{kind.label} is not a singleton fragment kind")
        self._seen[kind] = True

    @property
    def seen_element(self) -> bool:
        return self._seen[FragmentKind.ELEMENT]

    @property
    def seen_id(self) -> bool:
        return self._seen[FragmentKind.ID]

    @property
    def seen_pseudo_element(self) -> bool:
        return self._seen[FragmentKind.PSEUDO_ELEMENT]

    def __len__(self) -> int:
        return len(self.fragments)

    def __repr__(self) -> str:
        return f"SelectorState(fragments={self.fragments!r})"
