"""Expression error types."""

from __future__ import annotations


class ExpressionError(Exception):
    """Raised when a builder expression cannot be parsed or evaluated.

    Carries the offending expression so callers can point at the position
    that failed (see :meth:`excerpt`).
    """

    def __init__(
        self,
        message: str,
        *,
        source: str = "",
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.line = line
        self.column = column

    def excerpt(self) -> str:
        """Return the failing source line with a caret under the column.

        Empty when the position is unknown or outside the source.
        """
        line, column = self.line, self.column
        if not line or not column or line < 1 or column < 1:
            return ""
        lines = self.source.splitlines()
        if line > len(lines):
            return ""
        return f"{lines[line - 1]}\n{' ' * (column - 1)}^"
