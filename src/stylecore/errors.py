"""Error types for stylecore."""

from __future__ import annotations


class StylecoreError(Exception):
    """Base error for all stylecore errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class SelectorParseError(StylecoreError):
    """Raised when a selector string cannot be parsed.

    The only unparseable input is one with no compound selector at all
    (empty or whitespace-only). Unsupported syntax is dropped, not rejected.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
