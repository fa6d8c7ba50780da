"""Exception hierarchy for the Ferrum front end.

Every error knows where it happened (``path``, ``line``, ``column``, any of
which may be missing) and can render itself as a short diagnostic::

    error[FRR001]: Unbalanced parentheses in component call: Button(x: 1
      at counter.frr:2
      | Button(x: 1
      help: Put children on their own indented lines
"""

from __future__ import annotations

from typing import List, Optional


class FerrumError(Exception):
    """Base class for all errors surfaced by the Ferrum front end."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.line = line
        self.column = column
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    @property
    def position(self) -> Optional[str]:
        """``path:line:column`` with missing parts left out, or ``None``."""
        if self.line is None:
            return self.path
        where = f"{self.path or '<source>'}:{self.line}"
        if self.column is not None:
            where += f":{self.column}"
        return where

    def _excerpt(self) -> List[str]:
        return []

    def format(self) -> str:
        heading = f"error[{self.code}]" if self.code else "error"
        lines = [f"{heading}: {self.message}"]
        if self.position:
            lines.append(f"  at {self.position}")
        lines.extend(f"  | {text}" for text in self._excerpt())
        if self.hint:
            lines.append(f"  help: {self.hint}")
        return "\n".join(lines)


class FerrumSyntaxError(FerrumError):
    """Raised when the parser encounters invalid syntax.

    ``source_line`` holds the offending raw line text.
    """

    def __init__(self, message: str, *, source_line: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.source_line = source_line

    def _excerpt(self) -> List[str]:
        if not self.source_line or not self.source_line.strip():
            return []
        text = self.source_line.strip()
        if self.column is None:
            return [text]
        # columns are 1-based and count from the untrimmed line
        offset = self.column - 1 - (len(self.source_line) - len(self.source_line.lstrip()))
        return [text, " " * max(offset, 0) + "^"]


class ExpressionError(FerrumSyntaxError):
    """Raised when a value cannot be read as an expression."""


class FormatError(FerrumError):
    """Raised when a document cannot be formatted."""


class ConfigError(FerrumError):
    """Raised when ``ferrum.toml`` cannot be loaded."""


__all__ = [
    "FerrumError",
    "FerrumSyntaxError",
    "ExpressionError",
    "FormatError",
    "ConfigError",
]
