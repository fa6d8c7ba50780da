"""Default formatting rules for Ferrum."""

from __future__ import annotations

from .core import FormattingOptions, IndentStyle


class DefaultFormattingRules:
    """Preset option sets."""

    @classmethod
    def standard(cls) -> FormattingOptions:
        """Four spaces per level."""
        return FormattingOptions.from_style(IndentStyle.SPACES, 4)

    @classmethod
    def compact(cls) -> FormattingOptions:
        """Two spaces per level, matching hand-written Ferrum files."""
        return FormattingOptions.from_style(IndentStyle.SPACES, 2)

    @classmethod
    def tabs(cls) -> FormattingOptions:
        return FormattingOptions.from_style(IndentStyle.TABS)

    @classmethod
    def normalized(cls) -> FormattingOptions:
        """Standard layout that also re-prints component argument expressions.

        Spacing and parentheses inside values change; number literals are
        kept as written.
        """
        return FormattingOptions.from_style(IndentStyle.SPACES, 4, normalize_expressions=True)
