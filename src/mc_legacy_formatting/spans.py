"""Span types produced by the legacy formatting parser.

A span is a contiguous slice of the source string that shares one resolved
color and style set. Every span records the character offset of its slice in
the source (``start``/``end``), so consumers can map a span back onto the
input. Offsets do not take part in equality, which keeps hand-written expected
spans in tests short.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mc_legacy_formatting.codes import DEFAULT_COLOR, NO_STYLE, Color, Style


@dataclass(frozen=True)
class Plain:
    """Text with no color or style codes applied.

    Renderers should give it the default style: white, no styles.
    """

    text: str
    start: int = field(default=0, kw_only=True, compare=False)

    @property
    def color(self) -> Color:
        return DEFAULT_COLOR

    @property
    def style(self) -> Style:
        return NO_STYLE

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def source_text(self) -> str:
        """The slice of the source string this span covers."""
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Styled:
    """Text with a resolved color and style set."""

    text: str
    color: Color
    style: Style
    start: int = field(default=0, kw_only=True, compare=False)

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def source_text(self) -> str:
        """The slice of the source string this span covers."""
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class StrikethroughWhitespace:
    """An unbroken run of whitespace under the STRIKETHROUGH style.

    The vanilla client draws a solid line across such a run instead of
    striking through individual characters. Renderers should draw a line
    ``num_chars`` wide (or ``num_chars`` dashes where a line is not possible).
    """

    text: str
    color: Color
    style: Style
    start: int = field(default=0, kw_only=True, compare=False)

    @property
    def num_chars(self) -> int:
        """Width of the line, in characters."""
        return len(self.text)

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def source_text(self) -> str:
        """The slice of the source string this span covers."""
        return self.text

    def __str__(self) -> str:
        return "-" * self.num_chars


Span = Plain | Styled | StrikethroughWhitespace
