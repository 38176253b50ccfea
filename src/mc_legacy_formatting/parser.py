"""Iterator that splits legacy-formatted text into spans."""

from __future__ import annotations

import logging
from enum import Enum, auto

from mc_legacy_formatting.codes import (
    DEFAULT_COLOR,
    NO_STYLE,
    Style,
    color_from_char,
    is_format_code,
    is_reset_char,
    style_from_char,
)
from mc_legacy_formatting.errors import MarkerLockedError
from mc_legacy_formatting.spans import Plain, Span, StrikethroughWhitespace, Styled

log = logging.getLogger(__name__)

# The vanilla client uses the section sign; community tooling often uses "&"
DEFAULT_START_CHAR = "§"

# str.isspace() would also accept Unicode spaces, which the client draws as glyphs
_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")


class _State(Enum):
    """Parser state within a single call to ``__next__``."""

    # Gathering styles: only format codes have been seen since the last span
    EXPECTING_START_CHAR = auto()
    EXPECTING_FMT_CODE = auto()
    # Gathering text: a run of literal text is pending, and the next valid
    # format code ends it
    WAITING_FOR_START_CHAR = auto()
    EXPECTING_END_CHAR = auto()


class SpanIter:
    """Lazily yield spans from a string containing legacy format codes.

    The iterator makes a single forward pass over the input and cannot be
    restarted; create a new one to parse the same string again. Each instance
    owns its own color/style state, so separate instances are safe to use from
    separate threads.

    Example::

        >>> spans = SpanIter("&4dark red &oand italic").with_start_char("&")
        >>> [(s.text, s.color.name, s.style.name) for s in spans]
        [('dark red ', 'DARK_RED', None), ('and italic', 'DARK_RED', 'ITALIC')]
    """

    def __init__(self, text: str, start_char: str = DEFAULT_START_CHAR) -> None:
        _check_start_char(start_char)
        self._text = text
        self._start_char = start_char
        self._pos = 0
        self._color = DEFAULT_COLOR
        self._style = NO_STYLE
        self._started = False
        self._finished = False

    @property
    def start_char(self) -> str:
        """The character that introduces a format code."""
        return self._start_char

    def with_start_char(self, c: str) -> SpanIter:
        """Set the start character and return self, for chaining."""
        self.set_start_char(c)
        return self

    def set_start_char(self, c: str) -> None:
        """Set the start character used while parsing.

        Raises:
            MarkerLockedError: If iteration has already begun.
            ValueError: If c is not exactly one character.
        """
        if self._started:
            msg = "Cannot change the start character after iteration has begun"
            raise MarkerLockedError(msg)
        _check_start_char(c)
        self._start_char = c

    def __iter__(self) -> SpanIter:
        return self

    def __next__(self) -> Span:
        if self._finished:
            raise StopIteration
        self._started = True

        text = self._text
        start_char = self._start_char
        state = _State.EXPECTING_START_CHAR
        span_start: int | None = None
        # Position of the start char that may end the pending text run
        span_end = 0

        while self._pos < len(text):
            idx = self._pos
            c = text[idx]
            self._pos += 1

            if state is _State.EXPECTING_START_CHAR:
                span_start = idx
                if c == start_char:
                    state = _State.EXPECTING_FMT_CODE
                else:
                    state = _State.WAITING_FOR_START_CHAR

            elif state is _State.EXPECTING_FMT_CODE:
                if self._apply_code(c):
                    span_start = None
                    state = _State.EXPECTING_START_CHAR
                else:
                    # Not a code: the start char is literal text
                    state = _State.WAITING_FOR_START_CHAR

            elif state is _State.WAITING_FOR_START_CHAR:
                if c == start_char:
                    span_end = idx
                    state = _State.EXPECTING_END_CHAR

            elif is_format_code(c):
                # The span ends before the start char and keeps the state
                # from before this code
                span = self._make_span(span_start, span_end)
                self._apply_code(c)
                return span

            else:
                state = _State.WAITING_FOR_START_CHAR

        self._finished = True
        log.debug("Span iteration finished after %d characters", len(text))
        if span_start is None:
            raise StopIteration
        return self._make_span(span_start, len(text))

    def _apply_code(self, c: str) -> bool:
        """Apply a format code to the current state.

        Returns False (leaving the state untouched) if c is not a valid code.
        """
        color = color_from_char(c)
        if color is not None:
            # Selecting a color always clears the current styles
            self._color = color
            self._style = NO_STYLE
            return True

        style = style_from_char(c)
        if style is not None:
            self._style |= style
            return True

        if is_reset_char(c):
            self._color = DEFAULT_COLOR
            self._style = NO_STYLE
            return True

        return False

    def _make_span(self, start: int, end: int) -> Span:
        """Build a span covering text[start:end] from the current state."""
        text = self._text[start:end]
        if self._color is DEFAULT_COLOR and not self._style:
            return Plain(text, start=start)

        # The vanilla client renders whitespace with STRIKETHROUGH as a
        # solid line
        if Style.STRIKETHROUGH in self._style and all(
            c in _ASCII_WHITESPACE for c in text
        ):
            return StrikethroughWhitespace(text, self._color, self._style, start=start)

        return Styled(text, self._color, self._style, start=start)


def span_iter(text: str, start_char: str = DEFAULT_START_CHAR) -> SpanIter:
    """Return a SpanIter over text."""
    return SpanIter(text, start_char)


def _check_start_char(c: str) -> None:
    if len(c) != 1:
        msg = f"Start character must be a single character, got {c!r}"
        raise ValueError(msg)
