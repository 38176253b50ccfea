"""Strip Minecraft formatting codes or render spans as plain text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mc_legacy_formatting.parser import DEFAULT_START_CHAR, SpanIter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mc_legacy_formatting.spans import Span


def spans_to_text(spans: Iterable[Span], *, collapse_strikethrough: bool = True) -> str:
    """Join spans back into their visible text.

    Args:
        spans: Spans produced by a SpanIter.
        collapse_strikethrough: If True, strikethrough whitespace runs are
            drawn as dashes, approximating the solid line the vanilla client
            renders. If False, the original whitespace is kept.

    Returns:
        The concatenated text of all spans.
    """
    if collapse_strikethrough:
        return "".join(str(span) for span in spans)
    return "".join(span.source_text for span in spans)


def strip_formatting(text: str, *, start_char: str = DEFAULT_START_CHAR) -> str:
    """Remove all valid formatting codes from text.

    Start characters that are not followed by a valid code are kept, the same
    way the vanilla client displays them.

    Args:
        text: Raw text containing legacy formatting codes.
        start_char: The character that introduces a format code.

    Returns:
        Clean text with all formatting codes removed.
    """
    return format_plain(text, start_char=start_char, collapse_strikethrough=False)


def format_plain(
    text: str,
    *,
    start_char: str = DEFAULT_START_CHAR,
    collapse_strikethrough: bool = True,
) -> str:
    """Format text for display somewhere that cannot show colors.

    Args:
        text: Raw text containing legacy formatting codes.
        start_char: The character that introduces a format code.
        collapse_strikethrough: If True, draw strikethrough whitespace as
            dashes. If False, this is the same as strip_formatting.

    Returns:
        Text ready for printing.
    """
    return spans_to_text(
        SpanIter(text, start_char),
        collapse_strikethrough=collapse_strikethrough,
    )
