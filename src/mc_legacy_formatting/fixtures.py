"""Turn formatted strings into span constructors for pasting into tests.

Given a string copied from a server (a MOTD, a player sample, etc.), this
prints the spans the parser produces as Python source, e.g.::

    [
        Styled("Welcome to ", Color.DARK_GRAY, NO_STYLE),
        Styled("Amazing Server", Color.GOLD, Style.BOLD),
    ]

The output is meant to be reviewed by hand before it becomes an expected
value in a test.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from mc_legacy_formatting.codes import Style
from mc_legacy_formatting.parser import DEFAULT_START_CHAR, SpanIter
from mc_legacy_formatting.spans import Plain, StrikethroughWhitespace, Styled

if TYPE_CHECKING:
    from mc_legacy_formatting.spans import Span

log = logging.getLogger(__name__)

_INDENT = "    "
_QUOTES = ('"', "'")

# Declaration order, which is also the order flags are written out in
_STYLE_ORDER = (
    Style.RANDOM,
    Style.BOLD,
    Style.STRIKETHROUGH,
    Style.UNDERLINED,
    Style.ITALIC,
)


def unquote(raw: str) -> str:
    """Strip one pair of matching surrounding quotes, if present.

    Quoting lets leading and trailing whitespace survive being pasted into
    a prompt.
    """
    if len(raw) >= 2 and raw[0] in _QUOTES and raw[-1] == raw[0]:  # noqa: PLR2004
        return raw[1:-1]
    return raw


def style_expression(style: Style) -> str:
    """Render a style set as a Python expression."""
    if not style:
        return "NO_STYLE"
    return " | ".join(f"Style.{flag.name}" for flag in _STYLE_ORDER if flag in style)


def span_to_fixture(span: Span) -> str:
    """Render a single span as a constructor call."""
    if isinstance(span, Plain):
        return f"Plain({_quote(span.text)})"
    if isinstance(span, Styled):
        name = "Styled"
    elif isinstance(span, StrikethroughWhitespace):
        name = "StrikethroughWhitespace"
    else:
        msg = f"Unknown span type: {type(span)}"
        raise TypeError(msg)
    text = _quote(span.text)
    return f"{name}({text}, Color.{span.color.name}, {style_expression(span.style)})"


def dump_fixture(text: str, *, start_char: str = DEFAULT_START_CHAR) -> str:
    """Parse text and render every span as a Python list literal."""
    lines = ["["]
    count = 0
    for span in SpanIter(text, start_char):
        lines.append(f"{_INDENT}{span_to_fixture(span)},")
        count += 1
    lines.append("]")
    log.debug("Dumped %d spans from %d characters", count, len(text))
    return "\n".join(lines)


def _quote(text: str) -> str:
    """Quote text as a double-quoted string literal."""
    return json.dumps(text, ensure_ascii=False)
