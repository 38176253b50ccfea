"""Tests for the fixture dumper."""

from textwrap import dedent

import pytest

from mc_legacy_formatting.codes import NO_STYLE, Color, Style
from mc_legacy_formatting.fixtures import (
    dump_fixture,
    span_to_fixture,
    style_expression,
    unquote,
)
from mc_legacy_formatting.parser import SpanIter
from mc_legacy_formatting.spans import Plain, StrikethroughWhitespace, Styled


class TestUnquote:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ('"  padded  "', "  padded  "),
            ("'single'", "single"),
            ("bare", "bare"),
            ('"mismatched\'', '"mismatched\''),
            ('"', '"'),
            ('""', ""),
        ],
    )
    def test_unquote(self, raw, expected):
        assert unquote(raw) == expected


class TestStyleExpression:
    def test_empty(self):
        assert style_expression(NO_STYLE) == "NO_STYLE"

    def test_single(self):
        assert style_expression(Style.ITALIC) == "Style.ITALIC"

    def test_declaration_order(self):
        style = Style.ITALIC | Style.RANDOM | Style.STRIKETHROUGH
        assert style_expression(style) == (
            "Style.RANDOM | Style.STRIKETHROUGH | Style.ITALIC"
        )


class TestSpanToFixture:
    def test_plain(self):
        assert span_to_fixture(Plain("hi there")) == 'Plain("hi there")'

    def test_styled(self):
        span = Styled("Amazing", Color.GOLD, Style.BOLD | Style.UNDERLINED)
        assert span_to_fixture(span) == (
            'Styled("Amazing", Color.GOLD, Style.BOLD | Style.UNDERLINED)'
        )

    def test_strikethrough_whitespace(self):
        span = StrikethroughWhitespace("   ", Color.DARK_PURPLE, Style.STRIKETHROUGH)
        assert span_to_fixture(span) == (
            'StrikethroughWhitespace("   ", Color.DARK_PURPLE, Style.STRIKETHROUGH)'
        )

    def test_escapes(self):
        span = Styled('say "hi"\n', Color.RED, NO_STYLE)
        assert span_to_fixture(span) == r'Styled("say \"hi\"\n", Color.RED, NO_STYLE)'

    def test_keeps_unicode(self):
        assert span_to_fixture(Plain("» §")) == 'Plain("» §")'

    def test_unknown_type(self):
        with pytest.raises(TypeError, match="Unknown span type"):
            span_to_fixture("not a span")


class TestDumpFixture:
    def test_motd(self):
        result = dump_fixture("§8Welcome to §6§lAmazing Server§r!")
        assert result == dedent("""\
            [
                Styled("Welcome to ", Color.DARK_GRAY, NO_STYLE),
                Styled("Amazing Server", Color.GOLD, Style.BOLD),
                Plain("!"),
            ]""")

    def test_empty(self):
        assert dump_fixture("") == "[\n]"

    def test_custom_start_char(self):
        result = dump_fixture("&m  &r§4", start_char="&")
        assert result == dedent("""\
            [
                StrikethroughWhitespace("  ", Color.WHITE, Style.STRIKETHROUGH),
                Plain("§4"),
            ]""")

    def test_output_evaluates_to_spans(self):
        text = "§5§m   §6>§lbold§r plain"
        namespace = {
            "Plain": Plain,
            "Styled": Styled,
            "StrikethroughWhitespace": StrikethroughWhitespace,
            "Color": Color,
            "Style": Style,
            "NO_STYLE": NO_STYLE,
        }

        rebuilt = eval(dump_fixture(text), namespace)  # noqa: S307
        assert rebuilt == list(SpanIter(text))
