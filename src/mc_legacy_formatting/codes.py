"""Color and style code tables for Minecraft legacy formatting."""

from __future__ import annotations

from enum import Enum, Flag, auto


class Color(Enum):
    """The 16 legacy text colors.

    Each member carries its format code plus the foreground and background
    (shadow) RGB values used by the vanilla client.
    """

    BLACK = ("0", (0, 0, 0), (0, 0, 0))
    DARK_BLUE = ("1", (0, 0, 170), (0, 0, 42))
    DARK_GREEN = ("2", (0, 170, 0), (0, 42, 0))
    DARK_AQUA = ("3", (0, 170, 170), (0, 42, 42))
    DARK_RED = ("4", (170, 0, 0), (42, 0, 0))
    DARK_PURPLE = ("5", (170, 0, 170), (42, 0, 42))
    GOLD = ("6", (255, 170, 0), (42, 42, 0))
    GRAY = ("7", (170, 170, 170), (42, 42, 42))
    DARK_GRAY = ("8", (85, 85, 85), (21, 21, 21))
    BLUE = ("9", (85, 85, 255), (21, 21, 63))
    GREEN = ("a", (85, 255, 85), (21, 63, 21))
    AQUA = ("b", (85, 255, 255), (21, 63, 63))
    RED = ("c", (255, 85, 85), (63, 21, 21))
    LIGHT_PURPLE = ("d", (255, 85, 255), (63, 21, 63))
    YELLOW = ("e", (255, 255, 85), (63, 63, 21))
    WHITE = ("f", (255, 255, 255), (63, 63, 63))

    def __init__(
        self,
        code: str,
        foreground: tuple[int, int, int],
        background: tuple[int, int, int],
    ) -> None:
        self.code = code
        self.foreground_rgb = foreground
        self.background_rgb = background

    @property
    def foreground_hex(self) -> str:
        """Foreground color as a ``#rrggbb`` string."""
        return _to_hex(self.foreground_rgb)

    @property
    def background_hex(self) -> str:
        """Background (shadow) color as a ``#rrggbb`` string."""
        return _to_hex(self.background_rgb)


class Style(Flag):
    """Text styles that accumulate until the next color or reset code.

    Reset is not a member: the parser consumes it and it never appears in a
    span's style set.
    """

    RANDOM = auto()
    BOLD = auto()
    STRIKETHROUGH = auto()
    UNDERLINED = auto()
    ITALIC = auto()


DEFAULT_COLOR = Color.WHITE
NO_STYLE = Style(0)

# The vanilla client accepts upper and lowercase codes interchangeably.
# Only ASCII case counts: str.lower() would also fold e.g. KELVIN SIGN to "k".
_COLORS_BY_CODE: dict[str, Color] = {}
for _color in Color:
    _COLORS_BY_CODE[_color.code] = _color
    _COLORS_BY_CODE[_color.code.upper()] = _color

_STYLES_BY_CODE: dict[str, Style] = {}
for _code, _style in (
    ("k", Style.RANDOM),
    ("l", Style.BOLD),
    ("m", Style.STRIKETHROUGH),
    ("n", Style.UNDERLINED),
    ("o", Style.ITALIC),
):
    _STYLES_BY_CODE[_code] = _style
    _STYLES_BY_CODE[_code.upper()] = _style

_RESET_CODES = frozenset("rR")


def color_from_char(c: str) -> Color | None:
    """Map a single format code character to a Color, or None."""
    return _COLORS_BY_CODE.get(c)


def style_from_char(c: str) -> Style | None:
    """Map a single format code character to a Style, or None."""
    return _STYLES_BY_CODE.get(c)


def is_reset_char(c: str) -> bool:
    """Whether c is the reset code (``r`` or ``R``)."""
    return c in _RESET_CODES


def is_format_code(c: str) -> bool:
    """Whether c is any valid color, style, or reset code."""
    return (
        color_from_char(c) is not None
        or style_from_char(c) is not None
        or is_reset_char(c)
    )


def _to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"
