"""Colors, styles with inheritance, and the chart color palettes."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Optional

from chartkit.geometry import Box


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA color."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def with_alpha(self, alpha: int) -> Color:
        return replace(self, a=alpha)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``rrggbb`` or ``rgb``, optionally prefixed with ``#``."""
        digits = text.removeprefix("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            raise ValueError(f"invalid hex color: {text!r}")
        try:
            r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        except ValueError as exc:
            raise ValueError(f"invalid hex color: {text!r}") from exc
        return cls(r, g, b, 255)

    def __str__(self) -> str:
        return f"rgba({self.r},{self.g},{self.b},{self.a / 255.0:.1f})"


COLOR_WHITE = Color(255, 255, 255, 255)
COLOR_BLUE = Color(52, 152, 219, 255)
COLOR_CYAN = Color(26, 188, 156, 255)
COLOR_GREEN = Color(46, 204, 113, 255)
COLOR_RED = Color(231, 76, 60, 255)
COLOR_ORANGE = Color(243, 156, 18, 255)
COLOR_YELLOW = Color(241, 196, 15, 255)
COLOR_BLACK = Color(44, 62, 80, 255)
COLOR_LIGHT_GRAY = Color(236, 240, 241, 255)

COLOR_ALTERNATE_BLUE = Color(116, 185, 255, 255)
COLOR_ALTERNATE_GREEN = Color(85, 239, 196, 255)
COLOR_ALTERNATE_GRAY = Color(149, 165, 166, 255)
COLOR_ALTERNATE_YELLOW = Color(253, 203, 110, 255)
COLOR_ALTERNATE_LIGHT_GRAY = Color(223, 228, 234, 255)

COLOR_TRANSPARENT = Color(1, 1, 1, 0)

DEFAULT_BACKGROUND_COLOR = COLOR_WHITE
DEFAULT_BACKGROUND_STROKE_COLOR = COLOR_WHITE
DEFAULT_CANVAS_COLOR = COLOR_WHITE
DEFAULT_CANVAS_STROKE_COLOR = COLOR_WHITE
DEFAULT_TEXT_COLOR = COLOR_BLACK
DEFAULT_AXIS_COLOR = COLOR_BLACK
DEFAULT_STROKE_COLOR = COLOR_LIGHT_GRAY
DEFAULT_FILL_COLOR = COLOR_BLUE
DEFAULT_ANNOTATION_FILL_COLOR = COLOR_WHITE
DEFAULT_GRID_LINE_COLOR = COLOR_LIGHT_GRAY

DEFAULT_COLORS = (COLOR_BLUE, COLOR_GREEN, COLOR_RED, COLOR_CYAN, COLOR_ORANGE)

DEFAULT_ALTERNATE_COLORS = (
    COLOR_ALTERNATE_BLUE,
    COLOR_ALTERNATE_GREEN,
    COLOR_ALTERNATE_GRAY,
    COLOR_ALTERNATE_YELLOW,
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_CYAN,
    COLOR_ORANGE,
)


def get_default_color(index: int) -> Color:
    """Return a default series color; the index wraps around."""
    return DEFAULT_COLORS[index % len(DEFAULT_COLORS)]


def get_alternate_color(index: int) -> Color:
    """Return an alternate series color; the index wraps around."""
    return DEFAULT_ALTERNATE_COLORS[index % len(DEFAULT_ALTERNATE_COLORS)]


@dataclass
class Style:
    """Drawing attributes; ``None`` means unset and is filled by inheritance."""

    hidden: bool = False
    padding: Box = field(default_factory=Box)

    stroke_width: Optional[float] = None
    stroke_color: Optional[Color] = None
    stroke_dash_array: Optional[tuple[float, ...]] = None

    dot_color: Optional[Color] = None
    dot_width: Optional[float] = None
    dot_width_provider: Optional[Callable[..., float]] = None
    dot_color_provider: Optional[Callable[..., Color]] = None

    fill_color: Optional[Color] = None

    font: Any = None
    font_size: Optional[float] = None
    font_color: Optional[Color] = None

    text_horizontal_align: Any = None
    text_vertical_align: Any = None
    text_wrap: Any = None
    text_line_spacing: Optional[int] = None
    text_rotation_degrees: Optional[float] = None

    def inherit_from(self, defaults: Style) -> Style:
        """Return a copy with every unset attribute taken from ``defaults``."""
        values = {}
        for item in fields(self):
            own = getattr(self, item.name)
            if item.name == "hidden":
                values[item.name] = own
            elif item.name == "padding":
                values[item.name] = defaults.padding if own.is_zero() else own
            else:
                values[item.name] = getattr(defaults, item.name) if own is None else own
        return Style(**values)


def hidden() -> Style:
    """Return a style that hides its element."""
    return Style(hidden=True)


def shown() -> Style:
    """Return a style that shows its element."""
    return Style(hidden=False)


@dataclass(frozen=True)
class ColorPalette:
    """A set of chart colors with a cycling list of series colors."""

    series_colors: tuple[Color, ...] = DEFAULT_COLORS

    def background_color(self) -> Color:
        return DEFAULT_BACKGROUND_COLOR

    def background_stroke_color(self) -> Color:
        return DEFAULT_BACKGROUND_STROKE_COLOR

    def canvas_color(self) -> Color:
        return DEFAULT_CANVAS_COLOR

    def canvas_stroke_color(self) -> Color:
        return DEFAULT_CANVAS_STROKE_COLOR

    def axis_stroke_color(self) -> Color:
        return DEFAULT_AXIS_COLOR

    def text_color(self) -> Color:
        return DEFAULT_TEXT_COLOR

    def get_series_color(self, index: int) -> Color:
        return self.series_colors[index % len(self.series_colors)]


@dataclass(frozen=True)
class DefaultColorPalette(ColorPalette):
    """The default palette."""

    def get_series_color(self, index: int) -> Color:
        return get_default_color(index)


@dataclass(frozen=True)
class AlternateColorPalette(ColorPalette):
    """The alternate palette, with softer series colors first."""

    series_colors: tuple[Color, ...] = DEFAULT_ALTERNATE_COLORS

    def get_series_color(self, index: int) -> Color:
        return get_alternate_color(index)


DEFAULT_COLOR_PALETTE = DefaultColorPalette()
ALTERNATE_COLOR_PALETTE = AlternateColorPalette()