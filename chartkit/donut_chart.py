"""Donut charts: slices of a ring sized by share of the total."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from chartkit.colors import ALTERNATE_COLOR_PALETTE, COLOR_WHITE, ColorPalette, Style
from chartkit.defaults import (
    DEFAULT_BACKGROUND_PADDING,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
    DEFAULT_STROKE_WIDTH,
)
from chartkit.geometry import Box
from chartkit.series import Value


@dataclass
class DonutChart:
    """A chart of ring slices with a hole in the middle."""

    title: str = ""
    title_style: Style = field(default_factory=Style)
    color_palette: Optional[ColorPalette] = None
    width: int = 0
    height: int = 0
    dpi: float = 0.0
    background: Style = field(default_factory=Style)
    canvas: Style = field(default_factory=Style)
    slice_style_base: Style = field(default_factory=Style)
    values: list[Value] = field(default_factory=list)

    def get_dpi(self, default: float = DEFAULT_DPI) -> float:
        return self.dpi or default

    def get_width(self) -> int:
        return self.width or DEFAULT_CHART_WIDTH

    def get_height(self) -> int:
        # A donut chart is square by default.
        return self.height or DEFAULT_CHART_WIDTH

    def get_color_palette(self) -> ColorPalette:
        return self.color_palette if self.color_palette is not None else ALTERNATE_COLOR_PALETTE

    def box(self) -> Box:
        """Return the chart bounds inside the background padding."""
        padding = self.background.padding
        return Box(
            top=padding.get_top(DEFAULT_BACKGROUND_PADDING.top),
            left=padding.get_left(DEFAULT_BACKGROUND_PADDING.left),
            right=self.get_width() - padding.get_right(DEFAULT_BACKGROUND_PADDING.right),
            bottom=self.get_height() - padding.get_bottom(DEFAULT_BACKGROUND_PADDING.bottom),
        )

    def circle_canvas_box(self) -> Box:
        """Return the canvas fitted to a square around the circle."""
        canvas_box = self.box()
        diameter = min(canvas_box.width(), canvas_box.height())
        return canvas_box.fit(Box(right=diameter, bottom=diameter))

    def finalize_values(self, values: list[Value]) -> list[Value]:
        """Return the positive values as fractions of the total."""
        total = sum(v.value for v in values)
        final = [
            Value(value=v.value / total, label=v.label, style=v.style)
            for v in values
            if v.value > 0
        ]
        if not final:
            raise ValueError("donut chart must contain at least (1) non-zero value")
        return final

    def scaled_font_size(self) -> float:
        dimension = min(self.get_width(), self.get_height())
        if dimension >= 2048:
            return 48.0
        if dimension >= 1024:
            return 24.0
        if dimension > 512:
            return 18.0
        if dimension > 256:
            return 12.0
        return 10.0

    def title_font_size(self) -> float:
        dimension = min(self.get_width(), self.get_height())
        if dimension >= 2048:
            return 48
        if dimension >= 1024:
            return 24
        if dimension >= 512:
            return 18
        if dimension >= 256:
            return 12
        return 10

    def background_style(self) -> Style:
        palette = self.get_color_palette()
        return self.background.inherit_from(
            Style(
                fill_color=palette.background_color(),
                stroke_color=palette.background_stroke_color(),
                stroke_width=DEFAULT_STROKE_WIDTH,
            )
        )

    def canvas_style(self) -> Style:
        palette = self.get_color_palette()
        return self.canvas.inherit_from(
            Style(
                fill_color=palette.canvas_color(),
                stroke_color=palette.canvas_stroke_color(),
                stroke_width=DEFAULT_STROKE_WIDTH,
            )
        )

    def slice_style(self, index: int) -> Style:
        """Return the style of the slice at ``index``."""
        palette = self.get_color_palette()
        return self.slice_style_base.inherit_from(
            Style(
                stroke_color=COLOR_WHITE,
                stroke_width=4.0,
                fill_color=palette.get_series_color(index),
                font_size=self.scaled_font_size(),
                font_color=palette.text_color(),
            )
        )