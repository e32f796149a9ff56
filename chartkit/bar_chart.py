"""Bar charts: sizing, ranges, spacing and the placement of bars."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field, replace
from typing import NamedTuple, Optional

from chartkit.colors import ALTERNATE_COLOR_PALETTE, ColorPalette, Style
from chartkit.defaults import (
    DEFAULT_BAR_SPACING,
    DEFAULT_BAR_WIDTH,
    DEFAULT_CANVAS_STROKE_WIDTH,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
    DEFAULT_STROKE_WIDTH,
)
from chartkit.geometry import Box
from chartkit.ranges import ContinuousRange, Tick
from chartkit.series import Value, ValueFormatter, float_value_formatter


class _BarLayout(NamedTuple):
    """The computed placement of a bar chart."""

    canvas_box: Box
    yrange: ContinuousRange
    bars: list[tuple[Box, Style]]


@dataclass
class BarChart:
    """A chart that draws one bar per value along a shared y range."""

    title: str = ""
    title_style: Style = field(default_factory=Style)
    color_palette: Optional[ColorPalette] = None
    width: int = 0
    height: int = 0
    dpi: float = 0.0
    bar_width: int = 0
    background: Style = field(default_factory=Style)
    canvas: Style = field(default_factory=Style)
    x_axis: Style = field(default_factory=Style)
    y_axis_style: Style = field(default_factory=Style)
    y_axis_range: Optional[ContinuousRange] = None
    y_axis_ticks: list[Tick] = field(default_factory=list)
    y_axis_value_formatter: Optional[ValueFormatter] = None
    bar_spacing: int = 0
    use_base_value: bool = False
    base_value: float = 0.0
    bars: list[Value] = field(default_factory=list)

    def get_dpi(self) -> float:
        return self.dpi or DEFAULT_DPI

    def get_width(self) -> int:
        return self.width or DEFAULT_CHART_WIDTH

    def get_height(self) -> int:
        return self.height or DEFAULT_CHART_HEIGHT

    def get_bar_spacing(self) -> int:
        return self.bar_spacing or DEFAULT_BAR_SPACING

    def get_bar_width(self) -> int:
        return self.bar_width or DEFAULT_BAR_WIDTH

    def get_color_palette(self) -> ColorPalette:
        return self.color_palette if self.color_palette is not None else ALTERNATE_COLOR_PALETTE

    def get_ranges(self) -> ContinuousRange:
        """Return the y range: the axis range if set, else from ticks, else from bars."""
        if self.y_axis_range is not None and not self.y_axis_range.is_zero():
            return self.y_axis_range

        yrange = ContinuousRange()
        if self.y_axis_ticks:
            yrange.min = min(tick.value for tick in self.y_axis_ticks)
            yrange.max = max(tick.value for tick in self.y_axis_ticks)
            return yrange

        yrange.min = min((bar.value for bar in self.bars), default=sys.float_info.max)
        yrange.max = max((bar.value for bar in self.bars), default=-sys.float_info.max)
        return yrange

    def has_axes(self) -> bool:
        return not self.y_axis_style.hidden

    def box(self) -> Box:
        """Return the chart bounds inside the background padding."""
        padding = self.background.padding
        return Box(
            top=padding.get_top(20),
            left=padding.get_left(20),
            right=self.get_width() - padding.get_right(10),
            bottom=self.get_height() - padding.get_bottom(50),
        )

    def canvas_box(self) -> Box:
        return self.box()

    def set_range_domains(self, canvas_box: Box, yrange: ContinuousRange) -> ContinuousRange:
        yrange.domain = canvas_box.height()
        return yrange

    def value_formatter(self) -> ValueFormatter:
        return self.y_axis_value_formatter or float_value_formatter

    def total_bar_width(self, bar_width: int, spacing: int) -> int:
        return len(self.bars) * (bar_width + spacing)

    def effective_bar_spacing(self, canvas_box: Box) -> int:
        """Return the bar spacing, shrunk when the bars do not fit the canvas."""
        total = self.total_bar_width(self.get_bar_width(), self.get_bar_spacing())
        if total > canvas_box.width():
            remaining = canvas_box.width() - len(self.bars) * self.get_bar_width()
            if remaining > 0:
                return math.ceil(remaining / len(self.bars))
            return 0
        return self.get_bar_spacing()

    def effective_bar_width(self, canvas_box: Box, spacing: int) -> int:
        """Return the bar width, shrunk when the bars do not fit the canvas."""
        total = self.total_bar_width(self.get_bar_width(), spacing)
        if total > canvas_box.width():
            remaining = canvas_box.width() - len(self.bars) * spacing
            if remaining > 0:
                return math.ceil(remaining / len(self.bars))
            return 0
        return self.get_bar_width()

    def scaled_total_width(self, canvas_box: Box) -> tuple[int, int, int]:
        """Return the effective bar width, spacing and total width."""
        spacing = self.effective_bar_spacing(canvas_box)
        width = self.effective_bar_width(canvas_box, spacing)
        return width, spacing, self.total_bar_width(width, spacing)

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
                stroke_width=DEFAULT_CANVAS_STROKE_WIDTH,
            )
        )

    def bar_style(self, index: int) -> Style:
        """Return the default style of the bar at ``index``."""
        color = self.get_color_palette().get_series_color(index)
        return Style(stroke_color=color, stroke_width=3.0, fill_color=color)

    def layout(self) -> _BarLayout:
        """Compute the canvas, y range and the box and style of every bar."""
        if not self.bars:
            raise ValueError("please provide at least one bar")

        canvas_box = self.canvas_box()
        yrange = replace(self.get_ranges())
        if yrange.max - yrange.min == 0:
            raise ValueError("invalid data range; cannot be zero")
        yrange = self.set_range_domains(canvas_box, yrange)

        width, spacing, _ = self.scaled_total_width(canvas_box)
        half_spacing = spacing >> 1
        x_offset = canvas_box.left
        placed = []
        for index, bar in enumerate(self.bars):
            left = x_offset + half_spacing
            if self.use_base_value:
                bottom = canvas_box.bottom - yrange.translate(self.base_value)
            else:
                bottom = canvas_box.bottom
            bar_box = Box(
                top=canvas_box.bottom - yrange.translate(bar.value),
                left=left,
                right=left + width,
                bottom=bottom,
            )
            placed.append((bar_box, bar.style.inherit_from(self.bar_style(index))))
            x_offset += width + spacing

        return _BarLayout(canvas_box=canvas_box, yrange=yrange, bars=placed)