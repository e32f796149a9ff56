"""Line charts: series ranges, value formatters, styles and canvas layout."""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass, field, replace
from typing import Any, NamedTuple, Optional

from chartkit.colors import DEFAULT_COLOR_PALETTE, ColorPalette, Style
from chartkit.defaults import (
    DEFAULT_BACKGROUND_PADDING,
    DEFAULT_BACKGROUND_STROKE_WIDTH,
    DEFAULT_CANVAS_STROKE_WIDTH,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
    DEFAULT_FONT_SIZE,
    DEFAULT_SERIES_LINE_WIDTH,
)
from chartkit.geometry import Box
from chartkit.ranges import ContinuousRange, Tick, YAxisType
from chartkit.series import AnnotationSeries, ValueFormatter

_log = logging.getLogger(__name__)

_FLOAT_MAX = sys.float_info.max


def _round_to_for_delta(delta: float) -> float:
    """Return the power of ten one step below the magnitude of ``delta``."""
    cursor = 10.0**10
    while cursor > 0:
        if delta > cursor:
            return cursor / 10.0
        cursor /= 10.0
    return 0.0


def _round_down(value: float, round_to: float) -> float:
    if round_to < 1e-15 or not math.isfinite(value):
        return value
    return math.floor(value / round_to) * round_to


def _round_up(value: float, round_to: float) -> float:
    if round_to < 1e-15 or not math.isfinite(value):
        return value
    return math.ceil(value / round_to) * round_to


def _is_bounded_provider(series: Any) -> bool:
    return hasattr(series, "get_bounded_values") and hasattr(series, "__len__")


def _is_values_provider(series: Any) -> bool:
    return hasattr(series, "get_values") and hasattr(series, "__len__")


def _series_axis(series: Any) -> YAxisType:
    return getattr(series, "y_axis", YAxisType.PRIMARY)


def _tick_bounds(ticks: list[Tick]) -> tuple[float, float]:
    return min(t.value for t in ticks), max(t.value for t in ticks)


class _ChartLayout(NamedTuple):
    """The computed canvas and ranges of a chart."""

    canvas_box: Box
    xrange: ContinuousRange
    yrange: ContinuousRange
    yrange_alt: ContinuousRange
    x_formatter: Optional[ValueFormatter]
    y_formatter: Optional[ValueFormatter]
    y_alt_formatter: Optional[ValueFormatter]
    series_styles: list[tuple[Any, Style]]


@dataclass
class Chart:
    """A chart of series drawn against an x axis and up to two y axes."""

    title: str = ""
    title_style: Style = field(default_factory=Style)
    color_palette: Optional[ColorPalette] = None
    width: int = 0
    height: int = 0
    dpi: float = 0.0
    background: Style = field(default_factory=Style)
    canvas: Style = field(default_factory=Style)

    x_axis_style: Style = field(default_factory=Style)
    x_axis_range: Optional[ContinuousRange] = None
    x_axis_ticks: list[Tick] = field(default_factory=list)
    x_axis_value_formatter: Optional[ValueFormatter] = None

    y_axis_style: Style = field(default_factory=Style)
    y_axis_range: Optional[ContinuousRange] = None
    y_axis_ticks: list[Tick] = field(default_factory=list)
    y_axis_value_formatter: Optional[ValueFormatter] = None

    y_axis_secondary_style: Style = field(default_factory=Style)
    y_axis_secondary_range: Optional[ContinuousRange] = None
    y_axis_secondary_ticks: list[Tick] = field(default_factory=list)
    y_axis_secondary_value_formatter: Optional[ValueFormatter] = None

    series: list[Any] = field(default_factory=list)

    def get_dpi(self, default: float = DEFAULT_DPI) -> float:
        return self.dpi or default

    def get_width(self) -> int:
        return self.width or DEFAULT_CHART_WIDTH

    def get_height(self) -> int:
        return self.height or DEFAULT_CHART_HEIGHT

    def get_color_palette(self) -> ColorPalette:
        return self.color_palette if self.color_palette is not None else DEFAULT_COLOR_PALETTE

    def box(self) -> Box:
        """Return the chart bounds inside the background padding."""
        padding = self.background.padding
        return Box(
            top=padding.get_top(DEFAULT_BACKGROUND_PADDING.top),
            left=padding.get_left(DEFAULT_BACKGROUND_PADDING.left),
            right=self.get_width() - padding.get_right(DEFAULT_BACKGROUND_PADDING.right),
            bottom=self.get_height() - padding.get_bottom(DEFAULT_BACKGROUND_PADDING.bottom),
        )

    def canvas_box(self) -> Box:
        return self.box()

    def _check_has_visible_series(self) -> None:
        if not any(not s.style.hidden for s in self.series):
            raise ValueError("chart render; must have (1) visible series")

    def validate_series(self) -> None:
        for series in self.series:
            series.validate()

    def get_ranges(self) -> tuple[ContinuousRange, ContinuousRange, ContinuousRange]:
        """Return the x, primary y and secondary y ranges."""
        minx, maxx = _FLOAT_MAX, -_FLOAT_MAX
        miny, maxy = _FLOAT_MAX, -_FLOAT_MAX
        minya, maxya = _FLOAT_MAX, -_FLOAT_MAX
        mapped_to_secondary = False

        for series in self.series:
            if series.style.hidden:
                continue
            axis = _series_axis(series)
            if _is_bounded_provider(series):
                points = (series.get_bounded_values(i) for i in range(len(series)))
            elif _is_values_provider(series):
                points = (series.get_values(i) for i in range(len(series)))
            else:
                continue
            for vx, *ys in points:
                minx, maxx = min(minx, vx), max(maxx, vx)
                if axis == YAxisType.PRIMARY:
                    miny, maxy = min(miny, *ys), max(maxy, *ys)
                elif axis == YAxisType.SECONDARY:
                    minya, maxya = min(minya, *ys), max(maxya, *ys)
                    mapped_to_secondary = True

        xrange = replace(self.x_axis_range) if self.x_axis_range else ContinuousRange()
        yrange = replace(self.y_axis_range) if self.y_axis_range else ContinuousRange()
        yrange_alt = (
            replace(self.y_axis_secondary_range)
            if self.y_axis_secondary_range
            else ContinuousRange()
        )

        if self.x_axis_ticks:
            xrange.min, xrange.max = _tick_bounds(self.x_axis_ticks)
        elif xrange.is_zero():
            xrange.min, xrange.max = minx, maxx

        if self.y_axis_ticks:
            yrange.min, yrange.max = _tick_bounds(self.y_axis_ticks)
        elif yrange.is_zero():
            yrange.min, yrange.max = miny, maxy
            if not self.y_axis_style.hidden:
                round_to = _round_to_for_delta(yrange.delta())
                yrange.min = _round_down(yrange.min, round_to)
                yrange.max = _round_up(yrange.max, round_to)

        if self.y_axis_secondary_ticks:
            # The secondary range is bounded by the primary axis ticks.
            yrange_alt.min, yrange_alt.max = (
                _tick_bounds(self.y_axis_ticks) if self.y_axis_ticks else (_FLOAT_MAX, -_FLOAT_MAX)
            )
        elif mapped_to_secondary and yrange_alt.is_zero():
            yrange_alt.min, yrange_alt.max = minya, maxya
            if not self.y_axis_secondary_style.hidden:
                round_to = _round_to_for_delta(yrange_alt.delta())
                yrange_alt.min = _round_down(yrange_alt.min, round_to)
                yrange_alt.max = _round_up(yrange_alt.max, round_to)

        return xrange, yrange, yrange_alt

    def check_ranges(
        self,
        xrange: ContinuousRange,
        yrange: ContinuousRange,
        yrange_alt: ContinuousRange,
    ) -> None:
        """Raise ValueError when a range cannot be drawn."""
        _log.debug("checking xrange: %s", xrange)
        x_delta = xrange.delta()
        if math.isinf(x_delta):
            raise ValueError("infinite x-range delta")
        if math.isnan(x_delta):
            raise ValueError("nan x-range delta")
        if x_delta == 0:
            raise ValueError("zero x-range delta; there needs to be at least (2) values")

        _log.debug("checking yrange: %s", yrange)
        y_delta = yrange.delta()
        if math.isinf(y_delta):
            raise ValueError("infinite y-range delta")
        if math.isnan(y_delta):
            raise ValueError("nan y-range delta")

        if self.has_secondary_series():
            _log.debug("checking secondary yrange: %s", yrange_alt)
            alt_delta = yrange_alt.delta()
            if math.isinf(alt_delta):
                raise ValueError("infinite secondary y-range delta")
            if math.isnan(alt_delta):
                raise ValueError("nan secondary y-range delta")

    def value_formatters(
        self,
    ) -> tuple[Optional[ValueFormatter], Optional[ValueFormatter], Optional[ValueFormatter]]:
        """Return the x, primary y and secondary y formatters."""
        x = y = ya = None
        for series in self.series:
            if not hasattr(series, "get_value_formatters"):
                continue
            sx, sy = series.get_value_formatters()
            axis = _series_axis(series)
            if axis == YAxisType.PRIMARY:
                x, y = sx, sy
            elif axis == YAxisType.SECONDARY:
                x, ya = sx, sy
        if self.x_axis_value_formatter is not None:
            x = self.x_axis_value_formatter
        if self.y_axis_value_formatter is not None:
            y = self.y_axis_value_formatter
        if self.y_axis_secondary_value_formatter is not None:
            ya = self.y_axis_secondary_value_formatter
        return x, y, ya

    def has_axes(self) -> bool:
        return (
            not self.x_axis_style.hidden
            or not self.y_axis_style.hidden
            or not self.y_axis_secondary_style.hidden
        )

    def has_secondary_series(self) -> bool:
        return any(_series_axis(s) == YAxisType.SECONDARY for s in self.series)

    def has_annotation_series(self) -> bool:
        return any(
            isinstance(s, AnnotationSeries) and not s.style.hidden for s in self.series
        )

    def background_style(self) -> Style:
        palette = self.get_color_palette()
        return self.background.inherit_from(
            Style(
                fill_color=palette.background_color(),
                stroke_color=palette.background_stroke_color(),
                stroke_width=DEFAULT_BACKGROUND_STROKE_WIDTH,
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

    def series_style(self, index: int) -> Style:
        """Return the default style of the series at ``index``."""
        color = self.get_color_palette().get_series_color(index)
        return Style(
            dot_color=color,
            stroke_color=color,
            stroke_width=DEFAULT_SERIES_LINE_WIDTH,
            font_size=DEFAULT_FONT_SIZE,
        )

    def _set_range_domains(
        self, canvas_box: Box, *ranges: ContinuousRange
    ) -> None:
        xrange, yrange, yrange_alt = ranges
        xrange.domain = canvas_box.width()
        yrange.domain = canvas_box.height()
        yrange_alt.domain = canvas_box.height()

    def layout(self) -> _ChartLayout:
        """Compute the canvas, the ranges and the style of each visible series."""
        if not self.series:
            raise ValueError("please provide at least one series")
        self._check_has_visible_series()

        xrange, yrange, yrange_alt = self.get_ranges()
        canvas_box = self.canvas_box()
        x_fmt, y_fmt, ya_fmt = self.value_formatters()
        _log.debug("chart; canvas box: %s", canvas_box)

        self._set_range_domains(canvas_box, xrange, yrange, yrange_alt)
        self.check_ranges(xrange, yrange, yrange_alt)

        styles = [
            (series, series.style.inherit_from(self.series_style(index)))
            for index, series in enumerate(self.series)
            if not series.style.hidden
        ]
        return _ChartLayout(
            canvas_box=canvas_box,
            xrange=xrange,
            yrange=yrange,
            yrange_alt=yrange_alt,
            x_formatter=x_fmt,
            y_formatter=y_fmt,
            y_alt_formatter=ya_fmt,
            series_styles=styles,
        )