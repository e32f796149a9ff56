import sys

import pytest

from chartkit.bar_chart import BarChart
from chartkit.colors import ALTERNATE_COLOR_PALETTE, COLOR_BLACK, Style, hidden
from chartkit.defaults import (
    DEFAULT_BAR_SPACING,
    DEFAULT_BAR_WIDTH,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
)
from chartkit.ranges import ContinuousRange, Tick
from chartkit.series import Value


def _five_bars():
    return [
        Value(value=1.0, label="One"),
        Value(value=2.0, label="Two"),
        Value(value=3.0, label="Three"),
        Value(value=4.0, label="Four"),
        Value(value=5.0, label="Five"),
    ]


def test_layout_renders_bars():
    bc = BarChart(width=1024, title="Test Title", bars=_five_bars())
    result = bc.layout()
    assert len(result.bars) == 5
    first, _ = result.bars[0]
    last, _ = result.bars[-1]
    assert (first.left, first.right, first.top, first.bottom) == (70, 120, 350, 350)
    assert (last.top, last.bottom) == (20, 350)
    assert result.yrange.domain == 330


def test_layout_base_value():
    bc = BarChart(bars=_five_bars(), use_base_value=True, base_value=3.0)
    result = bc.layout()
    assert all(box.bottom == 185 for box, _ in result.bars)


def test_layout_zero_range_raises():
    bc = BarChart(
        width=1024,
        title="Test Title",
        bars=[Value(value=0.0, label="One"), Value(value=0.0, label="Two")],
    )
    with pytest.raises(ValueError):
        bc.layout()


def test_layout_no_bars_raises():
    with pytest.raises(ValueError):
        BarChart().layout()


def test_props():
    bc = BarChart()
    assert bc.get_dpi() == DEFAULT_DPI
    bc.dpi = 100
    assert bc.get_dpi() == 100

    assert bc.get_width() == DEFAULT_CHART_WIDTH
    bc.width = DEFAULT_CHART_WIDTH - 1
    assert bc.get_width() == DEFAULT_CHART_WIDTH - 1

    assert bc.get_height() == DEFAULT_CHART_HEIGHT
    bc.height = DEFAULT_CHART_HEIGHT - 1
    assert bc.get_height() == DEFAULT_CHART_HEIGHT - 1

    assert bc.get_bar_spacing() == DEFAULT_BAR_SPACING
    bc.bar_spacing = 150
    assert bc.get_bar_spacing() == 150

    assert bc.get_bar_width() == DEFAULT_BAR_WIDTH
    bc.bar_width = 75
    assert bc.get_bar_width() == 75


def test_get_ranges_empty():
    yr = BarChart().get_ranges()
    assert not yr.is_zero()
    assert yr.max == -sys.float_info.max
    assert yr.min == sys.float_info.max


def test_get_ranges_bars_min_max():
    bc = BarChart(bars=[Value(value=1.0), Value(value=10.0)])
    yr = bc.get_ranges()
    assert not yr.is_zero()
    assert yr.max == 10
    assert yr.min == 1


def test_get_ranges_user_range_wins():
    bc = BarChart(
        y_axis_range=ContinuousRange(min=5.0, max=15.0),
        y_axis_ticks=[Tick(7.0, "Foo"), Tick(11.0, "Foo2")],
        bars=[Value(value=1.0), Value(value=10.0)],
    )
    yr = bc.get_ranges()
    assert not yr.is_zero()
    assert yr.max == 15
    assert yr.min == 5


def test_get_ranges_ticks_min_max():
    bc = BarChart(
        y_axis_ticks=[Tick(7.0, "Foo"), Tick(11.0, "Foo2")],
        bars=[Value(value=1.0), Value(value=10.0)],
    )
    yr = bc.get_ranges()
    assert not yr.is_zero()
    assert yr.max == 11
    assert yr.min == 7


def test_has_axes():
    bc = BarChart()
    assert bc.has_axes()
    bc.y_axis_style = hidden()
    assert not bc.has_axes()


def test_default_canvas_box():
    b = BarChart().canvas_box()
    assert not b.is_zero()
    assert (b.top, b.left, b.right, b.bottom) == (20, 20, 1014, 350)


def test_set_range_domains():
    bc = BarChart()
    yr = bc.set_range_domains(bc.box(), bc.get_ranges())
    assert yr.domain == 330


def test_value_formatter():
    bc = BarChart()
    assert bc.value_formatter()(1234.0) == "1234.00"
    bc.y_axis_value_formatter = lambda _: "test"
    assert bc.value_formatter()(1234) == "test"


def test_effective_bar_spacing():
    bc = BarChart(width=1024, bar_width=10, bars=_five_bars())
    assert bc.effective_bar_spacing(bc.box()) == 100
    bc.bar_width = 250
    assert bc.effective_bar_spacing(bc.box()) == 0


def test_effective_bar_width():
    bc = BarChart(width=1024, bar_width=10, bars=_five_bars())
    cb = bc.box()

    spacing = bc.effective_bar_spacing(cb)
    assert spacing != 0
    assert bc.effective_bar_width(cb, spacing) == 10

    bc.bar_width = 250
    spacing = bc.effective_bar_spacing(cb)
    assert spacing == 0
    bar_width = bc.effective_bar_width(cb, spacing)
    assert bar_width == 199
    assert bc.total_bar_width(bar_width, spacing) == cb.width() + 1

    bw, bs, total = bc.scaled_total_width(cb)
    assert bs == spacing
    assert bw == bar_width
    assert total == cb.width() + 1


@pytest.mark.parametrize(
    "size, expected",
    [(2049, 48), (1025, 24), (513, 18), (257, 12), (128, 10)],
)
def test_title_font_size(size, expected):
    assert BarChart(width=size, height=size).title_font_size() == expected


def test_styles_inherit_from_palette():
    bc = BarChart(background=Style(fill_color=COLOR_BLACK))
    assert bc.background_style().fill_color == COLOR_BLACK
    assert bc.canvas_style().fill_color == ALTERNATE_COLOR_PALETTE.canvas_color()
    style = bc.bar_style(1)
    assert style.fill_color == ALTERNATE_COLOR_PALETTE.get_series_color(1)
    assert style.stroke_width == 3.0