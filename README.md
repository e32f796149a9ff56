# chartkit

Building blocks for laying out charts: integer boxes and points, continuous
ranges, colours, styles and palettes, data series, and the layout logic of
line, bar and donut charts. The package computes geometry, ranges and styles;
it has no runtime dependencies.

## Installation

```
pip install chartkit
```

For running the tests:

```
pip install "chartkit[test]"
pytest
```

## Boxes

```python
from chartkit.geometry import Box, new_box

canvas = new_box(5, 5, 95, 95)
bounds = new_box(0, 0, 100, 100)
taller = new_box(-10, 5, 50, 50)

adjusted = canvas.outer_constrain(bounds, taller)
print(adjusted.top)          # 15
print(canvas.center())       # (50, 50)
```

`Box` is a frozen dataclass. `grow`, `constrain`, `fit` and `shift` return new
boxes; `validate()` raises `ValueError` for negative edges. `Box.corners()`
returns a `BoxCorners`, which can be rotated about its centre with
`rotate(theta_degrees)`. `Point` offers `distance_to` and `equals`.

## Ranges

```python
from chartkit.ranges import ContinuousRange

r = ContinuousRange(min=1.0, max=8.0, domain=1000)
print(r.translate(5.0))      # 572
```

`chartkit.ranges` also holds the `YAxisType` and `TickPosition` enums and the
`Tick` dataclass (a value and a label).

## Series

```python
from chartkit.series import ContinuousSeries, BollingerBandsSeries, linear_range

values = ContinuousSeries(
    name="Values",
    x_values=linear_range(1.0, 100.0),
    y_values=linear_range(1.0, 100.0),
)
bands = BollingerBandsSeries(inner_series=values)
x, upper, lower = bands.get_bounded_last_values()
```

- `ContinuousSeries.validate()` raises `ValueError` when x or y values are
  missing or their lengths differ.
- `ConcatSeries(series=[...])` reads several series end to end;
  `get_value(index)` raises `IndexError` past the end.
- `BollingerBandsSeries` keeps a moving window (default period 16, default
  k 2.0); call `get_bounded_values` with ascending indexes starting at 0.
- `AnnotationSeries` holds `Value2` labels placed at data points, and
  `bounded_last_values_annotation_series` labels the last upper and lower
  values of a bounded series.
- `float_value_formatter` formats numbers with two decimals.

## Charts

`Chart`, `BarChart` and `DonutChart` hold a chart's configuration and work out
its layout: default sizes, ranges derived from the data or from explicit ticks
and ranges, canvas boxes, font sizes and per-series or per-slice styles.

- `Chart.layout()` returns the canvas box, the x, primary y and secondary y
  ranges, the value formatters and the style of each visible series. It raises
  `ValueError` when there are no series, none is visible, or a range cannot be
  drawn (zero x range, infinite or NaN ranges).
- `BarChart.layout()` returns the canvas box, the y range and the box and style
  of every bar. It raises `ValueError` when there are no bars or the y range is
  zero. `scaled_total_width` shrinks bar width and spacing to fit the canvas.
- `DonutChart.finalize_values()` turns positive values into fractions of the
  total and raises `ValueError` when none is left; `circle_canvas_box()` fits
  the canvas to a square.

```python
from chartkit.bar_chart import BarChart
from chartkit.series import Value

chart = BarChart(
    width=1024,
    title="Test Title",
    bars=[Value(value=1.0, label="One"), Value(value=5.0, label="Five")],
)
print(chart.get_bar_width(), chart.get_bar_spacing())   # 50 100
```

Colours, palettes and styles live in `chartkit.colors`; default sizes and
spacings live in `chartkit.defaults`.

## What the package does not do

It does not draw. There is no renderer, no PNG or SVG output, no font loading
or text measurement, no axis tick generation and no legend; the layouts stop
at boxes, ranges and styles. There is no command-line tool.