"""Values, value providers and the basic chart series."""

from __future__ import annotations

import math
import statistics
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from chartkit.colors import Style
from chartkit.defaults import DEFAULT_FLOAT_FORMAT
from chartkit.ranges import YAxisType

ValueFormatter = Callable[[Any], str]

DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD = 16


def float_value_formatter(value: Any) -> str:
    """Format a number with two decimals; other values format as empty."""
    if isinstance(value, (int, float)):
        return DEFAULT_FLOAT_FORMAT % value
    return ""


def linear_range(start: float, end: float) -> list[float]:
    """Return values from start to end inclusive, in steps of one."""
    count = int(abs(end - start)) + 1
    step = 1.0 if end >= start else -1.0
    return [start + step * offset for offset in range(count)]


def _is_values_provider(obj: Any) -> bool:
    return hasattr(obj, "get_values") and hasattr(obj, "__len__")


@dataclass
class Value:
    """A labelled value, as used by bar and donut charts."""

    value: float = 0.0
    label: str = ""
    style: Style = field(default_factory=Style)


@dataclass
class Value2:
    """A labelled x, y pair."""

    x_value: float = 0.0
    y_value: float = 0.0
    label: str = ""
    style: Style = field(default_factory=Style)


class Array(tuple):
    """An immutable sequence of floats."""

    def get_value(self, index: int) -> float:
        return self[index]


@dataclass
class ContinuousSeries:
    """A line given by matching x and y values."""

    name: str = ""
    style: Style = field(default_factory=Style)
    y_axis: YAxisType = YAxisType.PRIMARY
    x_value_formatter: Optional[ValueFormatter] = None
    y_value_formatter: Optional[ValueFormatter] = None
    x_values: list[float] = field(default_factory=list)
    y_values: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.x_values)

    def get_values(self, index: int) -> tuple[float, float]:
        return self.x_values[index], self.y_values[index]

    def get_first_values(self) -> tuple[float, float]:
        return self.x_values[0], self.y_values[0]

    def get_last_values(self) -> tuple[float, float]:
        return self.x_values[-1], self.y_values[-1]

    def get_value_formatters(self) -> tuple[ValueFormatter, ValueFormatter]:
        return (
            self.x_value_formatter or float_value_formatter,
            self.y_value_formatter or float_value_formatter,
        )

    def validate(self) -> None:
        if not self.x_values:
            raise ValueError("continuous series; must have xvalues set")
        if not self.y_values:
            raise ValueError("continuous series; must have yvalues set")
        if len(self.x_values) != len(self.y_values):
            raise ValueError("continuous series; must have same length xvalues as yvalues")


@dataclass
class ConcatSeries:
    """Several series read one after another as a single sequence."""

    series: list[Any] = field(default_factory=list)

    def _providers(self):
        return (s for s in self.series if _is_values_provider(s))

    def __len__(self) -> int:
        return sum(len(s) for s in self._providers())

    def get_value(self, index: int) -> tuple[float, float]:
        cursor = 0
        for provider in self._providers():
            length = len(provider)
            if index < cursor + length:
                return provider.get_values(index - cursor)
            cursor += length
        raise IndexError(f"concat series index out of range: {index}")

    def validate(self) -> None:
        for inner in self.series:
            inner.validate()


@dataclass
class BollingerBandsSeries:
    """Bands at k standard deviations above and below a moving average."""

    name: str = ""
    style: Style = field(default_factory=Style)
    y_axis: YAxisType = YAxisType.PRIMARY
    period: int = 0
    k: float = 0.0
    inner_series: Any = None
    _buffer: Optional[deque] = field(default=None, init=False, repr=False, compare=False)

    def get_period(self) -> int:
        return self.period or DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD

    def get_k(self, default: float = 2.0) -> float:
        return default if self.k == 0 else self.k

    def __len__(self) -> int:
        return len(self.inner_series)

    def _bands(self, window) -> tuple[float, float]:
        values = list(window)
        average = statistics.fmean(values) if values else 0.0
        std = statistics.pstdev(values) if values else 0.0
        k = self.get_k()
        return average + k * std, average - k * std

    def get_bounded_values(self, index: int) -> tuple[float, float, float]:
        """Return x and the upper and lower band; call with ascending indexes."""
        if self.inner_series is None:
            return 0.0, 0.0, 0.0
        if self._buffer is None or index == 0:
            self._buffer = deque(maxlen=self.get_period())
        x, y = self.inner_series.get_values(index)
        self._buffer.append(y)
        upper, lower = self._bands(self._buffer)
        return x, upper, lower

    def get_bounded_last_values(self) -> tuple[float, float, float]:
        if self.inner_series is None:
            return 0.0, 0.0, 0.0
        length = len(self.inner_series)
        start = max(0, length - self.get_period())
        window = []
        x = 0.0
        for index in range(start, length):
            x, y = self.inner_series.get_values(index)
            window.append(y)
        upper, lower = self._bands(window)
        return x, upper, lower

    def validate(self) -> None:
        if self.inner_series is None:
            raise ValueError("bollinger bands series requires InnerSeries to be set")


@dataclass
class AnnotationSeries:
    """A set of labels placed at points on the chart."""

    name: str = ""
    style: Style = field(default_factory=Style)
    y_axis: YAxisType = YAxisType.PRIMARY
    annotations: list[Value2] = field(default_factory=list)

    def validate(self) -> None:
        if not self.annotations:
            raise ValueError("annotation series requires annotations to be set and not empty")


def bounded_last_values_annotation_series(
    inner_series: Any, value_formatter: Optional[ValueFormatter] = None
) -> AnnotationSeries:
    """Annotate the last upper and lower values of a bounded series."""
    x, y1, y2 = inner_series.get_bounded_last_values()

    if value_formatter is not None:
        formatter = value_formatter
    elif hasattr(inner_series, "get_value_formatters"):
        _, formatter = inner_series.get_value_formatters()
    else:
        formatter = float_value_formatter

    name = ""
    style = Style()
    if hasattr(inner_series, "name") and hasattr(inner_series, "style"):
        name = f"{inner_series.name} - Last Values"
        style = inner_series.style

    return AnnotationSeries(
        name=name,
        style=style,
        annotations=[
            Value2(x_value=x, y_value=y1, label=formatter(y1)),
            Value2(x_value=x, y_value=y2, label=formatter(y2)),
        ],
    )


def _finite(value: float) -> bool:
    return math.isfinite(value)