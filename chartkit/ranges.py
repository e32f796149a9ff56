"""Continuous value ranges, axis enumerations and ticks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from chartkit.colors import Style


def _ceil_to_int(value: float) -> int:
    """Round up to an int; non-finite values collapse to zero."""
    if not math.isfinite(value):
        return 0
    return math.ceil(value)


class TickPosition(IntEnum):
    """Where tick labels are drawn relative to their ticks."""

    UNSET = 0
    BETWEEN_TICKS = 1
    UNDER_TICK = 2


class YAxisType(IntEnum):
    """Which y axis a series is drawn against."""

    PRIMARY = 0
    SECONDARY = 1


@dataclass(frozen=True)
class Tick:
    """A labelled position along an axis."""

    value: float = 0.0
    label: str = ""


class Axis(Protocol):
    """A chart axis: a name, a style and optional fixed ticks."""

    name: str
    style: Style
    ticks: list[Tick]


@dataclass
class ContinuousRange:
    """Maps a span of numbers onto a pixel domain."""

    min: float = 0.0
    max: float = 0.0
    domain: int = 0
    descending: bool = False

    def is_zero(self) -> bool:
        """Return True when neither bounds nor domain have been set."""
        return (
            (self.min == 0 or math.isnan(self.min))
            and (self.max == 0 or math.isnan(self.max))
            and self.domain == 0
        )

    def delta(self) -> float:
        """Return the distance from min to max."""
        return self.max - self.min

    def translate(self, value: float) -> int:
        """Map ``value`` into the range's domain."""
        delta = self.delta()
        normalized = value - self.min
        if delta == 0:
            ratio = math.nan if normalized == 0 else math.copysign(math.inf, normalized)
        else:
            ratio = normalized / delta
        scaled = _ceil_to_int(ratio * float(self.domain))
        if self.descending:
            return self.domain - scaled
        return scaled

    def __str__(self) -> str:
        if self.delta() == 0:
            return "ContinuousRange [empty]"
        return f"ContinuousRange [{self.min:.2f},{self.max:.2f}] => {self.domain}"