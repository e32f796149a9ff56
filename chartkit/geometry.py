"""Integer boxes, corner sets and points used for chart layout."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


def _to_int(value: float) -> int:
    """Truncate toward zero; non-finite values collapse to zero."""
    if not math.isfinite(value):
        return 0
    return int(value)


def _mean_int(*values: int) -> int:
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


def _rotate_coordinate(cx: int, cy: int, x: int, y: int, theta: float) -> tuple[int, int]:
    dx, dy = float(x - cx), float(y - cy)
    rx = dx * math.cos(theta) - dy * math.sin(theta)
    ry = dx * math.sin(theta) + dy * math.cos(theta)
    return _to_int(rx) + cx, _to_int(ry) + cy


@dataclass(frozen=True)
class Point:
    """An integer x, y pair."""

    x: int = 0
    y: int = 0

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def equals(self, other: Point) -> bool:
        return self.x == other.x and self.y == other.y

    def __str__(self) -> str:
        return f"P{{{self.x},{self.y}}}"


@dataclass(frozen=True)
class Box:
    """The four edges of a rectangle; ``is_set`` marks an intentional zero box."""

    top: int = 0
    left: int = 0
    right: int = 0
    bottom: int = 0
    is_set: bool = False

    def is_zero(self) -> bool:
        if self.is_set:
            return False
        return self.top == 0 and self.left == 0 and self.right == 0 and self.bottom == 0

    def __str__(self) -> str:
        return f"box({self.top},{self.left},{self.right},{self.bottom})"

    def _coalesce(self, value: int, default: int) -> int:
        if not self.is_set and value == 0:
            return default
        return value

    def get_top(self, default: int = 0) -> int:
        return self._coalesce(self.top, default)

    def get_left(self, default: int = 0) -> int:
        return self._coalesce(self.left, default)

    def get_right(self, default: int = 0) -> int:
        return self._coalesce(self.right, default)

    def get_bottom(self, default: int = 0) -> int:
        return self._coalesce(self.bottom, default)

    def width(self) -> int:
        return abs(self.right - self.left)

    def height(self) -> int:
        return abs(self.bottom - self.top)

    def center(self) -> tuple[int, int]:
        return self.left + (self.width() >> 1), self.top + (self.height() >> 1)

    def aspect(self) -> float:
        width, height = self.width(), self.height()
        if height == 0:
            return math.inf if width else math.nan
        return width / height

    def clone(self) -> Box:
        return replace(self)

    def is_bigger_than(self, other: Box) -> bool:
        return (
            self.top < other.top
            or self.bottom > other.bottom
            or self.left < other.left
            or self.right > other.right
        )

    def is_smaller_than(self, other: Box) -> bool:
        return (
            self.top > other.top
            and self.bottom < other.bottom
            and self.left > other.left
            and self.right < other.right
        )

    def equals(self, other: Box) -> bool:
        return (
            self.top == other.top
            and self.left == other.left
            and self.right == other.right
            and self.bottom == other.bottom
        )

    def grow(self, other: Box) -> Box:
        return Box(
            top=min(self.top, other.top),
            left=min(self.left, other.left),
            right=max(self.right, other.right),
            bottom=max(self.bottom, other.bottom),
        )

    def shift(self, x: int, y: int) -> Box:
        return Box(
            top=self.top + y,
            left=self.left + x,
            right=self.right + x,
            bottom=self.bottom + y,
        )

    def corners(self) -> BoxCorners:
        return BoxCorners(
            top_left=Point(self.left, self.top),
            top_right=Point(self.right, self.top),
            bottom_right=Point(self.right, self.bottom),
            bottom_left=Point(self.left, self.bottom),
        )

    def fit(self, other: Box) -> Box:
        """Fit ``other``'s aspect ratio inside this box, centred."""
        ba = self.aspect()
        oa = other.aspect()
        if oa == ba:
            return self.clone()

        bw, bh = float(self.width()), float(self.height())
        bw2 = int(bw) >> 1
        bh2 = int(bh) >> 1
        if oa > ba:
            noh2 = _to_int(bw / oa if oa > 1.0 else bh * oa) >> 1
            return Box(
                top=(self.top + bh2) - noh2,
                left=self.left,
                right=self.right,
                bottom=(self.top + bh2) + noh2,
            )
        now2 = _to_int(bh / oa if oa > 1.0 else bw * oa) >> 1
        return Box(
            top=self.top,
            left=(self.left + bw2) - now2,
            right=(self.left + bw2) + now2,
            bottom=self.bottom,
        )

    def constrain(self, other: Box) -> Box:
        return replace(
            self,
            top=max(self.top, other.top),
            left=max(self.left, other.left),
            right=min(self.right, other.right),
            bottom=min(self.bottom, other.bottom),
        )

    def outer_constrain(self, bounds: Box, other: Box) -> Box:
        """Shrink this box by however far ``other`` overflows ``bounds``."""
        top, left, right, bottom = self.top, self.left, self.right, self.bottom
        if other.top < bounds.top:
            top = self.top + (bounds.top - other.top)
        if other.left < bounds.left:
            left = self.left + (bounds.left - other.left)
        if other.right > bounds.right:
            right = self.right - (other.right - bounds.right)
        if other.bottom > bounds.bottom:
            bottom = self.bottom - (other.bottom - bounds.bottom)
        return replace(self, top=top, left=left, right=right, bottom=bottom)

    def validate(self) -> None:
        if self.left < 0:
            raise ValueError("invalid left; must be >= 0")
        if self.right < 0:
            raise ValueError("invalid right; must be > 0")
        if self.top < 0:
            raise ValueError("invalid top; must be > 0")
        if self.bottom < 0:
            raise ValueError("invalid bottom; must be > 0")


BOX_ZERO = Box(is_set=True)


def new_box(top: int, left: int, right: int, bottom: int) -> Box:
    """Return a box marked as set."""
    return Box(top=top, left=left, right=right, bottom=bottom, is_set=True)


@dataclass(frozen=True)
class BoxCorners:
    """A quadrilateral given by four independent corners."""

    top_left: Point = Point()
    top_right: Point = Point()
    bottom_right: Point = Point()
    bottom_left: Point = Point()

    def box(self) -> Box:
        return Box(
            top=min(self.top_left.y, self.top_right.y),
            left=min(self.top_left.x, self.bottom_left.x),
            right=max(self.top_right.x, self.bottom_right.x),
            bottom=max(self.bottom_left.y, self.bottom_right.y),
        )

    def width(self) -> int:
        min_left = min(self.top_left.x, self.bottom_left.x)
        max_right = max(self.top_right.x, self.bottom_right.x)
        return max_right - min_left

    def height(self) -> int:
        min_top = min(self.top_left.y, self.top_right.y)
        max_bottom = max(self.bottom_left.y, self.bottom_right.y)
        return max_bottom - min_top

    def center(self) -> tuple[int, int]:
        left = _mean_int(self.top_left.x, self.bottom_left.x)
        right = _mean_int(self.top_right.x, self.bottom_right.x)
        top = _mean_int(self.top_left.y, self.top_right.y)
        bottom = _mean_int(self.bottom_left.y, self.bottom_right.y)
        return ((right - left) >> 1) + left, ((bottom - top) >> 1) + top

    def rotate(self, theta_degrees: float) -> BoxCorners:
        cx, cy = self.center()
        theta = math.radians(theta_degrees)

        def turn(point: Point) -> Point:
            return Point(*_rotate_coordinate(cx, cy, point.x, point.y, theta))

        return BoxCorners(
            top_left=turn(self.top_left),
            top_right=turn(self.top_right),
            bottom_right=turn(self.bottom_right),
            bottom_left=turn(self.bottom_left),
        )

    def equals(self, other: BoxCorners) -> bool:
        return (
            self.top_left.equals(other.top_left)
            and self.top_right.equals(other.top_right)
            and self.bottom_right.equals(other.bottom_right)
            and self.bottom_left.equals(other.bottom_left)
        )

    def __str__(self) -> str:
        return (
            f"BoxC{{{self.top_left},{self.top_right},"
            f"{self.bottom_right},{self.bottom_left}}}"
        )