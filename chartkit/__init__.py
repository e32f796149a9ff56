"""Chart layout: geometry, ranges, colours and styles, series, and line, bar and donut chart layouts."""

__version__ = "0.1.0"
__all__ = [
    "defaults",
    "geometry",
    "colors",
    "ranges",
    "series",
    "bar_chart",
    "donut_chart",
    "chart",
]