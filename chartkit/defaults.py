"""Default sizes, spacings, formats and paddings shared by the charts."""

from chartkit.geometry import Box

DEFAULT_CHART_HEIGHT = 400
DEFAULT_CHART_WIDTH = 1024
DEFAULT_STROKE_WIDTH = 0.0
DEFAULT_DOT_WIDTH = 0.0
DEFAULT_SERIES_LINE_WIDTH = 1.0
DEFAULT_AXIS_LINE_WIDTH = 1.0
DEFAULT_DPI = 92.0
DEFAULT_MINIMUM_FONT_SIZE = 8.0
DEFAULT_FONT_SIZE = 10.0
DEFAULT_TITLE_FONT_SIZE = 18.0
DEFAULT_ANNOTATION_DELTA_WIDTH = 10
DEFAULT_ANNOTATION_FONT_SIZE = 10.0
DEFAULT_AXIS_FONT_SIZE = 10.0
DEFAULT_TITLE_TOP = 10

DEFAULT_BACKGROUND_STROKE_WIDTH = 0.0
DEFAULT_CANVAS_STROKE_WIDTH = 0.0

DEFAULT_LINE_SPACING = 5

DEFAULT_Y_AXIS_MARGIN = 10
DEFAULT_X_AXIS_MARGIN = 10

DEFAULT_VERTICAL_TICK_HEIGHT = DEFAULT_X_AXIS_MARGIN >> 1
DEFAULT_HORIZONTAL_TICK_WIDTH = DEFAULT_Y_AXIS_MARGIN >> 1

DEFAULT_TICK_COUNT = 10
# Hard limit on the number of ticks, guarding against runaway tick generation.
DEFAULT_TICK_COUNT_SANITY_CHECK = 1 << 10

DEFAULT_MINIMUM_TICK_HORIZONTAL_SPACING = 20
DEFAULT_MINIMUM_TICK_VERTICAL_SPACING = 20

# strftime patterns for date, hour and minute timestamps.
DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_DATE_HOUR_FORMAT = "%m-%d %I%p"
DEFAULT_DATE_MINUTE_FORMAT = "%m-%d %I:%M%p"
DEFAULT_FLOAT_FORMAT = "%.2f"
DEFAULT_PERCENT_VALUE_FORMAT = "%0.2f%%"

DEFAULT_BAR_SPACING = 100
DEFAULT_BAR_WIDTH = 50

DASH_ARRAY_DOTS = (1, 1)
DASH_ARRAY_DASHES_SMALL = (3, 3)
DASH_ARRAY_DASHES_MEDIUM = (5, 5)
DASH_ARRAY_DASHES_LARGE = (10, 10)

DEFAULT_ANNOTATION_PADDING = Box(top=5, left=5, right=5, bottom=5)
DEFAULT_BACKGROUND_PADDING = Box(top=5, left=5, right=5, bottom=5)

CONTENT_TYPE_PNG = "image/png"
CONTENT_TYPE_SVG = "image/svg+xml"