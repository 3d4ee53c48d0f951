"""Package defaults for dtrange.

Boundary modes picked when a range is built without an explicit one.
"""

from dtrange.interval import Interval

# Mode of DateTimeRange(start, end)
DEFAULT_INTERVAL = Interval.LEFT_CLOSE_RIGHT_OPEN

# Mode of DateTimeRange.closed(start, end) and of computed partial intersections
PAIR_INTERVAL = Interval.CLOSE
