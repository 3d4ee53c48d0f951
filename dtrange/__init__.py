import logging

from .errors import InvalidArgument
from .intersection import Intersection
from .interval import Interval
from .range import DateTimeRange

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DateTimeRange",
    "Interval",
    "Intersection",
    "InvalidArgument",
]
