import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import NoReturn

from typing_extensions import Self, override

from dtrange.errors import InvalidArgument
from dtrange.intersection import Intersection
from dtrange.interval import Interval
from dtrange.util import DEFAULT_INTERVAL, PAIR_INTERVAL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateTimeRange:
    """A range between two instants with configurable boundary inclusivity.

    A missing ``end`` makes the range unbounded: it extends to positive
    infinity and its upper bound is satisfied by every instant. Equality and
    hashing are field-wise, so ranges covering the same instants with
    different ``interval`` modes are not equal.

    Example:
        >>> jan = DateTimeRange(datetime(2024, 1, 1), datetime(2024, 2, 1))
        >>> datetime(2024, 1, 15) in jan
        True
        >>> str(jan.with_interval(Interval.OPEN))
        ']2024-01-01 00:00:00, 2024-02-01 00:00:00['
    """

    start: datetime
    end: datetime | None = None
    interval: Interval = DEFAULT_INTERVAL

    def __post_init__(self) -> None:
        if not isinstance(self.start, datetime):
            self._reject(
                "start",
                f"DateTimeRange start must be a datetime.\n"
                f"Got {type(self.start).__name__!r}: {self.start!r}",
            )
        if self.end is not None and not isinstance(self.end, datetime):
            self._reject(
                "end",
                f"DateTimeRange end must be a datetime or None.\n"
                f"Got {type(self.end).__name__!r}: {self.end!r}\n"
                f"Hint: Pass end=None for a range without an upper bound",
            )
        if not isinstance(self.interval, Interval):
            valid = ", ".join(f"Interval.{mode.name}" for mode in Interval)
            self._reject(
                "interval",
                f"DateTimeRange interval must be an Interval member.\n"
                f"Got {type(self.interval).__name__!r}: {self.interval!r}\n"
                f"Valid: {valid}",
            )
        if self.end is None:
            return
        if (self.start.utcoffset() is None) != (self.end.utcoffset() is None):
            self._reject(
                "end",
                f"DateTimeRange start and end must both be naive or both be "
                f"timezone-aware.\n"
                f"Got start={self.start!r}, end={self.end!r}",
            )
        if self.start >= self.end:
            self._reject(
                "start",
                f"DateTimeRange start ({self.start}) must be before end ({self.end})",
            )

    @staticmethod
    def _reject(param: str, message: str) -> NoReturn:
        logger.debug("rejected DateTimeRange argument %s: %s", param, message)
        raise InvalidArgument(message, param=param)

    @classmethod
    def closed(cls, start: datetime, end: datetime | None) -> Self:
        """Build a range including both its start and its end."""
        return cls(start, end, PAIR_INTERVAL)

    def with_interval(self, interval: Interval) -> Self:
        """Return a copy of this range using another boundary mode."""
        return replace(self, interval=interval)

    @property
    def is_bounded(self) -> bool:
        return self.end is not None

    @property
    def duration(self) -> timedelta | None:
        """Length of the range, or None when it has no end."""
        if self.end is None:
            return None
        return self.end - self.start

    def is_in_range(self, instant: datetime) -> bool:
        """True if ``instant`` lies in this range under its boundary mode."""
        if self.interval.left_closed:
            after_start = instant >= self.start
        else:
            after_start = instant > self.start
        if not after_start:
            return False
        if self.end is None:
            return True
        if self.interval.right_closed:
            return instant <= self.end
        return instant < self.end

    def __contains__(self, instant: datetime) -> bool:
        return self.is_in_range(instant)

    def get_intersection_type(self, other: "DateTimeRange") -> Intersection:
        """Classify how ``other`` relates to this range.

        Conditions are checked in a fixed order and the first match wins:
        equality, full containment of ``other``, either boundary of ``other``
        falling inside this range, then this range lying inside ``other``.
        """
        if not isinstance(other, DateTimeRange):
            raise TypeError(
                f"Cannot intersect a DateTimeRange with {type(other).__name__!r}.\n"
                f"Hint: Use is_in_range() to test a single instant"
            )

        if self == other:
            result = Intersection.RANGES_EQUALED
        elif self.is_in_range(other.start) and (
            other.end is None or self.is_in_range(other.end)
        ):
            result = Intersection.CONTAINED_IN_RANGE
        elif self.is_in_range(other.start):
            result = Intersection.PARTIALLY_IN_RANGE
        elif other.end is not None and self.is_in_range(other.end):
            result = Intersection.PARTIALLY_IN_RANGE
        elif other.is_in_range(self.start) and (
            self.end is None or other.is_in_range(self.end)
        ):
            result = Intersection.CONTAINS_RANGE
        else:
            result = Intersection.NONE

        logger.debug("classified %s against %s as %s", other, self, result.name)
        return result

    def get_intersection(self, other: "DateTimeRange") -> "DateTimeRange | None":
        """Return the part of ``other`` shared with this range.

        Partial overlaps produce a new closed range. Disjoint ranges produce
        None, and so do ranges touching at a single shared instant, since no
        range can start and end on the same instant.
        """
        kind = self.get_intersection_type(other)
        if kind in (Intersection.RANGES_EQUALED, Intersection.CONTAINED_IN_RANGE):
            return other
        if kind is Intersection.PARTIALLY_IN_RANGE:
            if self.is_in_range(other.start):
                start, end = other.start, self.end
            else:
                start, end = self.start, other.end
            if end is not None and start == end:
                return None
            return DateTimeRange.closed(start, end)
        if kind is Intersection.CONTAINS_RANGE:
            return self
        return None

    def __and__(self, other: "DateTimeRange") -> "DateTimeRange | None":
        return self.get_intersection(other)

    def intersects(self, other: "DateTimeRange") -> bool:
        return self.get_intersection_type(other) is not Intersection.NONE

    @override
    def __str__(self) -> str:
        left, right = self.interval.brackets
        end = "" if self.end is None else str(self.end)
        return f"{left}{self.start}, {end}{right}"

