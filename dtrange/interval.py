from enum import Enum


class Interval(Enum):
    """Boundary inclusivity of a range: which of its end instants belong to it."""

    CLOSE = "close"
    OPEN = "open"
    LEFT_OPEN_RIGHT_CLOSE = "left_open_right_close"
    LEFT_CLOSE_RIGHT_OPEN = "left_close_right_open"

    @property
    def left_closed(self) -> bool:
        return self in (Interval.CLOSE, Interval.LEFT_CLOSE_RIGHT_OPEN)

    @property
    def right_closed(self) -> bool:
        return self in (Interval.CLOSE, Interval.LEFT_OPEN_RIGHT_CLOSE)

    @property
    def brackets(self) -> tuple[str, str]:
        """Bracket pair used when rendering, e.g. ``("[", "[")``."""
        return ("[" if self.left_closed else "]", "]" if self.right_closed else "[")
