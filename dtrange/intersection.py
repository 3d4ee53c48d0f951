from enum import Enum


class Intersection(Enum):
    """How a range B relates to a receiving range A."""

    NONE = "none"
    PARTIALLY_IN_RANGE = "partially_in_range"
    RANGES_EQUALED = "ranges_equaled"
    # B lies inside A
    CONTAINED_IN_RANGE = "contained_in_range"
    # A lies inside B
    CONTAINS_RANGE = "contains_range"

    def __bool__(self) -> bool:
        return self is not Intersection.NONE
