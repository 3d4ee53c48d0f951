import pytest

from dtrange import Intersection, Interval


@pytest.mark.parametrize(
    ("mode", "left_closed", "right_closed", "brackets"),
    [
        (Interval.CLOSE, True, True, ("[", "]")),
        (Interval.OPEN, False, False, ("]", "[")),
        (Interval.LEFT_OPEN_RIGHT_CLOSE, False, True, ("]", "]")),
        (Interval.LEFT_CLOSE_RIGHT_OPEN, True, False, ("[", "[")),
    ],
)
def test_interval_boundaries(
    mode: Interval, left_closed: bool, right_closed: bool, brackets: tuple[str, str]
) -> None:
    assert mode.left_closed is left_closed
    assert mode.right_closed is right_closed
    assert mode.brackets == brackets


def test_interval_has_four_modes() -> None:
    assert len(Interval) == 4


def test_intersection_has_five_outcomes() -> None:
    assert [kind.name for kind in Intersection] == [
        "NONE",
        "PARTIALLY_IN_RANGE",
        "RANGES_EQUALED",
        "CONTAINED_IN_RANGE",
        "CONTAINS_RANGE",
    ]


def test_only_none_is_falsy() -> None:
    assert not Intersection.NONE
    assert all(kind for kind in Intersection if kind is not Intersection.NONE)
