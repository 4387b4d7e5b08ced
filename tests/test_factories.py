import logging

import pytest

import cutrange
from cutrange import BoundType, InvalidIntervalError, NotConnectedError
from cutrange import factories as iv
from cutrange.cut import ABOVE_ALL, BELOW_ALL, AboveValue, BelowValue


def test_factories_pick_the_expected_cuts() -> None:
    assert iv.open(1, 2).lower_bound == AboveValue(1)
    assert iv.open(1, 2).upper_bound == BelowValue(2)
    assert iv.closed(1, 2).lower_bound == BelowValue(1)
    assert iv.closed(1, 2).upper_bound == AboveValue(2)
    assert iv.closed_open(1, 2).upper_bound == BelowValue(2)
    assert iv.open_closed(1, 2).lower_bound == AboveValue(1)
    assert iv.less_than(3).lower_bound is BELOW_ALL
    assert iv.at_most(3).upper_bound == AboveValue(3)
    assert iv.greater_than(3).upper_bound is ABOVE_ALL
    assert iv.at_least(3).lower_bound == BelowValue(3)
    assert iv.all().lower_bound is BELOW_ALL
    assert iv.all().upper_bound is ABOVE_ALL


def test_bounded_matches_named_factories() -> None:
    assert iv.open(1, 7) == iv.bounded(1, BoundType.OPEN, 7, BoundType.OPEN)
    assert iv.open_closed(1, 7) == iv.bounded(1, BoundType.OPEN, 7, BoundType.CLOSED)
    assert iv.closed(1, 7) == iv.bounded(1, BoundType.CLOSED, 7, BoundType.CLOSED)
    assert iv.closed_open(1, 7) == iv.bounded(1, BoundType.CLOSED, 7, BoundType.OPEN)


def test_bounded_validates() -> None:
    assert iv.bounded(1, BoundType.CLOSED, 4, BoundType.OPEN) == iv.closed_open(1, 4)
    with pytest.raises(InvalidIntervalError):
        iv.bounded(5, BoundType.CLOSED, 4, BoundType.CLOSED)
    with pytest.raises(InvalidIntervalError):
        iv.bounded(4, BoundType.OPEN, 4, BoundType.OPEN)
    assert iv.bounded(4, BoundType.OPEN, 4, BoundType.CLOSED).is_empty()


def test_up_to_and_down_to_dispatch() -> None:
    assert iv.at_least(1) == iv.down_to(1, BoundType.CLOSED)
    assert iv.greater_than(1) == iv.down_to(1, BoundType.OPEN)
    assert iv.at_most(7) == iv.up_to(7, BoundType.CLOSED)
    assert iv.less_than(7) == iv.up_to(7, BoundType.OPEN)


def test_bound_type_must_be_a_member() -> None:
    with pytest.raises(TypeError, match="bound_type must be a BoundType"):
        iv.up_to(7, "open")  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="bound_type must be a BoundType"):
        iv.down_to(7, True)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="lower_type must be a BoundType"):
        iv.bounded(1, None, 2, BoundType.OPEN)  # type: ignore[arg-type]


def test_bound_type_flip() -> None:
    assert BoundType.OPEN.flip() is BoundType.CLOSED
    assert BoundType.CLOSED.flip() is BoundType.OPEN
    assert list(BoundType) == [BoundType.OPEN, BoundType.CLOSED]


def test_two_endpoint_factories_reject_reversed_endpoints() -> None:
    for factory in (iv.open, iv.closed, iv.closed_open, iv.open_closed):
        with pytest.raises(InvalidIntervalError):
            factory(4, 3)

    with pytest.raises(InvalidIntervalError):
        iv.open(3, 3)
    assert iv.closed_open(3, 3).is_empty()
    assert iv.open_closed(3, 3).is_empty()
    assert not iv.closed(3, 3).is_empty()


def test_singleton() -> None:
    assert iv.singleton(4) == iv.closed(4, 4)
    assert str(iv.singleton("x")) == "[x..x]"


def test_variadic_span() -> None:
    assert iv.span(iv.closed(1, 3)) == iv.closed(1, 3)
    assert iv.span(iv.closed(4, 8), iv.open(0, 2), iv.greater_than(9)) == iv.greater_than(0)
    assert iv.span(iv.closed(1, 3), iv.open(5, 7)) == iv.closed_open(1, 7)

    with pytest.raises(ValueError, match="at least one interval"):
        iv.span()


def test_variadic_intersection() -> None:
    assert (
        iv.intersection(iv.closed(1, 9), iv.at_least(3), iv.less_than(7))
        == iv.closed_open(3, 7)
    )
    assert iv.intersection(iv.open(3, 4)) == iv.open(3, 4)

    with pytest.raises(NotConnectedError):
        iv.intersection(iv.closed(1, 9), iv.at_least(3), iv.less_than(2))
    with pytest.raises(ValueError, match="at least one interval"):
        iv.intersection()


def test_all_is_the_intersection_identity() -> None:
    interval = iv.open_closed(2, 6)
    assert iv.intersection(iv.all(), interval) == interval
    assert iv.intersection(interval, iv.all()) == interval


def test_rejections_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="cutrange.interval"):
        with pytest.raises(InvalidIntervalError):
            iv.closed(4, 3)
        with pytest.raises(NotConnectedError):
            iv.closed(1, 2).intersection(iv.closed(5, 6))

    messages = [record.getMessage() for record in caplog.records]
    assert "Rejected interval [4..3]" in messages
    assert "Intersection of disconnected intervals [1..2] and [5..6]" in messages


def test_package_exports() -> None:
    assert cutrange.open is iv.open
    assert cutrange.all is iv.all
    assert "open" not in cutrange.__all__
    assert "all" not in cutrange.__all__
    for name in cutrange.__all__:
        assert hasattr(cutrange, name)


def test_docs_are_bundled() -> None:
    assert set(cutrange.docs) == {"readme", "api"}
    assert "cutrange" in cutrange.docs["readme"]
    assert "closed_open" in cutrange.docs["api"]
