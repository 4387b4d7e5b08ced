"""Factory functions for the nine conventional interval shapes.

========  ==================  ==============
Notation  Definition          Factory
========  ==================  ==============
(a..b)    {x | a < x < b}     open
[a..b]    {x | a <= x <= b}   closed
(a..b]    {x | a < x <= b}    open_closed
[a..b)    {x | a <= x < b}    closed_open
(a..+∞)   {x | x > a}         greater_than
[a..+∞)   {x | x >= a}        at_least
(-∞..b)   {x | x < b}         less_than
(-∞..b]   {x | x <= b}        at_most
(-∞..+∞)  {x}                 all
========  ==================  ==============

Each factory only picks the pair of cuts; validation happens in the Interval
constructor, which raises InvalidIntervalError for reversed endpoints.

`open` and `all` shadow builtins here; import this module rather than using a
star import: `from cutrange import factories as iv; iv.open(1, 5)`.
"""

from functools import reduce
from typing import Any

from cutrange.bound_type import BoundType
from cutrange.cut import ABOVE_ALL, BELOW_ALL, AboveValue, BelowValue, Cut, T
from cutrange.interval import Interval


def _check_bound_type(bound_type: Any, name: str) -> BoundType:
    if not isinstance(bound_type, BoundType):
        raise TypeError(
            f"{name} must be a BoundType, got {type(bound_type).__name__!r}: "
            f"{bound_type!r}\n"
            f"Example: bounded(1, BoundType.CLOSED, 4, BoundType.OPEN)"
        )
    return bound_type


def open(lower: T, upper: T) -> Interval[T]:  # noqa: A001
    """Values strictly greater than `lower` and strictly less than `upper`.

    Raises InvalidIntervalError if `lower >= upper`.
    """
    return Interval(lower_bound=AboveValue(lower), upper_bound=BelowValue(upper))


def closed(lower: T, upper: T) -> Interval[T]:
    """Values greater than or equal to `lower` and less than or equal to `upper`."""
    return Interval(lower_bound=BelowValue(lower), upper_bound=AboveValue(upper))


def closed_open(lower: T, upper: T) -> Interval[T]:
    return Interval(lower_bound=BelowValue(lower), upper_bound=BelowValue(upper))


def open_closed(lower: T, upper: T) -> Interval[T]:
    return Interval(lower_bound=AboveValue(lower), upper_bound=AboveValue(upper))


def bounded(
    lower: T, lower_type: BoundType, upper: T, upper_type: BoundType
) -> Interval[T]:
    """Values from `lower` to `upper`, each end inclusive or exclusive."""
    lower_type = _check_bound_type(lower_type, "lower_type")
    upper_type = _check_bound_type(upper_type, "upper_type")
    lower_bound: Cut[T] = (
        AboveValue(lower) if lower_type is BoundType.OPEN else BelowValue(lower)
    )
    upper_bound: Cut[T] = (
        BelowValue(upper) if upper_type is BoundType.OPEN else AboveValue(upper)
    )
    return Interval(lower_bound=lower_bound, upper_bound=upper_bound)


def less_than(endpoint: T) -> Interval[T]:
    return Interval(lower_bound=BELOW_ALL, upper_bound=BelowValue(endpoint))


def at_most(endpoint: T) -> Interval[T]:
    return Interval(lower_bound=BELOW_ALL, upper_bound=AboveValue(endpoint))


def up_to(endpoint: T, bound_type: BoundType) -> Interval[T]:
    """No lower bound, up to `endpoint` inclusive (CLOSED) or exclusive (OPEN)."""
    if _check_bound_type(bound_type, "bound_type") is BoundType.OPEN:
        return less_than(endpoint)
    return at_most(endpoint)


def greater_than(endpoint: T) -> Interval[T]:
    return Interval(lower_bound=AboveValue(endpoint), upper_bound=ABOVE_ALL)


def at_least(endpoint: T) -> Interval[T]:
    return Interval(lower_bound=BelowValue(endpoint), upper_bound=ABOVE_ALL)


def down_to(endpoint: T, bound_type: BoundType) -> Interval[T]:
    """From `endpoint` inclusive (CLOSED) or exclusive (OPEN), with no upper bound."""
    if _check_bound_type(bound_type, "bound_type") is BoundType.OPEN:
        return greater_than(endpoint)
    return at_least(endpoint)


def all() -> Interval[Any]:  # noqa: A001
    """The interval containing every value of any type."""
    return Interval(lower_bound=BELOW_ALL, upper_bound=ABOVE_ALL)


def singleton(value: T) -> Interval[T]:
    """The closed interval `[value..value]`."""
    return closed(value, value)


def span(*intervals: Interval[T]) -> Interval[T]:
    """Return the minimal interval enclosing every argument (chained `.span`)."""

    if not intervals:
        raise ValueError(
            f"span() requires at least one interval argument.\n"
            f"Example: span(closed(1, 3), open(5, 7))"
        )

    return reduce(lambda acc, nxt: acc.span(nxt), intervals)


def intersection(*intervals: Interval[T]) -> Interval[T]:
    """Intersect every argument (equivalent to chaining `&`).

    Raises NotConnectedError as soon as the running intersection and the next
    argument are not connected.
    """

    if not intervals:
        raise ValueError(
            f"intersection() requires at least one interval argument.\n"
            f"Example: intersection(closed(1, 9), at_least(3), less_than(7))"
        )

    return reduce(lambda acc, nxt: acc & nxt, intervals)
