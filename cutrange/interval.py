import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic

from typing_extensions import override

from cutrange.bound_type import BoundType
from cutrange.cut import AboveAll, BelowAll, Cut, T
from cutrange.errors import InvalidIntervalError, MissingValueError, NotConnectedError

logger = logging.getLogger(__name__)


def _describe(lower_bound: Cut[T], upper_bound: Cut[T]) -> str:
    return (
        f"{lower_bound.describe_as_lower_bound()}.."
        f"{upper_bound.describe_as_upper_bound()}"
    )


@dataclass(frozen=True, kw_only=True, repr=False)
class Interval(Generic[T]):
    """A contiguous span of values of some totally ordered type.

    Each side is open, closed or unbounded. Intervals are built from a pair of
    cuts; use the factory functions (`closed`, `at_least`, ...) rather than
    calling the constructor directly. Contained values cannot be iterated.

    The upper endpoint may not be less than the lower one. They may be equal
    only if at least one side is closed: `[a..a]` is a singleton, `[a..a)` and
    `(a..a]` are empty, and `(a..a)` is rejected.

    Intervals are convex: if two values are contained, every value between
    them is contained as well.
    """

    lower_bound: Cut[T]
    upper_bound: Cut[T]

    def __post_init__(self) -> None:
        for edge, bound in (("lower", self.lower_bound), ("upper", self.upper_bound)):
            if not isinstance(bound, Cut):
                raise TypeError(
                    f"Interval {edge}_bound must be a Cut.\n"
                    f"Got {type(bound).__name__!r}: {bound!r}\n"
                    f"Hint: build intervals with the factory functions:\n"
                    f"  closed(1, 5), open(1, 5), at_least(1), less_than(5)  "
                    f"# etc."
                )
        if (
            self.lower_bound > self.upper_bound
            or isinstance(self.lower_bound, AboveAll)
            or isinstance(self.upper_bound, BelowAll)
        ):
            description = _describe(self.lower_bound, self.upper_bound)
            logger.debug("Rejected interval %s", description)
            raise InvalidIntervalError(
                f"Invalid interval: {description}\n"
                f"The lower bound must not lie above the upper bound, and an "
                f"interval with equal endpoints must be closed on at least one side."
            )

    def has_lower_bound(self) -> bool:
        return not isinstance(self.lower_bound, BelowAll)

    def has_upper_bound(self) -> bool:
        return not isinstance(self.upper_bound, AboveAll)

    def lower_endpoint(self) -> T:
        """Return the lower endpoint.

        Raises:
            UnboundedSideError: If the interval is unbounded below
        """
        return self.lower_bound.endpoint

    def upper_endpoint(self) -> T:
        """Return the upper endpoint.

        Raises:
            UnboundedSideError: If the interval is unbounded above
        """
        return self.upper_bound.endpoint

    def lower_bound_type(self) -> BoundType:
        return self.lower_bound.as_lower_bound_type()

    def upper_bound_type(self) -> BoundType:
        return self.upper_bound.as_upper_bound_type()

    def is_empty(self) -> bool:
        """True if this interval has the form `[v..v)` or `(v..v]`.

        Discrete intervals such as the integer interval `(3..4)` are not
        considered empty even though they contain no integers.
        """
        return self.lower_bound == self.upper_bound

    def contains(self, value: T) -> bool:
        """True if `value` lies within the bounds of this interval.

        On `[0..2)`, `contains(1)` is True while `contains(2)` is False.
        """
        if value is None:
            raise MissingValueError(
                f"Cannot test whether None is contained in {self}.\n"
                f"Intervals only hold concrete values of their ordered type."
            )
        return self.lower_bound.is_less_than(
            value
        ) and not self.upper_bound.is_less_than(value)

    def contains_all(self, values: Iterable[T]) -> bool:
        return all(self.contains(value) for value in values)

    def encloses(self, other: "Interval[T]") -> bool:
        """True if the bounds of `other` do not extend outside this interval.

        Examples:
        - `[3..6]` encloses `[4..5]`
        - `(3..6)` encloses `(3..6)`
        - `[3..6]` encloses `[4..4)` (even though the latter is empty)
        - `(3..6]` does not enclose `[3..6]`
        - `[4..5]` does not enclose `(3..6)` (even though it contains every
          value contained by the latter)

        If `a.encloses(b)`, every value in `b` is in `a`; the converse does not
        hold. Enclosure is a partial order and implies connectedness.
        """
        return (
            self.lower_bound <= other.lower_bound
            and self.upper_bound >= other.upper_bound
        )

    def is_connected(self, other: "Interval[T]") -> bool:
        """True if some (possibly empty) interval is enclosed by both intervals.

        - `[2..4)` and `[5..7)` are not connected
        - `[2..4)` and `[3..5)` are connected, both enclose `[3..4)`
        - `[2..4)` and `[4..6)` are connected, both enclose the empty `[4..4)`

        Two intervals have a well-defined intersection if and only if they are
        connected. The relation is reflexive and symmetric but not transitive.
        Discrete neighbours like `[3..5]` and `[6..10]` are not connected.
        """
        return (
            self.lower_bound <= other.upper_bound
            and other.lower_bound <= self.upper_bound
        )

    def intersection(self, other: "Interval[T]") -> "Interval[T]":
        """Return the maximal interval enclosed by both this interval and `other`.

        The intersection of `[1..5]` and `(3..7)` is `(3..5]`. The result may be
        empty: `[1..5)` intersected with `[5..7)` yields `[5..5)`.

        Commutative, associative and idempotent, with `all()` as identity.

        Raises:
            NotConnectedError: If the intervals are not connected
        """
        if not self.is_connected(other):
            logger.debug(
                "Intersection of disconnected intervals %s and %s", self, other
            )
            raise NotConnectedError(
                f"Intervals {self} and {other} are not connected "
                f"and have no intersection.\n"
                f"Hint: check a.is_connected(b) first, or use a.span(b) for the "
                f"smallest interval covering both."
            )
        lower_cmp = self.lower_bound.compare_to(other.lower_bound)
        upper_cmp = self.upper_bound.compare_to(other.upper_bound)
        if lower_cmp >= 0 and upper_cmp <= 0:
            return self
        if lower_cmp <= 0 and upper_cmp >= 0:
            return other
        return Interval(
            lower_bound=self.lower_bound if lower_cmp >= 0 else other.lower_bound,
            upper_bound=self.upper_bound if upper_cmp <= 0 else other.upper_bound,
        )

    def span(self, other: "Interval[T]") -> "Interval[T]":
        """Return the minimal interval enclosing both this interval and `other`.

        The span of `[1..3]` and `(5..7)` is `[1..7)`. For connected inputs this
        is their union; otherwise it also covers the gap between them.
        Commutative, associative and idempotent, and defined for any pair.
        """
        lower_cmp = self.lower_bound.compare_to(other.lower_bound)
        upper_cmp = self.upper_bound.compare_to(other.upper_bound)
        if lower_cmp <= 0 and upper_cmp >= 0:
            return self
        if lower_cmp >= 0 and upper_cmp <= 0:
            return other
        return Interval(
            lower_bound=self.lower_bound if lower_cmp <= 0 else other.lower_bound,
            upper_bound=self.upper_bound if upper_cmp >= 0 else other.upper_bound,
        )

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __and__(self, other: "Interval[T]") -> "Interval[T]":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersection(other)

    @override
    def __str__(self) -> str:
        """Canonical notation such as `[3..5)` or `(-∞..+∞)`."""
        return _describe(self.lower_bound, self.upper_bound)

    @override
    def __repr__(self) -> str:
        return f"Interval({str(self)!r})"
