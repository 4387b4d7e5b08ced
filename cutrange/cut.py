"""Cuts: the boundary markers an interval is built from.

A cut splits the ordered domain of some type into two sections. This can be
done below a value, above a value, below all values or above all values, so
any interval is exactly a pair of cuts. The variant set is closed: only the
four classes in this module subclass Cut.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from typing_extensions import override

from cutrange.bound_type import BoundType
from cutrange.errors import UnboundedSideError


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


# `<` must be a total order consistent with `==`; this is documented, not checked
T = TypeVar("T", bound=SupportsOrdering)


class Cut(ABC, Generic[T]):

    @property
    @abstractmethod
    def endpoint(self) -> T:
        """The value this cut sits next to."""
        pass

    @abstractmethod
    def is_less_than(self, value: T) -> bool:
        """True if this cut lies strictly below `value`."""
        pass

    @abstractmethod
    def as_lower_bound_type(self) -> BoundType:
        pass

    @abstractmethod
    def as_upper_bound_type(self) -> BoundType:
        pass

    @abstractmethod
    def describe_as_lower_bound(self) -> str:
        pass

    @abstractmethod
    def describe_as_upper_bound(self) -> str:
        pass

    def compare_to(self, other: "Cut[T]") -> int:
        """Three-way comparison; overridden by the two sentinels."""
        if isinstance(other, BelowAll):
            return 1
        if isinstance(other, AboveAll):
            return -1
        if self.endpoint < other.endpoint:
            return -1
        if other.endpoint < self.endpoint:
            return 1
        # same value: below sorts before above
        return int(isinstance(self, AboveValue)) - int(isinstance(other, AboveValue))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cut):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Cut):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Cut):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Cut):
            return NotImplemented
        return self.compare_to(other) >= 0


@dataclass(frozen=True)
class BelowAll(Cut[Any]):
    """Sentinel below every value; the lower cut of an interval unbounded below."""

    @property
    @override
    def endpoint(self) -> Any:
        raise UnboundedSideError(
            "Interval is unbounded below and has no lower endpoint.\n"
            "Hint: check has_lower_bound() before asking for the endpoint"
        )

    @override
    def is_less_than(self, value: Any) -> bool:
        return True

    @override
    def as_lower_bound_type(self) -> BoundType:
        raise UnboundedSideError(
            "Interval is unbounded below and has no lower bound type.\n"
            "Hint: check has_lower_bound() before asking for the bound type"
        )

    @override
    def as_upper_bound_type(self) -> BoundType:
        raise UnboundedSideError("BelowAll is never the upper bound of an interval")

    @override
    def describe_as_lower_bound(self) -> str:
        return "(-\u221e"

    @override
    def describe_as_upper_bound(self) -> str:
        # only reachable while reporting an invalid interval
        return "-\u221e)"

    @override
    def compare_to(self, other: Cut[Any]) -> int:
        return 0 if isinstance(other, BelowAll) else -1

    @override
    def __str__(self) -> str:
        return "-\u221e"

    @override
    def __repr__(self) -> str:
        return "BELOW_ALL"


@dataclass(frozen=True)
class AboveAll(Cut[Any]):
    """Sentinel above every value; the upper cut of an interval unbounded above."""

    @property
    @override
    def endpoint(self) -> Any:
        raise UnboundedSideError(
            "Interval is unbounded above and has no upper endpoint.\n"
            "Hint: check has_upper_bound() before asking for the endpoint"
        )

    @override
    def is_less_than(self, value: Any) -> bool:
        return False

    @override
    def as_lower_bound_type(self) -> BoundType:
        raise UnboundedSideError("AboveAll is never the lower bound of an interval")

    @override
    def as_upper_bound_type(self) -> BoundType:
        raise UnboundedSideError(
            "Interval is unbounded above and has no upper bound type.\n"
            "Hint: check has_upper_bound() before asking for the bound type"
        )

    @override
    def describe_as_lower_bound(self) -> str:
        # only reachable while reporting an invalid interval
        return "(+\u221e"

    @override
    def describe_as_upper_bound(self) -> str:
        return "+\u221e)"

    @override
    def compare_to(self, other: Cut[Any]) -> int:
        return 0 if isinstance(other, AboveAll) else 1

    @override
    def __str__(self) -> str:
        return "+\u221e"

    @override
    def __repr__(self) -> str:
        return "ABOVE_ALL"


@dataclass(frozen=True)
class BelowValue(Cut[T]):
    """Cut just below `value`: a closed lower bound or an open upper bound."""

    value: T

    @property
    @override
    def endpoint(self) -> T:
        return self.value

    @override
    def is_less_than(self, value: T) -> bool:
        return not value < self.value

    @override
    def as_lower_bound_type(self) -> BoundType:
        return BoundType.CLOSED

    @override
    def as_upper_bound_type(self) -> BoundType:
        return BoundType.OPEN

    @override
    def describe_as_lower_bound(self) -> str:
        return f"[{self.value}"

    @override
    def describe_as_upper_bound(self) -> str:
        return f"{self.value})"

    @override
    def __str__(self) -> str:
        return f"\\{self.value}/"


@dataclass(frozen=True)
class AboveValue(Cut[T]):
    """Cut just above `value`: an open lower bound or a closed upper bound."""

    value: T

    @property
    @override
    def endpoint(self) -> T:
        return self.value

    @override
    def is_less_than(self, value: T) -> bool:
        return self.value < value

    @override
    def as_lower_bound_type(self) -> BoundType:
        return BoundType.OPEN

    @override
    def as_upper_bound_type(self) -> BoundType:
        return BoundType.CLOSED

    @override
    def describe_as_lower_bound(self) -> str:
        return f"({self.value}"

    @override
    def describe_as_upper_bound(self) -> str:
        return f"{self.value}]"

    @override
    def __str__(self) -> str:
        return f"/{self.value}\\"


BELOW_ALL: BelowAll = BelowAll()
ABOVE_ALL: AboveAll = AboveAll()
