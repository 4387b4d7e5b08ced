from enum import Enum


class BoundType(Enum):
    """Whether an interval includes its endpoint on one side.

    A CLOSED bound includes its endpoint, an OPEN bound does not. An unbounded
    side has no bound type at all.
    """

    OPEN = "open"
    CLOSED = "closed"

    def flip(self) -> "BoundType":
        return BoundType.CLOSED if self is BoundType.OPEN else BoundType.OPEN
