"""Exceptions raised by cutrange.

Every failure is a contract violation by the caller: the same inputs always
raise the same error. The concrete classes also derive from the builtin
exception a caller would naturally catch (ValueError or TypeError).
"""


class IntervalError(Exception):
    """Base class for all cutrange errors."""


class InvalidIntervalError(IntervalError, ValueError):
    """The lower and upper bounds do not describe a valid interval."""


class UnboundedSideError(IntervalError, ValueError):
    """An endpoint or bound type was requested for a side with no bound."""


class NotConnectedError(IntervalError, ValueError):
    """Two intervals have no intersection because they are not connected."""


class MissingValueError(IntervalError, TypeError):
    """A membership test was given None instead of a value."""
