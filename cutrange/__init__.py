from importlib.resources import files

from . import factories
from .bound_type import BoundType
from .errors import (
    IntervalError,
    InvalidIntervalError,
    MissingValueError,
    NotConnectedError,
    UnboundedSideError,
)
from .factories import (
    all,
    at_least,
    at_most,
    bounded,
    closed,
    closed_open,
    down_to,
    greater_than,
    intersection,
    less_than,
    open,
    open_closed,
    singleton,
    span,
    up_to,
)
from .interval import Interval

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(encoding="utf-8"),
    "api": (_docs_path / "API.md").read_text(encoding="utf-8"),
}

# `open` and `all` stay importable by name but out of star imports,
# which would otherwise shadow the builtins
__all__ = [
    "Interval",
    "BoundType",
    "factories",
    "closed",
    "closed_open",
    "open_closed",
    "bounded",
    "less_than",
    "at_most",
    "up_to",
    "greater_than",
    "at_least",
    "down_to",
    "singleton",
    "span",
    "intersection",
    "IntervalError",
    "InvalidIntervalError",
    "UnboundedSideError",
    "NotConnectedError",
    "MissingValueError",
    "docs",
]
