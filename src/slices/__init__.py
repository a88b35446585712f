"""Package level __init__."""

from importlib.metadata import version

__version__ = version("slices")

from slices.filter import Filter, FilterParseError, FilterRangeError, FilterSet, InvalidFilter  # noqa: E402
from slices.selection import SelectAll, Selection, SelectMatching, selection_for  # noqa: E402

__all__ = [
    "Filter",
    "FilterParseError",
    "FilterRangeError",
    "FilterSet",
    "InvalidFilter",
    "SelectAll",
    "SelectMatching",
    "Selection",
    "selection_for",
]
