"""Index filters used to select rows or columns of a text stream."""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# A bound is a run of ASCII digits; either side of the colon may be empty.
_EXACT = re.compile(r"[0-9]+")
_RANGE = re.compile(r"([0-9]*):([0-9]*)")


class InvalidFilter(ValueError):
    """Raised when a filter expression cannot be turned into a `Filter`."""

    def __init__(self, token: str, reason: str) -> None:
        """Record the offending token alongside a human readable reason."""
        super().__init__(f"invalid filter '{token}': {reason}")
        self.token = token
        self.reason = reason


class FilterParseError(InvalidFilter):
    """The expression does not follow the `N`, `N:M`, `N:`, `:M` or `:` grammar."""


class FilterRangeError(InvalidFilter):
    """A well-formed `N:M` expression where `N` is greater than `M`."""


@dataclass(frozen=True)
class Filter:
    """An inclusive range over 1-based positions.

    Either bound may be `None`, meaning the range is unbounded on that side.
    """

    lower: int | None = None
    upper: int | None = None

    def __post_init__(self) -> None:
        """Validate the bounds so that every `Filter` in existence is well formed."""
        for bound in (self.lower, self.upper):
            if bound is not None and bound < 1:
                raise FilterParseError(str(bound), "positions are numbered from 1")

        if self.lower is not None and self.upper is not None and self.lower > self.upper:
            raise FilterRangeError(f"{self.lower}:{self.upper}", "lower bound is greater than upper bound")

    @classmethod
    def parse(cls, expression: str) -> "Filter":
        """Parse a single index expression.

        Args:
            expression (str): One of `N`, `N:M`, `N:`, `:M` or `:`.

        Returns:
            Filter: The normalized range.

        Raises:
            FilterParseError: If the expression is malformed or a bound is zero.
            FilterRangeError: If the expression is `N:M` with `N > M`.
        """
        if _EXACT.fullmatch(expression):
            position = _to_position(expression, expression)
            return cls(lower=position, upper=position)

        match = _RANGE.fullmatch(expression)
        if match is None:
            raise FilterParseError(expression, "expected N, N:M, N:, :M or :")

        lower_str, upper_str = match.groups()
        lower = _to_position(lower_str, expression) if lower_str else None
        upper = _to_position(upper_str, expression) if upper_str else None

        if lower is not None and upper is not None and lower > upper:
            raise FilterRangeError(expression, f"range start {lower} is greater than range end {upper}")

        return cls(lower=lower, upper=upper)

    def matches(self, position: int) -> bool:
        """Return True if `position` falls within this inclusive range."""
        return (self.lower is None or position >= self.lower) and (self.upper is None or position <= self.upper)

    def __str__(self) -> str:
        if self.lower is not None and self.lower == self.upper:
            return str(self.lower)
        lower = "" if self.lower is None else str(self.lower)
        upper = "" if self.upper is None else str(self.upper)
        return f"{lower}:{upper}"


def _to_position(value: str, expression: str) -> int:
    """Convert one bound of `expression` to a 1-based position."""
    position = int(value)
    if position == 0:
        raise FilterParseError(expression, "positions are numbered from 1")
    return position


class FilterSet:
    """The union of zero or more filters.

    Filters are kept in the order given, without merging or deduplication, so
    overlapping ranges are allowed. An empty set matches nothing through `apply`;
    callers wanting "select everything" for an empty set should go through
    `slices.selection.selection_for`.
    """

    def __init__(self, filters: Iterable[Filter] = ()) -> None:
        """Take ownership of `filters`."""
        self._filters: tuple[Filter, ...] = tuple(filters)

    @classmethod
    def parse(cls, expressions: Iterable[str]) -> "FilterSet":
        """Parse every expression in order, stopping at the first invalid one."""
        return cls(Filter.parse(expression) for expression in expressions)

    def is_empty(self) -> bool:
        """Return True if no filters were supplied."""
        return not self._filters

    def apply(self, position: int) -> bool:
        """Return True if any filter matches the 1-based `position`."""
        return any(f.matches(position) for f in self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._filters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterSet):
            return NotImplemented
        return self._filters == other._filters

    def __hash__(self) -> int:
        return hash(self._filters)

    def __repr__(self) -> str:
        return f"FilterSet({list(self._filters)!r})"

    def __str__(self) -> str:
        return ",".join(str(f) for f in self._filters)
