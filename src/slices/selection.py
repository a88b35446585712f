"""Selection modes chosen once per invocation."""

from dataclasses import dataclass

from slices.filter import FilterSet


@dataclass(frozen=True)
class SelectAll:
    """Every position is selected. Used when no filters were given."""

    def selects(self, position: int) -> bool:  # noqa: ARG002
        """Always True."""
        return True


@dataclass(frozen=True)
class SelectMatching:
    """Only positions matched by at least one filter are selected."""

    filters: FilterSet

    def selects(self, position: int) -> bool:
        """Return True if `position` is in the union of `filters`."""
        return self.filters.apply(position)


Selection = SelectAll | SelectMatching


def selection_for(filters: FilterSet) -> Selection:
    """Return `SelectAll` for an empty filter set, otherwise `SelectMatching`."""
    if filters.is_empty():
        return SelectAll()
    return SelectMatching(filters)
