"""Configuration for a single slicer invocation."""

import os

from pydantic import BaseModel, Field, field_validator

from slices.filter import FilterSet
from slices.selection import Selection, selection_for

LOG_LEVEL_ENV = "SLICES_LOG_LEVEL"

# The levels loguru ships with.
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _default_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, "WARNING")


class SlicerConfig(BaseModel):
    """Validated options shared by `rowslc` and `colslc`."""

    filepath: str | None = None
    filters: list[str] = Field(default_factory=list)
    log_level: str = Field(default_factory=_default_log_level, validate_default=True)

    @field_validator("filepath")
    @classmethod
    def normalize_filepath(cls, value: str | None) -> str | None:
        """Map `-` and blank paths to None, which means standard input."""
        if value is None or value.strip() in ("", "-"):
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Ensure the log level is one loguru understands."""
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            msg = f"unknown log level '{value}', expected one of {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return level

    @property
    def uses_stdin(self) -> bool:
        """True if input is read from standard input."""
        return self.filepath is None

    def filter_set(self) -> FilterSet:
        """Parse the filter expressions.

        Raises:
            InvalidFilter: For the first expression that fails to parse.
        """
        return FilterSet.parse(self.filters)

    def selection(self) -> Selection:
        """Return the selection mode for the configured filters."""
        return selection_for(self.filter_set())
