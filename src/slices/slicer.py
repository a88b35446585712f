"""Streaming row and column slicers."""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TextIO

from loguru import logger

from slices.selection import SelectAll, Selection

# Runs of non-whitespace. The ASCII separators \x1c-\x1f count as field text,
# although `str.isspace` treats them as whitespace.
_FIELD = re.compile(r"(?:[^\s]|[\x1c-\x1f])+")


class Slicer(ABC):
    """Abstract base class for a single forward pass over a line stream.

    Subclasses decide what, if anything, to emit for each line. Lines are
    expected to carry their original terminators, as produced by
    `slices.utils.open_input`.
    """

    def __init__(self, reader: Iterable[str], selection: Selection) -> None:
        """Constructor for the slicer.

        Args:
            reader (Iterable[str]): The input lines, terminators included.
            selection (Selection): Which positions to keep.
        """
        self.reader = reader
        self.selection = selection

    @abstractmethod
    def slice_line(self, index: int, line: str) -> str | None:
        """Return the text to write for the `index`-th (1-based) line, or None to skip it."""

    def slice(self, writer: TextIO) -> int:
        """Stream every input line through `slice_line` into `writer`.

        The writer is flushed on every exit path, including read or write errors.

        Returns:
            int: The number of lines read.
        """
        count = 0
        try:
            for count, line in enumerate(self.reader, start=1):
                out = self.slice_line(count, line)
                if out is not None:
                    writer.write(out)
        finally:
            writer.flush()

        logger.debug(f"{type(self).__name__} processed {count} lines")
        return count


class RowSlicer(Slicer):
    """Emit whole lines, unmodified, whose line number is selected."""

    def slice_line(self, index: int, line: str) -> str | None:
        """Keep the line verbatim if its number is selected."""
        if self.selection.selects(index):
            return line
        return None


class ColSlicer(Slicer):
    """Emit the selected whitespace-delimited fields of every line.

    Fields are split on runs of whitespace only, so a column such as
    `2 days ago` counts as three fields. Selected fields are joined with a
    single space and terminated with a newline; with `SelectAll` the line is
    passed through untouched instead.
    """

    def slice_line(self, index: int, line: str) -> str | None:  # noqa: ARG002
        """Return the selected fields of `line`."""
        if isinstance(self.selection, SelectAll):
            return line

        fields = [
            field for position, field in enumerate(_FIELD.findall(line), start=1) if self.selection.selects(position)
        ]
        return " ".join(fields) + "\n"
