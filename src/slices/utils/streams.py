"""Helpers for choosing and managing the input stream."""

import sys
from collections.abc import Generator, Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger


def iter_lines(raw: Iterable[bytes]) -> Iterator[str]:
    """Decode binary lines as UTF-8, keeping their terminators.

    Binary iteration ends a line at `\\n` only, so a lone `\\r` stays inside
    the line and `\\r\\n` reaches the output untouched.

    Raises:
        UnicodeDecodeError: If a line is not valid UTF-8.
    """
    for line in raw:
        yield line.decode("utf-8")


@contextmanager
def open_input(filepath: str | None) -> Generator[Iterator[str]]:
    """Context manager yielding the input lines, terminators included.

    If `filepath` is None standard input is read and left open. Otherwise the
    file is read and closed when the context exits. Both are decoded as strict
    UTF-8 and split on `\\n` only.

    Args:
        filepath (str | None): The path to read, or None for standard input.

    Raises:
        OSError: If the file cannot be opened.
    """
    if filepath is None:
        logger.debug("Reading from standard input")
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            # Already a decoded in-memory stream, e.g. when stdin is replaced.
            yield iter(sys.stdin)
        else:
            yield iter_lines(buffer)
        return

    path = Path(filepath)
    logger.debug(f"Reading from {path}")
    with path.open("rb") as f:
        yield iter_lines(f)
