"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(name="fixtures_dir")
def fixtures_dir_fixture() -> Path:
    """Directory holding the sample input files."""
    return Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(name="input_path")
def input_path_fixture(fixtures_dir) -> Path:
    """A `docker images` style listing: a header plus four rows, the last without a newline."""
    return fixtures_dir / "input.txt"


@pytest.fixture(name="input_text")
def input_text_fixture(input_path) -> str:
    with input_path.open("r", encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop any sinks a test added so later tests never write to a closed stream."""
    yield
    logger.remove()
