"""Pytest configuration for the WHILE interpreter tests."""

from pathlib import Path

import pytest

PROGRAMS_DIR = Path(__file__).parent.parent / "programs"


@pytest.fixture
def programs_dir():
    return PROGRAMS_DIR
