"""
Test fixtures and helpers for the reader tests.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from malreader.environment import ReaderEnvironment
from malreader.parser import read_str
from malreader.printer import render


@pytest.fixture
def env():
    """Environment with the default reader-macro table."""
    return ReaderEnvironment()


def read(text: str, env=None):
    """Read one form from text."""
    return read_str(text, env)


def reprint(text: str, env=None) -> str:
    """Read one form from text and render it back."""
    return render(read_str(text, env))


def feed(lines):
    """Build an input function that returns lines, then signals EOF."""
    remaining = iter(lines)

    def input_func(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return input_func
