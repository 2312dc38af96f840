"""Shared fixtures."""

import pytest

from ans_visualizer.models import Symbol, parse_alphabet


@pytest.fixture
def abc():
    """A:3, B:2, C:1 (L = 6), pattern A A A B B C."""
    return parse_alphabet("A:3,B:2,C:1")


@pytest.fixture
def single():
    """One symbol; every state is its own predecessor."""
    return (Symbol("A", 4, "#64B5F6"),)
