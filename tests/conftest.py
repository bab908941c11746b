"""Shared test fixtures for draughtlab."""

import pytest

from draughtlab.board import Board


@pytest.fixture
def board():
    """An empty 10x10 board."""
    return Board.empty(10)
