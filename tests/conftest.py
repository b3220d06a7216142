"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from gambit.core.board import Board


@pytest.fixture
def starting_board() -> Board:
    return Board.initial()
