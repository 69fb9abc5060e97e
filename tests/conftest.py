"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Cell, Game, Grid, GridConfig


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def default_grid() -> Grid:
    """Create a seeded default 10x10 grid with 10 mines."""
    return Grid(seed=1234)


@pytest.fixture
def empty_grid() -> Grid:
    """Create a 10x10 grid with no mines for cascade testing."""
    return Grid.from_mines([], GridConfig(10, 0))


@pytest.fixture
def center_mine_grid() -> Grid:
    """Create a 10x10 grid with a single mine at (1, 1)."""
    return Grid.from_mines([(1, 1)], GridConfig(10, 1))


@pytest.fixture
def corner_mine_grid() -> Grid:
    """Create a 10x10 grid with a single mine at (0, 0)."""
    return Grid.from_mines([(0, 0)], GridConfig(10, 1))


@pytest.fixture
def small_grid() -> Grid:
    """
    Create a 3x3 grid with a mine in the top-right corner.

    Layout:
        0 1 *
        0 1 1
        0 0 0
    """
    return Grid.from_mines([(0, 2)], GridConfig(3, 1))


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def small_game(small_grid: Grid) -> Game:
    """Create a game on the 3x3 single-mine grid."""
    return Game(grid=small_grid)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(42)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    cell = Cell()
    cell.place_mine()
    return cell


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a cell with three adjacent mines."""
    cell = Cell()
    for _ in range(3):
        cell.add_adjacent_mine()
    return cell
