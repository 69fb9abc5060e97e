"""
Minesweeper game module.

Provides the core rules engine (cells, grid, game progress) and thin
adapters for terminals and Gymnasium.
"""
from .cell import Cell, CellState
from .config import GridConfig, DEFAULT_CONFIG
from .errors import ContractViolation, OutOfBoundsError, CellSetupError
from .grid import Grid, CellView
from .game import Game, Progress
from .render import render_grid, render_progress
from .console import ConsoleSession, parse_command
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "GridConfig",
    "DEFAULT_CONFIG",
    "ContractViolation",
    "OutOfBoundsError",
    "CellSetupError",
    "Grid",
    "CellView",
    "Game",
    "Progress",
    "render_grid",
    "render_progress",
    "ConsoleSession",
    "parse_command",
    "MinesweeperEnv",
]
