"""
Grid configuration for the Minesweeper core.

The engine has exactly two settings: the side length of the square
grid and the number of mines placed on it.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class GridConfig:
    """
    Configuration for a square Minesweeper grid.

    Attributes:
        size: Number of rows (and columns).
        num_mines: Total mines to place.
    """

    size: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Grid size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the grid."""
        return self.size * self.size

    @property
    def safe_cells(self) -> int:
        """Number of cells that do not hold a mine."""
        return self.total_cells - self.num_mines


DEFAULT_CONFIG = GridConfig()
