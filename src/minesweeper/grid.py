"""
Grid module for Minesweeper game.

Implements the fixed-size square grid: mine placement, adjacency
counts, cascading reveal and seal toggling.
"""
import logging
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .config import DEFAULT_CONFIG, GridConfig
from .errors import OutOfBoundsError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Read-only Cell Snapshot
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Immutable snapshot of a cell, handed out instead of the cell itself.

    Attributes:
        row: Row index.
        col: Column index.
        state: Visual state at snapshot time.
        is_mine: Whether the cell holds a mine.
        adjacent_mines: Count of mines in neighboring cells.
    """

    row: int
    col: int
    state: CellState
    is_mine: bool
    adjacent_mines: int

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_sealed(self) -> bool:
        """Check if cell is sealed."""
        return self.state == CellState.SEALED

    @property
    def is_exposed(self) -> bool:
        """Check if cell is exposed."""
        return self.state == CellState.EXPOSED


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Minesweeper grid.

    Owns a flat, row-major buffer of cells. Mines are placed and
    adjacency counts computed once, in the constructor; afterwards only
    expose_cell and toggle_seal change anything.
    """

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Build a grid with randomly placed mines.

        Args:
            config: Grid configuration (default: 10x10 with 10 mines).
            rng: Random source for mine placement.
            seed: Seed for a fresh random source, used when rng is None.
        """
        self.config = config or DEFAULT_CONFIG
        self._cells = self._init_cells()
        self._place_mines(rng or random.Random(seed))
        self._calculate_adjacent_mines()

    @classmethod
    def from_mines(
        cls,
        positions: Iterable[Position],
        config: Optional[GridConfig] = None,
    ) -> "Grid":
        """
        Build a grid with mines at explicit positions.

        Args:
            positions: (row, col) positions of every mine.
            config: Grid configuration; defaults to the standard size with
                as many mines as positions given.

        Returns:
            Grid whose mines sit exactly at the given positions.

        Raises:
            ValueError: If positions repeat, fall outside the grid, or do
                not match config.num_mines.
        """
        positions = list(positions)
        if config is None:
            config = GridConfig(DEFAULT_CONFIG.size, len(positions))
        if len(set(positions)) != len(positions):
            raise ValueError("Mine positions must be unique")
        if len(positions) != config.num_mines:
            raise ValueError(
                f"Expected {config.num_mines} mine positions, "
                f"got {len(positions)}"
            )
        for row, col in positions:
            if not (0 <= row < config.size and 0 <= col < config.size):
                raise ValueError(f"Mine position ({row}, {col}) out of bounds")

        grid = cls.__new__(cls)
        grid.config = config
        grid._cells = grid._init_cells()
        for row, col in positions:
            grid._cells[row * config.size + col].place_mine()
        grid._calculate_adjacent_mines()
        return grid

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_cells(self) -> List[Cell]:
        """Create a flat buffer of hidden, empty cells."""
        return [Cell() for _ in range(self.config.total_cells)]

    def _place_mines(self, rng: random.Random) -> None:
        """Place mines by rejection sampling until enough are distinct."""
        size = self.config.size
        placed = 0
        draws = 0
        while placed < self.config.num_mines:
            draws += 1
            cell = self._cells[rng.randrange(size) * size + rng.randrange(size)]
            if not cell.is_mine:
                cell.place_mine()
                placed += 1
        logger.debug("Placed %d mines in %d draws", placed, draws)

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        size = self.config.size
        for index, cell in enumerate(self._cells):
            if cell.is_mine:
                continue
            row, col = divmod(index, size)
            for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                if self._cells[neighbor_row * size + neighbor_col].is_mine:
                    cell.add_adjacent_mine()

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> Iterator[Position]:
        """Yield in-bounds positions of the up-to-8 neighbors of a cell."""
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    yield new_row, new_col

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    def _index(self, row: int, col: int) -> int:
        """Flat buffer index of a position, raising if out of bounds."""
        if not self.is_valid_position(row, col):
            raise OutOfBoundsError(row, col, self.config.size)
        return row * self.config.size + col

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def expose_cell(self, row: int, col: int) -> int:
        """
        Expose the cell at the given position.

        A hidden zero-count cell cascades to its neighbors; sealed and
        already exposed cells stop the cascade, and a mine never
        cascades.

        Args:
            row: Row index to expose.
            col: Column index to expose.

        Returns:
            Number of cells newly exposed (0 if nothing changed).

        Raises:
            OutOfBoundsError: If the position is outside the grid.
        """
        start = self._index(row, col)
        if not self._cells[start].is_hidden:
            return 0

        size = self.config.size
        exposed = 0
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            cell = self._cells[current_row * size + current_col]
            if not cell.is_hidden:
                continue
            cell.expose()
            exposed += 1
            if cell.is_mine or cell.adjacent_mines != 0:
                continue
            pending.extend(self._get_neighbors(current_row, current_col))

        logger.debug("Exposing (%d, %d) exposed %d cells", row, col, exposed)
        return exposed

    def toggle_seal(self, row: int, col: int) -> bool:
        """
        Toggle the seal on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the cell changed state, False if it is exposed.

        Raises:
            OutOfBoundsError: If the position is outside the grid.
        """
        cell = self._cells[self._index(row, col)]
        if cell.is_sealed:
            return cell.unseal()
        return cell.seal()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        """Side length of the grid."""
        return self.config.size

    @property
    def num_mines(self) -> int:
        """Number of mines on the grid."""
        return self.config.num_mines

    def get_cell(self, row: int, col: int) -> CellView:
        """
        Get a read-only snapshot of the cell at a position.

        Raises:
            OutOfBoundsError: If the position is outside the grid.
        """
        return self._view(self._index(row, col))

    def cells(self) -> Iterator[CellView]:
        """Iterate over snapshots of every cell in row-major order."""
        for index in range(len(self._cells)):
            yield self._view(index)

    def _view(self, index: int) -> CellView:
        cell = self._cells[index]
        row, col = divmod(index, self.config.size)
        return CellView(
            row=row,
            col=col,
            state=cell.state,
            is_mine=cell.is_mine,
            adjacent_mines=cell.adjacent_mines,
        )

    def count_state(self, state: CellState) -> int:
        """Count cells currently in the given state."""
        return sum(1 for cell in self._cells if cell.state == state)

    def get_observation(self) -> np.ndarray:
        """
        Get grid state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = sealed
                0-8 = exposed with adjacent count
                9 = exposed mine
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self._cells),
            dtype=np.int8,
            count=len(self._cells),
        )
        return obs.reshape(self.config.size, self.config.size)

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of hidden cells that can still be exposed.

        Returns:
            List of (row, col) positions.
        """
        return [
            divmod(index, self.config.size)
            for index, cell in enumerate(self._cells)
            if cell.is_hidden
        ]
