"""
Cell module for Minesweeper game.

Represents individual cells on the grid with their state
(hidden/sealed/exposed) and content (mine/number).
"""
from dataclasses import dataclass, field
from enum import Enum, auto

from .errors import CellSetupError


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    SEALED = auto()
    EXPOSED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Mine placement and adjacency counting happen only while the owning
    grid is being built; afterwards only the state transitions are used.

    Attributes:
        state: Current visual state (hidden, sealed, or exposed).
    """

    state: CellState = CellState.HIDDEN
    _is_mine: bool = field(default=False, init=False)
    _adjacent_mines: int = field(default=0, init=False)

    # ========================================================================
    # Construction-time Setup
    # ========================================================================

    def place_mine(self) -> None:
        """
        Turn this cell into a mine.

        Raises:
            CellSetupError: If the cell already counts adjacent mines.
        """
        if self._adjacent_mines != 0:
            raise CellSetupError(
                "Cannot place a mine on a cell with a nonzero adjacent count"
            )
        self._is_mine = True

    def add_adjacent_mine(self) -> None:
        """
        Increment the adjacent mine count.

        Raises:
            CellSetupError: If the cell is itself a mine.
        """
        if self._is_mine:
            raise CellSetupError("Cannot count adjacent mines on a mine cell")
        self._adjacent_mines += 1

    # ========================================================================
    # State Transitions
    # ========================================================================

    def expose(self) -> bool:
        """
        Expose this cell.

        Returns:
            True if the cell was hidden or sealed, False if already exposed.
        """
        if self.state == CellState.EXPOSED:
            return False
        self.state = CellState.EXPOSED
        return True

    def seal(self) -> bool:
        """
        Seal this cell as a suspected mine.

        Returns:
            True if the cell was hidden, False otherwise.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.SEALED
        return True

    def unseal(self) -> bool:
        """
        Remove the seal from this cell.

        Returns:
            True if the cell was sealed, False otherwise.
        """
        if self.state != CellState.SEALED:
            return False
        self.state = CellState.HIDDEN
        return True

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self._is_mine

    @property
    def adjacent_mines(self) -> int:
        """Count of mines in neighboring cells (0-8)."""
        return self._adjacent_mines

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

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Hidden cell
            -2: Sealed cell
            0-8: Exposed cell with adjacent mine count
            9: Exposed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.SEALED:
            return -2
        if self._is_mine:
            return 9
        return self._adjacent_mines
