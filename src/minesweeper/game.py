"""
Game module for Minesweeper.

Wraps a Grid with the overall progress of a single game. A game is
never reset in place; restarting means building a new Game.
"""
import logging
import random
from enum import Enum, auto
from typing import Optional

from .config import GridConfig
from .grid import Grid

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Progress(Enum):
    """Possible outcomes of a game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single Minesweeper game.

    Owns its grid exclusively. Progress is recomputed by
    update_progress() after every action; WON and LOST are final.
    """

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        grid: Optional[Grid] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            config: Grid configuration (default: 10x10 with 10 mines).
            rng: Random source for mine placement.
            seed: Seed for mine placement, used when rng is None.
            grid: Prebuilt grid to play on instead of a random one.
        """
        self._grid = grid if grid is not None else Grid(config, rng=rng, seed=seed)
        self._progress = Progress.IN_PROGRESS

    @classmethod
    def new(
        cls,
        config: Optional[GridConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Game":
        """Construct a fresh randomized game."""
        return cls(config, rng=rng, seed=seed)

    # ========================================================================
    # Progress Evaluation
    # ========================================================================

    def update_progress(self) -> Progress:
        """
        Recompute progress from the grid.

        Any exposed mine loses the game; exposing every safe cell wins
        it. Once the game is won or lost the outcome no longer changes.

        Returns:
            The progress after the update.
        """
        if self._progress != Progress.IN_PROGRESS:
            return self._progress

        exposed_safe = 0
        mine_exposed = False
        for cell in self._grid.cells():
            if not cell.is_exposed:
                continue
            if cell.is_mine:
                mine_exposed = True
                break
            exposed_safe += 1

        if mine_exposed:
            self._set_progress(Progress.LOST)
        elif exposed_safe == self._grid.config.safe_cells:
            self._set_progress(Progress.WON)
        return self._progress

    def _set_progress(self, progress: Progress) -> None:
        logger.info("Game over: %s", progress.name)
        self._progress = progress

    # ========================================================================
    # Game Actions
    # ========================================================================

    def expose(self, row: int, col: int) -> int:
        """
        Expose a cell and update progress.

        Ignored once the game is over.

        Returns:
            Number of cells newly exposed.
        """
        if not self.is_playing:
            logger.debug("Ignoring expose at (%d, %d) after game over", row, col)
            return 0
        exposed = self._grid.expose_cell(row, col)
        self.update_progress()
        return exposed

    def toggle_seal(self, row: int, col: int) -> bool:
        """
        Toggle the seal on a cell and update progress.

        Ignored once the game is over.

        Returns:
            True if the cell changed state.
        """
        if not self.is_playing:
            logger.debug("Ignoring seal at (%d, %d) after game over", row, col)
            return False
        changed = self._grid.toggle_seal(row, col)
        self.update_progress()
        return changed

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def grid(self) -> Grid:
        """The grid being played."""
        return self._grid

    @property
    def progress(self) -> Progress:
        """Current outcome of the game."""
        return self._progress

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._progress == Progress.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._progress == Progress.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._progress == Progress.LOST
