"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface on top of Game.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import GridConfig, DEFAULT_CONFIG
from .cell import CellState
from .game import Game
from .render import render_grid


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = sealed cell
        - 0-8 = exposed cell with adjacent mine count
        - 9 = exposed mine

    Actions:
        Discrete action space of size 2 * size * size.
        Action i < size * size exposes cell (i // size, i % size);
        the remaining actions toggle the seal on the same cells.

    Rewards:
        - +1 for exposing a safe cell
        - +10 for winning the game
        - -10 for exposing a mine
        - 0 for toggling a seal
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Grid configuration (default: 10x10 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or DEFAULT_CONFIG
        self.render_mode = render_mode
        self.game = Game(self.config)

        size = self.config.size
        self._num_cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(size, size),
            dtype=np.int8,
        )

        # Expose actions first, seal toggles second
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new episode with a brand-new game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        grid_seed = int(self.np_random.integers(2**32))
        self.game = Game(self.config, seed=grid_seed)
        self._steps = 0

        return self.game.grid.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index (see class docstring).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}")

        self._steps += 1
        reward = self._apply_action(int(action))

        observation = self.game.grid.get_observation()
        terminated = not self.game.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_seal, row, col)."""
        is_seal = action >= self._num_cells
        row, col = divmod(action % self._num_cells, self.config.size)
        return is_seal, row, col

    def _apply_action(self, action: int) -> float:
        """
        Apply an action to the game and compute its reward.

        Args:
            action: Flat action index.

        Returns:
            Reward value.
        """
        is_seal, row, col = self._action_to_position(action)

        if is_seal:
            return 0.0 if self.game.toggle_seal(row, col) else -0.1

        if not self.game.expose(row, col):
            return -0.1
        if self.game.is_won:
            return 10.0
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        grid = self.game.grid
        return {
            "steps": self._steps,
            "exposed": grid.count_state(CellState.EXPOSED),
            "sealed": grid.count_state(CellState.SEALED),
            "total_safe": self.config.safe_cells,
            "progress": self.game.progress.name,
        }

    def render(self) -> Optional[str]:
        """Render the current grid state."""
        if self.render_mode == "ansi":
            return render_grid(self.game)
        if self.render_mode == "human":
            print(render_grid(self.game))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the game.

        Returns:
            Boolean array where True = valid action.
        """
        obs = self.game.grid.get_observation().flatten()
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.game.is_playing:
            return mask
        mask[: self._num_cells] = obs == -1
        mask[self._num_cells:] = obs < 0
        return mask
