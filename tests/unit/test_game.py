"""
Unit tests for Game class.

Tests progress evaluation, terminal outcomes and the guarded
convenience actions.
"""
import random

import pytest
from minesweeper import Game, Grid, GridConfig, OutOfBoundsError, Progress


# ============================================================================
# Game Initialization Tests
# ============================================================================

class TestGameInitialization:
    """Test game creation."""

    def test_new_game_is_in_progress(self) -> None:
        """A fresh game has not been decided yet."""
        game = Game.new(seed=3)
        assert game.progress == Progress.IN_PROGRESS
        assert game.is_playing is True

    def test_new_game_uses_config(self) -> None:
        """The grid follows the requested configuration."""
        game = Game.new(GridConfig(6, 4), seed=3)
        assert game.grid.size == 6
        assert game.grid.num_mines == 4

    def test_update_on_fresh_game_stays_in_progress(self) -> None:
        """Nothing exposed means nothing decided."""
        game = Game.new(seed=3)
        assert game.update_progress() == Progress.IN_PROGRESS

    def test_seeded_games_match(self, seeded_rng: random.Random) -> None:
        """Injected random sources make games reproducible."""
        first = Game.new(rng=seeded_rng)
        second = Game.new(rng=random.Random(42))
        assert [c.is_mine for c in first.grid.cells()] == [
            c.is_mine for c in second.grid.cells()
        ]


# ============================================================================
# Progress Evaluation Tests
# ============================================================================

class TestUpdateProgress:
    """Test win and loss detection."""

    def test_empty_grid_single_expose_wins(self, empty_grid: Grid) -> None:
        """With no mines, exposing one cell wins the game."""
        game = Game(grid=empty_grid)
        game.grid.expose_cell(0, 0)
        assert game.update_progress() == Progress.WON
        assert game.is_won is True

    def test_exposing_mine_loses(self, corner_mine_grid: Grid) -> None:
        """Exposing a mine loses the game."""
        game = Game(grid=corner_mine_grid)
        game.grid.expose_cell(0, 0)
        assert game.update_progress() == Progress.LOST
        assert game.is_lost is True

    def test_partial_reveal_stays_in_progress(self, small_game: Game) -> None:
        """Some safe cells exposed is not yet a win."""
        small_game.grid.expose_cell(0, 1)
        assert small_game.update_progress() == Progress.IN_PROGRESS

    def test_cascade_that_opens_every_safe_cell_wins(
        self, small_game: Game
    ) -> None:
        """A single cascade can win the game."""
        small_game.grid.expose_cell(2, 0)
        assert small_game.update_progress() == Progress.WON

    def test_loss_takes_priority_over_win(self, small_game: Game) -> None:
        """A mine exposed alongside every safe cell is still a loss."""
        small_game.grid.expose_cell(2, 0)
        small_game.grid.expose_cell(0, 2)
        assert small_game.update_progress() == Progress.LOST

    def test_seals_do_not_count_toward_win(self, small_game: Game) -> None:
        """Sealing the mine is not required and does not win."""
        small_game.grid.toggle_seal(0, 2)
        assert small_game.update_progress() == Progress.IN_PROGRESS


# ============================================================================
# Terminal Outcome Tests
# ============================================================================

class TestTerminalProgress:
    """Test that WON and LOST never change."""

    def test_won_is_sticky(self, small_game: Game) -> None:
        """Exposing a mine after winning does not turn it into a loss."""
        small_game.grid.expose_cell(2, 0)
        small_game.update_progress()
        small_game.grid.expose_cell(0, 2)
        assert small_game.update_progress() == Progress.WON

    def test_lost_is_sticky(self, corner_mine_grid: Grid) -> None:
        """Exposing the rest of the grid after losing stays lost."""
        game = Game(grid=corner_mine_grid)
        game.grid.expose_cell(0, 0)
        game.update_progress()
        for cell in list(game.grid.cells()):
            if not cell.is_mine:
                game.grid.expose_cell(cell.row, cell.col)
        assert game.update_progress() == Progress.LOST


# ============================================================================
# Convenience Action Tests
# ============================================================================

class TestGameActions:
    """Test expose and toggle_seal on the game."""

    def test_expose_updates_progress(self, corner_mine_grid: Grid) -> None:
        """Game.expose recomputes progress."""
        game = Game(grid=corner_mine_grid)
        assert game.expose(0, 0) == 1
        assert game.is_lost is True

    def test_actions_ignored_after_game_over(self, small_game: Game) -> None:
        """Once decided, the game rejects further actions."""
        small_game.expose(0, 2)
        assert small_game.is_lost
        assert small_game.expose(2, 0) == 0
        assert small_game.toggle_seal(2, 0) is False
        assert small_game.grid.get_cell(2, 0).is_hidden

    def test_toggle_seal_round_trip(self, small_game: Game) -> None:
        """Game.toggle_seal seals and unseals."""
        assert small_game.toggle_seal(2, 2) is True
        assert small_game.grid.get_cell(2, 2).is_sealed
        assert small_game.toggle_seal(2, 2) is True
        assert small_game.grid.get_cell(2, 2).is_hidden
        assert small_game.is_playing

    def test_expose_while_sealed_is_noop(self, small_game: Game) -> None:
        """A sealed cell is protected from exposure."""
        small_game.toggle_seal(2, 2)
        assert small_game.expose(2, 2) == 0
        assert small_game.grid.get_cell(2, 2).is_sealed

    def test_out_of_bounds_action_raises(self, small_game: Game) -> None:
        """Bad coordinates propagate as contract violations."""
        with pytest.raises(OutOfBoundsError):
            small_game.expose(3, 0)
        assert small_game.is_playing


# ============================================================================
# Full Game Scenarios
# ============================================================================

class TestScenarios:
    """Play complete games through the public interface."""

    @pytest.mark.parametrize("seed", range(5))
    def test_exposing_all_safe_cells_wins(self, seed: int) -> None:
        """Exposing every safe cell of a random grid wins."""
        game = Game.new(seed=seed)
        for cell in list(game.grid.cells()):
            if not cell.is_mine:
                game.expose(cell.row, cell.col)
        assert game.is_won

    @pytest.mark.parametrize("seed", range(5))
    def test_exposing_any_mine_loses(self, seed: int) -> None:
        """Exposing a mine of a random grid loses."""
        game = Game.new(seed=seed)
        mine = next(cell for cell in game.grid.cells() if cell.is_mine)
        game.expose(mine.row, mine.col)
        assert game.is_lost
