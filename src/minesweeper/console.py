"""
Console adapter for playing Minesweeper in a terminal.

Maps typed commands onto the core: expose, toggle seal, restart and
quit. Translating input into grid coordinates is done here, not in
the engine.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from .config import DEFAULT_CONFIG, GridConfig
from .game import Game
from .render import render_grid, render_progress

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands:\n"
    "  e ROW COL   expose a cell\n"
    "  s ROW COL   toggle the seal on a cell\n"
    "  r           restart with a new game\n"
    "  q           quit"
)


@dataclass(frozen=True)
class Command:
    """A parsed console command."""

    action: str
    row: int = 0
    col: int = 0


def parse_command(line: str) -> Optional[Command]:
    """
    Parse a line of input into a command.

    Args:
        line: Raw input, e.g. "e 3 4".

    Returns:
        Parsed command, or None if the line is not a valid command.
    """
    parts = line.strip().lower().split()
    if not parts:
        return None

    action = parts[0]
    if action in ("r", "q", "h") and len(parts) == 1:
        return Command(action)
    if action in ("e", "s") and len(parts) == 3:
        try:
            return Command(action, int(parts[1]), int(parts[2]))
        except ValueError:
            return None
    return None


class ConsoleSession:
    """
    Interactive game session driven by text commands.

    Restarting discards the current game and builds a new one.
    """

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        seed: Optional[int] = None,
        output: Callable[[str], None] = print,
    ) -> None:
        """
        Initialize the session.

        Args:
            config: Grid configuration for every game in the session.
            seed: Seed for the session's mine placement.
            output: Function receiving text to display.
        """
        self.config = config or DEFAULT_CONFIG
        self._rng = random.Random(seed)
        self._output = output
        self.game = Game.new(self.config, rng=self._rng)

    def restart(self) -> None:
        """Replace the current game with a fresh one."""
        self.game = Game.new(self.config, rng=self._rng)
        logger.debug("Started a new game")

    def handle(self, line: str) -> bool:
        """
        Apply one line of input.

        Args:
            line: Raw input line.

        Returns:
            False when the player asked to quit, True otherwise.
        """
        command = parse_command(line)
        if command is None:
            self._output("Unknown command. Type 'h' for help.")
            return True

        if command.action == "q":
            return False
        if command.action == "h":
            self._output(HELP_TEXT)
            return True
        if command.action == "r":
            self.restart()
        elif not self.game.grid.is_valid_position(command.row, command.col):
            size = self.config.size
            self._output(f"Row and column must be between 0 and {size - 1}.")
            return True
        elif not self.game.is_playing:
            self._output("Game over. Type 'r' to restart.")
            return True
        elif command.action == "e":
            self.game.grid.expose_cell(command.row, command.col)
        else:
            self.game.grid.toggle_seal(command.row, command.col)

        self.game.update_progress()
        self.show()
        return True

    def show(self) -> None:
        """Display the grid and, when finished, the outcome."""
        self._output(render_grid(self.game, headers=True))
        banner = render_progress(self.game)
        if banner:
            self._output(banner)

    def run(self, read: Callable[[str], str] = input) -> None:
        """
        Play until the player quits or input ends.

        Args:
            read: Function prompting for and returning one input line.
        """
        self._output(HELP_TEXT)
        self.show()
        while True:
            try:
                line = read("> ")
            except EOFError:
                break
            if not self.handle(line):
                break
