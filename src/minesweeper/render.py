"""
Text rendering for Minesweeper games.
"""
from .game import Game, Progress

_SYMBOLS = {-1: ".", -2: "F", 9: "*", 0: " "}

_BANNERS = {
    Progress.LOST: "YOU LOST",
    Progress.WON: "YOU WON!",
    Progress.IN_PROGRESS: "",
}


def render_grid(game: Game, headers: bool = False) -> str:
    """
    Render the grid as ASCII text, one line per row.

    Args:
        game: Game whose grid to draw.
        headers: Prefix rows and columns with their indices.

    Returns:
        Multi-line string.
    """
    obs = game.grid.get_observation()
    size = game.grid.size
    width = len(str(size - 1))
    lines = []

    if headers:
        columns = " ".join(str(col).rjust(width) for col in range(size))
        lines.append(" " * (width + 1) + columns)

    for row in range(size):
        symbols = [
            _SYMBOLS.get(int(val), str(val)).rjust(width) for val in obs[row]
        ]
        row_str = " ".join(symbols) + " "
        if headers:
            row_str = str(row).rjust(width) + " " + row_str
        lines.append(row_str)

    return "\n".join(lines)


def render_progress(game: Game) -> str:
    """Banner for a finished game, empty while still playing."""
    return _BANNERS[game.progress]
