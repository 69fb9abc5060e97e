"""
Exceptions raised by the Minesweeper core.

Contract violations signal a bug in the caller (bad coordinates,
misuse of construction-time setup). They are never recovered from
inside the engine.
"""


class ContractViolation(RuntimeError):
    """Base class for caller bugs detected by the engine."""


class OutOfBoundsError(ContractViolation, IndexError):
    """Raised when a (row, col) position lies outside the grid."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {size}x{size} grid"
        )
        self.row = row
        self.col = col
        self.size = size


class CellSetupError(ContractViolation):
    """Raised when mine placement or adjacency counting is misused."""
