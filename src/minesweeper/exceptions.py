"""
Exceptions raised by the Minesweeper engine.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(MinesweeperError, ValueError):
    """Board dimensions or mine count cannot produce a playable board."""


class InvalidPositionError(MinesweeperError, IndexError):
    """A (row, col) coordinate lies outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col


class EngineStateError(MinesweeperError, RuntimeError):
    """Operation is not valid for the board in its current state."""
