"""
Tile module for Minesweeper game.

Represents individual tiles on the game board with their state
(hidden/revealed/flagged) and content (mine/number). Tiles are
immutable; every change produces a new tile.
"""
from dataclasses import dataclass, replace
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class TileState(Enum):
    """Possible visual states of a tile."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass(frozen=True)
class Tile:
    """
    A single tile in the Minesweeper grid.

    Attributes:
        is_mine: Whether this tile contains a mine.
        adjacent_mines: Count of mines in neighboring tiles (0-8).
            Left at 0 for mines.
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: TileState = TileState.HIDDEN

    def revealed(self) -> "Tile":
        """Return this tile uncovered. Drops a flag if one was set."""
        if self.state == TileState.REVEALED:
            return self
        return replace(self, state=TileState.REVEALED)

    def flagged(self) -> "Tile":
        """Return this tile flagged. Only hidden tiles take a flag."""
        if self.state != TileState.HIDDEN:
            return self
        return replace(self, state=TileState.FLAGGED)

    def unflagged(self) -> "Tile":
        """Return this tile with its flag removed."""
        if self.state != TileState.FLAGGED:
            return self
        return replace(self, state=TileState.HIDDEN)

    def toggled(self) -> "Tile":
        """
        Return this tile with its flag flipped.

        Revealed tiles cannot carry a flag and are returned unchanged.
        """
        if self.state == TileState.FLAGGED:
            return self.unflagged()
        return self.flagged()

    @property
    def is_hidden(self) -> bool:
        """Check if tile is hidden."""
        return self.state == TileState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if tile is revealed."""
        return self.state == TileState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if tile is flagged."""
        return self.state == TileState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert tile to an integer observation value.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Revealed tile with adjacent mine count
            9: Revealed mine
        """
        if self.state == TileState.HIDDEN:
            return -1
        if self.state == TileState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines

    def to_char(self) -> str:
        """Single character used when printing a board."""
        if self.state == TileState.HIDDEN:
            return "."
        if self.state == TileState.FLAGGED:
            return "F"
        if self.is_mine:
            return "*"
        if self.adjacent_mines == 0:
            return " "
        return str(self.adjacent_mines)
