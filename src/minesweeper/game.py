"""
Game controller for Minesweeper.

Owns the current board and game status, dispatches player actions to
the board engine and publishes a snapshot to listeners after each
accepted action.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional

from .board import (
    Board,
    BoardConfig,
    calculate_adjacent_mines,
    check_win_condition,
    create_empty_board,
    place_mines,
    reveal_board,
    reveal_tile,
    toggle_flag,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class GameSnapshot:
    """
    Everything a presentation layer needs to draw the game.

    Attributes:
        board: Current board value.
        status: Current game status.
        flags_remaining: Mine count minus placed flags. Negative when
            the player has placed more flags than there are mines.
    """

    board: Board
    status: GameStatus
    flags_remaining: int

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal


Listener = Callable[[GameSnapshot], None]


# ============================================================================
# Game Controller
# ============================================================================

class Game:
    """
    Single-player Minesweeper session.

    Mines are placed on the first reveal so the opening tile is always
    safe. Once the game is won or lost only reset() changes anything.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            config: Board configuration (default: 10x10 with 15 mines).
            rng: Random source for mine placement.
        """
        self.config = config or BoardConfig()
        self.rng = rng or random.Random()
        self._listeners: List[Listener] = []
        self._board = create_empty_board(self.config.rows, self.config.cols)
        self._status = GameStatus.IN_PROGRESS
        self._started = False

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def started(self) -> bool:
        """True once mines have been placed by the first reveal."""
        return self._started

    @property
    def flags_remaining(self) -> int:
        return self.config.mine_count - self._board.flagged_count

    @property
    def is_playing(self) -> bool:
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(self._board, self._status, self.flags_remaining)

    # ========================================================================
    # Listeners
    # ========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback for snapshots.

        Returns:
            Function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> GameSnapshot:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> GameSnapshot:
        """
        Reveal the tile at the given position.

        On the first reveal, places mines avoiding this tile. Revealing
        a mine loses the game; revealing the last safe tile wins it.
        Either way the whole board is uncovered.

        Raises:
            InvalidPositionError: position is off the board.
        """
        self._board.check_position(row, col)
        if self._status.is_terminal:
            logger.debug("Ignoring reveal (%d, %d): game is %s",
                         row, col, self._status.name)
            return self.snapshot()

        first_reveal = not self._started
        if first_reveal:
            self._start(row, col)

        board = reveal_tile(self._board, row, col)
        if board is self._board and not first_reveal:
            return self.snapshot()

        if board.tile(row, col).is_mine:
            self._status = GameStatus.LOST
            self._board = reveal_board(board)
            logger.info("Mine hit at (%d, %d), game lost", row, col)
            return self._publish()

        self._board = board
        if check_win_condition(board, self.config.mine_count):
            self._status = GameStatus.WON
            self._board = reveal_board(board)
            logger.info("All safe tiles revealed, game won")
        return self._publish()

    def _start(self, row: int, col: int) -> None:
        """Handle first reveal: place mines and calculate counts."""
        board = place_mines(
            self._board,
            self.config.mine_count,
            row,
            col,
            rng=self.rng,
            safe_neighborhood=self.config.safe_neighborhood,
        )
        self._board = calculate_adjacent_mines(board)
        self._started = True

    def toggle_flag(self, row: int, col: int) -> GameSnapshot:
        """
        Toggle the flag on a hidden tile.

        Raises:
            InvalidPositionError: position is off the board.
        """
        self._board.check_position(row, col)
        if self._status.is_terminal:
            logger.debug("Ignoring flag (%d, %d): game is %s",
                         row, col, self._status.name)
            return self.snapshot()

        board = toggle_flag(self._board, row, col)
        if board is self._board:
            return self.snapshot()
        self._board = board
        return self._publish()

    def reset(self) -> GameSnapshot:
        """Discard the board and start a fresh game."""
        self._board = create_empty_board(self.config.rows, self.config.cols)
        self._status = GameStatus.IN_PROGRESS
        self._started = False
        logger.info("New %dx%d game with %d mines",
                    self.config.rows, self.config.cols, self.config.mine_count)
        return self._publish()
