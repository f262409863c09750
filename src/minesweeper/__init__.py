"""
Minesweeper game module.

Provides the board engine, the game controller and a gymnasium
environment built on top of them.
"""
from .exceptions import (
    ConfigurationError,
    EngineStateError,
    InvalidPositionError,
    MinesweeperError,
)
from .tile import Tile, TileState
from .board import (
    DEFAULT_COLS,
    DEFAULT_MINE_COUNT,
    DEFAULT_ROWS,
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
from .game import Game, GameSnapshot, GameStatus
from .environment import MinesweeperEnv

__all__ = [
    "MinesweeperError",
    "ConfigurationError",
    "InvalidPositionError",
    "EngineStateError",
    "Tile",
    "TileState",
    "Board",
    "BoardConfig",
    "DEFAULT_ROWS",
    "DEFAULT_COLS",
    "DEFAULT_MINE_COUNT",
    "create_empty_board",
    "place_mines",
    "calculate_adjacent_mines",
    "reveal_tile",
    "toggle_flag",
    "check_win_condition",
    "reveal_board",
    "Game",
    "GameSnapshot",
    "GameStatus",
    "MinesweeperEnv",
]
