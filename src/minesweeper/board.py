"""
Board module for Minesweeper game.

Implements the board engine: construction, mine placement, adjacency
counting, flood-fill reveal, flag toggling and win detection. A Board
is an immutable value and every engine function returns a new one, so
callers can swap their reference and compare snapshots freely.
"""
import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set, Tuple

import numpy as np

from .exceptions import ConfigurationError, EngineStateError, InvalidPositionError
from .tile import Tile

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

DEFAULT_ROWS = 10
DEFAULT_COLS = 10
DEFAULT_MINE_COUNT = 15

Position = Tuple[int, int]
Grid = Tuple[Tuple[Tile, ...], ...]


def _validate_dimensions(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise ConfigurationError("Board dimensions must be positive")


def _validate_mine_count(rows: int, cols: int, mine_count: int) -> None:
    if mine_count < 0:
        raise ConfigurationError("Number of mines cannot be negative")
    # One cell is always kept clear for the first reveal.
    max_mines = rows * cols - 1
    if mine_count > max_mines:
        raise ConfigurationError(f"Too many mines (max {max_mines})")


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place.
        safe_neighborhood: Keep the whole 3x3 area around the first
            reveal clear of mines instead of the clicked tile only.
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    mine_count: int = DEFAULT_MINE_COUNT
    safe_neighborhood: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        _validate_dimensions(self.rows, self.cols)
        _validate_mine_count(self.rows, self.cols, self.mine_count)

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.mine_count


# ============================================================================
# Board Value
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Immutable grid of tiles.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        grid: Row-major tuple of tile rows.
    """

    rows: int
    cols: int
    grid: Grid

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_position(self, row: int, col: int) -> None:
        """Raise InvalidPositionError if position is off the board."""
        if not self.in_bounds(row, col):
            raise InvalidPositionError(row, col, self.rows, self.cols)

    def tile(self, row: int, col: int) -> Tile:
        """Get tile at position."""
        self.check_position(row, col)
        return self.grid[row][col]

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def tiles(self) -> Iterator[Tile]:
        for tile_row in self.grid:
            yield from tile_row

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring positions.

        Args:
            row: Row index of center tile.
            col: Column index of center tile.

        Returns:
            List of (row, col) tuples for the up-to-8 in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Counters
    # ========================================================================

    @property
    def mine_count(self) -> int:
        return sum(1 for tile in self.tiles() if tile.is_mine)

    @property
    def has_mines(self) -> bool:
        return any(tile.is_mine for tile in self.tiles())

    @property
    def revealed_count(self) -> int:
        return sum(1 for tile in self.tiles() if tile.is_revealed)

    @property
    def revealed_safe_count(self) -> int:
        return sum(
            1 for tile in self.tiles() if tile.is_revealed and not tile.is_mine
        )

    @property
    def flagged_count(self) -> int:
        return sum(1 for tile in self.tiles() if tile.is_flagged)

    # ========================================================================
    # Presentation helpers
    # ========================================================================

    def to_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self.grid[row][col].to_observation()
        return obs

    def render(self) -> str:
        """Render board as ASCII text, one line per row."""
        return "\n".join(
            " ".join(tile.to_char() for tile in tile_row)
            for tile_row in self.grid
        )

    def _replace_tiles(self, updates: Dict[Position, Tile]) -> "Board":
        """Copy-on-write: rebuild only the rows that changed."""
        if not updates:
            return self
        rows = list(self.grid)
        touched: Dict[int, List[Tile]] = {}
        for (row, col), tile in updates.items():
            if row not in touched:
                touched[row] = list(rows[row])
            touched[row][col] = tile
        for row, tile_row in touched.items():
            rows[row] = tuple(tile_row)
        return Board(self.rows, self.cols, tuple(rows))


# ============================================================================
# Board Construction
# ============================================================================

def create_empty_board(rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> Board:
    """Create a board of hidden, mine-free tiles."""
    _validate_dimensions(rows, cols)
    tile = Tile()
    grid = tuple(tuple(tile for _ in range(cols)) for _ in range(rows))
    return Board(rows, cols, grid)


def _safe_area(
    board: Board, row: int, col: int, safe_neighborhood: bool
) -> Set[Position]:
    safe = {(row, col)}
    if safe_neighborhood:
        safe.update(board.neighbors(row, col))
    return safe


def place_mines(
    board: Board,
    mine_count: int,
    exclude_row: int,
    exclude_col: int,
    rng: Optional[random.Random] = None,
    safe_neighborhood: bool = False,
) -> Board:
    """
    Place mines randomly, keeping the excluded tile mine-free.

    Args:
        board: Mine-free board to place mines on.
        mine_count: Number of distinct tiles to mine.
        exclude_row: Row of the tile that must stay safe.
        exclude_col: Column of the tile that must stay safe.
        rng: Random source; the module-level generator if omitted.
        safe_neighborhood: Also keep the excluded tile's neighbors safe
            when the board has room for it.

    Returns:
        New board with exactly mine_count mines.

    Raises:
        ConfigurationError: mine_count does not fit the board.
        EngineStateError: the board already has mines.
    """
    _validate_mine_count(board.rows, board.cols, mine_count)
    board.check_position(exclude_row, exclude_col)
    if board.has_mines:
        raise EngineStateError("Mines have already been placed on this board")

    sampler = rng if rng is not None else random
    safe = _safe_area(board, exclude_row, exclude_col, safe_neighborhood)
    positions = [pos for pos in board.positions() if pos not in safe]
    if len(positions) < mine_count:
        logger.debug(
            "Safe neighborhood leaves %d cells for %d mines, "
            "keeping only the clicked tile clear",
            len(positions), mine_count,
        )
        positions = [
            pos for pos in board.positions() if pos != (exclude_row, exclude_col)
        ]

    mine_positions = sampler.sample(positions, mine_count)
    updates = {
        (row, col): Tile(is_mine=True, state=board.grid[row][col].state)
        for row, col in mine_positions
    }
    logger.debug(
        "Placed %d mines on %dx%d board avoiding (%d, %d)",
        mine_count, board.rows, board.cols, exclude_row, exclude_col,
    )
    return board._replace_tiles(updates)


def _count_adjacent_mines(board: Board, row: int, col: int) -> int:
    count = 0
    for neighbor_row, neighbor_col in board.neighbors(row, col):
        if board.grid[neighbor_row][neighbor_col].is_mine:
            count += 1
    return count


def calculate_adjacent_mines(board: Board) -> Board:
    """Recompute adjacent mine counts for all non-mine tiles."""
    updates = {}
    for row, col in board.positions():
        tile = board.grid[row][col]
        if tile.is_mine:
            continue
        count = _count_adjacent_mines(board, row, col)
        if count != tile.adjacent_mines:
            updates[(row, col)] = Tile(
                is_mine=False, adjacent_mines=count, state=tile.state
            )
    return board._replace_tiles(updates)


# ============================================================================
# Game Actions
# ============================================================================

def reveal_tile(board: Board, row: int, col: int) -> Board:
    """
    Reveal a tile, flooding outward from zero-count tiles.

    Revealed and flagged tiles are left alone. A safe tile with no
    adjacent mines reveals its neighbors, continuing through the
    connected zero region and stopping at numbered tiles and edges.
    Revealing a mine is allowed; the caller decides what that means.
    """
    board.check_position(row, col)
    start = board.grid[row][col]
    if not start.is_hidden:
        return board

    updates: Dict[Position, Tile] = {(row, col): start.revealed()}
    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        tile = board.grid[current_row][current_col]
        if tile.is_mine or tile.adjacent_mines != 0:
            continue
        for neighbor in board.neighbors(current_row, current_col):
            if neighbor in updates:
                continue
            neighbor_tile = board.grid[neighbor[0]][neighbor[1]]
            if not neighbor_tile.is_hidden:
                continue
            updates[neighbor] = neighbor_tile.revealed()
            stack.append(neighbor)

    if len(updates) > 1:
        logger.debug("Flood fill from (%d, %d) revealed %d tiles",
                     row, col, len(updates))
    return board._replace_tiles(updates)


def toggle_flag(board: Board, row: int, col: int) -> Board:
    """Flip the flag on a hidden tile. Revealed tiles are unchanged."""
    tile = board.tile(row, col)
    if tile.is_revealed:
        return board
    return board._replace_tiles({(row, col): tile.toggled()})


def check_win_condition(board: Board, mine_count: Optional[int] = None) -> bool:
    """
    Check if all non-mine tiles are revealed.

    Args:
        board: Board to inspect.
        mine_count: Mines the board was built with; counted from the
            board when omitted.

    Returns:
        True when every safe tile is revealed. Flags are ignored.
    """
    if mine_count is None:
        mine_count = board.mine_count
    return board.revealed_safe_count == board.rows * board.cols - mine_count


def reveal_board(board: Board) -> Board:
    """Uncover every tile, dropping flags."""
    grid = tuple(
        tuple(tile.revealed() for tile in tile_row)
        for tile_row in board.grid
    )
    return Board(board.rows, board.cols, grid)
