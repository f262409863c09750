"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    Board,
    BoardConfig,
    Game,
    Tile,
    calculate_adjacent_mines,
    create_empty_board,
)


def build_board(layout: List[str]) -> Board:
    """
    Build a board from rows of text, '*' marking mines.

    Adjacent counts are filled in; every tile starts hidden.
    """
    grid = tuple(
        tuple(Tile(is_mine=(char == "*")) for char in line)
        for line in layout
    )
    return calculate_adjacent_mines(Board(len(layout), len(layout[0]), grid))


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> Callable[[List[str]], Board]:
    """Factory building boards from text layouts."""
    return build_board


@pytest.fixture
def empty_board() -> Board:
    """Default 10x10 board with no mines."""
    return create_empty_board()


@pytest.fixture
def corner_safe_board() -> Board:
    """10x10 board with 15 mines, all far from the top-left corner."""
    return build_board([
        "..........",
        "..........",
        "..........",
        "..........",
        ".....*****",
        ".....*****",
        "..........",
        "..........",
        "*****.....",
        "..........",
    ])


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game(rng: random.Random) -> Game:
    """Create a default 10x10 game with 15 mines."""
    return Game(rng=rng)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small 3x3 configuration with 1 mine."""
    return BoardConfig(3, 3, 1)
