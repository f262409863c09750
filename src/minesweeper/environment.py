"""
Gymnasium environment wrapper for Minesweeper.

Drives a Game through the standard RL interface. The environment is a
presentation-side collaborator: it only calls the controller and reads
the snapshots it returns.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .game import Game, GameSnapshot


# ============================================================================
# Rewards
# ============================================================================

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_INVALID = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden tile
        - -2 = flagged tile
        - 0-8 = revealed tile with adjacent mine count
        - 9 = revealed mine (after the game ends)

    Actions:
        Discrete action space of size rows * cols.
        Action i reveals the tile at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe tile
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10 with 15 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.game = Game(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        # Mine layout follows the env's seeded generator.
        self.game.rng = random.Random(int(self.np_random.integers(2**32)))
        snapshot = self.game.reset()
        self._steps = 0

        return snapshot.board.to_observation(), self._get_info(snapshot)

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Tile index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        snapshot = self.game.snapshot()

        return (
            snapshot.board.to_observation(),
            reward,
            snapshot.is_terminal,
            False,
            self._get_info(snapshot),
        )

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return int(action) // self.config.cols, int(action) % self.config.cols

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal a tile and score the outcome."""
        tile = self.game.board.tile(row, col)
        if not tile.is_hidden or not self.game.is_playing:
            return REWARD_INVALID

        self.game.reveal(row, col)

        if self.game.is_won:
            return REWARD_WIN
        if self.game.is_lost:
            return REWARD_MINE
        return REWARD_SAFE

    def _get_info(self, snapshot: GameSnapshot) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": snapshot.board.revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": snapshot.status.name,
            "flags_remaining": snapshot.flags_remaining,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.game.board.render()
        if self.render_mode == "human":
            print(self.game.board.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden tile that may be revealed.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        board = self.game.board
        for row, col in board.positions():
            if board.grid[row][col].is_hidden:
                mask[row * self.config.cols + col] = True
        return mask
