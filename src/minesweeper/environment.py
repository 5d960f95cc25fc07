"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface on top of a game session.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import GameOutcome
from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE
from .config import BoardConfig
from .session import GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (height, width) where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = uncovered cell with adjacent mine count
        - 9 = uncovered mine

    Actions:
        Discrete action space of size width * height.
        Action i uncovers the cell at (i % width, i // width).

    Rewards:
        - +1 for uncovering a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (off the board, already uncovered/flagged)
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
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=FLAGGED_CODE,
            high=MINE_CODE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            self.config.height * self.config.width
        )

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
        game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.session = GameSession(self.config, rng=random.Random(game_seed))
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to uncover (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)

        observation = self._get_observation()
        terminated = self.session.is_over
        truncated = False
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, truncated, info

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.width, int(action) // self.config.width

    def _calculate_reward(self, x: int, y: int) -> float:
        """
        Uncover a cell and score the result.

        Args:
            x: Column.
            y: Row.

        Returns:
            Reward value.
        """
        if not (0 <= x < self.config.width and 0 <= y < self.config.height):
            return -0.1
        if self.session.is_over:
            return -0.1
        board = self.session.board
        if board is not None and not board.get_cell(x, y).is_hidden:
            return -0.1

        outcome = self.session.uncover(x, y)

        if outcome == GameOutcome.WIN:
            return 10.0
        if outcome == GameOutcome.LOSS:
            return -10.0
        return 1.0

    def _get_observation(self) -> np.ndarray:
        if self.session.board is None:
            return np.full(
                (self.config.height, self.config.width), HIDDEN_CODE, dtype=np.int8
            )
        return self.session.board.get_observation()

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "revealed": board.uncovered if board is not None else 0,
            "total_safe": self.config.safe_cells,
            "game_state": self.session.state.name,
            "seed": self.session.seed,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.session.render()
        if self.render_mode == "human":
            print(self.session.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        return (self._get_observation() == HIDDEN_CODE).reshape(-1)
