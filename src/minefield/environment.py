"""
Gymnasium environment wrapper for 3D Minesweeper.

Provides a standard RL interface over the board's reveal action.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import (
    FLAGGED_OBSERVATION,
    HIDDEN_OBSERVATION,
    MINE_OBSERVATION,
    RevealResult,
)
from .coords import Coord3, flat_index, from_flat
from .generator import generate_from_config


# ============================================================================
# Minesweeper Environment
# ============================================================================

class Minesweeper3DEnv(gym.Env):
    """
    Gymnasium environment for 3D Minesweeper.

    Observation:
        3D array indexed [x, y, z] where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-26 = revealed cell with adjacent mine count
        - 27 = revealed mine

    Actions:
        Discrete action space of size size^3.
        Action i is the cell with flat index i (x innermost).

    The mine layout is generated on the first step so that the first
    revealed cell and its neighbors are always safe.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 6^3 with 10 mines).
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board: Optional[Board] = None
        self.board_seed: Optional[int] = None

        self.observation_space = spaces.Box(
            low=FLAGGED_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(self.config.size,) * 3,
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
            seed: Seed for the env's generator, which picks layout seeds.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = None
        self.board_seed = None
        self._steps = 0
        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell for the given action.

        Args:
            action: Flat cell index to reveal.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        coord = from_flat(int(action), self.config.size)
        self._steps += 1

        if self.board is None:
            self.board_seed = int(self.np_random.integers(2 ** 31))
            self.board = generate_from_config(
                self.config, coord, self.board_seed
            )

        reward = self._calculate_reward(coord)
        terminated = not self.board.is_playing

        return self._get_observation(), reward, terminated, False, self._get_info()

    def _calculate_reward(self, coord: Coord3) -> float:
        """Reveal a cell and score the outcome."""
        result = self.board.reveal(coord)

        if result in (RevealResult.ALREADY_REVEALED, RevealResult.FLAGGED):
            return -0.1
        if self.board.is_won:
            return 10.0
        if result == RevealResult.MINE:
            return -10.0
        return 1.0

    def _get_observation(self) -> np.ndarray:
        if self.board is None:
            return np.full(
                (self.config.size,) * 3, HIDDEN_OBSERVATION, dtype=np.int8
            )
        return self.board.get_observation()

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        if self.board is None:
            return {
                "steps": self._steps,
                "revealed": 0,
                "total_safe": self.config.total_cells - self.config.num_mines,
                "game_state": "PLAYING",
                "valid_actions": self.config.total_cells,
            }
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_safe_count,
            "total_safe": self.board.total_safe,
            "game_state": self.board.status.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden, unflagged cell.
        """
        if self.board is None:
            return np.ones(self.action_space.n, dtype=bool)
        mask = np.zeros(self.action_space.n, dtype=bool)
        for coord in self.board.get_valid_actions():
            mask[flat_index(coord, self.config.size)] = True
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
    asynchronous: bool = True,
) -> gym.vector.VectorEnv:
    """
    Create a batch of cube environments sharing one configuration.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration for every copy.
        asynchronous: Step copies in worker processes instead of in-process.

    Returns:
        Vectorized environment; observations have shape (n_envs, N, N, N).

    Raises:
        ValueError: If n_envs is less than 1
    """
    if n_envs < 1:
        raise ValueError("n_envs must be at least 1")

    def make_env() -> Minesweeper3DEnv:
        return Minesweeper3DEnv(config=config)

    env_fns = [make_env for _ in range(n_envs)]
    if asynchronous:
        return gym.vector.AsyncVectorEnv(env_fns)
    return gym.vector.SyncVectorEnv(env_fns)
