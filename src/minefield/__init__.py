"""
3D Minesweeper game module.

Provides core game logic including coordinates, board management,
seeded layout generation, and a gymnasium environment.
"""
from .coords import Coord3, in_bounds, neighbors, flat_index, from_flat
from .cell import CellState, RevealResult
from .board import Board, BoardConfig, GameStatus, BEGINNER, INTERMEDIATE, EXPERT
from .generator import generate, generate_from_config
from .environment import Minesweeper3DEnv, make_vec_env

__all__ = [
    "Coord3",
    "in_bounds",
    "neighbors",
    "flat_index",
    "from_flat",
    "CellState",
    "RevealResult",
    "Board",
    "BoardConfig",
    "GameStatus",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "generate",
    "generate_from_config",
    "Minesweeper3DEnv",
    "make_vec_env",
]
