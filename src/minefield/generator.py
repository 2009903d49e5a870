"""
Generator module for 3D Minesweeper.

Builds seeded mine layouts that keep the first click and all of its
neighbors mine-free.
"""
import logging
from typing import List, Set

import numpy as np

from .board import Board, BoardConfig
from .coords import Coord3, flat_index, from_flat, in_bounds, iter_neighbors

logger = logging.getLogger(__name__)


def _excluded_indices(size: int, first_click: Coord3) -> Set[int]:
    """Flat indices of the first click and its neighbors."""
    excluded = {flat_index(first_click, size)}
    for neighbor in iter_neighbors(first_click, size):
        excluded.add(flat_index(neighbor, size))
    return excluded


def _shuffle(candidates: List[int], seed: int) -> List[int]:
    """
    Fisher-Yates shuffle driven by a generator seeded with seed.

    Returns a new list; the input is left untouched.
    """
    rng = np.random.default_rng(seed)
    shuffled = list(candidates)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.integers(i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def generate(
    size: int, mine_count: int, first_click: Coord3, seed: int
) -> Board:
    """
    Generate a board with mines placed by a seeded shuffle.

    Identical arguments always produce an identical layout.

    Args:
        size: Edge length of the cube.
        mine_count: Number of mines to place.
        first_click: Cell whose 3x3x3 block must stay mine-free.
        seed: Seed for the shuffle.

    Returns:
        A new Board with no cells revealed.

    Raises:
        ValueError: If the configuration cannot be satisfied.
    """
    if size < 1:
        raise ValueError("Board size must be positive")
    if mine_count < 0:
        raise ValueError("Number of mines cannot be negative")
    if not in_bounds(first_click, size):
        raise ValueError(
            f"First click {first_click} out of bounds for size {size}"
        )

    total = size ** 3
    excluded = _excluded_indices(size, first_click)
    available = total - len(excluded)
    if mine_count > available:
        raise ValueError(
            f"Cannot place {mine_count} mines with {len(excluded)} excluded "
            f"cells in a {size}^3 grid ({total} total, {available} available)"
        )

    candidates = [index for index in range(total) if index not in excluded]
    mine_indices = _shuffle(candidates, seed)[:mine_count]
    mines = [from_flat(index, size) for index in mine_indices]

    logger.debug(
        "Generated %d mines for size=%d click=%s seed=%d",
        mine_count, size, first_click, seed,
    )
    return Board(size, mines)


def generate_from_config(
    config: BoardConfig, first_click: Coord3, seed: int
) -> Board:
    """Generate a board using the size and mine count of a config."""
    return generate(config.size, config.num_mines, first_click, seed)
