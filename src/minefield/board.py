"""
Board module for 3D Minesweeper.

Implements the N x N x N game board with precomputed neighbor counts,
flood-fill revealing, chording, flagging, and game state management.
"""
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, List

import numpy as np

from .cell import CellState, RevealResult, to_observation
from .coords import (
    Coord3,
    flat_index,
    from_flat,
    in_bounds,
    iter_neighbors,
    neighbors,
    scan_order,
)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a 3D Minesweeper board.

    Attributes:
        size: Edge length of the cube.
        num_mines: Total mines to place.
    """

    size: int = 6
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        # leave room for any first click's 3x3x3 safe block
        max_mines = self.total_cells - min(27, self.total_cells)
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells in the cube."""
        return self.size ** 3


# Preset difficulty levels
BEGINNER = BoardConfig(4, 4)
INTERMEDIATE = BoardConfig(6, 10)
EXPERT = BoardConfig(8, 40)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    3D Minesweeper game board.

    Mines are fixed at construction. All state changes go through
    reveal, chord_reveal, and toggle_flag; once the game is won or
    lost every mutator becomes a no-op.
    """

    def __init__(self, size: int, mine_coords: Iterable[Coord3]) -> None:
        """
        Create a board with mines pre-placed.

        Args:
            size: Edge length of the cube.
            mine_coords: Mine coordinates; duplicates are ignored.

        Raises:
            ValueError: If size is not positive or a mine is out of bounds.
        """
        if size < 1:
            raise ValueError("Board size must be positive")

        self.size = size
        self._total_cells = size ** 3
        self._mines = np.zeros(self._total_cells, dtype=bool)
        self._states = np.full(
            self._total_cells, CellState.HIDDEN, dtype=np.int8
        )
        self._counts = np.zeros(self._total_cells, dtype=np.int8)
        self._status = GameStatus.PLAYING

        for coord in mine_coords:
            if not in_bounds(coord, size):
                raise ValueError(
                    f"Mine coord {coord} out of bounds for size {size}"
                )
            self._mines[flat_index(coord, size)] = True

        self._mine_count = int(self._mines.sum())
        self._total_safe = self._total_cells - self._mine_count
        self._revealed_safe = 0
        self._revealed_total = 0
        self._flag_count = 0

        self._calculate_adjacent_mines()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells, once."""
        for coord in scan_order(self.size):
            count = 0
            for neighbor in iter_neighbors(coord, self.size):
                if self._mines[self._index(neighbor)]:
                    count += 1
            self._counts[self._index(coord)] = count

    def _index(self, coord: Coord3) -> int:
        return flat_index(coord, self.size)

    def _checked_index(self, coord: Coord3) -> int:
        """Flat index of an in-bounds coordinate.

        Raises:
            IndexError: If coord lies outside the cube
        """
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} out of bounds for size {self.size}")
        return self._index(coord)

    # ========================================================================
    # Cell Queries
    # ========================================================================

    def in_bounds(self, coord: Coord3) -> bool:
        """Check if coordinate is within board bounds."""
        return in_bounds(coord, self.size)

    def is_mine(self, coord: Coord3) -> bool:
        """Check if the cell holds a mine."""
        return bool(self._mines[self._checked_index(coord)])

    def get_state(self, coord: Coord3) -> CellState:
        """Get the visibility state of a cell."""
        return CellState(self._states[self._checked_index(coord)])

    def get_count(self, coord: Coord3) -> int:
        """Get the number of mines among the cell's neighbors."""
        return int(self._counts[self._checked_index(coord)])

    def get_neighbors(self, coord: Coord3) -> List[Coord3]:
        """Get all in-bounds 26-adjacent neighbors."""
        return neighbors(coord, self.size)

    def coords(self) -> Iterator[Coord3]:
        """Iterate every cell in scan order (x innermost)."""
        return scan_order(self.size)

    def mine_coords(self) -> List[Coord3]:
        """Get all mine coordinates in scan order."""
        return [
            from_flat(int(index), self.size)
            for index in np.flatnonzero(self._mines)
        ]

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, coord: Coord3) -> RevealResult:
        """
        Reveal a cell at the given position.

        A safe cell opens via flood fill; a mine loses the game and only
        the clicked mine is exposed.

        Args:
            coord: Cell to reveal.

        Returns:
            The outcome of the action.
        """
        if not self.in_bounds(coord):
            return RevealResult.OUT_OF_BOUNDS
        if self._status != GameStatus.PLAYING:
            return RevealResult.ALREADY_REVEALED

        index = self._index(coord)
        state = self._states[index]
        if state == CellState.REVEALED:
            return RevealResult.ALREADY_REVEALED
        if state == CellState.FLAGGED:
            return RevealResult.FLAGGED

        if self._mines[index]:
            self._states[index] = CellState.REVEALED
            self._revealed_total += 1
            self._status = GameStatus.LOST
            return RevealResult.MINE

        self._flood_fill(coord)
        self._check_win_condition()
        return RevealResult.OK

    def _flood_fill(self, start: Coord3) -> None:
        """Reveal outward from start, expanding only through zero cells."""
        queue = deque([start])

        while queue:
            coord = queue.popleft()
            index = self._index(coord)

            if self._states[index] != CellState.HIDDEN:
                continue
            if self._mines[index]:
                continue

            self._states[index] = CellState.REVEALED
            self._revealed_safe += 1
            self._revealed_total += 1

            if self._counts[index] != 0:
                continue

            for neighbor in iter_neighbors(coord, self.size):
                neighbor_index = self._index(neighbor)
                if (
                    self._states[neighbor_index] == CellState.HIDDEN
                    and not self._mines[neighbor_index]
                ):
                    queue.append(neighbor)

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._revealed_safe >= self._total_safe:
            self._status = GameStatus.WON

    def chord_reveal(self, coord: Coord3) -> RevealResult:
        """
        Chord action on a revealed numbered cell.

        If the flagged neighbor count equals the cell's number, every
        hidden neighbor is revealed. Wrong flags can still lose the game.

        Args:
            coord: Revealed numbered cell.

        Returns:
            MINE if a neighbor detonated, OK if the chord ran,
            ALREADY_REVEALED if the chord was not applicable.
        """
        if not self.in_bounds(coord):
            return RevealResult.OUT_OF_BOUNDS
        if not self._can_chord(coord):
            return RevealResult.ALREADY_REVEALED

        for neighbor in iter_neighbors(coord, self.size):
            if self._states[self._index(neighbor)] != CellState.HIDDEN:
                continue
            if self.reveal(neighbor) == RevealResult.MINE:
                return RevealResult.MINE

        return RevealResult.OK

    def _can_chord(self, coord: Coord3) -> bool:
        """Check if chord action is valid."""
        if self._status != GameStatus.PLAYING:
            return False
        index = self._index(coord)
        if self._states[index] != CellState.REVEALED:
            return False
        required_flags = self._counts[index]
        if required_flags == 0:
            return False
        return self._count_adjacent_flags(coord) == required_flags

    def _count_adjacent_flags(self, coord: Coord3) -> int:
        """Count flagged cells adjacent to position."""
        count = 0
        for neighbor in iter_neighbors(coord, self.size):
            if self._states[self._index(neighbor)] == CellState.FLAGGED:
                count += 1
        return count

    def toggle_flag(self, coord: Coord3) -> bool:
        """
        Toggle flag on a cell.

        Args:
            coord: Cell to flag or unflag.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._status != GameStatus.PLAYING:
            return False
        if not self.in_bounds(coord):
            return False

        index = self._index(coord)
        state = self._states[index]
        if state == CellState.HIDDEN:
            self._states[index] = CellState.FLAGGED
            self._flag_count += 1
            return True
        if state == CellState.FLAGGED:
            self._states[index] = CellState.HIDDEN
            self._flag_count -= 1
            return True
        return False

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameStatus.LOST

    @property
    def mine_count(self) -> int:
        return self._mine_count

    @property
    def flag_count(self) -> int:
        return self._flag_count

    @property
    def total_cells(self) -> int:
        return self._total_cells

    @property
    def total_safe(self) -> int:
        return self._total_safe

    @property
    def revealed_safe_count(self) -> int:
        return self._revealed_safe

    @property
    def revealed_total_count(self) -> int:
        return self._revealed_total

    @property
    def hidden_count(self) -> int:
        """Cells not yet revealed, flagged ones included."""
        return self._total_cells - self._revealed_total

    @property
    def safe_left(self) -> int:
        """Safe cells still to be revealed."""
        return self._total_safe - self._revealed_safe

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array indexed [x, y, z].

        Returns:
            3D int8 array where:
                -1 = hidden
                -2 = flagged
                0-26 = revealed with adjacent count
                27 = revealed mine
        """
        obs = np.empty((self.size,) * 3, dtype=np.int8)
        for coord in self.coords():
            index = self._index(coord)
            obs[coord.x, coord.y, coord.z] = to_observation(
                CellState(self._states[index]),
                bool(self._mines[index]),
                int(self._counts[index]),
            )
        return obs

    def get_slice(self, z: int) -> np.ndarray:
        """Get one z layer of the observation, indexed [x, y]."""
        if not 0 <= z < self.size:
            raise ValueError(f"Slice {z} out of range for size {self.size}")
        return self.get_observation()[:, :, z]

    def get_valid_actions(self) -> List[Coord3]:
        """
        Get list of cells that can still be revealed.

        Returns:
            Hidden (unflagged) cells in scan order.
        """
        return [
            coord for coord in self.coords()
            if self._states[self._index(coord)] == CellState.HIDDEN
        ]
