"""
Deduction rules for 3D Minesweeper.

Each rule examines one revealed numbered cell and may infer that all of
its hidden neighbors are mines or that all of them are safe.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from minefield import Board, CellState, Coord3

from .step import DeductionStep


RULE_ALL_HIDDEN_ARE_MINES = "R1"
RULE_ALL_REMAINING_ARE_SAFE = "R2"


# ============================================================================
# Neighbor Analysis
# ============================================================================

@dataclass
class CellInfo:
    """Information about a revealed cell for rule evaluation."""

    coord: Coord3
    adjacent_mines: int
    hidden_neighbors: List[Coord3]
    flagged_neighbors: List[Coord3]

    @property
    def remaining_mines(self) -> int:
        """Mines still to be found among hidden neighbors."""
        return self.adjacent_mines - len(self.flagged_neighbors)


def get_cell_info(board: Board, coord: Coord3) -> Optional[CellInfo]:
    """
    Partition a cell's neighbors for rule evaluation.

    Returns:
        CellInfo for a revealed cell with a nonzero count, None otherwise.
    """
    if board.get_state(coord) != CellState.REVEALED:
        return None
    count = board.get_count(coord)
    if count == 0:
        return None

    hidden: List[Coord3] = []
    flagged: List[Coord3] = []
    for neighbor in board.get_neighbors(coord):
        state = board.get_state(neighbor)
        if state == CellState.HIDDEN:
            hidden.append(neighbor)
        elif state == CellState.FLAGGED:
            flagged.append(neighbor)

    return CellInfo(
        coord=coord,
        adjacent_mines=count,
        hidden_neighbors=hidden,
        flagged_neighbors=flagged,
    )


# ============================================================================
# Rules
# ============================================================================

def all_hidden_are_mines(board: Board, coord: Coord3) -> Optional[DeductionStep]:
    """
    R1: if the mines still unaccounted for equal the number of hidden
    neighbors, every hidden neighbor is a mine.
    """
    info = get_cell_info(board, coord)
    if info is None:
        return None

    remaining = info.remaining_mines
    if remaining > 0 and remaining == len(info.hidden_neighbors):
        return DeductionStep(
            rule_id=RULE_ALL_HIDDEN_ARE_MINES,
            source_cells=(coord,),
            affected_cells=tuple(info.hidden_neighbors),
            inferred_mine=True,
        )
    return None


def all_remaining_are_safe(board: Board, coord: Coord3) -> Optional[DeductionStep]:
    """
    R2: if the flagged neighbors already account for the count, every
    other hidden neighbor is safe.
    """
    info = get_cell_info(board, coord)
    if info is None:
        return None

    if info.remaining_mines == 0 and info.hidden_neighbors:
        return DeductionStep(
            rule_id=RULE_ALL_REMAINING_ARE_SAFE,
            source_cells=(coord,),
            affected_cells=tuple(info.hidden_neighbors),
            inferred_mine=False,
        )
    return None


Rule = Callable[[Board, Coord3], Optional[DeductionStep]]

# Evaluation order within a pass
RULES: Tuple[Rule, ...] = (all_hidden_are_mines, all_remaining_are_safe)
