"""
Cell state module for 3D Minesweeper.

Defines the visibility states a cell moves through, the outcomes of a
reveal, and the integer codes used in board observations.
"""
from enum import Enum, IntEnum, auto


# ============================================================================
# Constants
# ============================================================================

HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 27  # one past the largest possible neighbor count


class CellState(IntEnum):
    """
    Possible visual states of a cell.

    Integer valued so the board can keep states in a numpy array.
    """

    HIDDEN = 0
    REVEALED = 1
    FLAGGED = 2


class RevealResult(Enum):
    """Outcome of a reveal or chord-reveal action."""

    OK = auto()
    MINE = auto()
    ALREADY_REVEALED = auto()
    FLAGGED = auto()
    OUT_OF_BOUNDS = auto()


def to_observation(state: CellState, is_mine: bool, count: int) -> int:
    """
    Convert one cell to its observation value.

    Returns:
        -1: Hidden cell
        -2: Flagged cell
        0-26: Revealed cell with adjacent mine count
        27: Revealed mine (game over state)
    """
    if state == CellState.HIDDEN:
        return HIDDEN_OBSERVATION
    if state == CellState.FLAGGED:
        return FLAGGED_OBSERVATION
    if is_mine:
        return MINE_OBSERVATION
    return count
