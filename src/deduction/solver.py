"""
Rule-based solver for 3D Minesweeper.

Reads the visible state of a board and produces explainable deduction
steps. Drives a full auto-solve loop and a no-guess validator on top.
"""
import dataclasses
import logging
from typing import Iterable, List, Set, Tuple

from minefield import Board, CellState, Coord3, GameStatus

from .rules import RULES
from .step import DeductionStep

logger = logging.getLogger(__name__)


# ============================================================================
# Solver
# ============================================================================

class Solver:
    """
    Deterministic solver using rules R1 and R2.

    Strategy:
        1. Scan every revealed numbered cell (x innermost, then y, then z)
        2. Evaluate R1 then R2 on each cell
        3. Drop cells already decided earlier in the same pass
        4. Apply the batch through the board's own flag/reveal API
        5. Repeat until the game ends or a pass finds nothing

    The solver never looks at where the mines are, only at what a
    player could see.
    """

    def solve_step(self, board: Board) -> List[DeductionStep]:
        """
        Run one pass of all rules over every revealed cell.

        Args:
            board: Board to analyze. Not modified.

        Returns:
            Deduction steps found. Empty means the solver stalled.
        """
        steps: List[DeductionStep] = []
        seen: Set[Coord3] = set()

        for coord in board.coords():
            if board.get_state(coord) != CellState.REVEALED:
                continue
            if board.get_count(coord) == 0:
                continue

            for rule in RULES:
                step = rule(board, coord)
                if step is None:
                    continue
                novel = tuple(c for c in step.affected_cells if c not in seen)
                if not novel:
                    continue
                steps.append(dataclasses.replace(step, affected_cells=novel))
                seen.update(novel)

        logger.debug("Solver pass found %d steps", len(steps))
        return steps

    def solve_full(
        self, board: Board, first_click: Coord3
    ) -> Tuple[List[DeductionStep], bool]:
        """
        Solve a board from the given first click.

        Args:
            board: Board to play. Mutated through reveal/toggle_flag.
            first_click: Cell revealed before deduction starts.

        Returns:
            Tuple of (all steps in order, whether the game was won).
        """
        all_steps: List[DeductionStep] = []
        board.reveal(first_click)

        while board.status == GameStatus.PLAYING:
            steps = self.solve_step(board)
            if not steps:
                logger.info(
                    "Solver stalled with %d safe cells left after %d steps",
                    board.safe_left, len(all_steps),
                )
                return all_steps, False

            all_steps.extend(steps)
            self._apply(board, steps)

        solved = board.status == GameStatus.WON
        logger.info(
            "Solver finished: %s after %d steps", board.status.name, len(all_steps)
        )
        return all_steps, solved

    def _apply(self, board: Board, steps: List[DeductionStep]) -> None:
        """Flag inferred mines and reveal inferred safe cells."""
        for step in steps:
            logger.debug("%s", step)
            for coord in step.affected_cells:
                if step.inferred_mine:
                    if board.get_state(coord) == CellState.HIDDEN:
                        board.toggle_flag(coord)
                else:
                    board.reveal(coord)

    def validate_no_guess(
        self, size: int, mine_coords: Iterable[Coord3], first_click: Coord3
    ) -> bool:
        """
        Check that a layout is solvable without guessing.

        Builds its own board, so no caller-owned board is touched.

        Args:
            size: Edge length of the cube.
            mine_coords: Mine layout to check.
            first_click: Opening cell.

        Returns:
            True if R1/R2 propagation wins the game.
        """
        board = Board(size, mine_coords)
        _, solved = self.solve_full(board, first_click)
        return solved
