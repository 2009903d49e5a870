"""
No-guess board search and solvability survey.

Caller-side policy built on the solver's no-guess oracle: retry seeds
until a layout is solvable by deduction alone, or measure how often
a configuration yields such layouts.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from minefield import Board, BoardConfig, Coord3, generate_from_config

from .solver import Solver

logger = logging.getLogger(__name__)


class NoGuessBoardNotFound(RuntimeError):
    """Raised when no seed in the search budget gives a no-guess board."""


# ============================================================================
# Search
# ============================================================================

@dataclass
class SearchResult:
    """
    A no-guess layout found by search.

    Attributes:
        board: Freshly generated board with nothing revealed.
        seed: Seed that produced the layout.
        attempts: Number of seeds tried, including the successful one.
    """

    board: Board
    seed: int
    attempts: int


def find_no_guess_board(
    config: BoardConfig,
    first_click: Coord3,
    seed: int,
    max_attempts: int = 100,
    solver: Optional[Solver] = None,
) -> SearchResult:
    """
    Try seeds seed, seed + 1, ... until a no-guess layout appears.

    Args:
        config: Board size and mine count.
        first_click: Opening cell shared by generation and validation.
        seed: First seed to try.
        max_attempts: Number of seeds to try before giving up.
        solver: Solver used as the oracle (default: a new Solver).

    Returns:
        SearchResult for the first solvable layout.

    Raises:
        ValueError: If max_attempts is less than 1.
        NoGuessBoardNotFound: If every attempt needed a guess.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    solver = solver or Solver()

    for attempt in range(max_attempts):
        candidate_seed = seed + attempt
        board = generate_from_config(config, first_click, candidate_seed)
        mines = board.mine_coords()
        if solver.validate_no_guess(config.size, mines, first_click):
            logger.info(
                "Found no-guess board with seed %d after %d attempts",
                candidate_seed, attempt + 1,
            )
            return SearchResult(
                board=board, seed=candidate_seed, attempts=attempt + 1
            )
        logger.debug("Seed %d needs a guess, rejecting", candidate_seed)

    raise NoGuessBoardNotFound(
        f"No no-guess board for size={config.size} mines={config.num_mines} "
        f"in seeds {seed}..{seed + max_attempts - 1}"
    )


# ============================================================================
# Survey
# ============================================================================

@dataclass
class SurveyStats:
    """Accumulated solvability statistics."""

    boards: int = 0
    solved: int = 0
    step_counts: List[int] = field(default_factory=list)
    solved_seeds: List[int] = field(default_factory=list)

    @property
    def solve_rate(self) -> float:
        """Fraction of boards solved without guessing."""
        if not self.boards:
            return 0.0
        return self.solved / self.boards

    @property
    def avg_steps(self) -> float:
        """Average number of deduction steps per board."""
        if not self.step_counts:
            return 0.0
        return sum(self.step_counts) / len(self.step_counts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "boards": self.boards,
            "solved": self.solved,
            "solve_rate": self.solve_rate,
            "avg_steps": self.avg_steps,
        }


def survey(
    config: BoardConfig,
    first_click: Coord3,
    seeds: Iterable[int],
    solver: Optional[Solver] = None,
) -> SurveyStats:
    """
    Run the solver over one generated board per seed.

    Args:
        config: Board size and mine count.
        first_click: Opening cell for every board.
        seeds: Seeds to generate boards from.
        solver: Solver to use (default: a new Solver).

    Returns:
        Statistics over all boards.
    """
    solver = solver or Solver()
    stats = SurveyStats()

    for seed in seeds:
        board = generate_from_config(config, first_click, seed)
        steps, solved = solver.solve_full(board, first_click)
        stats.boards += 1
        stats.step_counts.append(len(steps))
        if solved:
            stats.solved += 1
            stats.solved_seeds.append(seed)

    return stats
