"""
3D Minesweeper deduction module.

Provides the rule-based solver:
- DeductionStep: One explainable inference
- Rules R1/R2: All-hidden-are-mines and all-remaining-are-safe
- Solver: Single pass, full auto-solve, and no-guess validation
- Search: Seed retry for no-guess boards and solvability surveys
"""
from .step import DeductionStep
from .rules import (
    RULES,
    RULE_ALL_HIDDEN_ARE_MINES,
    RULE_ALL_REMAINING_ARE_SAFE,
    CellInfo,
    all_hidden_are_mines,
    all_remaining_are_safe,
    get_cell_info,
)
from .solver import Solver
from .search import (
    NoGuessBoardNotFound,
    SearchResult,
    SurveyStats,
    find_no_guess_board,
    survey,
)

__all__ = [
    "DeductionStep",
    "RULES",
    "RULE_ALL_HIDDEN_ARE_MINES",
    "RULE_ALL_REMAINING_ARE_SAFE",
    "CellInfo",
    "all_hidden_are_mines",
    "all_remaining_are_safe",
    "get_cell_info",
    "Solver",
    "NoGuessBoardNotFound",
    "SearchResult",
    "SurveyStats",
    "find_no_guess_board",
    "survey",
]
