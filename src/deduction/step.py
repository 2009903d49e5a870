"""
Deduction step type.

A step records one explainable inference: which rule fired, which
revealed cells licensed it, and which hidden cells it decided.
"""
from dataclasses import dataclass
from typing import Tuple

from minefield import Coord3


@dataclass(frozen=True)
class DeductionStep:
    """
    One inference produced by a solver pass.

    Attributes:
        rule_id: Rule identifier ("R1" or "R2").
        source_cells: Revealed numbered cells that drove the deduction.
        affected_cells: Previously hidden cells decided by this step.
        inferred_mine: True if the affected cells are mines, False if safe.
    """

    rule_id: str
    source_cells: Tuple[Coord3, ...]
    affected_cells: Tuple[Coord3, ...]
    inferred_mine: bool

    @property
    def label(self) -> str:
        return "MINE" if self.inferred_mine else "SAFE"

    def __str__(self) -> str:
        sources = ",".join(str(c) for c in self.source_cells)
        affected = ",".join(str(c) for c in self.affected_cells)
        return f"[{self.rule_id}] from {sources} -> {affected} = {self.label}"
