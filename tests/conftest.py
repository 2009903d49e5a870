"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the repo root (for main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from minefield import Board, BoardConfig, Coord3
from deduction import Solver


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 3^3 board with no mines for flood testing."""
    return Board(3, [])


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 3^3 board with a single mine in the origin corner."""
    return Board(3, [Coord3(0, 0, 0)])


@pytest.fixture
def tiny_board() -> Board:
    """Create a 2^3 board with one mine; every safe cell is numbered."""
    return Board(2, [Coord3(0, 0, 0)])


@pytest.fixture
def open_board() -> Board:
    """Create a 4^3 board with no mines for neighbor geometry."""
    return Board(4, [])


# ============================================================================
# Solver Fixtures
# ============================================================================

@pytest.fixture
def solver() -> Solver:
    """Create a solver."""
    return Solver()


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(6, 10)


@pytest.fixture
def center_click() -> Coord3:
    """Interior first click for a 6^3 board."""
    return Coord3(2, 2, 2)
