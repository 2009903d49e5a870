"""
Coordinate module for 3D Minesweeper.

Provides the integer cube coordinate and the 26-neighbor enumeration
shared by the board, generator, and solver.
"""
from dataclasses import dataclass
from typing import Iterator, List


# ============================================================================
# Coordinate Type
# ============================================================================

@dataclass(frozen=True)
class Coord3:
    """
    Integer 3D coordinate.

    Attributes:
        x: Position along the x axis (scanned innermost).
        y: Position along the y axis.
        z: Position along the z axis (scanned outermost).
    """

    x: int
    y: int
    z: int

    def __hash__(self) -> int:
        return (self.x * 73856093) ^ (self.y * 19349663) ^ (self.z * 83492791)

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"

    def offset(self, dx: int, dy: int, dz: int) -> "Coord3":
        """Return the coordinate shifted by the given deltas."""
        return Coord3(self.x + dx, self.y + dy, self.z + dz)


# ============================================================================
# Grid Geometry
# ============================================================================

def in_bounds(coord: Coord3, size: int) -> bool:
    """Check if coordinate lies inside a size^3 cube."""
    return (
        0 <= coord.x < size
        and 0 <= coord.y < size
        and 0 <= coord.z < size
    )


def iter_neighbors(coord: Coord3, size: int) -> Iterator[Coord3]:
    """
    Yield the in-bounds 26-neighborhood of a cell.

    This is the only place neighbor offsets are enumerated.

    Args:
        coord: Center cell.
        size: Cube edge length.

    Yields:
        Neighbor coordinates, dx outermost, then dy, then dz.
    """
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            for dz in (-1, 0, 1):
                if dx == 0 and dy == 0 and dz == 0:
                    continue
                neighbor = coord.offset(dx, dy, dz)
                if in_bounds(neighbor, size):
                    yield neighbor


def neighbors(coord: Coord3, size: int) -> List[Coord3]:
    """Get the in-bounds neighbors of a cell as a list."""
    return list(iter_neighbors(coord, size))


def flat_index(coord: Coord3, size: int) -> int:
    """Convert coordinate to flat index (x innermost)."""
    return coord.x + size * (coord.y + size * coord.z)


def from_flat(index: int, size: int) -> Coord3:
    """Convert flat index back to a coordinate."""
    x = index % size
    y = (index // size) % size
    z = index // (size * size)
    return Coord3(x, y, z)


def scan_order(size: int) -> Iterator[Coord3]:
    """Yield every cell of the cube, x innermost, then y, then z."""
    for z in range(size):
        for y in range(size):
            for x in range(size):
                yield Coord3(x, y, z)
