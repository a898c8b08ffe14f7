"""
Turn a finished grid into tile placements for a renderer.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ..core.grid import Grid


@dataclass(frozen=True)
class Placement:
    x: int
    y: int
    tile_index: int
    position: Tuple[float, float]     # origin + (x * tile_size, y * tile_size)


def compute_placements(
    grid: Grid,
    tile_size: float,
    origin: Tuple[float, float] = (0.0, 0.0),
) -> List[Placement]:
    """One placement per collapsed cell; uncollapsed cells are skipped."""
    ox, oy = origin
    placements = []
    for index, cell in enumerate(grid):
        if not cell.collapsed:
            continue
        x, y = grid.position_of(index)
        placements.append(Placement(
            x=x, y=y,
            tile_index=cell.final,
            position=(ox + x * tile_size, oy + y * tile_size),
        ))
    return placements
