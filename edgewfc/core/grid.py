"""
Cell and grid state for the solver.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple

from ..models.edge import DIRECTIONS, Direction


@dataclass
class Cell:
    """Solver state of one grid position."""
    candidates: Set[int] = field(default_factory=set)
    collapsed: bool = False
    final: Optional[int] = None       # valid only when collapsed

    @property
    def entropy(self) -> int:
        """Number of remaining candidates (lower = more constrained)."""
        return len(self.candidates)

    @property
    def is_contradiction(self) -> bool:
        return not self.collapsed and not self.candidates

    def collapse_to(self, tile_index: int):
        self.candidates = {tile_index}
        self.final = tile_index
        self.collapsed = True


class Grid:
    """
    Row-major array of cells addressed by index = y * width + x.
    Size is fixed for the lifetime of the grid; make a new one per run.
    """

    def __init__(self, width: int, height: int, cells: List[Cell]):
        if width < 1 or height < 1:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        if len(cells) != width * height:
            raise ValueError(f"Expected {width * height} cells, got {len(cells)}")
        self._width = width
        self._height = height
        self._cells = cells

    @classmethod
    def initialize(cls, width: int, height: int, tile_count: int) -> 'Grid':
        """Fresh grid where every cell may still be any tile."""
        if tile_count < 0:
            raise ValueError(f"Tile count must not be negative, got {tile_count}")
        cells = [Cell(candidates=set(range(tile_count))) for _ in range(width * height)]
        return cls(width, height, cells)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> Cell:
        self._check_index(index)
        return self._cells[index]

    def cell_at(self, x: int, y: int) -> Cell:
        return self._cells[self.index_of(x, y)]

    def index_of(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Position ({x},{y}) outside {self._width}x{self._height} grid")
        return y * self._width + x

    def position_of(self, index: int) -> Tuple[int, int]:
        self._check_index(index)
        return index % self._width, index // self._width

    def neighbour(self, index: int, direction: Direction) -> Optional[int]:
        """Index of the neighbour in `direction`, or None at the border."""
        x, y = self.position_of(index)
        dx, dy = direction.offset
        nx, ny = x + dx, y + dy
        if 0 <= nx < self._width and 0 <= ny < self._height:
            return ny * self._width + nx
        return None

    def neighbours(self, index: int) -> List[Tuple[Direction, int]]:
        """In-bounds neighbours as (direction, index), in N/E/S/W order."""
        result = []
        for direction in DIRECTIONS:
            n = self.neighbour(index, direction)
            if n is not None:
                result.append((direction, n))
        return result

    def is_fully_collapsed(self) -> bool:
        return all(cell.collapsed for cell in self._cells)

    def collapsed_count(self) -> int:
        return sum(1 for cell in self._cells if cell.collapsed)

    def contradictions(self) -> List[int]:
        return [i for i, cell in enumerate(self._cells) if cell.is_contradiction]

    def final_states(self) -> List[Optional[int]]:
        """Row-major final tile indices, None for uncollapsed cells."""
        return [cell.final if cell.collapsed else None for cell in self._cells]

    def _check_index(self, index: int):
        if not 0 <= index < len(self._cells):
            raise IndexError(f"Cell index {index} out of range (grid has {len(self._cells)})")
