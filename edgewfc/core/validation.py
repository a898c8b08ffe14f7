"""
Validation utilities for checking catalog/compatibility consistency and
auditing finished grids.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..models import Direction, EdgeCompatibilityTable, EdgeType, TileCatalog
from .grid import Grid

logger = logging.getLogger(__name__)


class DefectKind(Enum):
    EMPTY_CATALOG = 'empty_catalog'
    MISSING_COMPATIBILITY = 'missing_compatibility'
    ASYMMETRIC_COMPATIBILITY = 'asymmetric_compatibility'


@dataclass(frozen=True)
class Defect:
    """One problem found by validate()."""
    kind: DefectKind
    message: str
    tile_index: Optional[int] = None
    direction: Optional[Direction] = None
    labels: Optional[Tuple[EdgeType, Optional[EdgeType]]] = None  # offending pair


@dataclass
class ValidationResult:
    """Overall validation result for a catalog and its compatibility table."""
    defects: List[Defect] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.defects) == 0

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def error_count(self) -> int:
        return len(self.defects)

    def of_kind(self, kind: DefectKind) -> List[Defect]:
        return [d for d in self.defects if d.kind == kind]

    def messages(self) -> List[str]:
        return [d.message for d in self.defects]


def validate(catalog: TileCatalog, table: EdgeCompatibilityTable) -> ValidationResult:
    """
    Check that a catalog can be solved with a compatibility table.

    Checks:
    1. The catalog has at least one tile
    2. Every edge type used by a tile has a compatibility entry
    3. Every entry a -> b is mirrored by b -> a

    All defects are collected; nothing stops at the first one.
    """
    result = ValidationResult()

    if len(catalog) == 0:
        result.defects.append(Defect(
            kind=DefectKind.EMPTY_CATALOG,
            message="No tile types defined",
        ))

    for index, direction, edge in catalog.used_edges():
        if edge not in table:
            result.defects.append(Defect(
                kind=DefectKind.MISSING_COMPATIBILITY,
                message=(f"Tile {index} has {direction.value} edge type "
                         f"{edge.value} with no compatibility rule"),
                tile_index=index,
                direction=direction,
                labels=(edge, None),
            ))

    for a, b in table:
        reverse = table.partner(b)
        if reverse != a:
            shown = reverse.value if reverse is not None else 'nothing'
            result.defects.append(Defect(
                kind=DefectKind.ASYMMETRIC_COMPATIBILITY,
                message=(f"Edge compatibility is not symmetric: "
                         f"{a.value} -> {b.value}, but {b.value} -> {shown}"),
                labels=(a, b),
            ))

    for defect in result.defects:
        logger.debug("Validation defect: %s", defect.message)

    return result


def find_adjacency_violations(
    grid: Grid,
    catalog: TileCatalog,
    table: EdgeCompatibilityTable,
) -> List[str]:
    """
    Check all adjacencies between collapsed cells of a grid.
    Returns a list of error messages (empty if every pair is compatible).
    """
    errors = []

    for index, cell in enumerate(grid):
        if not cell.collapsed:
            continue
        x, y = grid.position_of(index)
        tile = catalog[cell.final]

        for direction, n in grid.neighbours(index):
            neighbour = grid[n]
            if not neighbour.collapsed:
                continue
            other = catalog[neighbour.final]
            mine = tile.edge(direction)
            theirs = other.edge(direction.opposite)
            if not table.is_compatible(mine, theirs):
                nx, ny = grid.position_of(n)
                errors.append(
                    f"({x},{y}) tile {cell.final} {direction.value} edge {mine.value} "
                    f"does not connect to ({nx},{ny}) tile {neighbour.final} "
                    f"{direction.opposite.value} edge {theirs.value}"
                )

    return errors
