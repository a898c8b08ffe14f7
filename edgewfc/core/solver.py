"""
Wave Function Collapse solver for edge-matched tiles on a 4-neighbour grid.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Dict, FrozenSet, Iterator, List, Optional, Set, Tuple

from ..models import (
    DIRECTIONS, ContradictionPolicy, Direction, EdgeCompatibilityTable,
    GeneratorConfig, TileCatalog
)
from .errors import ConfigurationError, ContradictionError
from .grid import Grid
from .validation import ValidationResult, validate

logger = logging.getLogger(__name__)

ITERATIONS_PER_CELL = 10


class SolverState(Enum):
    """Solver states."""
    IDLE = auto()
    VALIDATING = auto()
    SOLVING = auto()
    DONE = auto()
    DEGRADED = auto()          # stopped with some cells still uncollapsed
    FAILED = auto()            # configuration rejected, never solved
    CONTRADICTION = auto()     # aborted by ContradictionPolicy.ABORT


@dataclass
class GenerationResult:
    """Outcome of one generation run."""
    status: SolverState
    iterations: int = 0
    grid: Optional[Grid] = None
    validation: ValidationResult = field(default_factory=ValidationResult)
    contradictions: List[int] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.status == SolverState.DONE

    def cells(self) -> Iterator[Tuple[int, int, Optional[int]]]:
        """(x, y, final tile index or None) for every cell, row by row."""
        if self.grid is None:
            return
        for index, cell in enumerate(self.grid):
            x, y = self.grid.position_of(index)
            yield x, y, cell.final if cell.collapsed else None


def select_lowest_entropy_cell(grid: Grid) -> Optional[int]:
    """
    Index of the uncollapsed cell with the fewest (but at least one)
    candidates. Ties go to the lowest index. None when no such cell exists.
    """
    best_index = None
    best_entropy = None

    for index, cell in enumerate(grid):
        if cell.collapsed or not cell.candidates:
            continue
        entropy = cell.entropy
        if best_entropy is None or entropy < best_entropy:
            best_entropy = entropy
            best_index = index

    return best_index


class Solver:
    """
    Entropy-driven collapse with breadth-first constraint propagation.

    The solver owns its random source; pass a seeded random.Random for
    reproducible output. One solver may run many times, each run gets a
    fresh Grid.
    """

    def __init__(
        self,
        catalog: TileCatalog,
        compatibility: EdgeCompatibilityTable,
        rng: Optional[random.Random] = None,
        contradiction_policy: ContradictionPolicy = ContradictionPolicy.IGNORE,
        on_state_change: Optional[Callable[[SolverState], None]] = None,
    ):
        self.catalog = catalog
        self.compatibility = compatibility
        self.rng = rng if rng is not None else random.Random()
        self.contradiction_policy = contradiction_policy
        self.on_state_change = on_state_change

        self._state = SolverState.IDLE
        self._contradictions: List[int] = []

        # {(tile index, direction): tiles allowed next to it on that side}
        self._allowed: Dict[Tuple[int, Direction], FrozenSet[int]] = {}
        for index, tile in enumerate(catalog):
            for direction in DIRECTIONS:
                partner = compatibility.partner(tile.edge(direction))
                if partner is None:
                    allowed = frozenset()
                else:
                    allowed = catalog.tiles_with_edge(direction.opposite, partner)
                self._allowed[(index, direction)] = allowed

    @property
    def state(self) -> SolverState:
        return self._state

    @state.setter
    def state(self, value: SolverState):
        if self._state != value:
            self._state = value
            logger.debug("Solver state -> %s", value.name)
            if self.on_state_change is not None:
                self.on_state_change(value)

    def validate(self) -> ValidationResult:
        return validate(self.catalog, self.compatibility)

    def initialize(self, width: int, height: int) -> Grid:
        return Grid.initialize(width, height, len(self.catalog))

    def collapse(self, grid: Grid, index: int) -> Optional[int]:
        """
        Commit a cell to one of its candidates chosen uniformly at random.
        Returns the chosen tile, or None when the cell was already collapsed
        or has no candidates.
        """
        cell = grid[index]
        if cell.collapsed or not cell.candidates:
            return None

        # Sorted so the pick depends only on the rng, not on set ordering
        chosen = self.rng.choice(sorted(cell.candidates))
        cell.collapse_to(chosen)
        logger.debug("Collapsed cell %s to tile %d", grid.position_of(index), chosen)
        return chosen

    def allowed_neighbours(self, candidates: Set[int], direction: Direction) -> Set[int]:
        """Union of tiles that may sit in `direction` of any of `candidates`."""
        allowed: Set[int] = set()
        for tile_index in candidates:
            allowed |= self._allowed[(tile_index, direction)]
        return allowed

    def propagate(self, grid: Grid, origin: int) -> List[int]:
        """
        Narrow candidate sets outward from `origin` until nothing changes.

        Returns the indices of cells that hit a contradiction during this call.
        Raises ContradictionError under ContradictionPolicy.ABORT.
        """
        origin_pos = grid.position_of(origin)
        queue = deque([origin])
        pending = {origin}
        found: List[int] = []
        narrowed_count = 0

        while queue:
            current = queue.popleft()
            pending.discard(current)

            cell = grid[current]
            if not cell.candidates:
                # A contradicted cell constrains nothing
                continue

            for direction, n in grid.neighbours(current):
                neighbour = grid[n]
                if neighbour.collapsed:
                    continue

                allowed = self.allowed_neighbours(cell.candidates, direction)
                remaining = neighbour.candidates & allowed

                if not remaining:
                    if neighbour.candidates:
                        found.append(n)
                        self._handle_contradiction(grid, n)
                    continue

                if len(remaining) < len(neighbour.candidates):
                    neighbour.candidates = remaining
                    narrowed_count += 1
                    if len(remaining) == 1:
                        neighbour.collapse_to(next(iter(remaining)))
                    if n not in pending:
                        queue.append(n)
                        pending.add(n)

        logger.debug("Propagation from %s narrowed %d cell(s)",
                     origin_pos, narrowed_count)
        return found

    def _handle_contradiction(self, grid: Grid, index: int):
        x, y = grid.position_of(index)
        if index not in self._contradictions:
            self._contradictions.append(index)

        if self.contradiction_policy == ContradictionPolicy.ABORT:
            raise ContradictionError(index, x, y)

        if self.contradiction_policy == ContradictionPolicy.MARK:
            grid[index].candidates = set()
            logger.warning("Contradiction at (%d,%d): cell marked unsatisfiable", x, y)
        else:
            logger.warning("Contradiction at (%d,%d): candidates left unchanged", x, y)

    def run(self, width: int, height: int, strict: bool = False) -> GenerationResult:
        """
        Validate, then solve a fresh width x height grid to completion.

        With strict=True a rejected configuration raises ConfigurationError
        instead of returning a FAILED result.
        """
        if width < 1 or height < 1:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")

        self._contradictions = []
        self.state = SolverState.VALIDATING

        validation = self.validate()
        if not validation.is_valid:
            self.state = SolverState.FAILED
            logger.error("Wave Function Collapse failed: invalid edge compatibility rules")
            for message in validation.messages():
                logger.error("  %s", message)
            if strict:
                raise ConfigurationError(validation.defects)
            return GenerationResult(status=SolverState.FAILED, validation=validation)

        self.state = SolverState.SOLVING
        grid = self.initialize(width, height)
        # Each step collapses at least one cell, so a run never takes more
        # than width * height steps and this cap is not reached in practice.
        max_iterations = width * height * ITERATIONS_PER_CELL
        iterations = 0
        aborted = False

        while not grid.is_fully_collapsed() and iterations < max_iterations:
            index = select_lowest_entropy_cell(grid)
            if index is None:
                break  # nothing left that can be collapsed

            self.collapse(grid, index)
            iterations += 1
            try:
                self.propagate(grid, index)
            except ContradictionError as e:
                logger.warning("Wave Function Collapse aborted: %s", e)
                aborted = True
                break

        if aborted:
            status = SolverState.CONTRADICTION
        elif grid.is_fully_collapsed():
            status = SolverState.DONE
            logger.info("Wave Function Collapse finished %dx%d grid in %d iteration(s)",
                        width, height, iterations)
        else:
            status = SolverState.DEGRADED
            if iterations >= max_iterations:
                logger.warning("Wave Function Collapse reached max iterations (%d). "
                               "Grid may be incomplete.", max_iterations)
            else:
                logger.warning("Wave Function Collapse stalled with %d of %d cells collapsed",
                               grid.collapsed_count(), len(grid))

        self.state = status
        return GenerationResult(
            status=status,
            iterations=iterations,
            grid=grid,
            validation=validation,
            contradictions=list(self._contradictions),
        )


def generate(config: GeneratorConfig, rng: Optional[random.Random] = None) -> GenerationResult:
    """
    Run one generation for `config`. Without an explicit rng a new
    random.Random(config.seed) is used, so equal configs give equal grids.
    """
    if rng is None:
        rng = random.Random(config.seed)
    solver = Solver(
        config.catalog,
        config.compatibility,
        rng=rng,
        contradiction_policy=config.contradiction_policy,
    )
    result = solver.run(config.width, config.height)
    result.seed = config.seed
    return result
