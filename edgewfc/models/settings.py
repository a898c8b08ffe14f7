from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Tuple

from .catalog import TileCatalog
from .edge import EdgeCompatibilityTable


class ContradictionPolicy(Enum):
    """What propagation does when a neighbour would be left with no candidates."""
    IGNORE = 'ignore'    # leave the neighbour as it was and carry on
    MARK = 'mark'        # empty the neighbour so selection skips it
    ABORT = 'abort'      # stop the run


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Everything one generation run needs. Built once and passed in; use
    with_overrides() to derive a variant.
    """
    width: int = 10
    height: int = 10
    catalog: TileCatalog = field(default_factory=TileCatalog)
    compatibility: EdgeCompatibilityTable = field(default_factory=EdgeCompatibilityTable.identity)
    tile_size: float = 100.0          # spacing between placed tiles
    seed: int = 0
    contradiction_policy: ContradictionPolicy = ContradictionPolicy.IGNORE

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid size must be positive, got {self.width}x{self.height}")
        if self.tile_size <= 0:
            raise ValueError(f"Tile size must be positive, got {self.tile_size}")

    def with_overrides(self, **changes) -> 'GeneratorConfig':
        return replace(self, **changes)

    def clamped(self, max_size: int, max_seed: int) -> Tuple['GeneratorConfig', List[str]]:
        """
        Copy with width and height capped at max_size and seed kept in
        0..max_seed, plus the names of the fields that had to change.
        """
        changes = {}
        if self.width > max_size:
            changes['width'] = max_size
        if self.height > max_size:
            changes['height'] = max_size
        if not 0 <= self.seed <= max_seed:
            changes['seed'] = self.seed % (max_seed + 1)
        return replace(self, **changes), list(changes)

    def to_dict(self) -> dict:
        return {
            'version': '1.0',
            'width': self.width,
            'height': self.height,
            'tile_size': self.tile_size,
            'seed': self.seed,
            'contradiction_policy': self.contradiction_policy.value,
            'compatibility': self.compatibility.to_dict(),
            'tiles': self.catalog.to_list(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'GeneratorConfig':
        if 'compatibility' in data:
            table = EdgeCompatibilityTable.from_dict(data['compatibility'])
        else:
            table = EdgeCompatibilityTable.identity()
        try:
            policy = ContradictionPolicy(data.get('contradiction_policy', 'ignore'))
        except ValueError:
            raise ValueError(f"Unknown contradiction policy: {data.get('contradiction_policy')!r}")
        return cls(
            width=int(data.get('width', 10)),
            height=int(data.get('height', 10)),
            catalog=TileCatalog.from_list(data.get('tiles', [])),
            compatibility=table,
            tile_size=float(data.get('tile_size', 100.0)),
            seed=int(data.get('seed', 0)),
            contradiction_policy=policy,
        )
