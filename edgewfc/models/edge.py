from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Mapping, Tuple


class EdgeType(Enum):
    """Connector type exposed on one side of a tile."""
    A = 'A'
    B = 'B'
    C = 'C'
    D = 'D'

    @classmethod
    def parse(cls, value) -> 'EdgeType':
        if isinstance(value, EdgeType):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown edge type: {value!r}")


class Direction(Enum):
    """Cardinal directions of the 4-neighbour grid. North is y - 1."""
    NORTH = 'north'
    EAST = 'east'
    SOUTH = 'south'
    WEST = 'west'

    @property
    def opposite(self) -> 'Direction':
        return _OPPOSITES[self]

    @property
    def offset(self) -> Tuple[int, int]:
        """(dx, dy) step towards the neighbour in this direction."""
        return _OFFSETS[self]

    @classmethod
    def parse(cls, value) -> 'Direction':
        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown direction: {value!r}")


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

# Propagation visits neighbours in this order
DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


@dataclass(frozen=True)
class EdgeCompatibilityTable:
    """
    Maps each edge type to the single edge type it may touch.

    Compatibility only consults the forward mapping of the first label, so a
    table that is not symmetric gives direction-dependent answers. Run the
    validator before solving to catch that.
    """
    mapping: Mapping[EdgeType, EdgeType] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze a private copy so the caller's dict can't change under us
        object.__setattr__(self, 'mapping', dict(self.mapping))

    @classmethod
    def identity(cls) -> 'EdgeCompatibilityTable':
        """Every edge type connects only to itself."""
        return cls({edge: edge for edge in EdgeType})

    def is_compatible(self, a: EdgeType, b: EdgeType) -> bool:
        return self.mapping.get(a) == b

    def partner(self, label: EdgeType):
        """The label `label` connects to, or None when it has no rule."""
        return self.mapping.get(label)

    def __contains__(self, label: EdgeType) -> bool:
        return label in self.mapping

    def __iter__(self) -> Iterator[Tuple[EdgeType, EdgeType]]:
        return iter(self.mapping.items())

    def __len__(self) -> int:
        return len(self.mapping)

    def to_dict(self) -> Dict[str, str]:
        return {a.value: b.value for a, b in self.mapping.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> 'EdgeCompatibilityTable':
        if not isinstance(data, Mapping):
            raise ValueError(f"Edge compatibility must be an object, got {type(data).__name__}")
        return cls({EdgeType.parse(a): EdgeType.parse(b) for a, b in data.items()})
