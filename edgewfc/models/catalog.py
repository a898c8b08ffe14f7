from typing import Dict, FrozenSet, Iterable, Iterator, List, Tuple

from .edge import DIRECTIONS, Direction, EdgeType
from .tile import TileType


class TileCatalog:
    """
    Ordered, read-only collection of tile types. A tile's index in the
    catalog is its identity for the solver.
    """

    def __init__(self, tiles: Iterable[TileType] = ()):
        self._tiles: Tuple[TileType, ...] = tuple(tiles)

        # {direction: {edge: tile indices with that edge on that side}}
        self._by_edge: Dict[Direction, Dict[EdgeType, FrozenSet[int]]] = {}
        for direction in DIRECTIONS:
            buckets: Dict[EdgeType, set] = {}
            for index, tile in enumerate(self._tiles):
                buckets.setdefault(tile.edge(direction), set()).add(index)
            self._by_edge[direction] = {
                edge: frozenset(indices) for edge, indices in buckets.items()
            }

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[TileType]:
        return iter(self._tiles)

    def __getitem__(self, index: int) -> TileType:
        if not 0 <= index < len(self._tiles):
            raise IndexError(f"Tile index {index} out of range (catalog has {len(self._tiles)})")
        return self._tiles[index]

    def __eq__(self, other):
        if isinstance(other, TileCatalog):
            return self._tiles == other._tiles
        return False

    def __hash__(self):
        return hash(self._tiles)

    def __repr__(self):
        return f"TileCatalog({list(self._tiles)!r})"

    def tiles_with_edge(self, direction: Direction, label: EdgeType) -> FrozenSet[int]:
        """Indices of tiles whose `direction` edge is `label`."""
        return self._by_edge[direction].get(label, frozenset())

    def used_edges(self) -> List[Tuple[int, Direction, EdgeType]]:
        """Every (tile index, direction, edge) triple in catalog order."""
        return [
            (index, direction, tile.edge(direction))
            for index, tile in enumerate(self._tiles)
            for direction in DIRECTIONS
        ]

    def to_list(self) -> list:
        return [tile.to_dict() for tile in self._tiles]

    @classmethod
    def from_list(cls, data: list) -> 'TileCatalog':
        if not isinstance(data, list):
            raise ValueError(f"Tiles must be a list, got {type(data).__name__}")
        return cls(TileType.from_dict(item) for item in data)
