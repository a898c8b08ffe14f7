from dataclasses import dataclass
from typing import Optional

from .edge import Direction, EdgeType


@dataclass(frozen=True)
class TileType:
    """
    A placeable tile described by the edge type on each of its four sides.
    The solver only looks at the edges; `asset` is handed through to renderers.
    """
    north: EdgeType = EdgeType.A
    east: EdgeType = EdgeType.A
    south: EdgeType = EdgeType.A
    west: EdgeType = EdgeType.A
    name: str = ""                    # display name, not used for identity
    asset: Optional[str] = None       # image path or '#rrggbb' colour

    def edge(self, direction: Direction) -> EdgeType:
        """Edge type facing `direction`."""
        return getattr(self, direction.value)

    @property
    def edges(self) -> tuple:
        return (self.north, self.east, self.south, self.west)

    def to_dict(self) -> dict:
        data = {
            'name': self.name,
            'edges': {
                'north': self.north.value,
                'east': self.east.value,
                'south': self.south.value,
                'west': self.west.value,
            },
        }
        if self.asset is not None:
            data['asset'] = self.asset
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'TileType':
        if not isinstance(data, dict):
            raise ValueError(f"Tile entry must be an object, got {type(data).__name__}")
        edges = data.get('edges', {})
        if not isinstance(edges, dict):
            raise ValueError(f"Tile edges must be an object, got {type(edges).__name__}")
        unknown = set(edges) - {d.value for d in Direction}
        if unknown:
            raise ValueError(f"Unknown edge direction(s): {', '.join(sorted(unknown))}")
        return cls(
            north=EdgeType.parse(edges.get('north', 'A')),
            east=EdgeType.parse(edges.get('east', 'A')),
            south=EdgeType.parse(edges.get('south', 'A')),
            west=EdgeType.parse(edges.get('west', 'A')),
            name=data.get('name', ''),
            asset=data.get('asset'),
        )
