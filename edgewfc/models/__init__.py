from .edge import EdgeType, Direction, DIRECTIONS, EdgeCompatibilityTable
from .tile import TileType
from .catalog import TileCatalog
from .settings import GeneratorConfig, ContradictionPolicy

__all__ = [
    'EdgeType', 'Direction', 'DIRECTIONS', 'EdgeCompatibilityTable',
    'TileType', 'TileCatalog', 'GeneratorConfig', 'ContradictionPolicy'
]
