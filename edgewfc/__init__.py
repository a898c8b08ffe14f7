"""
Edge-matched Wave Function Collapse tile generator.
"""

from .models import (
    EdgeType, Direction, EdgeCompatibilityTable, TileType, TileCatalog,
    GeneratorConfig, ContradictionPolicy
)
from .core import (
    ConfigurationError, Grid, Solver, SolverState, GenerationResult,
    validate, generate, load_config
)

__version__ = "1.0.0"

__all__ = [
    'EdgeType', 'Direction', 'EdgeCompatibilityTable', 'TileType', 'TileCatalog',
    'GeneratorConfig', 'ContradictionPolicy',
    'ConfigurationError', 'Grid', 'Solver', 'SolverState', 'GenerationResult',
    'validate', 'generate', 'load_config'
]
