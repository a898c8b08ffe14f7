from .errors import ConfigurationError, ContradictionError
from .grid import Cell, Grid
from .validation import (
    Defect, DefectKind, ValidationResult, validate, find_adjacency_violations
)
from .solver import (
    Solver, SolverState, GenerationResult, select_lowest_entropy_cell, generate
)
from .serialization import load_config, save_config, save_result, result_to_dict

__all__ = [
    'ConfigurationError', 'ContradictionError',
    'Cell', 'Grid',
    'Defect', 'DefectKind', 'ValidationResult', 'validate', 'find_adjacency_violations',
    'Solver', 'SolverState', 'GenerationResult', 'select_lowest_entropy_cell', 'generate',
    'load_config', 'save_config', 'save_result', 'result_to_dict'
]
