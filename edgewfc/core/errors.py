"""
Exception types raised by the generator.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import Defect


class ConfigurationError(Exception):
    """The catalog/compatibility pair can't be solved. Not retryable."""

    def __init__(self, defects: List['Defect']):
        self.defects = list(defects)
        lines = '\n'.join(f"  - {d.message}" for d in self.defects)
        super().__init__(f"Invalid configuration ({len(self.defects)} defect(s)):\n{lines}")


class ContradictionError(Exception):
    """A cell ran out of candidates during propagation."""

    def __init__(self, cell_index: int, x: int, y: int):
        self.cell_index = cell_index
        self.x = x
        self.y = y
        super().__init__(f"Contradiction at ({x},{y})")
