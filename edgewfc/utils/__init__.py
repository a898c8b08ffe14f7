from .placement import Placement, compute_placements
from .png_export import export_grid_to_png, export_result_to_png, load_tile_image

__all__ = [
    'Placement', 'compute_placements',
    'export_grid_to_png', 'export_result_to_png', 'load_tile_image',
]
