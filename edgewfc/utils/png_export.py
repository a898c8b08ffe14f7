"""
Export grid to PNG image.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from PIL import Image, ImageColor

from ..core.grid import Grid
from ..core.solver import GenerationResult
from ..models import GeneratorConfig, TileCatalog
from .placement import compute_placements

logger = logging.getLogger(__name__)

# Fallback fills for tiles without an asset, cycled by tile index
DEFAULT_PALETTE = [
    (76, 153, 76), (70, 110, 200), (200, 170, 90), (150, 90, 160),
    (200, 90, 80), (90, 170, 170), (140, 140, 140), (230, 210, 120),
]


def fallback_color(tile_index: int) -> Tuple[int, int, int]:
    return DEFAULT_PALETTE[tile_index % len(DEFAULT_PALETTE)]


def load_tile_image(
    asset: Optional[str],
    tile_index: int,
    size: int,
    base_dir: Optional[Path] = None,
) -> Image.Image:
    """
    Build a size x size RGBA image for a tile asset.

    `asset` is either '#rrggbb' (solid fill) or an image path, relative
    paths being resolved against `base_dir`. Anything unusable falls back
    to a palette colour.
    """
    if asset and asset.startswith('#'):
        try:
            return Image.new('RGBA', (size, size), ImageColor.getcolor(asset, 'RGBA'))
        except ValueError:
            logger.warning("Invalid tile colour %r for tile %d", asset, tile_index)
    elif asset:
        path = Path(asset)
        if not path.is_absolute() and base_dir is not None:
            path = Path(base_dir) / path
        if path.exists():
            with Image.open(path) as source:
                image = source.convert('RGBA')
            # Nearest neighbour keeps pixel art crisp
            return image.resize((size, size), Image.Resampling.NEAREST)
        logger.warning("Tile image not found: %s", path)

    return Image.new('RGBA', (size, size), fallback_color(tile_index) + (255,))


def export_grid_to_png(
    filepath: Union[str, Path],
    grid: Grid,
    catalog: TileCatalog,
    tile_size: int = 32,
    base_dir: Optional[Path] = None,
    background_color: Tuple[int, int, int, int] = (200, 200, 200, 255),
) -> bool:
    """
    Export a grid to a PNG image.

    Args:
        filepath: Output PNG file path
        grid: Grid to draw; uncollapsed cells show the background
        catalog: TileCatalog whose assets are drawn
        tile_size: Size of each tile in output pixels
        base_dir: Directory relative asset paths are resolved against
        background_color: RGBA fill for uncollapsed cells

    Returns:
        True if at least one tile was drawn, False for an empty grid
    """
    image = Image.new('RGBA', (grid.width * tile_size, grid.height * tile_size), background_color)

    cache: Dict[int, Image.Image] = {}
    placements = compute_placements(grid, tile_size)
    for placement in placements:
        tile_image = cache.get(placement.tile_index)
        if tile_image is None:
            tile = catalog[placement.tile_index]
            tile_image = load_tile_image(tile.asset, placement.tile_index, tile_size, base_dir)
            cache[placement.tile_index] = tile_image
        px, py = placement.position
        image.paste(tile_image, (int(px), int(py)), tile_image)

    image.save(Path(filepath), 'PNG')
    logger.info("Exported %d tile(s) to %s", len(placements), filepath)
    return len(placements) > 0


def export_result_to_png(
    filepath: Union[str, Path],
    result: GenerationResult,
    config: GeneratorConfig,
    base_dir: Optional[Path] = None,
) -> bool:
    """Export a generation result, one config.tile_size square per cell."""
    if result.grid is None:
        raise ValueError("Result has no grid to export")
    return export_grid_to_png(
        filepath, result.grid, config.catalog,
        tile_size=max(1, int(round(config.tile_size))),
        base_dir=base_dir,
    )
