"""
Load and save generator configs and generation results as JSON.
"""

import json
import logging
from pathlib import Path
from typing import Union

from ..models import GeneratorConfig
from .solver import GenerationResult

logger = logging.getLogger(__name__)


def load_config(file_path: Union[str, Path]) -> GeneratorConfig:
    """
    Load a generator config from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is invalid
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid config file {path.name}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file {path.name}: expected a JSON object")

    try:
        config = GeneratorConfig.from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid config file {path.name}: {e}")

    logger.info("Loaded config %s (%d tiles, %dx%d)",
                path.name, len(config.catalog), config.width, config.height)
    return config


def save_config(config: GeneratorConfig, file_path: Union[str, Path]) -> None:
    path = Path(file_path)
    if path.suffix != '.json':
        path = path.with_suffix('.json')
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)


def result_to_dict(result: GenerationResult) -> dict:
    grid = result.grid
    return {
        'version': '1.0',
        'status': result.status.name.lower(),
        'iterations': result.iterations,
        'seed': result.seed,
        'width': grid.width if grid is not None else 0,
        'height': grid.height if grid is not None else 0,
        'tiles': grid.final_states() if grid is not None else [],
        'contradictions': list(result.contradictions),
        'defects': result.validation.messages(),
    }


def save_result(result: GenerationResult, file_path: Union[str, Path]) -> None:
    """
    Save a generation result to a JSON file.

    Structure:
        status, iterations, seed, width, height,
        tiles: row-major final tile indices (null = uncollapsed)
    """
    path = Path(file_path)
    if path.suffix != '.json':
        path = path.with_suffix('.json')
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(result_to_dict(result), f, indent=2)
