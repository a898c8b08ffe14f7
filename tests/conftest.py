"""Shared pytest fixtures for generator tests."""

from pathlib import Path

import pytest

from edgewfc.models import (
    EdgeCompatibilityTable, EdgeType, GeneratorConfig, TileCatalog, TileType
)

A, B, C = EdgeType.A, EdgeType.B, EdgeType.C


def uniform_tile(edge: EdgeType, name: str = "", asset=None) -> TileType:
    return TileType(north=edge, east=edge, south=edge, west=edge, name=name, asset=asset)


@pytest.fixture
def single_tile_catalog():
    """One tile with the same edge type on every side."""
    return TileCatalog([uniform_tile(A, "plain")])


@pytest.fixture
def identity_table():
    return EdgeCompatibilityTable.identity()


@pytest.fixture
def checker_catalog():
    """Tile 0 is all A, tile 1 is all B."""
    return TileCatalog([uniform_tile(A, "light"), uniform_tile(B, "dark")])


@pytest.fixture
def cross_table():
    """A connects only to B and B only to A."""
    return EdgeCompatibilityTable({A: B, B: A})


@pytest.fixture
def corridor_catalog():
    """
    Tiles for a one-row grid: tile 0 has A on east/west, tiles 1 and 2
    have B there. Tiles 1 and 2 are interchangeable.
    """
    return TileCatalog([
        TileType(north=A, east=A, south=A, west=A, name="wall"),
        TileType(north=A, east=B, south=A, west=B, name="pipe"),
        TileType(north=A, east=B, south=A, west=B, name="pipe_alt"),
    ])


@pytest.fixture
def dead_end_catalog():
    """A single tile whose edges connect to B, which no tile has."""
    return TileCatalog([uniform_tile(A, "lonely")])


@pytest.fixture
def roads_config_path():
    return Path(__file__).parent.parent / "configs" / "roads.json"


@pytest.fixture
def checker_config(checker_catalog, cross_table):
    return GeneratorConfig(
        width=2, height=2,
        catalog=checker_catalog,
        compatibility=cross_table,
        seed=3,
    )
