"""Tests for configuration validation and grid auditing."""

from edgewfc.core.grid import Grid
from edgewfc.core.validation import DefectKind, find_adjacency_violations, validate
from edgewfc.models import (
    Direction, EdgeCompatibilityTable, EdgeType, TileCatalog, TileType
)

A, B, C = EdgeType.A, EdgeType.B, EdgeType.C


def test_symmetric_covering_table_is_valid(checker_catalog, cross_table, identity_table):
    assert validate(checker_catalog, cross_table).is_valid
    assert validate(checker_catalog, identity_table).is_valid


def test_empty_catalog_is_a_defect(identity_table):
    result = validate(TileCatalog(), identity_table)
    assert not result.is_valid
    assert [d.kind for d in result.defects] == [DefectKind.EMPTY_CATALOG]


def test_missing_compatibility_entry_names_tile_and_side():
    catalog = TileCatalog([TileType(north=C, east=A, south=A, west=A)])
    result = validate(catalog, EdgeCompatibilityTable({A: A}))

    missing = result.of_kind(DefectKind.MISSING_COMPATIBILITY)
    assert len(missing) == 1
    assert missing[0].tile_index == 0
    assert missing[0].direction == Direction.NORTH
    assert "Tile 0 has north edge type C" in missing[0].message


def test_asymmetric_table_reports_offending_pairs(checker_catalog):
    table = EdgeCompatibilityTable({A: B, B: C, C: C})
    result = validate(checker_catalog, table)

    asymmetric = result.of_kind(DefectKind.ASYMMETRIC_COMPATIBILITY)
    assert {d.labels for d in asymmetric} == {(A, B), (B, C)}
    assert any("A -> B, but B -> C" in d.message for d in asymmetric)


def test_asymmetric_pair_with_missing_reverse():
    catalog = TileCatalog([TileType()])
    result = validate(catalog, EdgeCompatibilityTable({A: B}))
    assert [d.labels for d in result.defects] == [(A, B)]
    assert "B -> nothing" in result.defects[0].message


def test_all_defects_are_collected_together():
    catalog = TileCatalog([
        TileType(north=C, east=C, south=A, west=A),
        TileType(north=A, east=A, south=C, west=A),
    ])
    result = validate(catalog, EdgeCompatibilityTable({A: B, B: B}))

    assert result.error_count == 4
    assert len(result.of_kind(DefectKind.MISSING_COMPATIBILITY)) == 3
    assert len(result.of_kind(DefectKind.ASYMMETRIC_COMPATIBILITY)) == 1
    assert len(result.messages()) == 4


def test_empty_catalog_and_asymmetry_reported_together():
    result = validate(TileCatalog(), EdgeCompatibilityTable({A: B}))
    kinds = {d.kind for d in result.defects}
    assert kinds == {DefectKind.EMPTY_CATALOG, DefectKind.ASYMMETRIC_COMPATIBILITY}


def test_adjacency_audit_accepts_checkerboard(checker_catalog, cross_table):
    grid = Grid.initialize(2, 2, 2)
    for index, tile in enumerate([0, 1, 1, 0]):
        grid[index].collapse_to(tile)
    assert find_adjacency_violations(grid, checker_catalog, cross_table) == []


def test_adjacency_audit_reports_both_sides_of_a_bad_pair(checker_catalog, cross_table):
    grid = Grid.initialize(2, 1, 2)
    grid[0].collapse_to(0)
    grid[1].collapse_to(0)

    errors = find_adjacency_violations(grid, checker_catalog, cross_table)
    assert len(errors) == 2
    assert errors[0].startswith("(0,0) tile 0 east edge A")


def test_adjacency_audit_ignores_uncollapsed_cells(checker_catalog, cross_table):
    grid = Grid.initialize(2, 1, 2)
    grid[0].collapse_to(0)
    assert find_adjacency_violations(grid, checker_catalog, cross_table) == []
