"""Tests for JSON config and result files."""

import json

import pytest

from edgewfc.core.serialization import load_config, save_config, save_result
from edgewfc.core.solver import generate
from edgewfc.models import ContradictionPolicy, EdgeCompatibilityTable, EdgeType


def write_json(path, data):
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


def test_load_sample_config(roads_config_path):
    config = load_config(roads_config_path)
    assert (config.width, config.height, config.seed) == (16, 12, 7)
    assert len(config.catalog) == 6
    assert config.catalog[1].name == "road_ns"
    assert config.catalog[1].north == EdgeType.B
    assert config.catalog[0].asset == "#4c994c"


def test_save_then_load_gives_equal_config(tmp_path, checker_config):
    config = checker_config.with_overrides(contradiction_policy=ContradictionPolicy.MARK)
    path = tmp_path / "checker.json"

    save_config(config, path)

    assert load_config(path) == config


def test_save_config_adds_json_suffix(tmp_path, checker_config):
    save_config(checker_config, tmp_path / "plain")
    assert (tmp_path / "plain.json").exists()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")


def test_malformed_json_raises_value_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding='utf-8')
    with pytest.raises(ValueError, match="Invalid config file"):
        load_config(path)


def test_non_object_json_raises_value_error(tmp_path):
    path = write_json(tmp_path / "list.json", [1, 2, 3])
    with pytest.raises(ValueError, match="expected a JSON object"):
        load_config(path)


@pytest.mark.parametrize("data, message", [
    ({'tiles': ["grass"]}, "Tile entry must be an object"),
    ({'tiles': {'name': "grass"}}, "Tiles must be a list"),
    ({'tiles': [{'edges': ["A", "A", "A", "A"]}]}, "Tile edges must be an object"),
    ({'compatibility': ["A", "A"], 'tiles': [{}]}, "Edge compatibility must be an object"),
])
def test_wrongly_shaped_config_raises_value_error(tmp_path, data, message):
    path = write_json(tmp_path / "shape.json", data)
    with pytest.raises(ValueError, match=message):
        load_config(path)


def test_unknown_edge_label_raises_value_error(tmp_path):
    path = write_json(tmp_path / "bad_edge.json", {
        'tiles': [{'edges': {'north': 'Q'}}],
    })
    with pytest.raises(ValueError, match="Unknown edge type"):
        load_config(path)


def test_missing_compatibility_defaults_to_identity(tmp_path):
    path = write_json(tmp_path / "minimal.json", {
        'width': 3, 'height': 2,
        'tiles': [{'name': 'only', 'edges': {}}],
    })
    config = load_config(path)
    assert config.compatibility == EdgeCompatibilityTable.identity()
    assert config.tile_size == 100.0


def test_save_result_layout(tmp_path, checker_config):
    result = generate(checker_config)
    path = tmp_path / "out.json"

    save_result(result, path)

    data = json.loads(path.read_text(encoding='utf-8'))
    assert data['status'] == 'done'
    assert data['iterations'] == 1
    assert data['seed'] == checker_config.seed
    assert (data['width'], data['height']) == (2, 2)
    assert data['tiles'] == result.grid.final_states()
    assert data['defects'] == []


def test_save_result_for_failed_run(tmp_path, checker_config):
    bad = checker_config.with_overrides(
        compatibility=EdgeCompatibilityTable({EdgeType.A: EdgeType.B})
    )
    result = generate(bad)
    path = tmp_path / "failed.json"

    save_result(result, path)

    data = json.loads(path.read_text(encoding='utf-8'))
    assert data['status'] == 'failed'
    assert data['tiles'] == []
    assert data['defects']
