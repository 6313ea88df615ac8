import types

import pytest

from gtfsbbox.config import default_config, dict2obj, merge_dicts, parse_config_file, validate_config
from gtfsbbox.exceptions import InvalidInputError, MissingInputError
from conftest import TESTS_DIR


def test_dict2obj():
    config = dict2obj({"fields": {"lat": 2}, "output_format": "osm"})
    assert isinstance(config.fields, types.SimpleNamespace)
    assert config.fields.lat == 2
    assert config.output_format == "osm"


def test_merge_dicts_nested():
    merged = merge_dicts({"fields": {"lat": 2, "lon": 3}, "progress": False}, {"fields": {"lat": 1}})
    assert merged == {"fields": {"lat": 1, "lon": 3}, "progress": False}


def test_default_config():
    config = parse_config_file()
    assert config.shapes_file == "shapes.txt"
    assert config.fields.lat == 2
    assert config.fields.lon == 3
    assert config.output_format == "osm"
    assert config.progress is False


def test_default_config_is_fresh():
    config = default_config()
    config.fields.lat = 7
    assert default_config().fields.lat == 2


def test_parse_config_file_relative_path():
    config = parse_config_file(TESTS_DIR / "config.yaml")
    assert config.shapes_file == TESTS_DIR / "gtfs_three_points" / "shapes.txt"
    assert config.output_format == "geojson"
    assert config.fields.lat == 2


def test_parse_config_file_fields():
    config = parse_config_file(TESTS_DIR / "standard_layout.yaml")
    assert config.fields.lat == 1
    assert config.fields.lon == 2
    assert config.shapes_file == "shapes.txt"


def test_parse_config_file_missing(tmp_path):
    with pytest.raises(MissingInputError, match="does not exist"):
        parse_config_file(tmp_path / "missing.yaml")


def test_parse_config_file_empty(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")
    assert parse_config_file(config_file).output_format == "osm"


def test_parse_config_file_not_mapping(tmp_path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- osm\n- geojson\n")
    with pytest.raises(InvalidInputError, match="must contain a mapping"):
        parse_config_file(config_file)


@pytest.mark.parametrize("overrides, message", [
    ({"output_format": "wkt"}, "Invalid output format"),
    ({"fields": {"lat": -1}}, "non-negative integer"),
    ({"fields": {"lon": "3"}}, "non-negative integer"),
    ({"fields": {"lat": True}}, "non-negative integer"),
    ({"fields": {"lat": 3, "lon": 3}}, "must differ"),
])
def test_validate_config_invalid(overrides, message):
    config = dict2obj(merge_dicts({"fields": {"lat": 2, "lon": 3}, "output_format": "osm"}, overrides))
    with pytest.raises(InvalidInputError, match=message):
        validate_config(config)


def test_validate_config_valid():
    validate_config(default_config())
