from typing import Optional

import yaml
import types
from pathlib import Path

from gtfsbbox.exceptions import InvalidInputError, MissingInputError
from gtfsbbox.log import LOGGER

OUTPUT_FORMATS = ("osm", "geojson")

DEFAULT_CONFIG = {
    "shapes_file": "shapes.txt",
    "fields": {
        "lat": 2,
        "lon": 3,
    },
    "output_format": "osm",
    "progress": False,
}

logger = LOGGER.get_logger('config')


def dict2obj(data):
    """Convert nested config mappings to attribute access, other values are kept as they are."""
    if type(data) is dict:
        return types.SimpleNamespace(**{key: dict2obj(value) for key, value in data.items()})
    return data


def expand_relative_paths(config_object: types.SimpleNamespace, root_dir: Path):
    for key, value in vars(config_object).items():
        if isinstance(value, str):
            if value.startswith('./'):
                setattr(config_object, key, root_dir / value[2:])
        # for objects, call recursively
        elif isinstance(value, types.SimpleNamespace):
            expand_relative_paths(value, root_dir)

def merge_dicts(dict_a, dict_b):
    merged = dict_a.copy()

    for key, value in dict_b.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value

    return merged


def validate_config(config: types.SimpleNamespace):
    """Raise InvalidInputError if the config holds values the run cannot use."""
    if config.output_format not in OUTPUT_FORMATS:
        raise InvalidInputError(
            f"Invalid output format '{config.output_format}'. Use one of: {', '.join(OUTPUT_FORMATS)}.")

    for name in ("lat", "lon"):
        index = getattr(config.fields, name, None)
        if type(index) is not int or index < 0:
            raise InvalidInputError(f"Field index '{name}' must be a non-negative integer, got {index!r}.")

    if config.fields.lat == config.fields.lon:
        raise InvalidInputError("Latitude and longitude field indices must differ.")


def default_config() -> types.SimpleNamespace:
    return dict2obj(DEFAULT_CONFIG)


def parse_config_file(config_file: Optional[Path] = None) -> types.SimpleNamespace:
    """Return the run configuration: the defaults, overridden by config_file if given."""
    if config_file is None:
        return default_config()

    config_file = Path(config_file)
    if not config_file.is_file():
        raise MissingInputError(f"Config file '{config_file}' does not exist.")

    with open(config_file, 'r', encoding="UTF-8") as file:
        config_dict = yaml.safe_load(file) or {}

    if not isinstance(config_dict, dict):
        raise InvalidInputError(f"Config file '{config_file}' must contain a mapping.")

    logger.debug("Loaded config from %s", config_file)
    config_object = dict2obj(merge_dicts(DEFAULT_CONFIG, config_dict))
    expand_relative_paths(config_object, config_file.parent)
    validate_config(config_object)
    return config_object
