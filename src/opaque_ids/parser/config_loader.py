"""Load codec settings from JSON configuration files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from jsonschema import Draft7Validator

from ..blocklist import load_blocklist_file
from ..domain.models import CodecOptions
from ..utils.constants import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH, SCHEMA_JSON_PATH
from ..utils.errors import (
    ConfigFileNotFound,
    InvalidConfigurationError,
    SchemaValidationError,
)
from ..utils.logging import get_logger

LOG = get_logger()


def load_json_file(json_path: Path) -> Dict:
    if not json_path.exists():
        raise ConfigFileNotFound(f"config not found: {json_path}")
    with json_path.open("r", encoding="utf-8") as f:
        try:
            config_json = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidConfigurationError(f"config is not valid JSON: {json_path} ({exc})") from exc
    LOG.info("loaded config: %s", json_path)
    return config_json


def load_schema_file(schema_path: Path = SCHEMA_JSON_PATH) -> Dict:
    if not schema_path.exists():
        raise ConfigFileNotFound(f"schema not found: {schema_path}")
    with schema_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def validate_config(config_json: Dict, schema_json: Dict) -> None:
    validator = Draft7Validator(schema_json)
    errors = sorted(validator.iter_errors(config_json), key=lambda e: e.json_path)
    if not errors:
        LOG.debug("schema validation: PASSED")
        return
    LOG.error("[SCH] schema validation: FAILED (count=%d)", len(errors))
    for i, err in enumerate(errors, start=1):
        LOG.error(
            "[SCH] #%d %s: %s (%s)",
            i,
            err.json_path,
            err.message,
            err.validator,
        )
    raise SchemaValidationError(f"schema validation failed with {len(errors)} error(s)")


def parse_options(config_json: Dict, *, base_dir: Path = Path(".")) -> CodecOptions:
    """Turn an already validated config mapping into :class:`CodecOptions`.

    ``blocklist_file`` is resolved relative to ``base_dir``.
    """

    if "blocklist" in config_json and "blocklist_file" in config_json:
        raise InvalidConfigurationError('"blocklist" and "blocklist_file" are mutually exclusive')

    blocklist = None
    if "blocklist" in config_json:
        blocklist = frozenset(config_json["blocklist"])
    elif "blocklist_file" in config_json:
        blocklist = frozenset(load_blocklist_file(base_dir / config_json["blocklist_file"]))

    return CodecOptions(
        alphabet=config_json.get("alphabet", DEFAULT_ALPHABET),
        min_length=config_json.get("min_length", DEFAULT_MIN_LENGTH),
        blocklist=blocklist,
    )


def load_options(config_path: Path, *, schema_path: Path = SCHEMA_JSON_PATH) -> CodecOptions:
    config_json = load_json_file(config_path)
    validate_config(config_json, load_schema_file(schema_path))
    return parse_options(config_json, base_dir=config_path.parent)


__all__ = ["load_json_file", "load_schema_file", "validate_config", "parse_options", "load_options"]
