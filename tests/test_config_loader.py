"""Tests for JSON configuration loading."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from opaque_ids import CodecOptions, IdCodec
from opaque_ids.parser.config_loader import load_options, parse_options, validate_config, load_schema_file
from opaque_ids.utils.errors import (
    ConfigFileNotFound,
    InvalidConfigurationError,
    SchemaValidationError,
)


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_empty_config_yields_defaults(tmp_path: Path) -> None:
    config = _write(tmp_path / "codec.json", {})

    assert load_options(config) == CodecOptions()


def test_config_with_inline_blocklist(tmp_path: Path) -> None:
    config = _write(
        tmp_path / "codec.json",
        {"alphabet": "0123456789abcdef", "min_length": 6, "blocklist": ["beef", "cafe"]},
    )

    options = load_options(config)

    assert options == CodecOptions(
        alphabet="0123456789abcdef",
        min_length=6,
        blocklist=frozenset({"beef", "cafe"}),
    )
    codec = IdCodec.from_options(options)
    assert codec.decode(codec.encode([42])) == [42]


def test_blocklist_file_is_relative_to_config(tmp_path: Path) -> None:
    (tmp_path / "lists").mkdir()
    (tmp_path / "lists" / "words.txt").write_text("aho1e\n# comment\n", encoding="utf-8")
    config = _write(tmp_path / "codec.json", {"blocklist_file": "lists/words.txt"})

    options = load_options(config)

    assert options.blocklist == frozenset({"aho1e"})
    assert IdCodec.from_options(options).encode([4572721]) == "JExTR"


def test_empty_blocklist_in_config_disables_default(tmp_path: Path) -> None:
    config = _write(tmp_path / "codec.json", {"blocklist": []})

    options = load_options(config)

    assert options.blocklist == frozenset()
    assert IdCodec.from_options(options).encode([4572721]) == "aho1e"


def test_missing_config(tmp_path: Path) -> None:
    with pytest.raises(ConfigFileNotFound):
        load_options(tmp_path / "absent.json")


def test_invalid_json(tmp_path: Path) -> None:
    config = tmp_path / "codec.json"
    config.write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidConfigurationError):
        load_options(config)


def test_schema_errors_are_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    config = _write(tmp_path / "codec.json", {"min_length": -1, "alphabet": 5, "extra": True})
    caplog.set_level(logging.ERROR, logger="opaque_ids")

    with pytest.raises(SchemaValidationError, match="3 error"):
        load_options(config)

    assert "[SCH] schema validation: FAILED (count=3)" in caplog.text
    assert "$.min_length: -1 is less than the minimum of 0 (minimum)" in caplog.text


def test_validate_config_accepts_valid_mapping() -> None:
    validate_config({"alphabet": "abc", "min_length": 2}, load_schema_file())


def test_blocklist_and_blocklist_file_are_exclusive() -> None:
    with pytest.raises(InvalidConfigurationError):
        parse_options({"blocklist": ["abc"], "blocklist_file": "words.txt"})
