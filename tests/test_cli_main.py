from __future__ import annotations

import json
from pathlib import Path

import pytest

from opaque_ids.cli.main import EXIT_ERROR, EXIT_OK, _resolve_options, main, parse_args
from opaque_ids.domain.models import CodecOptions


def test_cli_defaults_to_standard_options() -> None:
    args = parse_args(["encode", "1"])

    assert _resolve_options(args) == CodecOptions()


def test_cli_encode_prints_id(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode", "1", "2", "3"]) == EXIT_OK

    assert capsys.readouterr().out == "86Rf07\n"


def test_cli_decode_prints_one_line_per_id(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", "86Rf07", "bM", "$$"]) == EXIT_OK

    assert capsys.readouterr().out == "1 2 3\n0\n\n"


def test_cli_short_aliases_parse_correctly(tmp_path: Path) -> None:
    words = tmp_path / "words.txt"
    args = parse_args(["-a", "0123456789abcdef", "-m", "4", "-b", str(words), "-v", "decode", "x"])

    assert args.alphabet == "0123456789abcdef"
    assert args.min_length == 4
    assert args.blocklist_file == words
    assert args.verbose is True
    assert args.ids == ["x"]


def test_cli_no_blocklist_disables_default(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--no-blocklist", "encode", "4572721"]) == EXIT_OK

    assert capsys.readouterr().out.strip() == "aho1e"


def test_cli_blocklist_options_are_exclusive(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        parse_args(["--no-blocklist", "--blocklist-file", str(tmp_path / "w.txt"), "encode", "1"])


def test_cli_overrides_config_values(tmp_path: Path) -> None:
    config = tmp_path / "codec.json"
    config.write_text(json.dumps({"alphabet": "abcdef", "min_length": 2, "blocklist": []}), encoding="utf-8")
    args = parse_args(["--config", str(config), "--min-length", "5", "encode", "1"])

    options = _resolve_options(args)

    assert options == CodecOptions(alphabet="abcdef", min_length=5, blocklist=frozenset())


def test_cli_reports_range_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode", "-1"]) == EXIT_ERROR

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: encoding supports numbers between 0 and")


def test_cli_reports_configuration_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--alphabet", "aab", "encode", "1"]) == EXIT_ERROR

    assert "alphabet must contain unique characters" in capsys.readouterr().err


def test_cli_reports_exhaustion(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    words = tmp_path / "words.txt"
    words.write_text("abc\nacb\nbac\nbca\ncab\ncba\n", encoding="utf-8")

    assert main(["-a", "abc", "-m", "3", "-b", str(words), "encode", "0"]) == EXIT_ERROR

    assert "Reached max attempts to re-generate the ID" in capsys.readouterr().err
