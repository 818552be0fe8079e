"""Property-based tests for configuration handling.

This module tests universal properties of configuration file loading and merging:
- Configuration round trip (JSON/YAML serialization)
- CLI argument precedence
- Invalid configuration detection
- The check-config command
"""

import json

import pytest
import yaml
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from romconv.cli.commands import check_config, convert
from romconv.cli.config import (
    DEFAULTS,
    ConfigError,
    load_config,
    merge_config,
    resolve_config,
    validate_config,
)
from romconv.cli.exit_codes import ExitCode


# Strategy for generating valid configuration dictionaries
@st.composite
def valid_config_dict(draw):
    """Generate random valid configuration dictionaries."""
    config = {}

    for key in ("additive", "simple", "range", "output", "append"):
        if draw(st.booleans()):
            config[key] = draw(st.booleans())

    for key in ("start", "end"):
        if draw(st.booleans()):
            config[key] = draw(st.integers(min_value=1, max_value=4000))

    if draw(st.booleans()):
        config["path"] = draw(
            st.text(alphabet="abcdefghijklmnopqrstuvwxyz_-", min_size=1, max_size=12)
        ) + ".txt"

    return config


# Feature: romconv-cli, Property 6: Configuration Round Trip
@given(
    config=valid_config_dict(),
    file_format=st.sampled_from(["json", "yaml", "yml"]),
)
@settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_property_config_round_trip(config, file_format, tmp_path):
    """Test that configs survive serialization and loading.

    Property: For any valid configuration, writing it as JSON or YAML and
    loading it back yields an equal dictionary that validates cleanly.
    """
    config_file = tmp_path / f"config.{file_format}"
    if file_format == "json":
        config_file.write_text(json.dumps(config))
    else:
        config_file.write_text(yaml.safe_dump(config))

    loaded = load_config(config_file)

    assert loaded == config
    assert validate_config(loaded) == []


def test_auto_detect_format(tmp_path):
    """Test that files without a known extension are parsed as JSON or YAML."""
    json_file = tmp_path / "romconv.conf"
    json_file.write_text('{"additive": true}')
    assert load_config(json_file) == {"additive": True}

    yaml_file = tmp_path / "romconv.cfg"
    yaml_file.write_text("simple: true\nstart: 5\n")
    assert load_config(yaml_file) == {"simple": True, "start": 5}


def test_empty_yaml_is_empty_config(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")
    assert load_config(config_file) == {}


@pytest.mark.parametrize(
    "filename,content,message",
    [
        ("bad.json", "{not json", "Invalid JSON"),
        ("bad.yaml", "additive: [unclosed", "Invalid YAML"),
        ("list.yaml", "- additive\n- simple\n", "must be a mapping"),
    ],
)
def test_invalid_config_files(filename, content, message, tmp_path):
    """Test that unparseable files raise ConfigError."""
    config_file = tmp_path / filename
    config_file.write_text(content)

    with pytest.raises(ConfigError, match=message):
        load_config(config_file)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.json")


# Feature: romconv-cli, Property 7: CLI Argument Precedence
@given(
    base=valid_config_dict(),
    override_additive=st.one_of(st.none(), st.booleans()),
    override_start=st.one_of(st.none(), st.integers(min_value=1, max_value=4000)),
)
@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_property_cli_precedence(base, override_additive, override_start):
    """Test that non-None CLI values win and None values keep the file value."""
    merged = merge_config(base, additive=override_additive, start=override_start)

    if override_additive is None:
        assert merged.get("additive") == base.get("additive")
    else:
        assert merged["additive"] == override_additive

    if override_start is None:
        assert merged.get("start") == base.get("start")
    else:
        assert merged["start"] == override_start


def test_merge_does_not_mutate_base():
    base = {"additive": True}
    merge_config(base, additive=False)
    assert base == {"additive": True}


def test_resolve_fills_defaults():
    resolved = resolve_config({"additive": True})
    assert resolved == {**DEFAULTS, "additive": True}
    assert resolved["path"] == "out.txt"
    assert resolved["start"] == 1
    assert resolved["end"] == 1


@pytest.mark.parametrize(
    "config,expected",
    [
        ({"colour": True}, ["Unknown option: colour"]),
        ({"additive": "yes"}, ["Option 'additive' must be bool, got str"]),
        ({"start": True}, ["Option 'start' must be int, got bool"]),
        ({"end": 1.5}, ["Option 'end' must be int, got float"]),
        ({"path": 7}, ["Option 'path' must be str, got int"]),
    ],
)
def test_validate_config_errors(config, expected):
    assert validate_config(config) == expected


def test_convert_uses_config_file(tmp_path, capsys):
    """Test that config file values apply when no CLI value is given."""
    config_file = tmp_path / "romconv.yaml"
    config_file.write_text("additive: true\nsimple: true\n")

    exit_code = convert("1965", config=config_file)

    assert exit_code == ExitCode.SUCCESS
    assert capsys.readouterr().out == "MDCCCCLXV\n"


def test_convert_cli_overrides_config(tmp_path, capsys):
    """Test that explicit CLI values override the config file."""
    config_file = tmp_path / "romconv.json"
    config_file.write_text(json.dumps({"additive": True, "simple": True}))

    exit_code = convert("1965", config=config_file, additive=False)

    assert exit_code == ExitCode.SUCCESS
    assert capsys.readouterr().out == "MCMLXV\n"


def test_convert_range_from_config(tmp_path, capsys):
    config_file = tmp_path / "range.yaml"
    config_file.write_text("range: true\nstart: 100\nend: 102\n")

    exit_code = convert(config=config_file)

    assert exit_code == ExitCode.SUCCESS
    assert capsys.readouterr().out == "100 = C\n101 = CI\n102 = CII\n"


def test_convert_with_invalid_config(tmp_path, capsys):
    """Test that invalid config options fail with CONFIG_ERROR."""
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("colour: red\n")

    exit_code = convert("1965", config=config_file)

    captured = capsys.readouterr()
    assert exit_code == ExitCode.CONFIG_ERROR
    assert "Unknown option: colour" in captured.err
    assert captured.out == ""


def test_convert_with_missing_config(tmp_path):
    exit_code = convert("1965", config=tmp_path / "missing.yaml")
    assert exit_code == ExitCode.CONFIG_ERROR


class TestCheckConfig:
    """Tests for the check-config command."""

    def test_valid_config(self, tmp_path, capsys):
        config_file = tmp_path / "romconv.yaml"
        config_file.write_text("additive: true\npath: numerals.txt\n")

        exit_code = check_config(config_file)

        captured = capsys.readouterr()
        assert exit_code == ExitCode.SUCCESS
        assert "✓ Configuration is valid" in captured.out
        assert "additive: True\n" in captured.out
        assert "path: numerals.txt\n" in captured.out
        assert "simple: False (default)" in captured.out

    def test_invalid_options(self, tmp_path, capsys):
        config_file = tmp_path / "romconv.json"
        config_file.write_text('{"start": "one"}')

        exit_code = check_config(config_file)

        captured = capsys.readouterr()
        assert exit_code == ExitCode.CONFIG_ERROR
        assert "Option 'start' must be int, got str" in captured.err

    def test_missing_file(self, tmp_path, capsys):
        exit_code = check_config(tmp_path / "missing.yaml")

        captured = capsys.readouterr()
        assert exit_code == ExitCode.CONFIG_ERROR
        assert "✗ Configuration error:" in captured.err
