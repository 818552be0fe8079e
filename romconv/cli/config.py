"""Configuration file loading and validation.

This module handles loading configuration from JSON and YAML files, merging
CLI arguments with file-based configuration (with CLI taking precedence), and
validating that only known options with the right types are present.

Configuration files can specify:
- additive: Use additive notation for Roman output
- simple: Emit only the converted value
- range: Produce a range of conversions instead of a single value
- start / end: Inclusive bounds of the range
- output: Write to a file instead of the terminal
- path: Output file path
- append: Append to the output file instead of truncating it
"""

import json
from pathlib import Path
from typing import Any

import yaml


class ConfigError(Exception):
    """Configuration file error.

    Raised when configuration files cannot be loaded or parsed. This includes
    file not found errors and syntax errors in JSON/YAML.
    """
    pass


# Option name -> expected type
OPTION_TYPES: dict[str, type] = {
    "additive": bool,
    "simple": bool,
    "range": bool,
    "start": int,
    "end": int,
    "output": bool,
    "path": str,
    "append": bool,
}

DEFAULTS: dict[str, Any] = {
    "additive": False,
    "simple": False,
    "range": False,
    "start": 1,
    "end": 1,
    "output": False,
    "path": "out.txt",
    "append": False,
}


def load_config(path: Path) -> dict[str, Any]:
    """Load configuration from JSON or YAML file.

    Format is determined by file extension (.json, .yaml, .yml) or
    auto-detected if the extension is ambiguous.

    Args:
        path: Path to configuration file

    Returns:
        Configuration dictionary with option names as keys

    Raises:
        ConfigError: If file cannot be loaded, parsed, or does not hold a mapping

    Example:
        >>> from pathlib import Path
        >>> from romconv.cli.config import load_config
        >>>
        >>> config = load_config(Path("romconv.yaml"))
        >>> print(config["additive"])  # True
    """
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        content = path.read_text()

        if path.suffix == ".json":
            data = json.loads(content)
        elif path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        else:
            # Try to auto-detect format
            try:
                data = json.loads(content)
            except json.JSONDecodeError:
                data = yaml.safe_load(content)

    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to load config from {path}: {e}")

    # An empty YAML document loads as None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration in {path} must be a mapping, got {type(data).__name__}"
        )
    return data


def merge_config(
    base: dict[str, Any],
    **overrides: Any
) -> dict[str, Any]:
    """Merge CLI arguments into base configuration.

    CLI arguments take precedence over config file values. Only non-None
    override values are applied, allowing config file values to be used
    when CLI arguments are not specified.

    Args:
        base: Base configuration from file
        **overrides: CLI argument overrides (additive, start, path, etc.)

    Returns:
        Merged configuration dictionary with CLI arguments taking precedence

    Example:
        >>> from romconv.cli.config import merge_config
        >>>
        >>> file_config = {"additive": True, "path": "numerals.txt"}
        >>> merged = merge_config(file_config, path="other.txt")
        >>> print(merged)  # {"additive": True, "path": "other.txt"}
    """
    merged = base.copy()

    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def resolve_config(config: dict[str, Any]) -> dict[str, Any]:
    """Fill in defaults for every option missing from ``config``."""
    return {**DEFAULTS, **config}


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate configuration option names and value types.

    Args:
        config: Configuration dictionary to validate

    Returns:
        List of validation error messages (empty list if valid)

    Example:
        >>> from romconv.cli.config import validate_config
        >>>
        >>> errors = validate_config({"additive": "yes", "colour": True})
        >>> print(errors)
        ["Option 'additive' must be bool, got str", "Unknown option: colour"]
    """
    errors = []

    for key, value in config.items():
        expected = OPTION_TYPES.get(key)
        if expected is None:
            errors.append(f"Unknown option: {key}")
            continue

        # bool is a subclass of int; reject it where an int is expected
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            errors.append(
                f"Option '{key}' must be {expected.__name__}, got {type(value).__name__}"
            )

    return errors
