"""CLI command implementations.

This module implements the CLI commands for the romconv tool:
- convert: Convert a single numeral or an Arabic range (default command)
- check_config: Validate configuration files

Each command is implemented as a function that returns an exit code,
enabling both direct invocation and subprocess-based testing.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from romconv.cli.config import (
    ConfigError,
    load_config,
    merge_config,
    resolve_config,
    validate_config,
)
from romconv.cli.exit_codes import ExitCode
from romconv.cli.output import configure_logging, emit_lines, handle_error
from romconv.core.exceptions import (
    ClassificationError,
    FormatError,
    InvalidSymbolError,
    OutputError,
    RangeError,
)
from romconv.core.formatting import ConversionOptions, convert_value, generate_range

logger = logging.getLogger(__name__)

USAGE = """Roman numeral converter (Arabic to Roman & Roman to Arabic)
Sample Usage:
	$ romconv 1965
	$ romconv MCMLXV
	$ romconv --additive 1965
	$ romconv MDCCCCLXV
	$ romconv --simple --range -s 100 -e 250 --output -p my_values.txt --append

Options:
	-a, --additive	<bool>	  default=false		do not use subtractive notation
	--simple	<bool>	  default=false		simple output, only the converted value
	-r, --range	<bool>	  default=false		produce a range of output from start to end (inclusive)
	-s, --start	<int>	  default=1		the start value of the range
	-e, --end	<int>	  default=1		the end value of the range
	-o, --output	<bool>	  default=false		write output to local file
	-p, --path	<string>  default="out.txt"	the filename to produce
	--append	<bool>	  default=false		write in append mode
	--config	<path>				JSON or YAML file with default option values
"""


def convert(
    value: Annotated[str | None, Parameter(help="Arabic or Roman numeral to convert")] = None,
    *,
    additive: Annotated[bool | None, Parameter(name=["--additive", "-a"], help="Do not use subtractive notation")] = None,
    simple: Annotated[bool | None, Parameter(help="Only output the converted value")] = None,
    range_mode: Annotated[bool | None, Parameter(name=["--range", "-r"], help="Produce a range of values")] = None,
    start: Annotated[int | None, Parameter(name=["--start", "-s"], help="Starting Arabic value of the range")] = None,
    end: Annotated[int | None, Parameter(name=["--end", "-e"], help="Ending Arabic value of the range")] = None,
    output: Annotated[bool | None, Parameter(name=["--output", "-o"], help="Write output to a file")] = None,
    path: Annotated[Path | None, Parameter(name=["--path", "-p"], help="Output file path")] = None,
    append: Annotated[bool | None, Parameter(help="Append to the output file instead of truncating")] = None,
    config: Annotated[Path | None, Parameter(help="Configuration file path")] = None,
    verbose: Annotated[bool, Parameter(help="Show detailed error information")] = False,
    log_level: Annotated[str, Parameter(help="Log level (debug, info, warning, error)")] = "warning",
    log_file: Annotated[Path | None, Parameter(help="Log file path")] = None,
) -> int:
    """Convert an Arabic or Roman numeral, or a range of Arabic values.

    A single value is classified as Arabic or Roman and converted to the
    other type. In range mode every Arabic value from start to end (inclusive)
    is converted to Roman. Output goes to the terminal, or to a file when
    --output is given.

    Args:
        value: Numeral to convert (case-insensitive); ignored in range mode
        additive: Use additive notation for Roman output
        simple: Output only the converted value
        range_mode: Produce conversions for the start..end range
        start: First value of the range
        end: Last value of the range
        output: Write results to a file instead of the terminal
        path: Output file path (default "out.txt")
        append: Append to the output file instead of truncating it
        config: Path to configuration file (optional)
        verbose: Show detailed error information including stack traces
        log_level: Logging level (debug, info, warning, error)
        log_file: Path to log file (optional)

    Returns:
        Exit code (0 for success, non-zero for errors)

    Example:
        >>> from romconv.cli.commands import convert
        >>>
        >>> exit_code = convert("1965", additive=True)
        1965 = MDCCCCLXV	 (add)
    """
    try:
        configure_logging(log_level, log_file)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCode.CONFIG_ERROR

    try:
        cfg = {}
        if config:
            cfg = load_config(config)

        # CLI arguments take precedence over the config file
        cfg = merge_config(
            cfg,
            additive=additive,
            simple=simple,
            range=range_mode,
            start=start,
            end=end,
            output=output,
            path=str(path) if path is not None else None,
            append=append,
        )

        errors = validate_config(cfg)
        if errors:
            print("✗ Invalid options:", file=sys.stderr)
            for error in errors:
                print(f"  {error}", file=sys.stderr)
            return ExitCode.CONFIG_ERROR

        cfg = resolve_config(cfg)
        options = ConversionOptions(additive=cfg["additive"], simple=cfg["simple"])
        output_path = Path(cfg["path"])

        if cfg["range"]:
            lines = generate_range(cfg["start"], cfg["end"], options)
            if cfg["output"]:
                logger.info("writing Arabic range %d to %d to file", cfg["start"], cfg["end"])
            emit_lines(lines, output=cfg["output"], path=output_path, append=cfg["append"])
            return ExitCode.SUCCESS

        if value is None or not value.strip():
            print(USAGE, end="")
            return ExitCode.SUCCESS

        line = convert_value(value, options)
        emit_lines([line], output=cfg["output"], path=output_path, append=cfg["append"])
        return ExitCode.SUCCESS

    except FormatError as e:
        handle_error(e, verbose=verbose)
        return ExitCode.FORMAT_ERROR
    except RangeError as e:
        handle_error(e, verbose=verbose)
        return ExitCode.RANGE_ERROR
    except InvalidSymbolError as e:
        handle_error(e, verbose=verbose)
        return ExitCode.SYMBOL_ERROR
    except ClassificationError as e:
        handle_error(e, verbose=verbose)
        return ExitCode.CLASSIFICATION_ERROR
    except OutputError as e:
        handle_error(e, verbose=verbose)
        return ExitCode.OUTPUT_ERROR
    except ConfigError as e:
        handle_error(e, verbose=verbose)
        return ExitCode.CONFIG_ERROR
    except Exception as e:
        handle_error(e, verbose=verbose)
        return ExitCode.UNEXPECTED_ERROR


def check_config(
    config_path: Annotated[Path, Parameter(help="Configuration file path")],
) -> int:
    """Validate configuration file.

    Loads and validates a configuration file, checking syntax, option names
    and option types. Displays specific validation errors if found.

    Args:
        config_path: Path to configuration file to validate

    Returns:
        Exit code (0 for valid config, 7 for invalid config)

    Example:
        >>> from pathlib import Path
        >>> from romconv.cli.commands import check_config
        >>>
        >>> exit_code = check_config(config_path=Path("romconv.yaml"))
    """
    try:
        config = load_config(config_path)

        errors = validate_config(config)

        if errors:
            print("✗ Configuration validation failed:", file=sys.stderr)
            for error in errors:
                print(f"  {error}", file=sys.stderr)
            return ExitCode.CONFIG_ERROR

        print("✓ Configuration is valid")

        for key, value in resolve_config(config).items():
            source = "" if key in config else " (default)"
            print(f"  {key}: {value}{source}")

        return ExitCode.SUCCESS

    except ConfigError as e:
        print("✗ Configuration error:", file=sys.stderr)
        print(f"  {e}", file=sys.stderr)
        return ExitCode.CONFIG_ERROR
    except Exception as e:
        handle_error(e, verbose=False)
        return ExitCode.UNEXPECTED_ERROR
