"""Output, error display, and logging setup for CLI operations.

This module provides:
- configure_logging: Log level and optional log file from CLI arguments
- emit_lines: Send conversion lines to the terminal or to a file
- write_lines: Truncate/append file writer for conversion lines
- handle_error: Formatted error messages with context and optional stack traces
"""

import logging
import sys
import traceback
from collections.abc import Iterable
from pathlib import Path

from romconv.core.exceptions import OutputError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(log_level: str = "warning", log_file: Path | None = None) -> None:
    """Configure the root logger from CLI arguments.

    Log records go to stderr, and additionally to ``log_file`` when given.
    Existing handlers are replaced so repeated invocations in one process
    do not duplicate output.

    Args:
        log_level: One of debug, info, warning, error (case-insensitive)
        log_file: Optional path of a file to append log entries to

    Raises:
        ValueError: If log_level is not a recognized level name
    """
    level = LOG_LEVELS.get(log_level.lower())
    if level is None:
        raise ValueError(
            f"Unknown log level '{log_level}'. "
            f"Choose one of: {', '.join(LOG_LEVELS)}"
        )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def write_lines(lines: Iterable[str], path: Path, append: bool = False) -> int:
    """Write conversion lines to a plain-text file.

    Lines are joined with newlines and terminated with a trailing newline.
    The file is created if missing; otherwise it is truncated, or appended
    to when ``append`` is set.

    Args:
        lines: Display lines to write
        path: Output file path
        append: Append to the file instead of truncating it

    Returns:
        Number of characters written

    Raises:
        OutputError: If the file cannot be opened or written
    """
    write_mode = "append" if append else "truncate"
    logger.info("opening file %s in mode %s", path, write_mode)

    try:
        with open(path, "a" if append else "w", encoding="utf-8") as f:
            written = f.write("\n".join(lines) + "\n")
    except OSError as e:
        raise OutputError(
            f"failed to write output file {path}",
            output_path=str(path),
            mode=write_mode,
            reason=str(e),
        ) from e

    logger.info("wrote %d bytes to %s", written, path)
    return written


def emit_lines(
    lines: Iterable[str],
    output: bool = False,
    path: Path = Path("out.txt"),
    append: bool = False,
) -> None:
    """Send conversion lines to stdout, or to a file when ``output`` is set.

    Args:
        lines: Display lines
        output: Write to ``path`` instead of the terminal
        path: Output file path
        append: Append to the output file instead of truncating it
    """
    if output:
        write_lines(lines, path, append=append)
        return

    for line in lines:
        print(line)


def handle_error(error: Exception, verbose: bool = False) -> None:
    """Format and display error message with context.

    Displays error messages to stderr with optional context fields from
    RomconvError exceptions. When verbose mode is enabled, also displays
    the full stack trace.

    Args:
        error: Exception to display
        verbose: Whether to show stack trace (default False)

    Example:
        try:
            # ... conversion ...
        except RomconvError as e:
            handle_error(e, verbose=True)
    """
    print(f"Error: {getattr(error, 'message', error)}", file=sys.stderr)

    # RomconvError carries a context dict
    if hasattr(error, "context") and error.context:
        print("Context:", file=sys.stderr)
        for key, value in error.context.items():
            print(f"  {key}: {value}", file=sys.stderr)

    if verbose:
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
