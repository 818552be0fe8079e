"""CLI entry point for romconv.

Enables invocation via `python -m romconv` or the `romconv` console script.

This module imports the Cyclopts app and invokes it, exiting with the
appropriate exit code based on command execution results.
"""

import sys

from romconv.cli.app import app


def main() -> None:
    exit_code = app()
    sys.exit(exit_code if exit_code is not None else 0)


if __name__ == "__main__":
    main()
