"""Cyclopts application and command routing for romconv CLI.

This module defines the main Cyclopts application for the romconv numeral
converter.

The CLI provides the following commands:
- (default): Convert a numeral, or a range of Arabic values, to the other type
- check-config: Validate configuration files
"""

from cyclopts import App

from romconv.cli import commands

# Create the main application
app = App(
    name="romconv",
    help="Roman numeral converter (Arabic to Roman & Roman to Arabic)",
    version="0.1.0",
)

# Bare invocation converts; subcommands handle the rest
app.default(commands.convert)
app.command(commands.check_config, name="check-config")
