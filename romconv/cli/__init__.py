"""CLI interface for the romconv numeral converter.

This package provides command-line access to Arabic <-> Roman conversion
for single values and ranges, with terminal or file output.
"""
