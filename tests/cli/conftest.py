"""Shared fixtures for CLI command tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the handlers installed by configure_logging during a command run."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        # Exact types only; pytest's capture handlers are subclasses
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
