"""Shared fixtures for CLI tests."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_stylecore_logger():
    """The CLI points the stylecore logger at CliRunner's stderr; undo that afterwards."""
    log = logging.getLogger("stylecore")
    level, handlers = log.level, list(log.handlers)
    yield
    log.setLevel(level)
    log.handlers[:] = handlers
