"""Shared test fixtures for downsync tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from downsync.contracts.config import DownsyncConfig
from downsync.status import StatusLogger


@pytest.fixture
def config(tmp_path: Path) -> DownsyncConfig:
    """A config rooted in a temporary workspace."""
    return DownsyncConfig(
        root=tmp_path,
        sites=("www", "admin"),
        update_command=["update", "{site}", "{project}"],
        sign_command=["sign", "{site}", "{project}"],
    )


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def status(output: io.StringIO) -> StatusLogger:
    """A status logger writing to an in-memory buffer with a fixed clock."""
    return StatusLogger(output, clock=lambda: "12:00:00")
