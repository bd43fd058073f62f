"""Serialized, timestamped status output."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable
from datetime import datetime
from typing import TextIO

from rich.console import Console


def _clock() -> str:
    return datetime.now().strftime("%H:%M:%S")


class StatusLogger:
    """Writes one timestamped line per call.

    A single instance is shared by every component of a run. Emission is
    guarded by a lock so lines from concurrent callers never interleave::

        logger = StatusLogger()
        logger.status("syncing widgets")
    """

    def __init__(self, stream: TextIO | None = None, *, clock: Callable[[], str] = _clock) -> None:
        self._console = Console(
            file=stream if stream is not None else sys.stdout,
            markup=False,
            highlight=False,
            emoji=False,
            color_system=None,
            soft_wrap=True,
        )
        self._clock = clock
        self._lock = threading.Lock()

    def status(self, message: str) -> None:
        self._emit(message)

    def warning(self, message: str) -> None:
        self._emit(f"warning: {message}")

    def error(self, message: str) -> None:
        self._emit(f"error: {message}")

    def _emit(self, message: str) -> None:
        # Keep each entry on one line.
        line = " ".join(message.splitlines())
        with self._lock:
            self._console.print(f"{self._clock()} {line}")
