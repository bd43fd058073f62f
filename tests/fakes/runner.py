"""Scripted command runner for tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence

from downsync.runner import CommandRunner, CompletedProcess
from downsync.status import StatusLogger


class FakeRunner(CommandRunner):
    """Records every command and answers from scripted tables.

    ``outputs`` maps a command tuple to the stdout returned by ``capture``;
    a list value is consumed one entry per call. ``statuses`` maps a command
    tuple to the exit status returned by ``run``.
    """

    def __init__(
        self,
        status: StatusLogger | None = None,
        *,
        outputs: dict[tuple[str, ...], str | list[str]] | None = None,
        statuses: dict[tuple[str, ...], int] | None = None,
        on_run: Callable[[tuple[str, ...]], None] | None = None,
    ) -> None:
        super().__init__(status or StatusLogger())
        self.outputs = outputs or {}
        self.statuses = statuses or {}
        self.on_run = on_run
        self.calls: list[tuple[str, ...]] = []

    async def run(self, argv: Sequence[str]) -> int:
        cmd = tuple(argv)
        self.calls.append(cmd)
        if self.on_run is not None:
            self.on_run(cmd)
        await asyncio.sleep(0)
        returncode = self.statuses.get(cmd, 0)
        self._report(cmd, returncode)
        return returncode

    async def capture(self, argv: Sequence[str]) -> CompletedProcess:
        cmd = tuple(argv)
        self.calls.append(cmd)
        scripted = self.outputs.get(cmd, "")
        if isinstance(scripted, list):
            stdout = scripted.pop(0) if scripted else ""
        else:
            stdout = scripted
        return CompletedProcess(returncode=0, stdout=stdout, stderr="")
