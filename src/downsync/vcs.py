"""Mercurial queries consumed by the sync engine."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from downsync.contracts.conflicts import ConflictEntry
from downsync.runner import CommandRunner


@dataclass(frozen=True)
class StatusLine:
    status: str
    path: str


def parse_status_lines(output: str) -> list[StatusLine]:
    """Parse ``<STATUS-CHAR> <path>`` lines, skipping anything shorter."""
    lines: list[StatusLine] = []
    for raw in output.splitlines():
        if len(raw) < 3 or raw[1] != " ":
            continue
        path = raw[2:].strip()
        if path:
            lines.append(StatusLine(status=raw[0], path=path))
    return lines


class HgClient:
    """Thin wrapper around the ``hg`` commands this package reads."""

    def __init__(self, runner: CommandRunner, *, command: Sequence[str] = ("hg",)) -> None:
        self._runner = runner
        self._command = list(command)

    async def status(self, prefix: str) -> list[StatusLine]:
        result = await self._runner.capture([*self._command, "status", prefix])
        return parse_status_lines(result.stdout)

    async def conflicts(self) -> list[ConflictEntry]:
        result = await self._runner.capture([*self._command, "resolve", "--list"])
        return [ConflictEntry(status=line.status, path=line.path) for line in parse_status_lines(result.stdout)]

    async def mark_resolved(self, paths: Sequence[str]) -> int:
        if not paths:
            return 0
        return await self._runner.run([*self._command, "resolve", "--mark", *paths])
