"""Async wrapper around external commands."""

from __future__ import annotations

import asyncio
import logging
import shlex
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from downsync.contracts.exceptions import CommandStartError
from downsync.status import StatusLogger

logger = logging.getLogger(__name__)


@dataclass
class CompletedProcess:
    """Result of an external command invocation."""

    returncode: int
    stdout: str
    stderr: str


class CommandRunner:
    """Runs external commands with arguments passed verbatim.

    A non-zero exit is reported as a warning and returned to the caller;
    only a failure to start the process raises.
    """

    def __init__(self, status: StatusLogger, *, cwd: Path | None = None) -> None:
        self._status = status
        self._cwd = cwd

    async def run(self, argv: Sequence[str]) -> int:
        """Execute ``argv`` and return its exit status.

        Output is not captured; the child inherits stdout and stderr.

        Raises:
            CommandStartError: If the process cannot be started.
        """
        proc = await self._spawn(argv, capture=False)
        returncode = await proc.wait()
        self._report(argv, returncode)
        return returncode

    async def capture(self, argv: Sequence[str]) -> CompletedProcess:
        """Execute ``argv`` and collect its output.

        Raises:
            CommandStartError: If the process cannot be started.
        """
        proc = await self._spawn(argv, capture=True)
        stdout_bytes, stderr_bytes = await proc.communicate()
        result = CompletedProcess(
            returncode=proc.returncode or 0,
            stdout=stdout_bytes.decode(errors="replace") if stdout_bytes else "",
            stderr=stderr_bytes.decode(errors="replace") if stderr_bytes else "",
        )
        self._report(argv, result.returncode)
        return result

    async def _spawn(self, argv: Sequence[str], *, capture: bool) -> asyncio.subprocess.Process:
        cmd = list(argv)
        if not cmd:
            raise CommandStartError("cannot run an empty command", argv=cmd)
        logger.debug("Running: %s", shlex.join(cmd))
        pipe = asyncio.subprocess.PIPE if capture else None
        try:
            return await asyncio.create_subprocess_exec(*cmd, stdout=pipe, stderr=pipe, cwd=self._cwd)
        except OSError as exc:
            raise CommandStartError(f"failed to start {shlex.join(cmd)}: {exc}", argv=cmd) from exc

    def _report(self, argv: Sequence[str], returncode: int) -> None:
        if returncode != 0:
            self._status.warning(f"{shlex.join(argv)} exited with status {returncode}")
