"""Connection to the file-change notification service."""

from __future__ import annotations

import asyncio
import json
import logging
import shlex
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from downsync.contracts.exceptions import CommandStartError

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 4096
_CLOSE_TIMEOUT = 5.0


class WatchConnection(Protocol):
    async def send(self, payload: Any) -> None: ...

    async def read(self) -> bytes: ...

    async def close(self) -> None: ...


class WatchmanConnection:
    """A persistent ``watchman`` client process.

    The command is written once as JSON on stdin; responses and subscription
    notifications are read from stdout until the process exits or the
    connection is closed.
    """

    def __init__(self, process: asyncio.subprocess.Process) -> None:
        self._process = process

    @classmethod
    async def open(cls, command: Sequence[str], *, cwd: Path | None = None) -> WatchmanConnection:
        cmd = list(command)
        logger.debug("Connecting: %s", shlex.join(cmd))
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                cwd=cwd,
            )
        except OSError as exc:
            raise CommandStartError(f"failed to start {shlex.join(cmd)}: {exc}", argv=cmd) from exc
        return cls(process)

    async def send(self, payload: Any) -> None:
        stdin = self._process.stdin
        if stdin is None:
            raise RuntimeError("watch connection has no input stream")
        stdin.write((json.dumps(payload) + "\n").encode())
        await stdin.drain()
        stdin.close()

    async def read(self) -> bytes:
        stdout = self._process.stdout
        if stdout is None:
            return b""
        return await stdout.read(_CHUNK_SIZE)

    async def close(self) -> None:
        if self._process.returncode is not None:
            return
        try:
            self._process.terminate()
        except ProcessLookupError:
            return
        try:
            await asyncio.wait_for(self._process.wait(), timeout=_CLOSE_TIMEOUT)
        except TimeoutError:
            self._process.kill()
            await self._process.wait()
