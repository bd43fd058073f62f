"""Continuous sync driven by file-change notifications."""

from __future__ import annotations

import asyncio
import codecs
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from downsync.contracts.config import DownsyncConfig
from downsync.contracts.exceptions import ProtocolError, UsageError
from downsync.contracts.watch import ErrorMessage, FileNotification, SubscriptionQuery, WatchSummary
from downsync.engine.executor import ParallelExecutor
from downsync.engine.utils import dedupe, match_watched_project
from downsync.status import StatusLogger
from downsync.watch.connection import WatchConnection, WatchmanConnection
from downsync.watch.framing import FrameDecoder
from downsync.watch.protocol import parse_message

logger = logging.getLogger(__name__)

Connector = Callable[[], Awaitable[WatchConnection]]


class ChangeWatcher:
    """Subscribes to upstream changes and syncs the affected projects.

    Each notification is handled to completion before the next frame is
    read. Service errors and malformed frames are logged and skipped. The
    session ends when the service closes its stream or the task is
    cancelled; either way the connection is closed. Text left unterminated
    at end of stream is reported as a malformed frame. Cancellation never
    interrupts a sync batch that has started; the batch finishes first.
    """

    def __init__(
        self,
        config: DownsyncConfig,
        status: StatusLogger,
        executor: ParallelExecutor,
        action: Callable[[str], Awaitable[Any]],
        *,
        connect: Connector | None = None,
    ) -> None:
        self._config = config
        self._status = status
        self._executor = executor
        self._action = action
        self._connect = connect or self._connect_watchman

    def subscription(self, projects: Sequence[str]) -> SubscriptionQuery:
        return SubscriptionQuery.for_projects(
            root=str(self._config.root.resolve()),
            name=self._config.subscription_name,
            upstream_prefix=self._config.upstream_prefix,
            projects=projects,
        )

    def projects_for(self, files: Sequence[str], watched: Sequence[str]) -> list[str]:
        matches = (match_watched_project(path, watched, self._config.upstream_prefix) for path in files)
        return dedupe(project for project in matches if project is not None)

    async def watch(self, projects: Sequence[str], summary: WatchSummary | None = None) -> WatchSummary:
        """Run the watch session.

        Counters accumulate into ``summary`` when one is given, so a caller
        still holds them if the session is cancelled.

        Raises:
            UsageError: If ``projects`` is empty.
        """
        watched = dedupe(projects)
        if not watched:
            raise UsageError("watch mode requires at least one project")

        query = self.subscription(watched)
        summary = summary if summary is not None else WatchSummary()
        connection = await self._connect()
        try:
            await connection.send(query.to_command())
            self._status.status(f"watching {len(watched)} project(s): {', '.join(watched)}")
            await self._stream(connection, watched, summary)
        except asyncio.CancelledError:
            summary.interrupted = True
            self._status.status("watch interrupted, closing connection")
            raise
        finally:
            await connection.close()
        return summary

    async def _stream(self, connection: WatchConnection, watched: list[str], summary: WatchSummary) -> None:
        decoder = FrameDecoder()
        text = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            chunk = await connection.read()
            if not chunk:
                frames = decoder.feed(text.decode(b"", final=True)) + decoder.flush()
                for frame in frames:
                    await self._handle_frame(frame, watched, summary)
                self._status.status("notification stream closed")
                return
            for frame in decoder.feed(text.decode(chunk)):
                await self._handle_frame(frame, watched, summary)

    async def _handle_frame(self, frame: str, watched: list[str], summary: WatchSummary) -> None:
        try:
            message = parse_message(frame)
        except ProtocolError as exc:
            summary.frames_rejected += 1
            self._status.error(f"{exc}: {exc.frame}")
            return

        if isinstance(message, ErrorMessage):
            summary.service_errors += 1
            self._status.error(f"watch service: {message.error}")
            return
        if not isinstance(message, FileNotification):
            logger.debug("Ignoring frame: %s", frame)
            return
        if message.subscription != self._config.subscription_name:
            logger.debug("Ignoring notification for subscription %s", message.subscription)
            return

        projects = self.projects_for(message.files, watched)
        if not projects:
            return

        summary.batches += 1
        self._status.status(f"changes in {', '.join(projects)}")
        await self._run_batch(projects, summary)

    async def _run_batch(self, projects: list[str], summary: WatchSummary) -> None:
        # An interrupt stops the stream, never a batch already running.
        batch = asyncio.create_task(self._executor.run_all(projects, self._action))
        try:
            result = await asyncio.shield(batch)
        except asyncio.CancelledError:
            self._status.status(f"interrupted, finishing sync of {', '.join(projects)}")
            result = await batch
            summary.projects_synced += len(result.identifiers)
            raise
        summary.projects_synced += len(result.identifiers)

    async def _connect_watchman(self) -> WatchConnection:
        return await WatchmanConnection.open(self._config.watch_command, cwd=self._config.root)
