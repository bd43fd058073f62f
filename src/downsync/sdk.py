"""SDK composition root for downsync."""

from __future__ import annotations

from collections.abc import Sequence

from downsync.conflicts.resolver import ConflictResolver
from downsync.contracts.batch import BatchResult
from downsync.contracts.config import DownsyncConfig
from downsync.contracts.conflicts import ResolveResult
from downsync.contracts.watch import WatchSummary
from downsync.engine.executor import ParallelExecutor
from downsync.engine.projects import ProjectResolver
from downsync.engine.sync_action import ProjectSync
from downsync.runner import CommandRunner
from downsync.status import StatusLogger
from downsync.vcs import HgClient
from downsync.watch.watcher import ChangeWatcher, Connector


class Downsync:
    """downsync SDK public API.

    Wires one shared :class:`StatusLogger` through every component. Build it
    with :meth:`from_config`::

        ds = Downsync.from_config(load_config())
        await ds.sync(["widgets"])
    """

    def __init__(
        self,
        *,
        config: DownsyncConfig,
        status: StatusLogger,
        runner: CommandRunner,
        connect: Connector | None = None,
    ) -> None:
        self._config = config
        self._status = status
        self._runner = runner
        self._vcs = HgClient(runner, command=config.vcs_command)
        self._executor = ParallelExecutor(status, max_concurrent=config.max_concurrent)
        self._projects = ProjectResolver(self._vcs, upstream_prefix=config.upstream_prefix)
        self._action = ProjectSync(runner, status, config)
        self._watcher = ChangeWatcher(config, status, self._executor, self._action.sync, connect=connect)
        self._conflicts = ConflictResolver(self._vcs, status, self._executor, self._action.sync, config)

    @classmethod
    def from_config(
        cls,
        config: DownsyncConfig,
        *,
        status: StatusLogger | None = None,
        runner: CommandRunner | None = None,
        connect: Connector | None = None,
    ) -> Downsync:
        status = status or StatusLogger()
        runner = runner or CommandRunner(status, cwd=config.root)
        return cls(config=config, status=status, runner=runner, connect=connect)

    @property
    def config(self) -> DownsyncConfig:
        return self._config

    async def projects(self, explicit: Sequence[str] = ()) -> list[str]:
        return await self._projects.resolve(explicit)

    async def sync(self, explicit: Sequence[str] = ()) -> BatchResult[str]:
        projects = await self.projects(explicit)
        if not projects:
            self._status.status("nothing to sync")
            return BatchResult()
        return await self._executor.run_all(projects, self._action.sync)

    async def watch(self, explicit: Sequence[str] = (), summary: WatchSummary | None = None) -> WatchSummary:
        return await self._watcher.watch(await self.projects(explicit), summary)

    async def resolve(self) -> ResolveResult:
        return await self._conflicts.resolve()
