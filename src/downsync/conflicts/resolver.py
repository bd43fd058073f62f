"""Automated resolution of downstream merge conflicts."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from downsync.contracts.batch import BatchResult
from downsync.contracts.config import DownsyncConfig
from downsync.contracts.conflicts import ConflictEntry, ConflictReport, ResolveResult
from downsync.contracts.exceptions import PolicyViolationError, UnresolvedConflictsError
from downsync.engine.executor import ParallelExecutor
from downsync.engine.utils import downstream_project, in_upstream
from downsync.status import StatusLogger
from downsync.vcs import HgClient

logger = logging.getLogger(__name__)


def classify(entries: Sequence[ConflictEntry], config: DownsyncConfig) -> ConflictReport:
    """Split unresolved entries into upstream paths and downstream projects."""
    report = ConflictReport()
    for entry in entries:
        if not entry.unresolved:
            continue
        if in_upstream(entry.path, config.upstream_prefix):
            report.upstream.append(entry)
            continue
        project = downstream_project(entry.path, config.downstream_prefix)
        if project is None:
            logger.debug("Conflict outside both trees: %s", entry.path)
            continue
        report.downstream.setdefault(project, []).append(entry)
    return report


class ConflictResolver:
    """Regenerates conflicted downstream projects from upstream.

    Upstream conflicts always need a human; while any exist nothing
    downstream is touched.
    """

    def __init__(
        self,
        vcs: HgClient,
        status: StatusLogger,
        executor: ParallelExecutor,
        action: Callable[[str], Awaitable[Any]],
        config: DownsyncConfig,
    ) -> None:
        self._vcs = vcs
        self._status = status
        self._executor = executor
        self._action = action
        self._config = config

    async def resolve(self) -> ResolveResult:
        """Run one resolution pass.

        Raises:
            PolicyViolationError: If any upstream conflict is unresolved.
            UnresolvedConflictsError: If conflicts remain after the pass.
        """
        entries = await self._vcs.conflicts()
        if not entries:
            self._status.status("no merge conflicts")
            return ResolveResult()

        report = classify(entries, self._config)
        if report.upstream:
            for entry in report.upstream:
                self._status.error(f"upstream conflict: {entry.path}")
            raise PolicyViolationError(report.upstream)

        result = ResolveResult()
        if report.downstream:
            self._status.status(f"resolving downstream conflicts in {', '.join(report.downstream_projects)}")
            batch = await self._executor.run_all(report.downstream_projects, self._action)
            result.synced = batch.identifiers
            result.marked = await self._mark(report, batch)

        remaining = [entry for entry in await self._vcs.conflicts() if not entry.resolved]
        if remaining:
            raise UnresolvedConflictsError(remaining)

        self._status.status("all conflicts resolved")
        return result

    async def _mark(self, report: ConflictReport, batch: BatchResult[str]) -> list[str]:
        paths = [entry.path for project in batch.succeeded for entry in report.downstream[project]]
        for project in batch.failed:
            self._status.warning(f"leaving conflicts in {project} unmarked")
        if paths:
            await self._vcs.mark_resolved(paths)
        return paths
