"""Working-set resolution."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from downsync.engine.utils import dedupe, upstream_project
from downsync.vcs import HgClient

logger = logging.getLogger(__name__)

_PENDING_STATUSES = frozenset({"M", "?"})


class ProjectResolver:
    """Computes the projects a run should act on.

    Explicit names are trusted verbatim. Without them the upstream tree's
    pending changes decide. The answer is computed at most once per instance.
    """

    def __init__(self, vcs: HgClient, *, upstream_prefix: str) -> None:
        self._vcs = vcs
        self._upstream_prefix = upstream_prefix
        self._cached: list[str] | None = None

    async def resolve(self, explicit: Sequence[str] = ()) -> list[str]:
        if self._cached is None:
            self._cached = list(explicit) if explicit else await self._detect()
        return list(self._cached)

    async def _detect(self) -> list[str]:
        lines = await self._vcs.status(self._upstream_prefix)
        projects = dedupe(
            project
            for line in lines
            if line.status in _PENDING_STATUSES
            and (project := upstream_project(line.path, self._upstream_prefix)) is not None
        )
        logger.debug("Detected %d changed project(s) under %s", len(projects), self._upstream_prefix)
        return projects
