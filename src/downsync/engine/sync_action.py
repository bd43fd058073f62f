"""Per-project update and re-sign."""

from __future__ import annotations

from downsync.contracts.config import DownsyncConfig
from downsync.runner import CommandRunner
from downsync.status import StatusLogger


class ProjectSync:
    def __init__(self, runner: CommandRunner, status: StatusLogger, config: DownsyncConfig) -> None:
        self._runner = runner
        self._status = status
        self._config = config

    def commands(self, project: str) -> list[list[str]]:
        """Update every site first; the update step leaves signatures stale."""
        config = self._config
        update = [config.render(config.update_command, project=project, site=site) for site in config.sites]
        sign = [config.render(config.sign_command, project=project, site=site) for site in config.sites]
        return [*update, *sign]

    async def sync(self, project: str) -> list[int]:
        self._status.status(f"syncing {project}")
        statuses = [await self._runner.run(argv) for argv in self.commands(project)]
        if any(statuses):
            self._status.status(f"finished {project} with warnings")
        else:
            self._status.status(f"finished {project}")
        return statuses
