"""Check that the external tools a run depends on are installed."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from downsync.contracts.config import DownsyncConfig


@dataclass(frozen=True)
class ToolCheck:
    name: str
    purpose: str
    location: str | None

    @property
    def found(self) -> bool:
        return self.location is not None


def _locate(executable: str, *, root: Path) -> str | None:
    if "/" in executable:
        candidate = Path(executable)
        if not candidate.is_absolute():
            candidate = root / candidate
        return str(candidate) if candidate.is_file() and os.access(candidate, os.X_OK) else None
    return shutil.which(executable)


def check_tools(config: DownsyncConfig) -> list[ToolCheck]:
    """Locate every executable named by ``config``, once each."""
    wanted = [
        (config.vcs_command[0], "version control"),
        (config.watch_command[0], "file watching"),
        (config.update_command[0], "downstream update"),
        (config.sign_command[0], "downstream re-sign"),
    ]
    checks: dict[str, ToolCheck] = {}
    for name, purpose in wanted:
        if name not in checks:
            checks[name] = ToolCheck(name=name, purpose=purpose, location=_locate(name, root=config.root))
    return list(checks.values())
