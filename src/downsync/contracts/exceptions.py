"""Exception hierarchy for downsync."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from downsync.contracts.conflicts import ConflictEntry


class DownsyncError(Exception):
    """Base exception for all downsync errors."""


class ConfigError(DownsyncError):
    """Configuration loading or validation failure."""


class UsageError(DownsyncError):
    """The requested mode cannot run with the given input."""


class CommandStartError(DownsyncError):
    """An external command could not be started at all."""

    def __init__(self, message: str, *, argv: Sequence[str]) -> None:
        super().__init__(message)
        self.argv = tuple(argv)


class PolicyViolationError(DownsyncError):
    """Upstream conflicts exist and block downstream automation."""

    def __init__(self, entries: Sequence[ConflictEntry]) -> None:
        self.entries = list(entries)
        joined = "\n".join(f"  - {entry.path}" for entry in self.entries)
        super().__init__(f"Upstream conflicts must be resolved manually:\n{joined}")


class UnresolvedConflictsError(DownsyncError):
    """Conflicts remain after a remediation pass."""

    def __init__(self, entries: Sequence[ConflictEntry]) -> None:
        self.entries = list(entries)
        joined = "\n".join(f"  - {entry.status} {entry.path}" for entry in self.entries)
        super().__init__(f"Conflicts remain unresolved, manual intervention required:\n{joined}")


class ProtocolError(DownsyncError):
    """A frame from the notification service could not be understood."""

    def __init__(self, message: str, *, frame: str) -> None:
        super().__init__(message)
        self.frame = frame
