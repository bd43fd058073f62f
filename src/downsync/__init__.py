"""Public API surface for downsync."""

__version__ = "0.1.0"

from downsync.config import load_config
from downsync.contracts.batch import BatchResult, TaskOutcome
from downsync.contracts.config import DownsyncConfig
from downsync.contracts.conflicts import ConflictEntry, ConflictReport, ConflictStatus, ResolveResult
from downsync.contracts.exceptions import (
    CommandStartError,
    ConfigError,
    DownsyncError,
    PolicyViolationError,
    ProtocolError,
    UnresolvedConflictsError,
    UsageError,
)
from downsync.contracts.watch import SubscriptionQuery, WatchSummary
from downsync.sdk import Downsync
from downsync.status import StatusLogger

__all__ = [
    "BatchResult",
    "CommandStartError",
    "ConfigError",
    "ConflictEntry",
    "ConflictReport",
    "ConflictStatus",
    "Downsync",
    "DownsyncConfig",
    "DownsyncError",
    "PolicyViolationError",
    "ProtocolError",
    "ResolveResult",
    "StatusLogger",
    "SubscriptionQuery",
    "TaskOutcome",
    "UnresolvedConflictsError",
    "UsageError",
    "WatchSummary",
    "load_config",
]
