"""Public contracts for downsync."""

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
from downsync.contracts.watch import (
    ErrorMessage,
    FileNotification,
    SubscribeAck,
    SubscriptionQuery,
    UnknownMessage,
    WatchMessage,
    WatchSummary,
)

__all__ = [
    "BatchResult",
    "CommandStartError",
    "ConfigError",
    "ConflictEntry",
    "ConflictReport",
    "ConflictStatus",
    "DownsyncConfig",
    "DownsyncError",
    "ErrorMessage",
    "FileNotification",
    "PolicyViolationError",
    "ProtocolError",
    "ResolveResult",
    "SubscribeAck",
    "SubscriptionQuery",
    "TaskOutcome",
    "UnknownMessage",
    "UnresolvedConflictsError",
    "UsageError",
    "WatchMessage",
    "WatchSummary",
]
