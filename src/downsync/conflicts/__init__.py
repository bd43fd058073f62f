from downsync.conflicts.resolver import ConflictResolver, classify

__all__ = ["ConflictResolver", "classify"]
