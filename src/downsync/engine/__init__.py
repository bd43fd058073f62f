from downsync.engine.executor import ParallelExecutor
from downsync.engine.projects import ProjectResolver
from downsync.engine.sync_action import ProjectSync

__all__ = ["ParallelExecutor", "ProjectResolver", "ProjectSync"]
