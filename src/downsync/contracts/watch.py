"""Notification-service protocol contracts."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field


class SubscriptionQuery(BaseModel):
    root: str
    name: str
    prefixes: tuple[str, ...]

    model_config = {"frozen": True}

    @classmethod
    def for_projects(cls, *, root: str, name: str, upstream_prefix: str, projects: Iterable[str]) -> SubscriptionQuery:
        return cls(root=root, name=name, prefixes=tuple(f"{upstream_prefix}/{project}" for project in projects))

    def to_command(self) -> list[Any]:
        expression: list[Any] = ["anyof", *(["dirname", prefix] for prefix in self.prefixes)]
        return ["subscribe", self.root, self.name, {"expression": expression, "fields": ["name"]}]


class ErrorMessage(BaseModel):
    error: Any


class SubscribeAck(BaseModel):
    subscribe: Any


class FileNotification(BaseModel):
    subscription: str
    files: list[str] = Field(default_factory=list)


class UnknownMessage(BaseModel):
    payload: dict[str, Any] = Field(default_factory=dict)


WatchMessage = ErrorMessage | SubscribeAck | FileNotification | UnknownMessage


class WatchSummary(BaseModel):
    batches: int = 0
    projects_synced: int = 0
    frames_rejected: int = 0
    service_errors: int = 0
    interrupted: bool = False
