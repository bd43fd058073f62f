"""Merge-conflict contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ConflictStatus(StrEnum):
    UNRESOLVED = "U"
    RESOLVED = "R"


class ConflictEntry(BaseModel):
    status: str
    path: str

    model_config = {"frozen": True}

    @property
    def unresolved(self) -> bool:
        return self.status == ConflictStatus.UNRESOLVED

    @property
    def resolved(self) -> bool:
        return self.status == ConflictStatus.RESOLVED


class ConflictReport(BaseModel):
    upstream: list[ConflictEntry] = Field(default_factory=list)
    downstream: dict[str, list[ConflictEntry]] = Field(default_factory=dict)

    @property
    def downstream_projects(self) -> list[str]:
        return list(self.downstream)


class ResolveResult(BaseModel):
    synced: list[str] = Field(default_factory=list)
    marked: list[str] = Field(default_factory=list)
