"""Path-to-project helpers."""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

H = TypeVar("H", bound=Hashable)


def dedupe(values: Iterable[H]) -> list[H]:
    """Drop repeats, keeping first-seen order."""
    return list(dict.fromkeys(values))


def in_upstream(path: str, upstream_prefix: str) -> bool:
    """Whether ``path`` lies under an ``<upstream_prefix>/`` directory at any depth."""
    return re.search(rf"(?:^|/){re.escape(upstream_prefix)}/", path) is not None


def upstream_project(path: str, upstream_prefix: str) -> str | None:
    """Return the first path segment after ``<upstream_prefix>/``."""
    match = re.search(rf"(?:^|/){re.escape(upstream_prefix)}/([^/]+)/", path)
    return match.group(1) if match else None


def downstream_project(path: str, downstream_prefix: str) -> str | None:
    """Return ``<id>`` from a path containing ``.../<downstream_prefix>/<id>/``."""
    match = re.search(rf"(?:^|/){re.escape(downstream_prefix)}/([^/]+)/", path)
    return match.group(1) if match else None


def match_watched_project(path: str, projects: Sequence[str], upstream_prefix: str) -> str | None:
    """First watched project whose upstream directory appears in ``path``."""
    for project in projects:
        if f"{upstream_prefix}/{project}/" in path:
            return project
    return None
