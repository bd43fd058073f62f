"""Shared CLI formatting helpers."""

from __future__ import annotations


def format_count(values: list[str]) -> str:
    """``"2 (widgets, gadgets)"``, or ``"0 (none)"`` for an empty list."""
    return f"{len(values)} ({', '.join(values) or 'none'})"
