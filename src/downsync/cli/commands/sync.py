"""Sync command formatting."""

from __future__ import annotations

import argparse

from downsync import BatchResult
from downsync.cli.common import format_count


def format_sync_summary(result: BatchResult[str]) -> str:
    lines = [
        "",
        "ds - sync complete",
        "",
        f"  Projects:  {format_count(result.identifiers)}",
    ]
    if result.failed:
        lines.append(f"  Warnings:  {format_count(result.failed)}")
    elif result.identifiers:
        lines.append("  Status:    all commands succeeded")
    lines.append("")
    return "\n".join(lines)


async def run_sync(args: argparse.Namespace) -> BatchResult[str]:
    import downsync.cli as cli

    config = cli.load_config(args.config)
    ds = cli.Downsync.from_config(config)
    result = await ds.sync(args.projects)

    print(cli._format_summary(result))
    return result


__all__ = ["format_sync_summary", "run_sync"]
