"""Resolve command formatting."""

from __future__ import annotations

import argparse

from downsync import ResolveResult
from downsync.cli.common import format_count


def format_resolve_summary(result: ResolveResult) -> str:
    lines = [
        "",
        "ds - conflicts resolved",
        "",
        f"  Synced:    {format_count(result.synced)}",
        f"  Marked:    {len(result.marked)} path(s)",
        "",
    ]
    return "\n".join(lines)


async def run_resolve(args: argparse.Namespace) -> ResolveResult:
    import downsync.cli as cli

    config = cli.load_config(args.config)
    ds = cli.Downsync.from_config(config)
    result = await ds.resolve()

    print(cli._format_resolve_summary(result))
    return result


__all__ = ["format_resolve_summary", "run_resolve"]
