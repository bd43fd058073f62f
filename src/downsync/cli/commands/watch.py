"""Watch command formatting."""

from __future__ import annotations

import argparse
import asyncio

from downsync import WatchSummary


def format_watch_summary(summary: WatchSummary) -> str:
    lines = [
        "",
        "ds - watch interrupted" if summary.interrupted else "ds - watch ended",
        "",
        f"  Batches:   {summary.batches}",
        f"  Synced:    {summary.projects_synced} project run(s)",
    ]
    if summary.frames_rejected or summary.service_errors:
        lines.append(f"  Rejected:  {summary.frames_rejected} frame(s), {summary.service_errors} service error(s)")
    lines.append("")
    return "\n".join(lines)


async def run_watch(args: argparse.Namespace) -> WatchSummary:
    import downsync.cli as cli

    config = cli.load_config(args.config)
    ds = cli.Downsync.from_config(config)
    summary = WatchSummary()
    try:
        await ds.watch(args.projects, summary)
    except asyncio.CancelledError:
        print(cli._format_watch_summary(summary))
        raise

    print(cli._format_watch_summary(summary))
    return summary


__all__ = ["format_watch_summary", "run_watch"]
