"""CLI parser construction."""

from __future__ import annotations

import argparse

from downsync import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ds", description="Keep downstream projects in sync with upstream")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("--watch", "-w", action="store_true", help="Sync projects as upstream files change")
    parser.add_argument("--resolve", "-r", action="store_true", help="Resolve downstream merge conflicts")
    parser.add_argument("--doctor", action="store_true", help="Check that required tools are installed")
    parser.add_argument("--config", default=None, help="Path to downsync.json (default: ./downsync.json if present)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("projects", nargs="*", metavar="PROJECT", help="Projects to sync (default: changed projects)")

    return parser


def selected_mode(args: argparse.Namespace) -> str:
    if args.doctor:
        return "doctor"
    if args.resolve:
        return "resolve"
    if args.watch:
        return "watch"
    return "sync"


__all__ = ["build_parser", "selected_mode"]
