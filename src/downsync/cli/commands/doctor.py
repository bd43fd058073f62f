"""Doctor command: report missing external tools."""

from __future__ import annotations

import argparse

from downsync import ConfigError
from downsync.doctor import ToolCheck, check_tools


def format_tool_report(checks: list[ToolCheck]) -> str:
    lines = ["", "ds - tool check", ""]
    for check in checks:
        state = "ok" if check.found else "missing"
        location = check.location or "-"
        lines.append(f"  {state:<8} {check.name:<24} {check.purpose:<18} {location}")
    lines.append("")
    return "\n".join(lines)


async def run_doctor(args: argparse.Namespace) -> list[ToolCheck]:
    import downsync.cli as cli

    config = cli.load_config(args.config)
    checks = check_tools(config)
    print(format_tool_report(checks))

    missing = [check.name for check in checks if not check.found]
    if missing:
        raise ConfigError(f"required tools not found: {', '.join(missing)}")
    return checks


__all__ = ["format_tool_report", "run_doctor"]
