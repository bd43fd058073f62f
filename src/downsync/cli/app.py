"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from downsync import DownsyncError


def main(argv: list[str] | None = None) -> int:
    import downsync.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    mode = cli.selected_mode(args)
    commands = {
        "doctor": cli._run_doctor,
        "resolve": cli._run_resolve,
        "watch": cli._run_watch,
        "sync": cli._run_sync,
    }

    try:
        cli.asyncio.run(commands[mode](args))
        return 0
    except KeyboardInterrupt:
        # Interrupt is how a watch session is meant to end.
        return 0 if mode == "watch" else 130
    except DownsyncError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
