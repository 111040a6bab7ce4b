"""TARDIS interactive console.

Reads one command per line and drives a chronology of text snapshots.

Usage:
    python -m tardis                            # Default config
    python -m tardis --config custom.yaml       # Custom config
    python -m tardis --max-snapshots 20         # Bound the history
    printf 'save a\\nsave b\\nprevious\\n' | python -m tardis

Commands:
    save <text>     record <text> as the newest snapshot
    reboot <text>   drop everything and start over from <text>
    previous        step back one snapshot
    next            step forward one snapshot
    oldest          jump to the oldest snapshot
    latest          jump to the newest snapshot
    current         show the snapshot under the cursor
    history         list snapshots newest first, marking the cursor
    status          show cursor and navigation flags
    quit            exit
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Iterable, TextIO

from tardis.core.config import TardisConfig
from tardis.core.types import ChronologyState
from tardis.history.config import HistoryConfig
from tardis.history.synchronized import build_tracker
from tardis.utils.logging import setup_logging

logger = logging.getLogger("tardis.console")

EMPTY_MESSAGE = "(empty chronology)"

_NAVIGATION = ("previous", "next", "oldest", "latest", "current")


def _render_history(tracker: Any) -> str:
    lines = []
    for i, snapshot in enumerate(tracker.get_all_snapshots()):
        marker = ">" if i == tracker.cursor else " "
        lines.append(f"{marker} {i}: {snapshot}")
    return "\n".join(lines) if lines else EMPTY_MESSAGE


def execute(tracker: Any, line: str) -> str | None:
    """Run one console command against *tracker* and return its output.

    Returns ``None`` for ``quit``.  Navigation on an empty chronology is
    answered here instead of being forwarded to the tracker.
    """
    command, _, argument = line.strip().partition(" ")
    command = command.lower()

    if command in ("quit", "exit"):
        return None
    if command == "save":
        tracker.save(argument)
        return f"saved: {argument}"
    if command == "reboot":
        tracker.reboot(argument)
        return f"rebooted: {argument}"
    if command in _NAVIGATION:
        if tracker.state is ChronologyState.UNINITIALIZED:
            return EMPTY_MESSAGE
        if command == "current":
            return str(tracker.current)
        return str(getattr(tracker, command)())
    if command == "history":
        return _render_history(tracker)
    if command == "status":
        status = tracker.get_status()
        return " ".join(f"{k}={v}" for k, v in status.items())
    return f"unknown command: {command}"


def run_console(tracker: Any, lines: Iterable[str], out: TextIO) -> int:
    """Feed *lines* to :func:`execute` until input ends or ``quit``."""
    handled = 0
    for line in lines:
        if not line.strip():
            continue
        result = execute(tracker, line)
        if result is None:
            break
        handled += 1
        print(result, file=out)
    logger.info("Console finished after %d commands", handled)
    return handled


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = argparse.ArgumentParser(
        prog="tardis",
        description="TARDIS - linear snapshot chronology console",
    )
    parser.add_argument(
        "--config",
        "-c",
        default="config/default.yaml",
        help="Path to configuration YAML file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--max-snapshots",
        type=int,
        default=None,
        help="Override history capacity (oldest snapshots are evicted)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level",
    )
    parser.add_argument(
        "--validate-config",
        action="store_true",
        default=False,
        help="Validate config against Pydantic schema before starting",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Path to log file (default: no file logging)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Output logs as JSON instead of human-readable",
    )
    args = parser.parse_args(argv)

    config = TardisConfig(args.config)
    try:
        cfg = config.load(validate=args.validate_config)
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: Config validation failed:\n{e}", file=sys.stderr)
        return 1

    if args.max_snapshots is not None:
        config.override("tardis.history.max_snapshots", args.max_snapshots)

    system = cfg.tardis.get("system", {}) or {}
    log_level = args.log_level or system.get("log_level", "INFO")
    log_file = args.log_file or system.get("log_file", None)
    log_json = args.log_json or system.get("log_json", False)
    setup_logging(log_level, log_file=log_file, log_json=log_json)

    try:
        history_cfg = HistoryConfig.from_omegaconf(cfg.tardis.get("history"))
        tracker = build_tracker(history_cfg)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(
        "Console started (max_snapshots=%s, synchronized=%s)",
        history_cfg.max_snapshots,
        history_cfg.synchronized,
    )
    run_console(tracker, stdin or sys.stdin, stdout or sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
