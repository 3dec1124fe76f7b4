"""Command-line interface for producing circuit cost projections.

Provides subcommands: `project` (fetch circuits from the API) and
`project-file` (read circuits from local JSON files). Each command is
implemented as a `cmd_*` function that accepts an argparse namespace.
"""
from __future__ import annotations

import argparse
import logging
import os
from datetime import date
from pathlib import Path
from typing import Sequence

import requests  # type: ignore[import-untyped]
from dotenv import load_dotenv

from circuit_timeline.config import get_settings
from circuit_timeline.ingest.gather import gather_circuits
from circuit_timeline.ingest.parse_circuits import load_circuits_json
from circuit_timeline.logging_config import configure_logging
from circuit_timeline.models import Circuit
from circuit_timeline.timeline.aggregate import aggregate, projection_frame

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _parse_date(text: str) -> date:
    """argparse type for `YYYY-MM-DD` dates."""
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {text!r}, expected YYYY-MM-DD") from None


def _emit(
    existing: Sequence[Circuit],
    proposed: Sequence[Circuit],
    start: date | None,
    out: Path | None,
) -> None:
    """Aggregate and either print the table or write it as CSV."""
    frame = projection_frame(aggregate(existing, proposed, start))

    if out is None:
        print(frame.to_string(index=False))
        return

    out.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(out, index=False)
    log.info("Wrote %d months to %s", len(frame), out)


# --------------------------------------------------
# PROJECT
# --------------------------------------------------
def cmd_project(args: argparse.Namespace) -> None:
    """Fetch circuits for the proposal's locations and project costs.

    Args:
        args: argparse namespace with `proposal_id`, `location`, `start`, `out`.
    """
    s = get_settings()
    existing, proposed = gather_circuits(args.proposal_id, args.location, s)
    _emit(existing, proposed, args.start, args.out)


def cmd_project_file(args: argparse.Namespace) -> None:
    """Project costs from local JSON files of existing and proposed circuits."""
    existing = load_circuits_json(args.existing)
    proposed = load_circuits_json(args.proposed)
    _emit(existing, proposed, args.start, args.out)


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="circuit-timeline")
    p.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_project = sub.add_parser("project")
    p_project.add_argument("--proposal-id", required=True)
    p_project.add_argument("--location", action="append", required=True)
    p_project.add_argument("--start", type=_parse_date, default=None)
    p_project.add_argument("--out", type=Path, default=None)

    p_file = sub.add_parser("project-file")
    p_file.add_argument("--existing", type=Path, required=True)
    p_file.add_argument("--proposed", type=Path, required=True)
    p_file.add_argument("--start", type=_parse_date, default=None)
    p_file.add_argument("--out", type=Path, default=None)

    return p


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(
        Path(os.getenv("CIRCUIT_TIMELINE_LOG_FILE", "logs/circuit_timeline.log")),
        verbose=args.verbose,
    )

    try:
        if args.cmd == "project":
            cmd_project(args)
        elif args.cmd == "project-file":
            cmd_project_file(args)
        else:
            raise SystemExit(2)
    except (requests.RequestException, RuntimeError) as e:
        log.error("%s failed: %s", args.cmd, e)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
