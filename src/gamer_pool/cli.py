# Area: Service
"""
gamer_pool.cli — Command-line interface
=======================================

Loads gamers from a JSON file, groups them and prints the result.

Usage:
    python -m gamer_pool --gamers gamers.json                 # Print groups
    python -m gamer_pool --gamers gamers.json --group-size 2  # Override size
    python -m gamer_pool --gamers gamers.json --stats 0       # Plus stats
    python -m gamer_pool --store                              # Group persisted gamers

Settings not given on the command line come from the environment
(MAX_GROUP_SIZE, STORE_IN_DB, BUFFER_SIZE, DB_PATH, LOG_FILE) or a
.env file.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ._config import load_config
from ._shared.logging_config import log_error, setup_logging
from .errors import GamerPoolError, MalformedGamerError
from .service import GamerPoolService
from .types import GamerRecord


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Gamer pool - group waiting gamers by skill and latency",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m gamer_pool --gamers gamers.json
  python -m gamer_pool --gamers gamers.json --group-size 2 --stats 0
  STORE_IN_DB=true python -m gamer_pool --gamers gamers.json
        """,
    )

    parser.add_argument(
        "--gamers",
        type=str,
        help="Path to a JSON list of gamers ({name, skill, latency})",
    )

    parser.add_argument(
        "--group-size",
        type=int,
        help="Members per group (overrides MAX_GROUP_SIZE)",
    )

    parser.add_argument(
        "--stats",
        type=int,
        metavar="NUMBER",
        help="Also print statistics for this group number",
    )

    parser.add_argument(
        "--store",
        action="store_true",
        help="Persist gamers to the SQLite database (overrides STORE_IN_DB)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Path to the JSON log file (overrides LOG_FILE)",
    )

    return parser.parse_args(argv)


def load_gamers(path: str) -> List[GamerRecord]:
    """
    Read gamer payloads from a JSON file.

    Raises:
        MalformedGamerError: If the file is not a JSON list of gamers
    """
    with open(Path(path), encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedGamerError(path, [f"Invalid JSON: {e}"]) from e
    if not isinstance(payload, list):
        raise MalformedGamerError(payload, ["Expected a JSON list of gamers"])
    return [GamerRecord.from_payload(item) for item in payload]


def build_report(service: GamerPoolService, stats_number: Optional[int]) -> Dict[str, Any]:
    groups = service.get_groups()
    report: Dict[str, Any] = {
        "groups": [group.to_dict() for group in groups],
        "waiting": service.engine.waiting(),
    }
    if stats_number is not None:
        report["statistics"] = service.get_group_stats(stats_number).model_dump(mode="json")
    return report


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    config = load_config()
    if args.group_size is not None:
        config.group_size = args.group_size
    if args.store:
        config.store_in_db = True
    if args.log_file:
        config.log_file = args.log_file

    setup_logging(config.log_file)

    try:
        gamers = load_gamers(args.gamers) if args.gamers else []
    except GamerPoolError as e:
        log_error(e)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        service = GamerPoolService.from_config(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        for gamer in gamers:
            service.add_gamer(gamer)
        report = build_report(service, args.stats)
    finally:
        service.close()

    for error in service.persistence_errors():
        log_error(error)

    print(json.dumps(report, indent=2))
    return 0
