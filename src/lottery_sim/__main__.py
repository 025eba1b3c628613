from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from . import __version__
from .config import StorageSettings
from .persistence import (
    check_and_migrate,
    clear_draw_history,
    create_storage,
    load_draw_history,
    load_game_state,
    reset_game_state,
)


def _setup_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def _print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True))


def main(argv: Optional[list[str]] = None) -> int:
    settings = StorageSettings.from_env()

    parser = argparse.ArgumentParser(
        prog="lottery-sim",
        description="Inspect and maintain lottery simulator saved data",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("status", help="Run the schema check and show stored state")
    sub.add_parser("reset", help="Reset the game state and clear the draw history")
    history = sub.add_parser("history", help="Show the most recent draws")
    history.add_argument("--limit", type=int, default=10, help="Number of draws to show (default: %(default)s)")

    args = parser.parse_args(argv)
    _setup_logging(args.log_level)

    storage = create_storage(settings=settings)
    migration = check_and_migrate(storage)

    if args.command == "status":
        draws = load_draw_history(storage)
        _print_json(
            {
                "storageAvailable": storage.is_available,
                "migration": {
                    "status": migration.status.value,
                    "fromVersion": migration.from_version,
                    "toVersion": migration.to_version,
                    "message": migration.message,
                },
                "gameState": load_game_state(storage),
                "historyLength": len(draws),
            }
        )
    elif args.command == "reset":
        state = reset_game_state(storage)
        clear_draw_history(storage)
        _print_json(state)
    elif args.command == "history":
        draws = load_draw_history(storage)
        limit = max(args.limit, 0)
        _print_json(draws[-limit:] if limit else [])
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
