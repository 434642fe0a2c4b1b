"""Entry point for `python -m typearena` or the `typearena` console script."""

import argparse
import logging
from pathlib import Path

from typearena.app import App
from typearena.settings import DEFAULT_SETTINGS_PATH
from typearena.storage import DEFAULT_DB_PATH


def main() -> None:
    parser = argparse.ArgumentParser(description="TypeArena - hot-seat typing races")
    parser.add_argument("--db", type=Path, default=DEFAULT_DB_PATH, help="Profile database file")
    parser.add_argument("--settings", type=Path, default=DEFAULT_SETTINGS_PATH, help="Settings JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = App(db_path=args.db, settings_path=args.settings)
    app.run()


if __name__ == "__main__":
    main()
