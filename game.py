#!/usr/bin/env python3
"""Mainframe TSO Star Trek - Console entry point.

A turn-based single-player space combat simulation: destroy the Klingon
vessels in the sector before the Enterprise is lost or time runs out.
"""

import argparse
import logging
import sys

from src.engine.controller import GameController
from src.engine.scenario import create_default_game
from src.interface.console import ConsoleSession
from src.utils.rng import GameRNG


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Mainframe TSO Star Trek - Turn-based sector combat",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                  # New game with a time-based seed (plain console)
  %(prog)s --tui            # Start with terminal user interface (TUI)
  %(prog)s --seed 42        # Reproducible game
  %(prog)s --debug          # Engine debug logging on stderr
        """,
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for enemy placement and combat rolls (default: time-based)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (dispatches, enemy shots, turn advance)",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Use terminal user interface (TUI) instead of the plain console",
    )

    args = parser.parse_args()

    # Log to stderr so log lines do not tear the console frame on stdout
    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    rng = GameRNG(args.seed)
    game = create_default_game(rng)
    controller = GameController(game, rng)

    if args.tui:
        from src.interface.tui_app import StarTrekTUI

        app = StarTrekTUI(controller)
        outcome = app.run(mouse=False)
        if outcome is not None:
            print(outcome.message)
    else:
        ConsoleSession(controller).run()

    print(f"(seed {rng.seed})")


if __name__ == "__main__":
    main()
