#!/usr/bin/env python3
"""
Space Invaders - Terminal Play Script

Runs the simulation in real time with a rich terminal display. Type a
command and press Enter (a/d/w/s to move, space or "fire" to shoot,
"help", "stats", q to quit).

Usage:
    python scripts/play.py
    python scripts/play.py --seed 42 --max-ticks 600
    python scripts/play.py --config config/default.yaml --no-live
"""
import sys
import argparse
import logging
import random
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from invaders.game import GameSession, SpaceInvadersGame
from invaders.state import GameManager
from invaders.utils import load_config, setup_logging
from invaders.visualization import TerminalGameDisplay

logger = logging.getLogger("invaders.play")


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Space Invaders - play in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py                        # Default settings
  python scripts/play.py --seed 42              # Reproducible enemy fire
  python scripts/play.py --max-ticks 300        # Stop after 300 ticks
"""
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to config file (default: config/default.yaml)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for enemy fire"
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=None,
        help="Stop after this many ticks (default: play until game over)"
    )
    parser.add_argument(
        "--no-live",
        action="store_true",
        help="Print each frame instead of redrawing in place"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Override the configured log level (e.g. DEBUG)"
    )

    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()

    overrides = {}
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}
    config = load_config(args.config, overrides=overrides)
    setup_logging(config.logging)

    game = SpaceInvadersGame(
        config=config.game,
        game_manager=GameManager(),
        rng=random.Random(args.seed),
    )
    display = TerminalGameDisplay(
        live=config.display.live and not args.no_live,
        message_history=config.display.message_history,
    )
    session = GameSession(
        game,
        renderer=display,
        input_stream=sys.stdin,
        render_interval=config.display.render_interval,
        max_ticks=args.max_ticks,
    )

    display.start()
    try:
        final_state = session.run()
    finally:
        display.stop()

    display.console.print(
        f"Final score: [bold yellow]{final_state['score']}[/]  "
        f"Level: {final_state['level']}  Rank: [bold]{final_state['rank']}[/]"
    )
    if final_state["failed_ticks"]:
        logger.warning("%d ticks were aborted by errors", final_state["failed_ticks"])


if __name__ == "__main__":
    main()
