#!/usr/bin/env python3
"""
Main script to launch Trash Pong with PyGame graphical interface
"""

import argparse
import sys

from trash_pong.ai.opponent import create_opponent
from trash_pong.gui.game_app import main as run_game
from trash_pong.utils.config import game_config, load_config_from_file


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Trash Pong - first to seven wins")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the random source")
    parser.add_argument(
        "--config", type=str, default=None, help="JSON configuration file to load"
    )
    parser.add_argument(
        "--layout",
        type=str,
        default=None,
        choices=["qwerty", "azerty", "qwertz"],
        help="Keyboard layout",
    )
    parser.add_argument(
        "--opponent",
        type=str,
        default="tracking",
        choices=["tracking", "still"],
        help="Computer opponent",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    print("=== TRASH PONG ===")
    print("First to seven wins")
    print()

    if args.config:
        if load_config_from_file(args.config):
            print(f"Configuration loaded from {args.config}")
        else:
            print(f"Could not load {args.config}, using defaults")

    if args.layout:
        game_config.KEYBOARD_LAYOUT = args.layout

    layout = game_config.get_keyboard_layout()
    print("CONTROLS:")
    print(f"  {layout.display_names['up']}/{layout.display_names['down']}: Move your paddle")
    print("  SPACE/ENTER or click: Play again")
    print("  ESC: Quit")
    print()

    run_game(seed=args.seed, opponent=create_opponent(args.opponent))


if __name__ == "__main__":
    main(sys.argv[1:])
