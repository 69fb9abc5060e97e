#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S]
    python main.py demo [--games N] [--delay SECONDS]
"""
import argparse
import logging
import time

import numpy as np

from minesweeper import ConsoleSession, GridConfig, MinesweeperEnv


def play(args: argparse.Namespace, config: GridConfig) -> None:
    """Play an interactive game in the terminal."""
    session = ConsoleSession(config, seed=args.seed)
    session.run()


def demo(args: argparse.Namespace, config: GridConfig) -> None:
    """Watch a random policy play through the Gymnasium environment."""
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)

    wins = 0
    obs, _ = env.reset(seed=args.seed)

    for game in range(args.games):
        if game > 0:
            obs, _ = env.reset()

        done = False
        step = 0
        info = {}

        while not done:
            # Random policy only ever exposes cells
            mask = env.get_action_mask()[: config.total_cells]
            action = int(rng.choice(np.flatnonzero(mask)))
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            row, col = divmod(action, config.size)
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Last move: ({row}, {col})  Reward: {reward:+.1f}\n")
            print(env.render())
            print()
            time.sleep(args.delay)

        if info.get("progress") == "WON":
            wins += 1
            print("*** WIN! ***\n")
        else:
            print("*** LOST (hit mine) ***\n")

    print(f"=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal or watch a demo"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for name, help_text in (
        ("play", "Play an interactive game"),
        ("demo", "Watch a random policy play"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--size", type=int, default=10, help="Grid size (NxN)")
        sub.add_argument("--mines", type=int, default=10, help="Number of mines")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    demo_parser = subparsers.choices["demo"]
    demo_parser.add_argument(
        "--games", type=int, default=3, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return

    try:
        config = GridConfig(size=args.size, num_mines=args.mines)
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "play":
        play(args, config)
    else:
        demo(args, config)


if __name__ == "__main__":
    main()
