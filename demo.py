#!/usr/bin/env python3
"""Watch random play through the Minesweeper environment."""
import logging
import os
import time

import numpy as np

from minesweeper import BoardConfig, MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, rows: int = 10, cols: int = 10,
         mines: int = 15, seed=None):
    """Run demo games, picking random hidden tiles."""
    config = BoardConfig(rows=rows, cols=cols, mine_count=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(seed)

    print(f"Board: {rows}x{cols} with {mines} mines "
          f"({100*mines/(rows*cols):.1f}% density)")
    time.sleep(1)

    wins = 0

    for game in range(games):
        env.reset(seed=None if seed is None else seed + game)
        done = False
        step = 0

        while not done:
            action = int(rng.choice(np.flatnonzero(env.get_action_mask())))
            row, col = divmod(action, cols)

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins} | Flags left: {info['flags_remaining']}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info["game_state"] == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--rows", type=int, default=10, help="Board rows")
    parser.add_argument("--cols", type=int, default=10, help="Board columns")
    parser.add_argument("--mines", type=int, default=15, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Log engine events")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    demo(delay=args.delay, games=args.games, rows=args.rows, cols=args.cols,
         mines=args.mines, seed=args.seed)
