import argparse
import random
import sys
import time

from loguru import logger

from tridice.config import config
from tridice.game import Game
from tridice.simulator import GameSimulator
from tridice.strategy import registry


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate a Tridice game between two strategies")
    parser.add_argument(
        "--p1",
        type=str,
        default="tactician",
        choices=registry.available(),
        help="Strategy for player 1",
    )
    parser.add_argument(
        "--p2",
        type=str,
        default="random",
        choices=registry.available(),
        help="Strategy for player 2",
    )
    parser.add_argument("--seed", type=int, default=config.SEED, help="Seed for dice rolls and random strategies")
    parser.add_argument("--max-turns", type=int, default=config.MAX_TURNS)
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args()


def build_strategy(name: str, seed):
    if name == "random":
        return registry.create(name, rng_seed=seed)
    return registry.create(name)


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    game = Game(rng=random.Random(args.seed))
    strategies = (build_strategy(args.p1, args.seed), build_strategy(args.p2, args.seed))
    simulator = GameSimulator(game=game, strategies=strategies)

    print(f"--- P1: {args.p1} vs P2: {args.p2} (seed={args.seed}) ---")
    start_time = time.time()
    winner = simulator.run(max_turns=args.max_turns)
    elapsed = time.time() - start_time

    print("\n--- Final board ---")
    print(game.grid)
    print(f"\nTurns played: {simulator.turns_played} in {elapsed:.2f}s")
    for key, values in simulator.summary.items():
        print(f"  {key:<10} P1={values[0]:<4} P2={values[1]}")
    if winner is None:
        print("Result: no winner (turn cap reached)")
    else:
        print(f"Result: P{winner.player_id} wins")


if __name__ == "__main__":
    main()
