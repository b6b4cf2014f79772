# -*- coding: utf-8 -*-
"""
Play 2048 in the terminal, or let a random player run a batch of games.
"""
import logging
from collections import Counter
from typing import Callable, Dict, Optional

from numpy.random import default_rng
from tqdm import trange

from game2048 import Engine, EngineConfig

KEYS = {
    "w": "up",
    "a": "left",
    "s": "down",
    "d": "right",
}


def redraw(engine: Engine):
    """
    Print the board, the score and the end banner.

    Parameters
    ----------
    engine: Engine
        The game to draw
    """
    print(engine.render())
    print(f"score={engine.score}  undo={'yes' if engine.can_undo else 'no'}")
    if engine.game_over:
        print("Game over! No more moves available.")


def key_handler(engine: Engine, key: str) -> bool:
    """
    Handle one command typed by the player.

    Parameters
    ----------
    engine: Engine
        The game
    key: str
        Command typed by the player

    Returns
    -------
    bool
        False when the player asked to quit.
    """
    key = key.strip().lower()

    if key == "q":
        return False

    if key == "u":
        engine.undo()
    elif key == "r":
        engine.restart()
    elif key in KEYS:
        engine.move(Engine.ACTIONS[KEYS[key]])
    elif key in Engine.ACTIONS:
        engine.move(Engine.ACTIONS[key])
    else:
        print("keys: w/a/s/d or up/left/down/right, u=undo, r=restart, q=quit")
        return True

    redraw(engine)
    return True


def play_interactive(engine: Engine, read: Callable[[], str] = input):
    """
    Read commands until the player quits or the input ends.
    """
    redraw(engine)
    while True:
        try:
            key = read()
        except EOFError:
            break
        if not key_handler(engine, key):
            break


def play_random(length: int = 10, seed: Optional[int] = None) -> Dict[int, int]:
    """
    Play games with uniformly random legal moves.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed shared by the spawner and the player.

    Returns
    -------
    Dict[int, int]
        How many games ended on each max tile.
    """
    rng = default_rng(seed)
    engine = Engine(EngineConfig(seed=seed), rng=rng)
    score = []

    with trange(length) as period:
        for num in period:
            engine.restart()

            # ##: Play a game.
            while not engine.game_over:
                legal = engine.legal_moves
                engine.move(legal[rng.integers(len(legal))])

                period.set_description(f"Game: {num + 1}")
                period.set_postfix(score=engine.score, max=engine.max_tile)

            score.append(engine.max_tile)

    return dict(Counter(score))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Play 2048")
    parser.add_argument("--random", type=int, default=0, help="play N games with a random player")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.random > 0:
        result = play_random(length=args.random, seed=args.seed)
        print(f"Max tiles over {args.random} games: {dict(sorted(result.items()))}")
    else:
        play_interactive(Engine(EngineConfig(seed=args.seed)))
