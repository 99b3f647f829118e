# -*- coding: utf-8 -*-
"""
Play the sliding-tile game by hand, in a Matplotlib window or in the terminal.
"""
import argparse
import logging
from typing import Any

from tilegrid import GameSession, GridEngine, default_config
from tilegrid.adapters import InputAdapter, JsonScoreStore
from tilegrid.utils import ConsoleBoard


def key_handler(adapter: InputAdapter, window: Any, event: Any):
    """
    Handle the keyboard of the window.

    Parameters
    ----------
    adapter: InputAdapter
        Translate keys into moves

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        adapter.session.restart()
        return None

    adapter.handle_key(event.key)
    return None


def play_window(session: GameSession, adapter: InputAdapter):
    """Play in a Matplotlib window until it is closed."""
    from tilegrid.utils.windows import WindowBoard

    config = session.engine.config
    window = WindowBoard(title="2048 Game", size=session.engine.size, super_tile=config.super_tile)
    window.register_key_handler(lambda event: key_handler(adapter, window, event))
    session.renderers.append(window)
    session.start()

    # Blocking event loop
    window.show(block=True)


def play_console(session: GameSession, adapter: InputAdapter):
    """Play in the terminal: w/a/s/d moves, r restarts, q quits."""
    session.renderers.append(ConsoleBoard())
    session.start()

    while True:
        try:
            key = input("move> ").strip()
        except EOFError:
            break
        if key == "q":
            break
        if key == "r":
            session.restart()
            continue
        if not adapter.handle_key(key) and session.game_over:
            print("Game over! Press r to restart or q to quit.")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play 2048.")
    parser.add_argument("--console", action="store_true", help="play in the terminal instead of a window")
    parser.add_argument("--seed", type=int, default=None, help="seed of the tile generator")
    parser.add_argument("--best-file", default=None, help="JSON file holding the best score")
    parser.add_argument("--verbose", "-v", action="store_true", help="log every turn")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    game_config = default_config()
    if args.best_file:
        game_config.best_score_path = args.best_file

    engine = GridEngine(seed=args.seed, config=game_config)
    game = GameSession(engine, store=JsonScoreStore.from_config(game_config))
    input_adapter = InputAdapter(game)

    if args.console:
        play_console(game, input_adapter)
    else:
        play_window(game, input_adapter)
