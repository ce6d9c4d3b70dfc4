from __future__ import annotations

import argparse
import logging
import random
from typing import Callable, List, Optional

from .config import Settings
from .moves import Direction
from .session import Game

HELP = """Commands:
  w/a/s/d or up/left/down/right  move tiles
  u      undo (up to three moves)
  n      new game
  save   save the game
  load   load the saved game
  fixed  new tiles spawn deterministically
  random new tiles spawn randomly
  h      show this help
  q      quit"""


def render(game: Game) -> str:
    status = 'GAME OVER' if game.game_over else ''
    lines = [game.board.pretty(), f"Score: {game.score}  {status}".rstrip()]
    if game.message:
        lines.append(game.message)
    return "\n".join(lines)


def handle_command(game: Game, text: str) -> Optional[str]:
    """Applies one command to the game. Returns text to show, or None for a plain redraw."""
    cmd = text.strip().lower()
    if cmd in ('h', 'help', '?'):
        return HELP
    if cmd in ('n', 'new'):
        game.new_game()
    elif cmd in ('u', 'undo'):
        game.undo()
    elif cmd == 'save':
        game.save()
    elif cmd == 'load':
        game.load()
    elif cmd == 'fixed':
        game.set_random_tiles(False)
    elif cmd == 'random':
        game.set_random_tiles(True)
    else:
        try:
            direction = Direction.parse(cmd)
        except ValueError:
            return "Unknown command. Type h for help."
        game.move(direction)
    return None


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> None:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description='2048 sliding-tile puzzle for the terminal')
    parser.add_argument('--deterministic', action='store_true', help='Spawn new tiles in the first empty cell')
    parser.add_argument('--seed', type=int, default=settings.seed, help='RNG seed for random tiles')
    parser.add_argument('--save-file', default=settings.save_file, help='Path of the save file')
    parser.add_argument('--debug', action='store_true', default=settings.debug, help='Verbose logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    random_tiles = settings.random_tiles and not args.deterministic
    game = Game(random_tiles=random_tiles, rng=random.Random(args.seed), save_path=args.save_file)
    print(render(game))
    while True:
        try:
            text = input_fn('> ')
        except EOFError:
            break
        if text.strip().lower() in ('q', 'quit', 'exit'):
            break
        out = handle_command(game, text)
        print(out if out is not None else render(game))
