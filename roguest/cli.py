"""The command that starts the game."""

from __future__ import annotations

import argparse

from roguest.engine import Game
from roguest.prints import message
from roguest.scenes.tavern import TavernScene
from roguest.scenes.title import TitleScene
from roguest.scenes.town import TownScene


def main(argv=None) -> int:
    """Play the game; returns 0 after a normal end, 1 if input ran out."""
    parser = argparse.ArgumentParser(prog="roguest", description="A roguelike console game.")
    parser.parse_args(argv)

    status = 0
    game = Game(target_fps=60.0)
    try:
        game.add_scene(TownScene())
        game.add_scene(TavernScene())
        game.add_scene(TitleScene())
        game.run()
    except (EOFError, KeyboardInterrupt):
        print()
        status = 1

    message("Игра завершена")
    return status


if __name__ == "__main__":
    raise SystemExit(main())