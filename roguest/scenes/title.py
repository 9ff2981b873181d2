"""The title scene: the logo and the creation of the player."""

from __future__ import annotations

from termcolor import colored

from roguest.creatures import player
from roguest.engine import Game, Scene
from roguest.inputs import prompt_text
from roguest.prints import info, wait_any_key

GAME_NAME = "roguest"
GAME_VERSION = "0.1.0"

_LOGO = (
    "__________                                      __    ",
    "\\______   \\ ____   ____  __ __   ____   _______/  |_  ",
    " |       _//  _ \\ / ___\\|  |  \\_/ __ \\ /  ___/\\   __\\ ",
    " |    |   (  <_> ) /_/  >  |  /\\  ___/ \\___ \\  |  |   ",
    " |____|_  /\\____/\\___  /|____/  \\___  >____  > |__|   ",
    "        \\/      /_____/             \\/     \\/         ",
)

_BANNER = (
    "|---------------------------------------------------|",
    "|   T H E   R O G U E L I K E   R U S T   G A M E   |",
    "|---------------------------------------------------|",
)


def print_logo() -> None:
    """Print the game's logo, its name and version, and ring the bell."""
    print("\n")
    for line in _LOGO:
        print(colored(line, "yellow"))
    print()
    for line in _BANNER:
        print(colored(line, "yellow"))
    print()
    print(f"{GAME_NAME} version {GAME_VERSION}")
    print("\x07")


def create_player(game: Game) -> None:
    """Ask for the player's name and give the game its hero."""
    name = prompt_text("Введите свое имя:")

    print("")
    print(f"Привет, {colored(name, 'blue')}!")

    game.set_player(player(name))

    info("Добро пожаловать в игру")
    wait_any_key()


class TitleScene(Scene):
    """The opening scene; once the hero exists it hands over to the town."""

    def __init__(self) -> None:
        super().__init__("TitleScene", active=True)

    def mounted(self, game: Game) -> None:
        print_logo()
        create_player(game)
        self.deactivate()
        game.activate_scene("TownScene")

    def update(self, game: Game, delta_time: float) -> None:
        if game.player is None:
            game.stop()