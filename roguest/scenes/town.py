"""The town scene."""

from __future__ import annotations

from roguest.engine import Game, Scene
from roguest.inputs import select
from roguest.prints import fps, message, scroll

TOWN_CHOICES = (
    "Осмотреться",
    "Пойти в таверну",
    "Отправиться в лес",
    "Посмотреть инвентарь",
    "Выйти",
)


def welcome() -> None:
    scroll("Добро пожаловать в город")


def select_in_town(scene: TownScene, game: Game) -> None:
    """Ask the player where to go in town and carry it out."""
    match select(TOWN_CHOICES):
        case 0:
            message("Вы смотрите вокруг...")
        case 1:
            scene.deactivate()
            game.activate_scene("TavernScene")
        case 2:
            message("Лес встречает вас тишиной...")
        case 4:
            game.stop()
        case _:
            message("Вы стоите на месте.")


class TownScene(Scene):
    """The town, from which the player sets out."""

    def __init__(self) -> None:
        super().__init__("TownScene", active=False)

    def activate(self) -> None:
        super().activate()
        welcome()

    def update(self, game: Game, delta_time: float) -> None:
        fps(delta_time)
        if game.player is None:
            game.stop()
            return
        select_in_town(self, game)