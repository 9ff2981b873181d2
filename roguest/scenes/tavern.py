"""The tavern scene."""

from __future__ import annotations

from roguest.engine import Game, Scene
from roguest.inputs import select
from roguest.prints import message, scroll

TAVERN_CHOICES = ("Осмотреться", "Вернуться в город")


def select_in_tavern(scene: TavernScene, game: Game) -> None:
    """Ask the player what to do in the tavern and carry it out."""
    match select(TAVERN_CHOICES):
        case 0:
            message("Вы смотрите вокруг...")
        case 1:
            scene.deactivate()
            game.activate_scene("TownScene")
        case _:
            message("Вы стоите на месте.")


class TavernScene(Scene):
    """A noisy tavern the player can look around in or leave."""

    def __init__(self) -> None:
        super().__init__("TavernScene", active=False)

    def activate(self) -> None:
        super().activate()
        scroll("Вы заходите в шумную таверну")

    def update(self, game: Game, delta_time: float) -> None:
        if game.player is None:
            game.stop()
            return
        select_in_tavern(self, game)