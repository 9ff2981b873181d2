"""The battle scene: meeting monsters, fighting them and healing."""

from __future__ import annotations

from termcolor import colored

from roguest.creatures import Creature, goblin
from roguest.engine import Game, Scene
from roguest.inputs import ARROW_DOWN, ARROW_UP, ESCAPE, InputHandler

HEAL_PRICE = 10
HEAL_AMOUNT = 10
COMBO = (ARROW_UP, ARROW_DOWN)


def _check_combo(handler: InputHandler) -> None:
    if handler.check_sequence(COMBO):
        print("СУПЕР-ПРИЕМ!")
        handler.clear_history()


def fight_action(player: Creature, enemy: Creature) -> bool:
    """Exchange blows until one side falls; ``True`` if the player survives.

    A victorious player takes the enemy's gold.
    """
    while not player.hp.is_min():
        player_attack = player.calculate_attack()
        enemy.hp.sub(player_attack)
        print(
            f"Вы ударили {colored(enemy.name, 'red')} "
            f"и нанесли {colored(str(player_attack), 'green')} урона"
        )

        if enemy.hp.is_min():
            break

        enemy_attack = enemy.calculate_attack()
        player.hp.sub(enemy_attack)

        print(f"Его ХП: {colored(str(enemy.hp.value), 'red')}")
        print(
            f"Вас ударил {colored(enemy.name, 'red')} "
            f"и нанес {colored(str(enemy_attack), 'red')} урона"
        )
        print(f"Ваши ХП: {colored(str(player.hp.value), 'green')}")

    if player.hp.is_min():
        print(f"Вас убил {colored(enemy.name, 'red')}")
        return False

    print(colored("Вы его убили", "yellow"))

    gold = enemy.gold.value
    player.gold.add(gold)
    print(
        f"Вы получили {colored(str(gold), 'green')} монет. "
        f"У вас {colored(str(player.gold.value), 'green')} монет"
    )
    return True


def fight_on_scene(handler: InputHandler, player: Creature) -> bool:
    """Meet a goblin and let the player fight or pass by.

    Returns ``False`` when the game should end: the player died or pressed
    Escape.
    """
    enemy = goblin()

    print(
        f"Вы увидели противника: {colored(enemy.name, 'red')} "
        f"уровень {colored(str(enemy.level.value), 'red')}"
    )
    print(colored("Хотите с ним сразиться?", "yellow"))
    print(
        f"Его ХП: {colored(str(enemy.hp.value), 'red')} | "
        f"Ваши ХП: {colored(str(player.hp.value), 'green')}"
    )
    print(f"{colored('[A]', 'blue')} aтака | {colored('[любая клавиша]', 'blue')} пройти мимо")

    key = handler.capture()
    if key is None:
        return True

    if key in ("a", "A"):
        survived = fight_action(player, enemy)
        handler.clear_history()
        if not survived:
            return False
    else:
        print(colored("Вы прошли мимо", "yellow"))

    if key == ESCAPE:
        return False

    _check_combo(handler)
    return True


def safe_action(player: Creature) -> None:
    """Buy health for gold until healed or out of money."""
    while not player.hp.is_max() and player.gold.value >= HEAL_PRICE:
        player.gold.sub(HEAL_PRICE)
        player.hp.add(HEAL_AMOUNT)
        print(
            f"Вы восстановили {HEAL_AMOUNT} баллов здоровья. Ваши ХП: "
            f"{colored(str(player.hp.value), 'green')} из "
            f"{colored(str(player.hp.maximum), 'green')}"
        )

    if player.hp.is_max():
        print("Вы полностью вылечелись")


def safe_on_scene(handler: InputHandler, player: Creature) -> bool:
    """Offer healing to a wounded player who can pay for it.

    Returns ``False`` when the player pressed Escape.
    """
    if player.hp.is_max() or player.hp.is_min() or player.gold.value < HEAL_PRICE:
        return True

    print("У вас мало здоровья")
    print(colored("Хотите подлечиться?", "yellow"))
    print(colored("Восстановить 10 баллов за 10 монет.", "blue"))
    print(
        f"Ваши ХП: {colored(str(player.hp.value), 'red')}. "
        f"Ваши монеты: {colored(str(player.gold.value), 'green')}"
    )
    print(f"{colored('[S]', 'blue')} лечиться | {colored('[любая клавиша]', 'blue')} пропустить")

    key = handler.capture()
    if key is None:
        return True

    if key in ("s", "S"):
        safe_action(player)
        handler.clear_history()
    else:
        print(colored("Вы пропустили лечение", "yellow"))

    if key == ESCAPE:
        return False

    _check_combo(handler)
    return True


class BattleScene(Scene):
    """Endless encounters with goblins, with a chance to heal between them."""

    def __init__(self) -> None:
        super().__init__("BattleScene", active=False)

    def update(self, game: Game, delta_time: float) -> None:
        hero = game.player
        if hero is None:
            game.stop()
            return
        if not fight_on_scene(game.input, hero):
            game.stop()
            return
        if not safe_on_scene(game.input, hero):
            game.stop()