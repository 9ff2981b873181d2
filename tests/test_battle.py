import io

import pytest

from roguest.creatures import Creature, CreatureConfig, player
from roguest.engine import Game
from roguest.inputs import InputHandler
from roguest.scenes.battle import (
    BattleScene,
    fight_action,
    fight_on_scene,
    safe_action,
    safe_on_scene,
)
from roguest.values import RangeConfig


@pytest.fixture
def keys(monkeypatch):
    def feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return feed


def make_creature(name, hp, attack, gold=0, hp_max=100):
    return Creature(
        CreatureConfig(
            name=name,
            hp=RangeConfig(value=hp, maximum=hp_max),
            attack=RangeConfig(value=attack, minimum=attack, maximum=attack),
            gold=RangeConfig(value=gold),
        )
    )


def test_fight_action_player_wins_and_takes_gold(capsys):
    hero = make_creature("Hero", hp=100, attack=50, gold=5)
    enemy = make_creature("Enemy", hp=10, attack=50, gold=7)
    assert fight_action(hero, enemy) is True
    assert enemy.hp.is_min()
    assert hero.hp.value == 100
    assert hero.gold.value == 5 + 7
    assert "Вы его убили" in capsys.readouterr().out


def test_fight_action_player_dies(capsys):
    hero = make_creature("Hero", hp=1, attack=1, gold=3)
    enemy = make_creature("Brute", hp=100, attack=50, gold=9)
    assert fight_action(hero, enemy) is False
    assert hero.hp.is_min()
    assert hero.gold.value == 3
    assert "Вас убил" in capsys.readouterr().out


def test_safe_action_heals_until_full():
    hero = make_creature("Hero", hp=90, attack=1, gold=100)
    safe_action(hero)
    assert hero.hp.is_max()
    assert hero.hp.value + hero.gold.value == 190


def test_safe_action_stops_when_out_of_gold():
    hero = make_creature("Hero", hp=50, attack=1, gold=25)
    safe_action(hero)
    assert hero.gold.value < 10
    assert not hero.hp.is_max()
    assert hero.hp.value + hero.gold.value == 75


def test_safe_on_scene_skips_when_healthy(keys):
    keys("s")
    hero = make_creature("Hero", hp=100, attack=1, gold=50)
    assert safe_on_scene(InputHandler(), hero) is True
    assert hero.gold.value == 50


def test_safe_on_scene_skips_when_poor(keys):
    keys("s")
    hero = make_creature("Hero", hp=40, attack=1, gold=9)
    handler = InputHandler()
    assert safe_on_scene(handler, hero) is True
    assert hero.hp.value == 40
    assert handler.history == ()


def test_safe_on_scene_heals_on_s(keys):
    keys("s")
    hero = make_creature("Hero", hp=50, attack=1, gold=30)
    handler = InputHandler()
    assert safe_on_scene(handler, hero) is True
    assert hero.gold.value < 10
    assert hero.hp.value + hero.gold.value == 80
    assert handler.history == ()


def test_safe_on_scene_declined(keys, capsys):
    keys("x")
    hero = make_creature("Hero", hp=50, attack=1, gold=30)
    handler = InputHandler()
    assert safe_on_scene(handler, hero) is True
    assert hero.hp.value == 50
    assert handler.history == ("x",)
    assert "Вы пропустили лечение" in capsys.readouterr().out


def test_safe_on_scene_escape_ends(keys):
    keys("\x1b")
    hero = make_creature("Hero", hp=50, attack=1, gold=30)
    assert safe_on_scene(InputHandler(), hero) is False
    assert hero.gold.value == 30


def test_fight_on_scene_pass_by(keys, capsys):
    keys("x")
    hero = player("Hero")
    handler = InputHandler()
    assert fight_on_scene(handler, hero) is True
    assert hero.hp.value == 100
    assert handler.history == ("x",)
    assert "Вы прошли мимо" in capsys.readouterr().out


def test_fight_on_scene_escape_ends(keys):
    keys("\x1b")
    hero = player("Hero")
    assert fight_on_scene(InputHandler(), hero) is False
    assert hero.hp.value == 100


def test_fight_on_scene_without_input_continues(keys):
    keys("")
    hero = player("Hero")
    handler = InputHandler()
    assert fight_on_scene(handler, hero) is True
    assert handler.history == ()


def test_fight_on_scene_attack_wins_gold(keys):
    keys("a")
    hero = player("Hero")
    handler = InputHandler()
    assert fight_on_scene(handler, hero) is True
    assert hero.gold.value >= 1
    assert handler.history == ()


def test_battle_scene_defaults():
    scene = BattleScene()
    assert scene.name == "BattleScene"
    assert scene.active is False


def test_battle_scene_update_without_player_stops():
    game = Game()
    BattleScene().update(game, 0.016)
    assert game.running is False


def test_battle_scene_update_escape_stops(keys):
    keys("\x1b")
    game = Game()
    game.set_player(player("Hero"))
    BattleScene().update(game, 0.016)
    assert game.running is False


def test_battle_scene_update_pass_keeps_running(keys):
    keys("x")
    game = Game()
    game.set_player(player("Hero"))
    BattleScene().update(game, 0.016)
    assert game.running is True