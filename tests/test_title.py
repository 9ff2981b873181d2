import io

import pytest

from roguest.engine import Game
from roguest.scenes.title import TitleScene, create_player, print_logo
from roguest.scenes.town import TownScene


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_title_starts_active():
    scene = TitleScene()
    assert scene.name == "TitleScene"
    assert scene.active is True


def test_print_logo_shows_name_version_and_bell(capsys):
    print_logo()
    out = capsys.readouterr().out
    assert "roguest version 0.1.0" in out
    assert "T H E   R O G U E L I K E   R U S T   G A M E" in out
    assert "\x07" in out


def test_create_player_sets_trimmed_name(monkeypatch, capsys):
    game = Game()
    _feed(monkeypatch, "  Hero  \n\n")
    create_player(game)
    assert game.player.name == "Hero"
    assert game.player.level.value == 1
    out = capsys.readouterr().out
    assert "Привет" in out
    assert "Добро пожаловать в игру" in out


def test_create_player_retries_on_blank_name(monkeypatch, capsys):
    game = Game()
    _feed(monkeypatch, "\n   \nHero\n\n")
    create_player(game)
    assert game.player.name == "Hero"
    assert capsys.readouterr().out.count("Введите свое имя:") == 3


def test_create_player_without_input_raises(monkeypatch):
    _feed(monkeypatch, "")
    with pytest.raises(EOFError):
        create_player(Game())


def test_mounting_hands_over_to_town(monkeypatch):
    game = Game()
    town = TownScene()
    game.add_scene(town)
    _feed(monkeypatch, "Hero\n\n")
    title = TitleScene()
    game.add_scene(title)
    assert title.active is False
    assert town.active is True
    assert game.player.name == "Hero"
    assert game.scenes == [town, title]


def test_update_without_player_stops():
    game = Game()
    TitleScene().update(game, 0.1)
    assert game.running is False


def test_update_with_player_keeps_running(monkeypatch):
    game = Game()
    _feed(monkeypatch, "Hero\n\n")
    create_player(game)
    TitleScene().update(game, 0.1)
    assert game.running is True