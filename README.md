# roguest

A small roguelike played in the terminal. You enter your name, arrive in a
town and can wander into a noisy tavern and back again, all through menus.
The game text is in Russian.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
roguest
```

The game prints its logo, asks for your name and waits for Enter. Then you
are in the town. Each turn the town prints the current frame rate and a
menu: look around, go to the tavern, head for the forest, view your
inventory, or leave. In the tavern you can look around or return to the
town. Choosing "Выйти" in the town ends the game.

In a real terminal the menus are driven by the arrow keys and Enter. When
input is not a terminal, the choices are printed as a numbered list and a
number is read from a line of input; an empty line picks the first choice.

`roguest` exits with status 0 after a normal end and 1 when input runs out
or the game is interrupted with Ctrl-C.

## What the game does not do

- Heading for the forest only prints a line; there are no monsters there.
- Viewing the inventory is not implemented; it behaves like standing still.
- The battle scene (`roguest.scenes.battle.BattleScene`) exists but is not
  part of the game the `roguest` command starts.
- There is no saving or loading of a game.

## Using it as a library

- `roguest.values.RangeValue` is a number kept between a minimum and a
  maximum, built from a `RangeConfig`, with saturating `add` and `sub`,
  `clamp`, `reset`, `set_max`, `set_min`, `is_max` and `is_min`.
- `roguest.dice.random_between(low, high)` returns a random number with
  both ends included.
- `roguest.creatures` provides `Creature`, `CreatureConfig` and the ready
  made `player(name)` and `goblin()`. `Creature.calculate_attack()` rolls
  damage from the attack range and scales it by level.
- `roguest.engine` provides `Game`, `Scene` and `gameloop`. A scene is added
  to a game with `Game.add_scene`, found by name with `Game.find_scene`,
  switched on and off with `Game.activate_scene` and
  `Game.deactivate_scene`, removed with `Game.remove_scene`, and run frame
  by frame by `Game.run` until `Game.stop` is called or no scene is active
  any more.
- `roguest.inputs` provides `InputHandler`, which keeps a short history of
  key presses and checks it for combos with `check_sequence`, along with
  `read_key`, `prompt_text`, `press_key` and `select`.
- `roguest.prints` provides `message`, `info`, `error`, `fps`, `scroll`,
  `format_scroll` and `wait_any_key`.
- `roguest.scenes.battle` holds the fighting and healing rules:
  `fight_action(player, enemy)`, `safe_action(player)`, `fight_on_scene`
  and `safe_on_scene`.
- `roguest.scenes.title`, `roguest.scenes.town` and `roguest.scenes.tavern`
  hold `TitleScene`, `TownScene` and `TavernScene`.