"""Scenes, the game that holds them and the loop that drives them."""

from __future__ import annotations

import time

from roguest.creatures import Creature
from roguest.inputs import InputHandler


class Scene:
    """A part of the game that is updated and drawn while it is active.

    Subclasses override the hooks they need. ``delta_time`` is the length
    of the previous frame in seconds.
    """

    def __init__(self, name: str, active: bool = False) -> None:
        self.name = name.strip()
        self.active = active
        self.game: Game | None = None
        self.frames_drawn = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, active={self.active})"

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def mounted(self, game: Game) -> None:
        """Called when the scene is added to ``game``; remembers the game."""
        self.game = game

    def unmounted(self, game: Game) -> None:
        """Called after the scene has been removed from ``game``; forgets it."""
        if self.game is game:
            self.game = None

    def update(self, game: Game, delta_time: float) -> None:
        """Run the scene's logic for one frame."""

    def draw(self, game: Game, delta_time: float) -> None:
        """Render the scene for one frame; counts the frames drawn."""
        self.frames_drawn += 1


class Game:
    """The player, the scenes and the state of the main loop."""

    def __init__(self, target_fps: float = 60.0, max_key_history: int = 10) -> None:
        self.player: Creature | None = None
        self.scenes: list[Scene] = []
        self.input = InputHandler(max_key_history)
        self.target_fps = target_fps
        self.last_frame = time.monotonic()
        self.running = True

    def set_player(self, player: Creature) -> None:
        self.player = player

    def add_scene(self, scene: Scene) -> None:
        """Mount ``scene`` and append it to the scene list."""
        scene.mounted(self)
        self.scenes.append(scene)

    def find_scene(self, name: str) -> Scene | None:
        return next((scene for scene in self.scenes if scene.name == name), None)

    def activate_scene(self, name: str) -> None:
        scene = self.find_scene(name)
        if scene is not None:
            scene.activate()

    def deactivate_scene(self, name: str) -> None:
        scene = self.find_scene(name)
        if scene is not None:
            scene.deactivate()

    def remove_scene(self, name: str) -> None:
        """Remove the first scene called ``name`` and unmount it."""
        scene = self.find_scene(name)
        if scene is not None:
            self.scenes.remove(scene)
            scene.unmounted(self)

    def run(self) -> None:
        gameloop(self)

    def stop(self) -> None:
        self.running = False


def gameloop(game: Game) -> None:
    """Update and draw the active scenes frame by frame at the target rate.

    The loop ends when the game is stopped or no scene is active any more.
    """
    if game.target_fps <= 0:
        raise ValueError(f"target fps must be positive, got {game.target_fps}")
    target_duration = 1.0 / game.target_fps

    game.last_frame = time.monotonic()

    while game.running:
        start = time.monotonic()
        delta_time = start - game.last_frame
        game.last_frame = start

        for scene in list(game.scenes):
            if scene.active:
                scene.update(game, delta_time)
            if not game.running:
                break
            if scene.active:
                scene.draw(game, delta_time)
            if not game.running:
                break

        elapsed = time.monotonic() - start
        if elapsed < target_duration:
            time.sleep(target_duration - elapsed)

        if not any(scene.active for scene in game.scenes):
            break