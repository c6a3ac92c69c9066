"""The game loop: owns the scenes and drives their update, fixed step and draw."""

from __future__ import annotations

import argparse

import pygame

from .actor import Actor
from .maze import Maze
from .movement import SCREEN_HEIGHT, SCREEN_WIDTH, KeyState
from .scene import Scene

FIXED_TIME_STEP = 0.01
TARGET_FPS = 60
WINDOW_TITLE = "Maze"


class Engine:
    """Holds the scenes and runs the current one."""

    screen_width = SCREEN_WIDTH
    screen_height = SCREEN_HEIGHT
    fixed_time_step = FIXED_TIME_STEP

    def __init__(self):
        self.application_should_close = False
        self.keys = KeyState()
        self._scenes: list[Scene] = []
        self._current_index = 0
        self._accumulated_time = 0.0

    @property
    def scenes(self) -> tuple[Scene, ...]:
        """All scenes, in the order they were added."""
        return tuple(self._scenes)

    @property
    def current_scene(self) -> Scene:
        """The scene that is being run."""
        if not self._scenes:
            raise LookupError("the engine has no scenes")
        return self._scenes[self._current_index]

    @property
    def current_scene_index(self) -> int:
        """Index of the current scene."""
        return self._current_index

    def get_scene(self, index: int) -> Scene | None:
        """The scene at the index, or None when the index is out of range."""
        if 0 <= index < len(self._scenes):
            return self._scenes[index]
        return None

    def add_scene(self, scene: Scene) -> int:
        """Add a scene and return the index it was placed at."""
        if scene is None:
            raise ValueError("cannot add a missing scene")
        self._scenes.append(scene)
        return len(self._scenes) - 1

    def remove_scene(self, scene: Scene) -> bool:
        """Remove a scene; False if it is not held by the engine."""
        if scene is None or scene not in self._scenes:
            return False
        self._scenes.remove(scene)
        if self._current_index >= len(self._scenes):
            self._current_index = max(len(self._scenes) - 1, 0)
        return True

    def set_current_scene(self, index: int) -> None:
        """Switch to the scene at the index; an out-of-range index is ignored."""
        if not 0 <= index < len(self._scenes):
            return
        previous = self._scenes[self._current_index]
        if previous.started:
            previous.end()
        self._current_index = index
        scene = self._scenes[index]
        if not scene.started:
            scene.start()

    def destroy(self, actor: Actor) -> None:
        """Mark an actor of the current scene for destruction."""
        self.current_scene.destroy(actor)

    def close_application(self) -> None:
        """Ask the game loop to stop."""
        self.application_should_close = True

    def step(self, delta_time: float) -> None:
        """Run one frame: update, at most one fixed step, then draw."""
        scene = self.current_scene
        self._accumulated_time += delta_time
        scene.update(delta_time)
        scene.update_ui(delta_time)
        if self._accumulated_time >= self.fixed_time_step:
            scene.fixed_update(self.fixed_time_step)
            self._accumulated_time -= self.fixed_time_step
        self._draw(scene)

    def _draw(self, scene: Scene) -> None:
        surface = pygame.display.get_surface() if pygame.display.get_init() else None
        if surface is not None:
            surface.fill((0, 0, 0))
        scene.draw()
        scene.draw_ui()
        if surface is not None:
            pygame.display.flip()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close_application()
            elif event.type == pygame.KEYDOWN:
                self.keys.press(event.key)
            elif event.type == pygame.KEYUP:
                self.keys.release(event.key)

    def run(self) -> None:
        """Open the window and run the current scene until asked to close."""
        pygame.init()
        try:
            pygame.display.set_mode((self.screen_width, self.screen_height))
            pygame.display.set_caption(WINDOW_TITLE)
            if not self._scenes:
                self._current_index = self.add_scene(Maze(keys=self.keys))
            self.current_scene.start()

            clock = pygame.time.Clock()
            while not self.application_should_close:
                delta_time = clock.tick(TARGET_FPS) / 1000.0
                self._handle_events()
                if self.application_should_close:
                    break
                self.step(delta_time)
                self.keys.next_frame()

            self.current_scene.end()
        finally:
            pygame.quit()


def main(argv=None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="mazegame", description="Run the maze game.")
    parser.parse_args(argv)
    Engine().run()
    return 0