"""The maze actors: walls, the player and the ghosts that hunt it."""

from __future__ import annotations

import math
from pathlib import Path

import pygame

from .actor import Actor
from .agent import Agent
from .colliders import AABBCollider
from .movement import InputComponent, KeyState
from .pathfind import PathfindComponent
from .sprite import SpriteComponent
from .steering import PlayerMoveComponent
from .vectors import Vector2

TILE_SIZE = 25
WALL_COLOR = pygame.Color(0, 121, 241)
PLAYER_COLOR = 0xFFFF00FF
PLAYER_IMAGE = "Images/player.png"
ENEMY_IMAGE = "Images/enemy.png"


def _rgba(value: int) -> pygame.Color:
    return pygame.Color((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def _make_sprite(path: str, color: int) -> SpriteComponent:
    if Path(path).is_file():
        return SpriteComponent.from_file(path)
    image = pygame.Surface((TILE_SIZE, TILE_SIZE))
    image.fill(_rgba(color))
    return SpriteComponent(image)


def _display_surface() -> pygame.Surface | None:
    if not pygame.display.get_init():
        return None
    return pygame.display.get_surface()


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def snap_to_tile(position: Vector2) -> Vector2:
    """The tile-aligned position nearest to the given one."""
    half_tile = Vector2(TILE_SIZE / 2.0, TILE_SIZE / 2.0)
    shifted = position + half_tile
    snapped = Vector2(
        _round_half_away(shifted.x / TILE_SIZE) * TILE_SIZE,
        _round_half_away(shifted.y / TILE_SIZE) * TILE_SIZE,
    )
    return snapped - half_tile


class Wall(Actor):
    """A static block that the player bumps off."""

    def __init__(self, x: float, y: float):
        super().__init__(x, y, "Wall")
        self.static = True
        half = TILE_SIZE // 2
        self.collider = AABBCollider(self, half, half)
        self.transform.scale = Vector2(half, half)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the wall as a filled tile."""
        position = self.transform.world_position
        half = TILE_SIZE // 2
        rect = pygame.Rect(int(position.x - half), int(position.y - half), TILE_SIZE, TILE_SIZE)
        pygame.draw.rect(surface, WALL_COLOR, rect)

    def draw(self) -> None:
        super().draw()
        surface = _display_surface()
        if surface is not None:
            self.render(surface)


class Player(Agent):
    """The keyboard-controlled agent."""

    def __init__(
        self,
        x: float,
        y: float,
        name: str,
        max_speed: float,
        max_force: float,
        keys: KeyState | None = None,
    ):
        super().__init__(x, y, name, max_speed, max_force)
        self.keys = keys if keys is not None else KeyState()
        self.sprite: SpriteComponent | None = None
        self._input: InputComponent | None = None

    def start(self) -> None:
        super().start()
        if self._input is None:
            self.add_component(InputComponent(self.keys))
            self.add_component(PlayerMoveComponent())
            self.sprite = self.add_component(_make_sprite(PLAYER_IMAGE, PLAYER_COLOR))
            self._input = self.get_component(InputComponent)
        self.transform.scale = Vector2(TILE_SIZE, TILE_SIZE)
        self.collider = AABBCollider(self, TILE_SIZE, TILE_SIZE)

    def update(self, delta_time: float) -> None:
        """Update components and stop when no movement key is held."""
        super().update(delta_time)
        move = self.move_component
        if self._input is not None and move is not None and self._input.move_axis().magnitude() == 0:
            move.velocity = Vector2()

    def on_collision(self, other: Actor) -> None:
        """Push back out of walls along the collision normal."""
        if not isinstance(other, Wall) or self.collider is None or self.move_component is None:
            return
        speed = self.move_component.velocity.magnitude()
        self.apply_force(self.collider.collision_normal * -1 * speed)


class Ghost(Agent):
    """An agent that path-finds through the maze toward its target."""

    def __init__(self, x: float, y: float, max_speed: float, max_force: float, color: int, maze):
        super().__init__(x, y, "Ghost", max_speed, max_force)
        self.maze = maze
        self._target = None
        self.transform.scale = Vector2(TILE_SIZE, TILE_SIZE)
        self.pathfind = self.add_component(PathfindComponent(maze, color))
        self.add_component(_make_sprite(ENEMY_IMAGE, color))

    @property
    def target(self):
        """The actor the ghost is chasing."""
        return self._target

    @target.setter
    def target(self, actor) -> None:
        self._target = actor
        self.pathfind.target = actor

    def on_collision(self, other: Actor) -> None:
        """Snap to the nearest tile and stop when hitting a wall."""
        if not isinstance(other, Wall):
            return
        self.transform.world_position = snap_to_tile(self.transform.world_position)
        if self.move_component is not None:
            self.move_component.velocity = Vector2()