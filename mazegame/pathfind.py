"""A component that steers its agent along an A* path through a maze."""

from __future__ import annotations

import pygame

from .component import Component
from .nodegraph import Node, draw_node, find_path
from .vectors import Vector2


class PathfindComponent(Component):
    """Follows the shortest path through a maze toward a target actor."""

    def __init__(self, maze, color: int = 0xFFFFFFFF):
        super().__init__()
        self.maze = maze
        self.color = color
        self.target = None
        self.need_path = True
        self._path: list[Node] = []

    @property
    def path(self) -> tuple[Node, ...]:
        """The nodes still to visit, nearest first."""
        return tuple(self._path)

    def start(self) -> None:
        super().start()

    def update(self, delta_time: float) -> None:
        """Recompute the path when needed and steer toward its next node."""
        agent = self.owner
        if not self.enabled or self.target is None or agent is None:
            return
        move = agent.move_component
        if move is None:
            return

        owner_position = agent.transform.world_position
        destination = self.find_destination()
        owner_tile = self.maze.get_tile(owner_position)

        if self.need_path:
            self.update_path(destination)

        next_position = self._path[0].position if self._path else owner_position
        next_tile = self.maze.get_tile(next_position)

        if owner_tile.x == next_tile.x and owner_tile.y == next_tile.y:
            if self._path:
                self._path.pop(0)
            self.need_path = True

        direction = Vector2()
        if self._path:
            direction = (self._path[0].position - owner_position).normalized()

        desired_velocity = direction * agent.max_force
        move.velocity = desired_velocity - move.velocity

    def update_path(self, destination: Vector2 | None = None) -> None:
        """Find a new path from the owner to the destination, or to the target."""
        if destination is None:
            destination = self.find_destination()
        owner_node = self.maze.get_tile(self.owner.transform.world_position).node
        target_node = self.maze.get_tile(destination).node
        self._path = find_path(owner_node, target_node)
        self.need_path = False

    def find_destination(self) -> Vector2:
        """The position to find a path to: the target's world position."""
        return self.target.transform.world_position

    def render(self, surface: pygame.Surface) -> None:
        """Draw the remaining path nodes."""
        for node in self._path:
            draw_node(surface, node)

    def draw(self) -> None:
        if not pygame.display.get_init():
            return
        surface = pygame.display.get_surface()
        if surface is not None:
            self.render(surface)