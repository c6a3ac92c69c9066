"""Draws an image centred on its owner, scaled and rotated with it."""

from __future__ import annotations

import math

import pygame

from .component import Component
from .vectors import Vector2


class SpriteComponent(Component):
    """An image drawn at the owner's transform."""

    def __init__(self, image: pygame.Surface):
        super().__init__()
        self.image = image

    @classmethod
    def from_file(cls, path) -> SpriteComponent:
        """Load the image from a file."""
        return cls(pygame.image.load(str(path)))

    @property
    def width(self) -> int:
        """Drawn width: the owner's x scale."""
        if self.owner is None:
            return self.image.get_width()
        return int(self.owner.transform.scale.x)

    @property
    def height(self) -> int:
        """Drawn height: the owner's y scale."""
        if self.owner is None:
            return self.image.get_height()
        return int(self.owner.transform.scale.y)

    def placement(self) -> tuple[Vector2, float]:
        """Top-left corner of the rotated image and its rotation in degrees."""
        transform = self.owner.transform
        matrix = transform.global_matrix
        up = Vector2(matrix.m01, matrix.m11)
        position = transform.world_position
        position = position - transform.forward * self.width / 2
        position = position - up.normalized() * self.height / 2
        rotation = math.degrees(math.atan2(matrix.m10, matrix.m00))
        return position, rotation

    def render(self, surface: pygame.Surface) -> None:
        """Draw the image on the surface."""
        _, rotation = self.placement()
        center = self.owner.transform.world_position
        scaled = pygame.transform.scale(self.image, (max(self.width, 0), max(self.height, 0)))
        rotated = pygame.transform.rotate(scaled, -rotation)
        rect = rotated.get_rect(center=(round(center.x), round(center.y)))
        surface.blit(rotated, rect)

    def draw(self) -> None:
        if not pygame.display.get_init():
            return
        surface = pygame.display.get_surface()
        if surface is not None:
            self.render(surface)