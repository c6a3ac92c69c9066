"""Keyboard state, keyboard input and velocity-driven movement."""

from __future__ import annotations

import math

import pygame

from .component import Component
from .vectors import Vector2

SCREEN_WIDTH = 700
SCREEN_HEIGHT = 800


class KeyState:
    """Which keys are held and which went down during the current frame."""

    def __init__(self):
        self._down: set[int] = set()
        self._pressed: set[int] = set()

    def press(self, key: int) -> None:
        """Record that a key went down."""
        if key not in self._down:
            self._pressed.add(key)
        self._down.add(key)

    def release(self, key: int) -> None:
        """Record that a key went up."""
        self._down.discard(key)
        self._pressed.discard(key)

    def is_down(self, key: int) -> bool:
        """Whether the key is currently held."""
        return key in self._down

    def is_pressed(self, key: int) -> bool:
        """Whether the key went down during the current frame."""
        return key in self._pressed

    def next_frame(self) -> None:
        """Forget the keys pressed during the frame that just ended."""
        self._pressed.clear()


class MoveComponent(Component):
    """Moves its owner by its velocity and wraps it around the screen edges."""

    def __init__(self, max_speed: float = math.inf):
        super().__init__()
        self.max_speed = max_speed
        self.update_facing = False
        self._velocity = Vector2()
        self.last_velocity = Vector2()

    @property
    def velocity(self) -> Vector2:
        """Current speed and direction of the owner."""
        return self._velocity

    @velocity.setter
    def velocity(self, value: Vector2) -> None:
        self.last_velocity = self._velocity
        self._velocity = value

    def fixed_update(self, delta_time: float) -> None:
        transform = self.owner.transform
        new_position = transform.local_position + self.velocity * delta_time

        if self.update_facing and self.velocity.magnitude() > 0:
            transform.forward = self.velocity

        x, y = new_position.x, new_position.y
        if x > SCREEN_WIDTH:
            x = 0.0
        elif x < 0:
            x = float(SCREEN_WIDTH)
        if y > SCREEN_HEIGHT:
            y = 0.0
        elif y < 0:
            y = float(SCREEN_HEIGHT)

        if self.velocity.magnitude() > self.max_speed:
            self.velocity = self.velocity.normalized() * self.max_speed

        transform.local_position = Vector2(x, y)


class InputComponent(Component):
    """Reads movement directions from a keyboard state."""

    def __init__(self, keys: KeyState | None = None):
        super().__init__()
        self.keys = keys if keys is not None else KeyState()
        self.left_key = pygame.K_a
        self.right_key = pygame.K_d
        self.up_key = pygame.K_w
        self.down_key = pygame.K_s
        self.action1_key = pygame.K_SPACE
        self.action2_key = pygame.K_p
        self.submit_key = pygame.K_RETURN
        self.cancel_key = pygame.K_BACKSPACE

    def move_axis(self) -> Vector2:
        """Direction from the held movement keys, each axis in -1, 0 or 1."""
        x = float(self.keys.is_down(self.right_key)) - float(self.keys.is_down(self.left_key))
        y = float(self.keys.is_down(self.down_key)) - float(self.keys.is_down(self.up_key))
        return Vector2(x, y)