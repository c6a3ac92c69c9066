"""Steering behaviours that produce forces for an agent."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod

from .component import Component
from .movement import InputComponent
from .vectors import Vector2


class SteeringComponent(Component, ABC):
    """A component that contributes a force to its owning agent."""

    def __init__(self, target=None, steering_force: float = 0.0):
        super().__init__()
        self.target = target
        self.steering_force = steering_force

    @property
    def agent(self):
        """The agent that owns this behaviour."""
        return self.owner

    @abstractmethod
    def calculate_force(self) -> Vector2:
        """The force this behaviour applies this step."""


class SeekComponent(SteeringComponent):
    """Steers the agent straight toward its target actor."""

    def calculate_force(self) -> Vector2:
        if self.target is None:
            return Vector2()
        direction = self.target.transform.world_position - self.owner.transform.world_position
        desired_velocity = direction.normalized() * self.steering_force
        return desired_velocity - self.agent.move_component.velocity


class WanderComponent(SteeringComponent):
    """Steers the agent toward random points on a circle ahead of it."""

    def __init__(
        self,
        circle_distance: float,
        circle_radius: float,
        wander_force: float,
        rng: random.Random | None = None,
    ):
        super().__init__(None, wander_force)
        self.circle_distance = circle_distance
        self.circle_radius = circle_radius
        self.rng = rng if rng is not None else random.Random()
        self.circle_position = Vector2()
        self.wander_point = Vector2()

    def calculate_force(self) -> Vector2:
        if self.steering_force == 0:
            return Vector2()
        owner_position = self.owner.transform.world_position
        velocity = self.agent.move_component.velocity
        heading = velocity.normalized()

        self.circle_position = owner_position + heading * self.circle_distance
        angle = float(self.rng.randrange(201))
        offset = Vector2(math.cos(angle), math.sin(angle)) * self.circle_radius
        self.wander_point = offset + self.circle_position

        desired_velocity = (self.wander_point - owner_position).normalized() * self.steering_force
        return desired_velocity - velocity


class PlayerMoveComponent(SteeringComponent):
    """Turns keyboard input into a force on the player agent."""

    def __init__(self):
        super().__init__()
        self._input: InputComponent | None = None

    def start(self) -> None:
        super().start()
        self._input = self.owner.get_component(InputComponent)

    def calculate_force(self) -> Vector2:
        if self._input is None:
            return Vector2()
        return self._input.move_axis() * self.agent.max_force