"""Actors moved by the combined forces of their steering behaviours."""

from __future__ import annotations

from .actor import Actor
from .movement import MoveComponent
from .steering import SteeringComponent
from .vectors import Vector2


class Agent(Actor):
    """An actor whose velocity is driven by steering components."""

    def __init__(self, x: float, y: float, name: str, max_speed: float, max_force: float):
        super().__init__(x, y, name)
        self.max_force = max_force
        self._max_speed = max_speed
        self._force = Vector2()
        self._move_component: MoveComponent | None = None
        self._steering_components: list[SteeringComponent] = []

    @property
    def move_component(self) -> MoveComponent | None:
        """The movement component created when the agent starts."""
        return self._move_component

    @property
    def steering_components(self) -> tuple[SteeringComponent, ...]:
        """The steering behaviours attached to this agent."""
        return tuple(self._steering_components)

    @property
    def force(self) -> Vector2:
        """The force applied on the last fixed step."""
        return self._force

    def start(self) -> None:
        super().start()
        if self._move_component is None:
            self._move_component = self.add_component(MoveComponent(self._max_speed))
            self._move_component.update_facing = True

    def fixed_update(self, fixed_delta_time: float) -> None:
        super().fixed_update(fixed_delta_time)
        if self._move_component is None:
            return
        for steering in self._steering_components:
            self._force = self._force + steering.calculate_force()
        if self._force.magnitude() > self.max_force:
            self._force = self._force.normalized() * self.max_force
        self.apply_force(self._force)

    def on_add_component(self, component) -> None:
        if isinstance(component, SteeringComponent):
            self._steering_components.append(component)

    def apply_force(self, force: Vector2) -> None:
        """Add a force to the current velocity."""
        self._move_component.velocity = self._move_component.velocity + force