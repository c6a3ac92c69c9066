"""Base class for behaviour attached to an actor."""

from __future__ import annotations


class Component:
    """A piece of behaviour that an actor drives through its lifecycle hooks.

    The base hooks only record when they were last called; subclasses
    override them to add behaviour.
    """

    def __init__(self):
        self._owner = None
        self.started = False
        self.enabled = True
        self.last_delta_time = 0.0
        self.last_fixed_delta_time = 0.0
        self.frames_drawn = 0
        self.ended = False
        self.last_collision = None
        self.destroyed = False

    @property
    def owner(self):
        """The actor this component is attached to, or None."""
        return self._owner

    def assign_owner(self, owner) -> None:
        """Attach to an owner unless one is already assigned."""
        if self._owner is not None:
            return
        self._owner = owner

    def start(self) -> None:
        """Called before the first update."""
        self.started = True

    def update(self, delta_time: float) -> None:
        """Called every frame; records the frame's delta time."""
        self.last_delta_time = delta_time

    def fixed_update(self, fixed_delta_time: float) -> None:
        """Called on every fixed time step; records the step length."""
        self.last_fixed_delta_time = fixed_delta_time

    def draw(self) -> None:
        """Called every frame to draw visuals; counts the frames drawn."""
        self.frames_drawn += 1

    def end(self) -> None:
        """Called when the owner is removed from the scene."""
        self.ended = True

    def on_collision(self, other) -> None:
        """Called when the owner collides with another actor; remembers it."""
        self.last_collision = other

    def on_destroy(self) -> None:
        """Called when the owner is destroyed."""
        self.destroyed = True