"""Scene objects that own a transform, a collider and components."""

from __future__ import annotations

from .component import Component
from .transform import Transform2D
from .vectors import Vector2


class Actor:
    """An object in a scene, driven by its components."""

    def __init__(self, x: float = 0.0, y: float = 0.0, name: str = "Actor"):
        self.name = name
        self.transform = Transform2D(self)
        self.transform.local_position = Vector2(x, y)
        self.collider = None
        self.started = False
        self.active = True
        self.static = False
        self._components: list[Component] = []

    @property
    def components(self) -> tuple[Component, ...]:
        """The attached components in the order they were added."""
        return tuple(self._components)

    def get_component(self, component_type):
        """The first attached component of the given type, or None."""
        return next((c for c in self._components if isinstance(c, component_type)), None)

    def add_component(self, component):
        """Attach a component instance, or a new instance of a component class.

        Returns the attached component, or None if it already has an owner.
        """
        if isinstance(component, type):
            component = component()
        if component.owner is not None:
            return None
        component.assign_owner(self)
        self._components.append(component)
        self.on_add_component(component)
        return component

    def on_add_component(self, component) -> None:
        """Called after a component has been attached."""

    def remove_component(self, component) -> bool:
        """Detach the given component; False if it is not attached."""
        if component is None or component not in self._components:
            return False
        self._components.remove(component)
        return True

    def remove_component_of_type(self, component_type) -> bool:
        """Detach the first component of the given type; False if there is none."""
        return self.remove_component(self.get_component(component_type))

    def _enabled_components(self):
        return [c for c in self._components if c.enabled]

    def start(self) -> None:
        """Called during the first update after joining a scene."""
        self.started = True

    def update(self, delta_time: float) -> None:
        """Start and update every enabled component."""
        for component in self._enabled_components():
            if not component.started:
                component.start()
            component.update(delta_time)

    def fixed_update(self, fixed_delta_time: float) -> None:
        """Run the fixed step of every enabled component."""
        for component in self._enabled_components():
            component.fixed_update(fixed_delta_time)

    def draw(self) -> None:
        """Draw every enabled component."""
        for component in self._enabled_components():
            component.draw()

    def end(self) -> None:
        """Called when the actor leaves the scene."""
        self.started = False
        for component in list(self._components):
            component.end()

    def on_destroy(self) -> None:
        """Notify components and detach from the parent transform."""
        for component in list(self._components):
            component.on_destroy()
        parent = self.transform.parent
        if parent is not None:
            parent.remove_child(self.transform)

    def check_for_collision(self, other: Actor) -> bool:
        """Whether this actor's collider overlaps the other actor's."""
        if self.collider is None:
            return False
        return self.collider.check_collision(other)

    def on_collision(self, other: Actor) -> None:
        """Forward a collision to every enabled component."""
        for component in self._enabled_components():
            component.on_collision(other)