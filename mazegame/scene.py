"""A collection of actors and UI elements that are updated and drawn together."""

from __future__ import annotations

from .actor import Actor
from .matrices import Matrix3


def _remove_first(items: list, item) -> bool:
    if item is None or item not in items:
        return False
    items.remove(item)
    return True


class Scene:
    """Holds actors, drives their lifecycle and resolves collisions between them."""

    def __init__(self):
        self.world = Matrix3()
        self.started = False
        self._actors: list[Actor] = []
        self._ui_elements: list[Actor] = []
        self._to_destroy: list[Actor] = []

    @property
    def actors(self) -> tuple[Actor, ...]:
        """The actors in the scene, in the order they were added."""
        return tuple(self._actors)

    @property
    def ui_elements(self) -> tuple[Actor, ...]:
        """The UI elements in the scene, in the order they were added."""
        return tuple(self._ui_elements)

    def add_ui_element(self, actor: Actor) -> None:
        """Add a UI element together with all of its children."""
        self._ui_elements.append(actor)
        for child in actor.transform.children:
            self.add_ui_element(child.owner)

    def remove_ui_element(self, actor: Actor) -> bool:
        """Remove a UI element; False if it is not in the scene."""
        return _remove_first(self._ui_elements, actor)

    def add_actor(self, actor: Actor) -> None:
        """Add an actor together with all of its children."""
        self._actors.append(actor)
        for child in actor.transform.children:
            self.add_actor(child.owner)

    def remove_actor(self, actor: Actor) -> bool:
        """Remove an actor without destroying it; False if it is not in the scene."""
        return _remove_first(self._actors, actor)

    def get_actor(self, index: int) -> Actor:
        """The actor at the given index."""
        return self._actors[index]

    def destroy(self, actor: Actor) -> None:
        """Mark an actor and its children for destruction at the next update."""
        if actor in self._to_destroy:
            return
        self._to_destroy.append(actor)
        for child in actor.transform.children:
            self.destroy(child.owner)

    def _destroy_pending(self) -> None:
        pending, self._to_destroy = self._to_destroy, []
        for actor in pending:
            if not self.remove_actor(actor):
                self.remove_ui_element(actor)
            parent = actor.transform.parent
            for child in actor.transform.children:
                child.parent = parent
            actor.end()
            actor.on_destroy()

    def start(self) -> None:
        """Mark the scene as started."""
        self.started = True

    def update(self, delta_time: float) -> None:
        """Destroy pending actors, then start and update every active actor."""
        self._destroy_pending()
        for actor in list(self._actors):
            if not actor.active:
                continue
            if not actor.started:
                actor.start()
            actor.update(delta_time)

    def update_ui(self, delta_time: float) -> None:
        """Start and update every active UI element."""
        for element in list(self._ui_elements):
            if not element.active:
                continue
            if not element.started:
                element.start()
            element.update(delta_time)

    def fixed_update(self, fixed_delta_time: float) -> None:
        """Run the fixed step of active actors, then report collisions."""
        actors = list(self._actors)
        for actor in actors:
            if actor.active:
                actor.fixed_update(fixed_delta_time)

        for actor in actors:
            for other in actors:
                if not actor.active or actor.static:
                    continue
                if (
                    actor.check_for_collision(other)
                    and other is not actor
                    and other.started
                    and other.active
                ):
                    actor.on_collision(other)

    def draw(self) -> None:
        """Draw every active actor."""
        for actor in list(self._actors):
            if actor.active:
                actor.draw()

    def draw_ui(self) -> None:
        """Draw every active UI element."""
        for element in list(self._ui_elements):
            if element.active:
                element.draw()

    def end(self) -> None:
        """End every started actor and mark the scene as stopped."""
        for actor in list(self._actors):
            if actor.started:
                actor.end()
        self.started = False