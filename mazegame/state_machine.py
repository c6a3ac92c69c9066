"""A state machine that switches an agent between idling, wandering and seeking."""

from __future__ import annotations

from enum import Enum

from .component import Component
from .steering import SeekComponent, WanderComponent


class State(Enum):
    """Behaviour states of the machine."""

    IDLE = 0
    WANDER = 1
    SEEK = 2


class StateMachineComponent(Component):
    """Enables seeking when the seek target is in range and wandering otherwise."""

    def __init__(self, seek_range: float = 300.0):
        super().__init__()
        self.seek_range = seek_range
        self.current_state = State.IDLE
        self._seek: SeekComponent | None = None
        self._wander: WanderComponent | None = None
        self._seek_force = 0.0
        self._wander_force = 0.0

    def start(self) -> None:
        super().start()
        seek = self.owner.get_component(SeekComponent)
        wander = self.owner.get_component(WanderComponent)
        if seek is None or wander is None:
            raise LookupError("state machine needs a SeekComponent and a WanderComponent")
        self._seek, self._wander = seek, wander
        self._seek_force = seek.steering_force
        self._wander_force = wander.steering_force
        self.current_state = State.IDLE

    def _target_in_range(self) -> bool:
        target = self._seek.target
        if target is None:
            return False
        offset = target.transform.world_position - self.owner.transform.world_position
        return offset.magnitude() <= self.seek_range

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        if self._seek is None:
            return
        in_range = self._target_in_range()

        if self.current_state is State.IDLE:
            self._seek.steering_force = 0
            self._wander.steering_force = 0
            if in_range:
                self.current_state = State.SEEK
        elif self.current_state is State.WANDER:
            self._seek.steering_force = 0
            self._wander.steering_force = self._wander_force
            if in_range:
                self.current_state = State.SEEK
        elif self.current_state is State.SEEK:
            self._seek.steering_force = self._seek_force
            self._wander.steering_force = 0
            if not in_range:
                self.current_state = State.WANDER