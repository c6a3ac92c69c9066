"""A small open scene with a keyboard player and an agent that wanders and seeks."""

from __future__ import annotations

from pathlib import Path

import pygame

from .agent import Agent
from .actors import Player
from .movement import KeyState
from .scene import Scene
from .sprite import SpriteComponent
from .state_machine import StateMachineComponent
from .steering import SeekComponent, WanderComponent
from .vectors import Vector2

PLAYER_IMAGE = "Images/player.png"
ENEMY_IMAGE = "Images/enemy.png"
ACTOR_SIZE = 50


def _sprite(path: str, color: tuple[int, int, int]) -> SpriteComponent:
    if Path(path).is_file():
        return SpriteComponent.from_file(path)
    image = pygame.Surface((ACTOR_SIZE, ACTOR_SIZE))
    image.fill(color)
    return SpriteComponent(image)


class MainScene(Scene):
    """A player and a single agent that seeks the player when it comes close."""

    def __init__(self, keys: KeyState | None = None):
        super().__init__()
        self.keys = keys if keys is not None else KeyState()
        self.player: Player | None = None
        self.agent: Agent | None = None

    def start(self) -> None:
        """Create the player and the agent and add them to the scene."""
        super().start()

        player = Player(200, 50, "Player", 100, 50, self.keys)
        player.transform.scale = Vector2(ACTOR_SIZE, ACTOR_SIZE)
        player.add_component(_sprite(PLAYER_IMAGE, (255, 255, 0)))

        agent = Agent(0, 0, "Agent", 200, 500)
        agent.transform.scale = Vector2(ACTOR_SIZE, ACTOR_SIZE)
        agent.add_component(_sprite(ENEMY_IMAGE, (255, 102, 102)))

        agent.add_component(WanderComponent(1000, 100, 100))

        seek = SeekComponent()
        seek.steering_force = 50
        seek.target = player
        agent.add_component(seek)
        agent.add_component(StateMachineComponent)

        self.player = player
        self.agent = agent
        self.add_actor(player)
        self.add_actor(agent)