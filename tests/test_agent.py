import pytest

from mazegame.actor import Actor
from mazegame.agent import Agent
from mazegame.component import Component
from mazegame.movement import MoveComponent
from mazegame.steering import SeekComponent, WanderComponent
from mazegame.vectors import Vector2


def test_move_component_created_on_start():
    agent = Agent(0, 0, "Agent", 120, 30)
    assert agent.move_component is None
    agent.start()
    move = agent.move_component
    assert isinstance(move, MoveComponent)
    assert move.max_speed == 120
    assert move.update_facing is True
    assert agent.started


def test_start_twice_keeps_one_move_component():
    agent = Agent(0, 0, "Agent", 120, 30)
    agent.start()
    agent.start()
    assert sum(isinstance(c, MoveComponent) for c in agent.components) == 1


def test_only_steering_components_are_collected():
    agent = Agent(0, 0, "Agent", 100, 10)
    seek = agent.add_component(SeekComponent())
    wander = agent.add_component(WanderComponent(1, 1, 1))
    agent.add_component(Component())
    assert agent.steering_components == (seek, wander)


def test_apply_force_adds_to_velocity():
    agent = Agent(0, 0, "Agent", 100, 10)
    agent.start()
    agent.move_component.velocity = Vector2(1, 1)
    agent.apply_force(Vector2(2, 3))
    assert agent.move_component.velocity == Vector2(3, 4)


def test_fixed_update_clamps_force_to_max_force():
    agent = Agent(100, 100, "Agent", 100, 2)
    agent.start()
    agent.add_component(SeekComponent(Actor(300, 100, "Target"), 1000))
    agent.fixed_update(0.01)
    assert agent.force.magnitude() == pytest.approx(2)
    assert agent.force.x > 0
    assert agent.move_component.velocity.magnitude() == pytest.approx(2)


def test_fixed_update_keeps_small_force():
    agent = Agent(100, 100, "Agent", 100, 10)
    agent.start()
    agent.add_component(SeekComponent(Actor(100, 300, "Target"), 1))
    agent.fixed_update(0.01)
    assert agent.force.magnitude() == pytest.approx(1)
    assert agent.force.y > 0


def test_fixed_update_before_start_applies_nothing():
    agent = Agent(0, 0, "Agent", 100, 10)
    agent.add_component(SeekComponent(Actor(50, 0, "Target"), 5))
    agent.fixed_update(0.01)
    assert agent.force == Vector2()
    assert agent.move_component is None