import pygame

from mazegame.actor import Actor
from mazegame.actors import TILE_SIZE, WALL_COLOR, Ghost, Player, Wall, snap_to_tile
from mazegame.colliders import AABBCollider
from mazegame.movement import InputComponent, KeyState
from mazegame.pathfind import PathfindComponent
from mazegame.steering import PlayerMoveComponent
from mazegame.vectors import Vector2


def test_wall_is_static_with_half_tile_collider():
    wall = Wall(50, 60)
    assert wall.static is True
    assert wall.name == "Wall"
    assert isinstance(wall.collider, AABBCollider)
    assert wall.collider.width == TILE_SIZE // 2
    assert wall.collider.height == TILE_SIZE // 2
    assert wall.transform.world_position == Vector2(50, 60)


def test_wall_render_fills_its_tile():
    surface = pygame.Surface((100, 100))
    Wall(50, 50).render(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == tuple(WALL_COLOR)[:3]
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)


def test_snap_to_tile_keeps_aligned_position():
    position = Vector2(37.5, 62.5)
    assert snap_to_tile(position) == position


def test_snap_to_tile_moves_to_nearest_aligned_position():
    assert snap_to_tile(Vector2(40, 60)) == Vector2(37.5, 62.5)


def test_snap_to_tile_is_idempotent():
    once = snap_to_tile(Vector2(123.4, 456.7))
    assert snap_to_tile(once) == once


def test_player_start_sets_up_components():
    player = Player(0, 0, "Player", 100, 50)
    player.start()
    assert player.move_component is not None
    assert player.move_component.max_speed == 100
    assert player.get_component(InputComponent) is not None
    assert any(isinstance(s, PlayerMoveComponent) for s in player.steering_components)
    assert player.transform.scale == Vector2(TILE_SIZE, TILE_SIZE)
    assert player.collider.width == TILE_SIZE


def test_player_stops_without_input():
    player = Player(0, 0, "Player", 100, 50)
    player.start()
    player.move_component.velocity = Vector2(5, 0)
    player.update(0.1)
    assert player.move_component.velocity == Vector2()


def test_player_keeps_velocity_while_key_held():
    keys = KeyState()
    keys.press(pygame.K_d)
    player = Player(0, 0, "Player", 100, 50, keys)
    player.start()
    player.move_component.velocity = Vector2(5, 0)
    player.update(0.1)
    assert player.move_component.velocity == Vector2(5, 0)


def test_player_bounces_off_wall():
    player = Player(0, 0, "Player", 100, 50)
    player.start()
    wall = Wall(15, 0)
    player.move_component.velocity = Vector2(5, 0)
    assert player.collider.check_collision(wall) is True
    assert player.collider.collision_normal == Vector2(1, 0)
    player.on_collision(wall)
    assert player.move_component.velocity == Vector2(0, 0)


def test_player_ignores_other_actors():
    player = Player(0, 0, "Player", 100, 50)
    player.start()
    player.move_component.velocity = Vector2(5, 0)
    player.on_collision(Actor(0, 0, "Other"))
    assert player.move_component.velocity == Vector2(5, 0)


def test_ghost_target_is_shared_with_pathfinding():
    ghost = Ghost(0, 0, 100, 50, 0xFF6666FF, None)
    target = Actor(10, 10, "Target")
    ghost.target = target
    assert ghost.target is target
    assert ghost.get_component(PathfindComponent).target is target
    assert ghost.get_component(PathfindComponent).color == 0xFF6666FF


def test_ghost_settings():
    ghost = Ghost(0, 0, 100, 50, 0xFF6666FF, None)
    ghost.start()
    assert ghost.name == "Ghost"
    assert ghost.max_force == 50
    assert ghost.move_component.max_speed == 100
    assert ghost.transform.scale == Vector2(TILE_SIZE, TILE_SIZE)


def test_ghost_snaps_and_stops_on_wall():
    ghost = Ghost(40, 60, 100, 50, 0xFF6666FF, None)
    ghost.start()
    ghost.move_component.velocity = Vector2(5, 5)
    ghost.on_collision(Wall(0, 0))
    assert ghost.transform.world_position == snap_to_tile(Vector2(40, 60))
    assert ghost.move_component.velocity == Vector2()


def test_ghost_ignores_other_actors():
    ghost = Ghost(40, 60, 100, 50, 0xFF6666FF, None)
    ghost.start()
    ghost.move_component.velocity = Vector2(5, 5)
    ghost.on_collision(Actor(0, 0, "Other"))
    assert ghost.transform.world_position == Vector2(40, 60)
    assert ghost.move_component.velocity == Vector2(5, 5)