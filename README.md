# mazegame

A small top-down maze game built on a lightweight actor/component engine
drawn with pygame. You move a player through a walled maze while a ghost
follows you using A* path finding over a grid of nodes.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
mazegame
```

This opens a 700 x 800 window and runs the default maze at up to 60 frames
per second, with a fixed physics step of 0.01 seconds. Move with `W`, `A`,
`S` and `D`; the player stops as soon as no movement key is held. Close the
window to quit.

Sprites are loaded from `Images/player.png` and `Images/enemy.png` relative
to the working directory. When those files are missing, plain coloured
squares are drawn instead.

## What is inside

- `mazegame.vectors`: immutable `Vector2`, `Vector3` and `Vector4` with
  arithmetic, `magnitude`, `normalized` (the zero vector stays zero), `dot`,
  `Vector2.find_angle`, and `cross` for the 3 and 4 component types.
- `mazegame.matrices`: immutable row-major `Matrix3` and `Matrix4` with
  addition, subtraction, matrix and matrix-vector products, and the builders
  `create_rotation`, `create_translation`, `create_scale` (and
  `create_rotation_x`/`_y`/`_z` on `Matrix4`).
- `mazegame.transform`: `Transform2D`, a parented 2D transform with
  `local_position`, `world_position`, `forward`, `scale`, `rotate`,
  `set_rotation`, `scale_by`, `look_at` and child management.
- `mazegame.component` and `mazegame.actor`: `Actor` objects holding
  `Component` instances that receive `start`, `update`, `fixed_update`,
  `draw`, `end`, `on_collision` and `on_destroy` calls.
  `Actor.add_component` takes an instance or a component class.
- `mazegame.colliders`: `CircleCollider` and `AABBCollider`, which record a
  `collision_normal` when checked.
- `mazegame.scene`: `Scene`, which updates and draws actors and UI elements,
  reports collisions in its fixed step and destroys actors marked with
  `destroy` at the start of the next update.
- `mazegame.nodegraph`: `Node`, `Edge`, `find_path` (A* with a Manhattan
  heuristic; returns the path with both ends, or an empty list),
  `manhattan_distance`, `diagonal_distance`, `sort_by_g_score`,
  `connected_nodes`, `reset_graph_score`, `draw_node` and `draw_graph`.
- `mazegame.movement`: `KeyState` (held and just-pressed keys),
  `MoveComponent` (velocity, speed limit, wrap-around at the screen edges)
  and `InputComponent` (WASD move axis).
- `mazegame.steering`: `SeekComponent`, `WanderComponent` (takes an optional
  `random.Random`) and `PlayerMoveComponent`.
- `mazegame.agent`: `Agent`, an actor whose velocity is driven by the summed,
  clamped forces of its steering components.
- `mazegame.state_machine`: `State` and `StateMachineComponent`, which
  switches an agent between idle, wander and seek depending on how far its
  seek target is.
- `mazegame.sprite`: `SpriteComponent`, an image drawn scaled and rotated
  with its owner.
- `mazegame.pathfind`: `PathfindComponent`, which steers its agent along the
  path to a target through a maze.
- `mazegame.actors`: `Wall`, `Player`, `Ghost` and `snap_to_tile`.
- `mazegame.maze`: `Maze`, a scene built from a tile layout, with `TileKey`,
  `Tile` and `parse_layout` for rows of symbols (`w` wall, `_` open,
  `s` mud, `p` player, `g` ghost).
- `mazegame.main_scene`: `MainScene`, an open scene with a player and an
  agent that wanders and seeks it.
- `mazegame.engine`: `Engine`, which holds the scenes and runs the loop, and
  `main`, the function behind the `mazegame` command.

## Using the engine directly

```python
from mazegame.engine import Engine
from mazegame.maze import Maze

engine = Engine()
engine.add_scene(Maze(keys=engine.keys))
engine.current_scene.start()
for _ in range(10):
    engine.step(1 / 60)
```

`Engine.step(delta_time)` runs one frame (update, at most one fixed step,
draw) and needs no window, which suits scripted runs and tests.
`Engine.run()` opens the window and starts the `Maze` scene if no scene was
added.

A custom maze can be built from text rows:

```python
from mazegame.maze import Maze

maze = Maze(["wwwww", "wp_gw", "wwwww"])
```

## What it does not do

- There is no scoring, lives or game-over: a ghost reaching the player has no
  effect.
- Mud tiles are accepted in layouts but cost the same as open floor.
- `MainScene` is available as a class, but the `mazegame` command always
  runs the maze; it takes no options for choosing a scene.
- There is no sound.