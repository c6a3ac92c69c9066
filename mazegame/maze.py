"""A scene built from a grid of tiles, with a path-finding graph over it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pygame

from .actors import TILE_SIZE, Ghost, Player, Wall
from .nodegraph import Edge, Node, draw_graph
from .scene import Scene
from .vectors import Vector2

WIDTH = 28
HEIGHT = 31
OPEN_COST = 1.0
WALL_COST = 100.0
GHOST_COLOR = 0xFF6666FF


class TileKey(Enum):
    """Kinds of tile in a maze layout."""

    OPEN = "_"
    WALL = "w"
    MUD = "s"
    PLAYER = "p"
    GHOST = "g"


@dataclass
class Tile:
    """A single space in a maze."""

    x: int
    y: int
    cost: float = OPEN_COST
    actor: object = None
    node: Node | None = None


DEFAULT_LAYOUT = (
    "wwwwwwwwwwwwwwwwwwwwwwwwwwww",
    "w_________s________________w",
    "w_________s________________w",
    "w_________s____________g___w",
    "w_________s________________w",
    "w_________w________________w",
    "w_________w____sss_________w",
    "w_________w____sss_________w",
    "w_________w____sss_________w",
    "w_________w________________w",
    "w_________w________________w",
    "w_wwwwwwwww________________w",
    "w__________________________w",
    "w__________________________w",
    "w__________________________w",
    "w_______w_w________________w",
    "w_______w_w________________w",
    "w_______w_w________________w",
    "w_______w_wwwwww___________w",
    "w_______w______w___________w",
    "w_______wwwwww_w___________w",
    "w___p________w_w____w__w___w",
    "w____________w_w____w__w___w",
    "w____________w_w____w__w___w",
    "w____________w_w____w__w___w",
    "w____________w_w____w__w___w",
    "w____________w_wwwwww__wwwww",
    "w__________________________w",
    "w__________________________w",
    "w__________________________w",
    "wwwwwwwwwwwwwwwwwwwwwwwwwwww",
)


def parse_layout(rows) -> list[list[TileKey]]:
    """Turn rows of tile symbols into a rectangular grid of tile keys."""
    grid = []
    for row in rows:
        try:
            grid.append([TileKey(symbol) for symbol in row])
        except ValueError as error:
            raise ValueError(f"unknown tile symbol in row {row!r}") from error
    _check_rectangular(grid)
    return grid


def _check_rectangular(grid) -> None:
    if not grid or not grid[0]:
        raise ValueError("a maze layout needs at least one tile")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows of a maze layout must have the same length")


def _connect(a: Tile, b: Tile) -> None:
    a.node.edges.append(Edge(b.node, b.cost))
    b.node.edges.append(Edge(a.node, a.cost))


class Maze(Scene):
    """A scene of walls, a player and ghosts laid out on a tile grid."""

    def __init__(self, layout=None, keys=None):
        super().__init__()
        if layout is None:
            layout = DEFAULT_LAYOUT
        if any(isinstance(row, str) for row in layout):
            grid = parse_layout(layout)
        else:
            grid = [list(row) for row in layout]
            _check_rectangular(grid)
        self._width = len(grid[0])
        self._height = len(grid)
        self._player = Player(0, 0, "Player", 2000, 50, keys)
        self._grid: list[list[Tile]] = []
        self._generate(grid)

    @property
    def size(self) -> Vector2:
        """Width and height of the maze in tiles."""
        return Vector2(self._width, self._height)

    @property
    def player(self) -> Player:
        """The player actor."""
        return self._player

    def get_tile(self, position: Vector2) -> Tile:
        """The tile under a position; the first tile when outside the maze."""
        x = int(position.x / TILE_SIZE)
        y = int(position.y / TILE_SIZE)
        if 0 <= x < self._width and 0 <= y < self._height:
            return self._grid[y][x]
        return self._grid[0][0]

    def tile_position(self, tile: Tile) -> Vector2:
        """World position of the centre of a tile."""
        return Vector2(tile.x * TILE_SIZE + TILE_SIZE / 2.0, tile.y * TILE_SIZE + TILE_SIZE / 2.0)

    def create_tile(self, x: int, y: int, key: TileKey) -> Tile:
        """Create a tile for the key, adding any actor it holds to the scene."""
        tile = Tile(x, y)
        tile.node = Node()
        position = self.tile_position(tile)
        if key is TileKey.WALL:
            tile.cost = WALL_COST
            tile.actor = Wall(position.x, position.y)
            tile.node.walkable = False
            self.add_actor(tile.actor)
        elif key is TileKey.PLAYER:
            self._player.transform.world_position = position
            tile.actor = self._player
            self.add_actor(tile.actor)
        elif key is TileKey.GHOST:
            ghost = Ghost(position.x, position.y, 100, 50, GHOST_COLOR, self)
            ghost.target = self._player
            tile.actor = ghost
            self.add_actor(tile.actor)
        return tile

    def _generate(self, grid: list[list[TileKey]]) -> None:
        for y, row in enumerate(grid):
            tiles: list[Tile] = []
            for x, key in enumerate(row):
                tile = self.create_tile(x, y, key)
                tile.node.position = self.tile_position(tile)
                if x > 0:
                    _connect(tile, tiles[x - 1])
                if y > 0:
                    _connect(tile, self._grid[y - 1][x])
                tiles.append(tile)
            self._grid.append(tiles)

    def draw(self) -> None:
        if pygame.display.get_init():
            surface = pygame.display.get_surface()
            if surface is not None:
                draw_graph(surface, self._grid[0][0].node)
        super().draw()