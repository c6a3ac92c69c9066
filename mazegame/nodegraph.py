"""Graph nodes and A* path finding over them."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

import pygame

from .vectors import Vector2

WHITE = 0xFFFFFFFF
START_COLOR = 0x00FF00FF
VISITED_COLOR = 0xFF0000FF
PATH_COLOR = 0xFFFF00FF

_LABEL_SIZE = 10


@dataclass(frozen=True)
class Edge:
    """A directed connection to another node with a traversal cost."""

    target: Node
    cost: float


@dataclass(eq=False)
class Node:
    """A point in the graph with its search scores; compared by identity."""

    position: Vector2 = field(default_factory=Vector2)
    g_score: float = 0.0
    h_score: float = 0.0
    f_score: float = 0.0
    walkable: bool = True
    color: int = WHITE
    previous: Node | None = field(default=None, repr=False)
    edges: list[Edge] = field(default_factory=list, repr=False)


def manhattan_distance(start: Node, end: Node) -> float:
    """Sum of the absolute differences of the node positions."""
    return abs(start.position.x - end.position.x) + abs(start.position.y - end.position.y)


def diagonal_distance(node: Node, goal: Node, cardinal_cost: float, diagonal_cost: float) -> float:
    """Distance when moving in eight directions with the given step costs."""
    dx = abs(node.position.x - goal.position.x)
    dy = abs(node.position.y - goal.position.y)
    return cardinal_cost * (dx + dy) + (diagonal_cost - 2 * cardinal_cost) * min(dx, dy)


def sort_by_g_score(nodes: list[Node]) -> None:
    """Sort the nodes in place by g score, keeping the order of equal scores."""
    nodes.sort(key=lambda node: node.g_score)


def connected_nodes(start: Node) -> list[Node]:
    """Every node reachable from start, in depth-first order."""
    order = [start]
    visited = {start}
    stack = [iter(start.edges)]
    while stack:
        for edge in stack[-1]:
            target = edge.target
            if target not in visited:
                visited.add(target)
                order.append(target)
                stack.append(iter(target.edges))
                break
        else:
            stack.pop()
    return order


def reset_graph_score(start: Node) -> None:
    """Clear scores, colours and links of every node reachable from start."""
    for node in connected_nodes(start):
        node.g_score = 0.0
        node.h_score = 0.0
        node.f_score = 0.0
        node.color = WHITE
        node.previous = None


def _reconstruct_path(start: Node, goal: Node) -> list[Node]:
    path = []
    current: Node | None = goal
    while current is not None:
        current.color = PATH_COLOR
        path.append(current)
        if current is start:
            break
        current = current.previous
    path.reverse()
    return path


def find_path(start: Node, goal: Node) -> list[Node]:
    """Path from start to goal, both included; empty if goal cannot be reached."""
    reset_graph_score(start)
    start.color = START_COLOR
    open_set = [start]
    closed: set[Node] = set()

    while open_set:
        open_set.sort(key=lambda node: node.f_score)
        current = open_set.pop(0)

        if current not in closed:
            for edge in current.edges:
                target = edge.target
                if not target.walkable:
                    continue
                target.color = VISITED_COLOR
                tentative = current.g_score + edge.cost
                if target is not start and (target.g_score == 0 or target.g_score > tentative):
                    target.g_score = tentative
                    target.h_score = manhattan_distance(target, goal)
                    target.f_score = target.g_score + target.h_score
                    target.previous = current
                if target not in open_set and target not in closed:
                    open_set.append(target)
            closed.add(current)

        if current is goal:
            return _reconstruct_path(start, goal)

    return []


def _to_color(value: int) -> pygame.Color:
    return pygame.Color((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


@lru_cache(maxsize=None)
def _label_font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, _LABEL_SIZE)


def draw_node(surface: pygame.Surface, node: Node, size: float = 14) -> None:
    """Draw a node as a filled circle labelled with its g score."""
    center = (int(node.position.x), int(node.position.y))
    color = _to_color(node.color)
    pygame.draw.circle(surface, color, center, size + 1)
    pygame.draw.circle(surface, color, center, size)
    label = _label_font().render(f"{node.g_score:.0f}", True, (0, 0, 0))
    surface.blit(label, center)


def draw_graph(surface: pygame.Surface, start: Node) -> None:
    """Draw every walkable node reachable from start."""
    for node in connected_nodes(start):
        if node.walkable:
            draw_node(surface, node, 8)