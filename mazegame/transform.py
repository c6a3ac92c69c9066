"""Hierarchical 2D transforms built from translation, rotation and scale."""

from __future__ import annotations

import math

from .matrices import Matrix3
from .vectors import Vector2


class Transform2D:
    """Position, rotation and scale of an actor, optionally relative to a parent."""

    def __init__(self, owner=None):
        self.owner = owner
        self._translation = Matrix3()
        self._rotation = Matrix3()
        self._scale = Matrix3()
        self._local = Matrix3()
        self._dirty = False
        self._parent: Transform2D | None = None
        self._children: list[Transform2D] = []

    def _local_matrix(self) -> Matrix3:
        if self._dirty:
            self._local = self._translation * self._rotation * self._scale
            self._dirty = False
        return self._local

    @property
    def local_matrix(self) -> Matrix3:
        """The matrix in local space."""
        return self._local_matrix()

    @property
    def global_matrix(self) -> Matrix3:
        """The local matrix combined with the parent's global matrix."""
        local = self._local_matrix()
        if self._parent is None:
            return local
        return self._parent.global_matrix * local

    @property
    def forward(self) -> Vector2:
        """Normalised direction of the transform's x axis."""
        g = self.global_matrix
        return Vector2(g.m00, g.m10).normalized()

    @forward.setter
    def forward(self, value: Vector2) -> None:
        self.look_at(self.world_position + value.normalized())

    @property
    def world_position(self) -> Vector2:
        """Position in world coordinates."""
        g = self.global_matrix
        return Vector2(g.m02, g.m12)

    @world_position.setter
    def world_position(self, value: Vector2) -> None:
        if self._parent is not None:
            g = self.global_matrix
            parent_position = self._parent.world_position
            x_offset = (value.x - parent_position.x) / Vector2(g.m00, g.m10).magnitude()
            y_offset = (value.y - parent_position.y) / Vector2(g.m10, g.m11).magnitude()
            self.local_position = Vector2(x_offset, y_offset)
        else:
            self.local_position = value

    @property
    def local_position(self) -> Vector2:
        """Position relative to the parent."""
        local = self._local_matrix()
        return Vector2(local.m02, local.m12)

    @local_position.setter
    def local_position(self, value: Vector2) -> None:
        self._translation = Matrix3.create_translation(value)
        self._dirty = True

    @property
    def parent(self) -> Transform2D | None:
        """The parent transform, if any."""
        return self._parent

    @parent.setter
    def parent(self, parent: Transform2D | None) -> None:
        self._parent = parent
        self._dirty = True

    @property
    def children(self) -> tuple[Transform2D, ...]:
        """The transforms attached to this one."""
        return tuple(self._children)

    def add_child(self, child: Transform2D) -> None:
        """Attach a child so its matrices are concatenated with this one."""
        self._children.append(child)
        child._parent = self
        child._dirty = True

    def remove_child(self, child: Transform2D | None) -> bool:
        """Detach the given child; False if it is not attached."""
        if child is None or child not in self._children:
            return False
        self._children.remove(child)
        child._parent = None
        child._dirty = True
        return True

    def remove_child_at(self, index: int) -> bool:
        """Detach the child at the index; False if the index is out of range."""
        if not 0 <= index < len(self._children):
            return False
        return self.remove_child(self._children[index])

    @property
    def scale(self) -> Vector2:
        """Width and height of the transform."""
        s = self._scale
        return Vector2(Vector2(s.m00, s.m10).magnitude(), Vector2(s.m01, s.m11).magnitude())

    @scale.setter
    def scale(self, value: Vector2) -> None:
        self._scale = Matrix3.create_scale(value)
        self._dirty = True

    def scale_by(self, scale: Vector2) -> None:
        """Multiply the current scale by the given amounts."""
        self._scale = self._scale * Matrix3.create_scale(scale)
        self._dirty = True

    def set_rotation(self, radians: float) -> None:
        """Set the rotation angle."""
        self._rotation = Matrix3.create_rotation(radians)
        self._dirty = True

    def rotate(self, radians: float) -> None:
        """Add to the rotation angle."""
        self._rotation = self._rotation * Matrix3.create_rotation(radians)
        self._dirty = True

    def look_at(self, position: Vector2) -> None:
        """Rotate so the forward axis points at the given position."""
        direction = (position - self.world_position).normalized()
        forward = self.forward
        dot = Vector2.dot(direction, forward)
        if abs(dot) > 1:
            dot = 1.0
        angle = math.acos(dot)
        perp = Vector2(direction.y, -direction.x)
        perp_dot = Vector2.dot(perp, forward)
        if perp_dot != 0:
            angle *= -perp_dot / abs(perp_dot)
        self.rotate(angle)