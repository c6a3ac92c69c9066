"""Circle and axis-aligned box colliders."""

from __future__ import annotations

from enum import Enum

from .vectors import Vector2


class ColliderType(Enum):
    """Shape of a collider."""

    CIRCLE = 0
    BOX = 1


class Collider:
    """Base collider; collides with nothing by itself."""

    def __init__(self, owner, collider_type: ColliderType):
        self.owner = owner
        self.collider_type = collider_type
        self.collision_normal = Vector2()

    def check_collision(self, other) -> bool:
        """Whether this collider overlaps the collider of the other actor."""
        other_collider = getattr(other, "collider", None)
        if isinstance(other_collider, CircleCollider):
            return self.check_collision_circle(other_collider)
        if isinstance(other_collider, AABBCollider):
            return self.check_collision_aabb(other_collider)
        return False

    def check_collision_circle(self, collider: CircleCollider) -> bool:
        """Whether this collider overlaps a circle."""
        return False

    def check_collision_aabb(self, collider: AABBCollider) -> bool:
        """Whether this collider overlaps a box."""
        return False

    def draw(self) -> None:
        """Draw the collider shape."""


class CircleCollider(Collider):
    """A circle around the owner's world position."""

    def __init__(self, owner, collision_radius: float | None = None):
        super().__init__(owner, ColliderType.CIRCLE)
        if collision_radius is None:
            size = owner.transform.scale
            collision_radius = max(size.x, size.y)
        self.collision_radius = collision_radius

    def check_collision_circle(self, collider: CircleCollider) -> bool:
        if collider.owner is self.owner:
            return False
        combined_radii = collider.collision_radius + self.collision_radius
        offset = collider.owner.transform.world_position - self.owner.transform.world_position
        self.collision_normal = offset.normalized()
        return offset.magnitude() <= combined_radii

    def check_collision_aabb(self, collider: AABBCollider) -> bool:
        if collider.owner is self.owner:
            return False
        position = self.owner.transform.world_position
        box_position = collider.owner.transform.world_position
        direction = position - box_position
        half_width = collider.width / 2
        half_height = collider.height / 2
        clamped = Vector2(
            min(max(direction.x, -half_width), half_width),
            min(max(direction.y, -half_height), half_height),
        )
        closest_point = box_position + clamped
        distance = (position - closest_point).magnitude()
        self.collision_normal = (box_position - closest_point).normalized()
        return distance <= self.collision_radius


class AABBCollider(Collider):
    """An axis-aligned box centred on the owner's world position."""

    def __init__(self, owner, width: float | None = None, height: float | None = None):
        super().__init__(owner, ColliderType.BOX)
        scale = owner.transform.scale
        self.width = scale.x if width is None else width
        self.height = scale.y if height is None else height

    @property
    def left(self) -> float:
        """X coordinate of the left side."""
        return self.owner.transform.world_position.x - self.width / 2

    @property
    def right(self) -> float:
        """X coordinate of the right side."""
        return self.owner.transform.world_position.x + self.width / 2

    @property
    def top(self) -> float:
        """Y coordinate of the top side."""
        return self.owner.transform.world_position.y - self.height / 2

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom side."""
        return self.owner.transform.world_position.y + self.height / 2

    def check_collision_circle(self, collider: CircleCollider) -> bool:
        if collider.owner is self.owner:
            return False
        return collider.check_collision_aabb(self)

    def check_collision_aabb(self, collider: AABBCollider) -> bool:
        if collider.owner is self.owner:
            return False
        overlapping = (
            collider.left <= self.right
            and collider.top <= self.bottom
            and self.left <= collider.right
            and self.top <= collider.bottom
        )
        if not overlapping:
            return False
        penetrations = [
            (int(abs(collider.right - self.left)), Vector2(-1, 0)),
            (int(abs(collider.left - self.right)), Vector2(1, 0)),
            (int(abs(collider.bottom - self.top)), Vector2(0, -1)),
            (int(abs(self.bottom - collider.top)), Vector2(0, 1)),
        ]
        smallest = min(depth for depth, _ in penetrations)
        self.collision_normal = next(n for depth, n in penetrations if depth == smallest)
        return True