"""Immutable 2, 3 and 4 component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """A two dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0:
            return Vector2()
        return self / length

    @staticmethod
    def dot(lhs: Vector2, rhs: Vector2) -> float:
        """Dot product of two vectors."""
        return lhs.x * rhs.x + lhs.y * rhs.y

    @staticmethod
    def find_angle(lhs: Vector2, rhs: Vector2) -> float:
        """Angle in radians between two vectors."""
        cosine = Vector2.dot(lhs.normalized(), rhs.normalized())
        return math.acos(max(-1.0, min(1.0, cosine)))


@dataclass(frozen=True)
class Vector3:
    """A three dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0:
            return Vector3()
        return self / length

    @staticmethod
    def dot(lhs: Vector3, rhs: Vector3) -> float:
        """Dot product of two vectors."""
        return lhs.x * rhs.x + lhs.y * rhs.y + lhs.z * rhs.z

    @staticmethod
    def cross(lhs: Vector3, rhs: Vector3) -> Vector3:
        """Cross product of two vectors."""
        return Vector3(
            lhs.y * rhs.z - lhs.z * rhs.y,
            lhs.z * rhs.x - lhs.x * rhs.z,
            lhs.x * rhs.y - lhs.y * rhs.x,
        )


@dataclass(frozen=True)
class Vector4:
    """A four dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Vector4:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalized(self) -> Vector4:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0:
            return Vector4()
        return self / length

    @staticmethod
    def dot(lhs: Vector4, rhs: Vector4) -> float:
        """Dot product of two vectors."""
        return lhs.x * rhs.x + lhs.y * rhs.y + lhs.z * rhs.z + lhs.w * rhs.w

    @staticmethod
    def cross(lhs: Vector4, rhs: Vector4) -> Vector4:
        """Cross product of the x, y and z parts; w of the result is zero."""
        return Vector4(
            lhs.y * rhs.z - lhs.z * rhs.y,
            lhs.z * rhs.x - lhs.x * rhs.z,
            lhs.x * rhs.y - lhs.y * rhs.x,
            0.0,
        )