"""Immutable 3x3 and 4x4 row-major matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from .vectors import Vector2, Vector3, Vector4


def _values(matrix) -> tuple[float, ...]:
    return tuple(getattr(matrix, f.name) for f in fields(matrix))


def _rows(values: tuple[float, ...], size: int) -> list[tuple[float, ...]]:
    return [values[start:start + size] for start in range(0, size * size, size)]


def _product(lhs: tuple[float, ...], rhs: tuple[float, ...], size: int) -> tuple[float, ...]:
    columns = list(zip(*_rows(rhs, size)))
    return tuple(
        sum(a * b for a, b in zip(row, column))
        for row in _rows(lhs, size)
        for column in columns
    )


def _apply(values: tuple[float, ...], size: int, vector: tuple[float, ...]) -> tuple[float, ...]:
    return tuple(sum(a * b for a, b in zip(row, vector)) for row in _rows(values, size))


@dataclass(frozen=True)
class Matrix3:
    """A 3x3 matrix; the default is the identity."""

    m00: float = 1.0
    m01: float = 0.0
    m02: float = 0.0
    m10: float = 0.0
    m11: float = 1.0
    m12: float = 0.0
    m20: float = 0.0
    m21: float = 0.0
    m22: float = 1.0

    def __add__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return Matrix3(*(a + b for a, b in zip(_values(self), _values(other))))

    def __sub__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return Matrix3(*(a - b for a, b in zip(_values(self), _values(other))))

    def __mul__(self, other):
        if isinstance(other, Matrix3):
            return Matrix3(*_product(_values(self), _values(other), 3))
        if isinstance(other, Vector3):
            return Vector3(*_apply(_values(self), 3, (other.x, other.y, other.z)))
        return NotImplemented

    @staticmethod
    def create_rotation(radians: float) -> Matrix3:
        """Rotation about the z axis."""
        c, s = math.cos(radians), math.sin(radians)
        return Matrix3(c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def create_translation(position: Vector2) -> Matrix3:
        """Translation by the given position."""
        return Matrix3(1.0, 0.0, position.x, 0.0, 1.0, position.y, 0.0, 0.0, 1.0)

    @staticmethod
    def create_scale(scale: Vector2) -> Matrix3:
        """Scale along the x and y axes."""
        return Matrix3(scale.x, 0.0, 0.0, 0.0, scale.y, 0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Matrix4:
    """A 4x4 matrix; the default is the identity."""

    m00: float = 1.0
    m01: float = 0.0
    m02: float = 0.0
    m03: float = 0.0
    m10: float = 0.0
    m11: float = 1.0
    m12: float = 0.0
    m13: float = 0.0
    m20: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m23: float = 0.0
    m30: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 1.0

    def __add__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a + b for a, b in zip(_values(self), _values(other))))

    def __sub__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a - b for a, b in zip(_values(self), _values(other))))

    def __mul__(self, other):
        if isinstance(other, Matrix4):
            return Matrix4(*_product(_values(self), _values(other), 4))
        if isinstance(other, Vector4):
            return Vector4(*_apply(_values(self), 4, (other.x, other.y, other.z, other.w)))
        return NotImplemented

    @staticmethod
    def create_rotation_x(radians: float) -> Matrix4:
        """Rotation about the x axis."""
        c, s = math.cos(radians), math.sin(radians)
        return Matrix4(
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @staticmethod
    def create_rotation_y(radians: float) -> Matrix4:
        """Rotation about the y axis."""
        c, s = math.cos(radians), math.sin(radians)
        return Matrix4(
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @staticmethod
    def create_rotation_z(radians: float) -> Matrix4:
        """Rotation about the z axis."""
        c, s = math.cos(radians), math.sin(radians)
        return Matrix4(
            c, s, 0.0, 0.0,
            -s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @staticmethod
    def create_translation(position: Vector3) -> Matrix4:
        """Translation by the given position."""
        return Matrix4(
            1.0, 0.0, 0.0, position.x,
            0.0, 1.0, 0.0, position.y,
            0.0, 0.0, 1.0, position.z,
            0.0, 0.0, 0.0, 1.0,
        )

    @staticmethod
    def create_scale(scale: Vector3) -> Matrix4:
        """Scale along the x, y and z axes."""
        return Matrix4(
            scale.x, 0.0, 0.0, 0.0,
            0.0, scale.y, 0.0, 0.0,
            0.0, 0.0, scale.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )