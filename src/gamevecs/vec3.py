"""3D single-precision vector."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .linalg import Constant, clamp, f32, quiet, quiet_div
from .tolerances import REL_TOL, all_close

logger = logging.getLogger(__name__)


@dataclass(slots=True, repr=False)
class Vec3:
    """
    3D vector with ``numpy.float32`` components.

    Same operator rules as ``Vec2``. There is no in-plane ``rotate`` or
    ``add_length``: an angle alone does not pick a rotation axis in 3D.
    """

    x: float
    y: float
    z: float

    ZERO = Constant(0.0, 0.0, 0.0)
    ONE = Constant(1.0, 1.0, 1.0)
    UP = Constant(0.0, 1.0, 0.0)
    DOWN = Constant(0.0, -1.0, 0.0)
    LEFT = Constant(-1.0, 0.0, 0.0)
    RIGHT = Constant(1.0, 0.0, 0.0)
    FORWARD = Constant(0.0, 0.0, 1.0)
    BACK = Constant(0.0, 0.0, -1.0)

    def __post_init__(self) -> None:
        self.x = f32(self.x)
        self.y = f32(self.y)
        self.z = f32(self.z)

    def set(self, x: float, y: float, z: float) -> None:
        self.x = f32(x)
        self.y = f32(y)
        self.z = f32(z)

    def copy(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def to_tuple(self) -> tuple[float, float, float]:
        return (float(self.x), float(self.y), float(self.z))

    def __iter__(self) -> Iterator[np.float32]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        """Shortest float32 text per component, Python style: ``(11.0, 31.0, 12.0)``."""
        return f"({self.x!s}, {self.y!s}, {self.z!s})"

    def __repr__(self) -> str:
        return f"Vec3({self.x!s}, {self.y!s}, {self.z!s})"

    # ---- operators ----

    def __add__(self, other: Vec3) -> Vec3:
        if other.__class__ is not Vec3:
            return NotImplemented
        with quiet():
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: Vec3) -> Vec3:
        if other.__class__ is not Vec3:
            return NotImplemented
        with quiet():
            self.x += other.x
            self.y += other.y
            self.z += other.z
        return self

    def __sub__(self, other: Vec3) -> Vec3:
        if other.__class__ is not Vec3:
            return NotImplemented
        with quiet():
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __isub__(self, other: Vec3) -> Vec3:
        if other.__class__ is not Vec3:
            return NotImplemented
        with quiet():
            self.x -= other.x
            self.y -= other.y
            self.z -= other.z
        return self

    def __mul__(self, other: Vec3) -> Vec3:
        if other.__class__ is not Vec3:
            return NotImplemented
        with quiet():
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __imul__(self, other: Vec3) -> Vec3:
        if other.__class__ is not Vec3:
            return NotImplemented
        with quiet():
            self.x *= other.x
            self.y *= other.y
            self.z *= other.z
        return self

    def __truediv__(self, other: Vec3) -> Vec3:
        if other.__class__ is not Vec3:
            return NotImplemented
        with quiet():
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)

    def __itruediv__(self, other: Vec3) -> Vec3:
        if other.__class__ is not Vec3:
            return NotImplemented
        with quiet():
            self.x /= other.x
            self.y /= other.y
            self.z /= other.z
        return self

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    # ---- geometry ----

    def magnitude(self) -> np.float32:
        return Vec3.ZERO.distance_to(self)

    def magnitude_squared(self) -> np.float32:
        return Vec3.ZERO.distance_to_squared(self)

    def distance_to(self, other: Vec3) -> np.float32:
        with quiet():
            return np.sqrt(self.distance_to_squared(other))

    def distance_to_squared(self, other: Vec3) -> np.float32:
        with quiet():
            lx = other.x - self.x
            ly = other.y - self.y
            lz = other.z - self.z
            return lx * lx + ly * ly + lz * lz

    def equals(self, other: Vec3, epsilon: float) -> bool:
        with quiet():
            return bool(
                abs(self.x - other.x) < epsilon
                and abs(self.y - other.y) < epsilon
                and abs(self.z - other.z) < epsilon
            )

    def is_close(self, other: Vec3, rel_tol: float = REL_TOL, abs_tol: float = 0.0) -> bool:
        return all_close(self, other, rel_tol=rel_tol, abs_tol=abs_tol)

    def normalized(self) -> Vec3:
        # zero vector -> (nan, nan, nan), same as Vec2
        magnitude = self.magnitude()
        if magnitude == 0.0:
            logger.debug("normalizing zero-length vector %s", self)
        return self / Vec3(magnitude, magnitude, magnitude)

    normalize = normalized

    def dot(self, other: Vec3) -> np.float32:
        with quiet():
            return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        with quiet():
            return Vec3(
                self.y * other.z - self.z * other.y,
                self.z * other.x - self.x * other.z,
                self.x * other.y - self.y * other.x,
            )

    def angle_between(self, other: Vec3) -> np.float32:
        dot = self.dot(other)
        with quiet():
            magnitude_product = self.magnitude() * other.magnitude()
        if magnitude_product == 0.0:
            logger.debug("angle between %s and %s with zero-length operand", self, other)
            return f32(0.0)
        cos_theta = quiet_div(dot, magnitude_product)
        return np.arccos(clamp(cos_theta, -1.0, 1.0))

    def lerp(self, other: Vec3, t: float) -> Vec3:
        t = f32(t)
        s = f32(1.0) - t
        with quiet():
            return Vec3(
                self.x * s + other.x * t,
                self.y * s + other.y * t,
                self.z * s + other.z * t,
            )

    def project(self, onto: Vec3) -> Vec3:
        onto_normalized = onto.normalized()
        scalar = self.dot(onto_normalized)
        with quiet():
            return Vec3(
                onto_normalized.x * scalar,
                onto_normalized.y * scalar,
                onto_normalized.z * scalar,
            )
