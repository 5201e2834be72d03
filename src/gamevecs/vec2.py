"""2D single-precision vector."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .linalg import Constant, clamp, f32, quiet, quiet_div
from .tolerances import REL_TOL, all_close

logger = logging.getLogger(__name__)


@dataclass(slots=True, repr=False)
class Vec2:
    """
    2D vector with ``numpy.float32`` components.

    Arithmetic operators are component-wise between two ``Vec2`` and never
    broadcast scalars. The ``+=``, ``-=``, ``*=`` and ``/=`` forms mutate the
    left operand; every other operation returns a new vector.
    """

    x: float
    y: float

    ZERO = Constant(0.0, 0.0)
    ONE = Constant(1.0, 1.0)
    UP = Constant(0.0, 1.0)
    DOWN = Constant(0.0, -1.0)
    LEFT = Constant(-1.0, 0.0)
    RIGHT = Constant(1.0, 0.0)

    def __post_init__(self) -> None:
        self.x = f32(self.x)
        self.y = f32(self.y)

    def set(self, x: float, y: float) -> None:
        self.x = f32(x)
        self.y = f32(y)

    def copy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        return (float(self.x), float(self.y))

    def __iter__(self) -> Iterator[np.float32]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        """Shortest float32 text per component, Python style: ``(11.0, 0.1)``."""
        return f"({self.x!s}, {self.y!s})"

    def __repr__(self) -> str:
        return f"Vec2({self.x!s}, {self.y!s})"

    # ---- operators ----

    def __add__(self, other: Vec2) -> Vec2:
        if other.__class__ is not Vec2:
            return NotImplemented
        with quiet():
            return Vec2(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Vec2) -> Vec2:
        if other.__class__ is not Vec2:
            return NotImplemented
        with quiet():
            self.x += other.x
            self.y += other.y
        return self

    def __sub__(self, other: Vec2) -> Vec2:
        if other.__class__ is not Vec2:
            return NotImplemented
        with quiet():
            return Vec2(self.x - other.x, self.y - other.y)

    def __isub__(self, other: Vec2) -> Vec2:
        if other.__class__ is not Vec2:
            return NotImplemented
        with quiet():
            self.x -= other.x
            self.y -= other.y
        return self

    def __mul__(self, other: Vec2) -> Vec2:
        if other.__class__ is not Vec2:
            return NotImplemented
        with quiet():
            return Vec2(self.x * other.x, self.y * other.y)

    def __imul__(self, other: Vec2) -> Vec2:
        if other.__class__ is not Vec2:
            return NotImplemented
        with quiet():
            self.x *= other.x
            self.y *= other.y
        return self

    def __truediv__(self, other: Vec2) -> Vec2:
        # zero divisors give inf/nan, not ZeroDivisionError
        if other.__class__ is not Vec2:
            return NotImplemented
        with quiet():
            return Vec2(self.x / other.x, self.y / other.y)

    def __itruediv__(self, other: Vec2) -> Vec2:
        if other.__class__ is not Vec2:
            return NotImplemented
        with quiet():
            self.x /= other.x
            self.y /= other.y
        return self

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    # ---- geometry ----

    def magnitude(self) -> np.float32:
        return Vec2.ZERO.distance_to(self)

    def magnitude_squared(self) -> np.float32:
        return Vec2.ZERO.distance_to_squared(self)

    def distance_to(self, other: Vec2) -> np.float32:
        with quiet():
            return np.sqrt(self.distance_to_squared(other))

    def distance_to_squared(self, other: Vec2) -> np.float32:
        with quiet():
            lx = other.x - self.x
            ly = other.y - self.y
            return lx * lx + ly * ly

    def equals(self, other: Vec2, epsilon: float) -> bool:
        """True when every component differs by strictly less than ``epsilon``."""
        with quiet():
            return bool(abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon)

    def is_close(self, other: Vec2, rel_tol: float = REL_TOL, abs_tol: float = 0.0) -> bool:
        return all_close(self, other, rel_tol=rel_tol, abs_tol=abs_tol)

    def normalized(self) -> Vec2:
        """
        Unit-length copy of this vector.

        Not guarded: a zero vector divides 0 by 0 and comes back as (nan, nan).
        """
        magnitude = self.magnitude()
        if magnitude == 0.0:
            logger.debug("normalizing zero-length vector %s", self)
        return self / Vec2(magnitude, magnitude)

    normalize = normalized

    def dot(self, other: Vec2) -> np.float32:
        with quiet():
            return self.x * other.x + self.y * other.y

    def angle_between(self, other: Vec2) -> np.float32:
        """Unsigned angle in radians, 0.0 if either vector has zero length."""
        dot = self.dot(other)
        with quiet():
            magnitude_product = self.magnitude() * other.magnitude()
        if magnitude_product == 0.0:
            logger.debug("angle between %s and %s with zero-length operand", self, other)
            return f32(0.0)
        cos_theta = quiet_div(dot, magnitude_product)
        return np.arccos(clamp(cos_theta, -1.0, 1.0))

    def lerp(self, other: Vec2, t: float) -> Vec2:
        # t is not clamped; values outside [0, 1] extrapolate
        t = f32(t)
        s = f32(1.0) - t
        with quiet():
            return Vec2(self.x * s + other.x * t, self.y * s + other.y * t)

    def add_length(self, angle: float, length: float) -> Vec2:
        """Move ``length`` units along ``angle`` (radians, counterclockwise from +x)."""
        angle = f32(angle)
        length = f32(length)
        with quiet():
            step = Vec2(np.cos(angle) * length, np.sin(angle) * length)
        return self + step

    def project(self, onto: Vec2) -> Vec2:
        onto_normalized = onto.normalized()
        scalar = self.dot(onto_normalized)
        with quiet():
            return Vec2(onto_normalized.x * scalar, onto_normalized.y * scalar)

    def rotate(self, angle: float) -> Vec2:
        """Rotate counterclockwise by ``angle`` radians."""
        angle = f32(angle)
        with quiet():
            c = np.cos(angle)
            s = np.sin(angle)
            return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)
