from __future__ import annotations

from typing import Any

import numpy as np

DTYPE = np.float32


def f32(value: float) -> np.float32:
    return DTYPE(value)


def quiet() -> np.errstate:
    """
    Floating point error state for vector arithmetic.

    Division by zero, 0/0 and overflow resolve to inf/nan the IEEE-754 way;
    numpy would otherwise emit a RuntimeWarning for each of them.
    """
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def quiet_div(a: np.float32, b: np.float32) -> np.float32:
    with quiet():
        return a / b


def clamp(value: np.float32, lo: float, hi: float) -> np.float32:
    # fmin/fmax drop a nan operand, so nan clamps to hi
    return np.fmax(np.fmin(value, f32(hi)), f32(lo))


class Constant:
    """
    Named vector constant (``Vec2.UP``, ``Vec3.FORWARD``, ...).

    Vectors are mutable, so every access builds a fresh instance of the
    owning class instead of handing out a shared one.
    """

    def __init__(self, *components: float) -> None:
        self.components = tuple(f32(c) for c in components)

    def __get__(self, obj: Any, owner: type) -> Any:
        return owner(*self.components)
