from __future__ import annotations

from typing import Iterable

import numpy as np

from .linalg import DTYPE

# a handful of float32 ulps; single precision cannot honour the float64 default of 1e-9
REL_TOL = float(4 * np.finfo(DTYPE).eps)
ABS_TOL = 1e-6

METHODS = ("asymmetric", "strong", "weak", "average")


def is_close(
    a: float,
    b: float,
    rel_tol: float = REL_TOL,
    abs_tol: float = 0.0,
    method: str = "weak",
) -> bool:
    if method not in METHODS:
        raise ValueError('method must be one of: "asymmetric","strong","weak","average"')
    if rel_tol < 0.0 or abs_tol < 0.0:
        raise ValueError("error tolerances must be non-negative")
    a = float(a)
    b = float(b)
    if a == b:
        return True
    diff = abs(b - a)
    if method == "asymmetric":
        return diff <= abs(rel_tol * b) or diff <= abs_tol
    if method == "strong":
        return (diff <= abs(rel_tol * b) and diff <= abs(rel_tol * a)) or diff <= abs_tol
    if method == "weak":
        return diff <= abs(rel_tol * b) or diff <= abs(rel_tol * a) or diff <= abs_tol
    # average
    return diff <= abs(rel_tol * (a + b) * 0.5) or diff <= abs_tol


def near_zero(val: float) -> bool:
    return is_close(val, 0.0, abs_tol=ABS_TOL)


def all_close(
    left: Iterable[float],
    right: Iterable[float],
    rel_tol: float = REL_TOL,
    abs_tol: float = 0.0,
    method: str = "weak",
) -> bool:
    """Pairwise ``is_close`` over two equally long component sequences."""
    left = tuple(left)
    right = tuple(right)
    if len(left) != len(right):
        raise ValueError("Vector dimensions should be equal")
    return all(
        is_close(p, q, rel_tol=rel_tol, abs_tol=abs_tol, method=method)
        for p, q in zip(left, right)
    )
