from .vec2 import Vec2
from .vec3 import Vec3
from .tolerances import is_close, near_zero

__all__ = [
    "Vec2",
    "Vec3",
    "is_close",
    "near_zero",
]
