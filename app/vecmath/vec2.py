from __future__ import annotations

from dataclasses import dataclass
import math

from app import config


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float

    def __add__(self, o: "Vec2") -> "Vec2":
        return add(self, o)

    def __sub__(self, o: "Vec2") -> "Vec2":
        return subtract(self, o)

    def __mul__(self, s: float) -> "Vec2":
        return multiply(self, s)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)


ZERO = Vec2(0.0, 0.0)


def add(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(a.x + b.x, a.y + b.y)


def subtract(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(a.x - b.x, a.y - b.y)


def multiply(v: Vec2, scalar: float) -> Vec2:
    return Vec2(v.x * scalar, v.y * scalar)


def dot(a: Vec2, b: Vec2) -> float:
    return a.x * b.x + a.y * b.y


def magnitude(v: Vec2) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def normalize(v: Vec2) -> Vec2:
    """Scale `v` to unit length.

    Only an exact zero magnitude is guarded (returns the zero vector). Vectors
    whose squared components underflow count as zero.
    """
    n = magnitude(v)
    if n == 0:
        return ZERO
    return Vec2(v.x / n, v.y / n)


def distance(a: Vec2, b: Vec2) -> float:
    return magnitude(subtract(a, b))


def reflect(incident: Vec2, normal: Vec2) -> Vec2:
    """Mirror `incident` across the surface with the given `normal`.

    `normal` need not be unit length. A zero normal leaves `incident` unchanged.
    """
    n = normalize(normal)
    return subtract(incident, multiply(n, 2.0 * dot(incident, n)))


def angle(v: Vec2) -> float:
    # atan2 range is [-pi, pi]; only y == -0.0 reaches -pi. (0, 0) maps to 0.
    return math.atan2(v.y, v.x)


def from_angle(theta: float, mag: float = config.DEFAULT_FROM_ANGLE_MAGNITUDE) -> Vec2:
    return Vec2(math.cos(theta) * mag, math.sin(theta) * mag)
