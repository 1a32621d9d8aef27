"""Vector, rotation and random helpers used throughout the environment."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Iterator, Union

# Field constants shared with the simulator.
SOCCAR_GOAL_SCORE_BASE_THRESHOLD_Y = 5124.25
BALL_COLLISION_RADIUS_SOCCAR = 93.15

_NORMALIZE_EPSILON = 1.1920929e-07 ** 2


@dataclass(frozen=True)
class Vec:
    """Immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def __mul__(self, other: Union[Vec, float]) -> Vec:
        if isinstance(other, Vec):
            return Vec(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Vec, float]) -> Vec:
        if isinstance(other, Vec):
            return Vec(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vec(self.x / other, self.y / other, self.z / other)

    def dot(self, other: Vec) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec:
        """Unit vector in the same direction, or the zero vector if too short."""
        length = self.length()
        if length > _NORMALIZE_EPSILON:
            return self / length
        return Vec()

    def dist_sq_2d(self, other: Vec) -> float:
        """Squared distance in the XY plane."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


@dataclass(frozen=True)
class RotMat:
    """Orientation given by forward, right and up axes."""

    forward: Vec = field(default_factory=lambda: Vec(1.0, 0.0, 0.0))
    right: Vec = field(default_factory=lambda: Vec(0.0, 1.0, 0.0))
    up: Vec = field(default_factory=lambda: Vec(0.0, 0.0, 1.0))

    def __getitem__(self, index: int) -> Vec:
        return (self.forward, self.right, self.up)[index]

    def __iter__(self) -> Iterator[Vec]:
        yield self.forward
        yield self.right
        yield self.up

    def _matrix(self) -> list[list[float]]:
        f, r, u = self.forward, self.right, self.up
        return [[f.x, r.x, u.x], [f.y, r.y, u.y], [f.z, r.z, u.z]]


@dataclass(frozen=True)
class Angle:
    """Euler angles in radians."""

    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def to_rot_mat(self) -> RotMat:
        """Convert to a rotation matrix."""
        cy, sy = math.cos(self.yaw), math.sin(self.yaw)
        cp, sp = math.cos(self.pitch), math.sin(self.pitch)
        cr, sr = math.cos(self.roll), math.sin(self.roll)
        forward = Vec(cp * cy, cp * sy, sp)
        right = Vec(cy * sp * sr - cr * sy, sy * sp * sr + cr * cy, -cp * sr)
        up = Vec(-cr * cy * sp - sr * sy, -cr * sy * sp + sr * cy, cp * cr)
        return RotMat(forward, right, up)


@dataclass
class Quat:
    """Quaternion with scalar part ``w``."""

    w: float = 1.0
    x: float = 1.0
    y: float = 1.0
    z: float = 1.0

    @staticmethod
    def from_rot_mat(rot_mat: RotMat) -> Quat:
        """Build the quaternion describing a rotation matrix."""
        m = rot_mat._matrix()
        trace = m[0][0] + m[1][1] + m[2][2]
        if trace > 0:
            s = math.sqrt(trace + 1.0)
            w = s * 0.5
            s = 0.5 / s
            return Quat(
                w,
                (m[2][1] - m[1][2]) * s,
                (m[0][2] - m[2][0]) * s,
                (m[1][0] - m[0][1]) * s,
            )
        if m[0][0] < m[1][1]:
            i = 2 if m[1][1] < m[2][2] else 1
        else:
            i = 2 if m[0][0] < m[2][2] else 0
        j = (i + 1) % 3
        k = (i + 2) % 3
        s = math.sqrt(m[i][i] - m[j][j] - m[k][k] + 1.0)
        xyz = [0.0, 0.0, 0.0]
        xyz[i] = s * 0.5
        s = 0.5 / s
        w = (m[k][j] - m[j][k]) * s
        xyz[j] = (m[j][i] + m[i][j]) * s
        xyz[k] = (m[k][i] + m[i][k]) * s
        return Quat(w, *xyz)

    def to_rot_mat(self) -> RotMat:
        """Convert to a rotation matrix."""
        w, x, y, z = self.w, self.x, self.y, self.z
        d = w * w + x * x + y * y + z * z
        s = 2.0 / d
        xs, ys, zs = x * s, y * s, z * s
        wx, wy, wz = w * xs, w * ys, w * zs
        xx, xy, xz = x * xs, x * ys, x * zs
        yy, yz, zz = y * ys, y * zs, z * zs
        m = [
            [1.0 - (yy + zz), xy - wz, xz + wy],
            [xy + wz, 1.0 - (xx + zz), yz - wx],
            [xz - wy, yz + wx, 1.0 - (xx + yy)],
        ]
        return RotMat(
            Vec(m[0][0], m[1][0], m[2][0]),
            Vec(m[0][1], m[1][1], m[2][1]),
            Vec(m[0][2], m[1][2], m[2][2]),
        )


def rand_float(low: float = 0.0, high: float = 1.0) -> float:
    """Uniform random float between ``low`` and ``high``."""
    return random.uniform(low, high)


def rand_vec(low: Vec, high: Vec) -> Vec:
    """Random vector with each component drawn between the bounds."""
    return Vec(
        rand_float(low.x, high.x),
        rand_float(low.y, high.y),
        rand_float(low.z, high.z),
    )


def is_ball_scored(pos: Vec) -> bool:
    """Whether a ball at ``pos`` is past either goal line."""
    return abs(pos.y) > SOCCAR_GOAL_SCORE_BASE_THRESHOLD_Y + BALL_COLLISION_RADIUS_SOCCAR