"""Physical state of the ball or a car."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .math3d import RotMat, Vec

_INVERT = Vec(-1.0, -1.0, 1.0)


@dataclass(frozen=True)
class PhysObj:
    """Position, orientation and velocities of a physical object."""

    pos: Vec = field(default_factory=Vec)
    rot_mat: RotMat = field(default_factory=RotMat)
    vel: Vec = field(default_factory=Vec)
    ang_vel: Vec = field(default_factory=Vec)

    @staticmethod
    def from_state(state: Any) -> PhysObj:
        """Copy the physical fields of a ball or car state."""
        return PhysObj(state.pos, state.rot_mat, state.vel, state.ang_vel)

    def invert(self) -> PhysObj:
        """Rotate 180 degrees around Z, scaling everything by (-1, -1, 1)."""
        return PhysObj(
            self.pos * _INVERT,
            RotMat(*(axis * _INVERT for axis in self.rot_mat)),
            self.vel * _INVERT,
            self.ang_vel * _INVERT,
        )

    def mirror_x(self) -> PhysObj:
        """Mirror along the X axis."""
        rot = self.rot_mat
        return PhysObj(
            Vec(-self.pos.x, self.pos.y, self.pos.z),
            RotMat(
                rot.forward * Vec(-1.0, 1.0, 1.0),
                rot.right * Vec(1.0, -1.0, -1.0),
                rot.up * Vec(-1.0, 1.0, 1.0),
            ),
            Vec(-self.vel.x, self.vel.y, self.vel.z),
            self.ang_vel * Vec(1.0, -1.0, -1.0),
        )