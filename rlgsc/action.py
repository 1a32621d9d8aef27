"""Car controls, actions and flat observation spaces."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from typing import Iterable, Iterator, Union

from .math3d import RotMat, Vec


@dataclass
class CarControls:
    """Inputs the simulator applies to a car."""

    throttle: float = 0.0
    steer: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0
    boost: bool = False
    jump: bool = False
    handbrake: bool = False


@dataclass(frozen=True)
class Action:
    """Eight-float action vector for one car."""

    throttle: float = 0.0
    steer: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0
    jump: float = 0.0
    boost: float = 0.0
    handbrake: float = 0.0

    ELEM_AMOUNT = 8

    @staticmethod
    def from_controls(controls: CarControls) -> Action:
        """Build an action from car controls."""
        return Action(
            float(controls.throttle),
            float(controls.steer),
            float(controls.pitch),
            float(controls.yaw),
            float(controls.roll),
            float(controls.jump),
            float(controls.boost),
            float(controls.handbrake),
        )

    def to_controls(self) -> CarControls:
        """Convert to car controls; button inputs are pressed only at exactly 1."""
        return CarControls(
            throttle=self.throttle,
            steer=self.steer,
            pitch=self.pitch,
            yaw=self.yaw,
            roll=self.roll,
            boost=self.boost == 1,
            jump=self.jump == 1,
            handbrake=self.handbrake == 1,
        )

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < self.ELEM_AMOUNT:
            raise IndexError(f"action index {index} out of range")
        return getattr(self, fields(self)[index].name)

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def __len__(self) -> int:
        return self.ELEM_AMOUNT


class GymSpace:
    """Growable one-dimensional float space."""

    def __init__(self, data: Union[int, Iterable[float], None] = None) -> None:
        if data is None:
            self.data: list[float] = []
        elif isinstance(data, int):
            self.data = [0.0] * data
        else:
            self.data = [float(v) for v in data]

    def __iadd__(self, other: Union[float, Vec, RotMat, GymSpace, Iterable[float]]) -> GymSpace:
        if isinstance(other, GymSpace):
            self.data.extend(other.data)
        elif isinstance(other, RotMat):
            for axis in other:
                self.data.extend(axis)
        elif isinstance(other, (int, float)):
            self.data.append(float(other))
        else:
            self.data.extend(float(v) for v in other)
        return self

    def __getitem__(self, index: int) -> float:
        return self.data[index]

    def __setitem__(self, index: int, value: float) -> None:
        self.data[index] = float(value)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def __repr__(self) -> str:
        return f"GymSpace({self.data!r})"