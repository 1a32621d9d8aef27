"""State setters that put an arena into the starting state of an episode."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

from .common_values import BALL_RADIUS, CAR_MAX_SPEED
from .game_state import GameState
from .math3d import Angle, Vec, rand_float, rand_vec
from .player_data import BallState, CarState

X_MAX = 3500.0
Y_MAX = 4000.0
Z_MAX = 1820.0
CAR_Z_MIN = 150.0
CAR_GROUND_Z = 17.0
PITCH_MAX = math.pi / 2
YAW_MAX = math.pi
ROLL_MAX = math.pi
ANG_VEL_MAX = 5.5
BALL_SPEED_MAX = 4000.0
BALL_ANG_VEL_MAX = 4.0


class StateSetter(ABC):
    """Applies a starting state to an arena."""

    @abstractmethod
    def reset_state(self, arena: Any) -> GameState:
        """Apply the reset to ``arena`` and return the resulting state."""


class KickoffState(StateSetter):
    """Resets the arena to a random kickoff."""

    def reset_state(self, arena: Any) -> GameState:
        arena.reset_to_random_kickoff()
        return GameState.from_arena(arena)


def _rand_norm_vec() -> Vec:
    return rand_vec(Vec(-1.0, -1.0, -1.0), Vec(1.0, 1.0, 1.0)).normalized()


class RandomState(StateSetter):
    """Places the ball and cars at random positions, optionally with random speeds."""

    def __init__(self, rand_ball_speed: bool, rand_car_speed: bool, cars_on_ground: bool) -> None:
        self.rand_ball_speed = rand_ball_speed
        self.rand_car_speed = rand_car_speed
        self.cars_on_ground = cars_on_ground

    def reset_state(self, arena: Any) -> GameState:
        # Resets boost pads and everything else first.
        arena.reset_to_random_kickoff()

        ball = BallState(
            pos=rand_vec(Vec(-X_MAX, -Y_MAX, BALL_RADIUS), Vec(X_MAX, Y_MAX, Z_MAX))
        )
        if self.rand_ball_speed:
            ball.vel = _rand_norm_vec() * rand_float(0.0, BALL_SPEED_MAX)
            limit = BALL_ANG_VEL_MAX
            ball.ang_vel = rand_vec(Vec(-limit, -limit, -limit), Vec(limit, limit, limit))
        arena.ball.set_state(ball)

        for car in arena.cars:
            pos = rand_vec(Vec(-X_MAX, -Y_MAX, CAR_Z_MIN), Vec(X_MAX, Y_MAX, Z_MAX))
            vel = Vec()
            ang_vel = Vec()
            if self.rand_car_speed:
                vel = _rand_norm_vec() * rand_float(0.0, CAR_MAX_SPEED)
                ang_vel = _rand_norm_vec() * ANG_VEL_MAX

            yaw = rand_float(-YAW_MAX, YAW_MAX)
            pitch = rand_float(-PITCH_MAX, PITCH_MAX)
            roll = rand_float(-ROLL_MAX, ROLL_MAX)

            on_ground = self.cars_on_ground or rand_float() > 0.5
            if on_ground:
                pos = Vec(pos.x, pos.y, CAR_GROUND_Z)
                pitch = roll = 0.0
                vel = Vec(vel.x, vel.y, 0.0)
                ang_vel = Vec()

            car.set_state(
                CarState(
                    pos=pos,
                    rot_mat=Angle(yaw, pitch, roll).to_rot_mat(),
                    vel=vel,
                    ang_vel=ang_vel,
                    boost=rand_float(0.0, 100.0),
                )
            )

        return GameState.from_arena(arena)