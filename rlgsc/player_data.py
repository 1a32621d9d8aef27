"""Per-player state derived from a simulated car."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .common_values import Team
from .math3d import BALL_COLLISION_RADIUS_SOCCAR, RotMat, Vec
from .phys_obj import PhysObj

# Maximum time after a jump during which a flip is still available.
DOUBLEJUMP_MAX_DELAY = 1.25

# Height the simulator moves a demolished car to while it waits to respawn.
DEMOED_POS_Z = -50000.0


@dataclass
class BallHitInfo:
    """Most recent contact between a car and the ball."""

    is_valid: bool = False
    tick_count_when_hit: int = 0


@dataclass
class CarState:
    """Snapshot of a car as reported by the simulator."""

    pos: Vec = field(default_factory=lambda: Vec(0.0, 0.0, 17.0))
    rot_mat: RotMat = field(default_factory=RotMat)
    vel: Vec = field(default_factory=Vec)
    ang_vel: Vec = field(default_factory=Vec)
    is_on_ground: bool = True
    has_jumped: bool = False
    has_double_jumped: bool = False
    has_flipped: bool = False
    air_time_since_jump: float = 0.0
    boost: float = 100.0 / 3.0
    is_demoed: bool = False
    ball_hit_info: BallHitInfo = field(default_factory=BallHitInfo)


@dataclass
class BallState:
    """Snapshot of the ball as reported by the simulator."""

    pos: Vec = field(default_factory=lambda: Vec(0.0, 0.0, BALL_COLLISION_RADIUS_SOCCAR))
    rot_mat: RotMat = field(default_factory=RotMat)
    vel: Vec = field(default_factory=Vec)
    ang_vel: Vec = field(default_factory=Vec)


@dataclass
class PlayerData:
    """State and match statistics of one player.

    ``match_assists`` counts passes to a teammate who shot and scored;
    ``match_bumps`` counts every bump against an opponent, demos included.
    """

    car_id: int = 0
    team: Team = Team.BLUE

    phys: PhysObj = field(default_factory=PhysObj)
    phys_inv: PhysObj = field(default_factory=PhysObj)
    car_state: CarState = field(default_factory=CarState)

    match_goals: int = 0
    match_saves: int = 0
    match_assists: int = 0
    match_shots: int = 0
    match_shot_passes: int = 0
    match_bumps: int = 0
    match_demos: int = 0
    boost_pickups: int = 0

    has_jump: bool = False
    has_flip: bool = False
    boost_fraction: float = 0.0

    # Touched the ball on any tick of the step.
    ball_touched_step: bool = False
    # Touching the ball on the final tick of the step.
    ball_touched_tick: bool = False

    def update_from_car(self, car: Any, tick_count: int, tick_skip: int) -> None:
        """Refresh this player from a car exposing ``id``, ``team`` and ``get_state()``."""
        self.car_id = car.id
        self.team = Team(car.team)
        new_state: CarState = car.get_state()

        if new_state.is_demoed and new_state.pos.z == DEMOED_POS_Z:
            new_state = replace(
                new_state,
                pos=self.car_state.pos,
                vel=self.car_state.vel,
                ang_vel=self.car_state.ang_vel,
            )

        self.car_state = new_state
        self.phys = PhysObj.from_state(new_state)
        self.phys_inv = self.phys.invert()

        hit = new_state.ball_hit_info
        if hit.is_valid:
            self.ball_touched_step = hit.tick_count_when_hit >= tick_count - tick_skip
            self.ball_touched_tick = hit.tick_count_when_hit == tick_count - 1
        else:
            self.ball_touched_step = self.ball_touched_tick = False

        self.has_jump = not new_state.has_jumped
        self.has_flip = (
            not new_state.has_double_jumped
            and not new_state.has_flipped
            and new_state.air_time_since_jump < DOUBLEJUMP_MAX_DELAY
        )
        self.boost_fraction = new_state.boost / 100

    def get_phys(self, inverted: bool) -> PhysObj:
        """Physics as seen from orange's side when ``inverted``, else as is."""
        return self.phys_inv if inverted else self.phys