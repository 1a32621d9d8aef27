"""Field dimensions, speed limits and boost pad locations."""

from __future__ import annotations

from enum import IntEnum

from .math3d import Vec


class Team(IntEnum):
    """The two teams of a match."""

    BLUE = 0
    ORANGE = 1


def team_from_y(y: float) -> Team:
    """Team whose half contains the given Y coordinate's goal side."""
    return Team.BLUE if y < 0 else Team.ORANGE


SIDE_WALL_X = 4096.0
BACK_WALL_Y = 5120.0
CEILING_Z = 2044.0
BACK_NET_Y = 6000.0

GOAL_HEIGHT = 642.775
GRAVITY_Z = -650.0
BOOST_CONSUMED_PER_SECOND = 100.0 / 3.0

ORANGE_GOAL_CENTER = Vec(0.0, BACK_WALL_Y, GOAL_HEIGHT / 2)
BLUE_GOAL_CENTER = Vec(0.0, -BACK_WALL_Y, GOAL_HEIGHT / 2)

# Often more useful than the centre.
ORANGE_GOAL_BACK = Vec(0.0, BACK_NET_Y, GOAL_HEIGHT / 2)
BLUE_GOAL_BACK = Vec(0.0, -BACK_NET_Y, GOAL_HEIGHT / 2)

BALL_RADIUS = 92.75

BALL_MAX_SPEED = 6000.0
CAR_MAX_SPEED = 2300.0
SUPERSONIC_THRESHOLD = 2200.0
CAR_MAX_ANG_VEL = 5.5

BLUE_TEAM = 0
ORANGE_TEAM = 1
NUM_ACTIONS = 8

BOOST_LOCATIONS: tuple[Vec, ...] = tuple(
    Vec(x, y, z)
    for x, y, z in (
        (0.0, -4240.0, 70.0),
        (-1792.0, -4184.0, 70.0),
        (1792.0, -4184.0, 70.0),
        (-3072.0, -4096.0, 73.0),
        (3072.0, -4096.0, 73.0),
        (-940.0, -3308.0, 70.0),
        (940.0, -3308.0, 70.0),
        (0.0, -2816.0, 70.0),
        (-3584.0, -2484.0, 70.0),
        (3584.0, -2484.0, 70.0),
        (-1788.0, -2300.0, 70.0),
        (1788.0, -2300.0, 70.0),
        (-2048.0, -1036.0, 70.0),
        (0.0, -1024.0, 70.0),
        (2048.0, -1036.0, 70.0),
        (-3584.0, 0.0, 73.0),
        (-1024.0, 0.0, 70.0),
        (1024.0, 0.0, 70.0),
        (3584.0, 0.0, 73.0),
        (-2048.0, 1036.0, 70.0),
        (0.0, 1024.0, 70.0),
        (2048.0, 1036.0, 70.0),
        (-1788.0, 2300.0, 70.0),
        (1788.0, 2300.0, 70.0),
        (-3584.0, 2484.0, 70.0),
        (3584.0, 2484.0, 70.0),
        (0.0, 2816.0, 70.0),
        (-940.0, 3310.0, 70.0),
        (940.0, 3308.0, 70.0),
        (-3072.0, 4096.0, 73.0),
        (3072.0, 4096.0, 73.0),
        (-1792.0, 4184.0, 70.0),
        (1792.0, 4184.0, 70.0),
        (0.0, 4240.0, 70.0),
    )
)

BOOST_LOCATIONS_AMOUNT = len(BOOST_LOCATIONS)