import pytest

from rlgsc import common_values as cv
from rlgsc.common_values import Team, team_from_y
from rlgsc.math3d import Vec, is_ball_scored


def test_boost_locations_are_distinct_pads():
    locations = list(cv.BOOST_LOCATIONS)
    assert len(locations) == cv.BOOST_LOCATIONS_AMOUNT == 34
    for i, a in enumerate(locations):
        for b in locations[i + 1:]:
            assert Vec(a.x, a.y, a.z).dist_sq_2d(Vec(b.x, b.y, b.z)) >= 10


def test_boost_locations_are_inside_the_field():
    for loc in cv.BOOST_LOCATIONS:
        assert is_ball_scored(loc) is False


def test_boost_locations_split_by_side():
    teams = [team_from_y(loc.y) for loc in cv.BOOST_LOCATIONS]
    assert teams[:15] == [Team.BLUE] * 15
    assert teams[15:] == [Team.ORANGE] * 19


def test_boost_locations_mirror_onto_reversed_index():
    n = cv.BOOST_LOCATIONS_AMOUNT
    for i, loc in enumerate(cv.BOOST_LOCATIONS):
        inverted = loc * Vec(-1, -1, 1)
        assert inverted.dist_sq_2d(cv.BOOST_LOCATIONS[n - i - 1]) < 10


def test_goal_centres_are_opposite():
    assert cv.ORANGE_GOAL_CENTER * Vec(1, -1, 1) == cv.BLUE_GOAL_CENTER
    assert cv.ORANGE_GOAL_BACK * Vec(1, -1, 1) == cv.BLUE_GOAL_BACK
    assert cv.ORANGE_GOAL_BACK.y == cv.BACK_NET_Y


@pytest.mark.parametrize(
    "y, team",
    [(-1.0, Team.BLUE), (-5000.0, Team.BLUE), (0.0, Team.ORANGE), (1.0, Team.ORANGE)],
)
def test_team_from_y(y, team):
    assert team_from_y(y) is team


def test_team_from_y_indices_match_team_constants():
    assert int(team_from_y(-100.0)) == 0
    assert int(team_from_y(100.0)) == 1