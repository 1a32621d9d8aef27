import pytest

from rlgsc.action import Action, CarControls, GymSpace
from rlgsc.math3d import Angle, RotMat, Vec


def test_default_action_is_zero():
    assert list(Action()) == [0.0] * Action.ELEM_AMOUNT


def test_getitem_follows_field_order():
    values = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    action = Action(*values)
    assert [action[i] for i in range(Action.ELEM_AMOUNT)] == values
    assert list(action) == values
    assert action.jump == values[5]
    assert action.boost == values[6]


@pytest.mark.parametrize("index", [-1, 8, 100])
def test_getitem_out_of_range(index):
    with pytest.raises(IndexError):
        Action()[index]


def test_controls_round_trip():
    controls = CarControls(
        throttle=1.0, steer=-1.0, pitch=0.5, yaw=-0.5, roll=0.25,
        boost=True, jump=False, handbrake=True,
    )
    assert Action.from_controls(controls).to_controls() == controls


def test_buttons_need_exactly_one():
    controls = Action(0, 0, 0, 0, 0, jump=0.5, boost=1.0, handbrake=0.99).to_controls()
    assert controls.boost is True
    assert controls.jump is False
    assert controls.handbrake is False


def test_gym_space_size_init():
    space = GymSpace(4)
    assert list(space) == [0.0] * 4


def test_gym_space_accumulates():
    space = GymSpace()
    space += 1.5
    space += Vec(2.0, 3.0, 4.0)
    space += [5.0, 6.0]
    assert list(space) == [1.5, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert space[3] == 4.0


def test_gym_space_rot_mat_adds_three_axes():
    mat = Angle(0.4, 0.1, -0.3).to_rot_mat()
    space = GymSpace()
    space += mat
    assert len(space) == 9
    assert list(space) == [*mat.forward, *mat.right, *mat.up]


def test_gym_space_concatenates_other_space():
    a = GymSpace([1.0, 2.0])
    b = GymSpace([3.0])
    a += b
    assert list(a) == [1.0, 2.0, 3.0]
    assert list(b) == [3.0]


def test_gym_space_setitem():
    space = GymSpace(3)
    space[1] = 7.0
    assert list(space) == [0.0, 7.0, 0.0]
    space += RotMat()
    assert len(space) == 12