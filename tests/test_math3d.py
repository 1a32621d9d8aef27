import math

import pytest

from rlgsc import math3d
from rlgsc.math3d import Angle, Quat, RotMat, Vec, is_ball_scored, rand_float, rand_vec


def test_dot_of_self_is_length_squared():
    v = Vec(1.5, -2.0, 3.25)
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_dot_of_axes_is_zero():
    assert Vec(1, 0, 0).dot(Vec(0, 1, 0)) == 0


def test_normalized_has_unit_length():
    v = Vec(3.0, -7.0, 11.0).normalized()
    assert v.length() == pytest.approx(1.0)


def test_normalized_zero_vector_stays_zero():
    assert Vec().normalized() == Vec()


def test_dist_sq_2d_ignores_z():
    a = Vec(3.0, 4.0, 100.0)
    b = Vec(0.0, 0.0, -5.0)
    assert a.dist_sq_2d(b) == pytest.approx(Vec(3.0, 4.0, 0.0).length() ** 2)


def test_elementwise_multiply_and_divide_round_trip():
    v = Vec(2.0, -4.0, 8.0)
    scale = Vec(-1.0, 0.5, 4.0)
    product = v * scale
    restored = product / scale
    assert tuple(restored) == pytest.approx((2.0, -4.0, 8.0), abs=1e-6)
    assert tuple(product) == pytest.approx((-2.0, -2.0, 32.0), abs=1e-6)


def test_zero_angle_gives_identity():
    assert Angle().to_rot_mat() == RotMat()


@pytest.mark.parametrize("angle", [Angle(0.3, -0.7, 1.1), Angle(-2.5, 1.2, -0.4)])
def test_angle_rot_mat_is_orthonormal(angle):
    mat = angle.to_rot_mat()
    for axis in mat:
        assert axis.length() == pytest.approx(1.0)
    assert mat.forward.dot(mat.right) == pytest.approx(0.0, abs=1e-9)
    assert mat.forward.dot(mat.up) == pytest.approx(0.0, abs=1e-9)
    assert mat.right.dot(mat.up) == pytest.approx(0.0, abs=1e-9)


def test_rot_mat_indexing_matches_axes():
    mat = Angle(0.5, 0.2, 0.1).to_rot_mat()
    assert (mat[0], mat[1], mat[2]) == (mat.forward, mat.right, mat.up)


def test_quat_default_components():
    q = Quat()
    assert (q.w, q.x, q.y, q.z) == (1, 1, 1, 1)


@pytest.mark.parametrize(
    "angle",
    [Angle(), Angle(0.3, -0.7, 1.1), Angle(math.pi, 0.0, 0.0), Angle(-2.5, 1.2, -0.4)],
)
def test_quat_round_trip(angle):
    mat = angle.to_rot_mat()
    back = Quat.from_rot_mat(mat).to_rot_mat()
    assert tuple(back.forward) == pytest.approx(tuple(mat.forward), abs=1e-6)
    assert tuple(back.right) == pytest.approx(tuple(mat.right), abs=1e-6)
    assert tuple(back.up) == pytest.approx(tuple(mat.up), abs=1e-6)


def test_quat_from_identity_is_unit_w():
    q = Quat.from_rot_mat(RotMat())
    assert (q.w, q.x, q.y, q.z) == pytest.approx((1.0, 0.0, 0.0, 0.0))


def test_rand_float_in_range():
    for _ in range(200):
        assert -3.0 <= rand_float(-3.0, 2.0) <= 2.0


def test_rand_vec_in_bounds():
    low, high = Vec(-1, 10, 5), Vec(1, 20, 6)
    for _ in range(100):
        v = rand_vec(low, high)
        assert low.x <= v.x <= high.x
        assert low.y <= v.y <= high.y
        assert low.z <= v.z <= high.z


def test_ball_scored_threshold():
    limit = math3d.SOCCAR_GOAL_SCORE_BASE_THRESHOLD_Y + math3d.BALL_COLLISION_RADIUS_SOCCAR
    assert not is_ball_scored(Vec(0, 0, 100))
    assert not is_ball_scored(Vec(0, limit, 100))
    assert is_ball_scored(Vec(0, limit + 1, 100))
    assert is_ball_scored(Vec(0, -(limit + 1), 100))