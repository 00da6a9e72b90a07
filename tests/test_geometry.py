import math

import pytest

from cubcaster.geometry import (
    TWO_PI,
    Vector,
    calc_hyp,
    deg_to_rad,
    reset_angle,
)


def test_reset_angle_wraps_negative():
    assert reset_angle(-0.5) == pytest.approx(TWO_PI - 0.5)


def test_reset_angle_wraps_above_full_turn():
    assert reset_angle(TWO_PI + 0.25) == pytest.approx(0.25)


@pytest.mark.parametrize("angle", [0.0, 1.0, math.pi, TWO_PI])
def test_reset_angle_keeps_values_in_range(angle):
    assert reset_angle(angle) == angle


def test_reset_angle_only_one_turn():
    assert reset_angle(-TWO_PI - 1.0) == pytest.approx(-1.0)


def test_deg_to_rad_half_turn():
    assert deg_to_rad(180) == pytest.approx(math.pi)


def test_deg_to_rad_is_linear():
    assert deg_to_rad(60) * 3 == pytest.approx(deg_to_rad(180))


def test_calc_hyp_right_triangle():
    assert calc_hyp(Vector(0, 0), Vector(3, 4)) == pytest.approx(5.0)


def test_calc_hyp_symmetric_and_zero_for_same_point():
    a = Vector(1.5, -2.0)
    b = Vector(-4.0, 7.25)
    assert calc_hyp(a, b) == pytest.approx(calc_hyp(b, a))
    assert calc_hyp(a, a) == 0.0


def test_vector_distance_matches_calc_hyp():
    a = Vector(2.0, 3.0)
    b = Vector(5.5, -1.0)
    assert a.distance(b) == calc_hyp(a, b)


def test_vector_scaled_returns_new_vector():
    v = Vector(2.0, -3.0)
    scaled = v.scaled(2.0)
    assert scaled == Vector(4.0, -6.0)
    assert v == Vector(2.0, -3.0)


def test_vector_scaled_scales_distance():
    a = Vector(1.0, 2.0)
    b = Vector(4.0, 6.0)
    assert a.scaled(3).distance(b.scaled(3)) == pytest.approx(3 * a.distance(b))


def test_vector_add_and_sub_are_inverse():
    a = Vector(1.25, 2.5)
    b = Vector(-0.5, 4.0)
    assert (a + b) - b == a