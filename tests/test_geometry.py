import math

import pytest

from geometry import (Vec2, clamp_angle, deg_to_rad, normalize_angle_deg, rad_to_deg,
                      reflect, rotate, signed_delta)


@pytest.mark.parametrize("a, expected", [
    (0, 0), (360, 0), (720, 0), (-30, 330), (-360, 0), (359.5, 359.5), (405, 45), (-1e-20, 0),
])
def test_normalize_angle(a, expected):
    assert normalize_angle_deg(a) == pytest.approx(expected)
    assert 0 <= normalize_angle_deg(a) < 360


@pytest.mark.parametrize("a, b, expected", [
    (10, 350, 20), (350, 10, -20), (180, 0, 180), (0, 180, 180), (90, 0, 90), (0, 90, -90), (725, 0, 5),
])
def test_signed_delta(a, b, expected):
    assert signed_delta(a, b) == pytest.approx(expected)


def test_signed_delta_magnitude_bounded():
    for a in range(-720, 720, 17):
        for b in range(0, 360, 23):
            d = signed_delta(a, b)
            assert -180 < d <= 180


def test_degree_radian_conversion():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    assert rad_to_deg(math.pi / 2) == pytest.approx(90)


def test_reflect_flips_normal_component():
    v = Vec2(0.3, -0.7)
    n = Vec2(1, 1).normalized()
    r = reflect(v, n)
    assert r.dot(n) == pytest.approx(-v.dot(n))
    assert r.length() == pytest.approx(v.length())


def test_reflect_head_on():
    r = reflect(Vec2(-1, 0.5), Vec2(-1, 0))
    assert (r.x, r.y) == pytest.approx((1, 0.5))


def test_rotate():
    r = rotate(Vec2(1, 0), math.pi / 2)
    assert (r.x, r.y) == pytest.approx((0, 1), abs=1e-12)


@pytest.mark.parametrize("theta", [0.0, 0.1, -0.13, 1.0, math.pi, 5.5])
def test_rotate_keeps_length(theta):
    v = Vec2(0.004, -0.0051)
    assert rotate(v, theta).length() == pytest.approx(v.length())


@pytest.mark.parametrize("angle, center, half, expected", [
    (100, 180, 60, 120),
    (250, 180, 60, 240),
    (200, 180, 60, 200),
    (90, 0, 60, 60),
    (270, 0, 60, 300),
    (170, 0, 60, 60),
    (190, 0, 60, 300),
    (-45, 0, 60, 315),
    (420, 0, 60, 60),
])
def test_clamp_angle(angle, center, half, expected):
    assert clamp_angle(angle, center, half) == pytest.approx(expected)


def test_vec2_angle_deg():
    assert Vec2(-1, 0).angle_deg() == pytest.approx(180)
    assert Vec2(0, -1).angle_deg() == pytest.approx(270)
    assert Vec2.from_angle(deg_to_rad(45), 2).length() == pytest.approx(2)
