import math
import random

import pytest

from balls import Ball
from collision import BOUNCE, CONTINUE, MISS, CollisionEngine
from config import ARC_R, BALL_R, BOUNCE_NUDGE
from geometry import Vec2, deg_to_rad, reflect
from paddles import Paddle, make_left, make_right

LIMIT = ARC_R - BALL_R


def engine(jitter=0.0, seed=0):
    return CollisionEngine(random.Random(seed), jitter_deg=jitter)


def ball_near_edge(angle_deg, speed=0.01, r=LIMIT - 0.005):
    a = deg_to_rad(angle_deg)
    return Ball(0, Vec2.from_angle(a, r), Vec2.from_angle(a, speed))


def test_inside_continues():
    b = Ball(0, Vec2(0, 0), Vec2(0.01, 0))
    res = engine().step(b, make_left(), make_right())
    assert res.kind == CONTINUE
    assert (res.pos.x, res.pos.y) == pytest.approx((0.01, 0))
    assert (b.pos.x, b.pos.y) == (0, 0)


def test_zero_distance_is_skipped():
    b = Ball(0, Vec2(0, 0), Vec2(0, 0))
    res = engine().step(b, make_left(), make_right(), arc_radius=0.0, ball_radius=0.0)
    assert res.kind == CONTINUE


def test_head_on_bounce_off_left():
    b = Ball(0, Vec2(-0.465, 0), Vec2(-0.01, 0))
    res = engine().step(b, make_left(), make_right(), speed_multiplier=1.15)
    assert res.kind == BOUNCE
    assert res.paddle == "left"
    assert res.contact_angle == pytest.approx(180)
    assert (res.vel.x, res.vel.y) == pytest.approx((0.0115, 0))
    assert res.pos.x == pytest.approx(-0.475 + BOUNCE_NUDGE)


def test_oblique_bounce_reflects_about_normal():
    b = ball_near_edge(20)
    b.vel = Vec2(0.008, -0.003)
    res = engine().step(b, make_left(), make_right(), speed_multiplier=1.0)
    assert res.kind == BOUNCE
    new_pos = b.pos + b.vel
    n = new_pos.normalized()
    assert res.vel.dot(n) == pytest.approx(-b.vel.dot(n))
    assert res.vel.length() == pytest.approx(b.vel.length())


def test_speed_multiplier_and_jitter_bound():
    eng = engine(jitter=7.5, seed=42)
    for i in range(200):
        b = ball_near_edge(180 + (i % 50) - 25)
        res = eng.step(b, make_left(), make_right(), speed_multiplier=1.15)
        assert res.kind == BOUNCE
        assert res.vel.length() == pytest.approx(b.vel.length() * 1.15)
        n = (b.pos + b.vel).normalized()
        pure = reflect(b.vel, n)
        cos = pure.dot(res.vel) / (pure.length() * res.vel.length())
        assert math.degrees(math.acos(min(1.0, cos))) <= 7.5 + 1e-6


def test_gap_is_a_miss():
    b = ball_near_edge(45)
    res = engine().step(b, make_left(), make_right())
    assert res.kind == MISS
    assert res.contact_angle == pytest.approx(45)


def test_hit_across_seam():
    right = make_right()
    right.angle = 10
    res = engine().step(ball_near_edge(350), make_left(), right)
    assert res.kind == BOUNCE
    assert res.paddle == "right"


def test_window_edges():
    res = engine().step(ball_near_edge(209.9), make_left(), make_right())
    assert res.kind == BOUNCE
    res = engine().step(ball_near_edge(210.5), make_left(), make_right())
    assert res.kind == MISS


def test_left_wins_when_windows_overlap():
    left = make_left()
    right = Paddle("right", 200, center=180)
    res = engine().step(ball_near_edge(190), left, right)
    assert res.paddle == "left"


def test_ball_heading_back_in_is_not_rescored():
    b = Ball(0, Vec2(-0.48, 0), Vec2(0.001, 0))
    res = engine().step(b, make_left(), make_right())
    assert res.kind == CONTINUE
