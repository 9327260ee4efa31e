import math
import random

import pytest

from config import BALL_SPEED, Rules
from game import GameSession, InputSnapshot
from geometry import Vec2, deg_to_rad

# Straight-line rules: no jitter, no speed-up, extra ball every 5 bounces.
STEADY = Rules("steady", speed_multiplier=1.0, speedup_every=1, jitter_deg=0.0, spawn_every=5)


class FakeStore:
    def __init__(self, value=0, fail=None):
        self.value = value
        self.fail = fail
        self.saved = []

    def load(self):
        return self.value

    def save(self, value):
        if self.fail is not None:
            raise self.fail
        self.saved.append(value)
        self.value = value


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def session(store):
    return GameSession(rng=random.Random(1234), store=store)


@pytest.fixture
def steady_session(store):
    return GameSession(rules=STEADY, rng=random.Random(99), store=store)


def aim(ball, heading_deg, speed=BALL_SPEED, pos=None):
    ball.pos = pos if pos is not None else Vec2(0, 0)
    ball.vel = Vec2.from_angle(deg_to_rad(heading_deg), speed)
    return ball


def run_until(session, predicate, limit=2000, inputs=None):
    inputs = inputs or InputSnapshot()
    reports = []
    for _ in range(limit):
        reports.append(session.tick(inputs))
        if predicate(reports[-1]):
            return reports
    raise AssertionError("condition not reached in %d ticks" % limit)


def ticks_to_edge(speed=BALL_SPEED, limit=0.47):
    return int(math.floor(limit / speed)) + 1
