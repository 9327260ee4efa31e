from dataclasses import dataclass
from typing import Optional

from config import (ARC_HALF_DEG, PADDLE_SPEED_DEG, PADDLE_REACH_DEG,
                    LEFT_START_DEG, RIGHT_START_DEG)
from geometry import clamp, clamp_angle, normalize_angle_deg, signed_delta


@dataclass(frozen=True)
class Intent:
    """What an input device asks of one paddle for one tick.

    Either a discrete step (-1, 0, +1) scaled by the paddle speed, or an
    absolute target angle in degrees when `target` is set.
    """
    step: int = 0
    target: Optional[float] = None

    @classmethod
    def hold(cls):
        return cls()

    @classmethod
    def step_by(cls, direction):
        return cls(step=(direction > 0) - (direction < 0))

    @classmethod
    def to(cls, angle):
        return cls(target=float(angle))


class Paddle:
    def __init__(self, name, start, center, reach=PADDLE_REACH_DEG,
                 half_span=ARC_HALF_DEG, speed=PADDLE_SPEED_DEG):
        self.name = name
        self.start = normalize_angle_deg(start)
        self.center = normalize_angle_deg(center)
        self.reach = float(reach)
        self.half_span = float(half_span)
        self.speed = float(speed)
        self.angle = self.start

    def reset(self):
        self.angle = self.start

    def covers(self, angle):
        return abs(signed_delta(angle, self.angle)) <= self.half_span

    def limits(self):
        return (normalize_angle_deg(self.center - self.reach),
                normalize_angle_deg(self.center + self.reach))

    @property
    def fraction(self):
        """Position inside the legal range, 0.0 at the low edge, 1.0 at the high edge."""
        if self.reach <= 0:
            return 0.5
        return (signed_delta(self.angle, self.center) + self.reach) / (2 * self.reach)

    def angle_at(self, fraction):
        f = clamp(fraction, 0.0, 1.0)
        return normalize_angle_deg(self.center - self.reach + f * 2 * self.reach)

    def __repr__(self):
        return f"Paddle({self.name!r}, angle={self.angle:.2f})"


def make_left():
    return Paddle("left", LEFT_START_DEG, center=180.0)


def make_right():
    return Paddle("right", RIGHT_START_DEG, center=0.0)


class PaddleController:
    def move(self, paddle: Paddle, intent: Intent):
        if intent.target is not None:
            wanted = intent.target
        elif intent.step:
            wanted = paddle.angle + ((intent.step > 0) - (intent.step < 0)) * paddle.speed
        else:
            wanted = paddle.angle
        paddle.angle = clamp_angle(wanted, paddle.center, paddle.reach)
        return paddle.angle

    def update(self, left: Paddle, right: Paddle, left_intent: Intent, right_intent: Intent):
        self.move(left, left_intent)
        self.move(right, right_intent)
