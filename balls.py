import math
import random
from dataclasses import dataclass, field

from config import BALL_SPEED
from geometry import Vec2


@dataclass
class Ball:
    id: int
    pos: Vec2 = field(default_factory=Vec2)
    vel: Vec2 = field(default_factory=Vec2)

    @property
    def speed(self):
        return self.vel.length()


class BallSet:
    def __init__(self, rng: random.Random = None, speed=BALL_SPEED):
        self.rng = rng or random.Random()
        self.speed = float(speed)
        self.balls = []
        self._next_id = 0

    def __len__(self):
        return len(self.balls)

    def __iter__(self):
        return iter(list(self.balls))

    def spawn(self) -> Ball:
        heading = self.rng.uniform(0.0, math.tau)
        ball = Ball(self._next_id, Vec2(0, 0), Vec2.from_angle(heading, self.speed))
        self._next_id += 1
        self.balls.append(ball)
        return ball

    def maybe_spawn_on_bounce(self, before: int, after: int, every: int):
        """Spawn one ball for each multiple of `every` crossed going from `before` to `after` bounces."""
        if every <= 0 or after <= before:
            return []
        n = after // every - max(0, before) // every
        return [self.spawn() for _ in range(n)]

    def clear(self, reset_ids=False):
        self.balls.clear()
        if reset_ids:
            self._next_id = 0
