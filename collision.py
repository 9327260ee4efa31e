import random
from dataclasses import dataclass
from typing import Optional

from config import ARC_R, BALL_R, BOUNCE_NUDGE, DEFAULT_RULES
from geometry import Vec2, deg_to_rad, reflect, rotate

CONTINUE = "continue"
BOUNCE = "bounce"
MISS = "miss"


@dataclass
class StepResult:
    kind: str
    pos: Optional[Vec2] = None
    vel: Optional[Vec2] = None
    paddle: Optional[str] = None
    contact_angle: Optional[float] = None

    @property
    def bounced(self): return self.kind == BOUNCE

    @property
    def missed(self): return self.kind == MISS


class CollisionEngine:
    """Moves a ball one tick and resolves its contact with the arena edge."""

    def __init__(self, rng: random.Random = None, jitter_deg=DEFAULT_RULES.jitter_deg, nudge=BOUNCE_NUDGE):
        self.rng = rng or random.Random()
        self.jitter_deg = float(jitter_deg)
        self.nudge = float(nudge)

    def jitter(self):
        if self.jitter_deg <= 0:
            return 0.0
        return deg_to_rad(self.rng.uniform(-self.jitter_deg, self.jitter_deg))

    def step(self, ball, left, right, arc_radius=ARC_R, ball_radius=BALL_R, speed_multiplier=1.0) -> StepResult:
        new_pos = ball.pos + ball.vel
        dist = new_pos.length()
        limit = arc_radius - ball_radius

        # zero distance: normal undefined, nothing to test
        if dist <= limit or dist <= 1e-12:
            return StepResult(CONTINUE, new_pos, ball.vel)

        n = new_pos * (1.0 / dist)
        # already heading back in after a jittered bounce
        if ball.vel.dot(n) <= 0:
            return StepResult(CONTINUE, new_pos, ball.vel)

        angle = new_pos.angle_deg()

        hit = None
        if left.covers(angle):
            hit = left
        elif right.covers(angle):
            hit = right
        if hit is None:
            return StepResult(MISS, new_pos, ball.vel, contact_angle=angle)

        vel = reflect(ball.vel, n) * speed_multiplier
        vel = rotate(vel, self.jitter())
        pos = new_pos - n * self.nudge
        return StepResult(BOUNCE, pos, vel, paddle=hit.name, contact_angle=angle)
