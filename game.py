import enum
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from config import (ARC_R, ARC_THICK, BALL_R, BALL_SPEED, DEFAULT_RULES,
                    MAX_TICKS_PER_FRAME, TICK_RATE, Rules)
from balls import BallSet
from collision import CollisionEngine
from paddles import Intent, PaddleController, make_left, make_right
from score import ScoreKeeper

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


@dataclass(frozen=True)
class InputSnapshot:
    """Input polled once at the top of a tick. Later writes before the next poll win."""
    left: Intent = Intent()
    right: Intent = Intent()
    start: bool = False


@dataclass
class TickReport:
    state: GameState
    bounces: List[Tuple[float, float]] = field(default_factory=list)
    spawned: int = 0
    missed: bool = False
    miss_at: Optional[Tuple[float, float]] = None
    new_record: bool = False


@dataclass(frozen=True)
class BallView:
    id: int
    x: float
    y: float


@dataclass(frozen=True)
class Snapshot:
    state: GameState
    score: int
    high_score: int
    left_angle: float
    right_angle: float
    arc_span: float
    balls: Tuple[BallView, ...]
    ball_radius: float
    arc_radius: float
    arc_thickness: float
    rules: str


class GameSession:
    """One arena: two paddles, the balls in flight and the score.

    Created once per process; start() resets it for every new round.
    """

    def __init__(self, rules: Rules = DEFAULT_RULES, rng: random.Random = None, store=None, high_score=None):
        self.rng = rng or random.Random()
        self.rules = rules
        self.state = GameState.IDLE
        self.left = make_left()
        self.right = make_right()
        self.controller = PaddleController()
        self.balls = BallSet(self.rng, BALL_SPEED)
        self.engine = CollisionEngine(self.rng, jitter_deg=rules.jitter_deg)
        self.scores = ScoreKeeper(store, high_score)
        self.bounces = 0
        self.arc_radius = ARC_R
        self.ball_radius = BALL_R

    @property
    def score(self):
        return self.scores.score

    @property
    def high_score(self):
        return self.scores.high_score

    @property
    def playing(self):
        return self.state is GameState.PLAYING

    def set_rules(self, rules: Rules):
        if self.playing:
            return False
        self.rules = rules
        self.engine.jitter_deg = rules.jitter_deg
        return True

    def start(self):
        if self.playing:
            return False
        self.scores.reset()
        self.bounces = 0
        self.balls.clear(reset_ids=True)
        self.balls.spawn()
        self.left.reset()
        self.right.reset()
        self.state = GameState.PLAYING
        logger.info("session started (rules=%s, high score %d)", self.rules.name, self.high_score)
        return True

    def _speedup_for_next_bounce(self):
        every = max(1, self.rules.speedup_every)
        if (self.bounces + 1) % every == 0:
            return self.rules.speed_multiplier
        return 1.0

    def _end(self, report: TickReport):
        self.state = GameState.GAME_OVER
        self.balls.clear()
        report.new_record = self.scores.on_session_end(self.score)
        logger.info("game over: score %d, bounces %d", self.score, self.bounces)

    def tick(self, inputs: InputSnapshot = None) -> TickReport:
        inputs = inputs or InputSnapshot()
        if inputs.start:
            self.start()

        report = TickReport(self.state)
        if not self.playing:
            return report

        self.controller.update(self.left, self.right, inputs.left, inputs.right)

        before = self.bounces
        for ball in self.balls:
            res = self.engine.step(ball, self.left, self.right, self.arc_radius,
                                   self.ball_radius, self._speedup_for_next_bounce())
            if res.missed:
                report.missed = True
                report.miss_at = tuple(res.pos)
                break
            ball.pos = res.pos
            ball.vel = res.vel
            if res.bounced:
                self.bounces += 1
                report.bounces.append(tuple(res.pos))

        self.scores.on_bounces(len(report.bounces))

        if report.missed:
            self._end(report)
        else:
            report.spawned = len(self.balls.maybe_spawn_on_bounce(before, self.bounces, self.rules.spawn_every))

        report.state = self.state
        return report

    def snapshot(self, diameter=1.0) -> Snapshot:
        k = float(diameter)
        return Snapshot(
            state=self.state,
            score=self.score,
            high_score=self.high_score,
            left_angle=self.left.angle,
            right_angle=self.right.angle,
            arc_span=self.left.half_span * 2,
            balls=tuple(BallView(b.id, b.pos.x * k, b.pos.y * k) for b in self.balls),
            ball_radius=self.ball_radius * k,
            arc_radius=self.arc_radius * k,
            arc_thickness=ARC_THICK * k,
            rules=self.rules.name,
        )


def tick(session: GameSession, inputs: InputSnapshot = None) -> TickReport:
    return session.tick(inputs)


class FixedStep:
    """Turns variable frame times into a whole number of logical ticks."""

    def __init__(self, rate=TICK_RATE, max_steps=MAX_TICKS_PER_FRAME):
        self.dt = 1.0 / rate
        self.max_steps = max_steps
        self.acc = 0.0

    def advance(self, frame_dt: float) -> int:
        if frame_dt > 0:
            self.acc += frame_dt
        # allow for float error when frame_dt is an exact multiple of dt
        n = int((self.acc + 1e-9) / self.dt)
        if n > self.max_steps:
            n = self.max_steps
            self.acc = 0.0
        else:
            self.acc = max(0.0, self.acc - n * self.dt)
        return n

    def reset(self):
        self.acc = 0.0
