from dataclasses import dataclass

W, H = 640, 780
FPS = 60

BG = (10, 10, 14)
WHITE = (235, 235, 235)
RED = (235, 70, 70)
BLUE = (80, 150, 255)
GRAY = (130, 130, 130)
YELLOW = (245, 220, 80)

# Normalized space: arena diameter == 1.
BASE_SIZE = 500
MAX_ARENA_PX = 500
BALL_R = 10 / BASE_SIZE
ARC_THICK = 10 / BASE_SIZE
ARC_R = 0.5 - ARC_THICK / 2
BALL_SPEED = 3 / BASE_SIZE      # per tick
BOUNCE_NUDGE = 2 / BASE_SIZE

# Logical tick rate; every per-tick speed above assumes it.
TICK_RATE = 60
MAX_TICKS_PER_FRAME = 5

ARC_SPAN_DEG = 60.0
ARC_HALF_DEG = ARC_SPAN_DEG / 2
PADDLE_SPEED_DEG = 3.0
PADDLE_REACH_DEG = 90.0 - ARC_HALF_DEG

LEFT_START_DEG = 180.0
RIGHT_START_DEG = 0.0

HIGHSCORE_FILE = "highscore.txt"


@dataclass(frozen=True)
class Rules:
    name: str
    speed_multiplier: float
    speedup_every: int      # bounces between speed-ups, 1 = every bounce
    jitter_deg: float       # +/- rotation applied after a bounce
    spawn_every: int        # extra ball every N bounces, 0 = never


RULES = {
    "multi":   Rules("multi",   speed_multiplier=1.15, speedup_every=1, jitter_deg=7.5, spawn_every=5),
    "classic": Rules("classic", speed_multiplier=1.20, speedup_every=3, jitter_deg=5.0, spawn_every=0),
}

DEFAULT_RULES = RULES["multi"]

SPARK_LIFE = (0.18, 0.42)
SPARK_N = 18
