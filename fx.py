import math
import random
import pygame
from config import SPARK_LIFE, SPARK_N, WHITE, YELLOW, BLUE


class Sparks:
    """Short-lived dots thrown off a paddle when a ball bounces."""

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self.parts = []

    def burst(self, center, inward, scale, color=WHITE, n=SPARK_N):
        """`inward` is the direction (radians) pointing back into the arena."""
        cx, cy = center
        for _ in range(n):
            a = inward + self.rng.uniform(-1.1, 1.1)
            s = self.rng.uniform(0.25, 0.9) * scale
            self.parts.append({
                "p": [cx, cy],
                "v": [math.cos(a) * s, math.sin(a) * s],
                "life": self.rng.uniform(*SPARK_LIFE),
                "size": self.rng.randint(1, 3),
                "col": color,
            })

    def update(self, dt):
        alive = []
        for p in self.parts:
            p["life"] -= dt
            if p["life"] <= 0:
                continue
            p["p"][0] += p["v"][0] * dt
            p["p"][1] += p["v"][1] * dt
            p["v"][0] *= 0.90 ** (dt * 60.0)
            p["v"][1] *= 0.90 ** (dt * 60.0)
            alive.append(p)
        self.parts = alive

    def clear(self):
        self.parts = []

    def draw(self, surf):
        for p in self.parts:
            x, y = p["p"]
            pygame.draw.circle(surf, p["col"], (int(x), int(y)), p["size"])


class Confetti:
    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self.parts = []

    def burst(self, center, scale, n=160):
        cx, cy = center
        for _ in range(n):
            a = self.rng.random() * math.tau
            s = self.rng.uniform(0.4, 1.6) * scale
            self.parts.append({
                "p": [cx, cy],
                "v": [math.cos(a) * s, math.sin(a) * s - 0.5 * scale],
                "g": self.rng.uniform(1.2, 2.2) * scale,
                "life": self.rng.uniform(1.2, 2.2),
                "size": self.rng.randint(2, 4),
                "col": self.rng.choice([YELLOW, BLUE, WHITE, (235, 70, 70), (120, 240, 170)]),
                "spin": self.rng.uniform(-10, 10),
                "ang": self.rng.uniform(0, math.tau),
            })

    def update(self, dt):
        alive = []
        for p in self.parts:
            p["life"] -= dt
            if p["life"] <= 0:
                continue
            p["v"][1] += p["g"] * dt
            p["p"][0] += p["v"][0] * dt
            p["p"][1] += p["v"][1] * dt
            p["ang"] += p["spin"] * dt
            alive.append(p)
        self.parts = alive

    def clear(self):
        self.parts = []

    def draw(self, surf):
        for p in self.parts:
            x, y = p["p"]
            s = p["size"]
            dx = math.cos(p["ang"]) * s
            dy = math.sin(p["ang"]) * s
            pygame.draw.line(surf, p["col"], (x - dx, y - dy), (x + dx, y + dy), s)
