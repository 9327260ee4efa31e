import os
import math
import pygame
from config import BG, WHITE, GRAY, BLUE, RED, MAX_ARENA_PX
from geometry import clamp, deg_to_rad, normalize_angle_deg

HEADER_H = 96
SLIDER_H = 16


def try_set_window_icon(base_dir):
    png_path = os.path.join(base_dir, "img", "icon.png")
    if not os.path.isfile(png_path):
        return
    try:
        pygame.display.set_icon(pygame.image.load(png_path))
    except pygame.error:
        pass


def arena_diameter(w, h):
    return max(40, int(min(w * 0.9, h * 0.65, MAX_ARENA_PX)))


class Layout:
    """Screen placement of the arena and its widgets for one window size."""

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.diameter = arena_diameter(w, h)
        self.center = (w // 2, HEADER_H + self.diameter // 2 + 10)
        bottom = self.center[1] + self.diameter // 2
        sw = max(80, (self.diameter - 40) // 2)
        self.sliders = {
            "left": pygame.Rect(w // 2 - 20 - sw, bottom + 40, sw, SLIDER_H),
            "right": pygame.Rect(w // 2 + 20, bottom + 40, sw, SLIDER_H),
        }
        self.btn_start = pygame.Rect(0, 0, 180, 48)
        self.btn_start.center = (self.center[0], self.center[1] + 30)
        self.rule_buttons = {}
        bx = self.center[0] - 130
        for name in ("multi", "classic"):
            r = pygame.Rect(bx, self.center[1] + 90, 120, 32)
            self.rule_buttons[name] = r
            bx += 140
        self.hint_y = bottom + 84

    def to_screen(self, x, y):
        return (self.center[0] + x, self.center[1] + y)


def slider_fraction(rect, mx):
    return clamp((mx - rect.x) / max(1, rect.w), 0.0, 1.0)


def draw_arena(screen, layout):
    screen.fill(BG)
    r = layout.diameter // 2
    pygame.draw.circle(screen, GRAY, layout.center, r - 2, 2)


def arc_points(layout, angle_deg, span_deg, radius, steps=24):
    pts = []
    a0 = angle_deg - span_deg / 2
    for i in range(steps + 1):
        a = deg_to_rad(a0 + span_deg * i / steps)
        pts.append(layout.to_screen(math.cos(a) * radius, math.sin(a) * radius))
    return pts


def draw_paddle(screen, layout, angle_deg, span_deg, radius, thickness, color=WHITE):
    pts = arc_points(layout, angle_deg, span_deg, radius)
    w = max(1, int(round(thickness)))
    pygame.draw.lines(screen, color, False, pts, w)
    for p in (pts[0], pts[-1]):
        pygame.draw.circle(screen, color, (int(p[0]), int(p[1])), max(1, w // 2))


def draw_balls(screen, layout, snap):
    r = max(1, int(round(snap.ball_radius)))
    for b in snap.balls:
        x, y = layout.to_screen(b.x, b.y)
        pygame.draw.circle(screen, WHITE, (int(x), int(y)), r)


def draw_header(screen, font, small, layout, score, high_score):
    lx = layout.w // 2 - layout.diameter // 4
    rx = layout.w // 2 + layout.diameter // 4
    for x, label, value in ((lx, "SCORE:", score), (rx, "HIGHSCORE:", high_score)):
        t = small.render(label, True, GRAY)
        screen.blit(t, t.get_rect(center=(x, 28)))
        v = font.render(str(value), True, WHITE)
        screen.blit(v, v.get_rect(center=(x, 62)))


def draw_button(screen, font, rect, text, active=False):
    bg = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    bg.fill((255, 255, 255, 26 if not active else 70))
    screen.blit(bg, rect.topleft)
    pygame.draw.rect(screen, WHITE if active else GRAY, rect, 2, border_radius=12)
    surf = font.render(text, True, WHITE if active else (210, 210, 210))
    screen.blit(surf, surf.get_rect(center=rect.center))


def draw_overlay(screen, big, font, small, layout, title, subtitle, button_text, rules_name):
    r = layout.diameter // 2
    panel = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
    pygame.draw.circle(panel, (0, 0, 0, 170), (r, r), r)
    screen.blit(panel, (layout.center[0] - r, layout.center[1] - r))

    t = big.render(title, True, WHITE)
    screen.blit(t, t.get_rect(center=(layout.center[0], layout.center[1] - 70)))
    if subtitle:
        s = font.render(subtitle, True, WHITE)
        screen.blit(s, s.get_rect(center=(layout.center[0], layout.center[1] - 24)))
    draw_button(screen, font, layout.btn_start, button_text, active=True)
    for name, rect in layout.rule_buttons.items():
        draw_button(screen, small, rect, name.upper(), active=(name == rules_name))


def draw_paddle_slider(screen, small, rect, value, label, color):
    pygame.draw.rect(screen, (0, 0, 0), rect, border_radius=9)
    pygame.draw.rect(screen, GRAY, rect, 2, border_radius=9)
    knob_x = rect.x + int(rect.w * clamp(value, 0.0, 1.0))
    knob = pygame.Rect(0, 0, 12, rect.h + 8)
    knob.center = (knob_x, rect.centery)
    pygame.draw.rect(screen, color, knob, border_radius=6)
    t = small.render(label, True, GRAY)
    screen.blit(t, (rect.x, rect.y - 20))


def draw_hints(screen, small, layout):
    lines = ["A/D for left paddle, ←/→ for right paddle.",
             "Don't let the ball escape the circle!"]
    y = layout.hint_y
    for line in lines:
        t = small.render(line, True, GRAY)
        screen.blit(t, t.get_rect(center=(layout.w // 2, y)))
        y += 22


def draw_debug(screen, small, fps, snap, speeds):
    lines = [
        (f"FPS: {fps:5.1f}   rules:{snap.rules}   state:{snap.state.value}", GRAY),
        (f"LEFT  {normalize_angle_deg(snap.left_angle):6.1f}   RIGHT {normalize_angle_deg(snap.right_angle):6.1f}", GRAY),
    ]
    for b in snap.balls:
        lines.append((f"BALL{b.id:<3} x={b.x:7.1f} y={b.y:7.1f} v={speeds.get(b.id, 0.0):6.2f}", WHITE))
    y = 10
    for text, col in lines:
        surf = small.render(text, True, col)
        screen.blit(surf, (10, y))
        y += 18


PADDLE_COLORS = {"left": BLUE, "right": RED}
