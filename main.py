import logging
import math
import os
import pygame

from config import W, H, FPS, RULES, HIGHSCORE_FILE
from fx import Sparks, Confetti
from game import GameSession, GameState, InputSnapshot, FixedStep
from paddles import Intent
from score import HighScoreStore
from ui import (Layout, slider_fraction, try_set_window_icon, draw_arena, draw_paddle, draw_balls,
                draw_header, draw_overlay, draw_paddle_slider, draw_hints, draw_debug, PADDLE_COLORS)

logger = logging.getLogger("bounce")


def setup_logging():
    level = os.getenv("BOUNCE_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def highscore_path(base_dir):
    return os.getenv("BOUNCE_HIGHSCORE_FILE") or os.path.join(base_dir, HIGHSCORE_FILE)


def poll_intent(keys, minus_key, plus_key, paddle, drag_fraction):
    # a held slider wins over the keyboard for the same paddle
    if drag_fraction is not None:
        return Intent.to(paddle.angle_at(drag_fraction))
    return Intent.step_by(int(keys[plus_key]) - int(keys[minus_key]))


def main():
    setup_logging()
    pygame.init()

    base_dir = os.path.dirname(os.path.abspath(__file__))

    screen = pygame.display.set_mode((W, H), pygame.RESIZABLE)
    pygame.display.set_caption("Bounce")
    try_set_window_icon(base_dir)

    clock = pygame.time.Clock()

    font = pygame.font.SysFont("consolas", 30)
    small = pygame.font.SysFont("consolas", 16)
    big = pygame.font.SysFont("consolas", 56)

    store = HighScoreStore(highscore_path(base_dir))
    session = GameSession(store=store)
    logger.info("loaded high score %d from %s", session.high_score, store.path)

    layout = Layout(*screen.get_size())
    stepper = FixedStep()
    sparks = Sparks()
    confetti = Confetti()

    show_debug = False
    start_pending = False
    dragging = None
    drag_fraction = {"left": None, "right": None}

    def begin_drag(name, mx):
        nonlocal dragging
        dragging = name
        drag_fraction[name] = slider_fraction(layout.sliders[name], mx)

    def end_drag():
        nonlocal dragging
        if dragging:
            drag_fraction[dragging] = None
        dragging = None

    def handle_report(report):
        for x, y in report.bounces:
            k = layout.diameter
            inward = math.atan2(-y, -x)
            sparks.burst(layout.to_screen(x * k, y * k), inward, k)
        if report.new_record:
            confetti.burst(layout.center, layout.diameter)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

            elif e.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                layout = Layout(e.w, e.h)
                end_drag()

            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_F3:
                    show_debug = not show_debug
                elif e.key == pygame.K_ESCAPE:
                    running = False
                elif e.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                    if not session.playing:
                        start_pending = True

            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                mx, my = e.pos
                if not session.playing:
                    if layout.btn_start.collidepoint(mx, my):
                        start_pending = True
                    for name, rect in layout.rule_buttons.items():
                        if rect.collidepoint(mx, my) and session.set_rules(RULES[name]):
                            logger.info("rules set to %s", name)
                for name, rect in layout.sliders.items():
                    if rect.inflate(0, 16).collidepoint(mx, my):
                        begin_drag(name, mx)

            elif e.type == pygame.MOUSEMOTION:
                if dragging:
                    drag_fraction[dragging] = slider_fraction(layout.sliders[dragging], e.pos[0])

            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                end_drag()

        keys = pygame.key.get_pressed()
        inputs = InputSnapshot(
            left=poll_intent(keys, pygame.K_a, pygame.K_d, session.left, drag_fraction["left"]),
            right=poll_intent(keys, pygame.K_LEFT, pygame.K_RIGHT, session.right, drag_fraction["right"]),
            start=start_pending,
        )

        if start_pending:
            sparks.clear()
            confetti.clear()
            stepper.reset()
            handle_report(session.tick(inputs))
            start_pending = False
        elif session.playing:
            for _ in range(stepper.advance(dt)):
                handle_report(session.tick(inputs))
                if not session.playing:
                    break

        sparks.update(dt)
        confetti.update(dt)

        snap = session.snapshot(layout.diameter)
        draw_arena(screen, layout)
        draw_header(screen, font, small, layout, snap.score, snap.high_score)
        if snap.state is not GameState.IDLE:
            for name, angle in (("left", snap.left_angle), ("right", snap.right_angle)):
                draw_paddle(screen, layout, angle, snap.arc_span, snap.arc_radius, snap.arc_thickness,
                            PADDLE_COLORS[name])
        draw_balls(screen, layout, snap)
        sparks.draw(screen)

        if snap.state is GameState.IDLE:
            draw_overlay(screen, big, font, small, layout, "BOUNCE", "", "START", snap.rules)
        elif snap.state is GameState.GAME_OVER:
            draw_overlay(screen, big, font, small, layout, "GAME OVER", f"SCORE: {snap.score}", "AGAIN", snap.rules)

        draw_paddle_slider(screen, small, layout.sliders["left"], session.left.fraction, "Left paddle", PADDLE_COLORS["left"])
        draw_paddle_slider(screen, small, layout.sliders["right"], session.right.fraction, "Right paddle", PADDLE_COLORS["right"])
        draw_hints(screen, small, layout)
        confetti.draw(screen)

        if show_debug:
            speeds = {b.id: b.speed * layout.diameter for b in session.balls}
            draw_debug(screen, small, clock.get_fps(), snap, speeds)

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
