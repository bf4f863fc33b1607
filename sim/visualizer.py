"""Pygame visualizer — mouse-driven play with an optional autopilot."""

try:
    import pygame
except ImportError:
    pygame = None

from breakout.types import BallLost, BrickHit, PointerInput, ENDED
from breakout.config import get_config, list_configs, LAYOUT_PRESETS
from breakout.session import new_session, snapshot, step
from breakout.autopilot import Autopilot, PILOT_STYLES

HUD_H = 28
FPS = 60

# Ticks simulated per drawn frame; default ball speeds are tuned for an
# uncapped loop, so one tick per frame would crawl.
TICKS_PER_FRAME = 25

HUD_BG = (26, 26, 46)
TEXT_WHITE = (224, 224, 224)
ACCENT = (233, 69, 96)
FLASH = (255, 217, 61)


def _to_screen(x, y, height):
    """Playfield (y-up) to screen (y-down, below the HUD)."""
    return int(x), int(HUD_H + height - y)


def _draw_rect(surface, shape, height):
    r = shape.rect
    left, top = _to_screen(r.min.x, r.max.y, height)
    pygame.draw.rect(surface, shape.color, (left, top, int(r.width()), int(r.height())))


def _draw_scene(surface, scene, height):
    for brick in scene.bricks:
        _draw_rect(surface, brick, height)
    _draw_rect(surface, scene.paddle, height)
    c = scene.ball.circle
    pygame.draw.circle(surface, scene.ball.color, _to_screen(c.center.x, c.center.y, height), int(c.radius))


def run_visualizer(preset: str = "classic", style: str = "steady"):
    """Launch the Pygame window."""
    if pygame is None:
        print("ERROR: pygame is not installed. Run: pip install pygame")
        return

    presets = list_configs()
    styles = list(PILOT_STYLES.keys())
    preset_idx = presets.index(preset) if preset in presets else 0
    style_idx = styles.index(style) if style in styles else 0

    pygame.init()
    font = pygame.font.SysFont("monospace", 13)
    clock = pygame.time.Clock()
    pygame.mouse.set_visible(False)

    def reset():
        cfg = get_config(presets[preset_idx])
        screen = pygame.display.set_mode((int(cfg.width), int(cfg.height) + HUD_H))
        pygame.display.set_caption(f"Breakout — {LAYOUT_PRESETS[presets[preset_idx]]['label']}")
        return cfg, screen, new_session(cfg)

    cfg, screen, session = reset()
    pilot = None
    paused = False
    ticks_per_frame = TICKS_PER_FRAME
    destroyed = 0
    scene = snapshot(session)
    running = True

    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_q, pygame.K_ESCAPE):
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_r:
                    cfg, screen, session = reset()
                    scene = snapshot(session)
                    pilot = Autopilot(styles[style_idx]) if pilot else None
                    destroyed = 0
                elif event.key == pygame.K_p:
                    preset_idx = (preset_idx + 1) % len(presets)
                    cfg, screen, session = reset()
                    scene = snapshot(session)
                    pilot = Autopilot(styles[style_idx]) if pilot else None
                    destroyed = 0
                elif event.key == pygame.K_a:
                    pilot = None if pilot else Autopilot(styles[style_idx])
                elif event.key == pygame.K_s:
                    style_idx = (style_idx + 1) % len(styles)
                    if pilot:
                        pilot = Autopilot(styles[style_idx])
                elif event.key in (pygame.K_EQUALS, pygame.K_PLUS):
                    ticks_per_frame = min(ticks_per_frame * 2, 800)
                elif event.key == pygame.K_MINUS:
                    ticks_per_frame = max(ticks_per_frame // 2, 1)

        if not paused and session.status != ENDED:
            mx, my = pygame.mouse.get_pos()
            inside = bool(pygame.mouse.get_focused()) and my >= HUD_H
            mouse = PointerInput(x=float(mx), y=float(cfg.height - (my - HUD_H)), inside=inside)
            for _ in range(ticks_per_frame):
                pointer = pilot.pointer(session) if pilot else mouse
                scene = step(session, pointer)
                destroyed += sum(1 for e in scene.events if isinstance(e, BrickHit))
                if scene.status == ENDED:
                    break

        # ---- DRAW ----
        screen.fill(cfg.background)
        if scene is not None:
            _draw_scene(screen, scene, cfg.height)

        pygame.draw.rect(screen, HUD_BG, (0, 0, screen.get_width(), HUD_H))
        mode = f"auto:{PILOT_STYLES[styles[style_idx]]['label']}" if pilot else "mouse"
        hud = (
            f"bricks {len(session.bricks):3d}  hit {destroyed:3d}  "
            f"speed {session.ball.speed:.3f}  x{ticks_per_frame}  {mode}"
        )
        screen.blit(font.render(hud, True, TEXT_WHITE), (8, 7))

        if session.status == ENDED:
            lost = next((e for e in scene.events if isinstance(e, BallLost)), None)
            msg = "GAME OVER — R to restart"
            if lost is not None:
                msg = f"GAME OVER at tick {lost.tick} — R to restart"
            txt = font.render(msg, True, FLASH)
            screen.blit(txt, (screen.get_width() // 2 - txt.get_width() // 2, screen.get_height() // 2))
        elif paused:
            txt = font.render("PAUSED", True, ACCENT)
            screen.blit(txt, (screen.get_width() // 2 - txt.get_width() // 2, screen.get_height() // 2))

        pygame.display.flip()

    pygame.quit()
