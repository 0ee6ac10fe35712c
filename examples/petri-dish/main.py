"""
Petri Dish - biots pygame viewer

A few hundred biots on a wraparound plane. Each biot is drawn as nested
circles (outer green = photosynthesis, then red = attack, dark blue =
defense, blue = motion); thinking biots get a square behind them.
"""
from __future__ import annotations

import sys

import pygame

from biots import entropy_seed
from biots_life import (
    BiotView,
    Population,
    WorldConfig,
    build_simulation,
    make_extinction_system,
)

TITLE = "Petri Dish - biots"
WIDTH, HEIGHT = 1920, 1200
FPS = 60
INITIAL_BIOTS = 600
GLYPH_SCALE = 7.0

BG_COLOR = (0, 0, 25)
HUD_COLOR = (200, 200, 200)
GREEN = (0, 228, 48)
RED = (230, 41, 55)
DARKBLUE = (0, 82, 172)
BLUE = (0, 121, 241)


def _draw_biot(screen: pygame.Surface, biot: BiotView) -> None:
    x, y = int(biot.position[0]), int(biot.position[1])
    if biot.intelligence > 0.0:
        size = int(2 * GLYPH_SCALE * biot.weight)
        pygame.draw.rect(screen, GREEN, (x - size // 2, y - size // 2, size, size))
    layers = (
        (GREEN, biot.weight),
        (RED, biot.attack + biot.defense + biot.motion),
        (DARKBLUE, biot.defense + biot.motion),
        (BLUE, biot.motion),
    )
    for color, extent in layers:
        radius = int(GLYPH_SCALE * extent)
        if radius > 0:
            pygame.draw.circle(screen, color, (x, y), radius)


def _draw_hud(
    screen: pygame.Surface, font: pygame.font.Font, population: Population, fps_val: float,
) -> None:
    line = f"FPS: {fps_val:.0f}, biots: {len(population)}"
    surf = font.render(line, True, HUD_COLOR)
    screen.blit(surf, (screen.get_width() - surf.get_width() - 10, screen.get_height() - 22))


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 18)

    seed = entropy_seed()
    engine, population = build_simulation(
        INITIAL_BIOTS, seed, WorldConfig(float(WIDTH), float(HEIGHT)),
    )
    engine.add_system(make_extinction_system(population))

    running = True
    paused = False
    while running:
        pg_clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused

        if not paused:
            engine.step()

        screen.fill(BG_COLOR)
        for biot in population.view():
            _draw_biot(screen, biot)
        _draw_hud(screen, font, population, pg_clock.get_fps())
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
