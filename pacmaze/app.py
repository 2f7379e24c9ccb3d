"""pygame front end: draws session snapshots and feeds it keys and frame time."""

from __future__ import annotations
import logging
import math
import sys
from typing import List, Optional

import pygame

from .config import DEFAULT_CONFIG, GameConfig
from .geometry import Heading
from .ghosts import Archetype
from .resolver import SessionState
from .session import Session, SessionSnapshot

logger = logging.getLogger(__name__)

FPS = 60
SCALE = 2
HUD_HEIGHT = 40

# Colors (Arcade Palette)
BLACK = (0, 0, 0)
WALL_BLUE = (33, 33, 222)
YELLOW = (255, 255, 0)
WHITE = (255, 255, 255)
PELLET_COLOR = (255, 184, 174)
PINK = (255, 184, 255)
BLUE_FRIGHTENED = (33, 33, 255)

GHOST_COLORS = {
    Archetype.DIRECT: (255, 0, 0),
    Archetype.AMBUSH: PINK,
    Archetype.PINCER: (0, 255, 255),
    Archetype.THRESHOLD: (255, 184, 82),
}

KEY_HEADINGS = {
    pygame.K_a: Heading.LEFT, pygame.K_LEFT: Heading.LEFT,
    pygame.K_d: Heading.RIGHT, pygame.K_RIGHT: Heading.RIGHT,
    pygame.K_w: Heading.UP, pygame.K_UP: Heading.UP,
    pygame.K_s: Heading.DOWN, pygame.K_DOWN: Heading.DOWN,
}


class KeyBuffer:
    """Tracks held direction keys; releasing one falls back to the latest still held."""

    def __init__(self):
        self.held: List[int] = []

    def press(self, key: int) -> Optional[Heading]:
        if key in self.held:
            self.held.remove(key)
        self.held.append(key)
        return KEY_HEADINGS[key]

    def release(self, key: int) -> Optional[Heading]:
        if key in self.held:
            self.held.remove(key)
        return KEY_HEADINGS[self.held[-1]] if self.held else None

    def clear(self):
        self.held.clear()


class Renderer:
    def __init__(self, screen, config: GameConfig):
        self.screen = screen
        self.config = config
        self.px = config.tile_size * SCALE
        self.font = pygame.font.SysFont("monospace", 18, bold=True)
        self.big_font = pygame.font.SysFont("monospace", 36, bold=True)

    def to_screen(self, x: float, y: float):
        return int(x * SCALE), int(y * SCALE) + HUD_HEIGHT

    def tile_rect(self, col: int, row: int):
        return pygame.Rect(col * self.px, row * self.px + HUD_HEIGHT, self.px, self.px)

    def draw(self, snap: SessionSnapshot, ticks: int):
        self.screen.fill(BLACK)
        self.draw_maze(snap, ticks)
        for ghost in snap.ghosts:
            self.draw_ghost(ghost)
        self.draw_pacman(snap, ticks)
        self.draw_ui(snap)

    def draw_maze(self, snap: SessionSnapshot, ticks: int):
        for col, row in snap.walls:
            pygame.draw.rect(self.screen, WALL_BLUE, self.tile_rect(col, row).inflate(-2, -2), 2)
        for col, row in snap.lair:
            # Only the top of the pen is drawn, as the gate
            if (col, row - 1) not in snap.lair:
                rect = self.tile_rect(col, row)
                pygame.draw.rect(self.screen, PINK, (rect.x, rect.centery - 2, rect.width, 4))
        for col, row in snap.dots:
            pygame.draw.circle(self.screen, PELLET_COLOR, self.tile_rect(col, row).center, SCALE * 2)
        if (ticks // 150) % 2 == 0:
            for col, row in snap.pellets:
                pygame.draw.circle(self.screen, PELLET_COLOR, self.tile_rect(col, row).center, SCALE * 5)

    def draw_pacman(self, snap: SessionSnapshot, ticks: int):
        pac = snap.pacman
        center = self.to_screen(pac.x, pac.y)
        radius = self.config.pacman_radius * SCALE
        mouth = (math.sin(ticks * 0.015) * 0.5 + 0.5) * 0.7
        points = [center]
        start = pac.heading.angle + mouth
        end = pac.heading.angle + 2 * math.pi - mouth
        for i in range(21):
            a = start + (end - start) * i / 20
            points.append((center[0] + radius * math.cos(a), center[1] + radius * math.sin(a)))
        pygame.draw.polygon(self.screen, YELLOW, points)

    def draw_ghost(self, ghost):
        cx, cy = self.to_screen(ghost.x, ghost.y)
        radius = self.config.ghost_radius * SCALE
        color = BLUE_FRIGHTENED if ghost.frightened else GHOST_COLORS[ghost.archetype]
        pygame.draw.circle(self.screen, color, (cx, cy), radius)
        pygame.draw.rect(self.screen, color, (cx - radius, cy, radius * 2, radius))

        # Eyes look where the ghost is going
        look_x, look_y = ghost.heading.dx * 2, ghost.heading.dy * 2
        for side in (-1, 1):
            eye = (cx + side * radius * 0.4 + look_x, cy - radius * 0.2 + look_y)
            pygame.draw.circle(self.screen, WHITE, eye, radius * 0.3)

    def draw_ui(self, snap: SessionSnapshot):
        score_t = self.font.render(f"SCORE: {snap.score}", True, WHITE)
        self.screen.blit(score_t, (10, 10))
        lives_t = self.font.render(f"LIVES: {snap.pacman.lives}", True, WHITE)
        self.screen.blit(lives_t, (self.screen.get_width() - lives_t.get_width() - 10, 10))

        if snap.state is not SessionState.PLAYING:
            overlay = pygame.Surface(self.screen.get_size())
            overlay.set_alpha(160)
            overlay.fill(BLACK)
            self.screen.blit(overlay, (0, 0))
            title = "YOU WIN!" if snap.state is SessionState.WIN else "GAME OVER"
            self.draw_text_centered(title, self.screen.get_height() // 2 - 30, YELLOW, self.big_font)
            self.draw_text_centered("PRESS SPACE", self.screen.get_height() // 2 + 30, WHITE, self.font)

    def draw_text_centered(self, text: str, y: int, color, font):
        surf = font.render(text, True, color)
        self.screen.blit(surf, (self.screen.get_width() // 2 - surf.get_width() // 2, y))


def run(config: GameConfig = DEFAULT_CONFIG):
    pygame.init()
    screen = pygame.display.set_mode((config.width * SCALE, config.height * SCALE + HUD_HEIGHT))
    pygame.display.set_caption("PACMAZE")
    clock = pygame.time.Clock()

    session = Session(config)
    renderer = Renderer(screen, config)
    keys = KeyBuffer()

    running = True
    while running:
        elapsed = clock.tick(FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                elif e.key == pygame.K_SPACE and session.is_over:
                    session.restart()
                    keys.clear()
                elif e.key in KEY_HEADINGS:
                    session.set_buffered_heading(keys.press(e.key))
            elif e.type == pygame.KEYUP and e.key in KEY_HEADINGS:
                fallback = keys.release(e.key)
                if fallback is not None:
                    session.set_buffered_heading(fallback)

        session.update(elapsed)
        renderer.draw(session.snapshot(), pygame.time.get_ticks())
        pygame.display.flip()

    pygame.quit()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    print("Controls: WASD or Arrow Keys | SPACE: play again | ESC: quit")
    run()
    sys.exit(0)


if __name__ == "__main__":
    main()
