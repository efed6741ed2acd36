#!/usr/bin/env python3
"""
app.py

pygame window around a Session: event pump, start and game-over screens.
The session does all game logic; this module only forwards input and
drives the frame schedule once per display refresh.
"""

import argparse
import random
from typing import List, Optional

import pygame

from .clock import FrameScheduler
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS, OVERLAY_TEXT_COLOR
)
from .levels import DEFAULT_LEVEL_ID, LEVELS, InvalidLevelError
from .renderer import PygameRenderer
from .session import Session, SessionState

LEVEL_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
}


class FlappyApp:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 level_id: int = DEFAULT_LEVEL_ID, seed: Optional[int] = None,
                 fps: int = RENDER_FPS):
        pygame.init()
        self.fps = fps
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy")

        self.renderer = PygameRenderer(self.screen)
        self.scheduler = FrameScheduler()
        self.session = Session(
            scheduler=self.scheduler,
            rng=random.Random(seed),
            renderer=self.renderer,
            width=width,
            height=height,
            level_id=level_id,
            on_game_over=self._on_game_over,
        )

        self.clock = pygame.time.Clock()
        self.title_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 28)

    def run(self):
        """The main client execution loop."""
        print(f"Window opened at {self.session.width}x{self.session.height}. "
              f"Level: {self.session.active_level_label}")

        running = True
        while running:
            self.clock.tick(self.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self._flap()
                elif event.type == pygame.VIDEORESIZE:
                    self._resize(event.w, event.h)

            # --- One simulation frame per display refresh ---
            if not self.scheduler.run_pending():
                self._draw_menu()

            pygame.display.flip()

        pygame.quit()

    def _handle_key(self, key: int) -> bool:
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_SPACE:
            self._flap()
        elif key == pygame.K_RETURN and not self.session.is_running:
            self.session.start()
            print(f"Run started on {self.session.active_level_label}.")
        elif key in LEVEL_KEYS and not self.session.is_running:
            try:
                level = self.session.select_level(LEVEL_KEYS[key])
            except InvalidLevelError as e:
                print(f"Level change rejected: {e}")
            else:
                print(f"Level set to {level.label}.")
        return True

    def _flap(self):
        was_running = self.session.is_running
        self.session.on_flap_input()
        if not was_running:
            print(f"Run started on {self.session.active_level_label}.")

    def _resize(self, width: int, height: int):
        self.session.on_resize(width, height)
        self.screen = pygame.display.get_surface()
        self.renderer.surface = self.screen

    def _on_game_over(self, score: int):
        print(f"Run over. Final score: {score}")

    def _draw_menu(self):
        """Start screen while idle, score card once a run has ended."""
        self.renderer.draw(self.session.snapshot())

        if self.session.state is SessionState.ENDED:
            lines = [
                (self.title_font, "Game Over"),
                (self.font, f"Score: {self.session.final_score}"),
                (self.font, "Space / Click / Enter to play again"),
            ]
        else:
            lines = [
                (self.title_font, "Flappy"),
                (self.font, "Space / Click to flap"),
            ]
        lines.append((self.font, "1 Easy | 2 Medium | 3 Hard | Esc Quit"))

        w, h = self.screen.get_size()
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 110))
        self.screen.blit(shade, (0, 0))

        y = h // 3
        for font, text in lines:
            surf = font.render(text, True, OVERLAY_TEXT_COLOR)
            self.screen.blit(surf, (w // 2 - surf.get_width() // 2, y))
            y += surf.get_height() + 12


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Side-scrolling flap-and-dodge game.")
    parser.add_argument("--level", type=int, choices=sorted(LEVELS), default=DEFAULT_LEVEL_ID,
                        help="starting difficulty")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for pipe heights")
    parser.add_argument("--width", type=positive_int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=positive_int, default=SCREEN_HEIGHT)
    parser.add_argument("--fps", type=positive_int, default=RENDER_FPS)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    app = FlappyApp(width=args.width, height=args.height,
                    level_id=args.level, seed=args.seed, fps=args.fps)
    app.run()


if __name__ == "__main__":
    main()
