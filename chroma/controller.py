"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate mouse clicks and keys into model commands.
  - Feed the model's countdown in fixed 100 ms ticks, accumulated
    from the frame clock.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that imports pygame directly for events.
"""

import random
import sys
import pygame

from .config import (
    WIDTH, HEIGHT, FPS, TICK_SECONDS,
    STATE_IDLE, STATE_PLAYING, STATE_ENDED,
)
from .model import GameModel
from .view import GameView


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, seed: int | None = None):
        pygame.init()
        self.screen     = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("CHROMA VISION — Color Precision Challenge")
        self.clock      = pygame.time.Clock()
        self.model      = GameModel(random.Random(seed))
        self.view       = GameView(self.screen)
        self.tick_timer = 0.0

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        while True:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self._advance_clock(dt)
            self.view.render(self.model)

    # ── Clock ─────────────────────────────────────────────────────
    def _advance_clock(self, dt: float) -> None:
        if self.model.state != STATE_PLAYING:
            self.tick_timer = 0.0
            return
        self.tick_timer += dt
        while self.tick_timer >= TICK_SECONDS and self.model.state == STATE_PLAYING:
            self.tick_timer -= TICK_SECONDS
            self.model.tick(TICK_SECONDS)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos)

    def _handle_keydown(self, key: int) -> None:
        # Q quits from any state
        if key == pygame.K_q:
            self._quit()

        if self.model.state in (STATE_IDLE, STATE_ENDED):
            if key in (pygame.K_RETURN, pygame.K_SPACE):
                self._start()

    def _handle_click(self, pos: tuple[int, int]) -> None:
        if self.model.state != STATE_PLAYING:
            return
        index = self.view.cell_index_at(pos, self.model.round.grid_size)
        if index is not None:
            self.model.select(index)

    def _start(self) -> None:
        self.tick_timer = 0.0
        self.model.start()

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        pygame.quit()
        sys.exit()
