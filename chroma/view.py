"""
view.py — View layer.

Draws one frame from a model snapshot:
  - Header panel with title, high score and current score
  - HUD strip with the countdown bar and the last delta report
  - The color grid (one odd cell)
  - Start overlay listing the rules
  - Game-over overlay with final score, rank and technical summary

Public API:
    GameView(screen)                 — bind to a pygame surface
    view.render(model)               — draw the current frame
    view.cell_index_at(pos, size)    — grid cell under a screen point, or None
"""

import pygame

from .config import (
    WIDTH, PANEL_H, BOARD_SIZE, OFFSET_X, OFFSET_Y, CELL_GAP,
    BG, INK, INK_DIM, PAPER, ALERT_COL, TRACK_COL, OVERLAY_BG,
    INITIAL_TIME, BONUS_TIME, PENALTY_TIME, MAX_TIME, LOW_TIME, GRID_STEPS,
    STATE_IDLE, STATE_ENDED,
)
from .model import GameModel, Snapshot


# ─────────────────────── layout helpers ──────────────────────────
def _cell_span(grid_size: int) -> float:
    return (BOARD_SIZE - CELL_GAP * (grid_size + 1)) / grid_size


def _cell_rect(index: int, grid_size: int) -> pygame.Rect:
    span = _cell_span(grid_size)
    row, col = divmod(index, grid_size)
    x = OFFSET_X + CELL_GAP + col * (span + CELL_GAP)
    y = OFFSET_Y + CELL_GAP + row * (span + CELL_GAP)
    return pygame.Rect(int(x), int(y), int(span), int(span))


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameModel snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()

    # ── Main entry ───────────────────────────────────────────────
    def render(self, model: GameModel) -> None:
        snap = model.snapshot()

        self.screen.fill(BG)
        self._draw_panel(snap)
        self._draw_hud(snap)
        self._draw_board(snap)

        if snap.state == STATE_IDLE:
            self._draw_start_overlay()
        elif snap.state == STATE_ENDED:
            self._draw_game_over_overlay(model, snap)

        pygame.display.flip()

    # ── Hit testing ──────────────────────────────────────────────
    def cell_index_at(self, pos: tuple[int, int], grid_size: int) -> int | None:
        """Index of the cell under `pos`, or None for gaps and outside clicks."""
        for i in range(grid_size * grid_size):
            if _cell_rect(i, grid_size).collidepoint(pos):
                return i
        return None

    # ── Header panel ─────────────────────────────────────────────
    def _draw_panel(self, snap: Snapshot) -> None:
        self.screen.blit(self.font_title.render("CHROMA VISION", True, INK), (20, 14))
        self.screen.blit(
            self.font_tiny.render("PRECISION CHALLENGE v1.0", True, INK_DIM), (22, 54),
        )

        # High score / current, right-aligned
        for label, value, right in [
            ("HIGH SCORE", snap.high_score, WIDTH - 110),
            ("CURRENT",    snap.score,      WIDTH - 20),
        ]:
            lbl = self.font_tiny.render(label, True, INK_DIM)
            val = self.font_big.render(str(value), True, INK)
            self.screen.blit(lbl, lbl.get_rect(topright=(right, 16)))
            self.screen.blit(val, val.get_rect(topright=(right, 32)))

        pygame.draw.line(self.screen, INK, (16, PANEL_H - 2), (WIDTH - 16, PANEL_H - 2), 2)

    # ── Timer / delta strip ──────────────────────────────────────
    def _draw_hud(self, snap: Snapshot) -> None:
        y = PANEL_H + 12
        bar_w, bar_h = 200, 12
        pygame.draw.rect(self.screen, TRACK_COL, (OFFSET_X, y, bar_w, bar_h))
        fill = int(bar_w * max(0.0, min(1.0, snap.time_remaining / MAX_TIME)))
        color = ALERT_COL if snap.time_remaining < LOW_TIME else INK
        if fill > 0:
            pygame.draw.rect(self.screen, color, (OFFSET_X, y, fill, bar_h))
        pygame.draw.rect(self.screen, INK, (OFFSET_X, y, bar_w, bar_h), 1)

        t = self.font_small.render(f"{snap.time_remaining:.1f}s", True, INK)
        self.screen.blit(t, (OFFSET_X + bar_w + 10, y - 2))

        if snap.last_delta_report is not None:
            d = self.font_tiny.render(str(snap.last_delta_report), True, INK_DIM)
            self.screen.blit(d, d.get_rect(topright=(OFFSET_X + BOARD_SIZE, y)))

    # ── Grid ─────────────────────────────────────────────────────
    def _draw_board(self, snap: Snapshot) -> None:
        board = pygame.Rect(OFFSET_X, OFFSET_Y, BOARD_SIZE, BOARD_SIZE)
        pygame.draw.rect(self.screen, PAPER, board)
        pygame.draw.rect(self.screen, INK, board, 2)

        for i, color in enumerate(snap.cells):
            pygame.draw.rect(self.screen, color.to_rgb(), _cell_rect(i, snap.grid_size))

    # ── Overlays ─────────────────────────────────────────────────
    def _draw_overlay_base(self) -> pygame.Rect:
        surf = pygame.Surface((BOARD_SIZE, BOARD_SIZE), pygame.SRCALPHA)
        surf.fill(OVERLAY_BG)
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))
        card = pygame.Rect(OFFSET_X + 24, OFFSET_Y + 40, BOARD_SIZE - 48, BOARD_SIZE - 80)
        pygame.draw.rect(self.screen, INK, card.move(8, 8))
        pygame.draw.rect(self.screen, PAPER, card)
        pygame.draw.rect(self.screen, INK, card, 2)
        return card

    def _draw_text_line(self, text: str, color: tuple,
                        cy: int, font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    def _draw_wrapped(self, text: str, color: tuple, cy: int,
                      font: pygame.font.Font, max_w: int) -> int:
        line = ""
        for word in text.split():
            trial = f"{line} {word}".strip()
            if font.size(trial)[0] > max_w and line:
                cy = self._draw_text_line(line, color, cy, font)
                line = word
            else:
                line = trial
        if line:
            cy = self._draw_text_line(line, color, cy, font)
        return cy

    def _draw_button(self, label: str, cy: int) -> int:
        btn_w, btn_h = 320, 44
        bx = WIDTH // 2 - btn_w // 2
        pygame.draw.rect(self.screen, INK, (bx, cy, btn_w, btn_h))
        txt = self.font_small.render(label, True, PAPER)
        self.screen.blit(txt, txt.get_rect(center=(WIDTH // 2, cy + btn_h // 2)))
        return cy + btn_h + 10

    def _draw_start_overlay(self) -> None:
        card = self._draw_overlay_base()
        cy = card.y + 36
        cy = self._draw_text_line("CALIBRATION REQUIRED", INK, cy, self.font_med)
        cy += 4
        cy = self._draw_wrapped(
            "Identify the outlier in the grid. As your score increases, "
            "the color variance decreases.",
            INK_DIM, cy, self.font_tiny, card.width - 40,
        )
        cy += 16
        max_grid = GRID_STEPS[-1][1]
        for rule in (
            f"{INITIAL_TIME:.0f}s INITIAL TIMER",
            f"+{BONUS_TIME:.0f}s PER CORRECT HIT",
            f"-{PENALTY_TIME:.0f}s PER ERROR",
            f"{max_grid}x{max_grid} MAX GRID DENSITY",
        ):
            cy = self._draw_text_line(rule, INK, cy, self.font_small)
        cy += 24
        self._draw_button("ENTER — INITIATE TEST", cy)

    def _draw_game_over_overlay(self, model: GameModel, snap: Snapshot) -> None:
        card = self._draw_overlay_base()
        cy = card.y + 36
        cy = self._draw_text_line("TEST TERMINATED", INK, cy, self.font_title)
        cy = self._draw_text_line("SENSITIVITY ANALYSIS COMPLETE", INK_DIM, cy, self.font_tiny)
        cy += 16
        cy = self._draw_text_line(f"FINAL SCORE  {snap.score}", INK, cy, self.font_big)
        cy = self._draw_text_line(f"RANK  {model.rank.upper()}", INK, cy, self.font_med)
        if model.new_high_score:
            cy = self._draw_text_line("★  NEW HIGH SCORE  ★", ALERT_COL, cy, self.font_small)
        cy += 12
        cy = self._draw_text_line("TECHNICAL SUMMARY", INK, cy, self.font_small)
        cy = self._draw_wrapped(model.summary(), INK_DIM, cy, self.font_tiny, card.width - 40)
        cy += 16
        self._draw_button("ENTER — RESTART CALIBRATION", cy)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 30, True),
            ("font_big",   "courier", 24, True),
            ("font_med",   "courier", 18, True),
            ("font_small", "courier", 14, True),
            ("font_tiny",  "courier", 12, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except (pygame.error, OSError) as exc:
                print(f"[chroma] font '{name}' unavailable ({exc}), using default.")
                setattr(self, attr, pygame.font.SysFont(None, size))
