"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Round         — one discrimination task (grid size, colors, target)
    SelectResult  — outcome of a cell selection
    Snapshot      — read-only state handed to the view
    GameModel     — top-level model; owns the session, clock and score
"""

import random
from dataclasses import dataclass

from .colors import Color, DeltaReport, channel_deltas
from .config import (
    INITIAL_TIME, BONUS_TIME, PENALTY_TIME, MAX_TIME, TIME_EPSILON,
    RANKS,
    STATE_IDLE, STATE_PLAYING, STATE_ENDED,
)
from .planner import (
    derive_grid_size, generate_base_color, generate_odd_color, pick_odd_index,
)


# ──────────────────────────── Round ──────────────────────────────
@dataclass(frozen=True)
class Round:
    """
    One grid of cells. Exactly one cell (odd_index) shows odd_color,
    every other cell shows base_color. Never mutated; replaced on each hit.
    """
    grid_size: int
    base_color: Color
    odd_color: Color
    odd_index: int

    @property
    def cell_count(self) -> int:
        return self.grid_size * self.grid_size

    def cells(self) -> list[Color]:
        """Row-major list of cell colors."""
        return [
            self.odd_color if i == self.odd_index else self.base_color
            for i in range(self.cell_count)
        ]

    def deltas(self) -> DeltaReport:
        return channel_deltas(self.base_color, self.odd_color)


@dataclass(frozen=True)
class SelectResult:
    correct: bool
    accepted: bool = True


@dataclass(frozen=True)
class Snapshot:
    state: str
    score: int
    high_score: int
    time_remaining: float
    grid_size: int
    cells: list
    odd_index: int | None
    last_delta_report: DeltaReport | None


# ─────────────────────────── Ranking ─────────────────────────────
def rank(score: int) -> str:
    """End-of-session title for a final score."""
    for bound, label in RANKS:
        if bound is None or score < bound:
            return label
    return RANKS[-1][1]


def average_response_time(score: int, time_remaining: float) -> float:
    """Seconds spent per cleared round; 0 when nothing was cleared."""
    if score <= 0:
        return 0.0
    return (INITIAL_TIME + score * BONUS_TIME - time_remaining) / score


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls tick() on a fixed cadence and select() on clicks.

    Not thread-safe; callers serialize tick() and select().
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.state: str = STATE_IDLE
        self.score: int = 0
        self.high_score: int = 0
        self.best_at_start: int = 0
        self.time_remaining: float = INITIAL_TIME
        self.round: Round | None = None
        self.last_delta_report: DeltaReport | None = None

    # ── Public API ───────────────────────────────────────────────
    def start(self) -> None:
        """Begin a fresh session. Also used to restart from any state."""
        self.best_at_start = self.high_score
        self.score = 0
        self.time_remaining = INITIAL_TIME
        self.last_delta_report = None
        self.round = self._new_round(0)
        self.state = STATE_PLAYING

    def tick(self, delta_seconds: float) -> None:
        """Advance the clock. Ignored unless playing."""
        if self.state != STATE_PLAYING or delta_seconds < 0:
            return

        if self.time_remaining - delta_seconds <= TIME_EPSILON:
            self.time_remaining = 0.0
            self.state = STATE_ENDED
        else:
            self.time_remaining -= delta_seconds

    def select(self, index: int) -> SelectResult:
        """
        Handle a click on cell `index`.
        Out-of-range indices count as misses. Ignored unless playing.
        """
        if self.state != STATE_PLAYING:
            return SelectResult(correct=False, accepted=False)

        if index == self.round.odd_index:
            self.score += 1
            if self.score > self.high_score:
                self.high_score = self.score
            self.time_remaining = min(self.time_remaining + BONUS_TIME, MAX_TIME)
            self.last_delta_report = self.round.deltas()
            self.round = self._new_round(self.score)
            return SelectResult(correct=True)

        # A miss can drain the clock to zero; only tick() ends the game.
        self.time_remaining = max(0.0, self.time_remaining - PENALTY_TIME)
        return SelectResult(correct=False)

    def snapshot(self) -> Snapshot:
        if self.round is None:
            grid_size, cells, odd_index = derive_grid_size(0), [], None
        else:
            grid_size = self.round.grid_size
            cells = self.round.cells()
            odd_index = self.round.odd_index
        return Snapshot(
            state=self.state,
            score=self.score,
            high_score=self.high_score,
            time_remaining=self.time_remaining,
            grid_size=grid_size,
            cells=cells,
            odd_index=odd_index,
            last_delta_report=self.last_delta_report,
        )

    # ── Reporting ────────────────────────────────────────────────
    @property
    def rank(self) -> str:
        return rank(self.score)

    @property
    def average_response_time(self) -> float:
        return average_response_time(self.score, self.time_remaining)

    @property
    def new_high_score(self) -> bool:
        """True once this session beats the best from earlier sessions."""
        return self.score > self.best_at_start

    def summary(self) -> str:
        grid_size = self.snapshot().grid_size
        return (
            f"Your color perception threshold reached level {self.score}. "
            f"Final grid density: {grid_size}x{grid_size}. "
            f"Average response time: {self.average_response_time:.2f}s per unit."
        )

    # ── Private helpers ──────────────────────────────────────────
    def _new_round(self, score: int) -> Round:
        grid_size = derive_grid_size(score)
        base = generate_base_color(self.rng)
        return Round(
            grid_size=grid_size,
            base_color=base,
            odd_color=generate_odd_color(base, score, self.rng),
            odd_index=pick_odd_index(grid_size, self.rng),
        )
