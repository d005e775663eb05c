"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Window & Grid ─────────────────────────────────────────────────
WIDTH, HEIGHT   = 560, 680
PANEL_H         = 80
HUD_H           = 44
BOARD_SIZE      = 520
OFFSET_X        = (WIDTH - BOARD_SIZE) // 2
OFFSET_Y        = PANEL_H + HUD_H + 12
CELL_GAP        = 6
FPS             = 60

# ── Colors ────────────────────────────────────────────────────────
BG          = (228, 227, 224)
INK         = (20,  20,  20)
INK_DIM     = (110, 110, 105)
PAPER       = (255, 255, 255)
ALERT_COL   = (220, 38,  38)
TRACK_COL   = (228, 227, 224)
OVERLAY_BG  = (228, 227, 224, 235)

# ── Gameplay ──────────────────────────────────────────────────────
INITIAL_TIME  = 15.0     # seconds on the clock at start()
BONUS_TIME    = 2.0      # added per correct hit
PENALTY_TIME  = 3.0      # removed per miss
MAX_TIME      = 30.0     # bonus time cannot push the clock above this
TICK_SECONDS  = 0.1      # cadence the controller feeds tick() at
TIME_EPSILON  = 1e-9
LOW_TIME      = 5.0      # timer bar turns red below this

MIN_GAP = 1
MAX_GAP = 15

# (minimum score, grid size) — highest matching step wins
GRID_STEPS = (
    (0,  2),
    (2,  3),
    (5,  4),
    (10, 5),
)

HUE_RANGE        = (0, 360)
SATURATION_RANGE = (40, 80)
LIGHTNESS_RANGE  = (40, 60)

# (exclusive upper score bound, label); the last entry catches everything else
RANKS = (
    (10,   "Novice"),
    (20,   "Apprentice"),
    (35,   "Artisan"),
    (50,   "Master"),
    (None, "Visionary"),
)

# ── Game States ───────────────────────────────────────────────────
STATE_IDLE    = "idle"
STATE_PLAYING = "playing"
STATE_ENDED   = "ended"
