import random

import pytest

from chroma.colors import Color
from chroma.config import STATE_IDLE, STATE_PLAYING, STATE_ENDED
from chroma.model import GameModel, Round, rank, average_response_time


def miss_index(model):
    """Any in-range cell that is not the target."""
    return (model.round.odd_index + 1) % model.round.cell_count


def hit(model):
    return model.select(model.round.odd_index)


# ── start() ───────────────────────────────────────────────────────
def test_new_model_is_idle(model):
    snap = model.snapshot()
    assert snap.state == STATE_IDLE
    assert snap.score == 0
    assert snap.high_score == 0
    assert snap.cells == []
    assert snap.odd_index is None
    assert snap.grid_size == 2


def test_start(playing):
    snap = playing.snapshot()
    assert snap.state == STATE_PLAYING
    assert snap.score == 0
    assert snap.time_remaining == 15.0
    assert snap.grid_size == 2
    assert len(snap.cells) == 4
    assert snap.last_delta_report is None


def test_restart_from_ended_keeps_high_score(playing):
    for _ in range(3):
        hit(playing)
    playing.tick(100)
    assert playing.state == STATE_ENDED

    playing.start()
    snap = playing.snapshot()
    assert snap.state == STATE_PLAYING
    assert snap.score == 0
    assert snap.time_remaining == 15.0
    assert snap.grid_size == 2
    assert snap.high_score == 3
    assert snap.last_delta_report is None


# ── Round invariants ──────────────────────────────────────────────
def test_exactly_one_odd_cell(playing, changed_channels):
    for _ in range(15):
        snap = playing.snapshot()
        odd = [i for i, c in enumerate(snap.cells) if c == playing.round.odd_color]
        assert odd == [snap.odd_index]
        assert len(snap.cells) == snap.grid_size ** 2
        assert len(changed_channels(playing.round.base_color, playing.round.odd_color)) == 1
        hit(playing)


def test_round_is_frozen(playing):
    with pytest.raises(AttributeError):
        playing.round.odd_index = 0


def test_round_cells_row_major(playing):
    r = playing.round
    cells = Round(3, r.base_color, r.odd_color, 4).cells()
    assert cells[4] == r.odd_color
    assert cells.count(r.base_color) == 8


# ── select() ──────────────────────────────────────────────────────
def test_correct_selection(playing):
    old_round = playing.round
    result = hit(playing)
    assert result.correct and result.accepted
    assert playing.score == 1
    assert playing.time_remaining == 17.0
    assert playing.round is not old_round
    assert playing.last_delta_report == old_round.deltas()


def test_correct_selection_grows_grid(playing):
    hit(playing)
    assert playing.round.grid_size == 2
    hit(playing)
    assert playing.round.grid_size == 3
    for _ in range(3):
        hit(playing)
    assert playing.round.grid_size == 4


def test_incorrect_selection(playing):
    old_round = playing.round
    result = playing.select(miss_index(playing))
    assert not result.correct and result.accepted
    assert playing.score == 0
    assert playing.time_remaining == 12.0
    assert playing.round is old_round


def test_out_of_range_index_is_a_miss(playing):
    for index in (-1, 4, 999):
        assert not playing.select(index).correct
    assert playing.time_remaining == 6.0
    assert playing.state == STATE_PLAYING


def test_ten_hit_streak(playing):
    for _ in range(10):
        assert hit(playing).correct
    snap = playing.snapshot()
    assert snap.score == 10
    assert snap.grid_size == 5
    assert snap.time_remaining == 30.0


def test_bonus_capped_at_max(playing):
    playing.tick(0.5)
    for _ in range(8):
        hit(playing)
    assert playing.time_remaining == 30.0


def test_delta_report_matches_gap(playing):
    hit(playing)
    report = playing.last_delta_report
    deltas = [report.hue, report.saturation, report.lightness]
    # score 0 round -> gap 15; a hue that wrapped past 0/360 reports 345
    assert sorted(deltas) in ([0, 0, 15], [0, 0, 345])


def test_delta_report_hue_across_zero(playing):
    playing.round = Round(2, Color(358, 50, 50), Color(3, 50, 50), 0)
    assert playing.select(0).correct
    assert playing.last_delta_report.hue == 355
    assert str(playing.snapshot().last_delta_report) == "ΔH: 355.0° | ΔS: 0.0% | ΔL: 0.0%"


# ── tick() ────────────────────────────────────────────────────────
def test_nine_ticks(playing):
    for _ in range(9):
        playing.tick(0.1)
    assert playing.time_remaining == pytest.approx(14.1)
    assert playing.state == STATE_PLAYING


def test_timeout_after_fifteen_seconds(playing):
    ticks = 0
    while playing.state == STATE_PLAYING:
        playing.tick(0.1)
        ticks += 1
    assert ticks == 150
    assert playing.state == STATE_ENDED
    assert playing.time_remaining == 0


def test_tick_overshoot_clamps_to_zero(playing):
    playing.tick(20)
    assert playing.time_remaining == 0
    assert playing.state == STATE_ENDED


def test_negative_tick_ignored(playing):
    playing.tick(-1)
    assert playing.time_remaining == 15.0


def test_miss_to_zero_waits_for_tick(playing):
    playing.tick(13.0)
    assert playing.time_remaining == pytest.approx(2.0)

    playing.select(miss_index(playing))
    assert playing.time_remaining == 0
    assert playing.state == STATE_PLAYING

    playing.tick(0.1)
    assert playing.state == STATE_ENDED
    assert playing.time_remaining == 0


def test_hit_after_miss_to_zero_rescues(playing):
    playing.tick(13.0)
    playing.select(miss_index(playing))
    hit(playing)
    assert playing.time_remaining == 2.0
    playing.tick(0.1)
    assert playing.state == STATE_PLAYING


# ── Wrong-state calls ─────────────────────────────────────────────
def test_calls_ignored_while_idle(model):
    model.tick(1.0)
    result = model.select(0)
    assert not result.accepted and not result.correct
    assert model.state == STATE_IDLE
    assert model.time_remaining == 15.0


def test_calls_ignored_after_end(playing):
    playing.tick(15)
    round_before = playing.round
    result = playing.select(playing.round.odd_index)
    playing.tick(1)
    assert not result.accepted
    assert playing.score == 0
    assert playing.time_remaining == 0
    assert playing.round is round_before


# ── High score ────────────────────────────────────────────────────
def test_high_score_updates_mid_game(playing):
    hit(playing)
    hit(playing)
    assert playing.snapshot().high_score == 2
    assert playing.state == STATE_PLAYING


def test_high_score_never_decreases(playing):
    for _ in range(4):
        hit(playing)
    playing.start()
    hit(playing)
    assert playing.high_score == 4
    for _ in range(4):
        hit(playing)
    assert playing.high_score == 5


def test_tying_previous_best_is_not_new_high_score(playing):
    for _ in range(5):
        hit(playing)
    playing.tick(100)
    assert playing.new_high_score

    playing.start()
    for _ in range(5):
        hit(playing)
    playing.tick(100)
    assert playing.high_score == 5
    assert not playing.new_high_score


def test_beating_previous_best_is_new_high_score(playing):
    for _ in range(2):
        hit(playing)
    playing.start()
    assert not playing.new_high_score
    for _ in range(3):
        hit(playing)
    assert playing.new_high_score


def test_zero_score_first_session_is_not_new_high_score(playing):
    playing.tick(100)
    assert not playing.new_high_score


# ── Reporting ─────────────────────────────────────────────────────
@pytest.mark.parametrize("score,label", [
    (0, "Novice"), (9, "Novice"), (10, "Apprentice"), (19, "Apprentice"),
    (20, "Artisan"), (34, "Artisan"), (35, "Master"), (49, "Master"),
    (50, "Visionary"), (120, "Visionary"),
])
def test_rank(score, label):
    assert rank(score) == label


def test_average_response_time():
    assert average_response_time(0, 0) == 0
    assert average_response_time(5, 0) == pytest.approx(5.0)
    assert average_response_time(4, 3.0) == pytest.approx(5.0)


def test_summary_after_timeout(playing):
    for _ in range(3):
        hit(playing)
    playing.tick(100)
    assert playing.rank == "Novice"
    assert playing.summary() == (
        "Your color perception threshold reached level 3. "
        "Final grid density: 3x3. "
        "Average response time: 7.00s per unit."
    )


def test_seeded_models_agree():
    a, b = GameModel(random.Random(42)), GameModel(random.Random(42))
    a.start()
    b.start()
    for _ in range(5):
        assert a.snapshot() == b.snapshot()
        hit(a)
        hit(b)
