"""
Testing the shareable result summary.
"""
import pytest

from bizwordle.domain.models.session_state import SessionState
from bizwordle.domain.services import session_rules
from bizwordle.domain.services.share_text import build_share_text, glyph_row, status_line
from bizwordle.domain.services.guess_evaluator import evaluate


def test_won_summary(by_name):
    st = SessionState(target=by_name["Apple"])
    st = session_rules.submit_guess(st, by_name["Tesla"])
    st = session_rules.submit_guess(st, by_name["Microsoft"])
    st = session_rules.submit_guess(st, by_name["Apple"])

    assert build_share_text(st) == "\n".join([
        "Biz Wordle - Apple",
        "I got it in 3/8 guesses!",
        "",
        "⬜⬜🟩⬜⬜",
        "🟩⬜🟩⬜⬜",
        "🟩🟩🟩🟩🟩",
        "",
        "Play at: https://bizwordle.me",
    ])


def test_gave_up_summary(by_name):
    st = SessionState(target=by_name["Toyota"])
    st = session_rules.submit_guess(st, by_name["Tesla"])
    st = session_rules.give_up(st)
    text = build_share_text(st, title="Corp Quiz", url="https://example.test")
    lines = text.split("\n")
    assert lines[0] == "Corp Quiz - Toyota"
    assert lines[1] == "I gave up after 1 guesses!"
    assert lines[3] == "🟩⬜⬜⬜⬜"
    assert lines[-1] == "Play at: https://example.test"


def test_lost_summary(companies, by_name):
    st = SessionState(target=by_name["Apple"], max_guesses=2)
    st = session_rules.submit_guess(st, by_name["Meta"])
    st = session_rules.submit_guess(st, by_name["Walmart"])
    assert status_line(st) == "I ran out of guesses (2/2)!"


def test_in_progress_has_no_share_text(by_name):
    st = SessionState(target=by_name["Apple"])
    with pytest.raises(ValueError):
        build_share_text(st)


def test_glyph_row_uses_fixed_field_order(by_name):
    # Microsoft vs Apple: industry and headquarters match
    assert glyph_row(evaluate(by_name["Microsoft"], by_name["Apple"])) == "🟩⬜🟩⬜⬜"
