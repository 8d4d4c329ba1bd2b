# bizwordle/domain/services/share_text.py
from typing import Iterable

from bizwordle.domain.models.guess_evaluation import GuessEvaluation
from bizwordle.domain.models.session_state import SessionState
from bizwordle.domain.services.guess_evaluator import evaluate

MATCH_GLYPH = "🟩"
MISS_GLYPH = "⬜"

DEFAULT_TITLE = "Biz Wordle"
DEFAULT_SHARE_URL = "https://bizwordle.me"


def glyph_row(evaluation: GuessEvaluation) -> str:
    return "".join(MATCH_GLYPH if m else MISS_GLYPH for m in evaluation.matches)


def status_line(state: SessionState) -> str:
    n = len(state.guesses)
    status = state.status
    if status == "Won":
        return f"I got it in {n}/{state.max_guesses} guesses!"
    if status == "GaveUp":
        return f"I gave up after {n} guesses!"
    if status == "Lost":
        return f"I ran out of guesses ({n}/{state.max_guesses})!"
    raise ValueError("share text is only available once the game is over")


def build_share_text(
    state: SessionState,
    title: str = DEFAULT_TITLE,
    url: str = DEFAULT_SHARE_URL,
) -> str:
    """
    Spoiler-light summary of a finished game, one glyph row per guess:

        Biz Wordle - Apple
        I got it in 3/8 guesses!

        ⬜⬜🟩⬜⬜
        🟩⬜🟩⬜⬜
        🟩🟩🟩🟩🟩

        Play at: https://bizwordle.me
    """
    header = status_line(state)
    rows: Iterable[str] = (glyph_row(evaluate(g, state.target)) for g in state.guesses)

    lines = [f"{title} - {state.target.name}", header, ""]
    lines.extend(rows)
    lines.extend(["", f"Play at: {url}"])
    return "\n".join(lines)
