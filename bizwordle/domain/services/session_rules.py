# bizwordle/domain/services/session_rules.py
from dataclasses import replace
from random import Random
from typing import Optional, Sequence

from bizwordle.domain.models.company import CompanyRecord
from bizwordle.domain.models.session_state import DEFAULT_MAX_GUESSES, SessionState

_default_rng = Random()


def pick_target(dataset: Sequence[CompanyRecord], rng: Optional[Random] = None) -> CompanyRecord:
    """Uniform draw over the whole dataset."""
    if not dataset:
        raise ValueError("cannot pick a target from an empty dataset")
    return (rng or _default_rng).choice(list(dataset))


def new_session(
    dataset: Sequence[CompanyRecord],
    max_guesses: int = DEFAULT_MAX_GUESSES,
    rng: Optional[Random] = None,
) -> SessionState:
    if max_guesses < 1:
        raise ValueError(f"max_guesses must be >= 1, got {max_guesses}")
    return SessionState(target=pick_target(dataset, rng), max_guesses=max_guesses)


def can_submit(state: SessionState, record: CompanyRecord) -> bool:
    return state.status == "InProgress" and record.name not in state.guessed_names


def submit_guess(state: SessionState, record: CompanyRecord) -> SessionState:
    """
    Append `record` to the guesses.

    Returns `state` itself (no-op) for a duplicate name or a finished game.
    The new status follows from the appended guess:
      - name equals the target's -> Won
      - otherwise max_guesses reached -> Lost
      - otherwise InProgress
    """
    if not can_submit(state, record):
        return state
    return replace(state, guesses=state.guesses + (record,))


def can_give_up(state: SessionState) -> bool:
    return state.status == "InProgress" and len(state.guesses) >= 1


def give_up(state: SessionState) -> SessionState:
    if not can_give_up(state):
        return state
    return replace(state, gave_up=True)


def restart(
    state: SessionState,
    dataset: Sequence[CompanyRecord],
    rng: Optional[Random] = None,
) -> SessionState:
    # allowed from any status; only max_guesses carries over
    return new_session(dataset, max_guesses=state.max_guesses, rng=rng)
