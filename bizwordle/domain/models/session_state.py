# bizwordle/domain/models/session_state.py
from dataclasses import dataclass
from typing import FrozenSet, Literal, Tuple

from bizwordle.domain.models.company import CompanyRecord


GameStatus = Literal[
    "InProgress",  # still accepting guesses
    "Won",         # last guess named the target
    "Lost",        # ran out of guesses
    "GaveUp",      # player gave up after at least one guess
]

DEFAULT_MAX_GUESSES = 8


@dataclass(frozen=True)
class SessionState:
    """
    One game: the mystery company plus the guesses made so far.

    Never mutated in place. The transition functions in
    domain/services/session_rules.py return a new SessionState.
    `status` is derived from the other fields and cannot be set directly.
    """

    target: CompanyRecord
    guesses: Tuple[CompanyRecord, ...] = ()
    max_guesses: int = DEFAULT_MAX_GUESSES
    gave_up: bool = False

    @property
    def status(self) -> GameStatus:
        if self.guesses and self.guesses[-1].name == self.target.name:
            return "Won"
        if self.gave_up:
            return "GaveUp"
        if len(self.guesses) >= self.max_guesses:
            return "Lost"
        return "InProgress"

    @property
    def is_over(self) -> bool:
        return self.status != "InProgress"

    @property
    def guessed_names(self) -> FrozenSet[str]:
        return frozenset(g.name for g in self.guesses)

    @property
    def guesses_left(self) -> int:
        return max(0, self.max_guesses - len(self.guesses))
