# bizwordle/application/game_service.py
from __future__ import annotations
from dataclasses import dataclass
from random import Random
from typing import List, Optional, Tuple
import logging

from bizwordle.application.ports import (
    Clipboard,
    ClipboardError,
    CompanyRepository,
    GameConfig,
    MarkerRepository,
)
from bizwordle.domain.models.company import CompanyRecord
from bizwordle.domain.models.guess_evaluation import GuessEvaluation
from bizwordle.domain.models.session_state import SessionState
from bizwordle.domain.services import session_rules
from bizwordle.domain.services.candidate_filter import filter_candidates
from bizwordle.domain.services.guess_evaluator import evaluate
from bizwordle.domain.services.share_text import build_share_text

COPY_OK_MESSAGE = "Results copied to clipboard!"
COPY_FAILED_MESSAGE = "Failed to copy results. Please try again."


@dataclass(frozen=True)
class ShareOutcome:
    text: str
    copied: bool
    message: str


class GameService:
    """
    Owns the current SessionState for one player.

    Every transition is delegated to domain/services/session_rules.py; this
    class only swaps in the returned state, talks to the ports and logs.
    Front ends hold an instance explicitly (no module-level game).
    """

    def __init__(
        self,
        companies_repo: CompanyRepository,
        marker_repo: MarkerRepository,
        clipboard: Clipboard,
        config: Optional[GameConfig] = None,
        logger: Optional[logging.Logger] = None,
        rng: Optional[Random] = None,
    ) -> None:
        self.companies_repo = companies_repo
        self.marker_repo = marker_repo
        self.clipboard = clipboard
        self.config = config or GameConfig()
        self.log = logger or logging.getLogger("bizwordle")
        self.rng = rng or Random()
        self._dataset: Optional[List[CompanyRecord]] = None
        self._state: Optional[SessionState] = None
        self.show_instructions = True

    # ---- lifecycle ----

    @property
    def dataset(self) -> List[CompanyRecord]:
        if self._dataset is None:
            self._dataset = self.companies_repo.load_companies()
            self.log.info("Dataset ready: %d companies", len(self._dataset))
        return self._dataset

    @property
    def state(self) -> SessionState:
        if self._state is None:
            raise RuntimeError("game not started; call start() first")
        return self._state

    def start(self) -> SessionState:
        self._state = session_rules.new_session(
            self.dataset, max_guesses=self.config.max_guesses, rng=self.rng
        )
        self.log.debug("New session, target=%s", self._state.target.name)

        self.show_instructions = not self.marker_repo.has_played()
        if self.show_instructions:
            try:
                self.marker_repo.mark_played()
            except OSError as e:
                self.log.warning("Could not persist first-play marker: %s", e)
        return self._state

    def new_game(self) -> SessionState:
        self._state = session_rules.restart(self.state, self.dataset, rng=self.rng)
        self.log.info("Restarted game (%d guesses allowed)", self._state.max_guesses)
        self.log.debug("New target=%s", self._state.target.name)
        return self._state

    def dismiss_instructions(self) -> None:
        self.show_instructions = False

    # ---- play ----

    def search(self, query: str) -> List[CompanyRecord]:
        return filter_candidates(query, self.dataset, self.state.guessed_names)

    def guess(self, record: CompanyRecord) -> Tuple[bool, Optional[GuessEvaluation]]:
        before = self.state
        after = session_rules.submit_guess(before, record)
        if after is before:
            self.log.debug("Ignored guess %r (status=%s)", record.name, before.status)
            return False, None

        self._state = after
        result = evaluate(record, after.target)
        self.log.info(
            "Guess %d/%d: %s -> %s",
            len(after.guesses), after.max_guesses, record.name, after.status,
        )
        return True, result

    def guess_first(self, query: str) -> Tuple[bool, Optional[GuessEvaluation]]:
        """The 'Guess' button: submit the first candidate for `query`, if any."""
        candidates = self.search(query)
        if not candidates:
            return False, None
        return self.guess(candidates[0])

    def give_up(self) -> bool:
        before = self.state
        self._state = session_rules.give_up(before)
        if self._state is before:
            self.log.debug("Give up ignored (status=%s, guesses=%d)", before.status, len(before.guesses))
            return False
        self.log.info("Player gave up after %d guesses", len(self._state.guesses))
        return True

    def evaluations(self) -> List[GuessEvaluation]:
        st = self.state
        return [evaluate(g, st.target) for g in st.guesses]

    # ---- game over ----

    def summary(self) -> str:
        st = self.state
        n = len(st.guesses)
        if st.status == "Won":
            return f"You got it in {n} tries!"
        if st.status == "GaveUp":
            return f"You gave up after {n} guesses."
        if st.status == "Lost":
            return f"You ran out of guesses after {n} guesses."
        return f"Guesses: {n}/{st.max_guesses}"

    def share_text(self) -> str:
        return build_share_text(self.state, title=self.config.title, url=self.config.share_url)

    def share(self) -> ShareOutcome:
        text = self.share_text()
        try:
            self.clipboard.copy(text)
        except ClipboardError as e:
            self.log.warning("Clipboard copy failed: %s", e)
            return ShareOutcome(text=text, copied=False, message=COPY_FAILED_MESSAGE)
        return ShareOutcome(text=text, copied=True, message=COPY_OK_MESSAGE)
