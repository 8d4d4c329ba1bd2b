from __future__ import annotations
from dataclasses import dataclass
from typing import List, Protocol

from bizwordle.domain.models.company import CompanyRecord
from bizwordle.domain.models.session_state import DEFAULT_MAX_GUESSES
from bizwordle.domain.services.share_text import DEFAULT_SHARE_URL, DEFAULT_TITLE

# =========================
# Dataset
# =========================

class CompanyRepository(Protocol):
    """Port: the fixed list of guessable companies, in file order."""
    def load_companies(self) -> List[CompanyRecord]:
        """
        Raises FileNotFoundError / ValueError when the source is missing
        or malformed. Never returns an empty list silently.
        """
        ...

# =========================
# Session marker
# =========================

class MarkerRepository(Protocol):
    """Port: the single persisted 'has played before' flag."""
    def has_played(self) -> bool: ...
    def mark_played(self) -> None: ...

# =========================
# Result export
# =========================

class ClipboardError(RuntimeError):
    """Raised by Clipboard adapters when the text could not be copied."""


class Clipboard(Protocol):
    """Port: hand share text to the platform clipboard."""
    def copy(self, text: str) -> None:
        """Raises ClipboardError on failure."""
        ...

@dataclass(frozen=True)
class GameConfig:
    """Configuration for the game use case."""
    max_guesses: int = DEFAULT_MAX_GUESSES
    title: str = DEFAULT_TITLE
    share_url: str = DEFAULT_SHARE_URL
