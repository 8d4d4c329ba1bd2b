from pathlib import Path
from random import Random
from typing import List

import pytest

from bizwordle.application.game_service import GameService
from bizwordle.application.ports import ClipboardError, GameConfig
from bizwordle.domain.models.company import CompanyRecord

ROOT = Path(__file__).resolve().parents[1]

SAMPLE_CSV = """name,industry,founded,headquarters,fortuneRank,ceo
Apple,Technology,1976,USA,3,Tim Cook
Microsoft,Technology,1975,USA,6,Satya Nadella
Amazon,E-commerce,1994,USA,2,Andy Jassy
Tesla,Automotive,2003,USA,33,Elon Musk
Google,Technology,1998,USA,8,Sundar Pichai
Walmart,Retail,1962,USA,1,Doug McMillon
Toyota,Automotive,1937,Japan,10,Koji Sato
Meta,Technology,2004,USA,34,Mark Zuckerberg
Berkshire Hathaway,Conglomerate,1839,USA,7,Warren Buffett
JPMorgan Chase,Banking,1799,USA,17,Jamie Dimon
"""


@pytest.fixture
def companies() -> List[CompanyRecord]:
    return [
        CompanyRecord("Apple", "Technology", 1976, "USA", 3, "Tim Cook"),
        CompanyRecord("Microsoft", "Technology", 1975, "USA", 6, "Satya Nadella"),
        CompanyRecord("Amazon", "E-commerce", 1994, "USA", 2, "Andy Jassy"),
        CompanyRecord("Tesla", "Automotive", 2003, "USA", 33, "Elon Musk"),
        CompanyRecord("Google", "Technology", 1998, "USA", 8, "Sundar Pichai"),
        CompanyRecord("Walmart", "Retail", 1962, "USA", 1, "Doug McMillon"),
        CompanyRecord("Toyota", "Automotive", 1937, "Japan", 10, "Koji Sato"),
        CompanyRecord("Meta", "Technology", 2004, "USA", 34, "Mark Zuckerberg"),
        CompanyRecord("Berkshire Hathaway", "Conglomerate", 1839, "USA", 7, "Warren Buffett"),
        CompanyRecord("JPMorgan Chase", "Banking", 1799, "USA", 17, "Jamie Dimon"),
    ]


@pytest.fixture
def by_name(companies):
    return {c.name: c for c in companies}


@pytest.fixture
def sample_csv(tmp_path) -> Path:
    p = tmp_path / "companies.csv"
    p.write_text(SAMPLE_CSV, encoding="utf-8")
    return p


class ListCompanyRepository:
    def __init__(self, companies):
        self.companies = list(companies)
        self.loads = 0

    def load_companies(self):
        self.loads += 1
        return list(self.companies)


class InMemoryMarkerRepository:
    def __init__(self, has_played: bool = False, fail_writes: bool = False):
        self._has_played = has_played
        self.fail_writes = fail_writes

    def has_played(self) -> bool:
        return self._has_played

    def mark_played(self) -> None:
        if self.fail_writes:
            raise PermissionError("read-only marker")
        self._has_played = True


class RecordingClipboard:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.copied = []

    def copy(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("boom")
        self.copied.append(text)


class PinnedRandom(Random):
    """choice() always returns the company with the pinned name."""

    def __init__(self, name: str):
        super().__init__(0)
        self.name = name

    def choice(self, seq):
        return next(c for c in seq if c.name == self.name)


@pytest.fixture
def make_service(companies):
    def _make(target="Apple", has_played=False, clipboard=None, max_guesses=8, marker=None):
        return GameService(
            companies_repo=ListCompanyRepository(companies),
            marker_repo=marker or InMemoryMarkerRepository(has_played=has_played),
            clipboard=clipboard or RecordingClipboard(),
            config=GameConfig(max_guesses=max_guesses),
            rng=PinnedRandom(target),
        )
    return _make
