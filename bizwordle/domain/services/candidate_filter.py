# bizwordle/domain/services/candidate_filter.py
from typing import AbstractSet, List, Sequence

from bizwordle.domain.models.company import CompanyRecord


def filter_candidates(
    query: str,
    dataset: Sequence[CompanyRecord],
    already_guessed_names: AbstractSet[str] = frozenset(),
) -> List[CompanyRecord]:
    """
    Search-as-you-type: case-insensitive substring match on the name.

    An empty query returns nothing rather than the whole list. Companies
    already guessed are left out. Dataset order is kept.
    """
    if not query:
        return []
    needle = query.lower()
    return [
        c for c in dataset
        if needle in c.name.lower() and c.name not in already_guessed_names
    ]
