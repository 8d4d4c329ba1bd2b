# bizwordle/domain/services/guess_evaluator.py
from typing import Dict, List, Optional

from bizwordle.domain.models.company import CompanyRecord
from bizwordle.domain.models.guess_evaluation import (
    COMPARED_FIELDS,
    FieldResult,
    GuessEvaluation,
    HintType,
    NUMERIC_FIELDS,
)

HINT_ARROWS: Dict[str, str] = {"Higher": "↑", "Lower": "↓"}


def directional_hint(field: str, guessed: int, target: int) -> Optional[HintType]:
    """
    Which way the target lies from the guessed value.

        fortune_rank: guess > target -> "Lower" (a bigger company, the guessed
                      rank number must come down), otherwise "Higher"
        founded:      guess < target -> "Higher" (founded later),
                      otherwise "Lower"
    Equal values never produce a hint. Non-numeric fields return None.
    """
    if field not in NUMERIC_FIELDS or guessed == target:
        return None
    if field == "fortune_rank":
        return "Lower" if guessed > target else "Higher"
    if field == "founded":
        return "Higher" if guessed < target else "Lower"
    raise ValueError(f"no hint rule for numeric field {field!r}")


def evaluate(guess: CompanyRecord, target: CompanyRecord) -> GuessEvaluation:
    fields: List[FieldResult] = []
    for name in COMPARED_FIELDS:
        g = getattr(guess, name)
        t = getattr(target, name)
        match = g == t
        hint = None if match else directional_hint(name, g, t)
        fields.append(FieldResult(field=name, value=g, match=match, hint=hint))

    return GuessEvaluation(
        name=guess.name,
        is_correct=guess.name == target.name,
        fields=tuple(fields),
    )


def hint_arrow(hint: Optional[HintType]) -> str:
    return HINT_ARROWS.get(hint, "") if hint else ""
