# bizwordle/domain/models/guess_evaluation.py
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union


# Direction of the target's value relative to the guessed value.
HintType = Literal[
    "Higher",   # target value is numerically higher than the guess
    "Lower",    # target value is numerically lower than the guess
]

# Compared attributes, in the order they are displayed and exported.
COMPARED_FIELDS: Tuple[str, ...] = (
    "industry",
    "founded",
    "headquarters",
    "fortune_rank",
    "ceo",
)

NUMERIC_FIELDS: Tuple[str, ...] = ("founded", "fortune_rank")


@dataclass(frozen=True)
class FieldResult:
    field: str                    # one of COMPARED_FIELDS
    value: Union[str, int]        # the guessed company's value for this field
    match: bool                   # exact equality with the target's value
    hint: Optional[HintType]      # only set for numeric fields that don't match


@dataclass(frozen=True)
class GuessEvaluation:
    """Per-field comparison of one guessed company against the target."""

    name: str
    is_correct: bool
    fields: Tuple[FieldResult, ...]

    def field(self, field_name: str) -> FieldResult:
        for fr in self.fields:
            if fr.field == field_name:
                return fr
        raise KeyError(field_name)

    @property
    def matches(self) -> Tuple[bool, ...]:
        return tuple(fr.match for fr in self.fields)
