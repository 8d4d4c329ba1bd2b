"""
Testing the pure per-field comparison and directional hints.
"""
from dataclasses import replace

import pytest

from bizwordle.domain.models.guess_evaluation import COMPARED_FIELDS, NUMERIC_FIELDS
from bizwordle.domain.services.guess_evaluator import directional_hint, evaluate, hint_arrow


def test_self_evaluation_matches_everything(companies):
    for c in companies:
        ev = evaluate(c, c)
        assert ev.is_correct is True
        assert ev.matches == (True,) * 5
        assert all(fr.hint is None for fr in ev.fields)


def test_fields_in_fixed_order(by_name):
    ev = evaluate(by_name["Tesla"], by_name["Apple"])
    assert tuple(fr.field for fr in ev.fields) == COMPARED_FIELDS
    assert ev.name == "Tesla"
    assert ev.is_correct is False


def test_microsoft_against_apple(by_name):
    ev = evaluate(by_name["Microsoft"], by_name["Apple"])

    rank = ev.field("fortune_rank")
    assert rank.match is False
    assert rank.value == 6
    assert rank.hint == "Lower"   # 6 > 3, target ranks lower

    founded = ev.field("founded")
    assert founded.match is False
    assert founded.hint == "Higher"   # 1975 < 1976

    assert ev.field("industry").match is True
    assert ev.field("headquarters").match is True
    assert ev.field("ceo").match is False
    assert ev.field("ceo").hint is None


def test_rank_hint_directions(by_name):
    apple = by_name["Apple"]   # rank 3
    assert evaluate(by_name["Walmart"], apple).field("fortune_rank").hint == "Higher"  # 1 < 3
    assert evaluate(by_name["Tesla"], apple).field("fortune_rank").hint == "Lower"     # 33 > 3


def test_founded_hint_directions(by_name):
    apple = by_name["Apple"]   # 1976
    assert evaluate(by_name["Meta"], apple).field("founded").hint == "Lower"       # 2004 > 1976
    assert evaluate(by_name["Toyota"], apple).field("founded").hint == "Higher"    # 1937 < 1976


def test_equal_numbers_never_hint(by_name):
    apple = by_name["Apple"]
    twin = replace(by_name["Amazon"], founded=1976, fortune_rank=3)
    ev = evaluate(twin, apple)
    assert ev.field("founded").match is True
    assert ev.field("founded").hint is None
    assert ev.field("fortune_rank").match is True
    assert ev.field("fortune_rank").hint is None
    assert ev.is_correct is False


def test_string_fields_are_case_sensitive(by_name):
    apple = by_name["Apple"]
    shouting = replace(by_name["Microsoft"], industry="TECHNOLOGY", headquarters="usa")
    ev = evaluate(shouting, apple)
    assert ev.field("industry").match is False
    assert ev.field("headquarters").match is False
    assert ev.field("industry").hint is None


@pytest.mark.parametrize("field,guessed,target,expected", [
    ("fortune_rank", 10, 5, "Lower"),
    ("fortune_rank", 5, 10, "Higher"),
    ("fortune_rank", 5, 5, None),
    ("founded", 1900, 2000, "Higher"),
    ("founded", 2000, 1900, "Lower"),
    ("founded", 1999, 1999, None),
    ("ceo", 1, 2, None),
])
def test_directional_hint(field, guessed, target, expected):
    assert directional_hint(field, guessed, target) == expected


def test_unknown_field_lookup_raises(by_name):
    ev = evaluate(by_name["Apple"], by_name["Apple"])
    with pytest.raises(KeyError):
        ev.field("revenue")


def test_hint_arrow():
    assert hint_arrow("Higher") == "↑"
    assert hint_arrow("Lower") == "↓"
    assert hint_arrow(None) == ""


@pytest.mark.parametrize("field", NUMERIC_FIELDS)
def test_every_numeric_field_has_a_hint_rule(field):
    assert directional_hint(field, 1, 2) in ("Higher", "Lower")
    assert directional_hint(field, 2, 1) in ("Higher", "Lower")


@pytest.mark.parametrize("field", [f for f in COMPARED_FIELDS if f not in NUMERIC_FIELDS])
def test_text_fields_never_hint(field):
    assert directional_hint(field, "Retail", "Banking") is None
