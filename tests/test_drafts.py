"""Tests for meal form helpers."""

from diet_ledger.domain.categories import FRUITS, PROTEINS
from diet_ledger.domain.foods import Food
from diet_ledger.domain.ledger import Meal
from diet_ledger.services.drafts import (
    add_food,
    draft_from_meal,
    new_draft,
    parse_portion_input,
    with_portion,
)


def test_new_draft_defaults() -> None:
    draft = new_draft()

    assert draft.id is None
    assert draft.meal_type == "Breakfast"
    assert draft.time == "08:00"
    assert draft.portions == {}


def test_with_portion_replaces_existing_category() -> None:
    draft = with_portion(new_draft(), PROTEINS, 2)
    draft = with_portion(draft, PROTEINS, 3)

    assert draft.portions == {PROTEINS: 3}


def test_add_food_sets_one_portion_of_its_category() -> None:
    banana = Food(15, "Banana", FRUITS, "1/2 unit", 40)
    draft = with_portion(new_draft(), FRUITS, 4)

    draft = add_food(draft, banana)

    assert draft.portions == {FRUITS: 1.0}


def test_draft_from_meal_keeps_identity() -> None:
    meal = Meal(
        id="m1",
        meal_type="Dinner",
        time="19:00",
        portions={PROTEINS: 2.0},
        custom_name="Pasta night",
    )

    draft = draft_from_meal(meal)

    assert draft.id == "m1"
    assert draft.custom_name == "Pasta night"
    assert draft.portions == {PROTEINS: 2.0}


def test_parse_portion_input_accepts_decimal_text() -> None:
    assert parse_portion_input("1.5", None) == 1.5
    assert parse_portion_input("2.", 1.0) == 2.0
    assert parse_portion_input(".5", None) == 0.5


def test_parse_portion_input_clears_on_empty() -> None:
    assert parse_portion_input("", 3.0) is None


def test_parse_portion_input_discards_invalid_keystrokes() -> None:
    assert parse_portion_input("1.5.2", 1.5) == 1.5
    assert parse_portion_input("abc", 2.0) == 2.0
    assert parse_portion_input("-1", None) is None
    assert parse_portion_input(".", 4.0) == 4.0
