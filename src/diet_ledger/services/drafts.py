"""Helpers for the meal form before it is submitted."""

import re
from dataclasses import replace

from diet_ledger.domain.categories import MEAL_TYPES
from diet_ledger.domain.foods import Food
from diet_ledger.domain.ledger import Meal, MealDraft

DEFAULT_MEAL_TIME = "08:00"
_PORTION_INPUT = re.compile(r"\d*\.?\d*")


def new_draft() -> MealDraft:
    """Return an empty draft for a new meal."""
    return MealDraft(meal_type=MEAL_TYPES[0], time=DEFAULT_MEAL_TIME)


def draft_from_meal(meal: Meal) -> MealDraft:
    """Return a draft prefilled for editing an existing meal."""
    return MealDraft(
        id=meal.id,
        meal_type=meal.meal_type,
        time=meal.time,
        custom_name=meal.custom_name,
        portions=dict(meal.portions),
    )


def with_portion(
    draft: MealDraft, category_id: int, amount: float | str | None
) -> MealDraft:
    """Set the amount for a category, replacing any previous entry."""
    portions = dict(draft.portions)
    portions[category_id] = amount
    return replace(draft, portions=portions)


def add_food(draft: MealDraft, food: Food) -> MealDraft:
    """Add one portion of the food's category to the draft."""
    return with_portion(draft, food.group_number, 1.0)


def parse_portion_input(text: str, previous: float | None) -> float | None:
    """Apply a keystroke to a numeric portion or goal field.

    Empty text clears the field. Text that is not digits with at most one
    decimal point is discarded and the previous value kept.
    """
    if text == "":
        return None
    if not _PORTION_INPUT.fullmatch(text):
        return previous
    try:
        return float(text)
    except ValueError:
        return previous
