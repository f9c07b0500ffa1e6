"""Domain models for the daily nutrition ledger."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Meal:
    """A stored eating occasion with positive portions keyed by category."""

    id: str
    meal_type: str
    time: str
    portions: Mapping[int, float]
    custom_name: str | None = None

    @property
    def display_name(self) -> str:
        """Name shown for the meal, preferring the custom one."""
        return self.custom_name or self.meal_type


@dataclass(frozen=True)
class MealDraft:
    """Meal form contents before validation.

    Portion values are raw form input: numbers, numeric strings, empty string
    or None.
    """

    meal_type: str
    time: str
    portions: Mapping[int, float | str | None] = field(default_factory=dict)
    custom_name: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class DayRecord:
    """All meals recorded on one calendar date."""

    day: date
    meals: tuple[Meal, ...] = ()

    def find_meal(self, meal_id: str) -> Meal | None:
        """Return the meal with the given id, if present."""
        for meal in self.meals:
            if meal.id == meal_id:
                return meal
        return None


@dataclass(frozen=True)
class Ledger:
    """Goal table plus every day record, keyed by date."""

    goals: Mapping[int, float]
    days: Mapping[date, DayRecord] = field(default_factory=dict)
