"""JSON encoding of the ledger for the blob store."""

import json
import math
from collections.abc import Mapping
from datetime import date

from diet_ledger.domain.ledger import DayRecord, Meal

GOALS_KEY = "goals"
DAY_DATA_KEY = "dayData"


def dump_goals(goals: Mapping[int, float]) -> str:
    """Encode a goal table as a JSON object keyed by category id."""
    return json.dumps({str(category_id): value for category_id, value in goals.items()})


def parse_goals(raw: str) -> dict[int, float]:
    """Decode a goal table, skipping unset entries.

    Raises ValueError when the payload is not a goal object.
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("goals payload must be an object")
    goals: dict[int, float] = {}
    for key, value in data.items():
        if value is None or value == "":
            continue
        goals[int(key)] = _to_number(value)
    return goals


def dump_days(days: Mapping[date, DayRecord]) -> str:
    """Encode day records as a JSON array ordered by date."""
    return json.dumps([_day_to_json(days[day]) for day in sorted(days)])


def parse_days(raw: str) -> dict[date, DayRecord]:
    """Decode day records keyed by date.

    Raises ValueError, TypeError or KeyError on malformed payloads.
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("dayData payload must be an array")
    days: dict[date, DayRecord] = {}
    for entry in data:
        record = _day_from_json(entry)
        days[record.day] = record
    return days


def meal_to_json(meal: Meal) -> dict[str, object]:
    """Encode a meal in the persisted camelCase layout."""
    payload: dict[str, object] = {
        "id": meal.id,
        "type": meal.meal_type,
        "time": meal.time,
        "portions": [
            {"groupId": category_id, "amount": amount}
            for category_id, amount in meal.portions.items()
        ],
    }
    if meal.custom_name:
        payload["customName"] = meal.custom_name
    return payload


def _day_to_json(record: DayRecord) -> dict[str, object]:
    return {
        "date": record.day.isoformat(),
        "meals": [meal_to_json(meal) for meal in record.meals],
    }


def _day_from_json(entry: dict[str, object]) -> DayRecord:
    day = date.fromisoformat(str(entry["date"]))
    meals: dict[str, Meal] = {}
    for raw_meal in entry.get("meals") or []:
        meal = _meal_from_json(raw_meal)
        meals[meal.id] = meal
    return DayRecord(day=day, meals=tuple(meals.values()))


def _meal_from_json(raw: dict[str, object]) -> Meal:
    portions: dict[int, float] = {}
    for portion in raw.get("portions") or []:
        amount = _to_number(portion["amount"])
        if amount > 0:
            portions[int(portion["groupId"])] = amount
    custom_name = raw.get("customName")
    return Meal(
        id=str(raw["id"]),
        meal_type=str(raw["type"]),
        time=str(raw["time"]),
        portions=portions,
        custom_name=str(custom_name) if custom_name else None,
    )


def _to_number(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"expected a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"expected a finite number, got {value!r}")
    return float(value)
