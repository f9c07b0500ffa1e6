"""Ledger store: per-day meal records, goals and their persistence."""

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Protocol, TypeVar
from uuid import uuid4

from diet_ledger.domain.categories import DEFAULT_GOALS
from diet_ledger.domain.errors import PersistenceError, ValidationError
from diet_ledger.domain.ledger import DayRecord, Ledger, Meal, MealDraft
from diet_ledger.services.ledger_codec import (
    DAY_DATA_KEY,
    GOALS_KEY,
    dump_days,
    dump_goals,
    parse_days,
    parse_goals,
)

logger = logging.getLogger(__name__)

LedgerListener = Callable[[Ledger], None]
T = TypeVar("T")


class BlobStore(Protocol):
    """Key/value storage holding whole JSON documents."""

    def read(self, key: str) -> str | None:
        """Return the stored text for a key, if present."""

    def write(self, key: str, value: str) -> None:
        """Overwrite the stored text for a key."""


def default_ledger() -> Ledger:
    """Return a ledger with the built-in goals and no day records."""
    return Ledger(goals=dict(DEFAULT_GOALS), days={})


def get_day_record(ledger: Ledger, day: date) -> DayRecord:
    """Return the record for a date, or an empty one that is not stored."""
    return ledger.days.get(day) or DayRecord(day=day)


def upsert_meal(ledger: Ledger, day: date, draft: MealDraft) -> Ledger:
    """Store a meal for a date, replacing any meal with the same id.

    Raises ValidationError when the draft has no portion with a positive
    amount; the ledger is left untouched in that case.
    """
    portions = valid_portions(draft.portions)
    if not portions:
        raise ValidationError("Add at least one food portion.")
    meal = Meal(
        id=draft.id or uuid4().hex,
        meal_type=draft.meal_type,
        time=draft.time,
        portions=portions,
        custom_name=(draft.custom_name or "").strip() or None,
    )
    record = get_day_record(ledger, day)
    if record.find_meal(meal.id) is None:
        meals = (*record.meals, meal)
    else:
        meals = tuple(meal if m.id == meal.id else m for m in record.meals)
    return _with_day(ledger, replace(record, meals=meals))


def remove_meal(ledger: Ledger, day: date, meal_id: str) -> Ledger:
    """Remove a meal; the same ledger is returned when it is absent."""
    record = ledger.days.get(day)
    if record is None or record.find_meal(meal_id) is None:
        return ledger
    meals = tuple(meal for meal in record.meals if meal.id != meal_id)
    return _with_day(ledger, replace(record, meals=meals))


def set_goal(ledger: Ledger, category_id: int, value: float | None) -> Ledger:
    """Set the goal for a category, or clear it when value is None."""
    goals = dict(ledger.goals)
    if value is None:
        goals.pop(category_id, None)
    else:
        goals[category_id] = float(value)
    return replace(ledger, goals=goals)


def valid_portions(raw: Mapping[int, float | str | None]) -> dict[int, float]:
    """Keep only portions whose amount is a finite number above zero."""
    portions: dict[int, float] = {}
    for category_id, value in raw.items():
        amount = _to_amount(value)
        if amount is not None and amount > 0:
            portions[int(category_id)] = amount
    return portions


def _to_amount(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return amount if math.isfinite(amount) else None


def _with_day(ledger: Ledger, record: DayRecord) -> Ledger:
    days = dict(ledger.days)
    days[record.day] = record
    return replace(ledger, days=days)


@dataclass
class LedgerStore:
    """Loads and saves the full ledger against a blob store."""

    blob_store: BlobStore

    def load_ledger(self) -> Ledger:
        """Read the ledger, falling back to defaults for missing or bad data."""
        goals = self._load(GOALS_KEY, parse_goals)
        days = self._load(DAY_DATA_KEY, parse_days)
        return Ledger(
            goals=dict(DEFAULT_GOALS) if goals is None else goals,
            days={} if days is None else days,
        )

    def persist(self, ledger: Ledger) -> None:
        """Overwrite both stored keys with the ledger contents."""
        try:
            self.blob_store.write(GOALS_KEY, dump_goals(ledger.goals))
            self.blob_store.write(DAY_DATA_KEY, dump_days(ledger.days))
        except OSError as exc:
            raise PersistenceError("Failed to save the ledger") from exc

    def _load(self, key: str, parse: Callable[[str], T]) -> T | None:
        try:
            raw = self.blob_store.read(key)
        except (OSError, UnicodeDecodeError):
            logger.warning("Failed to read stored ledger data", extra={"key": key})
            return None
        if raw is None:
            return None
        try:
            return parse(raw)
        except (ValueError, TypeError, KeyError, AttributeError, RecursionError):
            logger.warning("Ignoring malformed stored ledger data", extra={"key": key})
            return None


@dataclass
class LedgerService:
    """Owns the live ledger and persists it after every change."""

    store: LedgerStore
    ledger: Ledger = field(default_factory=default_ledger)
    listeners: list[LedgerListener] = field(default_factory=list)

    @classmethod
    def load(cls, store: LedgerStore) -> "LedgerService":
        """Create a service with the ledger read from the store."""
        return cls(store=store, ledger=store.load_ledger())

    def subscribe(self, listener: LedgerListener) -> None:
        """Register a callback invoked with each new ledger value."""
        self.listeners.append(listener)

    def get_day_record(self, day: date) -> DayRecord:
        """Return the record for a date from the live ledger."""
        return get_day_record(self.ledger, day)

    def upsert_meal(self, day: date, draft: MealDraft) -> DayRecord:
        """Add or replace a meal and return the updated day record."""
        self._apply(upsert_meal(self.ledger, day, draft))
        return self.get_day_record(day)

    def remove_meal(self, day: date, meal_id: str) -> DayRecord:
        """Remove a meal and return the day record."""
        self._apply(remove_meal(self.ledger, day, meal_id))
        return self.get_day_record(day)

    def set_goal(self, category_id: int, value: float | None) -> Ledger:
        """Set or clear a goal and return the live ledger."""
        self._apply(set_goal(self.ledger, category_id, value))
        return self.ledger

    def _apply(self, updated: Ledger) -> None:
        if updated is self.ledger:
            return
        self.ledger = updated
        try:
            self.store.persist(updated)
        finally:
            for listener in self.listeners:
                listener(updated)
