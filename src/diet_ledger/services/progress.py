"""Daily progress against category goals."""

from collections.abc import Mapping

from diet_ledger.domain.categories import CATEGORY_GROUPS, CategoryGroup
from diet_ledger.domain.ledger import DayRecord, Meal
from diet_ledger.domain.progress import GroupProgress


def compute_progress(
    day_record: DayRecord, goals: Mapping[int, float], group: CategoryGroup
) -> GroupProgress:
    """Return consumed, remaining and fill figures for one category group.

    Consumption of every category in the group counts toward the goal of the
    group's first category. Groups without a goal report no progress.
    """
    consumed = sum(
        (
            meal.portions.get(category_id, 0.0)
            for meal in day_record.meals
            for category_id in group.ids
        ),
        0.0,
    )
    goal = goals.get(group.primary_id)
    if goal is None:
        return GroupProgress(
            group=group,
            consumed=consumed,
            goal=None,
            remaining=0.0,
            is_over_goal=False,
            progress_fraction=0.0,
        )
    if goal == 0:
        fraction = 1.0 if consumed > 0 else 0.0
    else:
        fraction = min(consumed / goal, 1.0)
    return GroupProgress(
        group=group,
        consumed=consumed,
        goal=goal,
        remaining=goal - consumed,
        is_over_goal=consumed > goal,
        progress_fraction=fraction,
    )


def compute_day_progress(
    day_record: DayRecord, goals: Mapping[int, float]
) -> list[GroupProgress]:
    """Return progress rows for every category group in display order."""
    return [compute_progress(day_record, goals, group) for group in CATEGORY_GROUPS]


def meals_by_time(day_record: DayRecord) -> list[Meal]:
    """Return the day's meals ordered by time of day."""
    return sorted(day_record.meals, key=lambda meal: meal.time)


def format_quantity(value: float) -> str:
    """Format a portion count with one decimal, dropping a trailing '.0'."""
    text = f"{value:.1f}"
    if text in {"-0.0", "0.0"}:
        return "0"
    return text.removesuffix(".0")


def goal_badge(progress: GroupProgress) -> str | None:
    """Return the status label shown next to a progress row."""
    if progress.goal is None:
        return None
    if progress.is_over_goal:
        return f"+{format_quantity(progress.consumed - progress.goal)} extra"
    left = format_quantity(progress.remaining)
    if progress.remaining > 0 and left != "0":
        return f"{left} left"
    return "Goal met"
