"""Domain models for daily progress."""

from dataclasses import dataclass

from diet_ledger.domain.categories import CategoryGroup


@dataclass(frozen=True)
class GroupProgress:
    """Progress of one category group on one day."""

    group: CategoryGroup
    consumed: float
    goal: float | None
    remaining: float
    is_over_goal: bool
    progress_fraction: float
