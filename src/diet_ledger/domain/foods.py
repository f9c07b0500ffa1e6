"""Domain models for the food catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Food:
    """A catalog food with its category and reference serving."""

    id: int
    name: str
    group_number: int
    serving_description: str
    serving_weight_grams: float | None = None
    notes: str | None = None
