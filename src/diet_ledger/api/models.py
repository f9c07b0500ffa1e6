"""Pydantic models for API payloads."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from diet_ledger.domain.categories import MEAL_TYPES
from diet_ledger.domain.ledger import MealDraft
from diet_ledger.services.drafts import DEFAULT_MEAL_TIME


class PortionPayload(BaseModel):
    """A raw portion entry from the meal form."""

    model_config = ConfigDict(populate_by_name=True)

    group_id: int = Field(alias="groupId")
    amount: float | str | None = None


class MealPayload(BaseModel):
    """Meal form submission."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    meal_type: str = Field(default=MEAL_TYPES[0], alias="type")
    time: str = Field(default=DEFAULT_MEAL_TIME, pattern=r"^\d{2}:\d{2}$")
    custom_name: str | None = Field(default=None, alias="customName")
    portions: list[PortionPayload] = Field(default_factory=list)

    @field_validator("meal_type")
    @classmethod
    def _known_meal_type(cls, value: str) -> str:
        if value not in MEAL_TYPES:
            raise ValueError(f"unknown meal type: {value}")
        return value

    def to_draft(self) -> MealDraft:
        """Convert to a domain draft; later portions win per category."""
        return MealDraft(
            id=self.id,
            meal_type=self.meal_type,
            time=self.time,
            custom_name=self.custom_name,
            portions={portion.group_id: portion.amount for portion in self.portions},
        )


class GoalPayload(BaseModel):
    """Goal update; null clears the goal."""

    value: float | None = Field(default=None, ge=0)
