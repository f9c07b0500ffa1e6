"""Search over the static food catalog."""

import unicodedata
from dataclasses import dataclass, field

from diet_ledger.data.foods import FOODS
from diet_ledger.domain.foods import Food


@dataclass
class FoodCatalogService:
    """Read-only access to the food catalog."""

    foods: tuple[Food, ...] = field(default=FOODS)

    def search(self, term: str | None, group_number: int | None = None) -> list[Food]:
        """Match foods by name, ignoring case and accents.

        A blank term yields no results. Results keep catalog order.
        """
        if not term or not term.strip():
            return []
        needle = _normalize(term)
        return [
            food
            for food in self.foods
            if needle in _normalize(food.name)
            and (group_number is None or food.group_number == group_number)
        ]

    def get(self, food_id: int) -> Food | None:
        """Return a food by id, if present."""
        for food in self.foods:
            if food.id == food_id:
                return food
        return None

    def group_numbers(self) -> list[int]:
        """Return the distinct category numbers present in the catalog."""
        return sorted({food.group_number for food in self.foods})

    def grouped(self) -> dict[int, list[Food]]:
        """Return foods bucketed by category number."""
        grouped: dict[int, list[Food]] = {}
        for food in self.foods:
            grouped.setdefault(food.group_number, []).append(food)
        return grouped


def _normalize(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(char for char in decomposed if not unicodedata.combining(char))
