"""Food-group categories and their display pairing."""

from dataclasses import dataclass

PROTEINS = 4
GRAINS_BEANS = 5
FRUITS = 9
GOOD_FATS = 11
BREADS_FIBER = 12
DAIRY = 13


@dataclass(frozen=True)
class Category:
    """A tracked food group."""

    id: int
    name: str
    color: str


@dataclass(frozen=True)
class CategoryGroup:
    """One or two categories sharing a goal and a progress row."""

    name: str
    ids: tuple[int, ...]
    color: str

    @property
    def primary_id(self) -> int:
        """Category id that carries the group's goal."""
        return self.ids[0]


CATEGORIES: tuple[Category, ...] = (
    Category(PROTEINS, "Proteins", "rose"),
    Category(FRUITS, "Fruits", "amber"),
    Category(BREADS_FIBER, "Breads/Fiber", "amber"),
    Category(GRAINS_BEANS, "Grains/Beans", "emerald"),
    Category(GOOD_FATS, "Good Fats", "sky"),
    Category(DAIRY, "Dairy", "sky"),
)

CATEGORY_GROUPS: tuple[CategoryGroup, ...] = (
    CategoryGroup("Proteins", (PROTEINS,), "rose"),
    CategoryGroup("Grains/Beans", (GRAINS_BEANS,), "emerald"),
    CategoryGroup("Fruits & Breads/Fiber", (FRUITS, BREADS_FIBER), "amber"),
    CategoryGroup("Good Fats & Dairy", (GOOD_FATS, DAIRY), "sky"),
)

DEFAULT_GOALS: dict[int, float] = {
    PROTEINS: 12,
    FRUITS: 6,
    BREADS_FIBER: 6,
    GRAINS_BEANS: 10,
    GOOD_FATS: 4,
    DAIRY: 4,
}

MEAL_TYPES: tuple[str, ...] = (
    "Breakfast",
    "Morning Snack",
    "Lunch",
    "Afternoon Snack",
    "Dinner",
    "Late Snack",
)


def category_name(category_id: int) -> str:
    """Return a display name for a category id."""
    for category in CATEGORIES:
        if category.id == category_id:
            return category.name
    return f"Group {category_id}"
