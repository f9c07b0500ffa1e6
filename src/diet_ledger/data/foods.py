"""Static food catalog with reference servings per category."""

from diet_ledger.domain.categories import (
    BREADS_FIBER,
    DAIRY,
    FRUITS,
    GOOD_FATS,
    GRAINS_BEANS,
    PROTEINS,
)
from diet_ledger.domain.foods import Food

FOODS: tuple[Food, ...] = (
    Food(1, "Chicken breast, grilled", PROTEINS, "1 small fillet", 30),
    Food(2, "Egg, whole", PROTEINS, "1 unit", 50),
    Food(3, "Egg whites", PROTEINS, "3 units", 90),
    Food(4, "Tuna, canned in water", PROTEINS, "2 tablespoons", 30),
    Food(5, "Salmon, baked", PROTEINS, "1 small piece", 30),
    Food(6, "Lean ground beef", PROTEINS, "2 tablespoons", 30),
    Food(7, "Tofu, firm", PROTEINS, "1 slice", 60, "Also counts as a plant protein"),
    Food(8, "Whey protein", PROTEINS, "1/2 scoop", 15),
    Food(9, "Brown rice, cooked", GRAINS_BEANS, "2 tablespoons", 40),
    Food(10, "Black beans, cooked", GRAINS_BEANS, "1 ladle", 60),
    Food(11, "Lentils, cooked", GRAINS_BEANS, "3 tablespoons", 60),
    Food(12, "Chickpeas, cooked", GRAINS_BEANS, "2 tablespoons", 40),
    Food(13, "Quinoa, cooked", GRAINS_BEANS, "2 tablespoons", 40),
    Food(14, "Sweet potato, baked", GRAINS_BEANS, "1 small slice", 50),
    Food(15, "Banana", FRUITS, "1/2 unit", 40),
    Food(16, "Apple", FRUITS, "1/2 unit", 70),
    Food(17, "Papaya", FRUITS, "1 slice", 100),
    Food(18, "Strawberries", FRUITS, "5 units", 60),
    Food(19, "Açaí pulp, unsweetened", FRUITS, "1/2 pack", 50, "No added syrup"),
    Food(20, "Orange", FRUITS, "1 small unit", 90),
    Food(21, "Whole wheat bread", BREADS_FIBER, "1 slice", 25),
    Food(22, "Rolled oats", BREADS_FIBER, "2 tablespoons", 15),
    Food(23, "Tapioca crêpe", BREADS_FIBER, "1 small crêpe", 30),
    Food(24, "Corn couscous", BREADS_FIBER, "1 slice", 40),
    Food(25, "Chia seeds", BREADS_FIBER, "1 tablespoon", 10),
    Food(26, "Olive oil", GOOD_FATS, "1 teaspoon", 5),
    Food(27, "Avocado", GOOD_FATS, "2 tablespoons", 40),
    Food(28, "Peanut butter", GOOD_FATS, "1 teaspoon", 10),
    Food(29, "Brazil nuts", GOOD_FATS, "2 units", 8),
    Food(30, "Almonds", GOOD_FATS, "6 units", 8),
    Food(31, "Plain yogurt", DAIRY, "1/2 cup", 100),
    Food(32, "Skim milk", DAIRY, "1 cup", 200),
    Food(33, "Cottage cheese", DAIRY, "2 tablespoons", 30),
    Food(34, "Minas cheese", DAIRY, "1 slice", 30),
    Food(35, "Crème fraîche", DAIRY, "1 tablespoon", 15, "Occasional use"),
    Food(36, "Ricotta", DAIRY, "1 slice", 30),
)
