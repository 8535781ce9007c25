"""Built-in food catalog for the food picker."""

from dataclasses import dataclass, field

from calorie_tracker.domain.forms import FoodLogForm
from calorie_tracker.domain.nutrition import CatalogFood

SAMPLE_FOODS = (
    CatalogFood("Chicken Breast", 165, 31, 0, 3.6, "100g"),
    CatalogFood("Brown Rice", 111, 2.6, 23, 0.9, "100g"),
    CatalogFood("Banana", 89, 1.1, 23, 0.3, "1 medium"),
    CatalogFood("Greek Yogurt", 59, 10, 3.6, 0.4, "100g"),
    CatalogFood("Almonds", 579, 21, 22, 50, "100g"),
    CatalogFood("Salmon", 208, 20, 0, 13, "100g"),
    CatalogFood("Sweet Potato", 86, 1.6, 20, 0.1, "100g"),
    CatalogFood("Eggs", 155, 13, 1.1, 11, "2 large"),
    CatalogFood("Oatmeal", 68, 2.4, 12, 1.4, "100g"),
    CatalogFood("Broccoli", 34, 2.8, 7, 0.4, "100g"),
)


@dataclass
class FoodCatalog:
    """Searchable list of foods with known macros."""

    foods: tuple[CatalogFood, ...] = field(default=SAMPLE_FOODS)

    def search(self, term: str | None) -> list[CatalogFood]:
        """Return foods whose name contains the term, case-insensitively."""
        needle = (term or "").strip().lower()
        return [food for food in self.foods if needle in food.name.lower()]

    def get(self, name: str) -> CatalogFood | None:
        """Return a food by exact name, ignoring case."""
        wanted = name.strip().lower()
        for food in self.foods:
            if food.name.lower() == wanted:
                return food
        return None

    @staticmethod
    def to_form(food: CatalogFood, meal_type: str | None = None) -> FoodLogForm:
        """Build the log form for a picked food."""
        return FoodLogForm(
            food_name=food.name,
            calories=food.calories,
            protein=food.protein,
            carbs=food.carbs,
            fat=food.fat,
            serving_size=food.serving,
            meal_type=meal_type,
        )
