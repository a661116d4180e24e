"""Static nutrient reference tables: daily targets and food sources."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class NutrientTarget:
    """Recommended daily intake range in the nutrient's native unit."""

    min: float
    optimal: float
    max: float


@dataclass(frozen=True)
class NutrientSourceInfo:
    """Descriptive metadata used when recommending foods for a nutrient."""

    category: str
    top_foods: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""


UNKNOWN_SOURCE = NutrientSourceInfo(category="Unknown")

# Adult daily targets; macros vary with individual goals.
NUTRIENT_TARGETS: Mapping[str, NutrientTarget] = MappingProxyType(
    {
        "calories": NutrientTarget(min=1500, optimal=2000, max=3000),
        "protein_g": NutrientTarget(min=50, optimal=100, max=200),
        "carbs_g": NutrientTarget(min=100, optimal=250, max=400),
        "fat_g": NutrientTarget(min=40, optimal=65, max=100),
        "fiber_g": NutrientTarget(min=25, optimal=30, max=50),
        "sugar_g": NutrientTarget(min=0, optimal=25, max=50),
        "sodium_mg": NutrientTarget(min=500, optimal=1500, max=2300),
        "calcium_mg": NutrientTarget(min=1000, optimal=1200, max=2500),
        "iron_mg": NutrientTarget(min=8, optimal=18, max=45),
        "potassium_mg": NutrientTarget(min=2600, optimal=3400, max=5000),
        "magnesium_mg": NutrientTarget(min=310, optimal=420, max=700),
        "phosphorus_mg": NutrientTarget(min=700, optimal=1250, max=4000),
        "zinc_mg": NutrientTarget(min=8, optimal=11, max=40),
        "copper_mg": NutrientTarget(min=0.9, optimal=1.3, max=10),
        "selenium_mcg": NutrientTarget(min=55, optimal=70, max=400),
        "vitamin_a_mcg": NutrientTarget(min=700, optimal=900, max=3000),
        "vitamin_c_mg": NutrientTarget(min=75, optimal=90, max=2000),
        "vitamin_e_mg": NutrientTarget(min=15, optimal=20, max=1000),
        "vitamin_k_mcg": NutrientTarget(min=90, optimal=120, max=1000),
        "thiamin_mg": NutrientTarget(min=1.1, optimal=1.2, max=100),
        "riboflavin_mg": NutrientTarget(min=1.1, optimal=1.3, max=100),
        "niacin_mg": NutrientTarget(min=14, optimal=16, max=35),
        "vitamin_b6_mg": NutrientTarget(min=1.3, optimal=1.7, max=100),
        "folate_mcg": NutrientTarget(min=400, optimal=600, max=1000),
        "vitamin_b12_mcg": NutrientTarget(min=2.4, optimal=3.0, max=100),
    }
)

NUTRIENT_SOURCES: Mapping[str, NutrientSourceInfo] = MappingProxyType(
    {
        "protein_g": NutrientSourceInfo(
            category="Proteins",
            top_foods=(
                "Chicken Breast",
                "Salmon",
                "Eggs",
                "Greek Yogurt",
                "Lean Beef",
                "Tuna",
                "Turkey",
                "Whey Protein",
            ),
            description="Essential for muscle growth and repair",
        ),
        "fiber_g": NutrientSourceInfo(
            category="Vegetables",
            top_foods=(
                "Broccoli",
                "Brussels Sprouts",
                "Lentils",
                "Black Beans",
                "Oats",
                "Quinoa",
                "Chia Seeds",
            ),
            description="Important for digestive health",
        ),
        "iron_mg": NutrientSourceInfo(
            category="Proteins",
            top_foods=(
                "Spinach",
                "Red Meat",
                "Lentils",
                "Quinoa",
                "Turkey",
                "Chickpeas",
            ),
            description="Critical for oxygen transport",
        ),
        "calcium_mg": NutrientSourceInfo(
            category="Dairy & Eggs",
            top_foods=(
                "Milk",
                "Greek Yogurt",
                "Cheese",
                "Cottage Cheese",
                "Kale",
                "Sardines",
            ),
            description="Essential for bone health",
        ),
        "vitamin_c_mg": NutrientSourceInfo(
            category="Fruits",
            top_foods=(
                "Oranges",
                "Strawberries",
                "Bell Peppers",
                "Broccoli",
                "Kiwi",
                "Tomatoes",
            ),
            description="Boosts immune system",
        ),
        "vitamin_a_mcg": NutrientSourceInfo(
            category="Vegetables",
            top_foods=(
                "Sweet Potatoes",
                "Carrots",
                "Spinach",
                "Kale",
                "Butternut Squash",
                "Red Peppers",
            ),
            description="Important for vision and immunity",
        ),
        "potassium_mg": NutrientSourceInfo(
            category="Fruits",
            top_foods=(
                "Bananas",
                "Sweet Potatoes",
                "Spinach",
                "Avocados",
                "Salmon",
                "Beans",
            ),
            description="Regulates blood pressure",
        ),
        "magnesium_mg": NutrientSourceInfo(
            category="Nuts & Seeds",
            top_foods=(
                "Almonds",
                "Spinach",
                "Cashews",
                "Black Beans",
                "Avocado",
                "Dark Chocolate",
            ),
            description="Supports muscle and nerve function",
        ),
        "vitamin_b12_mcg": NutrientSourceInfo(
            category="Proteins",
            top_foods=(
                "Salmon",
                "Beef",
                "Eggs",
                "Milk",
                "Chicken",
                "Fortified Cereals",
            ),
            description="Essential for nerve health",
        ),
        "folate_mcg": NutrientSourceInfo(
            category="Vegetables",
            top_foods=(
                "Lentils",
                "Spinach",
                "Broccoli",
                "Asparagus",
                "Black Beans",
                "Avocado",
            ),
            description="Important for cell growth",
        ),
        "zinc_mg": NutrientSourceInfo(
            category="Proteins",
            top_foods=(
                "Oysters",
                "Beef",
                "Pumpkin Seeds",
                "Lentils",
                "Chickpeas",
                "Cashews",
            ),
            description="Supports immune function",
        ),
        "vitamin_e_mg": NutrientSourceInfo(
            category="Nuts & Seeds",
            top_foods=(
                "Almonds",
                "Sunflower Seeds",
                "Avocado",
                "Spinach",
                "Olive Oil",
            ),
            description="Powerful antioxidant",
        ),
    }
)


def source_info(nutrient: str) -> NutrientSourceInfo:
    """Return source metadata for a nutrient, or the unknown placeholder."""
    return NUTRIENT_SOURCES.get(nutrient, UNKNOWN_SOURCE)
