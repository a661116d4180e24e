"""Shopping list aggregation for planned meals."""

from collections.abc import Iterable, Mapping
from datetime import date

from meal_plan_insights.domain.nutrients import round_to
from meal_plan_insights.domain.plans import PlanEntry
from meal_plan_insights.domain.shopping import ShoppingListItem
from meal_plan_insights.services.aggregation import (
    ensure_plan_entries,
    iter_planned_foods,
)

DEFAULT_CATEGORY = "Other"

ShoppingList = dict[str, list[ShoppingListItem]]


def build_shopping_list(entries: Iterable[PlanEntry]) -> ShoppingList:
    """Merge planned foods by identity and group them by category.

    Categories are returned in alphabetical order and items within each
    category are sorted by name.
    """
    items: dict[str, ShoppingListItem] = {}
    for _entry, food, quantity in iter_planned_foods(ensure_plan_entries(entries)):
        existing = items.get(food.id)
        if existing is not None:
            existing.quantity += quantity
            continue
        items[food.id] = ShoppingListItem(
            id=food.id,
            name=food.name,
            quantity=quantity,
            category=food.category or DEFAULT_CATEGORY,
            serving_description=food.serving_description,
        )

    grouped: dict[str, list[ShoppingListItem]] = {}
    for item in items.values():
        grouped.setdefault(item.category, []).append(item)
    return {
        category: sorted(grouped[category], key=_name_sort_key)
        for category in sorted(grouped)
    }


def format_shopping_list(
    shopping_list: Mapping[str, list[ShoppingListItem]], week_start: date
) -> str:
    """Render a shopping list as plain text for sharing."""
    lines = [f"Shopping List - Week of {week_start.isoformat()}", ""]
    for category, items in shopping_list.items():
        lines.append(category.upper())
        for item in items:
            quantity = _format_quantity(item.quantity)
            serving = item.serving_description or "serving"
            lines.append(f"  • {item.name} - {quantity}× {serving}")
        lines.append("")
    total_items = sum(len(items) for items in shopping_list.values())
    lines.append(f"Total: {total_items} items")
    return "\n".join(lines) + "\n"


def _name_sort_key(item: ShoppingListItem) -> tuple[str, str]:
    return item.name.casefold(), item.name


def _format_quantity(value: float) -> str:
    rounded = round_to(value, 1)
    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)
