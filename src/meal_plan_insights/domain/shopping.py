"""Domain models for shopping lists."""

from dataclasses import dataclass


@dataclass
class ShoppingListItem:
    """A food to buy, with its quantity summed across the plan."""

    id: str
    name: str
    quantity: float
    category: str
    serving_description: str | None
