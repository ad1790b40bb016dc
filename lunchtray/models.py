"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from lunchtray.constant import CATEGORY_LABELS

CATEGORIES: tuple[str, ...] = tuple(CATEGORY_LABELS)


def check_category(category: str) -> str:
    """Return category unchanged, or raise ValueError if it is not one of CATEGORIES."""
    if category not in CATEGORY_LABELS:
        raise ValueError(f"Unknown category {category!r}; expected one of {', '.join(CATEGORIES)}")
    return category


@dataclass(frozen=True)
class MenuItem:
    """A priced menu item belonging to one category."""

    item_id: str
    name: str
    description: str
    category: str
    price: Decimal

    def __post_init__(self) -> None:
        check_category(self.category)
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if self.price < 0:
            raise ValueError(f"price for {self.item_id!r} must be non-negative")
