"""Static menu data and the read-only catalog lookup."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Iterator

from lunchtray.constant import MENU_ROWS_BY_ID
from lunchtray.models import MenuItem, check_category


class MenuCatalog:
    """Read-only mapping from item id to MenuItem, kept in declaration order."""

    def __init__(self, items: Iterable[MenuItem]) -> None:
        by_id: dict[str, MenuItem] = {}
        for item in items:
            if item.item_id in by_id:
                raise ValueError(f"Duplicate menu item id {item.item_id!r}")
            by_id[item.item_id] = item
        self._by_id = by_id

    def lookup(self, item_id: str) -> MenuItem | None:
        """Return the item for item_id, or None when the menu has no such item."""
        return self._by_id.get(item_id)

    def items_for(self, category: str) -> list[MenuItem]:
        """List the items of one category in menu order."""
        check_category(category)
        return [item for item in self._by_id.values() if item.category == category]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)


def catalog_from_rows(rows: dict[str, dict[str, str]]) -> MenuCatalog:
    """Build a catalog from raw menu rows keyed by item id."""
    return MenuCatalog(
        MenuItem(
            item_id=item_id,
            name=str(row["name"]),
            description=str(row.get("description", "")),
            category=str(row["category"]),
            price=Decimal(str(row["price"])),
        )
        for item_id, row in rows.items()
    )


DEFAULT_CATALOG: MenuCatalog = catalog_from_rows(MENU_ROWS_BY_ID)
