"""Order state: per-category selections and their derived totals."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from lunchtray.config import TAX_RATE
from lunchtray.data import DEFAULT_CATALOG, MenuCatalog
from lunchtray.models import CATEGORIES, MenuItem, check_category

_ZERO = Decimal("0")

OrderListener = Callable[["OrderState"], None]


class UnknownItemError(LookupError):
    """Raised when a category is set to an item id the catalog does not know."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Unknown menu item {item_id!r}")
        self.item_id = item_id


class OrderState:
    """
    One entree, one side and one accompaniment, plus subtotal, tax and total.

    Derived values are recomputed on every write, so reads are always
    consistent with the current selections. Listeners registered through
    subscribe() are called synchronously after each successful mutation.
    """

    def __init__(self, catalog: MenuCatalog = DEFAULT_CATALOG, tax_rate: Decimal = TAX_RATE) -> None:
        tax_rate = Decimal(str(tax_rate))
        if tax_rate < 0:
            raise ValueError("tax_rate must be non-negative")
        self.catalog = catalog
        self._tax_rate = tax_rate
        self._selections: dict[str, MenuItem | None] = {category: None for category in CATEGORIES}
        self._subtotal = _ZERO
        self._tax = _ZERO
        self._total = _ZERO
        self._listeners: list[OrderListener] = []

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    @property
    def subtotal(self) -> Decimal:
        return self._subtotal

    @property
    def tax(self) -> Decimal:
        return self._tax

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def entree(self) -> MenuItem | None:
        return self._selections["entree"]

    @property
    def side(self) -> MenuItem | None:
        return self._selections["side"]

    @property
    def accompaniment(self) -> MenuItem | None:
        return self._selections["accompaniment"]

    @property
    def is_empty(self) -> bool:
        return all(item is None for item in self._selections.values())

    def selection(self, category: str) -> MenuItem | None:
        """Return the item currently selected for category, if any."""
        return self._selections[check_category(category)]

    def selections(self) -> dict[str, MenuItem | None]:
        """Return a copy of all selections in category order."""
        return dict(self._selections)

    def set_category(self, category: str, item_id: str) -> MenuItem:
        """
        Select item_id for category, replacing any previous selection.

        Raises UnknownItemError before touching any state when the catalog
        has no such item.
        """
        check_category(category)
        item = self.catalog.lookup(item_id)
        if item is None:
            raise UnknownItemError(item_id)

        self._selections[category] = item
        self._recalculate()
        self._notify()
        return item

    def set_entree(self, item_id: str) -> MenuItem:
        return self.set_category("entree", item_id)

    def set_side(self, item_id: str) -> MenuItem:
        return self.set_category("side", item_id)

    def set_accompaniment(self, item_id: str) -> MenuItem:
        return self.set_category("accompaniment", item_id)

    def reset(self) -> None:
        """Clear every selection and zero the totals."""
        for category in CATEGORIES:
            self._selections[category] = None
        self._subtotal = _ZERO
        self._tax = _ZERO
        self._total = _ZERO
        self._notify()

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """Register listener for change notifications; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _recalculate(self) -> None:
        # Summed from scratch each time; a running subtotal could drift on replacement.
        self._subtotal = sum((item.price for item in self._selections.values() if item is not None), _ZERO)
        self._tax = self._subtotal * self._tax_rate
        self._total = self._subtotal + self._tax

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
