"""Rendering helpers for menu items, selections and totals."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from lunchtray.config import CURRENCY_QUANTUM, CURRENCY_SYMBOL
from lunchtray.constant import CATEGORY_LABELS
from lunchtray.models import MenuItem
from lunchtray.order import OrderState


def format_currency(amount: Decimal) -> str:
    """Format an amount as US currency, rounded half-up to whole cents."""
    rounded = Decimal(amount).quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)
    places = -CURRENCY_QUANTUM.as_tuple().exponent
    return f"{CURRENCY_SYMBOL}{rounded:,.{places}f}"


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    if category == "entree":
        return "bold #ffffff on #b23a48"
    if category == "side":
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def category_badge(category: str) -> str:
    return CATEGORY_LABELS[category][0]


def format_menu_item(item: MenuItem) -> Text:
    """Render a menu item as its name followed by a dimmed price."""
    text = Text(item.name)
    text.append(f"  {format_currency(item.price)}", style="dim")
    return text


def format_menu_choices(items: list[MenuItem], selected_index: int) -> Text:
    """Render menu choices with a pointer on the selected row and a dim description under each."""
    text = Text()
    for idx, item in enumerate(items):
        if idx > 0:
            text.append("\n")
        text.append("➤ " if idx == selected_index else "  ")
        text.append_text(format_menu_item(item))
        if item.description:
            text.append(f"\n    {item.description}", style="dim italic")
    return text


def format_selection(category: str, item: MenuItem | None) -> Text:
    """Render one order row with a colored category tag."""
    text = Text()
    text.append(category_badge(category), style=badge_style(category))
    text.append(f" {CATEGORY_LABELS[category]}: ")
    if item is None:
        text.append("(none)", style="dim")
    else:
        text.append_text(format_menu_item(item))
    return text


def format_totals(order: OrderState) -> Text:
    """Render the subtotal, tax and total lines for an order."""
    text = Text()
    text.append(f"Subtotal: {format_currency(order.subtotal)}\n")
    text.append(f"Tax: {format_currency(order.tax)}\n")
    text.append(f"Total: {format_currency(order.total)}", style="bold")
    return text
