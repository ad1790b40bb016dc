"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from lunchtray.config import debug_log_path
from lunchtray.constant import CATEGORY_KEYS, CATEGORY_LABELS
from lunchtray.models import CATEGORIES, MenuItem
from lunchtray.order import OrderState, UnknownItemError
from lunchtray.rendering import (
    badge_style,
    category_badge,
    format_currency,
    format_menu_choices,
    format_selection,
    format_totals,
)


class LunchTrayApp(App):
    """A Textual app for picking one entree, side and accompaniment and watching the totals."""

    TITLE = "Lunch Tray"
    SUB_TITLE = "Entree / Side / Accompaniment"

    CSS = """
    #main-layout {
        height: 1fr;
    }

    #order-pane {
        width: 1fr;
        border: round $primary;
        padding: 1;
    }

    #search-pane {
        width: 1fr;
        border: round $secondary;
        padding: 1;
    }

    #search-bar {
        height: 3;
        border: heavy $secondary;
        padding: 0 1;
    }

    #order-list, #results {
        border: tall $surface;
        padding: 0 1;
    }

    #results {
        height: 1fr;
        overflow-y: auto;
    }

    #totals {
        margin-top: 1;
        padding: 0 1;
    }
    """

    input_state = reactive("normal")
    category = reactive("entree")
    search_text = reactive("")
    selected_index = reactive(0)

    BINDINGS = [
        # Screen binds tab to focus_next; priority keeps it on the results list.
        Binding("tab", "cycle_results(1)", "Next result", priority=True),
        ("up", "cycle_results(-1)", "Previous result"),
        ("down", "cycle_results(1)", "Next result"),
        ("enter", "select_highlighted", "Select item"),
        ("backspace", "backspace_query", "Delete query char"),
        Binding("ctrl+s", "submit_order", "Submit", priority=True),
        Binding("ctrl+r", "cancel_order", "Cancel order", priority=True),
        ("ctrl+c", "cancel_active_mode", "Exit active mode"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, order: OrderState | None = None) -> None:
        super().__init__()
        self.order = order if order is not None else OrderState()
        self.system_status = ""
        self._debug_log_path = Path(debug_log_path())
        self._unsubscribe: Callable[[], None] | None = None
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="order-pane"):
                yield Static("Your Order")
                yield Static(id="order-list")
                yield Static(id="totals")
            with Vertical(id="search-pane"):
                yield Static(id="search-bar")
                yield Static(id="results")

    def on_mount(self) -> None:
        # Widgets exist from here on, so order changes can be drawn.
        self._unsubscribe = self.order.subscribe(self._on_order_changed)
        self._refresh_all()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_key(self, event: Key) -> None:
        if not event.is_printable or not event.character or len(event.character) != 1:
            return
        if not event.character.isalnum() and event.character != " ":
            return

        if self.input_state == "normal":
            key = event.character.lower()
            if key not in CATEGORY_KEYS:
                return

            self.category = CATEGORY_KEYS[key]
            self.input_state = "active"
            self._clear_search()
            event.stop()
            return

        self.search_text += event.character
        self.selected_index = 0
        self._refresh_search()
        event.stop()

    def action_cancel_active_mode(self) -> None:
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self._clear_search()

    def action_cycle_results(self, delta: int) -> None:
        if self.input_state != "active":
            return

        results = self._filtered_results()
        self.selected_index = (self.selected_index + delta) % len(results) if results else 0
        self._refresh_results(results)

    def action_select_highlighted(self) -> None:
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            return

        item = results[self.selected_index]
        try:
            self.order.set_category(self.category, item.item_id)
        except UnknownItemError as exc:
            self.system_status = f"Not on the menu: {exc.item_id}"
            self._log_debug(f"select_failed category={self.category!r} item_id={exc.item_id!r}")
            self._refresh_search()
            return

        self._log_debug(
            f"select category={self.category!r} item_id={item.item_id!r} subtotal={self.order.subtotal}"
        )
        self.system_status = f"{CATEGORY_LABELS[self.category]}: {item.name}"
        self.input_state = "normal"
        self._clear_search()

    def action_backspace_query(self) -> None:
        if self.input_state != "active" or not self.search_text:
            return

        self.search_text = self.search_text[:-1]
        self.selected_index = 0
        self._refresh_search()

    def action_cancel_order(self) -> None:
        self.order.reset()
        self.input_state = "normal"
        self.system_status = "Order cancelled"
        self._log_debug("order_cancelled")
        self._clear_search()

    def action_submit_order(self) -> None:
        self._log_debug(f"submit_enter state={self.input_state!r} total={self.order.total}")
        if self.input_state != "normal":
            self.system_status = "Submit only in NORMAL mode (Ctrl+C to exit active)"
            self._refresh_search()
            self._log_debug("submit_blocked reason=not_normal")
            return
        if self.order.is_empty:
            self.system_status = "Nothing to submit"
            self._refresh_search()
            self._log_debug("submit_blocked reason=empty_order")
            return

        total = format_currency(self.order.total)
        self.order.reset()
        self.system_status = f"Order submitted: {total}"
        self._refresh_search()
        self._log_debug(f"submit_done total={total}")

    def _on_order_changed(self, order: OrderState) -> None:
        if not self.screen_stack:
            return
        self._refresh_order()

    def _clear_search(self) -> None:
        self.search_text = ""
        self.selected_index = 0
        self._refresh_search()

    def _filtered_results(self) -> list[MenuItem]:
        source = self.order.catalog.items_for(self.category)
        if not self.search_text:
            return source
        q = self.search_text.lower()
        return [item for item in source if q in item.name.lower()]

    def _refresh_all(self) -> None:
        self._refresh_order()
        self._refresh_search()

    def _refresh_order(self) -> None:
        try:
            order_widget = self.query_one("#order-list", Static)
            totals_widget = self.query_one("#totals", Static)
        except NoMatches:
            return

        lines = Text("\n").join(
            format_selection(category, self.order.selection(category)) for category in CATEGORIES
        )
        order_widget.update(lines)
        totals_widget.update(format_totals(self.order))

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        if self.input_state == "normal":
            self._refresh_results([])
            return
        self._refresh_results(self._filtered_results())

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            status = self.system_status or "Ready"
            bar.update(f"E/S/A to choose. Ctrl+S submit, Ctrl+R cancel.\n{status}")
            return

        text = Text()
        text.append(category_badge(self.category), style=badge_style(self.category))
        text.append(f" {CATEGORY_LABELS[self.category]}: {self.search_text}")
        bar.update(text)

    def _refresh_results(self, results: list[MenuItem]) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            results_widget.update("")
            return
        if not results:
            results_widget.update("No results")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0
        results_widget.update(format_menu_choices(results, self.selected_index))
