"""Main Textual app class."""

from __future__ import annotations

from typing import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from lunch_tray.constant import APP_TITLE
from lunch_tray.data import menu_for_category
from lunch_tray.exceptions import LunchTrayError
from lunch_tray.flow import OrderFlow
from lunch_tray.logger import get_logger
from lunch_tray.models import LunchTrayScreen, MenuItem, NavEvent
from lunch_tray.navigation import allowed_events
from lunch_tray.pricing import format_price
from lunch_tray.rendering import (
    format_menu_list,
    format_order_summary,
    format_screen_title,
    format_start,
    help_text_for,
)

logger = get_logger(__name__)


class LunchTrayApp(App):
    """A Textual app that walks through building and checking out a lunch tray."""

    TITLE = APP_TITLE

    CSS = """
    Screen {
        layout: vertical;
    }

    #tray-layout {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #screen-title {
        margin-bottom: 1;
    }

    #body {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }
    """

    cursor_index = reactive(0)

    BINDINGS = [
        ("enter", "confirm", "Start / Next / Submit"),
        ("up", "move_cursor(-1)", "Previous item"),
        ("down", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous item"),
        ("j", "move_cursor(1)", "Next item"),
        ("space", "select_highlighted", "Select"),
        ("n", "keep_and_next", "Keep choice + next"),
        ("c", "cancel_order", "Cancel"),
        ("b", "navigate_up", "Back"),
        ("left", "navigate_up", "Back"),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, flow: OrderFlow | None = None) -> None:
        super().__init__()
        self.flow = flow or OrderFlow()
        self.system_status = ""
        logger.debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="tray-layout"):
            yield Static(id="screen-title")
            yield Static(id="body")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._refresh_all()

    def action_confirm(self) -> None:
        screen = self.flow.screen
        if screen is LunchTrayScreen.START:
            self._run(self.flow.start_order)
            return

        if screen is LunchTrayScreen.CHECKOUT:
            submitted = self._run(self.flow.submit)
            if submitted is not None:
                self.system_status = f"Order submitted: {format_price(submitted.order_total_price)}"
                self._refresh_status()
            return

        item = self._highlighted_item()
        if item is None:
            return
        self._run(lambda: self.flow.next(item))

    def action_move_cursor(self, delta: int) -> None:
        items = self._menu_items()
        if not items:
            return
        self.cursor_index = (self.cursor_index + delta) % len(items)
        self._refresh_body()

    def action_select_highlighted(self) -> None:
        item = self._highlighted_item()
        if item is None:
            return
        self._run(lambda: self.flow.select(item))

    def action_keep_and_next(self) -> None:
        if NavEvent.NEXT not in allowed_events(self.flow.screen):
            return
        self._run(self.flow.next)

    def action_cancel_order(self) -> None:
        if NavEvent.CANCEL not in allowed_events(self.flow.screen):
            return
        if self._run(self.flow.cancel) is not None:
            self.system_status = "Order cancelled"
            self._refresh_status()

    def action_navigate_up(self) -> None:
        if not self.flow.can_navigate_back:
            return
        self._run(self.flow.navigate_up)

    def _run(self, operation: Callable[[], object]) -> object | None:
        """Apply a flow operation, turning rejections into a status message."""
        previous_screen = self.flow.screen
        try:
            result = operation()
        except LunchTrayError as exc:
            self.system_status = str(exc)
            self._refresh_status()
            return None

        self.system_status = ""
        if self.flow.screen is not previous_screen:
            self._reset_cursor()
        self._refresh_all()
        return result

    def _menu_items(self) -> list[MenuItem]:
        category = self.flow.screen.category
        if category is None:
            return []
        return menu_for_category(category)

    def _highlighted_item(self) -> MenuItem | None:
        items = self._menu_items()
        if not items:
            return None
        if not (0 <= self.cursor_index < len(items)):
            self.cursor_index = 0
        return items[self.cursor_index]

    def _reset_cursor(self) -> None:
        # Coming back to a menu screen puts the cursor on the recorded choice.
        items = self._menu_items()
        selected = self.flow.current_selection
        self.cursor_index = items.index(selected) if selected in items else 0

    def _refresh_all(self) -> None:
        self.sub_title = self.flow.screen.title
        self._refresh_title()
        self._refresh_body()
        self._refresh_status()

    def _refresh_title(self) -> None:
        try:
            title_widget = self.query_one("#screen-title", Static)
        except NoMatches:
            return
        title_widget.update(format_screen_title(self.flow.screen, self.flow.can_navigate_back))

    def _refresh_body(self) -> None:
        try:
            body = self.query_one("#body", Static)
        except NoMatches:
            return

        screen = self.flow.screen
        if screen is LunchTrayScreen.START:
            body.update(format_start())
            return
        if screen is LunchTrayScreen.CHECKOUT:
            body.update(format_order_summary(self.flow.state))
            return
        body.update(format_menu_list(self._menu_items(), self.cursor_index, self.flow.current_selection))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        bar.update(f"{help_text_for(self.flow.screen, self.flow.can_go_next)}\n{status}")
