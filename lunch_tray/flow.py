"""Order flow: routes user actions through the navigator into the session."""

from __future__ import annotations

from lunch_tray.exceptions import InvalidTransition, LunchTrayError, SelectionRequired
from lunch_tray.logger import get_logger
from lunch_tray.models import LunchTrayScreen, MenuItem, NavEvent, OrderUiState
from lunch_tray.navigation import Navigator, SideEffect, Transition
from lunch_tray.order import OrderSession

logger = get_logger(__name__)


class OrderFlow:
    """One ordering session: the current screen plus the tray being built."""

    def __init__(self, session: OrderSession | None = None, navigator: Navigator | None = None) -> None:
        self.session = session or OrderSession()
        self.navigator = navigator or Navigator()

    @property
    def screen(self) -> LunchTrayScreen:
        return self.navigator.current

    @property
    def state(self) -> OrderUiState:
        return self.session.state

    @property
    def can_navigate_back(self) -> bool:
        return self.navigator.can_navigate_back

    @property
    def current_selection(self) -> MenuItem | None:
        category = self.screen.category
        if category is None:
            return None
        return self.session.selection_for(category)

    @property
    def can_go_next(self) -> bool:
        return self.screen.category is not None and self.current_selection is not None

    def start_order(self) -> LunchTrayScreen:
        self._dispatch(NavEvent.START_ORDER)
        return self.screen

    def select(self, item: MenuItem) -> OrderUiState:
        """Record ``item`` for the current menu screen without moving on."""
        category = self.screen.category
        if category is None:
            logger.warning("select rejected screen=%s item=%r", self.screen.value, item.name)
            raise LunchTrayError(f"Nothing to select on {self.screen.title}")
        return self.session.update_item(category, item)

    def next(self, item: MenuItem | None = None) -> LunchTrayScreen:
        """Advance to the following menu screen, recording ``item`` first if given."""
        self._dispatch(NavEvent.NEXT, item)
        return self.screen

    def cancel(self) -> OrderUiState:
        """Abandon the order; returns the discarded snapshot."""
        return self._finish(NavEvent.CANCEL)

    def submit(self) -> OrderUiState:
        """Complete the order; returns the submitted snapshot."""
        return self._finish(NavEvent.SUBMIT)

    def navigate_up(self) -> LunchTrayScreen:
        try:
            return self.navigator.navigate_up()
        except InvalidTransition:
            logger.warning("navigate_up rejected screen=%s", self.screen.value)
            raise

    def _finish(self, event: NavEvent) -> OrderUiState:
        snapshot = self.session.state
        self._dispatch(event)
        if event is NavEvent.SUBMIT:
            logger.info("order submitted total=%s", snapshot.order_total_price)
        return snapshot

    def _dispatch(self, event: NavEvent, item: MenuItem | None = None) -> Transition:
        try:
            transition = self.navigator.resolve(event)
            if transition.effect is SideEffect.RECORD_SELECTION:
                self._record_selection(transition.source, item)
        except LunchTrayError as exc:
            logger.warning("rejected screen=%s event=%s reason=%s", self.screen.value, event.value, exc)
            raise

        self.navigator.dispatch(event)
        if transition.effect is SideEffect.RESET_ORDER:
            self.session.reset_order()
        return transition

    def _record_selection(self, screen: LunchTrayScreen, item: MenuItem | None) -> None:
        category = screen.category
        if category is None:
            raise InvalidTransition(screen, NavEvent.NEXT)
        if item is not None:
            self.session.update_item(category, item)
        if self.session.selection_for(category) is None:
            raise SelectionRequired(screen)
