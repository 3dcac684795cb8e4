"""In-memory order session holding the current tray selections."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Callable

from lunch_tray import config
from lunch_tray.pricing import to_cents
from lunch_tray.logger import get_logger
from lunch_tray.models import MenuCategory, MenuItem, OrderUiState

logger = get_logger(__name__)

_FIELD_BY_CATEGORY: dict[MenuCategory, str] = {
    MenuCategory.ENTREE: "entree",
    MenuCategory.SIDE_DISH: "side_dish",
    MenuCategory.ACCOMPANIMENT: "accompaniment",
}


class OrderSession:
    """Holds one order's selections and keeps the amounts in step with them.

    Every update replaces the snapshot; ``state`` can be read at any time and
    is never mutated in place. ``on_change`` is called with each new snapshot.
    """

    def __init__(
        self,
        tax_rate: Decimal | None = None,
        on_change: Callable[[OrderUiState], None] | None = None,
    ) -> None:
        self.tax_rate = config.TAX_RATE if tax_rate is None else tax_rate
        self.on_change = on_change
        self._state = OrderUiState()

    @property
    def state(self) -> OrderUiState:
        return self._state

    def update_entree(self, item: MenuItem) -> OrderUiState:
        return self._update_item(MenuCategory.ENTREE, item)

    def update_side_dish(self, item: MenuItem) -> OrderUiState:
        return self._update_item(MenuCategory.SIDE_DISH, item)

    def update_accompaniment(self, item: MenuItem) -> OrderUiState:
        return self._update_item(MenuCategory.ACCOMPANIMENT, item)

    def update_item(self, category: MenuCategory, item: MenuItem) -> OrderUiState:
        """Record ``item`` as the selection for ``category``."""
        return self._update_item(category, item)

    def selection_for(self, category: MenuCategory) -> MenuItem | None:
        return getattr(self._state, _FIELD_BY_CATEGORY[category])

    def reset_order(self) -> OrderUiState:
        """Drop every selection and zero the amounts."""
        logger.debug("reset_order previous_total=%s", self._state.item_total_price)
        return self._publish(OrderUiState())

    def _update_item(self, category: MenuCategory, item: MenuItem) -> OrderUiState:
        selected = replace(self._state, **{_FIELD_BY_CATEGORY[category]: item})
        logger.debug("update_item category=%s item=%r price=%s", category.value, item.name, item.price)
        return self._publish(self._with_totals(selected))

    def _with_totals(self, state: OrderUiState) -> OrderUiState:
        item_total = sum((item.price for item in state.selections()), Decimal("0.00"))
        tax = to_cents(item_total * self.tax_rate)
        return replace(
            state,
            item_total_price=to_cents(item_total),
            order_tax=tax,
            order_total_price=to_cents(item_total) + tax,
        )

    def _publish(self, state: OrderUiState) -> OrderUiState:
        self._state = state
        if self.on_change is not None:
            self.on_change(state)
        return state
