"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from lunch_tray.constant import SCREEN_TITLES
from lunch_tray.pricing import format_price


class MenuCategory(str, Enum):
    ENTREE = "entree"
    SIDE_DISH = "side_dish"
    ACCOMPANIMENT = "accompaniment"


@dataclass(frozen=True)
class MenuItem:
    """A single purchasable catalog entry."""

    name: str
    description: str
    price: Decimal
    image: str
    category: MenuCategory

    def formatted_price(self) -> str:
        return format_price(self.price)


ZERO = Decimal("0.00")


@dataclass(frozen=True)
class OrderUiState:
    """Snapshot of the current selections and the derived amounts."""

    entree: MenuItem | None = None
    side_dish: MenuItem | None = None
    accompaniment: MenuItem | None = None
    item_total_price: Decimal = ZERO
    order_tax: Decimal = ZERO
    order_total_price: Decimal = ZERO

    def selections(self) -> list[MenuItem]:
        """Selected items in tray order, skipping unset slots."""
        return [item for item in (self.entree, self.side_dish, self.accompaniment) if item is not None]


class LunchTrayScreen(str, Enum):
    """Position in the five-step ordering sequence."""

    START = "start"
    ENTREE = "entree"
    SIDE_DISH = "side_dish"
    ACCOMPANIMENT = "accompaniment"
    CHECKOUT = "checkout"

    @property
    def title(self) -> str:
        return SCREEN_TITLES[self.value]

    @property
    def category(self) -> MenuCategory | None:
        """Menu category picked on this screen, None for Start and Checkout."""
        try:
            return MenuCategory(self.value)
        except ValueError:
            return None


class NavEvent(str, Enum):
    START_ORDER = "start_order"
    NEXT = "next"
    CANCEL = "cancel"
    SUBMIT = "submit"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()
