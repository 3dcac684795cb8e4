"""Static menu catalog."""

from __future__ import annotations

from decimal import Decimal

from lunch_tray.constant import MENU_ITEMS_BY_CATEGORY as _MENU_ITEMS_RAW
from lunch_tray.models import MenuCategory, MenuItem

MENU_BY_CATEGORY: dict[MenuCategory, list[MenuItem]] = {
    MenuCategory(category): [
        MenuItem(
            name=raw["name"],
            description=raw["description"],
            price=Decimal(raw["price"]),
            image=raw["image"],
            category=MenuCategory(category),
        )
        for raw in items
    ]
    for category, items in _MENU_ITEMS_RAW.items()
}

ENTREE_MENU_ITEMS = MENU_BY_CATEGORY[MenuCategory.ENTREE]
SIDE_DISH_MENU_ITEMS = MENU_BY_CATEGORY[MenuCategory.SIDE_DISH]
ACCOMPANIMENT_MENU_ITEMS = MENU_BY_CATEGORY[MenuCategory.ACCOMPANIMENT]


def menu_for_category(category: MenuCategory) -> list[MenuItem]:
    """Return the catalog list offered for a category."""
    return MENU_BY_CATEGORY[category]
