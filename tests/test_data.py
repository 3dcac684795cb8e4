from decimal import Decimal

from lunch_tray.data import (
    ACCOMPANIMENT_MENU_ITEMS,
    ENTREE_MENU_ITEMS,
    SIDE_DISH_MENU_ITEMS,
    menu_for_category,
)
from lunch_tray.models import LunchTrayScreen, MenuCategory
from lunch_tray.pricing import format_price


def test_catalog_has_three_groups():
    assert [item.name for item in ENTREE_MENU_ITEMS] == [
        "Cauliflower",
        "Three Bean Chili",
        "Mushroom Pasta",
        "Spicy Black Bean Skillet",
    ]
    assert len(SIDE_DISH_MENU_ITEMS) == 4
    assert [item.name for item in ACCOMPANIMENT_MENU_ITEMS] == ["Lunch Roll", "Mixed Berries", "Pickled Veggies"]


def test_catalog_items_carry_their_category():
    for category in MenuCategory:
        assert all(item.category is category for item in menu_for_category(category))


def test_prices_are_decimal():
    assert ENTREE_MENU_ITEMS[0].price == Decimal("7.00")
    assert SIDE_DISH_MENU_ITEMS[3].price == Decimal("1.50")


def test_format_price():
    assert format_price(Decimal("5.5")) == "$5.50"
    assert format_price(Decimal("0.645")) == "$0.65"
    assert format_price(Decimal("1234")) == "$1,234.00"
    assert ENTREE_MENU_ITEMS[2].formatted_price() == "$5.50"


def test_screen_titles_and_categories():
    assert [screen.title for screen in LunchTrayScreen] == [
        "Start Order",
        "Choose Entree",
        "Choose Side Dish",
        "Choose Accompaniment",
        "Order Checkout",
    ]
    assert LunchTrayScreen.START.category is None
    assert LunchTrayScreen.CHECKOUT.category is None
    assert LunchTrayScreen.SIDE_DISH.category is MenuCategory.SIDE_DISH
