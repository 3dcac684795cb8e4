"""Editable static menu and screen text configuration."""

from __future__ import annotations

APP_TITLE = "Lunch Tray"

SCREEN_TITLES: dict[str, str] = {
    "start": "Start Order",
    "entree": "Choose Entree",
    "side_dish": "Choose Side Dish",
    "accompaniment": "Choose Accompaniment",
    "checkout": "Order Checkout",
}

# Canonical catalog values consumed by lunch_tray.data (which wraps these into MenuItem instances).
MENU_ITEMS_BY_CATEGORY: dict[str, list[dict[str, str]]] = {
    "entree": [
        {
            "name": "Cauliflower",
            "description": "Whole cauliflower, brined, roasted, and deep fried",
            "price": "7.00",
            "image": "cauliflower",
        },
        {
            "name": "Three Bean Chili",
            "description": "Black beans, red beans, kidney beans, slow cooked, topped with onion",
            "price": "4.00",
            "image": "three_bean_chili",
        },
        {
            "name": "Mushroom Pasta",
            "description": "Penne pasta, mushrooms, basil, with pepper flakes",
            "price": "5.50",
            "image": "mushroom_pasta",
        },
        {
            "name": "Spicy Black Bean Skillet",
            "description": "Seasonal vegetables, black beans, house spice blend",
            "price": "5.50",
            "image": "spicy_black_bean_skillet",
        },
    ],
    "side_dish": [
        {
            "name": "Summer Salad",
            "description": "Heirloom tomatoes, sweet corn, peaches, cucumbers, and basil",
            "price": "2.50",
            "image": "summer_salad",
        },
        {
            "name": "Butternut Squash Soup",
            "description": "Roasted butternut squash, roasted peppers, chili oil",
            "price": "3.00",
            "image": "butternut_squash_soup",
        },
        {
            "name": "Spicy Potatoes",
            "description": "Marble potatoes, roasted, and fried in house spice blend",
            "price": "2.00",
            "image": "spicy_potatoes",
        },
        {
            "name": "Coconut Rice",
            "description": "Toasted coconut, steamed rice",
            "price": "1.50",
            "image": "coconut_rice",
        },
    ],
    "accompaniment": [
        {
            "name": "Lunch Roll",
            "description": "Fresh baked roll made in house",
            "price": "0.50",
            "image": "lunch_roll",
        },
        {
            "name": "Mixed Berries",
            "description": "Strawberries, blueberries, raspberries, and fresh mint",
            "price": "1.00",
            "image": "mixed_berries",
        },
        {
            "name": "Pickled Veggies",
            "description": "Pickled cucumbers and carrots, made in house",
            "price": "0.50",
            "image": "pickled_veggies",
        },
    ],
}

START_BLURB = "Pick an entree, a side dish and an accompaniment, then review your tray at checkout."
