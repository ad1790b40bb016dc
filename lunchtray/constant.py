"""Editable static menu configuration."""

from __future__ import annotations

# Category order is also display order.
CATEGORY_LABELS: dict[str, str] = {
    "entree": "Entree",
    "side": "Side",
    "accompaniment": "Accompaniment",
}

# Canonical menu rows consumed by lunchtray.data (which wraps these into MenuItem instances).
# Prices are strings so they load into Decimal without float error.
MENU_ROWS_BY_ID: dict[str, dict[str, str]] = {
    "cauliflower": {
        "name": "Cauliflower",
        "description": "Whole cauliflower, brined, roasted, and deep fried",
        "category": "entree",
        "price": "7.00",
    },
    "chili": {
        "name": "Three Bean Chili",
        "description": "Black beans, red beans, kidney beans, slow cooked, topped with onion",
        "category": "entree",
        "price": "4.00",
    },
    "pasta": {
        "name": "Mushroom Pasta",
        "description": "Penne pasta, mushrooms, basil, with plum tomatoes cooked in garlic and olive oil",
        "category": "entree",
        "price": "5.50",
    },
    "skillet": {
        "name": "Spicy Black Bean Skillet",
        "description": "Seasonal vegetables, black beans, house spice blend, served with avocado and quick pickled onions",
        "category": "entree",
        "price": "5.50",
    },
    "salad": {
        "name": "Summer Salad",
        "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
        "category": "side",
        "price": "2.50",
    },
    "soup": {
        "name": "Butternut Squash Soup",
        "description": "Roasted butternut squash, roasted peppers, chili oil",
        "category": "side",
        "price": "3.00",
    },
    "potatoes": {
        "name": "Spicy Potatoes",
        "description": "Marble potatoes, roasted, and fried in house spice blend",
        "category": "side",
        "price": "2.00",
    },
    "rice": {
        "name": "Coconut Rice",
        "description": "Rice, coconut milk, lime, and sugar",
        "category": "side",
        "price": "1.50",
    },
    "bread": {
        "name": "Lunch Roll",
        "description": "Fresh baked roll made in house",
        "category": "accompaniment",
        "price": "0.50",
    },
    "berries": {
        "name": "Mixed Berries",
        "description": "Strawberries, blueberries, raspberries, and huckleberries",
        "category": "accompaniment",
        "price": "1.00",
    },
    "pickles": {
        "name": "Pickled Veggies",
        "description": "Pickled cucumbers and carrots, made in house",
        "category": "accompaniment",
        "price": "0.50",
    },
}

# Key that opens each category's search in the TUI.
CATEGORY_KEYS: dict[str, str] = {
    "e": "entree",
    "s": "side",
    "a": "accompaniment",
}
