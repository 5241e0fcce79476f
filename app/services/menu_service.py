"""
Menu catalog: today's canteen menu by meal period.

Responsibility: Hold the static menu table and resolve a free-form category
(as typed by a user or chosen by the LLM) to a displayable string. No HTTP,
no LLM here.
"""

import logging
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

MENU_CATEGORIES: tuple[str, ...] = ("breakfast", "lunch", "evening", "dinner")

MENUS: Mapping[str, str] = MappingProxyType(
    {
        "breakfast": "Paratha, Tea, Fruits, Bread with Butter",
        "lunch": "Rice, Dal, Curry, Roti, Salad",
        "evening": "Samosa, Chutney, Tea, Biscuits",
        "dinner": "Biryani, Raita, Papad, Salad",
    }
)

MENU_NOT_FOUND: str = (
    "Sorry, we couldn't find the menu for that category. "
    "Available categories: breakfast, lunch, evening snacks, dinner"
)


def normalize_category(category: str | None) -> str:
    """Lowercase and trim; anything mentioning evening or snack is the evening menu."""
    if not isinstance(category, str):
        return ""
    normalized = category.lower().strip()
    if "evening" in normalized or "snack" in normalized:
        return "evening"
    return normalized


def lookup_menu(category: str | None) -> str:
    """
    Return the menu for a category, or MENU_NOT_FOUND.
    Never raises: empty or nonsensical input yields the fallback message.
    """
    key = normalize_category(category)
    menu = MENUS.get(key)
    logger.debug("[menu:lookup_menu] category=%r normalized=%r found=%s", category, key, menu is not None)
    return menu if menu is not None else MENU_NOT_FOUND
