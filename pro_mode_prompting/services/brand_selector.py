# pro_mode_prompting/services/brand_selector.py
import random

import structlog

from pro_mode_prompting.data.brand_pools import (
    ACCESSIBLE_CANDIDATES,
    LUXURY_CANDIDATES,
    LUXURY_SIGNAL_KEYWORDS,
)
from pro_mode_prompting.data.category_defaults import normalize_category
from pro_mode_prompting.data.constants import Theme
from pro_mode_prompting.dto.prompt_architecture import BrandSelection

logger = structlog.get_logger(__name__)

_SYSTEM_RANDOM = random.Random()


def has_luxury_signal(theme: Theme | str | None, user_request: str | None = None) -> bool:
    """True when the theme is luxury or the request asks for an elevated look."""
    theme_value = theme.value if isinstance(theme, Theme) else (theme or "")
    if theme_value.lower() == Theme.LUXURY.value:
        return True
    request_lower = (user_request or "").lower()
    return any(keyword in request_lower for keyword in LUXURY_SIGNAL_KEYWORDS)


def _pool_key(category_key: str, theme_value: str) -> str:
    """Maps a (possibly free-form) category onto a brand pool key."""
    if "WELLNESS" in category_key or "FITNESS" in category_key or theme_value == Theme.WORKOUT.value:
        return "WELLNESS"
    for key in ("LUXURY", "LIFESTYLE", "FASHION", "TRAVEL", "BEAUTY"):
        if key in category_key:
            return key
    if "CHRISTMAS" in category_key or "HOLIDAY" in category_key:
        return "SEASONAL_CHRISTMAS"
    return "DEFAULT"


def _wants_luxury(pool_key: str, theme_value: str, signal: bool, rng: random.Random) -> bool:
    if pool_key == "BEAUTY":
        # Beauty never carries a fashion accent.
        return False
    if pool_key in ("LUXURY", "TRAVEL"):
        return True
    if pool_key == "FASHION":
        return signal or theme_value == "editorial" or rng.random() > 0.5
    return signal


def select_brands(
    category: str | None,
    theme: Theme | str | None,
    user_request: str | None = None,
    rng: random.Random | None = None,
) -> BrandSelection:
    """
    Chooses 1-2 accessible foundation brands and at most one luxury accent.

    Args:
        category: The content category (free-form keys are matched by substring).
        theme: The detected theme.
        user_request: Optional free text from the user; luxury-signal words in it
            ("luxury", "chic", "elevated", ...) can add a luxury accent.
        rng: Source of randomness for rotating between candidate sets. Pass a
            seeded ``random.Random`` for reproducible output.

    Returns:
        A validated ``BrandSelection``.
    """
    rng = rng or _SYSTEM_RANDOM
    category_key = normalize_category(category) or ""
    theme_value = (theme.value if isinstance(theme, Theme) else (theme or "")).lower()
    pool_key = _pool_key(category_key, theme_value)

    accessible = rng.choice(ACCESSIBLE_CANDIDATES[pool_key])

    luxury: str | None = None
    if _wants_luxury(pool_key, theme_value, has_luxury_signal(theme_value, user_request), rng):
        options = [b for b in LUXURY_CANDIDATES.get(pool_key, LUXURY_CANDIDATES["DEFAULT"]) if b not in accessible]
        if options:
            luxury = rng.choice(options)

    selection = BrandSelection(accessible=accessible, luxury=luxury)
    logger.debug(
        "Selected brands",
        category=category,
        theme=theme_value,
        pool=pool_key,
        accessible=list(selection.accessible),
        luxury=selection.luxury,
    )
    return selection
