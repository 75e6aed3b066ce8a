# pro_mode_prompting/services/theme_detector.py
import re

import structlog

from pro_mode_prompting.data.constants import Theme

logger = structlog.get_logger(__name__)

# Order matters: the first matching rule wins. Keywords anchor at word starts,
# so stems such as "swim" still match "swimwear".
_THEME_RULES: tuple[tuple[Theme, re.Pattern[str]], ...] = (
    (Theme.CHRISTMAS, re.compile(r"\b(?:christmas|holiday|festive|winter|cozy.*holiday|holiday.*cozy)", re.IGNORECASE)),
    (Theme.BEACH, re.compile(r"\b(?:beach|coastal|ocean|seaside|resort|tropical|swim)", re.IGNORECASE)),
    (Theme.WORKOUT, re.compile(r"\b(?:workout|gym\b|fitness|athletic|yoga|sport|wellness)", re.IGNORECASE)),
    (Theme.LUXURY, re.compile(r"\b(?:luxury|elegant|chic\b|sophisticated|premium|high-end|refined)", re.IGNORECASE)),
    (Theme.TRAVEL, re.compile(r"\b(?:travel|airport|vacation|destination|jet.*set|wanderlust)", re.IGNORECASE)),
    (Theme.CAFE, re.compile(r"\b(?:cafe|café|coffee|brunch|restaurant|bistro|dining)", re.IGNORECASE)),
    (Theme.SELFIE, re.compile(r"\b(?:selfie|mirror|front.*facing|self.*portrait)", re.IGNORECASE)),
    (Theme.CASUAL, re.compile(r"\b(?:casual|everyday|lifestyle|relatable|authentic)", re.IGNORECASE)),
)


def detect_theme(text: str | None) -> Theme:
    """
    Classifies free text into a theme.

    Always returns a theme; text matching no rule (or no text at all) is
    classified as ``Theme.LIFESTYLE``.
    """
    if not text:
        return Theme.LIFESTYLE
    for theme, pattern in _THEME_RULES:
        if pattern.search(text):
            logger.debug("Theme detected", theme=theme.value, rule=pattern.pattern)
            return theme
    return Theme.LIFESTYLE
