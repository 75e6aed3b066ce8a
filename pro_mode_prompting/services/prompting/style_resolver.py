# pro_mode_prompting/services/prompting/style_resolver.py
import structlog

from pro_mode_prompting.data.constants import PhotographyStyle
from pro_mode_prompting.data.settings import settings

from .styles import (
    CAMERA_AUTHENTIC,
    CAMERA_EDITORIAL,
    INTRO_AUTHENTIC,
    INTRO_AUTHENTIC_NO_REFERENCE,
    INTRO_EDITORIAL,
    INTRO_EDITORIAL_NO_REFERENCE,
)

logger = structlog.get_logger(__name__)

CAMERA_TEMPLATES: dict[PhotographyStyle, str] = {
    PhotographyStyle.EDITORIAL: CAMERA_EDITORIAL,
    PhotographyStyle.AUTHENTIC: CAMERA_AUTHENTIC,
}

# (style, has reference images) -> introduction
INTRO_TEMPLATES: dict[tuple[PhotographyStyle, bool], str] = {
    (PhotographyStyle.EDITORIAL, True): INTRO_EDITORIAL,
    (PhotographyStyle.EDITORIAL, False): INTRO_EDITORIAL_NO_REFERENCE,
    (PhotographyStyle.AUTHENTIC, True): INTRO_AUTHENTIC,
    (PhotographyStyle.AUTHENTIC, False): INTRO_AUTHENTIC_NO_REFERENCE,
}


def coerce_style(style: PhotographyStyle | str | None) -> PhotographyStyle | None:
    """Parses a style flag, returning None for empty or unknown values."""
    if style is None or isinstance(style, PhotographyStyle):
        return style
    try:
        return PhotographyStyle(str(style).strip().lower())
    except ValueError:
        logger.warning("Ignoring unknown photography style.", style=style)
        return None


def _default_style() -> PhotographyStyle:
    return coerce_style(settings.prompt_engine.default_photography_style) or PhotographyStyle.AUTHENTIC


def resolve_photography_style(
    item_index: int | None = None,
    requested_style: PhotographyStyle | str | None = None,
) -> PhotographyStyle:
    """
    Resolves the camera style for one prompt.

    Priority:
        1. ``item_index`` when building a batch: the first
           ``editorial_batch_size`` items are editorial, the rest authentic.
        2. An explicit ``requested_style``.
        3. The configured default (authentic).
    """
    if item_index is not None and item_index >= 0:
        if item_index < settings.prompt_engine.editorial_batch_size:
            return PhotographyStyle.EDITORIAL
        return PhotographyStyle.AUTHENTIC
    return coerce_style(requested_style) or _default_style()


def get_camera_template(style: PhotographyStyle | str | None) -> str:
    return CAMERA_TEMPLATES[coerce_style(style) or _default_style()]


def get_introduction(style: PhotographyStyle | str | None, has_reference_images: bool) -> str:
    return INTRO_TEMPLATES[(coerce_style(style) or _default_style(), bool(has_reference_images))]
