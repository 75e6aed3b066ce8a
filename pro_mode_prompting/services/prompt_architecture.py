# pro_mode_prompting/services/prompt_architecture.py
import re

import structlog

from pro_mode_prompting.data.category_defaults import (
    CATEGORY_DEFAULTS,
    UNIVERSAL_NEGATIVE_INSTRUCTIONS,
    get_category_defaults,
    normalize_category,
)
from pro_mode_prompting.data.constants import PhotographyStyle, Theme
from pro_mode_prompting.dto.concept import ConceptComponents
from pro_mode_prompting.dto.prompt_architecture import (
    BrandSelection,
    MoodArchitecture,
    OutfitArchitecture,
    PromptArchitecture,
    SubjectAndPose,
)
from pro_mode_prompting.dto.scene import SceneElements
from pro_mode_prompting.utils.text import dedupe, join_natural

logger = structlog.get_logger(__name__)

_FALLBACK_MOOD_KEYWORDS: tuple[str, ...] = ("modern", "clean", "authentic")

THEME_MOOD_KEYWORDS: dict[str, tuple[str, ...]] = {
    Theme.CHRISTMAS.value: ("warm", "cozy", "festive", "holiday magic", "peaceful", "joyful"),
    Theme.BEACH.value: ("breezy", "relaxed", "coastal", "serene", "vacation vibes"),
    Theme.WORKOUT.value: ("energetic", "strong", "confident", "focused", "athletic"),
    Theme.LUXURY.value: ("sophisticated", "refined", "elegant", "quiet luxury", "understated"),
    Theme.TRAVEL.value: ("adventurous", "sophisticated", "wanderlust", "effortless", "chic"),
    Theme.CAFE.value: ("cozy", "casual", "warm", "inviting", "relatable"),
    Theme.SELFIE.value: ("confident", "natural", "authentic", "relaxed", "real"),
}

# (request pattern, setting) pairs tried in order; the entry with pattern None is the theme default.
_THEME_SETTINGS: dict[str, tuple[tuple[str | None, str], ...]] = {
    Theme.CHRISTMAS.value: (
        (r"morning|breakfast|coffee",
         "Cozy Christmas morning scene, decorated living room with illuminated tree, warm fireplace, "
         "holiday decorations, soft morning light through windows, festive atmosphere"),
        (r"fireplace|evening|night",
         "Elegant living room with crackling fireplace, Christmas tree with twinkling lights, luxurious "
         "holiday atmosphere, warm evening lighting, tasteful festive decorations"),
        (r"market|outdoor|shopping",
         "Festive holiday market, twinkling lights everywhere, holiday decorations, winter atmosphere, "
         "natural daylight, magical seasonal ambiance"),
        (None,
         "Cozy holiday setting with beautifully decorated Christmas tree, warm festive atmosphere, elegant "
         "holiday decorations, soft natural lighting, magical seasonal ambiance"),
    ),
    Theme.LUXURY.value: (
        (r"hotel|lobby|lounge",
         "Luxurious five-star hotel lobby, marble floors, sophisticated architectural details, soft ambient "
         "lighting, refined atmosphere"),
        (r"boutique|store",
         "High-end luxury boutique interior, minimalist design, premium materials, elegant lighting, "
         "sophisticated retail atmosphere"),
        (r"restaurant|dining",
         "Sophisticated fine dining restaurant, marble surfaces, elegant table settings, refined lighting, "
         "upscale ambiance"),
        (None,
         "Sophisticated modern interior with architectural details, polished marble surfaces, "
         "floor-to-ceiling windows, refined furniture, understated luxury atmosphere"),
    ),
    Theme.BEACH.value: (
        (None,
         "Pristine coastal beach, turquoise ocean views, white sand, natural beach textures, soft coastal "
         "light, serene beach atmosphere"),
    ),
    Theme.CAFE.value: (
        (None,
         "Charming coastal cafe or modern bistro, natural textures, warm ambient lighting, cozy authentic "
         "atmosphere, real lived-in setting"),
    ),
    Theme.TRAVEL.value: (
        (None,
         "Modern airport terminal with floor-to-ceiling windows, natural light, contemporary architecture, "
         "sophisticated travel atmosphere, subtle travel accessories visible"),
    ),
    Theme.WORKOUT.value: (
        (None,
         "Minimalist wellness studio, natural light streaming through windows, yoga mat visible, plants in "
         "background, clean athletic space, calm atmosphere"),
    ),
}

_CATEGORY_SETTINGS: dict[str, str] = {
    "WELLNESS": "Minimalist wellness studio with abundant natural light, yoga mat and meditation cushions "
                "visible, potted plants creating calming atmosphere, clean white walls",
    "LUXURY": "Sophisticated modern interior with architectural details, polished marble surfaces, "
              "floor-to-ceiling windows, refined furniture, understated luxury atmosphere",
    "LIFESTYLE": "Coastal home interior with natural textures, soft morning light filtering through linen "
                 "curtains, organic materials, lived-in comfortable atmosphere",
    "FASHION": "Clean urban setting in SoHo district, minimalist street backdrop, modern architecture, natural "
               "city atmosphere, fashion-supportive environment",
    "TRAVEL": "Contemporary airport terminal with natural light from large windows, modern minimalist design, "
              "sophisticated travel atmosphere",
    "BEAUTY": "Sun-drenched bathroom or bedroom, soft morning light creating natural glow, skincare products "
              "artfully arranged, marble or natural stone surfaces",
}

_GENERIC_SETTING = "Modern, clean setting with natural light and authentic atmosphere"


def _theme_value(theme: Theme | str | None) -> str:
    return (theme.value if isinstance(theme, Theme) else (theme or "")).lower()


def get_mood_keywords(category: str | None, theme: Theme | str | None) -> list[str]:
    """Category mood keywords followed by theme keywords, de-duplicated."""
    key = normalize_category(category)
    base = CATEGORY_DEFAULTS[key].mood.keywords if key in CATEGORY_DEFAULTS else _FALLBACK_MOOD_KEYWORDS
    return dedupe([*base, *THEME_MOOD_KEYWORDS.get(_theme_value(theme), ())])


def build_detailed_setting(
    category: str | None,
    theme: Theme | str | None,
    user_request: str | None = None,
) -> str:
    """
    Returns a specific, theme-aware setting description.

    Theme settings take precedence (with sub-variants chosen from the user
    request), then per-category settings, then a generic setting.
    """
    request = user_request or ""
    for pattern, setting in _THEME_SETTINGS.get(_theme_value(theme), ()):
        if pattern is None or re.search(pattern, request, re.IGNORECASE):
            return setting
    return _CATEGORY_SETTINGS.get(normalize_category(category) or "", _GENERIC_SETTING)


def negative_instructions_for(category: str | None) -> list[str]:
    """Category negatives followed by the universal ones, de-duplicated."""
    defaults = get_category_defaults(category)
    return dedupe([*defaults.negative_instructions, *UNIVERSAL_NEGATIVE_INSTRUCTIONS])


def build_prompt_architecture(
    category: str | None,
    concept: ConceptComponents,
    theme: Theme | str | None,
    brands: BrandSelection,
    style: PhotographyStyle,
    scene: SceneElements | None = None,
    user_request: str | None = None,
) -> PromptArchitecture:
    """Materialises the six-part architecture from the registry, brands and scene."""
    scene = scene or SceneElements()
    defaults = get_category_defaults(category)

    subject = defaults.subject_and_pose or SubjectAndPose(
        description=concept.title or "Portrait of the subject",
        stance=scene.action or concept.pose or "natural, relaxed posture",
        body_language="relaxed, authentic body language",
    )

    hint_pieces = concept.outfit.pieces() if concept.outfit else []
    outfit_description = (
        scene.outfit_complete
        or ", ".join(hint_pieces)
        or f"wardrobe staples from {join_natural(list(brands.accessible))}"
    )
    outfit = OutfitArchitecture(
        description=outfit_description,
        accessible_brands=brands.accessible,
        luxury_accent=brands.luxury,
    )

    mood = MoodArchitecture(
        keywords=tuple(get_mood_keywords(category, theme)),
        aesthetic=concept.aesthetic or defaults.mood.aesthetic,
        avoid_terms=defaults.mood.avoid_terms,
    )
    environment = defaults.environment.model_copy(
        update={"setting": concept.setting or build_detailed_setting(category, theme, user_request)}
    )
    camera = defaults.camera.model_copy(update={"photography_style": style})

    logger.debug(
        "Prompt architecture built",
        category=category,
        theme=_theme_value(theme),
        has_registry_subject=defaults.subject_and_pose is not None,
        luxury_accent=brands.luxury,
    )

    return PromptArchitecture(
        subject_and_pose=subject,
        outfit=outfit,
        mood=mood,
        environment=environment,
        camera=camera,
        negative_instructions=tuple(negative_instructions_for(category)),
    )


def render_architecture(architecture: PromptArchitecture) -> str:
    """Joins the six architecture parts into one compact paragraph."""
    parts: list[str] = []

    sp = architecture.subject_and_pose
    parts.append(f"{sp.description}, {sp.stance}, {sp.body_language}")

    outfit_text = architecture.outfit.description
    if architecture.outfit.luxury_accent:
        outfit_text += f", {architecture.outfit.luxury_accent} as luxury accent"
    parts.append(outfit_text)

    parts.append(f"{', '.join(architecture.mood.keywords)}. {architecture.mood.aesthetic}")

    env = architecture.environment
    parts.append(f"{env.setting}. {env.color_story}. {env.atmosphere}")

    cam = architecture.camera
    parts.append(
        f"{cam.format} format, {cam.lighting}, {cam.depth_of_field}, "
        f"{cam.photography_style.value} photography feel"
    )

    if architecture.negative_instructions:
        parts.append(f"Avoid: {', '.join(architecture.negative_instructions)}")

    return ". ".join(parts)
