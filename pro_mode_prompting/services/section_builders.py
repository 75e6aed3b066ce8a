# pro_mode_prompting/services/section_builders.py
"""
Builders for the labelled paragraphs of a Pro Mode prompt.

Every builder takes the same ``SceneElements`` record, the concept and the
resolved photography style, and returns one ``"Label: sentence."`` paragraph.
Builders fall back to hint or generic text when extraction found nothing and
never raise on empty input.

Cross-section duplication is avoided through ``ClaimedSpans``: a builder
claims the text it emitted, later builders skip fragments already claimed.
"""
import re

import structlog

from pro_mode_prompting.data.category_defaults import get_category_defaults
from pro_mode_prompting.data.constants import PhotographyStyle, SectionLabel
from pro_mode_prompting.dto.concept import ConceptComponents
from pro_mode_prompting.dto.prompt_architecture import BrandSelection, PromptArchitecture
from pro_mode_prompting.dto.scene import SceneElements
from pro_mode_prompting.services.prompt_architecture import negative_instructions_for
from pro_mode_prompting.services.prompting.style_resolver import get_camera_template
from pro_mode_prompting.utils.text import (
    clean_fragment,
    contains_ci,
    dedupe,
    join_natural,
    labelled,
    strip_phrase,
)

logger = structlog.get_logger(__name__)

POSE_FALLBACK = "Natural, relaxed posture with soft, candid body language"
OUTFIT_FALLBACK = "Sophisticated neutral ensemble, tailored pieces, minimal accessories"
LIGHTING_FALLBACK = "Natural window lighting with soft, even shadows"
MOOD_FALLBACK_KEYWORDS: tuple[str, ...] = ("natural", "authentic", "sophisticated")

_TIME_OF_DAY_LIGHTING: dict[str, str] = {
    "morning": "Soft morning light through the windows with gentle natural shadows",
    "afternoon": "Bright, diffused afternoon daylight with soft shadows",
    "evening": "Warm evening glow from ambient lamps with soft shadows",
    "night": "Warm evening glow from ambient lamps with soft shadows",
}

SEASON_MOOD_KEYWORDS: dict[str, tuple[str, ...]] = {
    "christmas": ("festive", "cozy"),
    "new year": ("celebratory", "glamorous"),
    "winter": ("cozy", "crisp"),
    "summer": ("sun-kissed", "breezy"),
    "spring": ("fresh", "airy"),
    "autumn": ("warm", "earthy"),
}


class ClaimedSpans:
    """Text already emitted by earlier sections of the same prompt."""

    def __init__(self) -> None:
        self._spans: list[str] = []

    def claim(self, text: str) -> None:
        if text:
            self._spans.append(text.lower())

    def covers(self, fragment: str) -> bool:
        fragment = fragment.lower().strip()
        return bool(fragment) and any(fragment in span for span in self._spans)


# =========================
# Outfit
# =========================
def _outfit_body(scene: SceneElements, concept: ConceptComponents, brands: BrandSelection | None) -> str:
    if scene.outfit_complete:
        body = scene.outfit_complete
        # Re-attach any captured item the phrase lost in cleanup.
        missing = [item for item in scene.outfit_items if not contains_ci(body, item)]
        return f"{body}, {', '.join(missing)}" if missing else body
    if scene.outfit_items:
        return ", ".join(scene.outfit_items)

    hint_pieces = concept.outfit.pieces() if concept.outfit else []
    if hint_pieces:
        return ", ".join(hint_pieces)

    logger.debug("Outfit fallback", brands=list(brands.accessible) if brands else None)
    if brands is not None:
        body = f"Effortless, wearable staples from {join_natural(list(brands.accessible))} in a cohesive neutral palette"
        if brands.luxury:
            body += f", finished with a single {brands.luxury} accent piece"
        return body
    return OUTFIT_FALLBACK


def build_outfit_section(
    scene: SceneElements,
    concept: ConceptComponents,
    style: PhotographyStyle | str | None = None,
    *,
    brands: BrandSelection | None = None,
    claimed: ClaimedSpans | None = None,
) -> str:
    """Prefers the full captured outfit phrase over a rebuilt list of items."""
    body = _outfit_body(scene, concept, brands)
    if claimed is not None:
        claimed.claim(body)
    return labelled(SectionLabel.OUTFIT.value, body)


# =========================
# Pose
# =========================
def _pose_body(scene: SceneElements, concept: ConceptComponents) -> str:
    body = scene.action or scene.posture
    if scene.activity and not contains_ci(body, scene.activity):
        body = f"{body}, {scene.activity}" if body else scene.activity
    if not body and concept.pose:
        body = concept.pose.strip()

    # The location belongs to the Setting paragraph.
    if body and scene.location:
        body = strip_phrase(body, scene.location)

    if not body:
        body = POSE_FALLBACK
    if scene.mood and not contains_ci(body, scene.mood):
        body = f"{body}, {scene.mood} energy"
    return body


def build_pose_section(
    scene: SceneElements,
    concept: ConceptComponents,
    style: PhotographyStyle | str | None = None,
    *,
    claimed: ClaimedSpans | None = None,
) -> str:
    body = _pose_body(scene, concept)
    if claimed is not None:
        claimed.claim(body)
    return labelled(SectionLabel.POSE.value, body)


# =========================
# Setting
# =========================
def build_setting_section(
    scene: SceneElements,
    concept: ConceptComponents,
    style: PhotographyStyle | str | None = None,
    *,
    claimed: ClaimedSpans | None = None,
    fallback: str | None = None,
) -> str:
    """
    Location, architecture, decor and the props the Pose paragraph did not use.

    Without ``claimed`` the Pose text is derived from the scene, so the same
    props are filtered whether or not the builder runs inside the assembler.
    """
    if claimed is None:
        claimed = ClaimedSpans()
        claimed.claim(_pose_body(scene, concept))

    base = scene.location_details or scene.location
    extras: list[str] = []
    for item in [*scene.architecture, *scene.decor]:
        if not contains_ci(base, item) and not any(contains_ci(e, item) for e in extras):
            extras.append(item)
    for prop in scene.props:
        if claimed.covers(prop):
            continue
        if not contains_ci(base, prop) and not any(contains_ci(e, prop) for e in extras):
            extras.append(prop)

    if base and extras:
        body = f"{base}, featuring {join_natural(extras)}"
    elif base:
        body = base
    elif extras:
        body = join_natural(extras)
    else:
        logger.debug("Setting fallback", has_hint=bool(concept.setting))
        body = (
            concept.setting
            or fallback
            or get_category_defaults(concept.category).environment.setting
        )
    claimed.claim(body)
    return labelled(SectionLabel.SETTING.value, body)


# =========================
# Lighting
# =========================
def build_lighting_section(
    scene: SceneElements,
    concept: ConceptComponents,
    style: PhotographyStyle | str | None = None,
) -> str:
    if scene.lighting:
        body = scene.lighting
    elif concept.lighting:
        body = concept.lighting.strip()
    else:
        body = _TIME_OF_DAY_LIGHTING.get(scene.time_of_day, LIGHTING_FALLBACK)

    if scene.vibe and not contains_ci(body, scene.vibe):
        article = "an" if scene.vibe[:1].lower() in "aeiou" else "a"
        body = f"{body}, creating {article} {scene.vibe} atmosphere"
    return labelled(SectionLabel.LIGHTING.value, body)


# =========================
# Camera
# =========================
def build_camera_section(
    scene: SceneElements,
    concept: ConceptComponents,
    style: PhotographyStyle | str | None = None,
) -> str:
    """Exactly one of the two camera templates, never a blend."""
    return get_camera_template(style)


# =========================
# Mood
# =========================
def mood_keywords(scene: SceneElements, concept: ConceptComponents) -> list[str]:
    """Scene vibe and mood, then concept mood, then seasonal extras; de-duplicated."""
    concept_moods = [clean_fragment(m) for m in re.split(r"[,;]", concept.mood or "")]
    keywords = dedupe([scene.vibe, scene.mood, *concept_moods])
    for extra in SEASON_MOOD_KEYWORDS.get(scene.season, ()):
        if not any(re.search(rf"\b{re.escape(extra)}\b", k, re.IGNORECASE) for k in keywords):
            keywords.append(extra)
    return keywords


def build_mood_section(
    scene: SceneElements,
    concept: ConceptComponents,
    style: PhotographyStyle | str | None = None,
) -> str:
    keywords = mood_keywords(scene, concept) or list(MOOD_FALLBACK_KEYWORDS)
    return labelled(SectionLabel.MOOD.value, f"Captures a {', '.join(keywords)} feeling")


# =========================
# Aesthetic & Avoid
# =========================
def build_aesthetic_section(
    scene: SceneElements,
    concept: ConceptComponents,
    style: PhotographyStyle | str | None = None,
    *,
    architecture: PromptArchitecture | None = None,
) -> str:
    if architecture is not None:
        aesthetic = architecture.mood.aesthetic
        color_story = architecture.environment.color_story
    else:
        defaults = get_category_defaults(concept.category)
        aesthetic = concept.aesthetic or defaults.mood.aesthetic
        color_story = defaults.environment.color_story
    body = f"{aesthetic}; {color_story.lower()}" if color_story else aesthetic
    return labelled(SectionLabel.AESTHETIC.value, body)


def build_avoid_section(
    scene: SceneElements,
    concept: ConceptComponents,
    style: PhotographyStyle | str | None = None,
    *,
    architecture: PromptArchitecture | None = None,
) -> str:
    if architecture is not None:
        instructions = list(architecture.negative_instructions)
    else:
        instructions = negative_instructions_for(concept.category)
    return labelled(SectionLabel.AVOID.value, ", ".join(instructions))
