# pro_mode_prompting/services/prompt_assembler.py
import random
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Callable

import structlog

from pro_mode_prompting.data.category_defaults import normalize_category
from pro_mode_prompting.data.constants import PhotographyStyle, SectionLabel
from pro_mode_prompting.data.settings import settings
from pro_mode_prompting.dto.concept import ConceptComponents
from pro_mode_prompting.dto.prompt_architecture import ProModePrompt
from pro_mode_prompting.services import section_builders
from pro_mode_prompting.services.brand_selector import select_brands
from pro_mode_prompting.services.prompt_architecture import (
    build_detailed_setting,
    build_prompt_architecture,
)
from pro_mode_prompting.services.prompting.style_resolver import (
    get_introduction,
    resolve_photography_style,
)
from pro_mode_prompting.services.scene_extractor import extract_scene
from pro_mode_prompting.services.theme_detector import detect_theme

logger = structlog.get_logger(__name__)

ConceptInput = ConceptComponents | Mapping[str, Any]


def _coerce_concept(concept: ConceptInput) -> ConceptComponents:
    if isinstance(concept, ConceptComponents):
        return concept
    return ConceptComponents.model_validate(concept)


def resolve_category(category: str | None, concept: ConceptComponents) -> str:
    """Explicit argument, then the concept's own category, then the configured default."""
    return (
        normalize_category(category)
        or normalize_category(concept.category)
        or normalize_category(settings.prompt_engine.default_category)
        or "LIFESTYLE"
    )


def _safe_section(label: SectionLabel, builder: Callable[..., str], *args, **kwargs) -> str:
    try:
        return builder(*args, **kwargs)
    except Exception:
        logger.exception("Section builder failed; section dropped.", section=label.value)
        return ""


def build_pro_mode_prompt(
    category: str | None,
    concept: ConceptInput,
    reference_images: Sequence[str] | None = None,
    user_request: str | None = None,
    user_photography_style: PhotographyStyle | str | None = None,
    item_index: int | None = None,
    *,
    rng: random.Random | None = None,
) -> ProModePrompt:
    """
    Assembles the final Pro Mode prompt for one concept.

    The scene is extracted once and every section is built from that one
    record, so Outfit, Pose and Setting never disagree about the scene.
    Sections are emitted in a fixed order after the introduction and joined
    with blank lines. A section whose builder fails is left out.

    Args:
        category: Content category key; falls back to ``concept.category``,
            then to the configured default.
        concept: A ``ConceptComponents`` or the raw mapping from upstream.
        reference_images: URLs of the subject's reference photos. Only their
            presence matters here: it picks the identity-preserving intro.
        user_request: Optional free text from the user, used for theme and
            luxury-signal detection.
        user_photography_style: "editorial" or "authentic".
        item_index: Position of this concept in a batch, which decides the
            style before ``user_photography_style`` does.
        rng: Randomness for brand rotation.

    Returns:
        The assembled ``ProModePrompt``.
    """
    concept = _coerce_concept(concept)
    resolved_category = resolve_category(category, concept)
    log = logger.bind(category=resolved_category, item_index=item_index)

    scene = extract_scene(concept.description)
    theme = detect_theme(" ".join(filter(None, [concept.title, concept.description, user_request])))
    brands = select_brands(resolved_category, theme, user_request, rng=rng)
    style = resolve_photography_style(item_index, user_photography_style)
    architecture = build_prompt_architecture(
        resolved_category, concept, theme, brands, style, scene=scene, user_request=user_request
    )

    claimed = section_builders.ClaimedSpans()
    sections = [
        _safe_section(
            SectionLabel.OUTFIT, section_builders.build_outfit_section,
            scene, concept, style, brands=brands, claimed=claimed,
        ),
        _safe_section(
            SectionLabel.POSE, section_builders.build_pose_section,
            scene, concept, style, claimed=claimed,
        ),
        _safe_section(
            SectionLabel.SETTING, section_builders.build_setting_section,
            scene, concept, style, claimed=claimed,
            fallback=build_detailed_setting(resolved_category, theme, user_request),
        ),
        _safe_section(SectionLabel.LIGHTING, section_builders.build_lighting_section, scene, concept, style),
        _safe_section(SectionLabel.CAMERA, section_builders.build_camera_section, scene, concept, style),
        _safe_section(SectionLabel.MOOD, section_builders.build_mood_section, scene, concept, style),
        _safe_section(
            SectionLabel.AESTHETIC, section_builders.build_aesthetic_section,
            scene, concept, style, architecture=architecture,
        ),
    ]
    if settings.prompt_engine.include_negative_instructions:
        sections.append(
            _safe_section(
                SectionLabel.AVOID, section_builders.build_avoid_section,
                scene, concept, style, architecture=architecture,
            )
        )

    introduction = get_introduction(style, bool(reference_images))
    full_prompt = "\n\n".join([introduction, *(s for s in sections if s)])

    log.info(
        "Pro Mode prompt assembled",
        theme=theme.value,
        style=style.value,
        accessible_brands=list(brands.accessible),
        luxury_brand=brands.luxury,
        sections=sum(1 for s in sections if s),
        length=len(full_prompt),
    )
    return ProModePrompt(
        full_prompt=full_prompt,
        category=resolved_category,
        photography_style=style,
        scene=scene,
        architecture=architecture,
    )


async def build_pro_mode_prompts(
    concepts: Iterable[ConceptInput],
    category: str | None = None,
    reference_images: Sequence[str] | None = None,
    user_request: str | None = None,
    user_photography_style: PhotographyStyle | str | None = None,
    *,
    rng: random.Random | None = None,
) -> list[ProModePrompt]:
    """Builds one prompt per concept; the item index drives the editorial/authentic split."""
    prompts = [
        build_pro_mode_prompt(
            category,
            concept,
            reference_images=reference_images,
            user_request=user_request,
            user_photography_style=user_photography_style,
            item_index=index,
            rng=rng,
        )
        for index, concept in enumerate(concepts)
    ]
    logger.info("Pro Mode batch assembled", count=len(prompts))
    return prompts
