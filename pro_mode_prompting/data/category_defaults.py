# pro_mode_prompting/data/category_defaults.py
from types import MappingProxyType
from typing import Mapping

from pro_mode_prompting.data.constants import Category, PhotographyStyle
from pro_mode_prompting.dto.prompt_architecture import (
    CameraArchitecture,
    CategoryDefaults,
    EnvironmentArchitecture,
    MoodArchitecture,
    SubjectAndPose,
)

# Applied to every category, after the category's own instructions.
UNIVERSAL_NEGATIVE_INSTRUCTIONS: tuple[str, ...] = (
    "distorted anatomy",
    "extra fingers or limbs",
    "messy logos",
    "random objects",
    "over-sharpening",
    "cartoon or AI-art look",
)

GENERIC_DEFAULTS = CategoryDefaults(
    mood=MoodArchitecture(
        keywords=("modern", "clean", "authentic"),
        aesthetic="clean, natural, modern aesthetic",
        avoid_terms=("staged", "artificial"),
    ),
    environment=EnvironmentArchitecture(
        setting="Modern, clean setting with natural light",
        color_story="Neutral tones, natural textures",
        atmosphere="Authentic, relaxed, lived-in",
        visual_priority="subject-focused",
    ),
    camera=CameraArchitecture(
        lighting="Natural light, soft shadows",
        depth_of_field="Shallow depth of field",
        photography_style=PhotographyStyle.AUTHENTIC,
    ),
    negative_instructions=("stiff posing", "artificial backgrounds"),
)

_CATEGORY_DEFAULTS: dict[str, CategoryDefaults] = {
    Category.WELLNESS.value: CategoryDefaults(
        mood=MoodArchitecture(
            keywords=("calm", "grounded", "natural", "soft movement", "wellness", "balance", "quiet confidence"),
            aesthetic="earthy, neutral, light color palette",
            avoid_terms=("extreme fitness", "intense workout", "dramatic poses"),
        ),
        environment=EnvironmentArchitecture(
            setting="Minimal, airy space",
            color_story="Neutral tones, natural textures, breathable fabrics",
            atmosphere="Peaceful, clean, wellness-focused, serene",
            visual_priority="subject-focused",
        ),
        camera=CameraArchitecture(
            lighting="Soft daylight, natural shadows",
            depth_of_field="Lifestyle photography feel",
            photography_style=PhotographyStyle.AUTHENTIC,
        ),
        negative_instructions=("harsh contrast", "exaggerated posing", "clutter"),
    ),
    Category.LUXURY.value: CategoryDefaults(
        mood=MoodArchitecture(
            keywords=("quiet luxury", "editorial", "polished", "modern", "sophisticated", "understated elegance"),
            aesthetic="neutral palette, matte finishes, timeless silhouettes",
            avoid_terms=("flashy", "trendy", "loud", "logo overload"),
        ),
        environment=EnvironmentArchitecture(
            setting="Architectural, minimalist, premium setting",
            color_story="Muted tones, clean lines",
            atmosphere="Sophisticated, refined, modern, quiet luxury",
            visual_priority="balanced",
        ),
        camera=CameraArchitecture(
            lighting="Editorial lighting, controlled shadows",
            depth_of_field="Fashion-editorial framing",
            photography_style=PhotographyStyle.EDITORIAL,
        ),
        negative_instructions=("logo overload", "trendy exaggeration", "flashy styling"),
    ),
    Category.LIFESTYLE.value: CategoryDefaults(
        mood=MoodArchitecture(
            keywords=("relatable", "modern", "warm", "effortless", "natural", "accessible"),
            aesthetic="Pinterest lifestyle aesthetic, wearable styling",
            avoid_terms=("staged", "artificial", "overly produced", "stiff"),
        ),
        environment=EnvironmentArchitecture(
            setting="Cafe, home, street, city moments",
            color_story="Warm tones, natural elements",
            atmosphere="Real, lived-in, authentic, relatable",
            visual_priority="subject-focused",
        ),
        camera=CameraArchitecture(
            lighting="Natural light, lifestyle framing",
            depth_of_field="Shallow, lifestyle photography",
            photography_style=PhotographyStyle.AUTHENTIC,
        ),
        negative_instructions=("stiff posing", "staged expressions", "artificial backgrounds"),
    ),
    Category.FASHION.value: CategoryDefaults(
        mood=MoodArchitecture(
            keywords=("editorial", "trend-aware", "modern", "intentional", "confident", "fashion-forward"),
            aesthetic="clean but expressive, clear silhouette",
            avoid_terms=("messy", "cluttered", "unintentional", "random styling"),
        ),
        environment=EnvironmentArchitecture(
            setting="Simple, fashion-supportive background",
            color_story="Neutral, allows outfit to stand out",
            atmosphere="Editorial, minimal, focused, no visual competition",
            visual_priority="balanced",
        ),
        camera=CameraArchitecture(
            lighting="Defined lighting, controlled depth of field",
            depth_of_field="Fashion photography framing",
            photography_style=PhotographyStyle.EDITORIAL,
        ),
        negative_instructions=("clutter", "distorted proportions", "random styling elements"),
    ),
    Category.TRAVEL.value: CategoryDefaults(
        mood=MoodArchitecture(
            keywords=("effortless", "aspirational", "calm", "wanderlust", "sophisticated", "chic travel energy"),
            aesthetic="neutral, chic color palette, travel-ready",
            avoid_terms=("chaotic", "rushed", "messy", "unrealistic"),
        ),
        environment=EnvironmentArchitecture(
            setting="Airport terminals, city streets, destination settings",
            color_story="Neutral, travel-appropriate, recognizable",
            atmosphere="Calm travel energy, sophisticated, not busy",
            visual_priority="balanced",
        ),
        camera=CameraArchitecture(
            lighting="Natural or soft ambient lighting",
            depth_of_field="Lifestyle travel photography",
            photography_style=PhotographyStyle.AUTHENTIC,
        ),
        negative_instructions=("chaotic backgrounds", "unrealistic crowds", "motion blur chaos"),
    ),
    Category.BEAUTY.value: CategoryDefaults(
        mood=MoodArchitecture(
            keywords=("clean", "fresh", "natural glow", "soft", "minimal", "editorial beauty"),
            aesthetic="clean beauty, skin-focused",
            avoid_terms=("heavy makeup", "artificial", "overdone", "heavy filters"),
        ),
        environment=EnvironmentArchitecture(
            setting="Neutral background or clean interior",
            color_story="Soft, neutral, beauty-focused",
            atmosphere="Fresh, minimal, editorial, no distractions",
            visual_priority="subject-focused",
        ),
        camera=CameraArchitecture(
            lighting="Beauty photography lighting, soft, even illumination",
            depth_of_field="Close-up or medium framing",
            photography_style=PhotographyStyle.EDITORIAL,
        ),
        negative_instructions=("heavy filters", "exaggerated makeup", "artificial skin texture"),
    ),
    Category.SEASONAL_CHRISTMAS.value: CategoryDefaults(
        mood=MoodArchitecture(
            keywords=("warm", "cozy", "festive", "elegant", "holiday magic"),
            aesthetic="warm tones, soft glow, Pinterest holiday framing",
            avoid_terms=("kitschy", "overpowering decor", "cartoonish"),
        ),
        environment=EnvironmentArchitecture(
            setting="Holiday interiors, winter streets, seasonal decor",
            color_story="Warm festive tones, tasteful decorations",
            atmosphere="Cozy, festive, elegant, not overdone",
            visual_priority="balanced",
        ),
        camera=CameraArchitecture(
            lighting="Warm lighting, soft shadows",
            depth_of_field="Pinterest holiday framing",
            photography_style=PhotographyStyle.AUTHENTIC,
        ),
        negative_instructions=("kitschy elements", "overpowering decor", "cartoonish vibes"),
    ),
    # Selfies keep realism rules of their own, including a longer negative list.
    Category.SELFIE.value: CategoryDefaults(
        subject_and_pose=SubjectAndPose(
            description="Self-taken photo, front-facing camera perspective",
            stance="Natural selfie posture, relaxed confidence, self-aware",
            body_language="Real, human presence, slight natural angle, not perfectly straight",
        ),
        mood=MoodArchitecture(
            keywords=("confident but relaxed", "calm", "grounded", "self-assured", "modern", "clean", "approachable"),
            aesthetic="realistic, authentic, natural, relatable",
            avoid_terms=(
                "overly polished", "AI perfect", "too editorial",
                "too seductive", "too dramatic", "photoshoot vibes",
            ),
        ),
        environment=EnvironmentArchitecture(
            setting="Clean interiors, neutral walls, windows with natural light, mirrors, bedrooms, bathrooms",
            color_story="Simple, real spaces that support the person",
            atmosphere="Personal, authentic, relatable, not competitive",
            visual_priority="subject-focused",
        ),
        camera=CameraArchitecture(
            lighting="Soft daylight or window light, front-facing camera perspective",
            depth_of_field="Slight natural angle, handheld realism",
            photography_style=PhotographyStyle.AUTHENTIC,
        ),
        negative_instructions=(
            "distorted anatomy",
            "extra fingers",
            "uncanny facial symmetry",
            "cartoon or illustration style",
            "over-processed skin",
            "warped reflections",
            "smoothing filters",
            "artificial glow",
        ),
    ),
}

CATEGORY_DEFAULTS: Mapping[str, CategoryDefaults] = MappingProxyType(_CATEGORY_DEFAULTS)


def normalize_category(category: str | None) -> str | None:
    """Upper-cases a category key and folds spaces and hyphens to underscores."""
    if not category or not isinstance(category, str):
        return None
    key = category.strip().upper().replace("-", "_").replace(" ", "_")
    return key or None


def get_category_defaults(category: str | None) -> CategoryDefaults:
    """Returns the defaults bundle for a category, or the generic bundle if unknown."""
    key = normalize_category(category)
    return CATEGORY_DEFAULTS.get(key, GENERIC_DEFAULTS) if key else GENERIC_DEFAULTS
