# pro_mode_prompting/services/scene_extractor.py
"""
Parses a free-text concept description into ``SceneElements``.

The description comes from an upstream language model and may be truncated or
malformed, so every field is captured by its own best-effort pass. A pass that
finds nothing leaves its field empty; a pass that fails unexpectedly is logged
and skipped. ``extract_scene`` never raises.
"""
import re
from collections.abc import Callable
from typing import TypeVar

import structlog

from pro_mode_prompting.data.brand_pools import KNOWN_BRANDS
from pro_mode_prompting.dto.scene import SceneElements
from pro_mode_prompting.utils.text import clean_fragment, dedupe, squash_whitespace

logger = structlog.get_logger(__name__)

T = TypeVar("T")

# =========================
# Vocabularies
# =========================
POSTURE_WORDS: tuple[str, ...] = (
    "sitting", "seated", "standing", "kneeling", "lying", "lounging", "reclining",
    "leaning", "walking", "strolling", "perched", "crouching", "curled up",
    "stretching", "dancing", "twirling",
)

ACTIVITY_WORDS: tuple[str, ...] = (
    "holding", "sipping", "drinking", "reading", "opening", "unwrapping", "wrapping",
    "decorating", "scrolling", "journaling", "writing", "typing", "laughing", "smiling",
    "looking", "gazing", "carrying", "adjusting", "pouring", "stirring", "hugging",
    "applying", "browsing",
)

LOCATION_NOUNS: tuple[str, ...] = (
    "living room", "hotel lobby", "hotel room", "hotel suite", "airport terminal", "airport lounge",
    "coffee shop", "city street", "rooftop terrace", "fitness studio", "yoga studio",
    "kitchen", "loft", "apartment", "penthouse", "bedroom", "bathroom", "cafe", "café",
    "bistro", "restaurant", "studio", "boutique", "library", "garden", "terrace", "balcony",
    "street", "beach", "park", "office", "lobby", "lounge", "cabin", "chalet", "villa",
    "home", "market", "terminal", "gym", "spa", "hotel", "courtyard", "bakery", "bookstore",
    "vineyard", "meadow", "forest", "townhouse", "farmhouse", "rooftop", "marina", "pier",
)

FURNITURE_NOUNS: tuple[str, ...] = (
    "kitchen island", "window seat", "sofa", "couch", "armchair", "chair", "bed", "bench",
    "stool", "countertop", "counter", "table", "desk", "windowsill", "rug", "ottoman",
    "daybed", "chaise", "staircase", "steps", "vanity",
)

OBJECT_PROPS: tuple[str, ...] = (
    r"(?:(?:ceramic|steaming|oversized)\s+)?(?:coffee\s+)?(?:cup|mug)(?:\s+of\s+(?:coffee|tea|cocoa|hot chocolate))?",
    r"(?:iced\s+)?latte",
    r"(?:glass|flute)\s+of\s+champagne",
    r"champagne\s+(?:glass|flute)",
    r"(?:wrapped\s+)?gift\s+box(?:es)?",
    r"wrapped\s+(?:gifts|presents)",
    r"(?:(?:open|hardcover|vintage)\s+)?book",
    r"magazine",
    r"laptop",
    r"(?:leather\s+)?(?:tote\s+bag|handbag|clutch)",
    r"yoga\s+mat",
    r"water\s+bottle",
    r"suitcase",
    r"shopping\s+bags",
    r"passport",
)

ARCHITECTURE_PATTERNS: tuple[str, ...] = (
    r"exposed\s+brick(?:\s+walls?)?",
    r"floor-to-ceiling\s+windows?",
    r"marble\s+(?:surfaces?|floors?|countertops?|counters?|island|walls?|staircase)",
    r"(?:high|vaulted)\s+ceilings?",
    r"arched\s+(?:windows?|doorways?|ceilings?)",
    r"(?:raw\s+|polished\s+)?concrete\s+(?:walls?|floors?)",
    r"(?:exposed|wooden|wood|oak)\s+beams?",
    r"(?:large|tall|panoramic)\s+windows?",
    r"herringbone\s+(?:floors?|parquet)",
    r"(?:stone|marble|brick)\s+fireplace",
    r"city\s+(?:lights|skyline|views?)",
    r"(?:ocean|sea|mountain|harbor|harbour)\s+views?",
    r"industrial\s+(?:pipes|ductwork|steel\s+beams)",
)

_TEXTURES = r"(?:cashmere|wool|linen|velvet|silk|boucl[eé]|leather|knit|wood|marble|brass|rattan|suede|stone|concrete|glass)"

DECOR_PATTERNS: tuple[str, ...] = (
    r"(?:(?:minimalist|small|tall|large|grand|decorated|illuminated|elegant|flocked|white|green|"
    r"sparkling|twinkling|classic|modern|traditional|lit|frosted|snow-dusted)\s+){0,2}christmas\s+tree",
    r"(?:(?:warm|soft|white|glowing|tiny)\s+)?(?:string|fairy|twinkle|twinkling|festive)\s+lights",
    r"(?:(?:pine|eucalyptus|fresh|green|festive)\s+)?garlands?",
    r"(?:(?:lit|flickering|taper|pillar|scented|glowing|white)\s+)?candles\b|(?:(?:lit|flickering|taper|pillar|scented|glowing|white)\s+)?candle\b",
    r"(?:(?:fresh|festive|pine)\s+)?wreaths?",
    r"(?:(?:glass|gold|silver|red)\s+)?ornaments",
    r"stockings",
    r"(?:(?:fresh|dried)\s+)?flowers",
    r"potted\s+plants",
    r"(?:linen|velvet|silk|sheepskin|wool)\s+(?:curtains|throws?|pillows|cushions|blankets?)",
    _TEXTURES + r"\s+and\s+" + _TEXTURES + r"(?:\s+textures?)?",
)

LIGHTING_NOUNS = r"(?:lighting|light|sunlight|daylight|candlelight|firelight|lamplight|glow|golden\s+hour)"

MOOD_WORDS: tuple[str, ...] = (
    "cozy", "festive", "serene", "calm", "peaceful", "relaxed", "intimate", "elegant",
    "sophisticated", "playful", "romantic", "moody", "dreamy", "joyful", "confident",
    "effortless", "carefree", "nostalgic", "luxurious", "polished", "fresh", "energetic",
    "contemplative", "whimsical", "tranquil",
)

_STOPWORDS = r"(?:a|an|the|with|and|in|on|at|under|by|of|from|her|his|their|while)"
_ARTICLES = r"(?:a|an|the|her|his|their|my)"
_ADJ_WORD = r"(?:(?!" + _STOPWORDS + r"\b)[\w'-]+\s+)"


def _alternation(words: tuple[str, ...]) -> str:
    # Longest first, so "living room" wins over "room"-like shorter nouns.
    return "|".join(re.escape(w).replace(r"\ ", r"\s+") for w in sorted(words, key=len, reverse=True))


_POSTURE_ALT = _alternation(POSTURE_WORDS)

_OUTFIT_RE = re.compile(
    r"\bwearing\s+(?P<outfit>.+?)"
    r"(?=,?\s+(?:while\s+)?(?:" + _POSTURE_ALT + r")(?![\w-])"
    r"|\s+with\b"
    r"|,?\s+(?:in|at|inside)\s+" + _ARTICLES + r"\b"
    r"|[.!?;](?:\s|$)"
    r"|$)",
    re.IGNORECASE | re.DOTALL,
)
_POSTURE_RE = re.compile(
    r"(?<![\w-])(?P<posture>" + _POSTURE_ALT + r")(?![\w-])(?P<rest>[^,.;!?]*)", re.IGNORECASE
)
_ACTIVITY_RE = re.compile(
    r"\b(?P<activity>(?:" + _alternation(ACTIVITY_WORDS) + r")\b[^,.;!?]*)", re.IGNORECASE
)
_CLAUSE_BREAK_RE = re.compile(
    r"\s+(?:(?:in|at|inside|within)\s+" + _ARTICLES + r"\b|while\b)", re.IGNORECASE
)
_LOCATION_RE = re.compile(
    r"\b(?:in|at|inside|within|on)\s+" + _ARTICLES + r"\s+"
    r"(?P<phrase>" + _ADJ_WORD + r"{0,3}?(?:" + _alternation(LOCATION_NOUNS) + r"))\b"
    r"(?P<tail>[^,.;!?]*)",
    re.IGNORECASE,
)
_FURNITURE_RE = re.compile(
    r"\b(?:on|at|in|against|beside|by|near|across|onto|into)\s+" + _ARTICLES + r"\s+"
    r"(?P<prop>" + _ADJ_WORD + r"{0,2}?(?:" + _alternation(FURNITURE_NOUNS) + r"))\b",
    re.IGNORECASE,
)
_LIGHTING_RE = re.compile(
    r"\b(?P<lighting>" + _ADJ_WORD + r"{0,3}?" + LIGHTING_NOUNS + r")\b"
    r"(?!\s+(?:blue|pink|grey|gray|beige|brown|green|wash|weight|knit|layers?))",
    re.IGNORECASE,
)
_TIME_OF_DAY_RE = re.compile(
    r"\b(morning|afternoon|evening|night|sunset|sunrise|golden\s+hour|dusk|dawn|midday|noon)\b",
    re.IGNORECASE,
)
_TIME_OF_DAY_MAP = {
    "sunrise": "morning",
    "dawn": "morning",
    "midday": "afternoon",
    "noon": "afternoon",
    "sunset": "evening",
    "dusk": "evening",
    "golden hour": "evening",
}
_MOOD_RE = re.compile(r"\b(" + _alternation(MOOD_WORDS) + r")\b", re.IGNORECASE)
_VIBE_RE = re.compile(
    r"\b(?P<vibe>" + _ADJ_WORD + r"{1,3}?)(?:vibes?|atmosphere|ambiance|ambience|energy|feel)\b",
    re.IGNORECASE,
)
_SEASON_RE = re.compile(
    r"\b(christmas|holiday\s+season|holidays?|new\s+year'?s?(?:\s+eve)?|winter|summer|spring|autumn"
    r"|fall(?=\s+(?:foliage|season|leaves|day|afternoon|morning|evening|outfit|vibes?)))\b",
    re.IGNORECASE,
)

_ARCHITECTURE_RES = tuple(re.compile(r"\b(?:" + p + r")\b", re.IGNORECASE) for p in ARCHITECTURE_PATTERNS)
_DECOR_RES = tuple(re.compile(r"\b(?:" + p + r")", re.IGNORECASE) for p in DECOR_PATTERNS)
_OBJECT_PROP_RES = tuple(re.compile(r"\b(?:" + p + r")\b", re.IGNORECASE) for p in OBJECT_PROPS)
_BRAND_RES = tuple(
    (brand, re.compile(r"(?<!\w)" + re.escape(brand) + r"(?!\w)", re.IGNORECASE)) for brand in KNOWN_BRANDS
)
# Labels such as "The Row" whose leading article is part of the name.
_JOINER_BRANDS: tuple[str, ...] = tuple(
    brand for brand in KNOWN_BRANDS if brand.split(" ", 1)[0].lower() in ("the", "a", "an", "and")
)
_BARE_JOINERS = frozenset({"a", "an", "the", "and", "or", "with", "plus"})


# =========================
# Extraction passes
# =========================
def extract_outfit(text: str) -> tuple[str, list[str], list[str]]:
    """
    Captures the outfit clause that follows "wearing".

    The clause ends at a posture verb, "with", a location clause ("in a ..."),
    or the end of the sentence.

    Returns:
        ``(complete_phrase, items, brands)``. Items are the comma-separated
        pieces of the phrase, brands are the known labels found in it.
    """
    return _parse_outfit(_OUTFIT_RE.search(text))


def _parse_outfit(match: re.Match[str] | None) -> tuple[str, list[str], list[str]]:
    if not match:
        return "", [], []
    complete = squash_whitespace(match.group("outfit")).strip(" ,;")
    complete = re.sub(r"[,\s]+(?:and|or)$", "", complete, flags=re.IGNORECASE)

    items = dedupe(
        clean_fragment(piece, protected=_JOINER_BRANDS) for piece in re.split(r"[,;]", complete)
    )
    # A clause cut down to a bare article is no outfit at all.
    items = [item for item in items if item.lower() not in _BARE_JOINERS]
    if not items:
        return "", [], []

    found: list[tuple[int, str]] = []
    for brand, pattern in _BRAND_RES:
        brand_match = pattern.search(complete)
        if brand_match:
            found.append((brand_match.start(), brand))
    brands = dedupe(brand for _, brand in sorted(found))
    return complete, items, brands


def extract_posture(text: str) -> tuple[str, str]:
    """Returns ``(posture, action)``: the earliest posture word and its clause."""
    match = _POSTURE_RE.search(text)
    if not match:
        return "", ""
    posture = squash_whitespace(match.group("posture")).lower()
    rest = _CLAUSE_BREAK_RE.split(match.group("rest"), maxsplit=1)[0]
    action = squash_whitespace(match.group("posture") + rest).strip(" ,;")
    return posture, action


def extract_activity(text: str) -> str:
    match = _ACTIVITY_RE.search(text)
    if not match:
        return ""
    activity = _CLAUSE_BREAK_RE.split(match.group("activity"), maxsplit=1)[0]
    return squash_whitespace(activity).strip(" ,;")


def extract_location(text: str) -> tuple[str, str]:
    """
    Finds the first "in/at/on + article + descriptive noun phrase" location.

    Returns:
        ``(location, location_details)``; ``location`` is the adjective and noun
        phrase ("industrial loft"), ``location_details`` runs on to the next
        punctuation ("industrial loft with exposed brick walls").
    """
    match = _LOCATION_RE.search(text)
    if not match:
        return "", ""
    location = squash_whitespace(match.group("phrase"))
    tail = squash_whitespace(match.group("tail"))
    details = f"{location} {tail}".strip() if tail else location
    details = re.sub(r"\s+(?:and|or|with|while)$", "", details, flags=re.IGNORECASE)
    return location, details


def extract_furniture(text: str) -> list[str]:
    """Captures furniture and surface phrases such as "leather sofa"."""
    return dedupe(squash_whitespace(m.group("prop")) for m in _FURNITURE_RE.finditer(text))


def _find_all(patterns: tuple[re.Pattern[str], ...], text: str) -> list[str]:
    found: list[tuple[int, str]] = []
    for pattern in patterns:
        for m in pattern.finditer(text):
            found.append((m.start(), squash_whitespace(m.group(0))))
    return dedupe(value for _, value in sorted(found))


def extract_architecture(text: str) -> list[str]:
    return _find_all(_ARCHITECTURE_RES, text)


def extract_decor(text: str) -> list[str]:
    return _find_all(_DECOR_RES, text)


def extract_object_props(text: str) -> list[str]:
    return _find_all(_OBJECT_PROP_RES, text)


def extract_lighting(text: str) -> str:
    match = _LIGHTING_RE.search(text)
    return clean_fragment(match.group("lighting")) if match else ""


def extract_time_of_day(text: str) -> str:
    match = _TIME_OF_DAY_RE.search(text)
    if not match:
        return ""
    value = squash_whitespace(match.group(1)).lower()
    return _TIME_OF_DAY_MAP.get(value, value)


def extract_mood(text: str) -> str:
    match = _MOOD_RE.search(text)
    return match.group(1).lower() if match else ""


def extract_vibe(text: str) -> str:
    match = _VIBE_RE.search(text)
    return clean_fragment(match.group("vibe")).lower() if match else ""


def extract_season(text: str) -> str:
    match = _SEASON_RE.search(text)
    if not match:
        return ""
    value = squash_whitespace(match.group(1)).lower()
    if value.startswith(("christmas", "holiday")):
        return "christmas"
    if value.startswith("new year"):
        return "new year"
    if value == "fall":
        return "autumn"
    return value


# =========================
# Composition
# =========================
def _guarded(pass_name: str, func: Callable[..., T], default: T, *args) -> T:
    try:
        return func(*args)
    except Exception:
        logger.exception("Scene extraction pass failed; leaving field empty.", pass_name=pass_name)
        return default


def extract_scene(description: str | None) -> SceneElements:
    """
    Builds a fresh ``SceneElements`` from a concept description.

    Never raises. Fields whose pass finds nothing stay empty.
    """
    text = squash_whitespace(description) if isinstance(description, str) else ""
    scene = SceneElements()
    if not text:
        logger.debug("Empty description; returning empty scene.")
        return scene

    outfit_match = _guarded("outfit", _OUTFIT_RE.search, None, text)
    outfit_complete, outfit_items, outfit_brands = _guarded(
        "outfit", _parse_outfit, ("", [], []), outfit_match
    )
    scene.outfit_complete = outfit_complete
    scene.outfit_items = outfit_items
    scene.outfit_brands = outfit_brands

    # Garment words ("light blue", "velvet") must not leak into scene passes.
    if outfit_complete:
        start, end = outfit_match.span("outfit")
        scene_text = f"{text[:start]} {text[end:]}"
    else:
        scene_text = text

    scene.posture, scene.action = _guarded("posture", extract_posture, ("", ""), scene_text)
    scene.activity = _guarded("activity", extract_activity, "", scene_text)
    scene.location, scene.location_details = _guarded("location", extract_location, ("", ""), scene_text)
    furniture = _guarded("furniture", extract_furniture, [], scene_text)
    objects = _guarded("props", extract_object_props, [], scene_text)
    scene.props = dedupe([*furniture, *objects])
    scene.architecture = _guarded("architecture", extract_architecture, [], scene_text)
    scene.decor = _guarded("decor", extract_decor, [], scene_text)
    scene.lighting = _guarded("lighting", extract_lighting, "", scene_text)
    scene.time_of_day = _guarded("time_of_day", extract_time_of_day, "", scene_text)
    scene.mood = _guarded("mood", extract_mood, "", scene_text)
    scene.vibe = _guarded("vibe", extract_vibe, "", scene_text)
    scene.season = _guarded("season", extract_season, "", text)

    logger.debug(
        "Extracted scene elements",
        posture=scene.posture,
        location=scene.location,
        outfit_items=len(scene.outfit_items),
        outfit_brands=scene.outfit_brands,
        props=scene.props,
        decor=scene.decor,
        architecture=scene.architecture,
    )
    return scene
