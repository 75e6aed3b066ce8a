# pro_mode_prompting/services/prompt_validator.py
"""
Advisory checks on an assembled Pro Mode prompt.

The validator only reports. It never edits the prompt and never raises;
a check that fails unexpectedly is logged and contributes no warning.
Deciding whether to regenerate is left to the caller.
"""
import itertools
import re
from typing import Callable

import structlog

from pro_mode_prompting.data.constants import SectionLabel
from pro_mode_prompting.data.settings import settings
from pro_mode_prompting.dto.prompt_architecture import ValidationReport
from pro_mode_prompting.dto.scene import SceneElements

logger = structlog.get_logger(__name__)

# Mid-word cut-offs seen in upstream concept text.
TRUNCATED_FRAGMENTS: tuple[str, ...] = (
    "ligh",
    "trous",
    "sneake",
    "backgrou",
    "atmosp",
    "aesthe",
    "photogra",
    "sophistic",
    "througho",
    "agains",
    "Christm",
)
_TRUNCATED_RE = re.compile(r"\b(" + "|".join(TRUNCATED_FRAGMENTS) + r")\b", re.IGNORECASE)
_DANGLING_CONNECTOR_RE = re.compile(r"\b(and|or|with|of|the|a|an|in|on|at|to|from)\s*\.", re.IGNORECASE)

EDITORIAL_CAMERA_RE = re.compile(
    r"\b(Canon|Nikon|Sony A\d|Hasselblad|Leica|Fujifilm|DSLR|mirrorless|medium format|\d+mm\b[^.]*\blens)",
    re.IGNORECASE,
)
PHONE_CAMERA_RE = re.compile(r"\b(iPhone|portrait mode)\b", re.IGNORECASE)

# Phrasing that describes someone else holding the camera; wrong for a selfie.
EXTERNAL_OBSERVER_RES: tuple[re.Pattern[str], ...] = (
    re.compile(r"natural hand positioning holding phone", re.IGNORECASE),
    re.compile(r"slight tilt for flattering angle", re.IGNORECASE),
    re.compile(r"person taking (?:a )?selfie", re.IGNORECASE),
)

_SECTION_LABELS_ALT = "|".join(re.escape(label.value) for label in SectionLabel)
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]")
_WORD_RE = re.compile(r"[\w'/-]+")


def _words(sentence: str) -> set[str]:
    return set(_WORD_RE.findall(sentence.lower()))


def calculate_similarity(first: str, second: str) -> float:
    """Share of common words relative to the longer sentence; 0.0 when either has no words."""
    words_a, words_b = _words(first), _words(second)
    if not words_a or not words_b:
        return 0.0
    return len(words_a & words_b) / max(len(words_a), len(words_b))


def find_length_issues(prompt: str) -> list[str]:
    """Flags prompts outside the configured word-count bounds, then those outside the target band."""
    config = settings.prompt_engine
    count = len(prompt.split())
    if count < config.min_prompt_words:
        return [f"Too short: {count} words (minimum {config.min_prompt_words})"]
    if count > config.max_prompt_words:
        return [f"Too long: {count} words (maximum {config.max_prompt_words})"]
    if count < config.target_min_words or count > config.target_max_words:
        return [f"Outside target: {count} words (target {config.target_min_words}-{config.target_max_words})"]
    return []


def find_truncation_issues(prompt: str) -> list[str]:
    warnings = [
        f"Possible truncated word: '{match.group(1)}'"
        for match in _TRUNCATED_RE.finditer(prompt)
    ]
    warnings.extend(
        f"Sentence ends on a connector: '{match.group(1)}.'"
        for match in _DANGLING_CONNECTOR_RE.finditer(prompt)
    )
    stripped = prompt.rstrip()
    if stripped and re.search(r"\w$", stripped):
        warnings.append(f"Prompt ends abruptly: '...{stripped[-20:]}'")
    return warnings


def find_duplicate_sentences(prompt: str, threshold: float | None = None) -> list[str]:
    threshold = settings.prompt_engine.duplicate_similarity_threshold if threshold is None else threshold
    sentences = [s.strip() for s in _SENTENCE_SPLIT_RE.split(prompt) if s.strip()]
    warnings = []
    for first, second in itertools.combinations(sentences, 2):
        similarity = calculate_similarity(first, second)
        if similarity > threshold:
            warnings.append(f"Near-duplicate sentences ({similarity:.2f}): '{first[:40]}' / '{second[:40]}'")
    return warnings


def find_style_contradiction(prompt: str) -> list[str]:
    if EDITORIAL_CAMERA_RE.search(prompt) and PHONE_CAMERA_RE.search(prompt):
        return ["Camera contradiction: both professional camera and phone portrait-mode terms present"]
    return []


def extract_section(prompt: str, label: SectionLabel | str) -> str:
    """Text between ``"Label:"`` and the next known section label, or the end of the prompt."""
    label_value = label.value if isinstance(label, SectionLabel) else label
    match = re.search(
        rf"\b{re.escape(label_value)}:\s*(.*?)(?=\b(?:{_SECTION_LABELS_ALT}):|\Z)",
        prompt,
        re.DOTALL,
    )
    return match.group(1).strip() if match else ""


def find_missing_outfit_items(prompt: str, scene: SceneElements | None) -> list[str]:
    if scene is None or not scene.outfit_items:
        return []
    outfit_text = extract_section(prompt, SectionLabel.OUTFIT).lower()
    return [
        f"Outfit item missing from Outfit section: '{item}'"
        for item in scene.outfit_items
        if item.lower() not in outfit_text
    ]


def find_external_observer_language(prompt: str, user_request: str | None) -> list[str]:
    if not user_request or "selfie" not in user_request.lower():
        return []
    if any(pattern.search(prompt) for pattern in EXTERNAL_OBSERVER_RES):
        return ["External observer language in selfie prompt"]
    return []


def _run_check(name: str, check: Callable[..., list[str]], *args) -> list[str]:
    try:
        return check(*args)
    except Exception:
        logger.exception("Validator check failed; skipping.", check=name)
        return []


def validate_prompt(
    prompt: str,
    scene: SceneElements | None = None,
    user_request: str | None = None,
) -> ValidationReport:
    """
    Runs every advisory check and collects their warnings.

    ``valid`` is True when no check produced a warning.
    """
    if not isinstance(prompt, str):
        logger.warning("Validator received a non-string prompt.", prompt_type=type(prompt).__name__)
        return ValidationReport(valid=False, warnings=["Prompt is not a string"])

    warnings = [
        *_run_check("length", find_length_issues, prompt),
        *_run_check("truncation", find_truncation_issues, prompt),
        *_run_check("duplicates", find_duplicate_sentences, prompt),
        *_run_check("contradiction", find_style_contradiction, prompt),
        *_run_check("outfit", find_missing_outfit_items, prompt, scene),
        *_run_check("observer", find_external_observer_language, prompt, user_request),
    ]
    if warnings:
        logger.info("Prompt validation produced warnings", count=len(warnings), warnings=warnings)
    return ValidationReport(valid=not warnings, warnings=warnings)
