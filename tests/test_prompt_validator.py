import pytest

from pro_mode_prompting.data.settings import settings
from pro_mode_prompting.dto.scene import SceneElements
from pro_mode_prompting.services import prompt_validator
from pro_mode_prompting.services.prompt_validator import (
    calculate_similarity,
    extract_section,
    find_duplicate_sentences,
    find_length_issues,
    find_missing_outfit_items,
    find_style_contradiction,
    find_truncation_issues,
    validate_prompt,
)

CLEAN_PROMPT = (
    "Outfit: Red sweater and white sneakers.\n\n"
    "Pose: Sitting on a leather sofa.\n\n"
    "Camera: Shot on iPhone 15 Pro in portrait mode."
)


@pytest.fixture
def no_length_bounds(monkeypatch):
    config = settings.prompt_engine
    monkeypatch.setattr(config, "min_prompt_words", 0)
    monkeypatch.setattr(config, "target_min_words", 0)
    monkeypatch.setattr(config, "max_prompt_words", 10_000)
    monkeypatch.setattr(config, "target_max_words", 10_000)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("", "", 0.0),
        ("   ", "the cat", 0.0),
        ("the cat sat", "the cat sat", 1.0),
        ("the cat sat", "the cat sat down", 0.75),
    ],
)
def test_similarity(first, second, expected):
    assert calculate_similarity(first, second) == pytest.approx(expected)


def test_duplicate_sentences_flagged():
    warnings = find_duplicate_sentences("Soft light fills the room. Soft light fills the room!")
    assert len(warnings) == 1


def test_similarity_threshold_is_strict():
    # 4 of 5 words shared is exactly 0.8, which is not above the threshold.
    assert find_duplicate_sentences("one two three four five. one two three four six.") == []


def test_empty_fragments_are_ignored():
    assert find_duplicate_sentences("...!!!???") == []


def test_contradiction_needs_both_vocabularies():
    assert find_style_contradiction("Shot on a Canon EOS R5 with an 85mm lens. iPhone look.")
    assert find_style_contradiction("Shot on a Canon EOS R5 with an 85mm lens.") == []
    assert find_style_contradiction("Shot on iPhone 15 Pro in portrait mode.") == []


def test_extract_section_stops_at_next_label():
    assert extract_section(CLEAN_PROMPT, "Outfit") == "Red sweater and white sneakers."
    assert extract_section(CLEAN_PROMPT, "Camera") == "Shot on iPhone 15 Pro in portrait mode."
    assert extract_section(CLEAN_PROMPT, "Mood") == ""


def test_outfit_item_must_appear_in_outfit_section():
    prompt = "Outfit: Red sweater.\n\nPose: Sitting in white sneakers."
    scene = SceneElements(outfit_items=["red sweater", "white sneakers"])
    warnings = find_missing_outfit_items(prompt, scene)
    assert warnings == ["Outfit item missing from Outfit section: 'white sneakers'"]


def test_no_outfit_items_means_nothing_to_check():
    assert find_missing_outfit_items("Outfit: Anything.", SceneElements()) == []
    assert find_missing_outfit_items("Outfit: Anything.", None) == []


def test_truncation_heuristics():
    warnings = find_truncation_issues("Outfit: cream wide-leg trous")
    assert any("'trous'" in w for w in warnings)
    assert any("ends abruptly" in w for w in warnings)
    assert any("connector" in w for w in find_truncation_issues("Setting: Loft with."))
    assert find_truncation_issues("Lighting: Soft light.") == []


def test_clean_prompt_is_valid(no_length_bounds):
    scene = SceneElements(outfit_items=["red sweater", "white sneakers"])
    report = validate_prompt(CLEAN_PROMPT, scene)
    assert report.valid
    assert report.warnings == []


def test_selfie_request_flags_observer_language():
    report = validate_prompt("Pose: Person taking a selfie in the mirror.", user_request="mirror selfie")
    assert "External observer language in selfie prompt" in report.warnings


def test_non_string_prompt_is_reported_not_raised():
    report = validate_prompt(None)  # type: ignore[arg-type]
    assert not report.valid


def test_failing_check_is_skipped(monkeypatch, no_length_bounds):
    def explode(*args):
        raise RuntimeError("boom")

    monkeypatch.setattr(prompt_validator, "find_style_contradiction", explode)
    report = validate_prompt(CLEAN_PROMPT)
    assert report.valid


def _words(count):
    return " ".join(["word"] * count)


@pytest.mark.parametrize(
    "count, expected",
    [
        (149, ["Too short: 149 words (minimum 150)"]),
        (150, ["Outside target: 150 words (target 160-380)"]),
        (160, []),
        (380, []),
        (381, ["Outside target: 381 words (target 160-380)"]),
        (400, ["Outside target: 400 words (target 160-380)"]),
        (401, ["Too long: 401 words (maximum 400)"]),
    ],
)
def test_length_bounds(count, expected):
    assert find_length_issues(_words(count)) == expected


def test_short_prompt_is_not_valid():
    report = validate_prompt(CLEAN_PROMPT)
    assert not report.valid
    assert report.warnings[0].startswith("Too short:")


def test_length_bounds_follow_settings(monkeypatch):
    monkeypatch.setattr(settings.prompt_engine, "min_prompt_words", 5)
    monkeypatch.setattr(settings.prompt_engine, "target_min_words", 5)
    assert find_length_issues(_words(5)) == []
    assert find_length_issues(_words(4)) == ["Too short: 4 words (minimum 5)"]
