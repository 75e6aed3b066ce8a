import asyncio
import random

import pytest
from pydantic import ValidationError

from pro_mode_prompting.data.constants import PhotographyStyle, SectionLabel
from pro_mode_prompting.data.settings import settings
from pro_mode_prompting.dto.concept import ConceptComponents
from pro_mode_prompting.services import section_builders
from pro_mode_prompting.services.prompt_assembler import (
    build_pro_mode_prompt,
    build_pro_mode_prompts,
    resolve_category,
)
from pro_mode_prompting.services.prompt_validator import (
    EDITORIAL_CAMERA_RE,
    extract_section,
    validate_prompt,
)
from pro_mode_prompting.services.prompting.styles import (
    INTRO_AUTHENTIC,
    INTRO_EDITORIAL_NO_REFERENCE,
)


def _section(prompt, label: SectionLabel) -> str:
    return extract_section(prompt.full_prompt, label)


def test_scenario_a_editorial_christmas(scenario_a_concept):
    prompt = build_pro_mode_prompt(
        "SEASONAL_CHRISTMAS", scenario_a_concept, item_index=0, rng=random.Random(1)
    )
    assert prompt.category == "SEASONAL_CHRISTMAS"
    assert prompt.photography_style is PhotographyStyle.EDITORIAL

    outfit = _section(prompt, SectionLabel.OUTFIT)
    for word in ("Ganni", "trousers", "sneakers"):
        assert word in outfit
    setting = _section(prompt, SectionLabel.SETTING)
    assert "exposed brick" in setting
    assert "Christmas tree" in setting
    assert "Canon EOS R5" in _section(prompt, SectionLabel.CAMERA)
    assert "festive" in _section(prompt, SectionLabel.MOOD)

    report = validate_prompt(prompt.full_prompt, prompt.scene)
    assert not any("contradiction" in w for w in report.warnings)
    assert not any("Outfit item missing" in w for w in report.warnings)


def test_scenario_b_authentic_for_later_batch_items(scenario_a_concept):
    prompt = build_pro_mode_prompt(
        "SEASONAL_CHRISTMAS", scenario_a_concept, item_index=4, rng=random.Random(1)
    )
    camera = _section(prompt, SectionLabel.CAMERA)
    assert "iPhone 15 Pro" in camera
    assert "portrait mode" in camera
    assert EDITORIAL_CAMERA_RE.search(prompt.full_prompt) is None


def test_scenario_c_outfit_fallback(scenario_c_concept):
    prompt = build_pro_mode_prompt(None, scenario_c_concept, rng=random.Random(1))
    assert prompt.scene.outfit_items == []
    assert _section(prompt, SectionLabel.OUTFIT).startswith("Effortless, wearable staples from ")
    report = validate_prompt(prompt.full_prompt, prompt.scene)
    assert not any("Outfit item missing" in w for w in report.warnings)


def test_sections_follow_fixed_order(scenario_a_concept):
    text = build_pro_mode_prompt(None, scenario_a_concept, rng=random.Random(1)).full_prompt
    positions = [text.index(f"\n\n{label.value}: ") for label in SectionLabel]
    assert positions == sorted(positions)


def test_intro_depends_on_style_and_reference_images(scenario_a_concept):
    editorial = build_pro_mode_prompt(None, scenario_a_concept, item_index=0, rng=random.Random(1))
    assert editorial.full_prompt.startswith(INTRO_EDITORIAL_NO_REFERENCE + "\n\n")
    authentic = build_pro_mode_prompt(
        None, scenario_a_concept, reference_images=["https://example.com/me.jpg"], rng=random.Random(1)
    )
    assert authentic.full_prompt.startswith(INTRO_AUTHENTIC + "\n\n")


def test_index_wins_over_explicit_style(scenario_a_concept):
    by_index = build_pro_mode_prompt(
        None, scenario_a_concept, user_photography_style="authentic", item_index=1, rng=random.Random(1)
    )
    assert by_index.photography_style is PhotographyStyle.EDITORIAL
    explicit = build_pro_mode_prompt(
        None, scenario_a_concept, user_photography_style="editorial", rng=random.Random(1)
    )
    assert explicit.photography_style is PhotographyStyle.EDITORIAL
    unknown = build_pro_mode_prompt(
        None, scenario_a_concept, user_photography_style="polaroid", rng=random.Random(1)
    )
    assert unknown.photography_style is PhotographyStyle.AUTHENTIC


def test_same_seed_same_prompt(scenario_a_concept):
    first = build_pro_mode_prompt(None, scenario_a_concept, user_request="make it elevated", rng=random.Random(5))
    second = build_pro_mode_prompt(None, scenario_a_concept, user_request="make it elevated", rng=random.Random(5))
    assert first.full_prompt == second.full_prompt


@pytest.mark.parametrize(
    "category, concept_category, expected",
    [
        ("luxury", "BEAUTY", "LUXURY"),
        (None, "seasonal christmas", "SEASONAL_CHRISTMAS"),
        (None, None, "LIFESTYLE"),
        ("", "", "LIFESTYLE"),
    ],
)
def test_category_resolution(category, concept_category, expected):
    assert resolve_category(category, ConceptComponents(category=concept_category)) == expected


def test_accepts_camelcase_mapping():
    prompt = build_pro_mode_prompt(
        None,
        {"title": "Beach day", "description": "walking on the beach at sunset", "category": "travel"},
        rng=random.Random(1),
    )
    assert prompt.category == "TRAVEL"
    assert _section(prompt, SectionLabel.POSE).startswith("Walking")


def test_malformed_mapping_raises():
    with pytest.raises(ValidationError):
        build_pro_mode_prompt(None, {"description": ["not", "text"]})


def test_failing_builder_drops_only_its_section(monkeypatch, scenario_a_concept):
    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(section_builders, "build_mood_section", explode)
    text = build_pro_mode_prompt(None, scenario_a_concept, rng=random.Random(1)).full_prompt
    assert "Mood:" not in text
    assert "Outfit:" in text and "Camera:" in text


def test_avoid_section_can_be_disabled(monkeypatch, scenario_a_concept):
    monkeypatch.setattr(settings.prompt_engine, "include_negative_instructions", False)
    text = build_pro_mode_prompt(None, scenario_a_concept, rng=random.Random(1)).full_prompt
    assert "Avoid:" not in text


def test_serialised_form_hides_bookkeeping(scenario_a_concept):
    dumped = build_pro_mode_prompt(None, scenario_a_concept, rng=random.Random(1)).model_dump(
        by_alias=True, mode="json"
    )
    assert set(dumped) == {"fullPrompt", "category", "photographyStyle"}


def test_batch_splits_editorial_and_authentic(scenario_a_concept):
    prompts = asyncio.run(build_pro_mode_prompts([scenario_a_concept] * 5, rng=random.Random(1)))
    assert [p.photography_style for p in prompts] == [
        PhotographyStyle.EDITORIAL,
        PhotographyStyle.EDITORIAL,
        PhotographyStyle.EDITORIAL,
        PhotographyStyle.AUTHENTIC,
        PhotographyStyle.AUTHENTIC,
    ]


@pytest.mark.parametrize(
    "description, expected_items",
    [
        (
            "wearing a black blazer and gold hoops with a leather tote, walking through the city.",
            ["black blazer and gold hoops"],
        ),
        ("wearing a camel coat, wide-leg jeans in a hotel lobby.", ["camel coat", "wide-leg jeans"]),
        (
            "wearing a cream knit sweater, black leggings, sitting by the fire.",
            ["cream knit sweater", "black leggings"],
        ),
        ("Slow morning, wearing silk pajamas and a robe. Reading in bed.", ["silk pajamas and a robe"]),
        ("wearing a linen shirt, white shorts", ["linen shirt", "white shorts"]),
        ("wearing a standing-collar wool coat, sitting in a cafe.", ["standing-collar wool coat"]),
        ("wearing red in a cozy loft with textured walls and a layered rug, warm light", ["red"]),
        ("wearing The Row trousers, white sneakers in a loft", ["The Row trousers", "white sneakers"]),
    ],
)
def test_every_outfit_item_reaches_the_outfit_section(description, expected_items):
    prompt = build_pro_mode_prompt(None, {"description": description}, item_index=5)
    assert prompt.scene.outfit_items == expected_items
    outfit = _section(prompt, SectionLabel.OUTFIT).lower()
    for item in prompt.scene.outfit_items:
        assert item.lower() in outfit
    warnings = validate_prompt(prompt.full_prompt, prompt.scene).warnings
    assert not any(w.startswith("Outfit item missing") for w in warnings)


def test_pose_keeps_words_shared_with_the_outfit():
    concept = {"description": "wearing a standing-collar wool coat, sitting in a cafe."}
    prompt = build_pro_mode_prompt(None, concept, item_index=5)
    assert _section(prompt, SectionLabel.OUTFIT) == "A standing-collar wool coat."
    assert _section(prompt, SectionLabel.POSE).startswith("Sitting")
    assert "c fe" not in prompt.full_prompt
