import pytest

from pro_mode_prompting.dto.scene import SceneElements
from pro_mode_prompting.services import scene_extractor
from pro_mode_prompting.services.scene_extractor import (
    extract_outfit,
    extract_posture,
    extract_scene,
    extract_season,
    extract_time_of_day,
)
from tests.conftest import SCENARIO_A_DESCRIPTION, SCENARIO_C_DESCRIPTION


@pytest.fixture(scope="module")
def scene_a() -> SceneElements:
    return extract_scene(SCENARIO_A_DESCRIPTION)


def test_outfit_items_and_brands(scene_a):
    assert scene_a.outfit_items == ["red Ganni sweater", "cream wide-leg trousers", "white sneakers"]
    assert scene_a.outfit_brands == ["Ganni"]
    assert "white sneakers" in scene_a.outfit_complete


def test_posture_and_action_stop_before_location(scene_a):
    assert scene_a.posture == "sitting"
    assert scene_a.action == "sitting on a leather sofa"


def test_location_and_details(scene_a):
    assert scene_a.location == "industrial loft"
    assert scene_a.location_details == "industrial loft with exposed brick walls"


def test_props_architecture_and_decor(scene_a):
    assert scene_a.props == ["leather sofa"]
    assert scene_a.architecture == ["exposed brick walls"]
    assert scene_a.decor == ["minimalist Christmas tree", "string lights"]


def test_lighting_time_and_season(scene_a):
    assert scene_a.lighting == "warm contrast lighting"
    assert scene_a.time_of_day == "morning"
    assert scene_a.season == "christmas"


def test_description_without_outfit_clause():
    scene = extract_scene(SCENARIO_C_DESCRIPTION)
    assert scene.outfit_items == []
    assert not scene.has_outfit
    assert scene.location == "sunlit coffee shop"
    assert scene.activity == "sipping an iced latte by the window"
    assert scene.props == ["iced latte"]
    assert scene.lighting == "soft natural light"
    assert scene.mood == "relaxed"
    assert scene.time_of_day == "afternoon"


@pytest.mark.parametrize("description", ["", None, "   ", 42])
def test_empty_or_malformed_input_gives_empty_scene(description):
    assert extract_scene(description) == SceneElements()


def test_truncated_outfit_is_kept_as_written():
    complete, items, brands = extract_outfit("wearing a cream cashmere sweat")
    assert complete == "a cream cashmere sweat"
    assert items == ["cream cashmere sweat"]
    assert brands == []


def test_short_outfit_capture_leaves_other_words_intact():
    scene = extract_scene("wearing red in a cozy loft with textured walls and a layered rug, warm light")
    assert scene.outfit_items == ["red"]
    assert scene.location == "cozy loft"
    assert scene.location_details == "cozy loft with textured walls and a layered rug"


def test_hyphenated_garment_is_not_read_as_a_posture():
    description = "wearing a standing-collar wool coat, sitting in a cafe."
    assert extract_outfit(description) == ("a standing-collar wool coat", ["standing-collar wool coat"], [])
    scene = extract_scene(description)
    assert scene.posture == "sitting"
    assert scene.action == "sitting"
    assert scene.location == "cafe"


def test_posture_word_inside_compound_is_ignored():
    assert extract_posture("a standing-collar coat, then sitting by the fire") == (
        "sitting",
        "sitting by the fire",
    )


def test_bare_article_is_not_an_outfit():
    assert extract_outfit("wearing a, sitting on the floor") == ("", [], [])


def test_brand_with_leading_article_keeps_its_name():
    complete, items, brands = extract_outfit("wearing a The Row bag, white sneakers in a loft")
    assert items == ["The Row bag", "white sneakers"]
    assert brands == ["The Row"]


def test_posture_is_the_earliest_in_text():
    assert extract_posture("standing by the window, later sitting down") == (
        "standing",
        "standing by the window",
    )


@pytest.mark.parametrize(
    "text, expected",
    [
        ("fall foliage walk", "autumn"),
        ("New Year's Eve party", "new year"),
        ("holiday season at home", "christmas"),
        ("falling snow outside", ""),
    ],
)
def test_season_normalisation(text, expected):
    assert extract_season(text) == expected


def test_time_of_day_is_normalised():
    assert extract_time_of_day("shot at golden hour") == "evening"
    assert extract_time_of_day("sunrise run") == "morning"


def test_failing_pass_leaves_field_empty(monkeypatch):
    def explode(_text):
        raise RuntimeError("boom")

    monkeypatch.setattr(scene_extractor, "extract_lighting", explode)
    scene = extract_scene(SCENARIO_A_DESCRIPTION)
    assert scene.lighting == ""
    assert scene.location == "industrial loft"
