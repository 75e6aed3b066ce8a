import pytest

from pro_mode_prompting.utils.text import (
    clean_fragment,
    dedupe,
    join_natural,
    labelled,
    strip_phrase,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (" and white sneakers ", "white sneakers"),
        ("a red sweater,", "red sweater"),
        ("with the gold hoops", "gold hoops"),
    ],
)
def test_clean_fragment(raw, expected):
    assert clean_fragment(raw) == expected


def test_clean_fragment_keeps_protected_names():
    assert clean_fragment("the Row bag", protected=("The Row",)) == "the Row bag"
    assert clean_fragment("and The Ordinary serum", protected=("The Ordinary",)) == "The Ordinary serum"
    assert clean_fragment("the rower jacket", protected=("The Row",)) == "rower jacket"


def test_dedupe_keeps_first_spelling_and_order():
    assert dedupe(["Cozy", "warm", "cozy", "", "Warm "]) == ["Cozy", "warm"]


@pytest.mark.parametrize(
    "text, phrase, expected",
    [
        ("standing in the hotel lobby", "hotel lobby", "standing"),
        ("walking on the beach at sunset", "beach", "walking at sunset"),
        ("posing at Levi's (flagship), smiling", "Levi's (flagship)", "posing, smiling"),
        ("sitting on a leather sofa", "industrial loft", "sitting on a leather sofa"),
    ],
)
def test_strip_phrase(text, phrase, expected):
    assert strip_phrase(text, phrase) == expected


def test_join_natural():
    assert join_natural(["a"]) == "a"
    assert join_natural(["a", "b", "c"]) == "a, b and c"
    assert join_natural([]) == ""


def test_labelled_capitalises_and_terminates():
    assert labelled("Pose", "sitting on a sofa,") == "Pose: Sitting on a sofa."
    assert labelled("Mood", "Captures joy!") == "Mood: Captures joy!"
