# pro_mode_prompting/utils/text.py
import re
from typing import Iterable

_WS_RE = re.compile(r"\s+")
_LEADING_JOINERS_RE = re.compile(r"^(?:and|or|plus|with|also|a|an|the)\s+", re.IGNORECASE)
_DANGLING_RE = re.compile(
    r"\b(?:in|at|on|inside|within|near|by|of|the|a|an|and|with)\s*(?=[,.;]|$)", re.IGNORECASE
)
# Optional "in the" / "at a" in front of a removed phrase.
_LEAD_IN_RE = r"(?:\b(?:in|at|on|inside|within|near|by)\s+(?:(?:a|an|the|her|his|their|my)\s+)?)?"


def squash_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def clean_fragment(text: str, protected: Iterable[str] = ()) -> str:
    """
    Trims whitespace, stray punctuation and leading joiners ("and", "a") from a fragment.

    A fragment that starts with one of ``protected`` (brand names such as
    "The Row") keeps its leading word.
    """
    text = squash_whitespace(text).strip(" ,;:-")
    protected = tuple(protected)
    previous = None
    while previous != text:
        if _starts_with_any(text, protected):
            break
        previous = text
        text = _LEADING_JOINERS_RE.sub("", text).strip(" ,;:-")
    return text


def _starts_with_any(text: str, prefixes: tuple[str, ...]) -> bool:
    lowered = text.lower()
    for prefix in prefixes:
        if lowered.startswith(prefix.lower()) and not lowered[len(prefix):len(prefix) + 1].isalnum():
            return True
    return False


def dedupe(items: Iterable[str]) -> list[str]:
    """Case-insensitive de-duplication that keeps the first spelling and the order."""
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        if not item:
            continue
        key = item.strip().lower()
        if key and key not in seen:
            seen.add(key)
            result.append(item.strip())
    return result


def contains_ci(haystack: str, needle: str) -> bool:
    return bool(needle) and needle.lower() in haystack.lower()


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:] if text else text


def ensure_terminal_punctuation(text: str) -> str:
    text = text.rstrip(" ,;:")
    if text and text[-1] not in ".!?":
        text += "."
    return text


def strip_phrase(text: str, phrase: str) -> str:
    """
    Removes every case-insensitive occurrence of ``phrase`` from ``text``,
    together with a leading preposition and article ("in the hotel lobby").

    The phrase is escaped before use, so a location such as "Levi's (flagship)"
    is removed literally. Prepositions left dangling by the removal go too.
    """
    if not phrase or not text:
        return text
    pattern = _LEAD_IN_RE + re.escape(phrase)
    stripped = re.sub(pattern, "", text, flags=re.IGNORECASE)
    previous = None
    while previous != stripped:
        previous = stripped
        stripped = _DANGLING_RE.sub("", stripped).rstrip()
    stripped = re.sub(r"\s+([,.;])", r"\1", stripped)
    stripped = re.sub(r",\s*,", ",", stripped)
    return squash_whitespace(stripped).strip(" ,;")


def join_natural(items: list[str]) -> str:
    """Joins ["a", "b", "c"] as "a, b and c"."""
    items = [i for i in items if i]
    if len(items) <= 1:
        return "".join(items)
    return f"{', '.join(items[:-1])} and {items[-1]}"


def labelled(label: str, body: str) -> str:
    """Formats one prompt paragraph as ``"Label: Body."``."""
    return f"{label}: {ensure_terminal_punctuation(capitalize_first(body.strip()))}"
