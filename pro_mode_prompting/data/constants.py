# pro_mode_prompting/data/constants.py
from enum import Enum


class Category(str, Enum):
    """Content categories with a defaults bundle in the registry."""
    WELLNESS = "WELLNESS"
    LUXURY = "LUXURY"
    LIFESTYLE = "LIFESTYLE"
    FASHION = "FASHION"
    TRAVEL = "TRAVEL"
    BEAUTY = "BEAUTY"
    SEASONAL_CHRISTMAS = "SEASONAL_CHRISTMAS"
    SELFIE = "SELFIE"


class Theme(str, Enum):
    """Themes produced by the theme detector. LIFESTYLE is the catch-all."""
    CHRISTMAS = "christmas"
    BEACH = "beach"
    WORKOUT = "workout"
    LUXURY = "luxury"
    TRAVEL = "travel"
    CAFE = "cafe"
    SELFIE = "selfie"
    CASUAL = "casual"
    LIFESTYLE = "lifestyle"


class PhotographyStyle(str, Enum):
    EDITORIAL = "editorial"  # professional camera body and lens
    AUTHENTIC = "authentic"  # phone camera, influencer framing


class SectionLabel(str, Enum):
    """Labels of the paragraphs in an assembled prompt, in output order."""
    OUTFIT = "Outfit"
    POSE = "Pose"
    SETTING = "Setting"
    LIGHTING = "Lighting"
    CAMERA = "Camera"
    MOOD = "Mood"
    AESTHETIC = "Aesthetic"
    AVOID = "Avoid"
