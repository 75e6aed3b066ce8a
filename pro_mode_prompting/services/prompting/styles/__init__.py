# pro_mode_prompting/services/prompting/styles/__init__.py
from .authentic import CAMERA_AUTHENTIC, INTRO_AUTHENTIC, INTRO_AUTHENTIC_NO_REFERENCE
from .editorial import CAMERA_EDITORIAL, INTRO_EDITORIAL, INTRO_EDITORIAL_NO_REFERENCE

__all__ = [
    "CAMERA_AUTHENTIC",
    "CAMERA_EDITORIAL",
    "INTRO_AUTHENTIC",
    "INTRO_AUTHENTIC_NO_REFERENCE",
    "INTRO_EDITORIAL",
    "INTRO_EDITORIAL_NO_REFERENCE",
]
