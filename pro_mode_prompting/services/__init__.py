# pro_mode_prompting/services/__init__.py
from .prompt_assembler import build_pro_mode_prompt, build_pro_mode_prompts
from .prompt_validator import validate_prompt
from .scene_extractor import extract_scene

__all__ = [
    "build_pro_mode_prompt",
    "build_pro_mode_prompts",
    "extract_scene",
    "validate_prompt",
]
