# pro_mode_prompting/dto/__init__.py
from .concept import ConceptComponents, OutfitHints
from .prompt_architecture import (
    BrandSelection,
    CameraArchitecture,
    CategoryDefaults,
    EnvironmentArchitecture,
    MoodArchitecture,
    OutfitArchitecture,
    PromptArchitecture,
    ProModePrompt,
    SubjectAndPose,
    ValidationReport,
)
from .scene import SceneElements

__all__ = [
    "BrandSelection",
    "CameraArchitecture",
    "CategoryDefaults",
    "ConceptComponents",
    "EnvironmentArchitecture",
    "MoodArchitecture",
    "OutfitArchitecture",
    "OutfitHints",
    "PromptArchitecture",
    "ProModePrompt",
    "SceneElements",
    "SubjectAndPose",
    "ValidationReport",
]
