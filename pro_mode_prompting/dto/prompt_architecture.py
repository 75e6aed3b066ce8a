# pro_mode_prompting/dto/prompt_architecture.py
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pro_mode_prompting.data.constants import PhotographyStyle
from pro_mode_prompting.dto.scene import SceneElements


# 1. Architecture parts.
#    Registry bundles are built from the same parts, so they are frozen.

class SubjectAndPose(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    stance: str
    body_language: str


class OutfitArchitecture(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    accessible_brands: tuple[str, ...] = Field(min_length=1, max_length=2)
    luxury_accent: str | None = None
    mixed_brand_rule: Literal["one-luxury-hero-max"] = "one-luxury-hero-max"


class MoodArchitecture(BaseModel):
    model_config = ConfigDict(frozen=True)

    keywords: tuple[str, ...]
    aesthetic: str
    avoid_terms: tuple[str, ...] = ()


class EnvironmentArchitecture(BaseModel):
    model_config = ConfigDict(frozen=True)

    setting: str
    color_story: str
    atmosphere: str
    visual_priority: Literal["subject-focused", "balanced"] = "subject-focused"


class CameraArchitecture(BaseModel):
    model_config = ConfigDict(frozen=True)

    format: Literal["vertical", "square"] = "vertical"
    lighting: str
    depth_of_field: str
    photography_style: PhotographyStyle = PhotographyStyle.AUTHENTIC


class CategoryDefaults(BaseModel):
    """Read-only defaults bundle for one content category."""
    model_config = ConfigDict(frozen=True)

    mood: MoodArchitecture
    environment: EnvironmentArchitecture
    camera: CameraArchitecture
    negative_instructions: tuple[str, ...] = ()
    subject_and_pose: SubjectAndPose | None = None


class PromptArchitecture(BaseModel):
    """The six-part target schema of a Pro Mode prompt."""
    model_config = ConfigDict(frozen=True)

    subject_and_pose: SubjectAndPose
    outfit: OutfitArchitecture
    mood: MoodArchitecture
    environment: EnvironmentArchitecture
    camera: CameraArchitecture
    negative_instructions: tuple[str, ...] = ()


# 2. Service results.

class BrandSelection(BaseModel):
    """One or two accessible foundation brands plus at most one luxury hero."""
    model_config = ConfigDict(frozen=True)

    accessible: tuple[str, ...]
    luxury: str | None = None

    @field_validator("accessible")
    @classmethod
    def _accessible_count(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = tuple(b.strip() for b in v if b and b.strip())
        if not 1 <= len(cleaned) <= 2:
            raise ValueError("accessible must hold one or two brand names.")
        return cleaned

    @field_validator("luxury")
    @classmethod
    def _single_luxury(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if not v or "," in v:
            raise ValueError("luxury must be a single brand name.")
        return v


class ProModePrompt(BaseModel):
    """The assembled prompt handed to the image model, plus bookkeeping."""
    full_prompt: str = Field(serialization_alias="fullPrompt")
    category: str
    photography_style: PhotographyStyle = Field(serialization_alias="photographyStyle")
    scene: SceneElements = Field(default_factory=SceneElements, exclude=True)
    architecture: PromptArchitecture | None = Field(default=None, exclude=True)


class ValidationReport(BaseModel):
    valid: bool
    warnings: list[str] = Field(default_factory=list)
