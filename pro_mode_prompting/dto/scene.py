# pro_mode_prompting/dto/scene.py
from pydantic import BaseModel, Field


class SceneElements(BaseModel):
    """
    Structured scene data pulled out of a concept description.

    Rebuilt for every prompt and never persisted. Every field defaults to
    empty: a missing value means the extractor found nothing, not an error.
    """
    action: str = ""
    posture: str = ""
    activity: str = ""
    location: str = ""
    location_details: str = ""
    outfit_complete: str = ""
    outfit_items: list[str] = Field(default_factory=list)
    outfit_brands: list[str] = Field(default_factory=list)
    props: list[str] = Field(default_factory=list)
    decor: list[str] = Field(default_factory=list)
    architecture: list[str] = Field(default_factory=list)
    mood: str = ""
    lighting: str = ""
    vibe: str = ""
    season: str = ""
    time_of_day: str = ""

    @property
    def has_outfit(self) -> bool:
        return bool(self.outfit_complete or self.outfit_items)
