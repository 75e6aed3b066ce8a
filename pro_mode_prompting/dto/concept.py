# pro_mode_prompting/dto/concept.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OutfitHints(BaseModel):
    """Structured outfit pieces an upstream generator may attach to a concept."""
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    top: str | None = None
    bottom: str | None = None
    outerwear: str | None = None
    accessories: list[str] = Field(default_factory=list)
    shoes: str | None = None

    def pieces(self) -> list[str]:
        """Returns the non-empty pieces in head-to-toe order."""
        parts = [self.top, self.bottom, self.outerwear, *self.accessories, self.shoes]
        return [p.strip() for p in parts if p and p.strip()]


class ConceptComponents(BaseModel):
    """
    A content idea produced by the upstream concept generator.

    Only ``description`` is parsed; the remaining fields are optional hints
    consulted when extraction from the description finds nothing. Field names
    are accepted in camelCase as well, since the upstream payload is JSON.
    """
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    description: str = ""
    category: str | None = None
    aesthetic: str | None = None
    outfit: OutfitHints | None = None
    pose: str | None = None
    lighting: str | None = None
    setting: str | None = None
    mood: str | None = None
    brand_references: list[str] = Field(default_factory=list)
