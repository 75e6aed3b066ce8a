# pro_mode_prompting/data/settings.py
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class PromptEngineConfig(BaseModel):
    """Tunables for prompt composition and the advisory validator."""
    default_category: str = "LIFESTYLE"
    default_photography_style: str = "authentic"
    # First N items of a batch are shot editorial, the remainder authentic.
    editorial_batch_size: int = Field(default=3, ge=0)
    duplicate_similarity_threshold: float = Field(default=0.8, gt=0.0, le=1.0)
    include_negative_instructions: bool = True
    # Word-count bounds for an assembled prompt; the target band only warns.
    min_prompt_words: int = Field(default=150, ge=0)
    max_prompt_words: int = Field(default=400, ge=1)
    target_min_words: int = Field(default=160, ge=0)
    target_max_words: int = Field(default=380, ge=1)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    prompt_engine: PromptEngineConfig = Field(default_factory=PromptEngineConfig)

    logging_level: int = 20


settings = Settings()
