# skin_retoucher/data/settings.py
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from skin_retoucher.data.constants import ImageSize


class PromptingConfig(BaseModel):
    """Configuration for prompt composition."""
    # Raise UnknownStyleError instead of falling back to the default style.
    strict_style_lookup: bool = False
    # Versioned JSON asset to load instead of the compiled-in templates.
    library_path: Path | None = None


class GeminiConfig(BaseModel):
    api_key: SecretStr | None = None
    model: str = "gemini-3-pro-image-preview"
    image_size: ImageSize = ImageSize.UHD_4K


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    prompting: PromptingConfig = Field(default_factory=PromptingConfig)
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)

    logging_level: int = 20


settings = Settings()
