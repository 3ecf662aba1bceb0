"""Engine configuration loaded from .env and defaults."""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SMART_TAGS_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_tags: int = 8
    confidence_threshold: float = 0.3
    display_threshold: float = 0.6
    max_suggestions: int = 6
    max_tag_length: int = 20
    keyword_limit: int = 10
    similarity_threshold: float = 0.3
    similar_tag_limit: int = 5
    max_analysis_length: int = 5000
    log_level: str = "INFO"
    log_path: Optional[Path] = None


def get_settings() -> Settings:
    return Settings()
