"""Configuration management for ReviewHub."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Lexicon
    lexicon_file: str = Field("", description="Optional YAML file overriding the built-in lexicon")

    # Analysis settings
    max_workers: int = Field(1, description="Threads used to analyze products in parallel")
    demo_mode_fallback: bool = Field(True, description="Use the demo dataset when no input is given")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
