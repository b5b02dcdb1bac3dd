"""
Configuration settings for the validation pipeline.
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # Options: "text", "json"

    # Preset used by get_pipeline() when no preset is requested explicitly
    # Options: "strict", "lenient", "default"
    VALIDATION_PRESET: str = "default"

    # Deployment Context -> Preset Mapping
    # Public-facing entry points get the strict preset, internal tooling the lenient one
    CONTEXT_PRESET_MAPPING: dict = {
        "public": "strict",
        "internal": "lenient",
        # Default fallback
        "default": "default"
    }

    # Rejection Logging
    LOG_REJECTED_INPUT: bool = False  # Include a truncated copy of rejected text in debug logs
    REJECTED_INPUT_LOG_CHARS: int = 80  # Max characters of rejected text to log

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
