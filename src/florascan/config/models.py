"""Configuration models for FloraScan.

This module contains all configuration-related Pydantic models used throughout the application.
"""

from pydantic import BaseModel, Field, field_validator

PLACEHOLDER_IMAGE_URL = (
    "https://images.unsplash.com/photo-1416879595882-3373a0480b5b"
    "?w=400&h=300&fit=crop&crop=center"
)


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "INFO"
    json_logs: bool | None = None  # None = auto-detect based on environment
    include_caller: bool = False  # Include file:line info (useful for debugging)
    extra_fields: dict[str, str] = Field(default_factory=lambda: {"service": "florascan"})


class IdentificationConfig(BaseModel):
    """Plant.id identification provider settings."""

    api_url: str = "https://api.plant.id/v2/identify"
    api_key: str = ""
    timeout: float = 30.0  # Seconds; identification uploads full photos

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Reject non-positive timeouts."""
        if v <= 0:
            raise ValueError("Identification timeout must be positive")
        return v


class EnrichmentConfig(BaseModel):
    """External image catalog settings."""

    timeout: float = 10.0  # Per-request timeout in seconds
    max_diverse_images: int = 6
    thumbnail_size: int = 400  # Width requested from Wikimedia thumbnails
    placeholder_image_url: str = PLACEHOLDER_IMAGE_URL
    user_agent: str = "FloraScan/0.1 (plant identification)"

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Reject non-positive timeouts."""
        if v <= 0:
            raise ValueError("Enrichment timeout must be positive")
        return v

    @field_validator("max_diverse_images")
    @classmethod
    def validate_max_diverse_images(cls, v: int) -> int:
        """Diverse image sets hold between one and six images."""
        if not 1 <= v <= 6:
            raise ValueError(f"max_diverse_images must be between 1 and 6, got {v}")
        return v


class FloraScanConfig(BaseModel):
    """Configuration settings for the FloraScan application."""

    # Version tracking
    config_version: str = "1.0.0"

    site_name: str = "FloraScan"

    # Logging settings
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # External services
    identification: IdentificationConfig = Field(default_factory=IdentificationConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)

    # Optional YAML file replacing the built-in tag vocabulary
    vocabulary_path: str | None = None
