"""
Configuration settings for the adaptive learning platform demo.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables (LEARNING_*)."""

    model_config = SettingsConfigDict(
        env_prefix="LEARNING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Lesson Assets
    # ========================================
    assets_dir: Path = Field(
        default=Path("."),
        description="Directory holding the lesson images",
    )
    fraction_image: str = Field(
        default="fraction_diagram.jpg",
        description="Image for the 'Introduction to Fractions' lesson",
    )
    algebra_image: str = Field(
        default="algebra_equations.jpg",
        description="Image for the 'Basic Algebra' lesson",
    )
    strict_assets: bool = Field(
        default=False,
        description="Fail instead of warning when a lesson image cannot be read",
    )

    # ========================================
    # Style Adaptation
    # ========================================
    blur_kernel_size: int = Field(
        default=5,
        description="Gaussian kernel size used by the visual learning style",
    )

    # ========================================
    # Display
    # ========================================
    wait_for_key: bool = Field(
        default=True,
        description="Block on Enter after rendering a lesson image",
    )
    thumbnail_width: int = Field(
        default=48,
        description="Console thumbnail width in characters",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="INFO",
        description="Loguru level for stderr output",
    )

    @field_validator("blur_kernel_size")
    @classmethod
    def _kernel_must_be_odd(cls, value: int) -> int:
        if value < 1 or value % 2 == 0:
            raise ValueError("blur_kernel_size must be a positive odd integer")
        return value

    def lesson_image_path(self, name: str) -> Path:
        """Resolve an image file name against the assets directory."""
        return self.assets_dir / name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
