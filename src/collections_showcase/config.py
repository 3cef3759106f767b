"""Application configuration management using Pydantic Settings.

This module defines the `Settings` class, which loads configuration parameters
from environment variables and a `.env` file. It centralizes the tunable
parameters of the showcase CLI: logging level, the input size used by the
eager-vs-lazy comparison, and the default chunk/window/take parameters.

The collection functions themselves never read settings; the CLI resolves
them once and passes plain values down.

The `get_settings` function provides a cached, singleton instance of the
configuration, ensuring consistent settings throughout the application.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict


class Settings(BaseSettings):
    """Defines all application configuration parameters.

    Values come from environment variables or a `.env` file. Size-like
    parameters are validated after load so a bad environment fails fast
    with a readable message instead of surfacing later as an
    `InvalidArgumentError` deep inside a demonstration.
    """

    model_config = _SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Logging & runtime behavior
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # Eager vs lazy comparison input (advanced-collections section)
    LARGE_INPUT_SIZE: int = Field(
        default=1_000_000,
        description="Number of integers fed to the eager and lazy pipelines when comparing them",
    )

    # ---------------- Slicing defaults -----------------
    CHUNK_SIZE: int = Field(default=3, description="Default chunk size")
    WINDOW_SIZE: int = Field(default=3, description="Default sliding window size")
    WINDOW_STEP: int = Field(default=2, description="Default sliding window step")
    WINDOW_PARTIAL: bool = Field(
        default=False,
        description="If true, trailing windows shorter than WINDOW_SIZE are kept (clipped)",
    )
    TAKE_COUNT: int = Field(default=3, description="Default n for take/drop")

    # ---------------- Showcase selection -----------------
    # Use Any type to prevent Pydantic Settings JSON decoding; validator converts to list[str]
    SHOWCASE_SECTIONS: Any = Field(
        default_factory=list,
        description=(
            "Optional comma-separated list of section names run by `demo` when no "
            "--section flag is given. Example: SHOWCASE_SECTIONS=collections,generics. "
            "Empty list (default) runs every section."
        ),
    )

    @field_validator("SHOWCASE_SECTIONS", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: str | list[str]) -> list[str]:
        """Parse comma-separated string into list of stripped strings.

        Supports both direct list input (from code/tests) and comma-separated
        string input (from environment variables). Empty strings result in
        empty list.
        """
        if isinstance(v, list):
            return [s.strip() for s in v if s.strip()]
        if isinstance(v, str):
            if not v.strip():
                return []
            return [s.strip() for s in v.split(",") if s.strip()]
        return []

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        if isinstance(v, str) and v.strip():
            return v.strip().upper()
        return "INFO"

    @model_validator(mode="after")
    def check_positive_sizes(self) -> "Settings":
        """Reject non-positive size parameters.

        Returns:
            The validated `Settings` instance.
        """
        for name in ("LARGE_INPUT_SIZE", "CHUNK_SIZE", "WINDOW_SIZE", "WINDOW_STEP"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1 (got {getattr(self, name)})")
        if self.TAKE_COUNT < 0:
            raise ValueError(f"TAKE_COUNT must be >= 0 (got {self.TAKE_COUNT})")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, singleton instance of the application settings.

    Provides a clearer error if a size parameter in the environment is invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        problems = "; ".join(str(err.get("msg")) for err in e.errors())
        raise RuntimeError(f"Invalid showcase configuration: {problems}") from e
