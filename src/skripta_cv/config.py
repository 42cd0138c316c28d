"""Runtime configuration for CV rendering.

Values come from environment variables prefixed with ``SKRIPTA_CV_`` (or a
local ``.env`` file), e.g. ``SKRIPTA_CV_MARGIN=40``. The layout engine itself
never reads the environment: adapters call :func:`get_settings` and pass the
result in.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["LayoutSettings", "default_settings", "get_settings"]


class LayoutSettings(BaseSettings):
    """Page geometry and document-level options."""

    model_config = SettingsConfigDict(
        env_prefix="SKRIPTA_CV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    page_format: Literal["A4", "Letter", "Legal"] = "A4"
    margin: float = Field(50.0, gt=0, description="Uniform page margin in points")
    ongoing_label: str = Field("Present", description="End label for open date ranges")
    creator: str = "Skripta"
    compress: bool = True


def get_settings() -> LayoutSettings:
    """Load settings from the current environment."""
    return LayoutSettings()


def default_settings() -> LayoutSettings:
    """Built-in defaults, ignoring the environment."""
    return LayoutSettings.model_construct()
