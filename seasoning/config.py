"""Configuration for the transform using pydantic-settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from seasoning.models.naming import NamingMode


class NamingSettings(BaseSettings):
    """Settings for the naming strategy."""

    model_config = SettingsConfigDict(
        env_prefix="NAMING_",
    )

    mode: NamingMode = Field(
        default=NamingMode.HASH,
        description="Renaming strategy: hash, minimal or debug",
    )
    debug_symbol: str = Field(
        default="_",
        description="Symbol placed in front of names in debug mode",
    )
    prefix: str = Field(
        default="",
        description="Text placed before every generated name",
    )
    suffix: str = Field(
        default="",
        description="Text placed after every generated name",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Hash key for hash mode (unset behaves like 0)",
    )


class EngineSettings(BaseSettings):
    """Settings for reading and writing the stylesheet."""

    model_config = SettingsConfigDict(
        env_prefix="ENGINE_",
    )

    minify: bool = Field(
        default=True,
        description="Drop comments and redundant whitespace from the output",
    )
    filename: str = Field(
        default="style.css",
        description="Name used for the stylesheet in warnings",
    )


class SeasoningSettings(BaseSettings):
    """Global settings for the whole transform."""

    model_config = SettingsConfigDict(
        env_prefix="SEASONING_",
    )

    naming: NamingSettings = Field(default_factory=NamingSettings)
    engine: EngineSettings = Field(default_factory=EngineSettings)


# Global settings instance that can be accessed throughout the application
_settings: SeasoningSettings | None = None


def get_settings() -> SeasoningSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = SeasoningSettings()
    return _settings


def set_settings(settings: SeasoningSettings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings
