"""Library configuration.

Uses pydantic-settings for environment variable support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AddonOptions(BaseModel):
    """Optional behaviors layered on top of the factories."""

    model_config = ConfigDict(frozen=True)

    continuation: bool = Field(
        default=False,
        description="Halt plain successes and enable the 'continued' success",
    )


class FeatureOptions(BaseModel):
    """Core features that can be switched off."""

    model_config = ConfigDict(frozen=True)

    expectations: bool = Field(
        default=True,
        description="Enforce declared expectation sets",
    )


class PatternMatchingOptions(BaseModel):
    """Tweaks to value predicate evaluation."""

    model_config = ConfigDict(frozen=True)

    nil_as_valid_value_checking: bool = Field(
        default=False,
        description="Accept a None value without running its predicate",
    )


class Settings(BaseSettings):
    """Library settings with environment variable support.

    All settings can be overridden via environment variables.
    Example: RESULT_FLOW_ADDON__CONTINUATION=true, RESULT_FLOW_LOG_LEVEL=DEBUG

    Instances are frozen; build a new one to change a toggle.
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULT_FLOW_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # =========================================================================
    # Toggles
    # =========================================================================
    addon: AddonOptions = Field(default_factory=AddonOptions)
    feature: FeatureOptions = Field(default_factory=FeatureOptions)
    pattern_matching: PatternMatchingOptions = Field(
        default_factory=PatternMatchingOptions
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level for the result_flow logger",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the option groups as plain dicts."""
        return self.model_dump(include={"addon", "feature", "pattern_matching"})

    def __repr__(self) -> str:
        return "Settings(options=['addon', 'feature', 'pattern_matching'])"


@lru_cache
def get_settings() -> Settings:
    """Get cached default settings instance."""
    return Settings()
