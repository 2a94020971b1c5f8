"""
Environment-driven configuration.

Recognized variables (all optional, case-insensitive):

    VENEZUELA_LANGUAGE          es | en
    VENEZUELA_INCLUDE_METADATA  bool
    VENEZUELA_CACHE_ENABLED     bool
    VENEZUELA_VALIDATE_DATA     bool
    VENEZUELA_DATASET_PATH      path to an alternative dataset JSON

Entry points load a ``.env`` file before calling ``load_settings``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import Language, VenezuelaConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "VENEZUELA_"


class TerritorySettings(BaseSettings):
    """Process-level settings: accessor options plus the dataset location."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        env_ignore_empty=True,
        extra="forbid",
        frozen=True,
    )

    language: Language = Language.ES
    include_metadata: bool = True
    cache_enabled: bool = True
    validate_data: bool = True
    dataset_path: Optional[Path] = Field(
        default=None,
        description="Alternative dataset JSON. None means the bundled one.",
    )

    @field_validator("language", mode="before")
    @classmethod
    def _lowercase_language(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def territory_config(self) -> VenezuelaConfig:
        return VenezuelaConfig(**self.model_dump(exclude={"dataset_path"}))


def load_settings(**overrides: Any) -> TerritorySettings:
    """Read settings from the environment. Keyword overrides win."""
    settings = TerritorySettings(**overrides)
    logger.debug("Resolved settings: %s", settings)
    return settings


def load_config(**overrides: Any) -> VenezuelaConfig:
    """Accessor options only, for callers that don't care about the dataset path."""
    return load_settings(**overrides).territory_config()
