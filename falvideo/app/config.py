from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PLUGIN_NAME = "plugin-fal-ai"
PLUGIN_DESCRIPTION = "Generate videos using fal.ai MiniMax Hailuo-02"

# Host setting that carries the fal.ai credential.
FAL_KEY_SETTING = "FAL_KEY"

# fal.ai text-to-video endpoint and its fixed clip length (the API expects a string).
FAL_HAILUO_MODEL_ID = "fal-ai/minimax/hailuo-02/standard/text-to-video"
FAL_HAILUO_DURATION = "6"


class Settings(BaseSettings):
    # Optional plugin variable, see PluginConfigSchema
    example_plugin_variable: Optional[str] = Field(
        None,
        validation_alias="EXAMPLE_PLUGIN_VARIABLE",
    )

    # Prefix under which the plugin routes are mounted by falvideo.app.main
    api_prefix: str = Field("/api", validation_alias="FALVIDEO_API_PREFIX")
    log_level: str = Field("INFO", validation_alias="FALVIDEO_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = (value or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    def plugin_config(self) -> Dict[str, Optional[str]]:
        """Raw config map handed to the plugin's init hook."""
        return {"EXAMPLE_PLUGIN_VARIABLE": self.example_plugin_variable}


@lru_cache()
def get_settings() -> Settings:
    return Settings()


class PluginConfigError(ValueError):
    """Raised by plugin init when the supplied config does not validate."""


class PluginConfigSchema(BaseModel):
    EXAMPLE_PLUGIN_VARIABLE: Optional[str] = Field(default=None)

    @field_validator("EXAMPLE_PLUGIN_VARIABLE")
    @classmethod
    def _non_empty_when_set(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) < 1:
            raise ValueError("FalAI plugin variable is not provided")
        return value


def validate_plugin_config(config: Mapping[str, Any]) -> Dict[str, Optional[str]]:
    """Validate the plugin config map and return the cleaned values.

    An absent ``EXAMPLE_PLUGIN_VARIABLE`` is accepted and only logged as a
    warning. Validation errors are collapsed into one ``PluginConfigError``.
    """
    try:
        validated = PluginConfigSchema.model_validate(dict(config or {}))
    except ValidationError as exc:
        messages = ", ".join(_error_message(err) for err in exc.errors())
        raise PluginConfigError(f"Invalid plugin configuration: {messages}") from exc

    if not validated.EXAMPLE_PLUGIN_VARIABLE:
        logger.warning("FalAI plugin variable is not provided (this is expected)")
    return validated.model_dump()


def _error_message(err: Mapping[str, Any]) -> str:
    msg = str(err.get("msg") or "")
    # pydantic prefixes messages raised from validators
    prefix = "Value error, "
    if msg.startswith(prefix):
        msg = msg[len(prefix):]
    return msg
