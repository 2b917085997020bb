"""Runtime settings and logging setup"""

import logging
import os
from typing import Self

from pydantic import BaseModel, field_validator

ENV_PREFIX = "CHECKERS_"


class Settings(BaseModel):
    ai_thinking_delay: float = 1.0
    ai_player_name: str = "AI"
    log_level: str = "INFO"

    @field_validator("ai_thinking_delay")
    @classmethod
    def validate_delay(cls, value: float) -> float:
        if value < 0:
            raise ValueError(f"AI thinking delay cannot be negative: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls) -> Self:
        """Pick up overrides such as CHECKERS_AI_THINKING_DELAY=0.5 from the environment."""
        overrides = {
            name: os.environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in os.environ
        }
        return cls.model_validate(overrides)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
