import logging
import os

from pydantic import BaseModel, Field, ValidationError

from .types import LogLevel

ENV_PREFIX = "MAYBE_BABY_"

log = logging.getLogger(__name__)


class Settings(BaseModel):
    LOG_LEVEL: LogLevel = Field(
        "INFO", description="Level used by setup_logger (DEBUG, INFO, ...)."
    )

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``MAYBE_BABY_*`` environment variables.

        Variables that are not set fall back to the field defaults. Invalid
        values are reported with a warning and replaced by the defaults, so a
        bad environment never prevents the package from importing.
        """
        overrides = {}
        for name in cls.model_fields:
            value = os.getenv(f"{ENV_PREFIX}{name}")
            if value is not None:
                overrides[name] = value

        try:
            return cls(**overrides)
        except ValidationError as exc:
            log.warning(
                f"Ignoring invalid {ENV_PREFIX}* settings {sorted(overrides)}: "
                f"{exc.error_count()} error(s); using defaults"
            )
            return cls()


settings = Settings.load()
