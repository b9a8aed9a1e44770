from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weekcal.calendar.errors import WeekDateFormatError
from weekcal.calendar.formats import COMPLETE_EXTENDED, resolve_format


class Settings(BaseSettings):
    log_level: str = Field(default="WARNING", validation_alias="WEEKCAL_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="WEEKCAL_LOG_FILE")
    default_format: str = Field(
        default=COMPLETE_EXTENDED.specifier,  # Used by str(WeekDate) and f"{week_date}"
        validation_alias="WEEKCAL_DEFAULT_FORMAT",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the loguru levels."""
        valid_levels = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(
                f"Invalid WEEKCAL_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to WARNING."
            )
            return "WARNING"
        return upper_value

    @field_validator("default_format")
    @classmethod
    def validate_default_format(cls, value: str) -> str:
        """Validate that the default format is one of the week-date formats."""
        try:
            resolve_format(value)
        except WeekDateFormatError:
            logger.warning(
                f"Invalid WEEKCAL_DEFAULT_FORMAT '{value}'. Defaulting to '{COMPLETE_EXTENDED.specifier}'."
            )
            return COMPLETE_EXTENDED.specifier
        return value


settings = Settings()
