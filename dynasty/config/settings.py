import logging
from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class PartyConfig(BaseModel):
    """Identity of one of the two human-controlled programs in the dynasty."""

    name: str = Field(..., description="Canonical display name, e.g. 'Akron'.")
    aliases: List[str] = Field(
        default_factory=list,
        description="Lower-case names that resolve to this program.",
    )
    division: str = Field("CPU Land", description="Conference division label.")

    @field_validator("aliases")
    @classmethod
    def _lower_aliases(cls, value: List[str]) -> List[str]:
        return [" ".join(alias.split()).lower() for alias in value]


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Primary parties (the two human-controlled programs)
    primary_a: PartyConfig = Field(
        default_factory=lambda: PartyConfig(
            name="Akron", aliases=["akron", "zips"], division="MAC East"
        ),
        description="First primary party.",
    )
    primary_b: PartyConfig = Field(
        default_factory=lambda: PartyConfig(
            name="Kent State",
            aliases=["kent", "kent state", "golden flashes"],
            division="MAC West",
        ),
        description="Second primary party.",
    )
    other_division: str = Field(
        "CPU Land", description="Division label shown for every CPU opponent."
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_prefix="DYNASTY_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Builds AppSettings from the environment, falling back to INFO logging."""
    try:
        settings = AppSettings()
    except Exception as e:
        logging.exception(f"Could not build dynasty settings: {e}")
        raise SystemExit("Dynasty settings are invalid. Exiting.")

    level = settings.log_level.upper()
    # loguru only knows the standard level names
    if level not in LOG_LEVELS:
        logging.warning(f"Unknown DYNASTY_LOG_LEVEL {settings.log_level!r}; using INFO.")
        level = "INFO"
    settings.log_level = level
    return settings


settings: AppSettings = load_settings()
