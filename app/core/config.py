import logging
from datetime import timedelta, timezone, tzinfo

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]


class Settings(BaseSettings):
    app_env: str | None = Field(default=None, validation_alias=AliasChoices("APP_ENV"))
    cors_origins: str | None = Field(default=None, validation_alias=AliasChoices("CORS_ORIGINS"))
    # Fixed UTC offset of the clinic; unset means the server's local calendar is used.
    clinic_utc_offset_hours: int | None = Field(
        default=None,
        validation_alias=AliasChoices("CLINIC_UTC_OFFSET_HOURS"),
    )
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        # Unknown level names fall back to INFO instead of breaking startup.
        level = str(value or "").strip().upper()
        return level if level in logging.getLevelNamesMapping() else "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        env_origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()] if self.cors_origins else []
        return list(dict.fromkeys([*DEFAULT_CORS_ORIGINS, *env_origins]))


def get_clinic_timezone(settings: "Settings") -> tzinfo | None:
    """Return the configured clinic timezone, or None to fall back to server local time."""
    if settings.clinic_utc_offset_hours is None:
        return None
    return timezone(timedelta(hours=settings.clinic_utc_offset_hours))


settings = Settings()
