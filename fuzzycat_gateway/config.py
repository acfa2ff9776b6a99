"""Configuration management using Pydantic Settings"""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Business rates are not settings: they live in
    fuzzycat_gateway.domain.constants and change only with the code.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "fuzzycat-gateway"
    log_level: str = "INFO"

    # Zone of the server clock used when a quote omits the enrollment date
    schedule_timezone: str = "UTC"

    @field_validator("schedule_timezone")
    @classmethod
    def validate_schedule_timezone(cls, value: str) -> str:
        """Fail at startup on a zone the server clock cannot resolve"""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown IANA time zone: {value!r}") from e
        return value


settings = Settings()
