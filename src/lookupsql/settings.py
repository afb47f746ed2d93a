"""Settings for lookupsql."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class LookupSQLSettings(BaseSettings):
    """lookupsql configuration settings."""

    # Default dialect for new query sets: "mysql" or "sqlite"
    SQL_DIALECT: str = "mysql"

    # Raise InvalidFieldError on unknown columns instead of logging and dropping them
    STRICT_FIELDS: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = LookupSQLSettings()
