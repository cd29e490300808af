"""Centralized configuration management using Pydantic Settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vault_parser.models import ALL_COLUMNS


class Settings(BaseSettings):
    """Defines application settings, loaded from environment variables or .env file.

    Attributes
    ----------
    url_max_length : int
        Number of URL characters kept unless every field is extracted.
    timestamp_format : str
        `strftime` format of the normalized timestamps.
    timestamp_utc : bool
        Express timestamps in UTC instead of the local time zone.
    sort_column : str
        Report column the default report is sorted by.
    html_title : str
        Title of HTML reports.
    log_format : str
        Log records format.
    """

    url_max_length: int = 50
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    timestamp_utc: bool = False
    sort_column: str = "URL"
    html_title: str = "Vault Report"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("sort_column")
    @classmethod
    def check_sort_column(cls, value: str) -> str:
        if value not in ALL_COLUMNS:
            raise ValueError(f"'{value}' is not a report column")
        return value

    model_config = SettingsConfigDict(
        env_prefix="VAULT_PARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
