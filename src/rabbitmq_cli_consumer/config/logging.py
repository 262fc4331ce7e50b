"""
Logging Configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Log destinations and line format.

    Empty paths disable the corresponding log file. Without any path and
    without ``verbose`` both channels silently discard their entries.
    """

    model_config = SettingsConfigDict(
        env_prefix="RCC_LOG_",
        extra="ignore",
        frozen=True,
    )

    error_path: str = Field(default="", description="Error log file, empty disables it")
    info_path: str = Field(default="", description="Info log file, empty disables it")
    verbose: bool = Field(default=False, description="Also write both channels to the console")
    no_datetime: bool = Field(default=False, description="Omit the date/time prefix")
