# ./settings/logging_settings.py

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from cache_options.settings.base_settings import BaseConfig
from dotenv import load_dotenv

load_dotenv()


class LoggingSettings(BaseConfig):
    """
    Configuration settings for logging.

    Attributes:
        level (str): The logging level (e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format (str): The format string for log messages.
        datefmt (str): The date format string for log messages.
    """

    level: str = Field("INFO", description="Logging level.")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format string.",
    )
    datefmt: str = Field("%Y-%m-%d %H:%M:%S", description="Logging date format string.")

    model_config = SettingsConfigDict(env_prefix="LOG_")
