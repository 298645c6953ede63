# ./settings/base_settings.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """
    Base class for every cache_options settings group.

    Values come from the process environment, then from a `.env` file in the working
    directory. Keys that belong to other settings groups are ignored.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
