# ./settings/adapter_settings.py

from typing import Optional
from pydantic import Field
from pydantic_settings import SettingsConfigDict
from cache_options.settings.base_settings import BaseConfig


class AdapterSettings(BaseConfig):
    """
    Cache adapter options loaded from the environment.

    Only the fields present in the environment (or passed explicitly) are applied
    when an instance is used as an options source.

    Attributes:
        ttl (float): Default time-to-live of cache items, in seconds. 0 disables expiry.
        namespace (str): Namespace prefixed to every cache key.
        key_pattern (str): Regular expression every key must match. Empty disables the check.
        readable (bool): Whether the adapter may be read from.
        writable (bool): Whether the adapter may be written to.
        memory_limit (Optional[str]): Memory limit of memory-backed adapters (shorthand or bytes).
    """

    ttl: float = Field(0, description="Default time-to-live for cache items, in seconds.")
    namespace: str = Field("cache_options", description="Namespace for cache keys.")
    key_pattern: str = Field("", description="Regular expression cache keys must match.")
    readable: bool = Field(True, description="Enable reads from the adapter.")
    writable: bool = Field(True, description="Enable writes to the adapter.")
    memory_limit: Optional[str] = Field(None, description="Memory limit for memory-backed adapters.")

    model_config = SettingsConfigDict(env_prefix="CACHE_")
