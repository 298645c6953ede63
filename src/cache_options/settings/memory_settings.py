# ./settings/memory_settings.py

from typing import Optional
from pydantic import Field
from cache_options.settings.base_settings import BaseConfig


class MemorySettings(BaseConfig):
    """
    Host-level memory settings.

    Attributes:
        memory_limit (Optional[str]): The process memory limit reported by the deployment,
            e.g. "128M", "1G", "-1" or a plain byte count. Read from `MEMORY_LIMIT`.
    """
    memory_limit: Optional[str] = Field(
        default=None,
        description="Process memory limit as reported by the host (shorthand or bytes).",
    )
