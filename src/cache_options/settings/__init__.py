from .base_settings import BaseConfig
from .logging_settings import LoggingSettings
from .memory_settings import MemorySettings
from .adapter_settings import AdapterSettings

__all__ = ["BaseConfig", "LoggingSettings", "MemorySettings", "AdapterSettings"]
