from .logger import setup_logger
from .memory_size import normalize_memory_limit
from .host_memory import get_host_memory_limit

__all__ = ["setup_logger", "normalize_memory_limit", "get_host_memory_limit"]
