"""
cache-options: option holders for cache storage adapters.
"""

from .exceptions import CacheOptionsError, InvalidArgumentError
from .options import AdapterOptions, MemoryOptions

__version__ = "0.1.0"

__all__ = ["AdapterOptions", "MemoryOptions", "CacheOptionsError", "InvalidArgumentError"]
