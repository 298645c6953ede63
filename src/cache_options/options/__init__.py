from .adapter_options import AdapterOptions
from .memory_options import MemoryOptions

__all__ = ["AdapterOptions", "MemoryOptions"]
