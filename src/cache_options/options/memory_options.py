# ./options/memory_options.py

from typing import Optional, Union
from cache_options.options.adapter_options import AdapterOptions, OptionsSource
from cache_options.utils.host_memory import get_host_memory_limit
from cache_options.utils.memory_size import normalize_memory_limit


def _half(value: int) -> int:
    # Integer division truncating toward zero
    return value // 2 if value >= 0 else -(-value // 2)


class MemoryOptions(AdapterOptions):
    """
    Options of the memory-backed cache adapter.

    The memory limit is measured in bytes and may be given in shorthand notation
    ("256M", "1G"). A limit less than or equal to 0 disables the check. By default
    half of the memory limit reported by the host is used.

    Attributes:
        _memory_limit (Optional[int]): The limit in bytes, or None until resolved.
    """

    def __init__(self, options: OptionsSource = None):
        self._memory_limit: Optional[int] = _half(normalize_memory_limit(get_host_memory_limit()))
        super().__init__(options)

    def set_memory_limit(self, memory_limit: Union[str, int, float, None]) -> "MemoryOptions":
        """
        Set the memory limit.

        - A number less than or equal to 0 disables the memory limit.
        - A plain number is measured in bytes; "K", "M" and "G" suffixes may be used.
        - None resets the limit so it is derived from the host on the next read.

        Args:
            memory_limit (Union[str, int, float, None]): The new limit.

        Returns:
            MemoryOptions: The options object.

        Raises:
            InvalidArgumentError: If the value is not a valid memory limit.
        """
        if memory_limit is not None:
            memory_limit = normalize_memory_limit(memory_limit)

        self._change("memory_limit", memory_limit)
        return self

    def get_memory_limit(self) -> int:
        """
        Get the memory limit in bytes.

        An unset limit is resolved once to half of the host memory limit, or to 0
        when the host reports no limit.
        """
        if self._memory_limit is None:
            host_limit = normalize_memory_limit(get_host_memory_limit())
            self._memory_limit = _half(host_limit) if host_limit >= 0 else 0

        return self._memory_limit
