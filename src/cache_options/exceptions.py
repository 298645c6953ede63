# ./exceptions.py

from typing import Any


class CacheOptionsError(Exception):
    """
    Base class for every error raised by cache_options.
    """


class InvalidArgumentError(CacheOptionsError, ValueError):
    """
    Raised when an option receives a value it cannot accept.

    Attributes:
        value (Any): The offending raw value.
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value
