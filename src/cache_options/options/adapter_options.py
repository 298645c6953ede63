# ./options/adapter_options.py

import re
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Dict, List, Optional, Union
from pydantic import BaseModel
from cache_options.exceptions import InvalidArgumentError
from cache_options.utils.logger import setup_logger

options_logger = setup_logger(__name__)

OptionListener = Callable[[str, Any], None]
OptionsSource = Union[Mapping, Iterable, BaseModel, None]

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# Methods named set_<name> that are not option setters
_RESERVED_NAMES = {"from_options"}


def _normalize_option_key(key: str) -> str:
    """
    Convert `memoryLimit`, `memory-limit` or `MEMORY_LIMIT` into `memory_limit`.
    """
    key = _CAMEL_BOUNDARY_RE.sub("_", key.strip())
    return key.replace("-", "_").lower()


def _as_pair(item: Any) -> tuple:
    """
    Unpack a (key, value) item of an options source.
    """
    if not isinstance(item, (str, bytes)):
        try:
            key, value = item
            return key, value
        except (TypeError, ValueError):
            pass
    raise InvalidArgumentError(f"Options must be given as (key, value) pairs, '{item!r}' given", item)


class AdapterOptions:
    """
    Generic options shared by every cache storage adapter.

    Options are set through `set_<name>` methods, which normalize and validate the value
    and return the options object for chaining. Whenever a setter changes a stored value,
    every registered listener is called with the option name and the new value.

    Attributes:
        _listeners (List[OptionListener]): Callbacks notified of option changes.
    """

    def __init__(self, options: OptionsSource = None):
        """
        Initialize the options and apply an optional source.

        Args:
            options (OptionsSource): A mapping, an iterable of (key, value) pairs,
                a pydantic model or None.
        """
        self._listeners: List[OptionListener] = []
        self._ttl: Union[int, float] = 0
        self._namespace: str = "cache_options"
        self._key_pattern: str = ""
        self._readable: bool = True
        self._writable: bool = True

        if options is not None:
            self.set_from_options(options)

    def add_listener(self, listener: OptionListener) -> "AdapterOptions":
        """
        Register a callback invoked as `listener(name, value)` on every option change.
        """
        self._listeners.append(listener)
        return self

    def remove_listener(self, listener: OptionListener) -> "AdapterOptions":
        """
        Unregister a callback. Unknown callbacks are ignored.
        """
        if listener in self._listeners:
            self._listeners.remove(listener)
        return self

    def trigger_option_event(self, name: str, value: Any) -> None:
        """
        Notify all listeners that an option changed.

        Args:
            name (str): The option name, e.g. "memory_limit".
            value (Any): The new normalized value.
        """
        options_logger.debug(f"Option '{name}' changed to {value!r}.")
        for listener in list(self._listeners):
            listener(name, value)

    def set_from_options(self, options: OptionsSource) -> "AdapterOptions":
        """
        Apply every key/value pair of a source through its matching setter.

        Args:
            options (OptionsSource): A mapping, an iterable of (key, value) pairs,
                a pydantic model or None. Pydantic models only contribute the
                fields that were explicitly set or read from the environment.

        Returns:
            AdapterOptions: The options object.

        Raises:
            InvalidArgumentError: If the source has an unsupported type, a key has
                no matching setter, or a setter rejects its value.
        """
        if options is None:
            return self

        if isinstance(options, BaseModel):
            items = options.model_dump(exclude_unset=True).items()
        elif isinstance(options, Mapping):
            items = options.items()
        elif isinstance(options, Iterable) and not isinstance(options, (str, bytes)):
            items = options
        else:
            raise InvalidArgumentError(
                f"Options must be a mapping, an iterable of pairs or a pydantic model, "
                f"'{type(options).__name__}' given",
                options,
            )

        for item in items:
            key, value = _as_pair(item)
            name = _normalize_option_key(str(key))
            setter = getattr(self, f"set_{name}", None)
            if name.startswith("_") or name in _RESERVED_NAMES or not callable(setter):
                raise InvalidArgumentError(
                    f"The option '{key}' does not have a matching set_{name} setter", key
                )
            setter(value)

        return self

    def option_names(self) -> List[str]:
        """
        List the names of all options with both a getter and a setter.
        """
        names = []
        for attr in dir(self):
            if not attr.startswith("get_"):
                continue
            name = attr[len("get_"):]
            if callable(getattr(self, f"set_{name}", None)):
                names.append(name)
        return sorted(names)

    def to_dict(self) -> Dict[str, Any]:
        """
        Return every option mapped to its current value.
        """
        return {name: getattr(self, f"get_{name}")() for name in self.option_names()}

    def _change(self, name: str, value: Any) -> None:
        # Listeners run before the new value is stored
        attr = f"_{name}"
        if getattr(self, attr) != value:
            self.trigger_option_event(name, value)
            setattr(self, attr, value)

    def set_ttl(self, ttl: Union[int, float, str]) -> "AdapterOptions":
        """
        Set the default time-to-live of cache items, in seconds. 0 means no expiry.

        Raises:
            InvalidArgumentError: If the value is not numeric or is negative.
        """
        if isinstance(ttl, bool):
            raise InvalidArgumentError(f"Invalid TTL '{ttl}'", ttl)
        if isinstance(ttl, str):
            try:
                ttl = float(ttl.strip())
            except ValueError:
                raise InvalidArgumentError(f"Invalid TTL '{ttl}'", ttl) from None
        if not isinstance(ttl, (int, float)) or ttl != ttl:
            raise InvalidArgumentError(f"Invalid TTL '{ttl}'", ttl)
        if ttl < 0:
            raise InvalidArgumentError(f"TTL can't be negative, '{ttl}' given", ttl)
        if isinstance(ttl, float) and ttl.is_integer():
            ttl = int(ttl)

        self._change("ttl", ttl)
        return self

    def get_ttl(self) -> Union[int, float]:
        return self._ttl

    def set_namespace(self, namespace: str) -> "AdapterOptions":
        """
        Set the namespace prefixed to cache keys.
        """
        if not isinstance(namespace, str):
            raise InvalidArgumentError(f"Namespace must be a string, '{namespace!r}' given", namespace)
        self._change("namespace", namespace)
        return self

    def get_namespace(self) -> str:
        return self._namespace

    def set_key_pattern(self, key_pattern: Optional[str]) -> "AdapterOptions":
        """
        Set the regular expression every cache key must match. Empty disables the check.

        Raises:
            InvalidArgumentError: If the pattern is not a string or does not compile.
        """
        key_pattern = key_pattern or ""
        if not isinstance(key_pattern, str):
            raise InvalidArgumentError(f"Key pattern must be a string, '{key_pattern!r}' given", key_pattern)
        if key_pattern:
            try:
                re.compile(key_pattern)
            except re.error as e:
                raise InvalidArgumentError(f"Invalid key pattern '{key_pattern}': {e}", key_pattern) from e

        self._change("key_pattern", key_pattern)
        return self

    def get_key_pattern(self) -> str:
        return self._key_pattern

    def set_readable(self, readable: bool) -> "AdapterOptions":
        self._change("readable", bool(readable))
        return self

    def get_readable(self) -> bool:
        return self._readable

    def set_writable(self, writable: bool) -> "AdapterOptions":
        self._change("writable", bool(writable))
        return self

    def get_writable(self) -> bool:
        return self._writable
