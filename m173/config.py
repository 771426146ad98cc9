"""Server settings stored as ``key=value`` lines in a plain text file."""

from __future__ import annotations

import re
from enum import IntEnum
from pathlib import Path
from typing import Mapping, Optional, Union

from m173.helper import stricmp

__all__ = [
    "ConfigType",
    "ConfigError",
    "ConfigUnknownEntryError",
    "ConfigInvalidTypeError",
    "ConfigItem",
    "Config",
    "default_items",
    "CONFIG_MAX_STRING_SIZE",
    "CONFIG_FILE_NAME",
]

CONFIG_MAX_STRING_SIZE = 32
CONFIG_FILE_NAME = "system.cfg"

UINT32_MAX = 0xFFFFFFFF
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

ConfigValue = Union[bool, str, int]


class ConfigType(IntEnum):
    UNSPECIFIED = 0
    BOOL = 1
    STRING = 2
    INT = 3
    UINT = 4


_TYPE_RANGES = {
    ConfigType.INT: (INT32_MIN, INT32_MAX),
    ConfigType.UINT: (0, UINT32_MAX),
}


class ConfigError(Exception):
    """Base class for configuration errors."""


class ConfigUnknownEntryError(ConfigError):
    """Raised when a configuration key does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown config key: {name}")
        self.name = name


class ConfigInvalidTypeError(ConfigError):
    """Raised when a value of the wrong type is used with a configuration entry."""

    def __init__(
        self, expected: Optional[ConfigType] = None, received: Optional[ConfigType] = None
    ) -> None:
        if expected is None or received is None:
            message = "ConfigItem has UNSPECIFIED type"
        else:
            message = f"Invalid config entry type (ex: {int(expected)}, rc: {int(received)})"
        super().__init__(message)
        self.expected = expected
        self.received = received


def _infer_type(value: ConfigValue, minimum: Optional[int]) -> ConfigType:
    if isinstance(value, bool):
        return ConfigType.BOOL
    if isinstance(value, str):
        return ConfigType.STRING
    if isinstance(value, int):
        negative = value < 0 or (minimum is not None and minimum < 0)
        return ConfigType.INT if negative else ConfigType.UINT
    raise TypeError(f"unsupported config value type: {type(value).__name__}")


class ConfigItem:
    """A single typed configuration entry with optional numeric limits."""

    def __init__(
        self,
        value: ConfigValue,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
        type_: Optional[ConfigType] = None,
    ) -> None:
        self._type = ConfigType(type_) if type_ is not None else _infer_type(value, minimum)
        self._changed = False
        self._loaded = False
        self._minimum: Optional[int] = None
        self._maximum: Optional[int] = None

        if self._type is ConfigType.UNSPECIFIED:
            raise ConfigInvalidTypeError()

        if self._type in _TYPE_RANGES:
            low, high = _TYPE_RANGES[self._type]
            self._minimum = low if minimum is None else minimum
            self._maximum = high if maximum is None else maximum
            if self._minimum > self._maximum:
                raise ValueError(f"minimum {self._minimum} exceeds maximum {self._maximum}")
            self._value: ConfigValue = int(value)
        elif minimum is not None or maximum is not None:
            raise ValueError("limits apply to numeric entries only")
        elif self._type is ConfigType.BOOL:
            self._value = bool(value)
        else:
            self._value = str(value)[:CONFIG_MAX_STRING_SIZE]

    def __repr__(self) -> str:
        return f"ConfigItem({self._value!r}, type_={self._type.name})"

    @property
    def type(self) -> ConfigType:
        return self._type

    @property
    def value(self) -> ConfigValue:
        return self._value

    @property
    def minimum(self) -> Optional[int]:
        return self._minimum

    @property
    def maximum(self) -> Optional[int]:
        return self._maximum

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def is_changed(self) -> bool:
        return self._changed

    def type_assert(self, type_: ConfigType) -> None:
        """Raise ConfigInvalidTypeError unless this entry has the given type."""
        if self._type != type_:
            raise ConfigInvalidTypeError(self._type, type_)

    def set_value(self, value: ConfigValue) -> None:
        """Store a new value, clamping numbers to the limits and truncating strings."""
        if isinstance(value, bool):
            requested = ConfigType.BOOL
        elif isinstance(value, str):
            requested = ConfigType.STRING
        elif isinstance(value, int):
            requested = self._type if self._type in _TYPE_RANGES else ConfigType.UINT
        else:
            raise TypeError(f"unsupported config value type: {type(value).__name__}")

        self.type_assert(requested)
        if value == self._value:
            return

        if requested is ConfigType.STRING:
            self._value = value[:CONFIG_MAX_STRING_SIZE]
        elif requested in _TYPE_RANGES:
            self._value = min(self._maximum, max(value, self._minimum))
        else:
            self._value = value
        self._changed = True

    def mark_loaded(self) -> None:
        self._loaded = True

    def clear_changed(self) -> None:
        self._changed = False


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _parse_int(raw: str, type_: ConfigType) -> int:
    low, high = _TYPE_RANGES[type_]
    match = _INT_PREFIX.match(raw)
    if match is None:
        return 0
    return min(high, max(int(match.group(1)), low))


def _parse_value(item: ConfigItem, raw: str) -> ConfigValue:
    if item.type is ConfigType.BOOL:
        return stricmp(raw, "True")
    if item.type is ConfigType.STRING:
        return raw
    if item.type in _TYPE_RANGES:
        return _parse_int(raw, item.type)
    raise ConfigInvalidTypeError()


def _format_value(item: ConfigItem) -> str:
    if item.type is ConfigType.BOOL:
        return "True" if item.value else "False"
    if item.type in (ConfigType.STRING, ConfigType.INT, ConfigType.UINT):
        return str(item.value)
    raise ConfigInvalidTypeError()


class Config:
    """A set of named configuration entries backed by a file, loaded on creation."""

    def __init__(
        self,
        items: Optional[Mapping[str, ConfigItem]] = None,
        path: Union[str, Path] = CONFIG_FILE_NAME,
    ) -> None:
        source = default_items() if items is None else items
        self._items = dict(sorted(source.items()))
        self._path = Path(path)
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """Read the file; create it, or rewrite it when entries are missing."""
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError:
            self.save(force=True)
            return

        for line in text.splitlines():
            name, _, raw = line.partition("=")
            if not name:
                continue
            try:
                item = self.get_item(name)
            except ConfigUnknownEntryError:
                continue
            item.set_value(_parse_value(item, raw))
            item.clear_changed()
            item.mark_loaded()

        if not all(item.is_loaded for item in self._items.values()):
            self.save(force=True)

    def save(self, force: bool = False) -> None:
        """Write all entries to the file if any changed, or always when forced."""
        if not force and not self.is_changed():
            return
        lines = []
        for name, item in self._items.items():
            item.clear_changed()
            lines.append(f"{name}={_format_value(item)}\n")
        self._path.write_text("".join(lines), encoding="utf-8")

    def is_changed(self) -> bool:
        return any(item.is_changed for item in self._items.values())

    def get_item(self, name: str) -> ConfigItem:
        try:
            return self._items[name]
        except KeyError:
            raise ConfigUnknownEntryError(name) from None

    def __getitem__(self, name: str) -> ConfigItem:
        return self.get_item(name)

    def __enter__(self) -> Config:
        return self

    def __exit__(self, *args: object) -> None:
        self.save()


def default_items() -> dict[str, ConfigItem]:
    """The server's configuration entries with their defaults and limits."""
    return {
        "logging.level": ConfigItem("info"),
        "bind.max_clients": ConfigItem(40, 1, 512),
        "bind.port": ConfigItem(25565, 0, 65535),
        "bind.queue_size": ConfigItem(4, 1, 128),
        "chunk.load_distance": ConfigItem(10, 1, 80),
        "chunk.unload_interval": ConfigItem(300, 30),
        "world.save_interval": ConfigItem(300, 30),
        "perms.password": ConfigItem("password"),
        "perms.local_op": ConfigItem(True),
    }