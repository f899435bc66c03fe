"""Log levels and their textual form."""

from __future__ import annotations

import re
from typing import ClassVar

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Level(int):
    """A log level, stored as a signed 8-bit integer.

    Named levels are available as class attributes. Values below
    ``Level.TRACE`` are valid and are rendered as plain numbers.
    """

    __slots__ = ()

    TRACE: ClassVar[Level]
    DEBUG: ClassVar[Level]
    INFO: ClassVar[Level]
    WARN: ClassVar[Level]
    ERROR: ClassVar[Level]
    FATAL: ClassVar[Level]
    PANIC: ClassVar[Level]
    NO_LEVEL: ClassVar[Level]
    DISABLED: ClassVar[Level]

    def __new__(cls, value: int = 0) -> Level:
        number = int(value)
        if not -128 <= number <= 127:
            raise ValueError(f"level out of range: {number}")
        return super().__new__(cls, number)

    def __str__(self) -> str:
        name = _LEVEL_NAMES.get(int(self))
        if name is not None:
            return name
        return str(int(self))

    def __repr__(self) -> str:
        attribute = _LEVEL_ATTRIBUTES.get(int(self))
        if attribute is not None:
            return f"Level.{attribute}"
        return f"Level({int(self)})"

    def marshal_text(self) -> str:
        """Return the text used for this level in serialised output."""
        return str(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> Level:
        """Parse a level from text such as that found in config files."""
        if isinstance(text, (bytes, bytearray, memoryview)):
            text = bytes(text).decode("utf-8")
        return parse_level(text)


Level.TRACE = Level(-1)
Level.DEBUG = Level(0)
Level.INFO = Level(1)
Level.WARN = Level(2)
Level.ERROR = Level(3)
Level.FATAL = Level(4)
Level.PANIC = Level(5)
Level.NO_LEVEL = Level(6)
Level.DISABLED = Level(7)

_LEVEL_NAMES: dict[int, str] = {
    -1: "trace",
    0: "debug",
    1: "info",
    2: "warn",
    3: "error",
    4: "fatal",
    5: "panic",
    6: "",
    7: "disabled",
}

_LEVEL_ATTRIBUTES: dict[int, str] = {
    -1: "TRACE",
    0: "DEBUG",
    1: "INFO",
    2: "WARN",
    3: "ERROR",
    4: "FATAL",
    5: "PANIC",
    6: "NO_LEVEL",
    7: "DISABLED",
}


def parse_level(level_str: str) -> Level:
    """Convert a level string into a Level.

    Raises ValueError if the string is neither a known level name nor an
    integer in the signed 8-bit range.
    """
    for number in _LEVEL_NAMES:
        level = Level(number)
        if level.marshal_text() == level_str:
            return level
    if not _INTEGER.fullmatch(level_str):
        raise ValueError(
            f"Unknown Level String: '{level_str}', defaulting to NoLevel"
        )
    number = int(level_str)
    if number > 127 or number < -128:
        raise ValueError(f"Out-Of-Bounds Level: '{number}', defaulting to NoLevel")
    return Level(number)