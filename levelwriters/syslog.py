"""Route log lines to syslog-style writers by level."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .level import Level
from .writer import LevelWriter

CEE_PREFIX = "@cee:"
"""Marks a syslog message as JSON for rsyslog and syslog-ng."""


class SyslogWriter(ABC):
    """A writer with one method per syslog severity."""

    @abstractmethod
    def write(self, p: bytes) -> int:
        """Write raw bytes."""

    @abstractmethod
    def debug(self, m: str) -> None:
        """Send a debug message."""

    @abstractmethod
    def info(self, m: str) -> None:
        """Send an informational message."""

    @abstractmethod
    def warning(self, m: str) -> None:
        """Send a warning message."""

    @abstractmethod
    def err(self, m: str) -> None:
        """Send an error message."""

    @abstractmethod
    def emerg(self, m: str) -> None:
        """Send an emergency message."""

    @abstractmethod
    def crit(self, m: str) -> None:
        """Send a critical message."""


_SEVERITY_METHODS = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "err",
    Level.FATAL: "emerg",
    Level.PANIC: "crit",
    Level.NO_LEVEL: "info",
}


def _count(result: Any, p: bytes) -> int:
    return len(p) if result is None else result


@dataclass(frozen=True)
class SyslogLevelWriter(LevelWriter):
    """Calls the syslog method matching each level, with an optional prefix."""

    writer: Any
    prefix: str = ""

    def write(self, p: bytes) -> int:
        prefix_written = 0
        if self.prefix:
            encoded = self.prefix.encode("utf-8")
            prefix_written = _count(self.writer.write(encoded), encoded)
        return prefix_written + _count(self.writer.write(p), p)

    def write_level(self, level: Level, p: bytes) -> int:
        if level == Level.TRACE:
            return len(p)
        method = _SEVERITY_METHODS.get(level)
        if method is None:
            raise ValueError("invalid level")
        message = self.prefix + bytes(p).decode("utf-8", errors="replace")
        getattr(self.writer, method)(message)
        # The prefix is not part of the payload, so it is not counted.
        return len(p)


def syslog_level_writer(w: Any) -> SyslogLevelWriter:
    """Wrap ``w`` so each level goes to its syslog severity."""
    return SyslogLevelWriter(w)


def syslog_cee_writer(w: Any) -> SyslogLevelWriter:
    """Wrap ``w`` like syslog_level_writer, prefixing lines with the CEE marker."""
    return SyslogLevelWriter(w, CEE_PREFIX)