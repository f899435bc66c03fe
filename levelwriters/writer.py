"""Writers that receive formatted log lines, optionally with their level."""

from __future__ import annotations

import io
import os
import threading
import traceback
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from .level import Level


class ShortWriteError(OSError):
    """A writer accepted fewer bytes than it was given."""

    def __init__(self, message: str = "short write") -> None:
        super().__init__(message)


class LevelWriter(ABC):
    """A writer that can also receive the level of each payload."""

    @abstractmethod
    def write(self, p: bytes) -> int:
        """Write ``p`` and return the number of bytes written."""

    @abstractmethod
    def write_level(self, level: Level, p: bytes) -> int:
        """Write ``p`` produced at ``level`` and return the bytes written."""


def _plain_write(target: Any, p: bytes) -> int:
    if isinstance(target, io.TextIOBase):
        target.write(bytes(p).decode("utf-8", errors="replace"))
        return len(p)
    result = target.write(p)
    return len(p) if result is None else result


class _Discard:
    def write(self, p: bytes) -> int:
        return len(p)


@dataclass(frozen=True)
class LevelWriterAdapter(LevelWriter):
    """Gives a plain writer a ``write_level`` that ignores the level."""

    writer: Any

    def write(self, p: bytes) -> int:
        return _plain_write(self.writer, p)

    def write_level(self, level: Level, p: bytes) -> int:
        return self.write(p)


def as_level_writer(w: Any) -> Any:
    """Return ``w`` if it accepts levels, else wrap it; None discards output."""
    if w is None:
        return LevelWriterAdapter(_Discard())
    if isinstance(w, LevelWriter) or callable(getattr(w, "write_level", None)):
        return w
    return LevelWriterAdapter(w)


class SyncWriter(LevelWriter):
    """Serialises every write to the wrapped writer with a lock."""

    def __init__(self, w: Any) -> None:
        self._lw = as_level_writer(w)
        self._lock = threading.Lock()

    def write(self, p: bytes) -> int:
        with self._lock:
            return self._lw.write(p)

    def write_level(self, level: Level, p: bytes) -> int:
        with self._lock:
            return self._lw.write_level(level, p)


class MultiLevelWriter(LevelWriter):
    """Duplicates each write to all writers, like tee(1).

    Every writer is tried even when an earlier one fails; the first failure
    is raised once all have been called.
    """

    def __init__(self, *writers: Any) -> None:
        self.writers = tuple(as_level_writer(w) for w in writers)

    def write(self, p: bytes) -> int:
        return self._fan_out(p, lambda w: w.write(p))

    def write_level(self, level: Level, p: bytes) -> int:
        return self._fan_out(p, lambda w: w.write_level(level, p))

    def _fan_out(self, p: bytes, call: Callable[[Any], int]) -> int:
        written = 0
        error: BaseException | None = None
        for writer in self.writers:
            try:
                count = call(writer)
            except Exception as exc:
                if error is None:
                    error = exc
                continue
            if error is None:
                written = count
                if count != len(p):
                    error = ShortWriteError()
        if error is not None:
            raise error
        return written


class TestingLogWriter:
    """Sends each write to a test log object.

    The target needs ``log(*args)`` and ``logf(fmt, *args)`` taking
    %-style formats, and may offer ``helper()``. A positive ``frame``
    reports the file and line that many frames above the caller of
    ``write`` instead of the caller itself.
    """

    __test__ = False

    def __init__(self, t: Any, frame: int = 0) -> None:
        self.t = t
        self.frame = frame

    def write(self, p: bytes) -> int:
        helper = getattr(self.t, "helper", None)
        if callable(helper):
            helper()
        written = len(p)
        text = bytes(p).rstrip(b"\n").decode("utf-8", errors="replace")
        if self.frame > 0:
            stack = traceback.extract_stack()[:-1]
            if len(stack) > self.frame:
                origin = stack[-1]
                target = stack[-1 - self.frame]
                erase = "\b" * (
                    len(os.path.basename(origin.filename)) + len(str(origin.lineno)) + 3
                )
                self.t.logf(
                    "%s%s:%d: %s",
                    erase,
                    os.path.basename(target.filename),
                    target.lineno,
                    text,
                )
                return written
        self.t.log(text)
        return written