"""Samplers decide whether a log event is kept or dropped."""

from __future__ import annotations

import random
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .level import Level

_UINT32 = 0xFFFFFFFF


class Sampler(ABC):
    """Decides whether an event at a given level is part of the sample."""

    @abstractmethod
    def sample(self, lvl: Level) -> bool:
        """Return True to keep the event, False to drop it."""


@dataclass(frozen=True)
class RandomSampler(Sampler):
    """Keeps about one event in ``n``, chosen at random, whatever the level."""

    n: int

    def sample(self, lvl: Level) -> bool:
        if self.n <= 0:
            return False
        return random.randrange(self.n) == 0


@dataclass
class BasicSampler(Sampler):
    """Keeps every ``n``-th event, starting with the first."""

    n: int
    _counter: int = field(default=0, init=False, repr=False, compare=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def sample(self, lvl: Level) -> bool:
        if self.n == 1:
            return True
        with self._lock:
            self._counter = (self._counter + 1) & _UINT32
            count = self._counter
        return count % self.n == 1


@dataclass
class BurstSampler(Sampler):
    """Lets ``burst`` events pass per ``period`` seconds.

    Past the burst the decision goes to ``next_sampler``; without one,
    further events are dropped. With a zero period or burst the next
    sampler is always consulted.
    """

    burst: int = 0
    period: float = 0.0
    next_sampler: Sampler | None = None
    _counter: int = field(default=0, init=False, repr=False, compare=False)
    _reset_at: int | None = field(default=None, init=False, repr=False, compare=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def sample(self, lvl: Level) -> bool:
        if self.burst > 0 and self.period > 0 and self._increment() <= self.burst:
            return True
        if self.next_sampler is None:
            return False
        return self.next_sampler.sample(lvl)

    def _increment(self) -> int:
        now = time.monotonic_ns()
        with self._lock:
            if self._reset_at is None or now > self._reset_at:
                self._counter = 1
                self._reset_at = now + int(self.period * 1_000_000_000)
            else:
                self._counter = (self._counter + 1) & _UINT32
            return self._counter


@dataclass(frozen=True)
class LevelSampler(Sampler):
    """Applies a different sampler to each level; unset ones keep everything."""

    trace_sampler: Sampler | None = None
    debug_sampler: Sampler | None = None
    info_sampler: Sampler | None = None
    warn_sampler: Sampler | None = None
    error_sampler: Sampler | None = None

    def sample(self, lvl: Level) -> bool:
        chosen = {
            Level.TRACE: self.trace_sampler,
            Level.DEBUG: self.debug_sampler,
            Level.INFO: self.info_sampler,
            Level.WARN: self.warn_sampler,
            Level.ERROR: self.error_sampler,
        }.get(lvl)
        if chosen is None:
            return True
        return chosen.sample(lvl)


OFTEN = RandomSampler(10)
"""Keeps about one event in 10."""

SOMETIMES = RandomSampler(100)
"""Keeps about one event in 100."""

RARELY = RandomSampler(1000)
"""Keeps about one event in 1000."""