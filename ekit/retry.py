"""Retry interval strategies."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import timedelta

_ZERO = timedelta(0)


class InvalidIntervalError(ValueError):
    """An interval that must be positive was not."""

    def __init__(self, interval: timedelta) -> None:
        super().__init__(
            f"ekit: invalid interval {interval}, expected greater than 0"
        )
        self.interval = interval


class InvalidMaxIntervalError(ValueError):
    """The maximum interval is smaller than the initial interval."""

    def __init__(self, max_interval: timedelta, initial_interval: timedelta) -> None:
        super().__init__(
            f"ekit: max interval {max_interval} must be greater than or equal to "
            f"initial interval {initial_interval}"
        )
        self.max_interval = max_interval
        self.initial_interval = initial_interval


class Strategy(ABC):
    """Decides how long to wait before the next retry."""

    @abstractmethod
    def next(self) -> timedelta | None:
        """Return the interval before the next retry, or None to stop retrying."""

    def __iter__(self) -> Iterator[timedelta]:
        while (interval := self.next()) is not None:
            yield interval


class FixedIntervalRetryStrategy(Strategy):
    """Retries at a constant interval; ``max_retries <= 0`` means without limit."""

    def __init__(self, interval: timedelta, max_retries: int) -> None:
        if interval <= _ZERO:
            raise InvalidIntervalError(interval)
        self.interval = interval
        self.max_retries = max_retries
        self._retries = 0
        self._lock = threading.Lock()

    def next(self) -> timedelta | None:
        with self._lock:
            self._retries += 1
            retries = self._retries
        if self.max_retries <= 0 or retries <= self.max_retries:
            return self.interval
        return None


class ExponentialBackoffRetryStrategy(Strategy):
    """Doubles the interval on each retry until it reaches ``max_interval``."""

    def __init__(
        self,
        initial_interval: timedelta,
        max_interval: timedelta,
        max_retries: int,
    ) -> None:
        if initial_interval <= _ZERO:
            raise InvalidIntervalError(initial_interval)
        if initial_interval > max_interval:
            raise InvalidMaxIntervalError(max_interval, initial_interval)
        self.initial_interval = initial_interval
        self.max_interval = max_interval
        self.max_retries = max_retries
        self._retries = 0
        self._max_interval_reached = False
        self._lock = threading.Lock()

    def next(self) -> timedelta | None:
        with self._lock:
            self._retries += 1
            retries = self._retries
            if 0 < self.max_retries < retries:
                return None
            if self._max_interval_reached:
                return self.max_interval
            try:
                interval = self.initial_interval * (1 << (retries - 1))
            except OverflowError:
                interval = None
            if interval is None or interval > self.max_interval:
                self._max_interval_reached = True
                return self.max_interval
            return interval