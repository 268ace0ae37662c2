"""Frame-driven timers with one-shot and repeating modes."""

from __future__ import annotations

import enum

_NANOS_PER_SECOND = 1_000_000_000
_MAX_TIMES_FINISHED = 2**32 - 1


def _to_nanos(seconds: float) -> int:
    if seconds < 0:
        raise ValueError(f"time span must not be negative, got {seconds!r}")
    return round(seconds * _NANOS_PER_SECOND)


class TimerMode(enum.Enum):
    """Whether a timer stops at its duration or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """Counts elapsed time towards a duration, advanced by explicit ticks.

    Times are given in seconds and kept internally as whole nanoseconds so
    that repeated ticks do not accumulate rounding drift.
    """

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        self._duration = _to_nanos(duration)
        self.mode = mode
        self._elapsed = 0
        self._finished = False
        self._times_finished = 0

    @classmethod
    def from_seconds(cls, seconds: float, mode: TimerMode) -> Timer:
        """Create a timer running for ``seconds`` in the given mode."""
        return cls(seconds, mode)

    @property
    def duration(self) -> float:
        return self._duration / _NANOS_PER_SECOND

    @property
    def elapsed(self) -> float:
        return self._elapsed / _NANOS_PER_SECOND

    @property
    def remaining(self) -> float:
        return max(self._duration - self._elapsed, 0) / _NANOS_PER_SECOND

    @property
    def finished(self) -> bool:
        """True if the timer reached its duration on the latest tick (or stays done)."""
        return self._finished

    @property
    def just_finished(self) -> bool:
        """True only on the tick in which the timer reached its duration."""
        return self._times_finished > 0

    @property
    def times_finished_this_tick(self) -> int:
        return self._times_finished

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        step = _to_nanos(delta)
        if self.mode is TimerMode.ONCE and self._finished:
            self._times_finished = 0
            return self

        self._elapsed += step
        self._finished = self._elapsed >= self._duration
        if not self._finished:
            self._times_finished = 0
        elif self.mode is TimerMode.REPEATING:
            if self._duration == 0:
                self._times_finished = _MAX_TIMES_FINISHED
                self._elapsed = 0
            else:
                self._times_finished, self._elapsed = divmod(self._elapsed, self._duration)
        else:
            self._times_finished = 1
            self._elapsed = self._duration
        return self

    def reset(self) -> None:
        """Start the timer over from zero."""
        self._elapsed = 0
        self._finished = False
        self._times_finished = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timer):
            return NotImplemented
        return (
            self._duration,
            self.mode,
            self._elapsed,
            self._finished,
            self._times_finished,
        ) == (
            other._duration,
            other.mode,
            other._elapsed,
            other._finished,
            other._times_finished,
        )

    def __repr__(self) -> str:
        return (
            f"Timer(duration={self.duration}, mode={self.mode.name}, "
            f"elapsed={self.elapsed}, finished={self._finished})"
        )