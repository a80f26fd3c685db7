"""Easing curves and a timer that follows one."""

from __future__ import annotations

from typing import Callable

EasingFn = Callable[[float], float]


def ease_linear(x: float) -> float:
    return float(x)


def ease_in_quad(x: float) -> float:
    return x * x


def ease_out_quad(x: float) -> float:
    return 1.0 - (1.0 - x) * (1.0 - x)


def ease_in_out_quad(x: float) -> float:
    if x < 0.5:
        return 2.0 * x * x
    return 1.0 - ((-2.0 * x + 2.0) ** 2) / 2.0


class Easer:
    """Tracks elapsed time over a duration and exposes the eased progress."""

    def __init__(self, ease: EasingFn, duration: float) -> None:
        self.ease = ease
        self.duration = duration
        self.elapsed = 0.0
        self.value = ease(0.0)

    def _recalculate(self) -> None:
        self.value = self.ease(self.elapsed / self.duration)

    def is_done(self) -> bool:
        return self.elapsed >= self.duration

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time``, never past the duration."""
        self.elapsed = min(self.elapsed + delta_time, self.duration)
        self._recalculate()

    def lerp(self, start: float, end: float) -> float:
        return start + self.value * (end - start)

    def lerp_precise(self, start: float, end: float) -> float:
        return (1.0 - self.value) * start + self.value * end

    def reset(self) -> None:
        self.elapsed = 0.0
        self._recalculate()