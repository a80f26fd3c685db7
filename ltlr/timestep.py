"""A fixed-step simulation clock with frame-rate sampling."""

from __future__ import annotations

from typing import Callable

from .context import DT

FRAMERATE_SAMPLING_FREQUENCY = 0.1
MAX_FRAME_SKIP = 25
MAX_DELTA_TIME = MAX_FRAME_SKIP * DT


class FixedTimestep:
    """Runs ``update`` once per fixed step of elapsed real time.

    Elapsed time per tick is capped so a long stall cannot cause a spiral of
    catch-up updates.
    """

    def __init__(self, update: Callable[[], None], start_time: float = 0.0) -> None:
        self._update = update
        self.previous_time = start_time
        self.accumulator = 0.0
        self.total_time = 0.0
        self.alpha = 0.0
        self.frame = 0
        self.average_fps = 0.0
        self._sample_time = start_time
        self._sample_frame = 0

    def tick(self, current_time: float) -> int:
        """Advance the clock to ``current_time``; return how many updates ran."""
        delta = current_time - self.previous_time

        self.frame += 1
        elapsed_sample = current_time - self._sample_time
        if elapsed_sample >= FRAMERATE_SAMPLING_FREQUENCY:
            self.average_fps = (self.frame - self._sample_frame) / elapsed_sample
            self._sample_frame = self.frame
            self._sample_time = current_time

        delta = min(delta, MAX_DELTA_TIME)
        self.previous_time = current_time
        self.accumulator += delta

        updates = 0
        while self.accumulator >= DT:
            self._update()
            self.accumulator -= DT
            self.total_time += DT
            updates += 1

        self.alpha = self.accumulator / DT
        return updates