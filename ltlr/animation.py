"""Animation identifiers with their frame counts and frame durations."""

from __future__ import annotations

from enum import IntEnum


class Animation(IntEnum):
    PLAYER_STILL = 0
    PLAYER_RUN = 1
    PLAYER_JUMP = 2
    PLAYER_SPIN = 3
    WALKER_IDLE = 4

    @property
    def length(self) -> int:
        """Number of frames in the animation."""
        return _SPECS[self][0]

    @property
    def frame_duration(self) -> float:
        """Seconds each frame is shown."""
        return _SPECS[self][1]


_SPECS: dict[Animation, tuple[int, float]] = {
    Animation.PLAYER_STILL: (1, 0.0),
    Animation.PLAYER_RUN: (4, 0.18),
    Animation.PLAYER_JUMP: (5, 0.075),
    Animation.PLAYER_SPIN: (13, 0.1),
    Animation.WALKER_IDLE: (4, 0.2),
}