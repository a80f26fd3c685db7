"""A full-screen fade in or out over one second."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from .common import COLOR_BLACK, Color
from .context import DT
from .easing import Easer, ease_linear


class FadeType(Enum):
    FADE_IN = 0
    FADE_OUT = 1


def _lerp(start: float, end: float, amount: float) -> float:
    return start + amount * (end - start)


@dataclass
class Fader:
    """Eases the opacity of a coloured overlay, one fixed step per update."""

    easer: Easer = field(default_factory=lambda: Easer(ease_linear, DT * 60))
    tint: Color = COLOR_BLACK
    previous: float = 0.0
    current: float = 0.0
    fade_type: FadeType = FadeType.FADE_IN

    def is_done(self) -> bool:
        return self.easer.is_done()

    def reset(self) -> None:
        self.easer.reset()
        self.previous = 0.0
        self.current = 0.0

    def update(self) -> None:
        self.easer.update(DT)
        self.previous = self.current
        self.current = self.easer.value

    def color(self, alpha: float) -> Color:
        """Overlay colour, interpolated between the last two updates by ``alpha``."""
        value = _lerp(self.previous, self.current, alpha)
        fading_in = self.fade_type is FadeType.FADE_IN
        start = 1.0 if fading_in else 0.0
        end = 0.0 if fading_in else 1.0
        opacity = _lerp(start, end, value)
        return Color(
            math.floor(self.tint.r * opacity),
            math.floor(self.tint.g * opacity),
            math.floor(self.tint.b * opacity),
            math.floor(self.tint.a * opacity),
        )