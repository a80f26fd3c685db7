"""Placement of sprites packed into a texture atlas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .common import Rectangle, Reflection, Vector2


@dataclass(frozen=True)
class AtlasEntry:
    """One sprite in the atlas.

    ``source`` is where the trimmed image sat within the untrimmed frame;
    ``destination`` is where it sits in the atlas texture.
    """

    untrimmed_width: int
    untrimmed_height: int
    source: Rectangle
    destination: Rectangle


@dataclass
class Atlas:
    """A collection of atlas entries, indexed by sprite."""

    entries: Sequence[AtlasEntry]

    def placement(
        self,
        sprite: int,
        position: Vector2,
        scale: Vector2,
        intramural: Rectangle,
        reflection: Reflection,
    ) -> tuple[Rectangle, Rectangle]:
        """Return the texture region to read and the screen rectangle to draw into.

        A reflected axis gives the texture region a negative extent on that axis.
        """
        entry = self.entries[sprite]
        x, y = position.x, position.y
        region = entry.destination
        width, height = region.width, region.height

        if not reflection & Reflection.REVERSE_X_AXIS:
            x += entry.source.x - intramural.x
        else:
            x += entry.untrimmed_width - entry.source.right
            x -= entry.untrimmed_width - intramural.right
            width = -width

        if not reflection & Reflection.REVERSE_Y_AXIS:
            y += entry.source.y - intramural.y
        else:
            y += entry.untrimmed_height - entry.source.bottom
            y -= entry.untrimmed_height - intramural.bottom
            height = -height

        texture_region = Rectangle(region.x, region.y, width, height)
        destination = Rectangle(
            x,
            y,
            entry.destination.width * scale.x,
            entry.destination.height * scale.y,
        )
        return texture_region, destination