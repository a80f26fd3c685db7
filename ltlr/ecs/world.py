"""Entity storage: tag sets, component tables and deferred changes."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from .components import EntityType, Tag

_STORES = (
    "identifiers",
    "positions",
    "dimensions",
    "colors",
    "sprites",
    "animations",
    "kinetics",
    "smooths",
    "colliders",
    "mortals",
    "damages",
    "fleetings",
    "players",
)


class _Command(Enum):
    DEALLOCATE = 0
    ENABLE_TAG = 1
    DISABLE_TAG = 2


@dataclass(frozen=True)
class _Deferred:
    command: _Command
    entity: int
    tag: Tag = Tag.NONE


class World:
    """Holds every entity's tags and components.

    Changes that would disturb iteration (removing entities, toggling tags) are
    queued and applied by :meth:`flush`.
    """

    def __init__(self) -> None:
        self.tags: list[Tag] = []
        self.identifiers: dict[int, Any] = {}
        self.positions: dict[int, Any] = {}
        self.dimensions: dict[int, Any] = {}
        self.colors: dict[int, Any] = {}
        self.sprites: dict[int, Any] = {}
        self.animations: dict[int, Any] = {}
        self.kinetics: dict[int, Any] = {}
        self.smooths: dict[int, Any] = {}
        self.colliders: dict[int, Any] = {}
        self.mortals: dict[int, Any] = {}
        self.damages: dict[int, Any] = {}
        self.fleetings: dict[int, Any] = {}
        self.players: dict[int, Any] = {}
        self.elapsed_time = 0.0
        self._free: list[int] = []
        self._pending: list[_Deferred] = []

    def __len__(self) -> int:
        return len(self.tags) - len(self._free)

    def allocate_entity(self) -> int:
        """Reserve an entity with no tags; freed slots are reused lowest first."""
        if self._free:
            entity = heapq.heappop(self._free)
            self.tags[entity] = Tag.NONE
            return entity
        self.tags.append(Tag.NONE)
        return len(self.tags) - 1

    def _check(self, entity: int) -> None:
        if not 0 <= entity < len(self.tags):
            raise IndexError(f"no such entity: {entity}")

    def has(self, entity: int, tags: Tag) -> bool:
        """Whether the entity carries every one of ``tags``."""
        self._check(entity)
        return self.tags[entity] & tags == tags

    def is_type(self, entity: int, entity_type: EntityType) -> bool:
        """Whether the entity is identified as ``entity_type``."""
        if not self.has(entity, Tag.IDENTIFIER):
            return False
        return self.identifiers[entity].type == entity_type

    def entities(self) -> Iterator[int]:
        """Yield every allocated entity in ascending order."""
        free = set(self._free)
        yield from (entity for entity in range(len(self.tags)) if entity not in free)

    def defer_deallocate(self, entity: int) -> None:
        self._check(entity)
        self._pending.append(_Deferred(_Command.DEALLOCATE, entity))

    def defer_enable_tag(self, entity: int, tag: Tag) -> None:
        self._check(entity)
        self._pending.append(_Deferred(_Command.ENABLE_TAG, entity, tag))

    def defer_disable_tag(self, entity: int, tag: Tag) -> None:
        self._check(entity)
        self._pending.append(_Deferred(_Command.DISABLE_TAG, entity, tag))

    def _deallocate(self, entity: int) -> None:
        self.tags[entity] = Tag.NONE
        for store in _STORES:
            getattr(self, store).pop(entity, None)
        heapq.heappush(self._free, entity)

    def flush(self) -> None:
        """Apply every queued change in the order it was requested."""
        pending, self._pending = self._pending, []
        for item in pending:
            if item.entity in self._free:
                continue
            if item.command is _Command.DEALLOCATE:
                self._deallocate(item.entity)
            elif item.command is _Command.ENABLE_TAG:
                self.tags[item.entity] |= item.tag
            else:
                self.tags[item.entity] &= ~item.tag