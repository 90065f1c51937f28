"""
Live entity set with deferred removal.

Entities are kept in a dense list in insertion order. Removal requests made
during a tick only mark the entity; the list is compacted at the tick
boundary by apply_removals(), so loops over the live set never see it
change under them.
"""

from typing import Iterator, List, Set

from invaders.entities.base import Entity
from invaders.logging import get_logger

log = get_logger('world')


class EntityWorld:
    """Owns the live entities of a session.

    Examples:
        >>> world = EntityWorld()
        >>> world.add(ship)
        >>> world.remove(ship)      # marked, still listed
        >>> ship in world.entities
        True
        >>> world.apply_removals()
        1
        >>> ship in world.entities
        False
    """

    def __init__(self):
        self._entities: List[Entity] = []
        self._pending_removal: Set[int] = set()

    @property
    def entities(self) -> List[Entity]:
        """Snapshot of the live entities, including ones pending removal."""
        return list(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.entities)

    def add(self, entity: Entity) -> None:
        """Add an entity; it takes part from the next loop over the set."""
        if not isinstance(entity, Entity):
            raise TypeError(
                f"entity must be an instance of Entity, got {type(entity).__name__}"
            )
        self._entities.append(entity)

    def remove(self, entity: Entity) -> None:
        """Request removal of an entity at the next tick boundary.

        Removing an entity twice, or one that is not live, does nothing.
        """
        if any(e is entity for e in self._entities):
            self._pending_removal.add(id(entity))

    def is_pending_removal(self, entity: Entity) -> bool:
        return id(entity) in self._pending_removal

    def apply_removals(self) -> int:
        """Drop every entity marked for removal.

        Returns:
            Number of entities removed
        """
        if not self._pending_removal:
            return 0

        before = len(self._entities)
        self._entities = [e for e in self._entities if id(e) not in self._pending_removal]
        self._pending_removal.clear()

        removed = before - len(self._entities)
        log.trace("Removed %d entities, %d live", removed, len(self._entities))
        return removed

    def clear(self) -> None:
        """Drop all entities immediately (used between sessions)."""
        self._entities.clear()
        self._pending_removal.clear()
