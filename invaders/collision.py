"""
Pairwise collision sweep.

Every unordered pair of live entities is tested once per tick. Both members
of an overlapping pair are told about the other, so each side can react
with its own policy. The pairing stage is separate from resolution so a
spatial partition can replace it for large entity counts.
"""

from itertools import combinations
from typing import Iterable, Iterator, List, Sequence, Tuple

from invaders.entities.base import Entity
from invaders.logging import get_logger

log = get_logger('collision')


class CollisionEngine:
    """Tests entity pairs for overlap and dispatches collided_with()."""

    def candidate_pairs(self, entities: Sequence[Entity]) -> Iterator[Tuple[Entity, Entity]]:
        """Yield every unordered pair once. O(n^2) in the entity count."""
        return combinations(entities, 2)

    def find_collisions(self, entities: Iterable[Entity]) -> List[Tuple[Entity, Entity]]:
        """Return the overlapping pairs without resolving them."""
        snapshot = list(entities)
        return [(a, b) for a, b in self.candidate_pairs(snapshot) if a.collides_with(b)]

    def sweep(self, entities: Iterable[Entity]) -> int:
        """Resolve all collisions among a fixed snapshot of entities.

        Removals requested by handlers are expected to be deferred by the
        entity owner; the snapshot taken here is never modified.

        Args:
            entities: Live entities for this tick

        Returns:
            Number of colliding pairs found
        """
        snapshot = list(entities)
        hits = 0

        for me, him in self.candidate_pairs(snapshot):
            if me.collides_with(him):
                me.collided_with(him)
                him.collided_with(me)
                hits += 1
                log.trace("Collision %r <-> %r", me, him)

        return hits
