"""
Entity World
=============
Owns every live enemy and bullet, keyed by integer entity IDs.

Destruction is deferred: systems mark entities while they scan the live
sets, then call process_dead_entities() once the sweep is over.
"""

from typing import Dict, Iterator, Optional, Set, Tuple

from .components import Bullet, Enemy
from .collision import footprint_contains


class World:
    """
    The World hands out entity IDs and stores enemies and bullets.

    IDs are never reused, so two entities on the same cell can still be
    told apart.
    """

    def __init__(self):
        self._next_entity_id: int = 1
        self.enemies: Dict[int, Enemy] = {}
        self.bullets: Dict[int, Bullet] = {}
        self._dead_entities: Set[int] = set()  # Marked for removal

    def create_entity(self) -> int:
        """Allocate a new entity ID."""
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        return entity_id

    def add_enemy(self, x: int, y: int, glyph: str) -> Enemy:
        enemy = Enemy(self.create_entity(), x, y, glyph)
        self.enemies[enemy.id] = enemy
        return enemy

    def add_bullet(self, x: int, y: int, glyph: str) -> Bullet:
        bullet = Bullet(self.create_entity(), x, y, glyph)
        self.bullets[bullet.id] = bullet
        return bullet

    def destroy_entity(self, entity_id: int) -> None:
        """Mark an entity for destruction (processed after the sweep)."""
        if entity_id not in self.enemies and entity_id not in self.bullets:
            raise KeyError(f'no live entity {entity_id}')
        self._dead_entities.add(entity_id)

    def process_dead_entities(self) -> None:
        """Remove all entities marked for destruction."""
        for entity_id in self._dead_entities:
            if entity_id in self.enemies:
                del self.enemies[entity_id]
            else:
                del self.bullets[entity_id]
        self._dead_entities.clear()

    def query_enemies(self) -> Iterator[Enemy]:
        """Yield live enemies in spawn order. Safe to mark during iteration."""
        for enemy in list(self.enemies.values()):
            if enemy.id not in self._dead_entities:
                yield enemy

    def query_bullets(self) -> Iterator[Bullet]:
        """Yield live bullets in firing order."""
        for bullet in list(self.bullets.values()):
            if bullet.id not in self._dead_entities:
                yield bullet

    def enemy_at(self, pos: Tuple[int, int]) -> Optional[Enemy]:
        """Return the live enemy whose footprint covers `pos`, if any."""
        for enemy in self.query_enemies():
            if footprint_contains(enemy.pos, pos):
                return enemy
        return None
