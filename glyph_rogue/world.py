"""World container: map tiles, entities and the player handle.

The world is owned by the single frame-loop driver; nothing else reads or
writes it concurrently.

Design notes:

* ``tiles`` is a persistent vector (``pyrsistent.PVector``). Its order is the
  draw order. Regenerating the map swaps the whole vector.
* ``entities`` is an insertion-ordered mapping keyed by ``EntityID``; its order
  is the entity draw order (later entries draw on top).
* ``player_id`` is a handle rather than a list index, so reordering or removing
  other entities never invalidates it. Every mutation that could break the
  handle validates it.
"""

from typing import Dict, Iterable, Iterator, Tuple

from pyrsistent import PVector, pvector

from glyph_rogue.entity import Entity, Tile, new_entity_id
from glyph_rogue.types import EntityID, Vector


class World:
    """Tiles, entities and the designated player.

    Attributes:
        size: Map size in tiles.
        tiles: Map tiles in draw order.
        entities: Entities keyed by id, in draw order.
        player_id: Handle of the player entity; always present in ``entities``.
    """

    size: Vector
    tiles: PVector[Tile]
    entities: Dict[EntityID, Entity]
    player_id: EntityID

    def __init__(
        self,
        size: Vector,
        tiles: Iterable[Tile],
        entities: Iterable[Tuple[EntityID, Entity]],
        player_id: EntityID,
    ):
        self.size = size
        self.tiles = pvector(tiles)
        self.entities = dict(entities)
        self.player_id = player_id
        self._check_player(player_id)

    @classmethod
    def create(
        cls, size: Vector, tiles: Iterable[Tile], others: Iterable[Entity], player: Entity
    ) -> "World":
        """Build a world allocating fresh ids; the player is appended last."""
        entities = [(new_entity_id(), entity) for entity in others]
        player_id = new_entity_id()
        entities.append((player_id, player))
        return cls(size, tiles, entities, player_id)

    @property
    def player(self) -> Entity:
        return self.entities[self.player_id]

    def iter_entities(self) -> Iterator[Entity]:
        return iter(self.entities.values())

    def add_entity(self, entity: Entity) -> EntityID:
        eid = new_entity_id()
        self.entities[eid] = entity
        return eid

    def remove_entity(self, eid: EntityID) -> Entity:
        """Remove a non-player entity; removing the player is rejected."""
        if eid == self.player_id:
            raise ValueError("Cannot remove the player entity; call set_player first")
        return self.entities.pop(eid)

    def set_player(self, eid: EntityID) -> None:
        self._check_player(eid)
        self.player_id = eid

    def replace_map(self, tiles: Iterable[Tile]) -> None:
        """Swap in a freshly generated map."""
        self.tiles = pvector(tiles)

    def _check_player(self, eid: EntityID) -> None:
        if eid not in self.entities:
            raise KeyError(f"Player handle {eid} does not resolve to an entity")
