"""Entities and the configuration root."""

from __future__ import annotations

from collections import deque

from confslice.model.keys import Key


class _Scope:
    """Owner of an ordered set of keys and an ordered set of child entities.

    Ids are unique per member type within one scope. Adding a member whose
    id is already taken is a no-op that returns ``False``; the rejected
    member stays with the caller.
    """

    __slots__ = ("_keys", "_entities")

    def __init__(self) -> None:
        self._keys: deque[Key] = deque()
        self._entities: deque[Entity] = deque()

    def add_key(self, key: Key) -> bool:
        if self.find_key(key.id) is not None:
            return False
        self._keys.append(key)
        return True

    def add_entity(self, entity: Entity) -> bool:
        if self.find_entity(entity.id) is not None:
            return False
        self._entities.append(entity)
        return True

    def find_key(self, key_id: str) -> Key | None:
        for key in self._keys:
            if key.id == key_id:
                return key
        return None

    def find_entity(self, entity_id: str) -> Entity | None:
        for entity in self._entities:
            if entity.id == entity_id:
                return entity
        return None

    def drain_next_key(self) -> Key | None:
        """Remove and return the oldest key, or ``None`` once empty."""
        return self._keys.popleft() if self._keys else None

    def drain_next_entity(self) -> Entity | None:
        """Remove and return the oldest child entity, or ``None`` once empty."""
        return self._entities.popleft() if self._entities else None

    def clear_keys(self) -> None:
        self._keys.clear()

    def clear_entities(self) -> None:
        self._entities.clear()

    def size_of_keys(self) -> int:
        return len(self._keys)

    def size_of_entities(self) -> int:
        return len(self._entities)

    def key_ids(self) -> list[str]:
        return [key.id for key in self._keys]

    def entity_ids(self) -> list[str]:
        return [entity.id for entity in self._entities]


class Entity(_Scope):
    """Named scope nested in the configuration or in another entity."""

    __slots__ = ("_id",)

    def __init__(self, entity_id: str = "") -> None:
        super().__init__()
        self._id = entity_id

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, entity_id: str) -> None:
        self._id = entity_id

    def __repr__(self) -> str:
        return f"Entity(id={self._id!r}, keys={self.key_ids()!r}, entities={self.entity_ids()!r})"


class Configuration(_Scope):
    """Parse root: top-level keys and depth-1 entities, with no id of its own."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Configuration(keys={self.key_ids()!r}, entities={self.entity_ids()!r})"


__all__ = ["Configuration", "Entity"]
