"""Entities, attributes and the world they live in.

The world is built once when the game starts and is treated as read-only
afterwards. Templates query it through `World.lookup` and
`World.attribute`.
"""

__all__ = [
    "Attribute",
    "Lockable",
    "Closable",
    "Doorlike",
    "Roomlike",
    "Characterlike",
    "Connection",
    "Room",
    "Character",
    "Entity",
    "World",
    "name_path",
]

import logging
from collections.abc import Hashable
from dataclasses import dataclass


logger = logging.getLogger(__name__)


def name_path(name):
    """Convert a dotted script name like `rusty.metal.door` to a name path.

    Args:
        name: (str | Iterable[str]) Dotted name or sequence of words

    Returns:
        (tuple[str]) Name path words
    """
    if isinstance(name, str):
        return tuple(name.split("."))
    return tuple(name)


@dataclass(frozen=True)
class Connection:
    """The two places joined by a door."""

    endpoints: tuple


@dataclass(frozen=True)
class Room:
    """Ids of the entities inside a room."""

    entities: tuple = ()


@dataclass(frozen=True)
class Character:
    """Ids of the entities a character carries."""

    inventory: tuple = ()


class Attribute:
    """Base class for facts and capabilities attached to an entity."""

    __slots__ = ()


@dataclass(frozen=True)
class Lockable(Attribute):
    locked: bool


@dataclass(frozen=True)
class Closable(Attribute):
    closed: bool


@dataclass(frozen=True)
class Doorlike(Attribute):
    connection: Connection


@dataclass(frozen=True)
class Roomlike(Attribute):
    room: Room


@dataclass(frozen=True)
class Characterlike(Attribute):
    character: Character


@dataclass(frozen=True)
class Entity:
    """Uniquely identified object in the world.

    Attributes:
        id: (Hashable) Unique identifier
        name: (tuple[str]) Name path used to refer to the entity in templates
        short_description: (str) Template for the one line description
        long_description: (str) Template for the full description
        attributes: (tuple[Attribute]) Facts about the entity
        alias: (str | None) Human readable alias
    """

    id: Hashable
    name: tuple
    short_description: str = ""
    long_description: str = ""
    attributes: tuple = ()
    alias: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "name", name_path(self.name))
        object.__setattr__(self, "attributes", tuple(self.attributes))
        if not self.name or not all(self.name):
            raise ValueError(f"Entity {self.id} needs a non-empty name path")
        if any("." in word for word in self.name):
            raise ValueError(f"Entity {self.id} name words cannot contain '.'")

    @property
    def script_name(self):
        """(str) Dotted name used to reference the entity in templates."""
        return ".".join(self.name)

    def attribute(self, kind):
        """Find the first attribute of the given class.

        Args:
            kind: (type) Attribute subclass to look for

        Returns:
            (Attribute | None) Matching attribute, None when absent
        """
        for attr in self.attributes:
            if isinstance(attr, kind):
                return attr
        return None


class World:
    """Collection of entities with lookups by id and by name path.

    Args:
        entities: (Iterable[Entity]) Entities in world order
        start_location: (Hashable) Id of the entity where players start
        name: (str) Display name of the world

    Attributes:
        name: (str) Display name of the world
        entities: (tuple[Entity]) Entities in world order
        entity_map: (dict) Maps entity id to position in `entities`
        start_location: (Hashable) Id of the starting entity

    Raises:
        ValueError: For duplicated ids or an unknown start location
    """

    __slots__ = ("name", "entities", "entity_map", "start_location", "_names")

    def __init__(self, entities, start_location, name="World"):
        self.name = name
        self.entities = tuple(entities)
        self.entity_map = {}
        for index, entity in enumerate(self.entities):
            if entity.id in self.entity_map:
                raise ValueError(f"Duplicate entity id: {entity.id}")
            self.entity_map[entity.id] = index
        if start_location not in self.entity_map:
            raise ValueError(f"Unknown start location: {start_location}")
        self.start_location = start_location

        # Duplicated name paths resolve to the first entity in world order
        self._names = {}
        for entity in self.entities:
            first = self._names.setdefault(entity.name, entity.id)
            if first != entity.id:
                logger.warning(
                    "Name %s of entity %s is already used by entity %s",
                    entity.script_name, entity.id, first,
                )

    def __repr__(self):
        return f"World<{self.name}: {len(self.entities)} entities>"

    def entity(self, entity_id):
        """(Entity | None) Entity with the given id."""
        index = self.entity_map.get(entity_id)
        if index is None:
            return None
        return self.entities[index]

    def lookup(self, name):
        """Resolve a name path to an entity id.

        Args:
            name: (str | Iterable[str]) Dotted name or name path words

        Returns:
            (Hashable | None) Id of the first entity with that name path
        """
        return self._names.get(name_path(name))

    def attributes(self, entity_id):
        """(tuple[Attribute]) Attributes of an entity, empty if unknown."""
        entity = self.entity(entity_id)
        if entity is None:
            return ()
        return entity.attributes

    def attribute(self, entity_id, kind):
        """(Attribute | None) First attribute of a kind on an entity."""
        entity = self.entity(entity_id)
        if entity is None:
            return None
        return entity.attribute(kind)
