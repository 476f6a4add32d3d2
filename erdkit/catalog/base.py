"""
ERDKIT Catalog Interface

This module defines the narrow read interface the collector consumes:
- Capability flags describing what a catalog object can do
- CatalogObject with container, folder and entity operations
- Association between entities
- DataSource providing name filters for container children
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import FrozenSet, List, Optional

from ..core.models import ObjectType, RelationshipType
from .filters import ObjectFilter

# Structure caching scopes
STRUCT_ENTITIES = 1
STRUCT_ASSOCIATIONS = 2
STRUCT_ATTRIBUTES = 4
STRUCT_ALL = STRUCT_ENTITIES | STRUCT_ASSOCIATIONS | STRUCT_ATTRIBUTES


class Capability(str, Enum):
    """Independent capabilities of a catalog object."""
    FOLDER = "folder"
    CONTAINER = "container"
    ENTITY = "entity"


class CatalogObject(ABC):
    """
    Any named object of a catalog hierarchy.

    An object may combine capabilities (an entity can also be a container).
    Operations of a capability the object does not have raise NotImplementedError.
    Objects compare and hash by identity.
    """

    object_type: ObjectType = ObjectType.FOLDER

    def __init__(self, name: str, parent: Optional["CatalogObject"] = None):
        self.name = name
        self.parent = parent

    @property
    @abstractmethod
    def capabilities(self) -> FrozenSet[Capability]:
        """Capabilities of this object."""

    def has_capability(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def is_folder(self) -> bool:
        return self.has_capability(Capability.FOLDER)

    def is_container(self) -> bool:
        return self.has_capability(Capability.CONTAINER)

    def is_entity(self) -> bool:
        return self.has_capability(Capability.ENTITY)

    @property
    def is_hidden(self) -> bool:
        return False

    def is_view(self) -> bool:
        return False

    @property
    def data_source(self) -> Optional["DataSource"]:
        """Nearest DataSource up the parent chain."""
        node = self
        while node is not None:
            if isinstance(node, DataSource):
                return node
            node = node.parent
        return None

    @property
    def qualified_name(self) -> str:
        """Dotted path of names below the data source."""
        names = []
        node = self
        while node is not None and not isinstance(node, DataSource):
            names.append(node.name)
            node = node.parent
        return ".".join(reversed(names))

    # Folder operations

    def get_children_objects(self, monitor) -> List["CatalogObject"]:
        raise NotImplementedError(f"{self.name} is not a folder")

    # Container operations

    def cache_structure(self, monitor, scope: int = STRUCT_ALL) -> None:
        raise NotImplementedError(f"{self.name} is not a container")

    def get_children(self, monitor) -> List["CatalogObject"]:
        raise NotImplementedError(f"{self.name} is not a container")

    def get_child_type(self) -> ObjectType:
        raise NotImplementedError(f"{self.name} is not a container")

    # Entity operations

    def get_associations(self, monitor) -> List["Association"]:
        raise NotImplementedError(f"{self.name} is not an entity")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.qualified_name or self.name}>"


class Association:
    """Reference from one entity to another (e.g. a foreign key)."""

    def __init__(self, name: str, source: CatalogObject,
                 referenced_entity: Optional[CatalogObject],
                 relationship_type: RelationshipType = RelationshipType.ONE_TO_MANY):
        self.name = name
        self.source = source
        self.referenced_entity = referenced_entity
        self.relationship_type = relationship_type

    def __repr__(self) -> str:
        target = self.referenced_entity.name if self.referenced_entity is not None else None
        return f"<Association {self.name}: {self.source.name} -> {target}>"


class DataSource(CatalogObject):
    """Root of a catalog; owns the navigator filters of its containers."""

    object_type = ObjectType.DATA_SOURCE

    @abstractmethod
    def get_object_filter(self, object_type: ObjectType, container: Optional[CatalogObject],
                          include_view: bool = True) -> Optional[ObjectFilter]:
        """
        Get the name filter for children of the given type.

        Args:
            object_type: Child type of the container
            container: Container whose children are filtered
            include_view: Whether filters defined for views apply as well

        Returns:
            ObjectFilter or None when nothing is filtered
        """


def is_hidden_object(obj: CatalogObject) -> bool:
    """Whether the object is hidden by catalog convention."""
    return bool(getattr(obj, "is_hidden", False))
