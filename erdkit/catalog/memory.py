"""
ERDKIT In-Memory Catalog

This module provides an in-memory implementation of the catalog interface:
- Pydantic definitions describing a catalog as nested dictionaries
- Memory objects (data source, containers, folders, tables)
- load_catalog() building a catalog from a dictionary or a JSON file

Catalog access calls are recorded in MemoryDataSource.access_log.
"""

import json
from typing import Any, Dict, FrozenSet, List, Literal, Optional, Tuple, Union
from pathlib import Path

from pydantic import BaseModel, Field

from ..core.exceptions import AccessError
from ..core.logger import Logger
from ..core.models import ObjectType, RelationshipType
from .base import (
    Association, Capability, CatalogObject, DataSource, STRUCT_ALL
)
from .filters import ObjectFilter


NodeKind = Literal[
    "catalog", "schema", "folder", "table", "view", "partition", "collection", "synonym"
]

# Child type a container reports for children of each kind
KIND_TYPES = {
    "catalog": ObjectType.CATALOG,
    "schema": ObjectType.SCHEMA,
    "folder": ObjectType.FOLDER,
    "table": ObjectType.TABLE,
    "view": ObjectType.TABLE,
    "partition": ObjectType.PARTITION,
    "collection": ObjectType.COLLECTION,
    "synonym": ObjectType.SYNONYM,
}


class ForeignKeyDefinition(BaseModel):
    """Reference from a table to another table by qualified name."""
    name: str = Field(..., description="Constraint name")
    references: str = Field(..., description="Qualified name of the referenced table")
    relationship_type: RelationshipType = Field(RelationshipType.ONE_TO_MANY, description="Cardinality")


class CatalogNodeDefinition(BaseModel):
    """One object of the catalog hierarchy."""
    name: str = Field(..., description="Object name")
    type: NodeKind = Field("table", description="Object kind")
    hidden: bool = Field(False, description="Hidden by catalog convention")
    child_type: Optional[ObjectType] = Field(None, description="Declared child type of a container")
    filters: Dict[ObjectType, ObjectFilter] = Field(default_factory=dict, description="Filters for this container")
    foreign_keys: List[ForeignKeyDefinition] = Field(default_factory=list, description="Outgoing references")
    children: List["CatalogNodeDefinition"] = Field(default_factory=list, description="Child objects")


class CatalogDefinition(BaseModel):
    """A whole catalog rooted at a data source."""
    name: str = Field(..., description="Data source name")
    filters: Dict[ObjectType, ObjectFilter] = Field(default_factory=dict, description="Filters by child type")
    children: List[CatalogNodeDefinition] = Field(default_factory=list, description="Top-level objects")


CatalogNodeDefinition.model_rebuild()


class MemoryObject(CatalogObject):
    """Base of the in-memory catalog objects."""

    def __init__(self, name: str, parent: Optional[CatalogObject] = None, hidden: bool = False):
        super().__init__(name, parent)
        self.hidden = hidden
        self.children: List[CatalogObject] = []

    @property
    def is_hidden(self) -> bool:
        return self.hidden

    def add_child(self, child: CatalogObject) -> CatalogObject:
        child.parent = self
        self.children.append(child)
        return child

    def _record(self, operation: str) -> None:
        source = self.data_source
        if source is not None:
            source.access_log.append((operation, self.qualified_name or self.name))


class MemoryContainer(MemoryObject):
    """Catalog or schema listing children of one declared type."""

    def __init__(self, name: str, object_type: ObjectType = ObjectType.SCHEMA,
                 child_type: ObjectType = ObjectType.TABLE,
                 parent: Optional[CatalogObject] = None, hidden: bool = False):
        super().__init__(name, parent, hidden)
        self.object_type = object_type
        self.child_type = child_type
        self.filters: Dict[ObjectType, ObjectFilter] = {}
        self.cached_scope = 0

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return frozenset({Capability.CONTAINER})

    def cache_structure(self, monitor, scope: int = STRUCT_ALL) -> None:
        self._record("cache_structure")
        self.cached_scope |= scope

    def get_children(self, monitor) -> List[CatalogObject]:
        self._record("get_children")
        return list(self.children)

    def get_child_type(self) -> ObjectType:
        return self.child_type


class MemoryFolder(MemoryObject):
    """Untyped grouping folder; lists its children as a folder and as a container."""

    object_type = ObjectType.FOLDER

    def __init__(self, name: str, parent: Optional[CatalogObject] = None, hidden: bool = False):
        super().__init__(name, parent, hidden)
        self.filters: Dict[ObjectType, ObjectFilter] = {}

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return frozenset({Capability.FOLDER, Capability.CONTAINER})

    def get_children_objects(self, monitor) -> List[CatalogObject]:
        self._record("get_children_objects")
        return list(self.children)

    def cache_structure(self, monitor, scope: int = STRUCT_ALL) -> None:
        self._record("cache_structure")

    def get_children(self, monitor) -> List[CatalogObject]:
        self._record("get_children")
        return list(self.children)

    def get_child_type(self) -> ObjectType:
        return ObjectType.FOLDER


class MemoryTable(MemoryObject):
    """
    Data-bearing entity: table, view, partition, collection or synonym.

    A table with partitions is a container of its partitions as well.
    """

    def __init__(self, name: str, object_type: ObjectType = ObjectType.TABLE, view: bool = False,
                 parent: Optional[CatalogObject] = None, hidden: bool = False):
        super().__init__(name, parent, hidden)
        self.object_type = object_type
        self.view = view
        self.foreign_keys: List[ForeignKeyDefinition] = []
        self.filters: Dict[ObjectType, ObjectFilter] = {}

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        if self.children:
            return frozenset({Capability.ENTITY, Capability.CONTAINER})
        return frozenset({Capability.ENTITY})

    def is_view(self) -> bool:
        return self.view

    def cache_structure(self, monitor, scope: int = STRUCT_ALL) -> None:
        self._record("cache_structure")

    def get_children(self, monitor) -> List[CatalogObject]:
        self._record("get_children")
        return list(self.children)

    def get_child_type(self) -> ObjectType:
        return ObjectType.PARTITION

    def get_associations(self, monitor) -> List[Association]:
        """Resolve foreign keys; unknown targets yield associations without a referenced entity."""
        self._record("get_associations")
        source = self.data_source
        associations = []
        for fk in self.foreign_keys:
            target = source.find_object(fk.references) if source is not None else None
            associations.append(Association(fk.name, self, target, fk.relationship_type))
        return associations


class MemoryDataSource(DataSource):
    """Root of an in-memory catalog."""

    def __init__(self, name: str):
        super().__init__(name, None)
        self.children: List[CatalogObject] = []
        self.filters: Dict[ObjectType, ObjectFilter] = {}
        self.access_log: List[Tuple[str, str]] = []

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return frozenset({Capability.CONTAINER})

    def add_child(self, child: CatalogObject) -> CatalogObject:
        child.parent = self
        self.children.append(child)
        return child

    def cache_structure(self, monitor, scope: int = STRUCT_ALL) -> None:
        self.access_log.append(("cache_structure", self.name))

    def get_children(self, monitor) -> List[CatalogObject]:
        self.access_log.append(("get_children", self.name))
        return list(self.children)

    def get_child_type(self) -> ObjectType:
        return infer_child_type([child.object_type for child in self.children], ObjectType.SCHEMA)

    def get_object_filter(self, object_type: ObjectType, container: Optional[CatalogObject],
                          include_view: bool = True) -> Optional[ObjectFilter]:
        """Container-level filter first, then the data source filter. Views share the table filter."""
        if container is not None and container is not self:
            container_filters = getattr(container, "filters", None) or {}
            if object_type in container_filters:
                return container_filters[object_type]
        return self.filters.get(object_type)

    def find_object(self, qualified_name: str) -> Optional[CatalogObject]:
        """Find an object by its dotted path below the data source."""
        for obj in self.iter_objects():
            if obj.qualified_name == qualified_name:
                return obj
        return None

    def iter_objects(self):
        """Walk every object of the catalog without recording access."""
        stack = list(reversed(self.children))
        while stack:
            obj = stack.pop()
            yield obj
            stack.extend(reversed(getattr(obj, "children", [])))

    def clear_access_log(self) -> None:
        self.access_log.clear()


def infer_child_type(child_types: List[ObjectType], default: ObjectType = ObjectType.TABLE) -> ObjectType:
    """Type of the first child that is not a folder; folders only group objects."""
    for child_type in child_types:
        if child_type != ObjectType.FOLDER:
            return child_type
    return default


def _build_node(definition: CatalogNodeDefinition) -> MemoryObject:
    kind = definition.type
    if kind in ("catalog", "schema"):
        child_type = definition.child_type
        if child_type is None:
            child_type = infer_child_type([KIND_TYPES[child.type] for child in definition.children])
        node = MemoryContainer(definition.name, KIND_TYPES[kind], child_type, hidden=definition.hidden)
    elif kind == "folder":
        node = MemoryFolder(definition.name, hidden=definition.hidden)
    else:
        node = MemoryTable(definition.name, KIND_TYPES[kind], view=(kind == "view"), hidden=definition.hidden)
        node.foreign_keys = list(definition.foreign_keys)

    node.filters = dict(definition.filters)
    for child in definition.children:
        node.add_child(_build_node(child))
    return node


def load_catalog(source: Union[Dict[str, Any], str, Path]) -> MemoryDataSource:
    """
    Build an in-memory catalog.

    Args:
        source: Catalog dictionary or path to a JSON file holding one

    Returns:
        MemoryDataSource: Root of the loaded catalog

    Raises:
        AccessError: If the file cannot be read or the definition is invalid
    """
    logger = Logger("memory_catalog")
    try:
        if isinstance(source, (str, Path)):
            with open(source, 'r') as f:
                source = json.load(f)
        definition = CatalogDefinition.model_validate(source)
    except (OSError, ValueError) as e:
        raise AccessError(f"Could not load catalog: {e}") from e

    data_source = MemoryDataSource(definition.name)
    data_source.filters = dict(definition.filters)
    for child in definition.children:
        data_source.add_child(_build_node(child))

    logger.debug(f"Loaded catalog {definition.name} with {len(data_source.children)} top-level objects")
    return data_source
