"""
ERDKIT Diagram Nodes

This module provides the diagram-facing wrappers for catalog entities:
- ERDEntity: one node per entity
- ERDAssociation: directed relation between two nodes
"""

from typing import Any, Dict, List, Mapping, Optional
import logging

from ..catalog.base import Association, CatalogObject
from ..core.models import ObjectType, RelationshipType
from ..core.runtime import ProgressMonitor

logger = logging.getLogger(__name__)

# Entity kinds a diagram can draw
SUPPORTED_OBJECT_TYPES = frozenset({
    ObjectType.TABLE,
    ObjectType.PARTITION,
    ObjectType.COLLECTION
})


class ERDAssociation:
    """
    Directed relation from a referencing node to a referenced node.

    The relation is always registered on the source node. With reflect=True it
    is also registered in the target node's references.
    """

    def __init__(self, association: Association, source_entity: "ERDEntity",
                 target_entity: "ERDEntity", reflect: bool = False):
        self.object = association
        self.source_entity = source_entity
        self.target_entity = target_entity

        source_entity.add_association(self)
        if reflect:
            target_entity.add_reference(self)

    @property
    def name(self) -> str:
        return self.object.name

    @property
    def relationship_type(self) -> RelationshipType:
        return self.object.relationship_type

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": f"rel_{self.source_entity.id}_{self.target_entity.id}_{self.name}",
            "name": self.name,
            "from_entity": self.source_entity.id,
            "to_entity": self.target_entity.id,
            "type": self.relationship_type.value
        }

    def __repr__(self) -> str:
        return f"<ERDAssociation {self.name}: {self.source_entity.name} -> {self.target_entity.name}>"


class ERDEntity:
    """
    Diagram node wrapping one catalog entity.
    """

    def __init__(self, entity: CatalogObject, diagram: Optional[Any] = None):
        self.object = entity
        self.diagram = diagram
        self.associations: List[ERDAssociation] = []
        self.references: List[ERDAssociation] = []

    @classmethod
    def from_object(cls, monitor: ProgressMonitor, diagram: Any,
                    entity: CatalogObject) -> Optional["ERDEntity"]:
        """
        Build a node for an entity.

        Args:
            monitor (ProgressMonitor): Cancellation handle
            diagram: Diagram the node belongs to
            entity (CatalogObject): Entity to wrap

        Returns:
            Optional[ERDEntity]: The node, or None if the entity cannot be drawn
        """
        try:
            if not entity.is_entity():
                logger.debug(f"Skipping {entity.name}: not an entity")
                return None
            if entity.object_type not in SUPPORTED_OBJECT_TYPES:
                logger.debug(f"Skipping {entity.name}: unsupported type {entity.object_type}")
                return None
            return cls(entity, diagram)
        except Exception as e:
            logger.warning(f"Could not create diagram entity for {getattr(entity, 'name', entity)}: {e}")
            return None

    @property
    def name(self) -> str:
        return self.object.name

    @property
    def id(self) -> str:
        return f"entity_{self.object.qualified_name or self.object.name}"

    def add_association(self, association: ERDAssociation) -> None:
        self.associations.append(association)

    def add_reference(self, association: ERDAssociation) -> None:
        self.references.append(association)

    def has_association(self, name: str, target: "ERDEntity") -> bool:
        return any(a.name == name and a.target_entity is target for a in self.associations)

    def add_relations(self, monitor: ProgressMonitor, table_map: Mapping[CatalogObject, "ERDEntity"],
                      reflect: bool = False) -> int:
        """
        Resolve the entity's associations against the nodes of a diagram.

        References to entities missing from the map are dropped. Associations
        already recorded on this node are not added twice.

        Args:
            monitor (ProgressMonitor): Cancellation handle
            table_map (Mapping): Entity to node map of the whole diagram
            reflect (bool): Also register each relation on the referenced node

        Returns:
            int: Number of relations added
        """
        added = 0
        for association in self.object.get_associations(monitor):
            if monitor.is_canceled():
                break
            if association.referenced_entity is None:
                continue
            target = table_map.get(association.referenced_entity)
            if target is None:
                continue
            if self.has_association(association.name, target):
                continue
            ERDAssociation(association, self, target, reflect)
            added += 1
        return added

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.object.object_type.value,
            "is_view": self.object.is_view(),
            "associations": [a.name for a in self.associations]
        }

    def __repr__(self) -> str:
        return f"<ERDEntity {self.name}>"
