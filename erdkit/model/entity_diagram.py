"""
ERDKIT Entity Diagram

This module provides the persistent diagram state shared by collection runs:
- Ordered list of diagram nodes
- Entity to node map used for deduplication and relation lookup
"""

from typing import Any, Dict, Iterable, List, Optional
from datetime import datetime

from ..catalog.base import CatalogObject
from .erd_entity import ERDAssociation, ERDEntity


class EntityDiagram:
    """
    Entity relationship diagram.

    Collection runs read a copy of the table map and publish new nodes back
    through add_entities(). Runs against one diagram must not overlap.
    """

    def __init__(self, name: str = "diagram"):
        """Initialize an empty diagram."""
        self.name = name
        self.entities: List[ERDEntity] = []
        self._table_map: Dict[CatalogObject, ERDEntity] = {}

    def get_table_map(self) -> Dict[CatalogObject, ERDEntity]:
        """Get a copy of the entity to node map."""
        return dict(self._table_map)

    def contains_table(self, entity: CatalogObject) -> bool:
        return entity in self._table_map

    def get_entity(self, entity: CatalogObject) -> Optional[ERDEntity]:
        return self._table_map.get(entity)

    def add_entity(self, erd_entity: ERDEntity) -> bool:
        """Add a node; returns False if its entity is already on the diagram."""
        if erd_entity.object in self._table_map:
            return False
        erd_entity.diagram = self
        self.entities.append(erd_entity)
        self._table_map[erd_entity.object] = erd_entity
        return True

    def add_entities(self, erd_entities: Iterable[ERDEntity]) -> int:
        """Add nodes in order; returns how many were new."""
        return sum(1 for erd_entity in erd_entities if self.add_entity(erd_entity))

    def get_relations(self) -> List[ERDAssociation]:
        relations = []
        for erd_entity in self.entities:
            relations.extend(erd_entity.associations)
        return relations

    def to_dict(self) -> Dict[str, Any]:
        """
        Export the diagram as a JSON-serializable structure.

        Returns:
            Dict[str, Any]: Entities, relationships and metadata
        """
        entities = [erd_entity.to_dict() for erd_entity in self.entities]
        relationships = [relation.to_dict() for relation in self.get_relations()]
        return {
            "diagram": self.name,
            "entities": entities,
            "relationships": relationships,
            "metadata": {
                "generated_at": datetime.now().isoformat(),
                "total_entities": len(entities),
                "total_relationships": len(relationships)
            }
        }
