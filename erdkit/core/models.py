"""
ERDKIT Data Models

This module provides shared enums and Pydantic models:
- Catalog object type tags
- Relationship types
- Collection run statistics
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from enum import Enum


class ObjectType(str, Enum):
    """Catalog object type tags."""
    DATA_SOURCE = "data_source"
    CATALOG = "catalog"
    SCHEMA = "schema"
    FOLDER = "folder"
    TABLE = "table"
    PARTITION = "partition"
    COLLECTION = "collection"
    SYNONYM = "synonym"


# Object types that carry the table/view distinction
TABLE_TYPES = frozenset({ObjectType.TABLE, ObjectType.PARTITION})


class RelationshipType(str, Enum):
    """Relationship types."""
    ONE_TO_ONE = "one_to_one"
    ONE_TO_MANY = "one_to_many"
    MANY_TO_MANY = "many_to_many"


class CollectionSummary(BaseModel):
    """Statistics of one diagram collection run."""
    diagram: str = Field(..., description="Diagram name")
    roots: List[str] = Field(default_factory=list, description="Root object names")
    entities_collected: int = Field(0, description="Entities found by traversal")
    entities_added: int = Field(0, description="Diagram nodes created")
    skipped_existing: int = Field(0, description="Entities already on the diagram")
    skipped_hidden: int = Field(0, description="Hidden entities")
    skipped_views: int = Field(0, description="Views suppressed by configuration")
    declined: int = Field(0, description="Entities the diagram cannot represent")
    relations_added: int = Field(0, description="Relations resolved among nodes")
    canceled: bool = Field(False, description="Whether the run was canceled")
    started_at: datetime = Field(default_factory=datetime.now, description="Run start")
    finished_at: Optional[datetime] = Field(None, description="Run end")
