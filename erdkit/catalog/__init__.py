"""
ERDKIT Catalog Access Layer

This module provides the read interface over catalog hierarchies:
- Capability-flagged catalog objects (containers, folders, entities)
- Name filters for container children
- An in-memory catalog loaded from dictionaries or JSON files
"""

from .base import (
    Capability,
    CatalogObject,
    Association,
    DataSource,
    is_hidden_object,
    STRUCT_ENTITIES,
    STRUCT_ASSOCIATIONS,
    STRUCT_ATTRIBUTES,
    STRUCT_ALL
)
from .filters import ObjectFilter
from .memory import (
    MemoryDataSource,
    MemoryContainer,
    MemoryFolder,
    MemoryTable,
    load_catalog
)

__all__ = [
    'Capability',
    'CatalogObject',
    'Association',
    'DataSource',
    'is_hidden_object',
    'STRUCT_ENTITIES',
    'STRUCT_ASSOCIATIONS',
    'STRUCT_ATTRIBUTES',
    'STRUCT_ALL',
    'ObjectFilter',
    'MemoryDataSource',
    'MemoryContainer',
    'MemoryFolder',
    'MemoryTable',
    'load_catalog'
]
